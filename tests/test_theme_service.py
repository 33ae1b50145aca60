import pytest

from theme_service import THEMES, detect_theme, palette_variables, theme_css, toggle_mode


@pytest.mark.parametrize("timezone, theme", [
    ("America/New_York", "north_america"),
    ("America/Los_Angeles", "north_america"),
    ("Europe/Berlin", "europe"),
    ("Europe/London", "europe"),
    ("Asia/Kolkata", "asia"),
    ("America/Sao_Paulo", "south_america"),
    ("America/Argentina/Buenos_Aires", "south_america"),
    ("Australia/Sydney", "default"),
    ("", "default"),
    (None, "default"),
])
def test_detect_theme(timezone, theme):
    assert detect_theme(timezone) == THEMES[theme]


def test_toggle_mode_flips_between_palettes():
    assert toggle_mode("default") == "alternate"
    assert toggle_mode("alternate") == "default"


def test_palette_variables_cover_all_steps():
    variables = palette_variables("alternate")
    assert variables["--slate-900"] == "9 9 11"
    assert len(variables) == 10


def test_unknown_mode_uses_default_palette():
    assert palette_variables("sepia") == palette_variables("default")


def test_theme_css_sets_accent_variables():
    css = theme_css(THEMES["europe"], "alternate")
    assert "--primary-color: #34d399;" in css
    assert "--slate-900: 9 9 11;" in css
    assert css.strip().startswith("<style>")
