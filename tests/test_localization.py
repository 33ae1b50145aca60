import pytest

from localization import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    TRANSLATIONS,
    detect_user_language,
    get_language,
    language_name,
    speech_locale,
    translate,
)


def test_translate_uses_selected_language():
    assert translate("sidebar.language", "es") == TRANSLATIONS["es"]["sidebar.language"]


def test_translate_falls_back_to_english():
    missing = next(key for key in TRANSLATIONS["en"] if key not in TRANSLATIONS["ja"])
    assert translate(missing, "ja") == TRANSLATIONS["en"][missing]


def test_translate_falls_back_to_key():
    assert translate("no.such.key", "fr") == "no.such.key"


def test_translate_unknown_language_uses_english():
    assert translate("app.title", "xx") == TRANSLATIONS["en"]["app.title"]


def test_every_translated_key_exists_in_english():
    english = set(TRANSLATIONS["en"])
    for code, table in TRANSLATIONS.items():
        assert set(table) <= english, code


def test_every_supported_language_has_a_table():
    assert {lang.code for lang in SUPPORTED_LANGUAGES} == set(TRANSLATIONS)


def test_language_lookup_defaults_to_english():
    assert get_language("zz").code == DEFAULT_LANGUAGE
    assert language_name("de") == "German"
    assert speech_locale("pt") == "pt-BR"


@pytest.mark.parametrize("header, expected", [
    ("fr-FR,fr;q=0.9,en;q=0.8", "fr"),
    ("en-US;q=0.5,ja;q=0.9", "ja"),
    ("zh-CN,de;q=0.7", "de"),
    ("zh-CN", "en"),
    ("", "en"),
    (None, "en"),
    ("es;q=abc,pt", "pt"),
    ("de;q=0", "en"),
    ("de;q=0,fr;q=0.5", "fr"),
    ("ja;q=0.0,en-GB;q=0.1", "en"),
])
def test_detect_user_language(header, expected):
    assert detect_user_language(header) == expected
