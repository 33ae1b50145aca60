"""Smoke tests for pages that need no API keys."""
from streamlit.testing.v1 import AppTest

from content import TEMPLATES, TIMELINE

TIMEOUT = 30


def _run(page):
    at = AppTest.from_file(f"../pages/{page}", default_timeout=TIMEOUT)
    at.run()
    assert not at.exception
    return at


def _buttons(at, prefix):
    return [button for button in at.button if (button.key or "").startswith(prefix)]


def test_about_lists_timeline():
    at = _run("18_About.py")
    assert len(at.expander) == len(TIMELINE)
    assert at.expander[0].label.endswith("1986: Computer Fraud and Abuse Act (CFAA)")


def test_templates_list_and_filter():
    at = _run("10_Templates.py")
    assert len(_buttons(at, "view_template_")) == len(TEMPLATES)

    at.radio(key="template_category").set_value("Intellectual Property").run()
    assert len(_buttons(at, "view_template_")) == 2

    at.radio(key="template_category").set_value("Data Privacy").run()
    assert len(_buttons(at, "view_template_")) == 3


def test_template_detail_and_back():
    at = _run("10_Templates.py")
    at.button(key="view_template_3").click().run()
    assert at.session_state["selected_template"] == 3
    assert "MUTUAL NON-DISCLOSURE AGREEMENT" in at.code[0].value.upper()

    at.button(key="template_back").click().run()
    assert len(_buttons(at, "view_template_")) == len(TEMPLATES)


def test_ai_labs_buttons_are_disabled():
    at = _run("17_AI_Labs.py")
    assert at.button
    assert all(button.disabled for button in at.button)


def test_expert_directory_filters_by_location():
    at = _run("16_Expert_Directory.py")
    assert len(_buttons(at, "contact_")) == 4

    at.text_input[0].input("Paris").run()
    assert len(_buttons(at, "contact_")) == 1

    at.text_input[0].input("Atlantis").run()
    assert not _buttons(at, "contact_")
    assert at.info


def test_language_selector_switches_language():
    at = _run("18_About.py")
    at.selectbox(key="language_select").set_value("fr").run()
    assert at.session_state["language"] == "fr"
    assert at.selectbox(key="language_select").value == "fr"


def test_theme_toggle_switches_mode():
    at = _run("18_About.py")
    at.toggle(key="theme_mode_toggle").set_value(True).run()
    assert at.session_state["theme_mode"] == "alternate"
