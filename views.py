"""
View router and page shell.

Streamlit owns navigation between page scripts; this module keeps the mapping of
view keys to pages, the active view in session state, and the chrome every page
shares (theme CSS, language selector, footer).
"""
from dataclasses import dataclass
from datetime import date
from functools import partial

import streamlit as st

from client_context import browser_timezone, request_header
from localization import SUPPORTED_LANGUAGES, detect_user_language, translate
from theme_service import detect_theme, theme_css, toggle_mode


@dataclass(frozen=True)
class View:
    page: str
    icon: str
    title_key: str

    @property
    def description_key(self):
        return f"{self.title_key}.desc"


ACTIVE_VIEWS = {
    "home": View("main.py", "🛡️", "tool.home"),
    "analyzer": View("pages/1_Document_Analyzer.py", "📄", "tool.analyzer"),
    "summarizer": View("pages/2_News_Summarizer.py", "📰", "tool.summarizer"),
    "copilot": View("pages/3_Legal_Copilot.py", "🧭", "tool.copilot"),
    "casedna": View("pages/4_Case_DNA_Analyzer.py", "🧬", "tool.casedna"),
    "riskmeter": View("pages/5_Cyber_Risk_Meter.py", "📟", "tool.riskmeter"),
    "predictor": View("pages/6_Precedent_Predictor.py", "⚖️", "tool.predictor"),
    "sentry": View("pages/7_Smart_Contract_Sentry.py", "🔐", "tool.sentry"),
    "knowledgehub": View("pages/8_Knowledge_Hub.py", "🌐", "tool.knowledge"),
    "insights": View("pages/9_Cyber_Law_Insights.py", "💡", "tool.insights"),
    "templates": View("pages/10_Templates.py", "✍️", "tool.templates"),
    "engage": View("pages/11_Engagement_Hub.py", "🎙️", "tool.engage"),
    "chat": View("pages/12_Cylex_Assistant.py", "💬", "tool.chat"),
    "expert_chat": View("pages/13_Ask_Cyber_Expert.py", "🧑‍⚖️", "tool.expert_chat"),
    "lawdb": View("pages/14_Cyber_Law_Database.py", "📜", "tool.lawdb"),
    "suitable_law": View("pages/15_Finding_Suitable_Law.py", "🔎", "tool.suitable_law"),
    "experts": View("pages/16_Expert_Directory.py", "📍", "tool.experts"),
    "labs": View("pages/17_AI_Labs.py", "🧪", "tool.labs"),
    "about": View("pages/18_About.py", "ℹ️", "tool.about"),
}

HOME_FEATURES = [
    "predictor", "riskmeter", "casedna", "templates",
    "knowledgehub", "analyzer", "summarizer", "copilot",
]

_ACTIVE_VIEW_KEY = "active_view"
_CHAT_INPUT_KEY = "chat_initial_input"


def page_for(view):
    return ACTIVE_VIEWS.get(view, ACTIVE_VIEWS["home"]).page


def set_active_view(view):
    if view not in ACTIVE_VIEWS:
        view = "home"
    st.session_state[_ACTIVE_VIEW_KEY] = view
    return view


def get_active_view():
    return st.session_state.get(_ACTIVE_VIEW_KEY, "home")


def go_to(view):
    st.switch_page(page_for(set_active_view(view)))


def open_chat(initial_text=None):
    if initial_text:
        st.session_state[_CHAT_INPUT_KEY] = initial_text
    go_to("chat")


def pop_chat_initial_input():
    return st.session_state.pop(_CHAT_INPUT_KEY, None)


# ===== Language / theme state =====

def current_language():
    if "language" not in st.session_state:
        st.session_state["language"] = detect_user_language(request_header("Accept-Language"))
    return st.session_state["language"]


def current_mode():
    return st.session_state.setdefault("theme_mode", "default")


def _flip_mode():
    st.session_state["theme_mode"] = toggle_mode(current_mode())


def _select_language():
    st.session_state["language"] = st.session_state["language_select"]


def render_shell(view=None):
    """Apply theme CSS and sidebar controls; returns the translator for the page."""
    if view:
        set_active_view(view)
    language = current_language()
    mode = current_mode()
    theme = detect_theme(browser_timezone())
    st.markdown(theme_css(theme, mode), unsafe_allow_html=True)

    # widget state does not survive page switches, so reseed it from the plain keys
    st.session_state["language_select"] = language
    st.session_state["theme_mode_toggle"] = mode == "alternate"
    names = {lang.code: lang.name for lang in SUPPORTED_LANGUAGES}
    with st.sidebar:
        st.selectbox(
            translate("sidebar.language", language),
            options=list(names),
            format_func=names.get,
            key="language_select",
            on_change=_select_language,
        )
        st.toggle(translate("sidebar.mode", language), key="theme_mode_toggle", on_change=_flip_mode)
        st.caption(f"{translate('sidebar.theme', language)}: {theme.name}")
    return partial(translate, language=language)


def render_footer(t):
    st.markdown(
        f'<div class="footer">&copy; {date.today().year} {t("footer.disclaimer")}</div>',
        unsafe_allow_html=True,
    )


def render_feature_card(view, t, key_prefix="feature"):
    spec = ACTIVE_VIEWS[view]
    with st.container(border=True):
        st.markdown(
            f"""
            <div class="tool-title">{spec.icon} {t(spec.title_key)}</div>
            <div class="tool-description">{t(spec.description_key)}</div>
            """,
            unsafe_allow_html=True,
        )
        if st.button("Open", key=f"{key_prefix}_{view}", use_container_width=True):
            go_to(view)
