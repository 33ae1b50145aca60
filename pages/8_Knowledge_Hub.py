import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Global Knowledge Hub", page_icon="🌐", layout="wide")

from content import REGIONS
from gemini_service import GatewayError, get_cyber_law_info
from localization import language_name
from views import current_language, render_footer, render_shell


def select_region(region):
    st.session_state["knowledge_region"] = region


def fetch_briefing(region, language):
    """Briefings are kept per region and language for the session."""
    briefings = st.session_state.setdefault("knowledge_briefings", {})
    key = (region, language)
    if key not in briefings:
        briefings[key] = get_cyber_law_info(region, language)
    return briefings[key]


def render_region_grid(t):
    cols = st.columns(3)
    for i, (label_key, region, flag) in enumerate(REGIONS):
        with cols[i % 3]:
            with st.container(border=True):
                st.markdown(f"<div style='font-size: 48px; text-align: center;'>{flag}</div>", unsafe_allow_html=True)
                st.button(t(label_key), key=f"region_{region}", on_click=select_region, args=(region,),
                          use_container_width=True)


def render_briefing(region, t):
    label = next((t(key) for key, name, _ in REGIONS if name == region), region)
    st.subheader(f"{t('knowledge.overview')}: {label}")
    st.button(f"← {t('knowledge.back')}", key="knowledge_back", on_click=select_region, args=(None,))

    language = language_name(current_language())
    with st.spinner(t("knowledge.fetch")):
        try:
            briefing = fetch_briefing(region, language)
        except GatewayError as e:
            st.error(str(e))
            return

    with st.container(border=True):
        st.markdown(briefing.text)
    if briefing.sources:
        st.markdown(f"#### {t('knowledge.sources')}")
        for source in briefing.sources:
            st.markdown(f"- [{source.title or source.uri}]({source.uri})")
    st.caption(f"**{t('knowledge.disclaimer')}**")


def main():
    t = render_shell("knowledgehub")
    st.title(f"🌐 {t('knowledge.title')}")
    st.caption(t("knowledge.subtitle"))

    region = st.session_state.get("knowledge_region")
    if region:
        render_briefing(region, t)
    else:
        render_region_grid(t)

    render_footer(t)


if __name__ == "__main__":
    main()
