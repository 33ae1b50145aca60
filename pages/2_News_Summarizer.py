import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - News Summarizer", page_icon="📰", layout="wide")

from gemini_service import NEWS_ERROR, summarize_legal_news
from localization import language_name
from views import current_language, render_footer, render_shell


def render_sources(sources, heading):
    if not sources:
        return
    st.markdown(f"#### {heading}")
    for source in sources:
        st.markdown(f"- [{source.title or source.uri}]({source.uri})")


def main():
    t = render_shell("summarizer")
    st.title(f"📰 {t('summarizer.title')}")
    st.caption(t("summarizer.subtitle"))

    with st.form("news_form"):
        topic = st.text_input(t("summarizer.title"), placeholder=t("summarizer.placeholder"),
                              label_visibility="collapsed")
        submitted = st.form_submit_button(t("summarizer.btn"))

    if submitted:
        if not topic.strip():
            st.error("Please enter a topic.")
        else:
            with st.spinner("Searching the latest rulings and news..."):
                st.session_state["news_result"] = summarize_legal_news(
                    topic.strip(), language_name(current_language())
                )

    result = st.session_state.get("news_result")
    if result:
        if result.text == NEWS_ERROR:
            st.error(result.text)
        else:
            st.markdown(f"### {t('summarizer.results')}")
            with st.container(border=True):
                st.markdown(result.text)
            render_sources(result.sources, t("summarizer.sources"))

    render_footer(t)


if __name__ == "__main__":
    main()
