import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Cyber Law Insights", page_icon="💡", layout="wide")

from audio_utils import pcm16_to_wav_bytes
from content import ARTICLES
from gemini_service import ARTICLE_ERROR, generate_speech, summarize_article
from views import open_chat, render_footer, render_shell


def ask_ai_prompt(article):
    return f'Regarding the article "{article["title"]}", I have a question: '


def render_article(article, t):
    summaries = st.session_state.setdefault("article_summaries", {})
    audio = st.session_state.setdefault("article_audio", {})
    article_id = article["id"]

    with st.container(border=True):
        st.markdown(f"### {article['title']}")
        st.caption(f"By {article['author']} on {article['date']}")
        st.write(article["snippet"])
        with st.expander(t("insights.read_more")):
            st.write(article["content"])

        summary = summaries.get(article_id)
        if summary is None:
            if st.button(t("insights.summarize"), key=f"summarize_{article_id}"):
                with st.spinner("Summarizing..."):
                    summaries[article_id] = summarize_article(article["content"])
                st.rerun()
            return

        st.markdown(f"**{t('insights.summarize')}:**")
        st.markdown(summary)
        if summary == ARTICLE_ERROR:
            return

        col1, col2 = st.columns(2)
        with col1:
            if st.button(f"🔊 {t('insights.listen')}", key=f"listen_{article_id}"):
                with st.spinner("Generating audio..."):
                    pcm = generate_speech(summary)
                if pcm:
                    audio[article_id] = pcm16_to_wav_bytes(pcm)
                else:
                    st.error("Could not generate audio for this summary.")
        with col2:
            if st.button(f"🤖 {t('insights.ask')}", key=f"ask_{article_id}"):
                open_chat(ask_ai_prompt(article))
        if article_id in audio:
            st.audio(audio[article_id], format="audio/wav", autoplay=True)


def main():
    t = render_shell("insights")
    st.title(f"💡 {t('insights.title')}")
    st.caption(t("insights.subtitle"))

    for article in ARTICLES:
        render_article(article, t)

    render_footer(t)


if __name__ == "__main__":
    main()
