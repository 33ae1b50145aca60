import asyncio

import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Engagement Hub", page_icon="🎙️", layout="wide")

from gemini_service import GatewayError, generate_newsletter, generate_quiz_questions
from quiz import QuizSession
from views import render_footer, render_shell
from voice_session import VoiceConsultation

SUB_VIEWS = ("hub", "voice", "quiz", "newsletter")
STATUS_ICONS = {"disconnected": "⚪", "connecting": "🟡", "connected": "🟢", "error": "🔴"}


def set_sub_view(view):
    st.session_state["engage_view"] = view if view in SUB_VIEWS else "hub"


def back_button(t, label_key="common.back"):
    st.button(f"← {t(label_key)}", key="engage_back", on_click=set_sub_view, args=("hub",))


# ===== Hub =====

def render_hub(t):
    st.title(f"🎙️ {t('engage.title')}")
    st.caption(t("engage.subtitle"))
    cards = [
        ("voice", "🎙️", "engage.voice.title", "engage.voice.desc"),
        ("quiz", "🧠", "engage.quiz.title", "engage.quiz.desc"),
        ("newsletter", "📰", "engage.news.title", "engage.news.desc"),
    ]
    cols = st.columns(3)
    for col, (view, icon, title_key, desc_key) in zip(cols, cards):
        with col:
            with st.container(border=True):
                st.markdown(f'<div class="tool-title">{icon} {t(title_key)}</div>', unsafe_allow_html=True)
                st.markdown(f'<div class="tool-description">{t(desc_key)}</div>', unsafe_allow_html=True)
                st.button("Open", key=f"engage_{view}", on_click=set_sub_view, args=(view,),
                          use_container_width=True)


# ===== Voice consultation =====

def end_consultation():
    voice = st.session_state.pop("voice_consultation", None)
    if voice is not None:
        voice.stop()
    st.session_state.pop("voice_last_clip", None)
    st.session_state["voice_round"] = st.session_state.get("voice_round", 0) + 1


def render_voice(t):
    back_button(t, "voice.back")
    st.title(f"🎙️ {t('voice.title')}")
    st.caption(t("voice.subtitle"))

    voice = st.session_state.get("voice_consultation")
    status = voice.status if voice else "disconnected"
    st.markdown(f"{STATUS_ICONS[status]} {t(f'voice.status.{status}')}")

    if voice is None:
        if st.button(t("voice.btn.start"), key="voice_start"):
            st.session_state["voice_consultation"] = VoiceConsultation()
            st.rerun()
        st.caption(t("voice.live.disclaimer"))
        return

    st.info(t("voice.listening"))
    clip = st.audio_input(t("voice.record"), key=f"voice_clip_{st.session_state.get('voice_round', 0)}")
    if clip is not None and st.session_state.get("voice_last_clip") != clip.file_id:
        st.session_state["voice_last_clip"] = clip.file_id
        with st.spinner("Cylex is listening..."):
            ok = asyncio.run(voice.consult(clip.getvalue()))
        if not ok:
            st.error("The voice session failed. Please try again.")

    reply = voice.reply_audio()
    if reply:
        st.audio(reply, format="audio/wav", autoplay=True)

    for entry in voice.transcript:
        with st.chat_message("user" if entry.speaker == "user" else "assistant"):
            st.write(entry.text)

    st.button(t("voice.btn.end"), key="voice_end", on_click=end_consultation)
    st.caption(t("voice.live.disclaimer"))


# ===== Quiz =====

def start_quiz():
    with st.spinner("Generating your quiz..."):
        try:
            questions = generate_quiz_questions()
        except GatewayError as e:
            st.error(str(e))
            return False
    st.session_state["quiz"] = QuizSession(questions)
    return True


def render_quiz(t):
    back_button(t)
    st.title(f"🧠 {t('engage.quiz.title')}")
    quiz = st.session_state.get("quiz")

    if quiz is None:
        st.caption(t("engage.quiz.desc"))
        if st.button(t("quiz.generate"), key="quiz_generate") and start_quiz():
            st.rerun()
        return

    if quiz.finished:
        st.subheader(f"{t('quiz.score')}: {quiz.score} / {len(quiz.questions)}")
        if st.button(t("quiz.again"), key="quiz_again"):
            st.session_state.pop("quiz", None)
            if start_quiz():
                st.rerun()
        return

    question = quiz.question
    st.caption(f"{t('quiz.question')} {quiz.current + 1} / {len(quiz.questions)}")
    st.markdown(f"### {question.question}")
    for index, option in enumerate(question.options):
        label = option
        if quiz.answered and index == question.correctAnswer:
            label = f"✅ {option}"
        elif quiz.answered and index == quiz.selected:
            label = f"❌ {option}"
        if st.button(label, key=f"quiz_{quiz.current}_{index}", disabled=quiz.answered,
                     use_container_width=True):
            quiz.select(index)
            st.rerun()

    if quiz.answered:
        if quiz.selected == question.correctAnswer:
            st.success(t("quiz.correct"))
        else:
            st.error(t("quiz.incorrect"))
        st.info(question.explanation)
        if st.button(t("quiz.finish") if quiz.is_last else t("quiz.next"), key="quiz_next"):
            quiz.next()
            st.rerun()


# ===== Newsletter =====

def render_newsletter(t):
    back_button(t)
    st.title(f"📰 {t('engage.news.title')}")
    st.caption(t("engage.news.desc"))

    with st.form("newsletter_form"):
        region = st.text_input(t("news.region"), placeholder=t("news.placeholder"))
        submitted = st.form_submit_button(t("news.btn"))

    if submitted:
        if not region.strip():
            st.error("Please enter a region.")
        else:
            with st.spinner("Compiling your newsletter..."):
                try:
                    st.session_state["newsletter"] = generate_newsletter(region.strip())
                except GatewayError as e:
                    st.session_state.pop("newsletter", None)
                    st.error(str(e))

    newsletter = st.session_state.get("newsletter")
    if newsletter:
        with st.container(border=True):
            st.markdown(newsletter.text)
        if newsletter.sources:
            st.markdown(f"#### {t('common.sources')}")
            for source in newsletter.sources:
                st.markdown(f"- [{source.title or source.uri}]({source.uri})")


RENDERERS = {
    "hub": render_hub,
    "voice": render_voice,
    "quiz": render_quiz,
    "newsletter": render_newsletter,
}


def main():
    t = render_shell("engage")
    view = st.session_state.get("engage_view", "hub")
    RENDERERS.get(view, render_hub)(t)
    render_footer(t)


if __name__ == "__main__":
    main()
