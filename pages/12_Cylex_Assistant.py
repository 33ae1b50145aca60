import base64
import logging

import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Cylex AI Assistant", page_icon="💬", layout="wide")

import chat_store
from client_context import build_user_context
from documents import CHAT_ATTACHMENT_TYPES, attachment_prompt, guess_mime_type, to_data_url
from gemini_service import GatewayError, create_cylex_chat, send_cylex_message, transcribe_audio
from localization import language_name
from schemas import ChatAttachment, ChatMessage
from views import current_language, pop_chat_initial_input, render_footer, render_shell

logger = logging.getLogger(__name__)

st.markdown("""
    <style>
        .chat-header {
            color: var(--primary-color);
            font-size: 36px;
            font-weight: bold;
            text-align: center;
        }
        .attachment-chip {
            display: inline-block;
            font-size: 0.85em;
            color: rgb(var(--slate-300));
            border: 1px solid rgb(var(--slate-600));
            border-radius: 12px;
            padding: 2px 10px;
            margin-top: 4px;
        }
    </style>
""", unsafe_allow_html=True)


def greeting(t):
    return ChatMessage(role="model", content=t("chat.greeting"))


def reset_conversation(t):
    st.session_state["cylex_messages"] = [greeting(t)]
    st.session_state["cylex_chat"] = chat_store.new_chat()


def init_state(t):
    if "cylex_messages" not in st.session_state:
        reset_conversation(t)
    st.session_state.setdefault("chat_widget_round", 0)


def history_for_model(messages):
    """Prior turns without the leading greeting; the model expects the user to speak first."""
    history = list(messages)
    while history and history[0].role == "model":
        history.pop(0)
    return history


def uploaded_attachment(uploaded_file):
    mime_type = guess_mime_type(uploaded_file.name, uploaded_file.type)
    return ChatAttachment(
        name=uploaded_file.name,
        type=mime_type,
        data=to_data_url(uploaded_file.getvalue(), mime_type),
    )


def on_attachment_change():
    key = f"chat_attachment_{st.session_state['chat_widget_round']}"
    uploaded_file = st.session_state.get(key)
    if uploaded_file is not None:
        mime_type = guess_mime_type(uploaded_file.name, uploaded_file.type)
        st.session_state["chat_draft"] = attachment_prompt(mime_type, uploaded_file.name)


def send_message(text, attachment, t):
    messages = st.session_state["cylex_messages"]
    history = history_for_model(messages)
    user_message = ChatMessage(role="user", content=text, attachments=[attachment] if attachment else [])
    messages.append(user_message)

    context = build_user_context(language_name(current_language()))
    try:
        chat = create_cylex_chat(context, history)
        reply = send_cylex_message(chat, text, attachment.data if attachment else None)
    except Exception:
        logger.exception("Cylex chat request failed")
        reply = t("chat.error")
    messages.append(ChatMessage(role="model", content=reply or t("chat.error")))

    # fresh widgets so the sent attachment and recording are cleared
    st.session_state["chat_widget_round"] += 1
    persist_conversation()


def persist_conversation():
    if not chat_store.persistence_enabled():
        return
    browser_id = st.session_state.get("browser_id")
    if not browser_id:
        return
    chat = st.session_state["cylex_chat"]
    chat.messages = history_for_model(st.session_state["cylex_messages"])
    chat_store.save_chat(chat_store.get_collection(), browser_id, chat)


def display_messages():
    for msg in st.session_state["cylex_messages"]:
        with st.chat_message("user" if msg.role == "user" else "assistant"):
            st.markdown(msg.content)
            for attachment in msg.attachments:
                if attachment.type.startswith("image/"):
                    st.image(base64.b64decode(attachment.data.split(",", 1)[1]), width=240)
                else:
                    st.markdown(f'<span class="attachment-chip">📎 {attachment.name}</span>',
                                unsafe_allow_html=True)


def render_saved_chats(t):
    if not chat_store.persistence_enabled():
        return
    browser_id = chat_store.get_or_create_browser_id()
    collection = chat_store.get_collection()
    with st.sidebar:
        st.markdown(f"### {t('chat.saved')}")
        if st.button(f"➕ {t('chat.new')}", key="new_chat", use_container_width=True):
            reset_conversation(t)
            st.rerun()
        current_id = st.session_state["cylex_chat"].id
        for saved in chat_store.list_chats(collection, browser_id):
            col1, col2 = st.columns([5, 1])
            with col1:
                label = f"**{saved.title}**" if saved.id == current_id else saved.title
                if st.button(label, key=f"open_{saved.id}", use_container_width=True, help=saved.date):
                    loaded = chat_store.load_chat(collection, browser_id, saved.id)
                    if loaded:
                        st.session_state["cylex_chat"] = loaded
                        st.session_state["cylex_messages"] = [greeting(t)] + loaded.messages
                        st.rerun()
            with col2:
                if st.button("🗑️", key=f"delete_{saved.id}", help=t("chat.delete")):
                    chat_store.delete_chat(collection, browser_id, saved.id)
                    if saved.id == current_id:
                        reset_conversation(t)
                    st.rerun()


def handle_recording(clip):
    if clip is None or st.session_state.get("chat_last_clip") == clip.file_id:
        return
    st.session_state["chat_last_clip"] = clip.file_id
    with st.spinner("Transcribing..."):
        try:
            text = transcribe_audio(clip.getvalue(), clip.type or "audio/wav", language_name(current_language()))
        except GatewayError as e:
            st.error(str(e))
            return
    if text:
        draft = st.session_state.get("chat_draft", "")
        st.session_state["chat_draft"] = f"{draft} {text}".strip()
        st.rerun()


def main():
    t = render_shell("chat")
    init_state(t)
    render_saved_chats(t)

    st.markdown(f'<div class="chat-header">💬 {t("tool.chat")}</div>', unsafe_allow_html=True)

    initial_input = pop_chat_initial_input()
    if initial_input:
        st.session_state["chat_draft"] = initial_input

    display_messages()

    round_id = st.session_state["chat_widget_round"]
    col1, col2 = st.columns(2)
    with col1:
        uploaded_file = st.file_uploader(t("chat.attach"), type=CHAT_ATTACHMENT_TYPES,
                                         key=f"chat_attachment_{round_id}", on_change=on_attachment_change)
    with col2:
        clip = st.audio_input(t("chat.record"), key=f"chat_recording_{round_id}")
    handle_recording(clip)

    with st.form("cylex_form", clear_on_submit=True):
        text = st.text_area(t("chat.placeholder"), key="chat_draft", height=100, label_visibility="collapsed",
                            placeholder=t("chat.placeholder"))
        submitted = st.form_submit_button("Send")

    if submitted:
        attachment = uploaded_attachment(uploaded_file) if uploaded_file else None
        if not text.strip() and attachment is None:
            st.warning("Please type a message or attach a file.")
        else:
            message = text.strip() or attachment_prompt(attachment.type, attachment.name)
            with st.spinner(t("chat.typing")):
                send_message(message, attachment, t)
            st.rerun()

    render_footer(t)


if __name__ == "__main__":
    main()
