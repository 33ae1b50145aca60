import logging

import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Ask a Cyber Law Expert", page_icon="🧑‍⚖️", layout="wide")

from openai import OpenAIError

from openai_service import stream_expert_reply
from views import render_footer, render_shell

logger = logging.getLogger(__name__)


def clear_chat():
    st.session_state["expert_messages"] = []


def main():
    t = render_shell("expert_chat")
    st.title(f"🧑‍⚖️ {t('expert_chat.title')}")
    st.caption(t("tool.expert_chat.desc"))

    if "expert_messages" not in st.session_state:
        clear_chat()
    messages = st.session_state["expert_messages"]

    for msg in messages:
        with st.chat_message(msg["role"]):
            st.markdown(msg["content"])

    if prompt := st.chat_input(t("expert_chat.placeholder")):
        messages.append({"role": "user", "content": prompt})
        with st.chat_message("user"):
            st.markdown(prompt)
        with st.chat_message("assistant"):
            try:
                reply = st.write_stream(stream_expert_reply(messages))
            except OpenAIError as e:
                logger.exception("Expert chat request failed")
                st.error(f"Error generating response: {e}")
                reply = None
        if reply:
            messages.append({"role": "assistant", "content": reply})

    if messages:
        st.button(t("expert_chat.clear"), key="clear_expert_chat", on_click=clear_chat)

    render_footer(t)


if __name__ == "__main__":
    main()
