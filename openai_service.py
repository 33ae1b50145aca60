import logging
import os

import streamlit as st
from dotenv import load_dotenv
from openai import OpenAI

load_dotenv()

logger = logging.getLogger(__name__)

CHAT_MODEL = os.getenv("OPENAI_CHAT_MODEL", "gpt-4")
EXPERT_SYSTEM_PROMPT = ("You are a helpful cybersecurity law expert assistant. Provide accurate and relevant "
                        "information about cybersecurity laws and regulations.")
HISTORY_LIMIT = 10


@st.cache_resource
def get_openai_client():
    return OpenAI(api_key=os.getenv("OPEN_AI"))


def build_expert_messages(messages):
    """System prompt followed by the most recent user/assistant turns."""
    history = [
        {"role": msg["role"], "content": msg["content"]}
        for msg in messages[-HISTORY_LIMIT:]
        if msg.get("role") in ("user", "assistant") and msg.get("content")
    ]
    return [{"role": "system", "content": EXPERT_SYSTEM_PROMPT}] + history


def stream_expert_reply(messages, client=None):
    """Yield the assistant reply piece by piece, suitable for st.write_stream."""
    client = client or get_openai_client()
    payload = build_expert_messages(messages)
    logger.info("Requesting expert reply from %s with %d turns", CHAT_MODEL, len(payload) - 1)
    stream = client.chat.completions.create(
        model=CHAT_MODEL,
        messages=payload,
        stream=True,
    )
    for chunk in stream:
        if not chunk.choices:
            continue
        delta = chunk.choices[0].delta.content
        if delta:
            yield delta
