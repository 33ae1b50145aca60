"""Saved Cylex conversations, stored in MongoDB per browser."""
import logging
import os
import uuid
from datetime import datetime

import streamlit as st
from dotenv import load_dotenv
from pymongo.errors import PyMongoError

from browser_storage import get_localstorage_value, set_localstorage_value
from schemas import ChatMessage, SavedChat

load_dotenv()

logger = logging.getLogger(__name__)

COLLECTION_NAME = "conversations"
BROWSER_ID_KEY = "CylexBrowserId"
TITLE_LENGTH = 30


def persistence_enabled():
    return bool(os.getenv("MONGO_URI"))


def get_collection():
    from app_resources import get_database
    return get_database()[COLLECTION_NAME]


def get_or_create_browser_id():
    """Get the id this browser keeps in localStorage, creating one on first visit"""
    if "browser_id" not in st.session_state:
        st.session_state.browser_id = None

    browser_id = get_localstorage_value(BROWSER_ID_KEY)

    if browser_id in (None, "null"):
        if st.session_state.browser_id is None:
            st.session_state.browser_id = str(uuid.uuid4())
        set_localstorage_value(BROWSER_ID_KEY, st.session_state.browser_id)
        return st.session_state.browser_id
    st.session_state.browser_id = browser_id
    return browser_id


def chat_title(messages):
    for msg in messages:
        if msg.role == "user" and msg.content.strip():
            text = msg.content.strip()
            return text[:TITLE_LENGTH] + "..." if len(text) > TITLE_LENGTH else text
    return "New Chat"


def new_chat(messages=None) -> SavedChat:
    messages = list(messages or [])
    return SavedChat(
        id=str(uuid.uuid4()),
        title=chat_title(messages),
        date=datetime.now().isoformat(timespec="seconds"),
        messages=messages,
    )


def save_chat(collection, browser_id, chat: SavedChat):
    """Upsert the conversation; the title follows its first user message."""
    chat.title = chat_title(chat.messages)
    chat.date = datetime.now().isoformat(timespec="seconds")
    try:
        collection.update_one(
            {"local_storage_id": browser_id, "chat_id": chat.id},
            {"$set": {
                "local_storage_id": browser_id,
                "chat_id": chat.id,
                "title": chat.title,
                "date": chat.date,
                "messages": [msg.model_dump() for msg in chat.messages],
            }},
            upsert=True,
        )
        return True
    except PyMongoError as e:
        logger.exception("Error saving conversation")
        st.error(f"Error saving conversation: {e}")
        return False


def _to_saved_chat(doc) -> SavedChat:
    return SavedChat(
        id=doc["chat_id"],
        title=doc.get("title", "New Chat"),
        date=doc.get("date", ""),
        messages=[ChatMessage.model_validate(msg) for msg in doc.get("messages", [])],
    )


def list_chats(collection, browser_id):
    """Saved conversations for this browser, newest first, without their messages."""
    try:
        docs = collection.find(
            {"local_storage_id": browser_id},
            {"chat_id": 1, "title": 1, "date": 1},
        ).sort("date", -1)
        return [_to_saved_chat(doc) for doc in docs]
    except PyMongoError as e:
        logger.exception("Error listing conversations")
        st.error(f"Error loading conversations: {e}")
        return []


def load_chat(collection, browser_id, chat_id):
    try:
        doc = collection.find_one({"local_storage_id": browser_id, "chat_id": chat_id})
        return _to_saved_chat(doc) if doc else None
    except PyMongoError as e:
        logger.exception("Error loading conversation")
        st.error(f"Error loading conversation: {e}")
        return None


def delete_chat(collection, browser_id, chat_id):
    try:
        collection.delete_one({"local_storage_id": browser_id, "chat_id": chat_id})
        return True
    except PyMongoError as e:
        logger.exception("Error deleting conversation")
        st.error(f"Error deleting conversation: {e}")
        return False
