import re
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import streamlit as st

_MOBILE = re.compile(r"Mobi|Android|iPhone|iPad|iPod", re.IGNORECASE)


@dataclass
class UserContext:
    location: str
    time: str
    date: str
    device_type: str
    operating_system: str
    language: str


def detect_os(user_agent: str) -> str:
    user_agent = user_agent or ""
    if "Win" in user_agent:
        return "Windows"
    # iOS agents also contain "Mac", so check them first
    if "like Mac" in user_agent:
        return "iOS"
    if "Mac" in user_agent:
        return "MacOS"
    if "Android" in user_agent:
        return "Android"
    if "Linux" in user_agent:
        return "Linux"
    return "Unknown OS"


def detect_device_type(user_agent: str) -> str:
    if _MOBILE.search(user_agent or ""):
        return "Mobile/Tablet"
    return "Desktop/Laptop"


def browser_timezone():
    return getattr(st.context, "timezone", None)


def request_header(name: str, default: str = "") -> str:
    headers = getattr(st.context, "headers", None) or {}
    return headers.get(name, default) or default


def build_user_context(language_name: str, timezone=None, user_agent=None, now=None) -> UserContext:
    timezone = timezone if timezone is not None else browser_timezone()
    user_agent = user_agent if user_agent is not None else request_header("User-Agent")
    if now is None:
        try:
            now = datetime.now(ZoneInfo(timezone)) if timezone else datetime.now()
        except ZoneInfoNotFoundError:
            now = datetime.now()
    return UserContext(
        location=f"Timezone: {timezone or 'Unknown'}",
        time=now.strftime("%H:%M"),
        date=now.strftime("%A, %B %d, %Y"),
        device_type=detect_device_type(user_agent),
        operating_system=detect_os(user_agent),
        language=language_name,
    )
