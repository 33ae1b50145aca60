from datetime import datetime

import pytest

from client_context import build_user_context, detect_device_type, detect_os

IPHONE = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 Mobile/15E148"
ANDROID = "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 Chrome/120.0 Mobile Safari/537.36"
WINDOWS = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Chrome/120.0 Safari/537.36"
MAC = "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_0) AppleWebKit/605.1.15 Safari/605.1.15"
LINUX = "Mozilla/5.0 (X11; Linux x86_64) Gecko/20100101 Firefox/121.0"


@pytest.mark.parametrize("user_agent, expected", [
    (WINDOWS, "Windows"),
    (MAC, "MacOS"),
    (IPHONE, "iOS"),
    (ANDROID, "Android"),
    (LINUX, "Linux"),
    ("curl/8.0", "Unknown OS"),
    ("", "Unknown OS"),
])
def test_detect_os(user_agent, expected):
    assert detect_os(user_agent) == expected


@pytest.mark.parametrize("user_agent, expected", [
    (IPHONE, "Mobile/Tablet"),
    (ANDROID, "Mobile/Tablet"),
    (WINDOWS, "Desktop/Laptop"),
    (None, "Desktop/Laptop"),
])
def test_detect_device_type(user_agent, expected):
    assert detect_device_type(user_agent) == expected


def test_build_user_context_formats_time_and_date():
    context = build_user_context("Spanish", timezone="Europe/Madrid", user_agent=ANDROID,
                                 now=datetime(2026, 10, 19, 9, 5))
    assert context.location == "Timezone: Europe/Madrid"
    assert context.time == "09:05"
    assert context.date == "Monday, October 19, 2026"
    assert context.device_type == "Mobile/Tablet"
    assert context.operating_system == "Android"
    assert context.language == "Spanish"


def test_build_user_context_with_unknown_timezone():
    context = build_user_context("English", timezone="", user_agent="")
    assert context.location == "Timezone: Unknown"
    assert context.operating_system == "Unknown OS"


def test_build_user_context_tolerates_invalid_timezone():
    context = build_user_context("English", timezone="Mars/Olympus_Mons", user_agent=WINDOWS)
    assert context.location == "Timezone: Mars/Olympus_Mons"
