"""
Pytest config.

The app is a flat set of modules run by `streamlit run main.py`, so tests rely on
the repo root being importable. We pin that here so collection works no matter
which pytest entrypoint is used.
"""
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest


def _ensure_repo_root_on_syspath() -> None:
    repo_root = str(Path(__file__).resolve().parents[1])
    if repo_root not in sys.path:
        sys.path.insert(0, repo_root)


_ensure_repo_root_on_syspath()


class FakeModels:
    """Stands in for client.models; replies are consumed in order."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append(SimpleNamespace(model=model, contents=contents, config=config))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeChats:
    def __init__(self):
        self.created = []

    def create(self, model, config=None, history=None):
        chat = FakeChat()
        self.created.append(SimpleNamespace(model=model, config=config, history=history, chat=chat))
        return chat


class FakeChat:
    def __init__(self, reply="Noted."):
        self.reply = reply
        self.sent = []

    def send_message(self, message):
        self.sent.append(message)
        return SimpleNamespace(text=self.reply)


@pytest.fixture
def fake_gemini(monkeypatch):
    """Patch the gateway's client; call with the replies generate_content should return."""
    import gemini_service

    def install(*replies):
        client = SimpleNamespace(models=FakeModels(replies), chats=FakeChats())
        monkeypatch.setattr(gemini_service, "_client", lambda: client)
        return client

    return install


def text_response(text, chunks=None):
    metadata = SimpleNamespace(grounding_chunks=chunks) if chunks is not None else None
    return SimpleNamespace(text=text, candidates=[SimpleNamespace(grounding_metadata=metadata)])


def web_chunk(uri, title=None):
    return SimpleNamespace(web=SimpleNamespace(uri=uri, title=title))
