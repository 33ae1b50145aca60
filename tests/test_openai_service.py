import logging
from types import SimpleNamespace

import openai_service


def _chunk(content):
    return SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=content))])


class FakeCompletions:
    def __init__(self, chunks):
        self.chunks = chunks
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        return iter(self.chunks)


def _client(chunks):
    completions = FakeCompletions(chunks)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


def test_build_expert_messages_prepends_system_prompt():
    messages = openai_service.build_expert_messages([{"role": "user", "content": "Is scraping legal?"}])
    assert messages[0] == {"role": "system", "content": openai_service.EXPERT_SYSTEM_PROMPT}
    assert messages[1] == {"role": "user", "content": "Is scraping legal?"}


def test_build_expert_messages_keeps_recent_history_only():
    history = [{"role": "user" if i % 2 == 0 else "assistant", "content": f"m{i}"} for i in range(14)]
    messages = openai_service.build_expert_messages(history)
    assert len(messages) == 1 + openai_service.HISTORY_LIMIT
    assert messages[1]["content"] == "m4"


def test_build_expert_messages_skips_empty_and_foreign_roles():
    messages = openai_service.build_expert_messages([
        {"role": "tool", "content": "x"},
        {"role": "assistant", "content": ""},
        {"role": "user", "content": "Hello"},
    ])
    assert [m["role"] for m in messages] == ["system", "user"]


def test_stream_expert_reply_yields_deltas():
    client, completions = _client([
        _chunk("The CFAA "),
        SimpleNamespace(choices=[]),
        _chunk(None),
        _chunk("covers unauthorised access."),
    ])
    reply = "".join(openai_service.stream_expert_reply([{"role": "user", "content": "CFAA?"}], client=client))
    assert reply == "The CFAA covers unauthorised access."
    assert completions.kwargs["stream"] is True
    assert completions.kwargs["model"] == openai_service.CHAT_MODEL


def test_stream_expert_reply_logs_request(caplog):
    client, _ = _client([_chunk("Yes.")])
    history = [{"role": "user", "content": "Is GDPR global?"}, {"role": "assistant", "content": "Partly."},
               {"role": "user", "content": "Explain."}]
    with caplog.at_level(logging.INFO, logger="openai_service"):
        assert list(openai_service.stream_expert_reply(history, client=client)) == ["Yes."]
    assert f"from {openai_service.CHAT_MODEL} with 3 turns" in caplog.text
