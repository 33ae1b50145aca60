import base64
import json
from types import SimpleNamespace

import pytest

import gemini_service
from client_context import UserContext
from conftest import text_response, web_chunk
from schemas import ChatAttachment, ChatMessage, CyberRiskAssessment, LawRelevance


def _risk_payload(**overrides):
    payload = {
        "riskScore": 72,
        "riskLevel": "High",
        "summary": "Broad data sharing with third parties.",
        "identifiedRisks": [
            {"risk": "Unlimited data retention", "recommendation": "Define a retention schedule."},
        ],
    }
    payload.update(overrides)
    return json.dumps(payload)


def _context():
    return UserContext(
        location="Timezone: Europe/Paris",
        time="09:30",
        date="Monday, October 19, 2026",
        device_type="Desktop/Laptop",
        operating_system="MacOS",
        language="French",
    )


# ===== Data URLs =====

def test_data_url_to_part_decodes_payload():
    data_url = "data:image/png;base64," + base64.b64encode(b"\x89PNG").decode()
    part = gemini_service.data_url_to_part(data_url)
    assert part.inline_data.mime_type == "image/png"
    assert part.inline_data.data == b"\x89PNG"


@pytest.mark.parametrize("value", ["", "not a data url", "data:image/png,abc", None])
def test_data_url_to_part_rejects_malformed_input(value):
    with pytest.raises(ValueError, match="Invalid base64 string"):
        gemini_service.data_url_to_part(value)


# ===== Cylex chat =====

def test_system_instruction_without_context_is_the_base_prompt():
    assert gemini_service.build_system_instruction() == gemini_service.CYLEX_SYSTEM_INSTRUCTION


def test_system_instruction_includes_user_context():
    instruction = gemini_service.build_system_instruction(_context())
    assert instruction.startswith(gemini_service.CYLEX_SYSTEM_INSTRUCTION)
    assert "Timezone: Europe/Paris" in instruction
    assert "09:30" in instruction
    assert "MacOS" in instruction
    assert "Preferred language: French" in instruction


def test_create_cylex_chat_replays_history(fake_gemini):
    client = fake_gemini()
    attachment = ChatAttachment(
        name="note.txt", type="text/plain", data="data:text/plain;base64," + base64.b64encode(b"hi").decode()
    )
    history = [
        ChatMessage(role="user", content="Someone copied my code.", attachments=[attachment]),
        ChatMessage(role="model", content="Shall I draft a cease and desist letter?"),
    ]

    gemini_service.create_cylex_chat(_context(), history)

    created = client.chats.created[0]
    assert created.model == gemini_service.FLASH_MODEL
    assert "Europe/Paris" in created.config.system_instruction
    assert [content.role for content in created.history] == ["user", "model"]
    assert len(created.history[0].parts) == 2
    assert created.history[0].parts[1].inline_data.data == b"hi"


def test_send_cylex_message_attaches_file():
    chat = SimpleNamespace(sent=[])

    def send_message(parts):
        chat.sent.append(parts)
        return SimpleNamespace(text="Here is what I see.")

    chat.send_message = send_message
    data_url = "data:image/jpeg;base64," + base64.b64encode(b"jpeg").decode()

    reply = gemini_service.send_cylex_message(chat, "What do you see in this image?", data_url)

    assert reply == "Here is what I see."
    parts = chat.sent[0]
    assert parts[0].text == "What do you see in this image?"
    assert parts[1].inline_data.mime_type == "image/jpeg"


# ===== Free-text tools =====

def test_analyze_document_uses_pro_model_with_thinking(fake_gemini):
    client = fake_gemini(text_response("## Findings"))
    assert gemini_service.analyze_document("Clause 1.") == "## Findings"
    call = client.models.calls[0]
    assert call.model == gemini_service.PRO_MODEL
    assert call.config.thinking_config.thinking_budget == gemini_service.THINKING_BUDGET
    assert "Clause 1." in call.contents


def test_analyze_document_falls_back_on_error(fake_gemini):
    fake_gemini(RuntimeError("quota"))
    assert gemini_service.analyze_document("Clause 1.") == gemini_service.DOCUMENT_ERROR


def test_action_plan_falls_back_on_error(fake_gemini):
    fake_gemini(RuntimeError("quota"))
    assert gemini_service.generate_legal_action_plan("My data leaked.") == gemini_service.PLAN_ERROR


def test_summarize_article_falls_back_on_error(fake_gemini):
    fake_gemini(RuntimeError("quota"))
    assert gemini_service.summarize_article("Body") == gemini_service.ARTICLE_ERROR


def test_summarize_legal_news_collects_web_sources(fake_gemini):
    client = fake_gemini(text_response("Summary", chunks=[
        web_chunk("https://example.com/ruling", "Ruling"),
        web_chunk("https://example.com/untitled"),
        SimpleNamespace(web=None),
    ]))

    result = gemini_service.summarize_legal_news("GDPR fines", language="Spanish")

    assert result.text == "Summary"
    assert [(s.uri, s.title) for s in result.sources] == [
        ("https://example.com/ruling", "Ruling"),
        ("https://example.com/untitled", "https://example.com/untitled"),
    ]
    call = client.models.calls[0]
    assert call.config.tools[0].google_search is not None
    assert "Respond in Spanish." in call.contents


def test_summarize_legal_news_falls_back_on_error(fake_gemini):
    fake_gemini(RuntimeError("offline"))
    result = gemini_service.summarize_legal_news("GDPR fines")
    assert result.text == gemini_service.NEWS_ERROR
    assert result.sources == []


def test_extract_sources_without_candidates():
    assert gemini_service.extract_sources(SimpleNamespace(candidates=None)) == []
    assert gemini_service.extract_sources(text_response("x")) == []


# ===== Structured tools =====

def test_assess_cyber_risk_parses_json(fake_gemini):
    client = fake_gemini(text_response(_risk_payload()))
    result = gemini_service.assess_cyber_risk("Privacy policy text", language="German")
    assert isinstance(result, CyberRiskAssessment)
    assert result.riskScore == 72
    assert result.identifiedRisks[0].risk == "Unlimited data retention"
    call = client.models.calls[0]
    assert call.config.response_mime_type == "application/json"
    assert call.config.response_schema is CyberRiskAssessment
    assert "German" in call.contents


def test_assess_cyber_risk_clamps_score(fake_gemini):
    fake_gemini(text_response(_risk_payload(riskScore=140)))
    assert gemini_service.assess_cyber_risk("text").riskScore == 100


def test_structured_tool_raises_gateway_error_on_bad_json(fake_gemini):
    fake_gemini(text_response("not json"))
    with pytest.raises(gemini_service.GatewayError, match="cyber risk assessment"):
        gemini_service.assess_cyber_risk("text")


def test_structured_tool_raises_gateway_error_on_api_failure(fake_gemini):
    fake_gemini(RuntimeError("boom"))
    with pytest.raises(gemini_service.GatewayError, match="Case DNA"):
        gemini_service.analyze_case_dna("facts")


def test_audit_smart_contract_allows_missing_line(fake_gemini):
    fake_gemini(text_response(json.dumps({
        "securityScore": 35,
        "vulnerabilities": [
            {"name": "Reentrancy", "line": 12, "severity": "Critical", "description": "Withdraw before update."},
            {"name": "Unchecked call", "severity": "Medium", "description": "Return value ignored."},
        ],
        "legalRisks": ["Possible unregistered security."],
        "summary": "Unsafe.",
    })))
    audit = gemini_service.audit_smart_contract("contract Vault {}")
    assert [v.line for v in audit.vulnerabilities] == [12, None]


def _quiz_item(answer=0, options=("GDPR", "CFAA", "DMCA", "CCPA")):
    return {"question": "Which law fits?", "options": list(options), "correctAnswer": answer,
            "explanation": "Because it does."}


def test_generate_quiz_questions_returns_list(fake_gemini):
    client = fake_gemini(text_response(json.dumps([_quiz_item(answer=i % 4) for i in range(5)])))
    questions = gemini_service.generate_quiz_questions()
    assert [q.correctAnswer for q in questions] == [0, 1, 2, 3, 0]
    assert all(len(q.options) == 4 for q in questions)
    assert client.models.calls[0].config.thinking_config is None


def test_generate_quiz_questions_rejects_bad_answer_index(fake_gemini):
    fake_gemini(text_response(json.dumps([_quiz_item()] * 4 + [_quiz_item(answer=7)])))
    with pytest.raises(gemini_service.GatewayError):
        gemini_service.generate_quiz_questions()


def test_generate_quiz_questions_requires_four_options(fake_gemini):
    fake_gemini(text_response(json.dumps([_quiz_item()] * 4 + [_quiz_item(answer=1, options=("a", "b"))])))
    with pytest.raises(gemini_service.GatewayError):
        gemini_service.generate_quiz_questions()


@pytest.mark.parametrize("count", [1, 4, 6])
def test_generate_quiz_questions_requires_five_questions(fake_gemini, count):
    fake_gemini(text_response(json.dumps([_quiz_item()] * count)))
    with pytest.raises(gemini_service.GatewayError, match="Failed to generate the quiz"):
        gemini_service.generate_quiz_questions()


def test_explain_law_relevance_parses_score(fake_gemini):
    fake_gemini(text_response(json.dumps({"advice": "GDPR covers the breach.", "score": 8})))
    result = gemini_service.explain_law_relevance("A breach in Paris", {"Title": "GDPR", "Country": "EU"})
    assert result == LawRelevance(advice="GDPR covers the breach.", score=8)


def test_explain_law_relevance_falls_back_on_error(fake_gemini):
    fake_gemini(RuntimeError("boom"))
    result = gemini_service.explain_law_relevance("scenario", {})
    assert result.advice == gemini_service.RELEVANCE_ERROR
    assert result.score is None


@pytest.mark.parametrize("score, expected", [("N/A", None), ("7", 7), (12, 10), (-3, 0)])
def test_explain_law_relevance_normalises_score(fake_gemini, score, expected):
    fake_gemini(text_response(json.dumps({"advice": "Fits.", "score": score})))
    assert gemini_service.explain_law_relevance("scenario", {}).score == expected


# ===== Grounded tools =====

def test_get_cyber_law_info_returns_sources(fake_gemini):
    client = fake_gemini(text_response("1. Key laws", chunks=[web_chunk("https://gov.example/law", "Law")]))
    result = gemini_service.get_cyber_law_info("Japan", language="Japanese")
    assert result.sources[0].uri == "https://gov.example/law"
    assert "Japan" in client.models.calls[0].contents
    assert "Japanese" in client.models.calls[0].contents


def test_generate_newsletter_raises_gateway_error(fake_gemini):
    fake_gemini(RuntimeError("boom"))
    with pytest.raises(gemini_service.GatewayError, match="newsletter"):
        gemini_service.generate_newsletter("Europe")


# ===== Audio =====

def _speech_response(data):
    inline = SimpleNamespace(data=data) if data is not None else None
    part = SimpleNamespace(inline_data=inline)
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


def test_generate_speech_returns_pcm(fake_gemini):
    client = fake_gemini(_speech_response(b"\x00\x01"))
    assert gemini_service.generate_speech("Hello") == b"\x00\x01"
    call = client.models.calls[0]
    assert call.model == gemini_service.TTS_MODEL
    assert call.config.speech_config.voice_config.prebuilt_voice_config.voice_name == "Kore"


def test_generate_speech_returns_none_without_audio(fake_gemini):
    fake_gemini(_speech_response(None))
    assert gemini_service.generate_speech("Hello") is None


def test_generate_speech_returns_none_on_error(fake_gemini):
    fake_gemini(RuntimeError("boom"))
    assert gemini_service.generate_speech("Hello") is None


def test_transcribe_audio_strips_text(fake_gemini):
    client = fake_gemini(text_response("  my landlord leaked my data \n"))
    assert gemini_service.transcribe_audio(b"RIFF", "audio/wav", "English") == "my landlord leaked my data"
    assert client.models.calls[0].contents[1].inline_data.mime_type == "audio/wav"


def test_transcribe_audio_raises_gateway_error(fake_gemini):
    fake_gemini(RuntimeError("boom"))
    with pytest.raises(gemini_service.GatewayError):
        gemini_service.transcribe_audio(b"RIFF")


def test_live_connect_config_requests_audio_and_transcripts():
    config = gemini_service.live_connect_config()
    assert config.response_modalities == ["AUDIO"]
    assert config.speech_config.voice_config.prebuilt_voice_config.voice_name == "Zephyr"
    assert config.input_audio_transcription is not None
    assert config.output_audio_transcription is not None
