"""
Gemini gateway for the Cyber Legal Experts tools.

Builds the prompts, declares the JSON response schemas and calls the google-genai
client. Free-text tools degrade to a fallback message, structured tools raise
GatewayError with a message fit for the UI.
"""
import base64
import logging
import os
import re
from typing import List, Optional

import streamlit as st
from dotenv import load_dotenv
from google import genai
from google.genai import types
from pydantic import TypeAdapter

from schemas import (
    CaseDna,
    ContractAudit,
    CyberRiskAssessment,
    GroundedText,
    GroundingSource,
    LawRelevance,
    PrecedentPrediction,
    QuizQuestion,
)

load_dotenv()

logger = logging.getLogger(__name__)

FLASH_MODEL = os.getenv("GEMINI_FLASH_MODEL", "gemini-2.5-flash")
PRO_MODEL = os.getenv("GEMINI_PRO_MODEL", "gemini-2.5-pro")
TTS_MODEL = os.getenv("GEMINI_TTS_MODEL", "gemini-2.5-flash-preview-tts")
LIVE_MODEL = os.getenv("GEMINI_LIVE_MODEL", "gemini-2.5-flash-native-audio-preview-09-2025")

THINKING_BUDGET = 32768
SPEECH_VOICE = "Kore"
LIVE_VOICE = "Zephyr"

CYLEX_SYSTEM_INSTRUCTION = """You are Cylex, a highly intelligent and proactive AI legal assistant for Cyber Legal Experts. Your core purpose is to act as a legal copilot, not just an information source. Your expertise is in cyber laws, data privacy, digital forensics, and intellectual property theft. You are precise, helpful, and always maintain a formal yet approachable tone.

Your defining characteristic is being proactive. After answering any query, you MUST anticipate the user's next logical step and offer concrete assistance. Do not wait to be asked. For example:
- If a user describes IP theft, you MUST offer: "Based on what you've described, shall I draft a cease and desist letter?"
- If a user discusses launching a new app, you MUST ask: "Would you like me to help generate a draft for your Privacy Policy or Terms of Service?"
- If sensitive information is mentioned, you MUST suggest: "It sounds like a Non-Disclosure Agreement (NDA) would be appropriate here. Shall I create one for you?"

When analyzing documents or images, you must be exceptionally inquisitive and adopt a critical mindset. Your goal is to uncover hidden risks. Actively probe for ambiguities, omissions, or clauses that could disadvantage the user. For instance:
- When reviewing a contract, ask targeted questions like: "I've noticed the liability clause in section 4.2 is quite broad. Have you considered the potential implications of this?" or "Is there a data processing agreement (DPA) that should accompany this service agreement?"

Always remember: You do not provide legal advice, but you empower users by generating drafts (case notes, notices, compliance reports) based on the information they provide and helping them formulate personalized legal action plans. Your role is to assist and highlight potential issues for their review with a qualified legal professional."""

CYLEX_VOICE_INSTRUCTION = (
    "You are Cylex, an AI legal assistant. Be concise, professional, and helpful. "
    "Keep your answers brief and to the point."
)

DOCUMENT_ERROR = ("An error occurred while analyzing the document. "
                  "Please ensure your API key is valid and try again.")
NEWS_ERROR = ("An error occurred while fetching news. "
              "Please ensure your API key is valid and try again.")
PLAN_ERROR = ("An error occurred while generating the action plan. "
              "Please ensure your API key is valid and try again.")
ARTICLE_ERROR = "Could not generate summary."
QUIZ_LENGTH = 5
QUIZ_ERROR = "Failed to generate the quiz. Please try again."
RELEVANCE_ERROR = "Unable to get an explanation right now."

_DATA_URL = re.compile(r"^data:([\w.+-]+/[\w.+-]+);base64,(.+)$", re.DOTALL)


class GatewayError(RuntimeError):
    """A structured AI call failed; the message is safe to show to users."""


@st.cache_resource
def get_client():
    api_key = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
    return genai.Client(api_key=api_key)


def _client():
    return get_client()


def _thinking_config(**kwargs):
    return types.GenerateContentConfig(
        thinking_config=types.ThinkingConfig(thinking_budget=THINKING_BUDGET),
        **kwargs,
    )


def _json_config(schema, thinking=True):
    kwargs = {"response_mime_type": "application/json", "response_schema": schema}
    if thinking:
        return _thinking_config(**kwargs)
    return types.GenerateContentConfig(**kwargs)


def _search_config():
    return types.GenerateContentConfig(tools=[types.Tool(google_search=types.GoogleSearch())])


def _language_clause(language):
    if not language or language == "English":
        return ""
    return f"\n\nRespond in {language}."


def extract_sources(response) -> List[GroundingSource]:
    """Web citations of the first candidate; non-web chunks are skipped."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []
    sources = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        if web is None or not getattr(web, "uri", None):
            continue
        sources.append(GroundingSource(uri=web.uri, title=getattr(web, "title", None) or web.uri))
    return sources


# ===== Cylex chat =====

def build_system_instruction(context=None):
    if context is None:
        return CYLEX_SYSTEM_INSTRUCTION
    return (
        f"{CYLEX_SYSTEM_INSTRUCTION}\n\n"
        "Context about the user you are talking to (use it to personalise greetings, deadlines and "
        "jurisdiction-specific guidance):\n"
        f"- Location: {context.location}\n"
        f"- Local time: {context.time}\n"
        f"- Date: {context.date}\n"
        f"- Device: {context.device_type}\n"
        f"- Operating system: {context.operating_system}\n"
        f"- Preferred language: {context.language}. Always answer in this language."
    )


def data_url_to_part(data_url: str) -> types.Part:
    match = _DATA_URL.match(data_url or "")
    if not match:
        raise ValueError("Invalid base64 string")
    mime_type, data = match.groups()
    return types.Part.from_bytes(data=base64.b64decode(data), mime_type=mime_type)


def _history_contents(history):
    contents = []
    for msg in history or []:
        parts = []
        if msg.content:
            parts.append(types.Part.from_text(text=msg.content))
        for attachment in msg.attachments:
            parts.append(data_url_to_part(attachment.data))
        if parts:
            contents.append(types.Content(role=msg.role, parts=parts))
    return contents


def create_cylex_chat(context=None, history=None):
    return _client().chats.create(
        model=FLASH_MODEL,
        config=types.GenerateContentConfig(system_instruction=build_system_instruction(context)),
        history=_history_contents(history),
    )


def send_cylex_message(chat, message: str, attachment: Optional[str] = None) -> str:
    parts = [types.Part.from_text(text=message)]
    if attachment:
        parts.append(data_url_to_part(attachment))
    response = chat.send_message(parts)
    return response.text


# ===== Free-text tools =====

def analyze_document(document_text: str) -> str:
    prompt = ("Please analyze the following legal document for potential risks, inconsistencies, or areas of "
              "concern. Provide a detailed, well-structured summary of your findings using markdown for "
              f"formatting. Document text:\n\n---\n\n{document_text}")
    try:
        response = _client().models.generate_content(model=PRO_MODEL, contents=prompt, config=_thinking_config())
        return response.text
    except Exception:
        logger.exception("Error analyzing document")
        return DOCUMENT_ERROR


def summarize_legal_news(topic: str, language: str = "English") -> GroundedText:
    prompt = (f"Summarize the latest court rulings or news regarding: {topic}. "
              f"Provide a concise but comprehensive summary.{_language_clause(language)}")
    try:
        response = _client().models.generate_content(model=FLASH_MODEL, contents=prompt, config=_search_config())
        return GroundedText(text=response.text or "", sources=extract_sources(response))
    except Exception:
        logger.exception("Error summarizing news")
        return GroundedText(text=NEWS_ERROR)


def generate_legal_action_plan(case_details: str) -> str:
    prompt = ("Based on the following case details, generate a personalized, step-by-step legal action plan. "
              "This plan should be for informational purposes only and not constitute legal advice. It should "
              "outline potential actions, considerations, and next steps in a clear, organized manner using "
              f"markdown. Case details:\n\n---\n\n{case_details}")
    try:
        response = _client().models.generate_content(model=PRO_MODEL, contents=prompt, config=_thinking_config())
        return response.text
    except Exception:
        logger.exception("Error generating action plan")
        return PLAN_ERROR


def summarize_article(article_content: str) -> str:
    prompt = f"Summarize the following article in three concise bullet points. Article:\n\n---\n\n{article_content}"
    try:
        response = _client().models.generate_content(model=FLASH_MODEL, contents=prompt)
        return response.text
    except Exception:
        logger.exception("Error summarizing article")
        return ARTICLE_ERROR


# ===== Structured tools =====

def _generate_structured(model, prompt, schema, error_message, thinking=True):
    try:
        response = _client().models.generate_content(
            model=model, contents=prompt, config=_json_config(schema, thinking=thinking)
        )
        if isinstance(schema, type):
            return schema.model_validate_json(response.text)
        return TypeAdapter(schema).validate_json(response.text)
    except Exception as e:
        logger.exception(error_message)
        raise GatewayError(error_message) from e


def analyze_case_dna(case_details: str) -> CaseDna:
    prompt = ("Analyze the following case description or document. Extract a detailed timeline of events, "
              "identify all key entities (people, organizations, digital assets), summarize evidence patterns, "
              f"and list potential legal liabilities. Case Details:\n\n---\n\n{case_details}")
    return _generate_structured(
        PRO_MODEL, prompt, CaseDna,
        "An error occurred during the Case DNA analysis. Please try again.",
    )


def assess_cyber_risk(text: str, language: str = "English") -> CyberRiskAssessment:
    prompt = ("Act as a senior cyber risk analyst. Analyze the following text (which could be a privacy policy, "
              "terms of service, contract, or description of a digital presence) for potential cyber and legal "
              "risks. Based on your analysis, provide a structured JSON response. Keep riskLevel in English; "
              f"write summary, risks and recommendations in {language or 'English'}. "
              f"Text for analysis:\n\n---\n\n{text}")
    return _generate_structured(
        PRO_MODEL, prompt, CyberRiskAssessment,
        "An error occurred during the cyber risk assessment. Please try again.",
    )


def predict_precedent(case_details: str) -> PrecedentPrediction:
    prompt = ("Act as an expert legal analyst specializing in case law and precedent. Analyze the following case "
              "description. Based on historical data and legal precedents, predict the most likely outcomes, "
              "identify the key legal statutes or sections of law that are relevant, and suggest potential legal "
              f"strategies. Provide a structured JSON response. Case details:\n\n---\n\n{case_details}")
    return _generate_structured(
        PRO_MODEL, prompt, PrecedentPrediction,
        "An error occurred during the precedent prediction. Please try again.",
    )


def audit_smart_contract(code: str, language: str = "English") -> ContractAudit:
    prompt = ("Act as a senior smart contract security auditor with legal expertise in digital assets. Audit the "
              "following smart contract source code. Identify security vulnerabilities (with the line number when "
              "you can locate it and a severity of 'Critical', 'High', 'Medium' or 'Low'), give an overall "
              "security score from 0 to 100, list the legal and regulatory risks the contract raises, and write "
              f"a short summary. Keep severity values in English; write descriptions in {language or 'English'}. "
              f"Provide a structured JSON response. Contract code:\n\n---\n\n{code}")
    return _generate_structured(
        PRO_MODEL, prompt, ContractAudit,
        "An error occurred during the smart contract audit. Please try again.",
    )


def generate_quiz_questions() -> List[QuizQuestion]:
    prompt = ("Generate a 5-question multiple-choice quiz about cyber law. Topics can include data privacy (like "
              "GDPR or CCPA), computer fraud, and digital intellectual property. For each question, provide a "
              "question, four options, the 0-indexed integer of the correct answer, and a brief explanation for "
              "why that answer is correct. Ensure the questions are unique and challenging.")
    questions = _generate_structured(PRO_MODEL, prompt, list[QuizQuestion], QUIZ_ERROR, thinking=False)
    if len(questions) != QUIZ_LENGTH:
        logger.error("Quiz came back with %d questions instead of %d", len(questions), QUIZ_LENGTH)
        raise GatewayError(QUIZ_ERROR)
    return questions


def explain_law_relevance(scenario: str, law: dict) -> LawRelevance:
    prompt = f"""Based on the following scenario:
{scenario}

and on the details of this law:
Name: {law.get("Title", "")}
Jurisdiction: {law.get("Country", "")}
Summary: {law.get("Summary", "")}

Explain concisely and professionally why this law can help in this case, and rate it from 0 to 10 where 0 means
the law cannot help at all and is unrelated, and 10 means it fits like a glove and is exactly what the user
described. Be strict with the score and vary it; do not give 9 to everything."""
    try:
        response = _client().models.generate_content(
            model=FLASH_MODEL, contents=prompt, config=_json_config(LawRelevance, thinking=False)
        )
        return LawRelevance.model_validate_json(response.text)
    except Exception:
        logger.exception("Error getting law explanation")
        return LawRelevance(advice=RELEVANCE_ERROR, score=None)


# ===== Grounded tools =====

def _generate_grounded(prompt, error_message) -> GroundedText:
    try:
        response = _client().models.generate_content(model=FLASH_MODEL, contents=prompt, config=_search_config())
        return GroundedText(text=response.text or "", sources=extract_sources(response))
    except Exception as e:
        logger.exception(error_message)
        raise GatewayError(error_message) from e


def get_cyber_law_info(region: str, language: str = "English") -> GroundedText:
    prompt = (f"Provide an up-to-date briefing on the cyber law landscape in {region}. Use Google Search for "
              "current information. Organise it in numbered sections covering: 1. Key data protection and privacy "
              "laws, 2. Cybercrime legislation, 3. Regulators and enforcement, 4. Recent developments and notable "
              "rulings, 5. Practical compliance tips for businesses. Under each section use '* ' bullet points and "
              f"**bold** for law names. Write the whole briefing in {language or 'English'}.")
    return _generate_grounded(prompt, "An error occurred while fetching the regional cyber law information.")


def generate_newsletter(region: str) -> GroundedText:
    prompt = (f'Generate a professional legal newsletter for the region of "{region}". The newsletter should cover '
              "recent court rulings, new legislation, and significant news related to cyber law, data privacy, and "
              "intellectual property. Use Google Search to find up-to-date information. Format the output using "
              "markdown, including headings for different sections and links to the original sources where "
              "possible. Title the newsletter appropriately.")
    return _generate_grounded(prompt, "An error occurred while generating the newsletter.")


# ===== Audio =====

def _speech_config(voice_name):
    return types.SpeechConfig(
        voice_config=types.VoiceConfig(
            prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=voice_name),
        ),
    )


def generate_speech(text: str) -> Optional[bytes]:
    """Raw 24 kHz mono 16-bit PCM for the text, or None."""
    try:
        response = _client().models.generate_content(
            model=TTS_MODEL,
            contents=f"Say clearly: {text}",
            config=types.GenerateContentConfig(
                response_modalities=[types.Modality.AUDIO],
                speech_config=_speech_config(SPEECH_VOICE),
            ),
        )
        part = response.candidates[0].content.parts[0]
        data = part.inline_data.data if part.inline_data else None
        return data or None
    except Exception:
        logger.exception("Error generating speech")
        return None


def transcribe_audio(audio_bytes: bytes, mime_type: str = "audio/wav", language: str = "English") -> str:
    prompt = (f"Transcribe this recording verbatim. The speaker is most likely using {language or 'English'}. "
              "Return only the transcript text.")
    try:
        response = _client().models.generate_content(
            model=FLASH_MODEL,
            contents=[prompt, types.Part.from_bytes(data=audio_bytes, mime_type=mime_type)],
        )
        return (response.text or "").strip()
    except Exception as e:
        logger.exception("Error transcribing audio")
        raise GatewayError("Could not transcribe the recording. Please try again.") from e


def live_connect_config() -> types.LiveConnectConfig:
    return types.LiveConnectConfig(
        response_modalities=[types.Modality.AUDIO],
        speech_config=_speech_config(LIVE_VOICE),
        system_instruction=CYLEX_VOICE_INSTRUCTION,
        input_audio_transcription=types.AudioTranscriptionConfig(),
        output_audio_transcription=types.AudioTranscriptionConfig(),
    )


def connect_cylex_voice():
    """Async context manager yielding a live session."""
    return _client().aio.live.connect(model=LIVE_MODEL, config=live_connect_config())
