"""
Voice consultation with Cylex over the live audio API.

Each recorded clip is one turn: the session is opened, the transcript so far is
replayed as context, the clip is streamed as 16 kHz PCM frames and the spoken
reply is collected until the model completes its turn.
"""
import logging
from dataclasses import dataclass
from typing import List

from google.genai import types

from audio_utils import (
    INPUT_SAMPLE_RATE,
    OUTPUT_SAMPLE_RATE,
    PlaybackQueue,
    encode_pcm_blob,
    iter_frames,
    read_audio,
    resample,
    to_wav_bytes,
)
from gemini_service import connect_cylex_voice

logger = logging.getLogger(__name__)

STATUSES = ("disconnected", "connecting", "connected", "error")


@dataclass
class TranscriptEntry:
    speaker: str  # "user" or "model"
    text: str


class VoiceConsultation:
    def __init__(self, connect=connect_cylex_voice):
        self._connect = connect
        self.status = "disconnected"
        self.transcript: List[TranscriptEntry] = []
        self.playback = PlaybackQueue(OUTPUT_SAMPLE_RATE)
        self._input_text = ""
        self._output_text = ""

    def handle_message(self, message) -> bool:
        """Apply one server message; returns True once the model turn is complete."""
        content = getattr(message, "server_content", None)
        if content is None:
            return False
        if content.input_transcription and content.input_transcription.text:
            self._input_text += content.input_transcription.text
        if content.output_transcription and content.output_transcription.text:
            self._output_text += content.output_transcription.text
        if content.model_turn and content.model_turn.parts:
            for part in content.model_turn.parts:
                if part.inline_data and part.inline_data.data:
                    self.playback.schedule_pcm(part.inline_data.data)
        if getattr(content, "interrupted", None):
            self.playback.reset()
        if content.turn_complete:
            if self._input_text.strip():
                self.transcript.append(TranscriptEntry("user", self._input_text.strip()))
            if self._output_text.strip():
                self.transcript.append(TranscriptEntry("model", self._output_text.strip()))
            self._input_text = ""
            self._output_text = ""
            return True
        return False

    def _history_turns(self):
        return [
            types.Content(role=entry.speaker, parts=[types.Part.from_text(text=entry.text)])
            for entry in self.transcript
        ]

    async def consult(self, wav_bytes: bytes) -> bool:
        self.status = "connecting"
        self.playback.reset()
        try:
            samples, rate = read_audio(wav_bytes)
            pcm = resample(samples, rate, INPUT_SAMPLE_RATE)
            async with self._connect() as session:
                self.status = "connected"
                history = self._history_turns()
                if history:
                    await session.send_client_content(turns=history, turn_complete=False)
                for frame in iter_frames(pcm):
                    await session.send_realtime_input(audio=encode_pcm_blob(frame, INPUT_SAMPLE_RATE))
                await session.send_realtime_input(audio_stream_end=True)
                async for message in session.receive():
                    if self.handle_message(message):
                        break
            self.status = "disconnected"
        except Exception:
            logger.exception("Voice consultation failed")
            self.stop()
            self.status = "error"
            return False
        return True

    def reply_audio(self):
        """WAV bytes of the last spoken reply, or None."""
        if not self.playback.chunks:
            return None
        return to_wav_bytes(self.playback.render(), self.playback.sample_rate)

    def stop(self):
        self.status = "disconnected"
        self.playback.reset()
        self._input_text = ""
        self._output_text = ""
