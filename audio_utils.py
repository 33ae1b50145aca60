"""
Audio helpers for the voice consultation.

Handles:
- float <-> 16-bit PCM conversion
- resampling microphone audio to the 16 kHz the live session expects
- WAV I/O for st.audio_input / st.audio
- scheduling returned 24 kHz chunks back to back for playback
"""
import io
from typing import Iterator, List, Tuple

import numpy as np
import soundfile as sf

INPUT_SAMPLE_RATE = 16000
OUTPUT_SAMPLE_RATE = 24000
FRAME_SIZE = 4096


def float_to_pcm16(samples) -> bytes:
    """Float samples in [-1, 1] to little-endian int16 bytes; out of range values are clipped."""
    clipped = np.clip(np.asarray(samples, dtype=np.float32), -1.0, 1.0)
    return (clipped * 32767).astype("<i2").tobytes()


def pcm16_to_float(data: bytes, channels: int = 1) -> np.ndarray:
    """Little-endian int16 bytes to float32 shaped (frames, channels)."""
    samples = np.frombuffer(data, dtype="<i2").astype(np.float32) / 32768.0
    frames = len(samples) // channels
    return samples[: frames * channels].reshape(frames, channels)


def encode_pcm_blob(frame, rate: int = INPUT_SAMPLE_RATE) -> dict:
    return {"data": float_to_pcm16(frame), "mime_type": f"audio/pcm;rate={rate}"}


def to_mono(samples) -> np.ndarray:
    samples = np.asarray(samples, dtype=np.float32)
    if samples.ndim == 2:
        return samples.mean(axis=1)
    return samples


def resample(samples, src_rate: int, dst_rate: int) -> np.ndarray:
    """Linear interpolation resample of a mono signal."""
    samples = to_mono(samples)
    if src_rate == dst_rate or len(samples) == 0:
        return samples
    duration = len(samples) / src_rate
    target_length = max(1, int(round(duration * dst_rate)))
    src_times = np.arange(len(samples)) / src_rate
    dst_times = np.arange(target_length) / dst_rate
    return np.interp(dst_times, src_times, samples).astype(np.float32)


def read_audio(wav_bytes: bytes) -> Tuple[np.ndarray, int]:
    samples, rate = sf.read(io.BytesIO(wav_bytes), dtype="float32")
    return to_mono(samples), rate


def to_wav_bytes(samples, rate: int) -> bytes:
    buffer = io.BytesIO()
    sf.write(buffer, np.asarray(samples, dtype=np.float32), rate, format="WAV", subtype="PCM_16")
    return buffer.getvalue()


def pcm16_to_wav_bytes(data: bytes, rate: int = OUTPUT_SAMPLE_RATE) -> bytes:
    return to_wav_bytes(pcm16_to_float(data)[:, 0], rate)


def iter_frames(samples, frame_size: int = FRAME_SIZE) -> Iterator[np.ndarray]:
    samples = np.asarray(samples)
    for start in range(0, len(samples), frame_size):
        yield samples[start:start + frame_size]


class PlaybackQueue:
    """Lays returned audio chunks on one timeline so they play gap-free and in order."""

    def __init__(self, sample_rate: int = OUTPUT_SAMPLE_RATE):
        self.sample_rate = sample_rate
        self.next_start = 0.0
        self.chunks: List[Tuple[float, np.ndarray]] = []

    def schedule(self, chunk, current_time: float = 0.0) -> float:
        """Queue a float chunk; returns its start time in seconds."""
        chunk = np.asarray(chunk, dtype=np.float32).reshape(-1)
        start = max(self.next_start, current_time)
        self.chunks.append((start, chunk))
        self.next_start = start + len(chunk) / self.sample_rate
        return start

    def schedule_pcm(self, data: bytes, current_time: float = 0.0) -> float:
        return self.schedule(pcm16_to_float(data)[:, 0], current_time)

    @property
    def duration(self) -> float:
        return self.next_start

    def render(self) -> np.ndarray:
        if not self.chunks:
            return np.zeros(0, dtype=np.float32)
        total = int(round(self.next_start * self.sample_rate))
        buffer = np.zeros(total, dtype=np.float32)
        for start, chunk in self.chunks:
            offset = int(round(start * self.sample_rate))
            end = min(offset + len(chunk), total)
            buffer[offset:end] = chunk[: end - offset]
        return buffer

    def reset(self):
        self.chunks.clear()
        self.next_start = 0.0
