"""Audio transcription, translation and speech types."""

from dataclasses import dataclass, field
from typing import Literal

from portkey_client.models.common import PortkeyModel

TranscriptionResponseFormat = Literal["json", "text", "srt", "verbose_json", "vtt"]


@dataclass
class AudioFile:
    """Binary audio payload for multipart endpoints."""

    content: bytes = field(repr=False)
    filename: str = "audio.mp3"
    content_type: str = "application/octet-stream"


@dataclass
class CreateTranscriptionRequest:
    model: str
    language: str | None = None
    prompt: str | None = None
    response_format: TranscriptionResponseFormat | None = None
    temperature: float | None = None
    timestamp_granularities: list[Literal["word", "segment"]] | None = None


@dataclass
class CreateTranslationRequest:
    model: str
    prompt: str | None = None
    response_format: TranscriptionResponseFormat | None = None
    temperature: float | None = None


class TranscriptionWord(PortkeyModel):
    word: str
    start: float
    end: float


class TranscriptionSegment(PortkeyModel):
    id: int
    seek: int
    start: float
    end: float
    text: str
    tokens: list[int] = []
    temperature: float | None = None
    avg_logprob: float | None = None
    compression_ratio: float | None = None
    no_speech_prob: float | None = None


class TranscriptionResponse(PortkeyModel):
    """Covers both ``json`` and ``verbose_json`` response formats."""

    text: str
    language: str | None = None
    duration: float | str | None = None
    words: list[TranscriptionWord] | None = None
    segments: list[TranscriptionSegment] | None = None


class TranslationResponse(PortkeyModel):
    text: str
    language: str | None = None
    duration: float | str | None = None
    segments: list[TranscriptionSegment] | None = None


class CreateSpeechRequest(PortkeyModel):
    model: str
    input: str
    voice: Literal["alloy", "echo", "fable", "onyx", "nova", "shimmer"] | str
    response_format: Literal["mp3", "opus", "aac", "flac", "wav", "pcm"] | None = None
    speed: float | None = None
