"""Speech-to-text and text-to-speech."""

from portkey_client.client.pipeline import MultipartForm, RequestDescriptor
from portkey_client.models.audio import (
    AudioFile,
    CreateSpeechRequest,
    CreateTranscriptionRequest,
    CreateTranslationRequest,
    TranscriptionResponse,
    TranslationResponse,
)
from portkey_client.services.base import BaseService

# Formats the gateway returns as plain text rather than JSON
_PLAIN_TEXT_FORMATS = ("text", "srt", "vtt")


class AudioService(BaseService):

    async def create_transcription(
        self, file: AudioFile, request: CreateTranscriptionRequest
    ) -> TranscriptionResponse:
        form = MultipartForm().add_file("file", file.filename, file.content, file.content_type)
        form.add_text("model", request.model)
        if request.language is not None:
            form.add_text("language", request.language)
        if request.prompt is not None:
            form.add_text("prompt", request.prompt)
        if request.response_format is not None:
            form.add_text("response_format", request.response_format)
        if request.temperature is not None:
            form.add_text("temperature", request.temperature)
        for granularity in request.timestamp_granularities or []:
            form.add_text("timestamp_granularities[]", granularity)

        self._log("Creating transcription", model=request.model, filename=file.filename)
        response = await self._pipeline.execute(
            RequestDescriptor(method="POST", path="/audio/transcriptions", multipart=form)
        )
        if request.response_format in _PLAIN_TEXT_FORMATS:
            return TranscriptionResponse(text=response.text)
        return self._pipeline.parse_json(response, TranscriptionResponse)

    async def create_translation(
        self, file: AudioFile, request: CreateTranslationRequest
    ) -> TranslationResponse:
        form = MultipartForm().add_file("file", file.filename, file.content, file.content_type)
        form.add_text("model", request.model)
        if request.prompt is not None:
            form.add_text("prompt", request.prompt)
        if request.response_format is not None:
            form.add_text("response_format", request.response_format)
        if request.temperature is not None:
            form.add_text("temperature", request.temperature)

        self._log("Creating translation", model=request.model, filename=file.filename)
        response = await self._pipeline.execute(
            RequestDescriptor(method="POST", path="/audio/translations", multipart=form)
        )
        if request.response_format in _PLAIN_TEXT_FORMATS:
            return TranslationResponse(text=response.text)
        return self._pipeline.parse_json(response, TranslationResponse)

    async def create_speech(self, request: CreateSpeechRequest) -> bytes:
        """Synthesized audio bytes in ``request.response_format`` (mp3 by default)."""
        audio = await self._bytes("POST", "/audio/speech", request)
        self._log("Speech generated", model=request.model, voice=request.voice, size=len(audio))
        return audio
