"""Tests for the batches, fine-tuning, images and audio services."""

import pytest

from conftest import RecordingTransport
from portkey_client.models.audio import (
    AudioFile,
    CreateSpeechRequest,
    CreateTranscriptionRequest,
    CreateTranslationRequest,
)
from portkey_client.models.batches import CreateBatchRequest
from portkey_client.models.common import PaginationParams
from portkey_client.models.fine_tuning import CreateFineTuningJobRequest, Hyperparameters
from portkey_client.models.images import (
    CreateImageEditRequest,
    CreateImageRequest,
    CreateImageVariationRequest,
    ImageFile,
)

BATCH = {
    "id": "batch_1",
    "object": "batch",
    "endpoint": "/v1/chat/completions",
    "input_file_id": "file-1",
    "completion_window": "24h",
    "status": "validating",
    "created_at": 1,
    "request_counts": {"total": 10, "completed": 0, "failed": 0},
}
JOB = {
    "id": "ftjob-1",
    "object": "fine_tuning.job",
    "created_at": 1,
    "model": "gpt-4o-mini",
    "status": "queued",
    "training_file": "file-1",
    "hyperparameters": {"n_epochs": "auto"},
}
IMAGES = {"created": 1, "data": [{"url": "https://img.example.com/1.png"}]}


class TestBatchesService:

    async def test_create(self, make_client):
        transport = RecordingTransport(body=BATCH)
        client = make_client(transport)
        batch = await client.batches.create(
            CreateBatchRequest(input_file_id="file-1", endpoint="/v1/chat/completions")
        )
        assert transport.last.url.path == "/v1/batches"
        assert transport.last_json() == {
            "input_file_id": "file-1",
            "endpoint": "/v1/chat/completions",
            "completion_window": "24h",
        }
        assert batch.request_counts.total == 10

    async def test_retrieve_cancel(self, make_client):
        transport = RecordingTransport(body=BATCH)
        client = make_client(transport)
        await client.batches.retrieve("batch_1")
        assert (transport.last.method, transport.last.url.path) == ("GET", "/v1/batches/batch_1")
        await client.batches.cancel("batch_1")
        assert (transport.last.method, transport.last.url.path) == ("POST", "/v1/batches/batch_1/cancel")

    async def test_list_query(self, make_client):
        transport = RecordingTransport(body={"data": [BATCH]})
        client = make_client(transport)
        await client.batches.list(after="batch_0", limit=5)
        assert transport.last.url.query == b"after=batch_0&limit=5"
        await client.batches.list()
        assert transport.last.url.query == b""


class TestFineTuningService:

    async def test_create_job(self, make_client):
        transport = RecordingTransport(body=JOB)
        client = make_client(transport)
        request = CreateFineTuningJobRequest(
            model="gpt-4o-mini",
            training_file="file-1",
            hyperparameters=Hyperparameters(n_epochs=3),
        )
        job = await client.fine_tuning.create_job(request)
        assert transport.last.url.path == "/v1/fine_tuning/jobs"
        assert transport.last_json()["hyperparameters"] == {"n_epochs": 3}
        assert job.hyperparameters.n_epochs == "auto"

    @pytest.mark.parametrize("operation, method, path", [
        ("retrieve_job", "GET", "/v1/fine_tuning/jobs/ftjob-1"),
        ("cancel_job", "POST", "/v1/fine_tuning/jobs/ftjob-1/cancel"),
    ])
    async def test_job_by_id(self, make_client, operation, method, path):
        transport = RecordingTransport(body=JOB)
        client = make_client(transport)
        await getattr(client.fine_tuning, operation)("ftjob-1")
        assert (transport.last.method, transport.last.url.path) == (method, path)

    async def test_lists(self, make_client):
        transport = RecordingTransport(body={"data": [JOB]})
        client = make_client(transport)
        await client.fine_tuning.list_jobs(PaginationParams(limit=3))
        assert transport.last.url.path == "/v1/fine_tuning/jobs"
        assert transport.last.url.query == b"limit=3"

        transport.body = {"data": [{"id": "ev-1", "created_at": 1, "level": "info", "message": "started"}]}
        events = await client.fine_tuning.list_events("ftjob-1")
        assert transport.last.url.path == "/v1/fine_tuning/jobs/ftjob-1/events"
        assert events.data[0].message == "started"

        transport.body = {"data": [{
            "id": "ckpt-1",
            "created_at": 1,
            "fine_tuned_model_checkpoint": "ft:gpt-4o-mini:ckpt-1",
            "step_number": 100,
            "metrics": {"train_loss": 0.5},
            "fine_tuning_job_id": "ftjob-1",
        }]}
        checkpoints = await client.fine_tuning.list_checkpoints("ftjob-1")
        assert transport.last.url.path == "/v1/fine_tuning/jobs/ftjob-1/checkpoints"
        assert checkpoints.data[0].step_number == 100


class TestImagesService:

    async def test_generate_is_json(self, make_client):
        transport = RecordingTransport(body=IMAGES)
        client = make_client(transport)
        response = await client.images.generate(
            CreateImageRequest(prompt="a lighthouse", model="dall-e-3", size="1024x1024")
        )
        assert transport.last.url.path == "/v1/images/generations"
        assert transport.last.headers["content-type"] == "application/json"
        assert transport.last_json() == {"prompt": "a lighthouse", "model": "dall-e-3", "size": "1024x1024"}
        assert response.data[0].url == "https://img.example.com/1.png"

    async def test_edit_with_mask(self, make_client):
        transport = RecordingTransport(body=IMAGES)
        client = make_client(transport)
        await client.images.edit(
            ImageFile(content=b"PNGDATA", filename="in.png"),
            CreateImageEditRequest(prompt="add a boat", n=2),
            mask=ImageFile(content=b"MASKDATA", filename="mask.png"),
        )
        sent = transport.last
        assert sent.url.path == "/v1/images/edits"
        assert sent.headers["content-type"].startswith("multipart/form-data")
        assert b'name="image"; filename="in.png"' in sent.content
        assert b'name="mask"; filename="mask.png"' in sent.content
        assert b"add a boat" in sent.content
        assert b'name="size"' not in sent.content

    async def test_variation(self, make_client):
        transport = RecordingTransport(body=IMAGES)
        client = make_client(transport)
        await client.images.create_variation(
            ImageFile(content=b"PNGDATA"), CreateImageVariationRequest(response_format="b64_json")
        )
        assert transport.last.url.path == "/v1/images/variations"
        assert b'name="response_format"' in transport.last.content
        assert b'name="mask"' not in transport.last.content


class TestAudioService:

    async def test_transcription(self, make_client):
        transport = RecordingTransport(body={"text": "hello world", "language": "en", "duration": 1.5})
        client = make_client(transport)
        response = await client.audio.create_transcription(
            AudioFile(content=b"ID3audio", filename="clip.mp3"),
            CreateTranscriptionRequest(
                model="whisper-1",
                response_format="verbose_json",
                timestamp_granularities=["word", "segment"],
            ),
        )
        sent = transport.last
        assert sent.url.path == "/v1/audio/transcriptions"
        assert sent.content.count(b'name="timestamp_granularities[]"') == 2
        assert b'filename="clip.mp3"' in sent.content
        assert response.text == "hello world"
        assert response.duration == 1.5

    async def test_transcription_plain_text(self, make_client):
        transport = RecordingTransport(body="1\n00:00:00,000 --> 00:00:01,000\nhello\n")
        client = make_client(transport)
        response = await client.audio.create_transcription(
            AudioFile(content=b"ID3audio"),
            CreateTranscriptionRequest(model="whisper-1", response_format="srt"),
        )
        assert response.text.startswith("1\n00:00:00,000")

    async def test_translation(self, make_client):
        transport = RecordingTransport(body={"text": "good morning"})
        client = make_client(transport)
        response = await client.audio.create_translation(
            AudioFile(content=b"ID3audio"), CreateTranslationRequest(model="whisper-1", temperature=0.0)
        )
        assert transport.last.url.path == "/v1/audio/translations"
        assert b'name="temperature"' in transport.last.content
        assert response.text == "good morning"

    async def test_speech_returns_bytes(self, make_client):
        transport = RecordingTransport(content=b"\xff\xfbMP3", headers={"content-type": "audio/mpeg"})
        client = make_client(transport)
        audio = await client.audio.create_speech(
            CreateSpeechRequest(model="tts-1", input="Hello", voice="alloy")
        )
        assert transport.last.url.path == "/v1/audio/speech"
        assert transport.last_json() == {"model": "tts-1", "input": "Hello", "voice": "alloy"}
        assert audio == b"\xff\xfbMP3"
