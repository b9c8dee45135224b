"""Top-level Portkey gateway client."""

from portkey_client.client.config import ClientConfig, ConfigBuilder
from portkey_client.client.pipeline import RequestPipeline
from portkey_client.logging.structured import get_logger
from portkey_client.services.assistants import AssistantsService
from portkey_client.services.audio import AudioService
from portkey_client.services.batches import BatchesService
from portkey_client.services.chat import ChatService
from portkey_client.services.completions import CompletionsService
from portkey_client.services.embeddings import EmbeddingsService
from portkey_client.services.feedback import FeedbackService
from portkey_client.services.files import FilesService
from portkey_client.services.fine_tuning import FineTuningService
from portkey_client.services.images import ImagesService
from portkey_client.services.logs import LogsService
from portkey_client.services.messages import MessagesService
from portkey_client.services.models import ModelsService
from portkey_client.services.moderations import ModerationsService
from portkey_client.services.prompts import PromptsService
from portkey_client.services.responses import ResponsesService
from portkey_client.services.runs import RunsService
from portkey_client.services.threads import ThreadsService

logger = get_logger("client")


class PortkeyClient:
    """Entry point: one config, one connection pool, one service per resource.

    Usage::

        async with PortkeyClient.from_env() as client:
            response = await client.chat.create_completion(request)
    """

    def __init__(self, config: ClientConfig):
        self.config = config
        self._pipeline = RequestPipeline(config)

        self.chat = ChatService(self._pipeline)
        self.completions = CompletionsService(self._pipeline)
        self.embeddings = EmbeddingsService(self._pipeline)
        self.assistants = AssistantsService(self._pipeline)
        self.threads = ThreadsService(self._pipeline)
        self.messages = MessagesService(self._pipeline)
        self.runs = RunsService(self._pipeline)
        self.batches = BatchesService(self._pipeline)
        self.files = FilesService(self._pipeline)
        self.fine_tuning = FineTuningService(self._pipeline)
        self.images = ImagesService(self._pipeline)
        self.audio = AudioService(self._pipeline)
        self.moderations = ModerationsService(self._pipeline)
        self.models = ModelsService(self._pipeline)
        self.logs = LogsService(self._pipeline)
        self.feedback = FeedbackService(self._pipeline)
        self.prompts = PromptsService(self._pipeline)
        self.responses = ResponsesService(self._pipeline)

        logger.debug(
            "Portkey client created",
            extra={"log_data": {"base_url": config.base_url, "api_key": config.masked_api_key()}},
        )

    def __repr__(self) -> str:
        return f"PortkeyClient(config={self.config!r})"

    @staticmethod
    def builder() -> ConfigBuilder:
        return ConfigBuilder()

    @classmethod
    def from_env(cls) -> "PortkeyClient":
        return cls(ClientConfig.from_env())

    @property
    def pipeline(self) -> RequestPipeline:
        return self._pipeline

    async def aclose(self) -> None:
        await self._pipeline.aclose()

    async def __aenter__(self) -> "PortkeyClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
