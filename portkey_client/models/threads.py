"""Assistant thread types."""

from portkey_client.models.common import PortkeyModel


class ThreadMessage(PortkeyModel):
    role: str
    content: str
    file_ids: list[str] | None = None
    metadata: dict[str, str] | None = None


class CreateThreadRequest(PortkeyModel):
    messages: list[ThreadMessage] | None = None
    metadata: dict[str, str] | None = None


class ModifyThreadRequest(PortkeyModel):
    metadata: dict[str, str] | None = None


class Thread(PortkeyModel):
    id: str
    object: str = "thread"
    created_at: int
    metadata: dict[str, str] = {}
