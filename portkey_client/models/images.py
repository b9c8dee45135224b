"""Image generation, edit and variation types."""

from dataclasses import dataclass, field
from typing import Literal

from portkey_client.models.common import PortkeyModel

ImageSize = Literal["256x256", "512x512", "1024x1024", "1792x1024", "1024x1792"]
ImageResponseFormat = Literal["url", "b64_json"]


class CreateImageRequest(PortkeyModel):
    prompt: str
    model: str | None = None
    n: int | None = None
    quality: Literal["standard", "hd"] | None = None
    response_format: ImageResponseFormat | None = None
    size: ImageSize | None = None
    style: Literal["vivid", "natural"] | None = None
    user: str | None = None


@dataclass
class CreateImageEditRequest:
    """Sent as multipart alongside the image (and optional mask) bytes."""

    prompt: str
    model: str | None = None
    n: int | None = None
    size: ImageSize | None = None
    response_format: ImageResponseFormat | None = None
    user: str | None = None


@dataclass
class CreateImageVariationRequest:
    model: str | None = None
    n: int | None = None
    size: ImageSize | None = None
    response_format: ImageResponseFormat | None = None
    user: str | None = None


@dataclass
class ImageFile:
    """Binary image payload for multipart endpoints."""

    content: bytes = field(repr=False)
    filename: str = "image.png"
    content_type: str = "image/png"


class Image(PortkeyModel):
    b64_json: str | None = None
    url: str | None = None
    revised_prompt: str | None = None


class ImagesResponse(PortkeyModel):
    created: int
    data: list[Image]
