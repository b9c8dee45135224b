"""Image generation, editing and variations."""

from portkey_client.client.pipeline import MultipartForm
from portkey_client.models.images import (
    CreateImageEditRequest,
    CreateImageRequest,
    CreateImageVariationRequest,
    ImageFile,
    ImagesResponse,
)
from portkey_client.services.base import BaseService


def _add_optional(form: MultipartForm, **fields) -> MultipartForm:
    for name, value in fields.items():
        if value is not None:
            form.add_text(name, value)
    return form


class ImagesService(BaseService):

    async def generate(self, request: CreateImageRequest) -> ImagesResponse:
        self._log("Generating image", model=request.model, n=request.n)
        return await self._post("/images/generations", ImagesResponse, request)

    async def edit(
        self,
        image: ImageFile,
        request: CreateImageEditRequest,
        mask: ImageFile | None = None,
    ) -> ImagesResponse:
        form = MultipartForm().add_file("image", image.filename, image.content, image.content_type)
        if mask is not None:
            form.add_file("mask", mask.filename, mask.content, mask.content_type)
        form.add_text("prompt", request.prompt)
        _add_optional(
            form,
            model=request.model,
            n=request.n,
            size=request.size,
            response_format=request.response_format,
            user=request.user,
        )
        self._log("Editing image", filename=image.filename, has_mask=mask is not None)
        return await self._request("POST", "/images/edits", ImagesResponse, multipart=form)

    async def create_variation(
        self, image: ImageFile, request: CreateImageVariationRequest | None = None
    ) -> ImagesResponse:
        request = request or CreateImageVariationRequest()
        form = MultipartForm().add_file("image", image.filename, image.content, image.content_type)
        _add_optional(
            form,
            model=request.model,
            n=request.n,
            size=request.size,
            response_format=request.response_format,
            user=request.user,
        )
        return await self._request("POST", "/images/variations", ImagesResponse, multipart=form)
