"""Image upload route backed by the image host."""

from fastapi import APIRouter

from blog_api.dependencies import ImageHostDep
from blog_api.errors import InvalidInputError
from blog_api.schemas import ImageUploadRequest, ImageUploadResponse

router = APIRouter(tags=["🖼️ Upload"])


@router.post(
    "/upload-image",
    response_model=ImageUploadResponse,
    summary="Upload an image",
    description="Upload a base64 image (optionally a `data:image/*;base64,` URL) and return its URL.",
    responses={
        400: {
            "description": "No image supplied",
            "content": {"application/json": {"example": {"detail": "Image required"}}},
        },
        500: {
            "description": "Image host failure",
            "content": {
                "application/json": {
                    "example": {"detail": "Upload failed", "error": "Server error '502 Bad Gateway'"},
                },
            },
        },
    },
    operation_id="upload_image",
)
async def upload_image(payload: ImageUploadRequest, image_host: ImageHostDep) -> ImageUploadResponse:
    if not payload.image_base64 or not payload.image_base64.strip():
        raise InvalidInputError("Image required")
    return ImageUploadResponse(url=await image_host.upload(payload.image_base64))
