from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    message: str


class SuccessResponse(BaseModel):
    success: bool = True
    message: str


class ImageUploadRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_base64: str | None = Field(
        default=None,
        alias="imageBase64",
        description="Base64 image, optionally prefixed with a data URI header",
    )


class ImageUploadResponse(BaseModel):
    success: bool = True
    url: str


class HealthCheckResponse(BaseModel):
    version: str
    status: str
    timestamp: str
    database: str
