"""Image host client for imgbb uploads."""

from logging import getLogger
from re import compile as re_compile
from typing import Any

from httpx import AsyncClient, HTTPError
from orjson import JSONDecodeError, loads

from blog_api.configs import file_logger, settings
from blog_api.errors import ConfigurationError, ImageUploadError

logger = file_logger(getLogger(__name__))

# ``data:image/png;base64,`` and friends
_DATA_URL_PREFIX = re_compile(r"^data:image/[\w.+-]+;base64,")


def strip_data_url(image_base64: str) -> str:
    return _DATA_URL_PREFIX.sub("", image_base64.strip(), count=1)


class ImageHostClient:
    """
    Upload base64-encoded images to imgbb.

    One ``httpx.AsyncClient`` is shared for the lifetime of the
    application and closed on shutdown.

    Args:
        api_key: imgbb API key
        upload_url: Upload endpoint
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        api_key: str | None = settings.IMGBB_API_KEY,
        upload_url: str = settings.IMGBB_UPLOAD_URL,
        timeout: float = settings.UPLOAD_TIMEOUT,
        client: AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.upload_url = upload_url
        self._client = client or AsyncClient(timeout=timeout)

    async def upload(self, image_base64: str) -> str:
        """
        Upload an image and return its public URL.

        Args:
            image_base64: Raw base64 or a ``data:image/*;base64,`` URL

        Returns:
            str: ``display_url`` of the hosted image, or ``url`` when absent

        Raises:
            ConfigurationError: If no API key is configured
            ImageUploadError: If the host cannot be reached or rejects the image
        """
        if not self.api_key:
            raise ConfigurationError("IMGBB_API_KEY is not configured")

        try:
            response = await self._client.post(
                self.upload_url,
                params={"key": self.api_key},
                data={"image": strip_data_url(image_base64)},
            )
            response.raise_for_status()
            payload: dict[str, Any] = loads(response.content)
        except HTTPError as e:
            logger.warning(f"Image upload failed: {e}")
            raise ImageUploadError(error=str(e)) from e
        except JSONDecodeError as e:
            raise ImageUploadError(error="Image host returned invalid JSON") from e

        data: dict[str, Any] = payload.get("data") or {}
        url = data.get("display_url") or data.get("url")
        if not url:
            raise ImageUploadError(error="Image host response has no URL")

        logger.info("Image uploaded")
        return url

    async def close(self) -> None:
        await self._client.aclose()
