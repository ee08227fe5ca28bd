"""Media upload client for hosting article images."""

import logging
import mimetypes
from pathlib import Path

from .client import Client
from .exceptions import ValidationError

logger = logging.getLogger(__name__)


class MediaClient(Client):
    """Client for the backend's media endpoints.

    Turns a local image file into a stable hosted URL. Images are uploaded
    as-is; any resizing or compression happens before they get here.

    Example:
        config = {"base_url": "http://localhost:8080"}
        with MediaClient(config) as client:
            url = client.upload(Path("photo.jpg"))
    """

    API_PATH = "/api/media"

    def fetch(self, filename: str) -> bytes:
        """Download a hosted media file by name."""
        response = self.get(f"{self.API_PATH}/{filename}")
        return response.content

    def upload(self, image_path: Path) -> str:
        """Upload an image and return its hosted URL.

        Raises:
            FileNotFoundError: If the image does not exist
            ValidationError: If the backend did not return a URL
        """
        data = self._upload(f"{self.API_PATH}/upload", image_path)
        return self._require(data, "url")

    def upload_with_thumbnail(self, image_path: Path) -> tuple[str, str]:
        """Upload an image and return its hosted URL and thumbnail URL."""
        data = self._upload(f"{self.API_PATH}/upload-with-thumbnail", image_path)
        return self._require(data, "url"), self._require(data, "thumbnailUrl")

    def remove(self, filename: str) -> None:
        """Delete a hosted media file by name."""
        self.delete(f"{self.API_PATH}/{filename}")

    def _upload(self, path: str, image_path: Path) -> dict:
        media_type = mimetypes.guess_type(image_path.name)[0] or "application/octet-stream"

        content = image_path.read_bytes()
        response = self.post(path, files={"file": (image_path.name, content, media_type)})

        data = self._json(response)
        if not isinstance(data, dict):
            raise ValidationError(f"Unexpected upload response for {image_path.name}")

        logger.info(f"Uploaded {image_path.name}")
        return data

    def _require(self, data: dict, key: str) -> str:
        value = data.get(key)
        if not isinstance(value, str) or not value:
            raise ValidationError(f"Upload response is missing '{key}'")
        return value
