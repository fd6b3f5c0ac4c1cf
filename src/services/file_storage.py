"""UploadThing file storage client for item photos."""

import logging
import re

import httpx

from src.config import get_settings

logger = logging.getLogger(__name__)

# Hosted files look like https://utfs.io/f/<FILE_KEY>
FILE_KEY_PATTERN = re.compile(r"/f/([^/?#]+)")


def extract_file_key(url: str | None) -> str | None:
    """Extract the UploadThing file key from a hosted file URL."""
    if not url:
        return None
    match = FILE_KEY_PATTERN.search(url)
    return match.group(1) if match else None


class FileStorageClient:
    """Thin client for the UploadThing REST API."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            timeout=timeout,
            headers={"x-uploadthing-api-key": api_key},
            transport=transport,
        )

    def delete_files(self, file_keys: list[str]) -> dict:
        """Delete hosted files by key. Raises httpx.HTTPError on failure."""
        response = self._client.post(
            f"{self.base_url}/v6/deleteFiles",
            json={"fileKeys": file_keys},
        )
        response.raise_for_status()
        return response.json()

    def close(self) -> None:
        self._client.close()


# Shared client so connections are pooled across requests
_file_storage_client: FileStorageClient | None = None


def get_file_storage_client() -> FileStorageClient | None:
    """Get the shared storage client, or None if UploadThing is not configured."""
    global _file_storage_client
    if _file_storage_client is None:
        settings = get_settings()
        if not settings.uploadthing_secret:
            return None
        _file_storage_client = FileStorageClient(
            api_key=settings.uploadthing_secret,
            base_url=settings.uploadthing_api_url,
            timeout=settings.file_storage_timeout,
        )
    return _file_storage_client


def close_file_storage_client() -> None:
    """Close the shared storage client, if one was created."""
    global _file_storage_client
    if _file_storage_client is not None:
        _file_storage_client.close()
        _file_storage_client = None


def delete_item_image(image_url: str | None) -> bool:
    """Delete the hosted image behind ``image_url``.

    Runs after the item's row is already gone. Never raises: a file left
    behind in storage is logged and otherwise ignored.

    Returns True if the storage provider accepted the deletion.
    """
    file_key = extract_file_key(image_url)
    if file_key is None:
        return False

    client = get_file_storage_client()
    if client is None:
        logger.info(f"UploadThing not configured, leaving file {file_key} in storage")
        return False

    try:
        client.delete_files([file_key])
    except httpx.HTTPError as e:
        logger.warning(f"Failed to delete file {file_key} from UploadThing: {e}")
        return False
    except Exception as e:
        # Don't let cleanup errors escape the background task
        logger.warning(f"Unexpected error deleting file {file_key}: {e}", exc_info=True)
        return False

    logger.info(f"Deleted file {file_key} from UploadThing")
    return True
