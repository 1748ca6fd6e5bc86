"""Protocol for the Feishu SDK operations used by the uploader.

Any object exposing these two coroutines can be passed to the upload
functions, so callers can wrap the official SDK, an HTTP client, or a fake.

Example:
    class SdkMediaClient:
        def __init__(self, client):
            self._client = client

        async def create_image(self, data):
            return await self._client.im.image.create(data=data)

        async def create_file(self, data):
            return await self._client.im.file.create(data=data)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FeishuMediaClient(Protocol):
    """Image and file upload endpoints of the Feishu IM API."""

    async def create_image(self, data: Mapping[str, Any]) -> Any:
        """Upload an image.

        Args:
            data: ``{"image_type": "message" | "avatar", "image": <binary stream>}``

        Returns:
            A mapping or object with optional ``code``, ``msg`` and ``image_key``,
            the key possibly nested under ``data``.
        """
        ...

    async def create_file(self, data: Mapping[str, Any]) -> Any:
        """Upload a file.

        Args:
            data: ``{"file_type", "file_name", "file": <binary stream>}`` and an
                optional ``duration`` in milliseconds.

        Returns:
            A mapping or object with optional ``code``, ``msg`` and ``file_key``,
            the key possibly nested under ``data``.
        """
        ...
