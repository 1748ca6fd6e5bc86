"""Upload images and files to Feishu.

Each upload is a single attempt: check the size locally, open a stream over
the source, call the client once and normalize the response. Upload
functions never raise; every failure is returned as an UploadFailure.

Example:
    >>> result = await upload_image(client, "/tmp/chart.png")
    >>> if result.success:
    ...     send_image_message(chat_id, result.key)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import humanize
from opentelemetry import trace
from opentelemetry.trace import Span, Status, StatusCode

from feishu_media.classify import (
    SNIFF_BYTES,
    FileType,
    classify_file_type,
    is_image_path,
    sniff_is_image,
)
from feishu_media.client import FeishuMediaClient
from feishu_media.config import MediaConfig
from feishu_media.constants import (
    IMAGE_TYPES,
    InvalidRequestError,
    MalformedResponseError,
    MediaUploadError,
    RemoteRejectedError,
    UploadSizeError,
)
from feishu_media.paths import resolve_media_path
from feishu_media.result import MediaUpload, UploadFailure, UploadResult, UploadSuccess
from feishu_media.source import MediaSource, PathSource, SourceLike, as_source

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

# File categories for which Feishu expects a duration
TIMED_FILE_TYPES = frozenset({FileType.OPUS, FileType.MP4})


def _field(obj: Any, name: str) -> Any:
    """Read a response field from either a mapping or an SDK response object."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _extract_key(response: Any, key_field: str) -> str:
    """Return the upload key from a response, checking the top level first, then ``data``.

    A ``code`` of ``None`` counts as absent, the same as a response without a
    code: only a present, non-zero code is a rejection. Likewise the first
    key that is not ``None`` wins, so an empty top-level key is reported as
    missing rather than falling through to ``data``.

    Raises:
        RemoteRejectedError: If the response carries a non-zero code.
        MalformedResponseError: If no key is present.
    """
    code = _field(response, "code")
    if code is not None and code != 0:
        raise RemoteRejectedError(code, _field(response, "msg"))

    key = _field(response, key_field)
    if key is None:
        key = _field(_field(response, "data"), key_field)
    if not key:
        raise MalformedResponseError.missing_key(key_field)
    return key


def _check_size(source: MediaSource, label: str, max_size: int) -> int:
    size = source.size()
    if size > max_size:
        raise UploadSizeError.for_source(label, size, max_size)
    return size


def _failure(exc: Exception, what: str, span: Span) -> UploadFailure:
    failure = UploadFailure.from_exception(exc)
    span.set_status(Status(StatusCode.ERROR, failure.message))
    if isinstance(exc, MediaUploadError):
        logger.warning("Feishu %s upload failed (%s): %s", what, failure.reason.value, exc)
    else:
        logger.warning("Feishu %s upload failed: %s", what, exc, exc_info=True)
    return failure


async def upload_image(
    client: FeishuMediaClient,
    image: SourceLike,
    image_type: str = "message",
    config: MediaConfig | None = None,
) -> UploadResult:
    """Upload an image to Feishu.

    Args:
        client: Object implementing FeishuMediaClient.
        image: Image bytes or a path to a local image file.
        image_type: "message" for chat images, "avatar" for profile pictures.
        config: Upload settings. Defaults to MediaConfig().

    Returns:
        UploadSuccess with the image_key, or UploadFailure.
    """
    config = config or MediaConfig()

    with tracer.start_as_current_span("feishu_media.upload_image") as span:
        span.set_attribute("feishu_media.image_type", image_type)
        try:
            source = as_source(image)
            if image_type not in IMAGE_TYPES:
                raise InvalidRequestError(
                    f"Unsupported image type '{image_type}'. Expected one of: "
                    f"{', '.join(sorted(IMAGE_TYPES))}"
                )

            size = _check_size(source, "Image", config.max_upload_size)
            span.set_attribute("feishu_media.size", size)

            if config.validate_image_content and not sniff_is_image(source.head(SNIFF_BYTES)):
                raise InvalidRequestError("Content is not a supported image")

            with source.open() as stream:
                response = await client.create_image({"image_type": image_type, "image": stream})

            image_key = _extract_key(response, "image_key")
        except Exception as exc:
            return _failure(exc, "image", span)

    logger.debug(
        "Uploaded %s image (%s): %s",
        image_type,
        humanize.naturalsize(size, binary=True),
        image_key,
    )
    return UploadSuccess(image_key)


async def upload_file(
    client: FeishuMediaClient,
    file: SourceLike,
    file_name: str,
    file_type: FileType | str,
    duration: int | None = None,
    config: MediaConfig | None = None,
) -> UploadResult:
    """Upload a file to Feishu.

    Args:
        client: Object implementing FeishuMediaClient.
        file: File bytes or a path to a local file.
        file_name: Name shown in the chat, sent as is.
        file_type: Feishu file category (see FileType).
        duration: Length in milliseconds, for audio and video. Sent only when given.
        config: Upload settings. Defaults to MediaConfig().

    Returns:
        UploadSuccess with the file_key, or UploadFailure.
    """
    config = config or MediaConfig()

    with tracer.start_as_current_span("feishu_media.upload_file") as span:
        try:
            source = as_source(file)
            try:
                category = FileType(file_type)
            except ValueError:
                raise InvalidRequestError(
                    f"Unsupported file type '{file_type}'. Expected one of: "
                    f"{', '.join(t.value for t in FileType)}"
                ) from None
            span.set_attribute("feishu_media.file_type", category.value)

            size = _check_size(source, source.label, config.max_upload_size)
            span.set_attribute("feishu_media.size", size)

            with source.open() as stream:
                data: dict[str, Any] = {
                    "file_type": category.value,
                    "file_name": file_name,
                    "file": stream,
                }
                if duration is not None:
                    data["duration"] = duration
                response = await client.create_file(data)

            file_key = _extract_key(response, "file_key")
        except Exception as exc:
            return _failure(exc, "file", span)

    logger.debug(
        "Uploaded file %s (%s, %s): %s",
        file_name,
        category.value,
        humanize.naturalsize(size, binary=True),
        file_key,
    )
    return UploadSuccess(file_key)


async def upload_media(
    client: FeishuMediaClient,
    raw_path: str,
    duration: int | None = None,
    config: MediaConfig | None = None,
) -> MediaUpload:
    """Upload a local file referenced by path, as an image or as a file.

    The path may be a ``file:///`` URI or start with ``~``. Image extensions
    are uploaded as message images; anything else is uploaded as a file named
    after the path's basename, with its category taken from the extension.
    ``duration`` is forwarded only for audio and video categories.
    """
    path = resolve_media_path(raw_path)
    source = PathSource(Path(path))

    if is_image_path(path):
        return MediaUpload(kind="image", result=await upload_image(client, source, config=config))

    file_name = os.path.basename(path)
    file_type = classify_file_type(file_name)
    result = await upload_file(
        client,
        source,
        file_name,
        file_type,
        duration=duration if file_type in TIMED_FILE_TYPES else None,
        config=config,
    )
    return MediaUpload(kind="file", result=result)
