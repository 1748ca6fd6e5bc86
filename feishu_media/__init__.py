"""Feishu media upload helpers.

This package uploads images and files to Feishu through a caller-supplied
client and classifies local media paths.

Example:
    >>> from feishu_media import upload_image, upload_file, classify_file_type
    >>> result = await upload_image(client, "/tmp/chart.png")
    >>> result = await upload_file(
    ...     client, pdf_bytes, "report.pdf", classify_file_type("report.pdf")
    ... )
    >>> result.success, getattr(result, "key", None)
"""

from feishu_media.classify import (
    FileType,
    classify_file_type,
    is_audio_path,
    is_image_path,
    sniff_is_image,
)
from feishu_media.client import FeishuMediaClient
from feishu_media.config import MediaConfig
from feishu_media.constants import (
    MAX_UPLOAD_SIZE,
    InvalidRequestError,
    MalformedResponseError,
    MediaUploadError,
    RemoteRejectedError,
    UploadSizeError,
)
from feishu_media.paths import resolve_media_path
from feishu_media.result import (
    FailureReason,
    MediaUpload,
    UploadFailure,
    UploadResult,
    UploadSuccess,
)
from feishu_media.source import BytesSource, MediaSource, PathSource, as_source
from feishu_media.uploader import upload_file, upload_image, upload_media

__all__ = [
    "BytesSource",
    "FailureReason",
    "FeishuMediaClient",
    "FileType",
    "InvalidRequestError",
    "MAX_UPLOAD_SIZE",
    "MalformedResponseError",
    "MediaConfig",
    "MediaSource",
    "MediaUpload",
    "MediaUploadError",
    "PathSource",
    "RemoteRejectedError",
    "UploadFailure",
    "UploadResult",
    "UploadSizeError",
    "UploadSuccess",
    "as_source",
    "classify_file_type",
    "is_audio_path",
    "is_image_path",
    "resolve_media_path",
    "sniff_is_image",
    "upload_file",
    "upload_image",
    "upload_media",
]
