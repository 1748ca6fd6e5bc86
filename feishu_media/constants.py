"""Upload limits, extension tables and upload error types.

Size Limits:
    Feishu rejects media larger than 30MB (MAX_UPLOAD_SIZE). The limit can be
    lowered through MediaConfig, but never raised.
"""

from __future__ import annotations

# Feishu image and file upload limit: 30MB
MAX_UPLOAD_SIZE = 30 * 1024 * 1024

IMAGE_TYPES: frozenset[str] = frozenset({"message", "avatar"})

IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    {".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".ico", ".tiff"}
)

AUDIO_EXTENSIONS: frozenset[str] = frozenset(
    {".opus", ".ogg", ".mp3", ".wav", ".m4a", ".aac", ".amr"}
)


def format_megabytes(size: int) -> str:
    """Format a byte count as megabytes with one decimal place, e.g. '31.0MB'."""
    return f"{size / (1024 * 1024):.1f}MB"


class MediaUploadError(ValueError):
    """Base class for upload failures detected by this package.

    Each subclass carries a ``reason`` used as the failure category on
    UploadFailure results.
    """

    reason = "transfer_error"


class UploadSizeError(MediaUploadError):
    """Raised when a media source exceeds the upload size limit."""

    reason = "size_exceeded"

    @classmethod
    def for_source(cls, label: str, actual_size: int, max_size: int) -> UploadSizeError:
        """Create an UploadSizeError with a formatted message.

        Args:
            label: What was too large ("Image", "File" or "Buffer").
            actual_size: Size of the source in bytes.
            max_size: Limit in bytes.
        """
        megabyte = 1024 * 1024
        if max_size % megabyte == 0:
            limit = f"{max_size // megabyte}MB"
        else:
            limit = format_megabytes(max_size)
        return cls(f"{label} too large: {format_megabytes(actual_size)} (limit {limit})")


class RemoteRejectedError(MediaUploadError):
    """Raised when the upload endpoint answers with a non-zero status code."""

    reason = "remote_rejected"

    def __init__(self, code: object, msg: str | None = None) -> None:
        self.code = code
        self.msg = msg
        super().__init__(f"Feishu error: {msg or f'code {code}'}")


class MalformedResponseError(MediaUploadError):
    """Raised when the endpoint reports success but returns no key."""

    reason = "malformed_response"

    @classmethod
    def missing_key(cls, key_field: str) -> MalformedResponseError:
        return cls(f"No {key_field} returned")


class InvalidRequestError(MediaUploadError):
    """Raised when upload parameters are rejected locally."""

    reason = "invalid_request"
