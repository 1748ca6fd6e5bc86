"""Upload result types.

Upload functions never raise; they return one of:
- UploadSuccess: the opaque key returned by Feishu
- UploadFailure: a human-readable message and a failure category
- MediaUpload: an UploadResult tagged with the kind of upload performed
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union

from feishu_media.constants import MediaUploadError


class FailureReason(str, Enum):
    """Category of an upload failure.

    Values:
        SIZE_EXCEEDED: Source larger than the upload limit, no request was sent.
        INVALID_REQUEST: Parameters or content rejected locally, no request was sent.
        REMOTE_REJECTED: Endpoint answered with a non-zero status code.
        MALFORMED_RESPONSE: Endpoint reported success without returning a key.
        TRANSFER_ERROR: Any other exception during stat, stream setup or transfer.
    """

    SIZE_EXCEEDED = "size_exceeded"
    INVALID_REQUEST = "invalid_request"
    REMOTE_REJECTED = "remote_rejected"
    MALFORMED_RESPONSE = "malformed_response"
    TRANSFER_ERROR = "transfer_error"


@dataclass(frozen=True)
class UploadSuccess:
    """Successful upload.

    Attributes:
        key: image_key or file_key returned by Feishu.
    """

    key: str

    @property
    def success(self) -> Literal[True]:
        return True


@dataclass(frozen=True)
class UploadFailure:
    """Failed upload.

    Attributes:
        message: Why the upload did not complete. The text is stable and may be
            matched by callers.
        reason: Failure category.
    """

    message: str
    reason: FailureReason = FailureReason.TRANSFER_ERROR

    @property
    def success(self) -> Literal[False]:
        return False

    @classmethod
    def from_exception(cls, exc: BaseException) -> UploadFailure:
        """Build a failure from an exception, keeping its message."""
        if isinstance(exc, MediaUploadError):
            return cls(message=str(exc), reason=FailureReason(exc.reason))
        return cls(message=str(exc), reason=FailureReason.TRANSFER_ERROR)


UploadResult = Union[UploadSuccess, UploadFailure]


@dataclass(frozen=True)
class MediaUpload:
    """Result of upload_media.

    Attributes:
        kind: "image" if the path was uploaded as a message image, "file" otherwise.
        result: Outcome of the upload.
    """

    kind: Literal["image", "file"]
    result: UploadResult

    @property
    def success(self) -> bool:
        return self.result.success
