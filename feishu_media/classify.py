"""Media classification by file extension and by content.

Feishu accepts a closed set of file categories for uploads. Extension-based
helpers map file names onto that set; content sniffing uses puremagic magic
byte detection for callers that want to check a payload before sending it.

Example:
    >>> from feishu_media.classify import classify_file_type
    >>> classify_file_type("report.DOCX")
    <FileType.DOC: 'doc'>
"""

from __future__ import annotations

import logging
import os
from enum import Enum

import puremagic

from feishu_media.constants import AUDIO_EXTENSIONS, IMAGE_EXTENSIONS

logger = logging.getLogger(__name__)

# Magic-byte detection only needs the file header
SNIFF_BYTES = 4096

# puremagic reports some formats under a different extension than Feishu lists
DETECTED_EXTENSION_ALIASES: dict[str, str] = {".tif": ".tiff", ".jpe": ".jpg", ".jfif": ".jpg"}


class FileType(str, Enum):
    """File categories recognized by the Feishu file upload endpoint.

    Values:
        OPUS: Opus/Ogg audio.
        MP4: Video.
        PDF, DOC, XLS, PPT: Office documents.
        STREAM: Generic binary, used for anything else.
    """

    OPUS = "opus"
    MP4 = "mp4"
    PDF = "pdf"
    DOC = "doc"
    XLS = "xls"
    PPT = "ppt"
    STREAM = "stream"


EXTENSION_TO_FILE_TYPE: dict[str, FileType] = {
    ".opus": FileType.OPUS,
    ".ogg": FileType.OPUS,
    ".mp4": FileType.MP4,
    ".mov": FileType.MP4,
    ".avi": FileType.MP4,
    ".pdf": FileType.PDF,
    ".doc": FileType.DOC,
    ".docx": FileType.DOC,
    ".xls": FileType.XLS,
    ".xlsx": FileType.XLS,
    ".ppt": FileType.PPT,
    ".pptx": FileType.PPT,
}


def _extension(path: str) -> str:
    return os.path.splitext(path)[1].lower()


def classify_file_type(file_name: str) -> FileType:
    """Map a file name to its Feishu upload category.

    The lookup is case-insensitive and total: unknown extensions map to
    FileType.STREAM.
    """
    return EXTENSION_TO_FILE_TYPE.get(_extension(file_name), FileType.STREAM)


def is_image_path(path: str) -> bool:
    """Return True if the path has an image extension."""
    return _extension(path) in IMAGE_EXTENSIONS


def is_audio_path(path: str) -> bool:
    """Return True if the path has an audio extension."""
    return _extension(path) in AUDIO_EXTENSIONS


def sniff_is_image(content: bytes) -> bool:
    """Check whether content starts with the signature of a supported image format.

    Args:
        content: Leading bytes of the payload (SNIFF_BYTES is enough).

    Returns:
        True if puremagic identifies the content as one of IMAGE_EXTENSIONS.
    """
    if not content:
        return False

    try:
        detected = puremagic.magic_string(content)
    except puremagic.PureError:
        logger.debug("Could not identify content type from %d leading bytes", len(content))
        return False

    for match in detected:
        extension = (match.extension or "").lower()
        if DETECTED_EXTENSION_ALIASES.get(extension, extension) in IMAGE_EXTENSIONS:
            return True
    return False
