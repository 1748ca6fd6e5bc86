from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

_PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + b"\x00" * 32


@pytest.fixture
def client() -> MagicMock:
    """Fake Feishu client whose endpoints succeed with fixed keys."""
    fake = MagicMock()
    fake.create_image = AsyncMock(return_value={"code": 0, "image_key": "img_v2_123"})
    fake.create_file = AsyncMock(return_value={"code": 0, "file_key": "file_v2_456"})
    return fake


@pytest.fixture
def png_bytes() -> bytes:
    return _PNG_BYTES


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """A small PNG file on disk."""
    path = tmp_path / "chart.png"
    path.write_bytes(_PNG_BYTES)
    return path
