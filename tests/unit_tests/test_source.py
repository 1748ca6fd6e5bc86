"""Tests for upload byte sources."""

from pathlib import Path

import pytest

from feishu_media.constants import RemoteRejectedError, UploadSizeError
from feishu_media.result import FailureReason, UploadFailure
from feishu_media.source import BytesSource, PathSource, as_source


class TestAsSource:
    """Tests for as_source coercion."""

    @pytest.mark.parametrize("value", [b"abc", bytearray(b"abc"), memoryview(b"abc")])
    def test_buffers(self, value):
        source = as_source(value)
        assert source == BytesSource(b"abc")

    def test_string_path(self, tmp_path: Path):
        assert as_source(str(tmp_path / "a.png")) == PathSource(tmp_path / "a.png")

    def test_path_object(self, tmp_path: Path):
        assert as_source(tmp_path / "a.png") == PathSource(tmp_path / "a.png")

    def test_existing_source_unchanged(self):
        source = BytesSource(b"abc")
        assert as_source(source) is source

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="Unsupported media source type 'int'"):
            as_source(42)  # type: ignore[arg-type]


class TestSources:
    """Tests for size and stream handling."""

    def test_path_source(self, tmp_path: Path):
        path = tmp_path / "a.bin"
        path.write_bytes(b"0123456789")
        source = PathSource(path)

        assert source.size() == 10
        assert source.head(4) == b"0123"
        with source.open() as stream:
            assert stream.read() == b"0123456789"
        assert stream.closed

    def test_path_source_closes_on_error(self, tmp_path: Path):
        path = tmp_path / "a.bin"
        path.write_bytes(b"data")

        with pytest.raises(RuntimeError):
            with PathSource(path).open() as stream:
                raise RuntimeError("boom")
        assert stream.closed

    def test_bytes_source(self):
        source = BytesSource(b"0123456789")

        assert source.size() == 10
        assert source.head(3) == b"012"
        with source.open() as stream:
            assert stream.read() == b"0123456789"
        assert stream.closed

    def test_labels(self, tmp_path: Path):
        assert PathSource(tmp_path).label == "File"
        assert BytesSource(b"").label == "Buffer"


class TestUploadFailure:
    """Tests for mapping exceptions to failures."""

    def test_from_upload_error(self):
        failure = UploadFailure.from_exception(UploadSizeError.for_source("File", 40 << 20, 30 << 20))
        assert failure == UploadFailure(
            "File too large: 40.0MB (limit 30MB)", FailureReason.SIZE_EXCEEDED
        )

    @pytest.mark.parametrize(
        ("max_size", "limit"),
        [
            (30 * 1024 * 1024, "limit 30MB"),
            (1024 * 1024, "limit 1MB"),
            (1572864, "limit 1.5MB"),
            (512 * 1024, "limit 0.5MB"),
        ],
    )
    def test_size_message_shows_configured_limit(self, max_size: int, limit: str):
        """Test that limits that are not whole megabytes are not rounded down."""
        error = UploadSizeError.for_source("Image", 40 << 20, max_size)
        assert str(error) == f"Image too large: 40.0MB ({limit})"

    def test_from_remote_error(self):
        error = RemoteRejectedError(5, "")
        assert str(error) == "Feishu error: code 5"
        assert UploadFailure.from_exception(error).reason is FailureReason.REMOTE_REJECTED

    def test_from_other_exception(self):
        failure = UploadFailure.from_exception(OSError("disk gone"))
        assert failure == UploadFailure("disk gone", FailureReason.TRANSFER_ERROR)
        assert failure.success is False
