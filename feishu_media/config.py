"""Configuration for Feishu media uploads.

Configuration is optional: upload functions fall back to MediaConfig()
defaults. It can be built in code or loaded from YAML:

    max_upload_size: 10485760
    validate_image_content: true
"""

import sys
import typing as t

import yaml
from pydantic import BaseModel, ConfigDict, Field

from feishu_media.constants import MAX_UPLOAD_SIZE


class StrictBaseModel(BaseModel):
    """Base model with immutable (frozen) configuration."""

    model_config = ConfigDict(frozen=True)


class MediaConfig(StrictBaseModel):
    """Upload settings.

    Attributes:
        max_upload_size: Largest source accepted, in bytes. Can lower but not
            exceed the Feishu limit of 30MB.
        validate_image_content: Sniff image payloads with magic bytes and reject
            content that is not a supported image before uploading.
    """

    max_upload_size: int = Field(default=MAX_UPLOAD_SIZE, gt=0, le=MAX_UPLOAD_SIZE)
    validate_image_content: bool = Field(default=False)

    @classmethod
    def parse_yaml(cls, path: str) -> "MediaConfig":
        """Parse configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Validated MediaConfig instance

        Raises:
            SystemExit: If config file is not found
        """
        try:
            with open(path, "r") as f:
                data: t.Optional[dict[str, t.Any]] = yaml.safe_load(f)
        except FileNotFoundError:
            print(f"Config file not found: {path}", file=sys.stderr)
            raise SystemExit(1)
        return cls.model_validate(data or {})
