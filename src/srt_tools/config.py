"""Configuration and constants."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables once
load_dotenv()

# Environment variable names
ENV_REMOVE_EXTRA_TEXT = "SRT_TOOLS_REMOVE_EXTRA_TEXT"
ENV_OUTPUT_PREFIX = "SRT_TOOLS_OUTPUT_PREFIX"

DEFAULT_OUTPUT_PREFIX = "fixed_"

# Supported file extensions
SUPPORTED_EXTENSIONS = {".srt"}

# 50MB
MAX_FILE_SIZE = 50 * 1024 * 1024

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass
class SrtToolsConfig:
    """Operations to apply to one SRT text."""

    # Offset settings
    apply_offset: bool = False
    offset_ms: int = 0

    # Renumber settings
    apply_renumber: bool = False
    renumber_start: int = 1

    # Cleanup settings
    strip_extraneous: Optional[bool] = None

    # Output settings
    output_prefix: Optional[str] = None

    def __post_init__(self):
        """Fill unset options from the environment."""
        if self.strip_extraneous is None:
            self.strip_extraneous = env_flag(ENV_REMOVE_EXTRA_TEXT)
        if self.output_prefix is None:
            self.output_prefix = os.environ.get(ENV_OUTPUT_PREFIX, DEFAULT_OUTPUT_PREFIX)

    @classmethod
    def from_args(cls, args) -> "SrtToolsConfig":
        """Create config from argparse namespace."""
        offset_ms = getattr(args, 'offset_ms', None)
        renumber_start = getattr(args, 'renumber_start', None)
        # 命令行未指定时保留环境变量的默认值
        strip = True if getattr(args, 'strip_extra', False) else None

        return cls(
            apply_offset=offset_ms is not None,
            offset_ms=offset_ms or 0,
            apply_renumber=renumber_start is not None,
            renumber_start=renumber_start if renumber_start is not None else 1,
            strip_extraneous=strip,
        )

    @property
    def has_operations(self) -> bool:
        return self.apply_offset or self.apply_renumber or bool(self.strip_extraneous)

    def validate(self) -> Optional[str]:
        """
        Validate configuration.

        Returns:
            Error message if invalid, None if valid
        """
        if not self.has_operations:
            return "Nothing to do. Use --offset, --renumber or --strip-extra"

        if self.apply_renumber and self.renumber_start < 1:
            return f"Renumber start must be >= 1, got {self.renumber_start}"

        return None
