"""Configuration data models.

This module defines dataclasses for rqd configuration options.
"""

from dataclasses import dataclass, field
from pathlib import Path

from rqd.codecs.selection import HARDWARE_SUFFIXES, RECOMMENDED_EXTENSIONS

# ffmpeg -q:v ladder, best first
DEFAULT_QUALITY_LEVELS: tuple[int, ...] = (100, 99, 95, 90, 80, 60, 40, 20)


def _is_int(value: object) -> bool:
    # bool is an int subclass but never a valid count
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class ToolPathsConfig:
    """Configuration for external tool paths.

    If not specified, ffmpeg is looked up in PATH.
    """

    ffmpeg: Path | None = None


@dataclass
class BenchmarkConfig:
    """Configuration for encode/evaluate runs."""

    # Quality levels passed to -q:v, in run order
    quality_levels: tuple[int, ...] = DEFAULT_QUALITY_LEVELS

    # Directory (next to the source file) that receives encoded outputs
    work_dir_name: str = "rqd"

    # Container extension of encoded outputs
    container: str = "mp4"

    # Per-invocation timeouts in seconds (None = no limit)
    encode_timeout: int | None = None
    evaluate_timeout: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not isinstance(self.quality_levels, tuple) or not self.quality_levels:
            raise ValueError(
                f"quality_levels must be a non-empty list, got {self.quality_levels!r}"
            )
        for level in self.quality_levels:
            if not _is_int(level) or level < 0:
                raise ValueError(
                    f"quality_levels must be non-negative integers, got {level!r}"
                )
        if (
            not isinstance(self.work_dir_name, str)
            or not self.work_dir_name
            or "/" in self.work_dir_name
        ):
            raise ValueError(
                f"work_dir_name must be a plain directory name, "
                f"got {self.work_dir_name!r}"
            )
        if not isinstance(self.container, str) or not self.container.isalnum():
            raise ValueError(f"container must be alphanumeric, got {self.container!r}")
        for name in ("encode_timeout", "evaluate_timeout"):
            value = getattr(self, name)
            if value is not None and (not _is_int(value) or value <= 0):
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


@dataclass
class SelectionConfig:
    """Configuration for codec selection presets."""

    hardware_suffixes: tuple[str, ...] = HARDWARE_SUFFIXES
    recommended: tuple[str, ...] = RECOMMENDED_EXTENSIONS

    def __post_init__(self) -> None:
        """Validate configuration."""
        for name in ("hardware_suffixes", "recommended"):
            value = getattr(self, name)
            if not isinstance(value, tuple) or not all(
                isinstance(item, str) and item for item in value
            ):
                raise ValueError(f"{name} must be a list of strings, got {value!r}")


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if not isinstance(self.level, str) or self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level!r}")
        valid_formats = {"text", "json"}
        if not isinstance(self.format, str) or self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format!r}"
            )
        if not isinstance(self.include_stderr, bool):
            raise ValueError(
                f"include_stderr must be a boolean, got {self.include_stderr!r}"
            )
        for name in ("max_bytes", "backup_count"):
            value = getattr(self, name)
            if not _is_int(value) or value < 0:
                raise ValueError(
                    f"{name} must be a non-negative integer, got {value!r}"
                )


@dataclass
class RQDConfig:
    """Main configuration container for rqd.

    Aggregates all configuration sections.
    """

    tools: ToolPathsConfig = field(default_factory=ToolPathsConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)
    selection: SelectionConfig = field(default_factory=SelectionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
