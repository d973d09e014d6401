"""Data models for benchmark runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Column order of tabular reports
RESULT_COLUMNS: list[str] = ["filename", "vmaf", "size_bytes", "compression_ratio"]


@dataclass(frozen=True)
class EncodeJob:
    """One encoder run at one quality level."""

    extension: str
    """Codec identifier from the listing (e.g., "h264")."""

    encoder: str
    """ffmpeg encoder passed to -c:v (e.g., "libx264")."""

    quality: int
    """Value passed to -q:v."""

    output_path: Path


class BenchmarkResult(BaseModel):
    """Quality and size of one file in a benchmark run.

    The original file is reported as a result too, with a perfect score and
    a compression ratio of 1.0.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    filename: str = Field(min_length=1)
    vmaf: float = Field(ge=0.0, le=100.0)
    size_bytes: int = Field(ge=0)
    compression_ratio: float = Field(gt=0.0)

    @classmethod
    def for_original(cls, filename: str, size_bytes: int) -> BenchmarkResult:
        """Result row for the unencoded source file."""
        return cls(
            filename=filename,
            vmaf=100.0,
            size_bytes=size_bytes,
            compression_ratio=1.0,
        )

    @classmethod
    def for_encoded(
        cls,
        filename: str,
        vmaf: float,
        original_size: int,
        encoded_size: int,
    ) -> BenchmarkResult:
        """Result row for an encoded file.

        Raises:
            ValueError: If the encoded file is empty (ratio undefined).
        """
        if encoded_size <= 0:
            raise ValueError(f"Encoded file {filename} is empty")
        return cls(
            filename=filename,
            vmaf=vmaf,
            size_bytes=encoded_size,
            compression_ratio=original_size / encoded_size,
        )
