"""Benchmark context for structured logging.

Tracks which encoder and quality level are being processed using
contextvars, so log records emitted from deep inside the encode and
evaluate loops carry that context automatically.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_encoder: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "encoder", default=None
)
_quality: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "quality", default=None
)


def set_benchmark_context(encoder: str, quality: int | None = None) -> None:
    """Set the current benchmark context.

    Args:
        encoder: Encoder name (e.g., "libx264").
        quality: Quality level being encoded, or None.
    """
    _encoder.set(encoder)
    _quality.set(quality)


def clear_benchmark_context() -> None:
    """Clear the current benchmark context."""
    _encoder.set(None)
    _quality.set(None)


@contextmanager
def benchmark_context(
    encoder: str, quality: int | None = None
) -> Generator[None, None, None]:
    """Context manager that sets the benchmark context and restores it on exit.

    Example:
        with benchmark_context("libx264", 90):
            logger.info("Encoding")  # tagged [libx264:q90]
    """
    old_encoder = _encoder.get()
    old_quality = _quality.get()
    try:
        set_benchmark_context(encoder, quality)
        yield
    finally:
        _encoder.set(old_encoder)
        _quality.set(old_quality)


def get_benchmark_context() -> tuple[str | None, int | None]:
    """Get current benchmark context as (encoder, quality)."""
    return _encoder.get(), _quality.get()


class BenchmarkContextFilter(logging.Filter):
    """Logging filter that injects benchmark context into log records.

    Adds ``encoder`` and ``quality`` attributes for JSON output and a
    compact ``bench_tag`` such as ``[libx264:q90] `` for text output.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        encoder, quality = get_benchmark_context()

        record.encoder = encoder
        record.quality = quality

        if encoder:
            if quality is not None:
                record.bench_tag = f"[{encoder}:q{quality}] "
            else:
                record.bench_tag = f"[{encoder}] "
        else:
            record.bench_tag = ""

        return True
