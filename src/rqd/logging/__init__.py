"""Structured logging module for rqd.

Provides configurable logging with JSON format support and file rotation,
plus encoder/quality context for benchmark runs.
"""

from rqd.logging.config import configure_logging
from rqd.logging.context import (
    BenchmarkContextFilter,
    benchmark_context,
    clear_benchmark_context,
    get_benchmark_context,
    set_benchmark_context,
)
from rqd.logging.handlers import JSONFormatter

__all__ = [
    "BenchmarkContextFilter",
    "JSONFormatter",
    "benchmark_context",
    "clear_benchmark_context",
    "configure_logging",
    "get_benchmark_context",
    "set_benchmark_context",
]
