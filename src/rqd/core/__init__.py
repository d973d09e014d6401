"""Core utilities package.

Pure formatting helpers and the shared subprocess wrapper.
"""

from rqd.core.formatting import format_file_size, format_ratio, format_score
from rqd.core.subprocess_utils import run_command

__all__ = [
    "format_file_size",
    "format_ratio",
    "format_score",
    "run_command",
]
