"""External tool detection.

Locates ffmpeg and enumerates its codec capabilities.
"""

from rqd.tools.ffmpeg import (
    DETECTION_TIMEOUT,
    ToolError,
    find_ffmpeg,
    is_available,
    list_codecs,
    read_codec_listing,
    require_ffmpeg,
)

__all__ = [
    "DETECTION_TIMEOUT",
    "ToolError",
    "find_ffmpeg",
    "is_available",
    "list_codecs",
    "read_codec_listing",
    "require_ffmpeg",
]
