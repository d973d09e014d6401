"""ffmpeg detection and codec listing.

Locates the ffmpeg executable, checks that it runs, and captures and
parses its ``-codecs`` capability listing.
"""

import logging
import shutil
import subprocess  # nosec B404 - only for TimeoutExpired
from pathlib import Path

from rqd.codecs import Codec, parse_codec_listing
from rqd.core.subprocess_utils import run_command

logger = logging.getLogger(__name__)

# Timeout for availability/listing commands (seconds)
DETECTION_TIMEOUT = 10


class ToolError(Exception):
    """Raised when ffmpeg is missing or fails to run."""


def find_ffmpeg(configured_path: Path | None = None) -> Path | None:
    """Find the ffmpeg executable.

    Args:
        configured_path: Optional configured path override.

    Returns:
        Path to ffmpeg, or None if not found.
    """
    if configured_path:
        if configured_path.is_file():
            return configured_path
        logger.warning("Configured path for ffmpeg is not a file: %s", configured_path)

    which_result = shutil.which("ffmpeg")
    if which_result:
        return Path(which_result)

    return None


def is_available(ffmpeg_path: Path | None) -> bool:
    """Check whether ffmpeg can be executed.

    Args:
        ffmpeg_path: Path to ffmpeg, or None.

    Returns:
        True if ``ffmpeg --help`` exits successfully.
    """
    if ffmpeg_path is None:
        return False
    try:
        _, _, rc = run_command([ffmpeg_path, "--help"], timeout=DETECTION_TIMEOUT)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("ffmpeg at %s is not usable: %s", ffmpeg_path, e)
        return False
    return rc == 0


def require_ffmpeg(configured_path: Path | None = None) -> Path:
    """Find ffmpeg and verify it runs.

    Raises:
        ToolError: If ffmpeg is not found or not executable.
    """
    path = find_ffmpeg(configured_path)
    if path is None:
        raise ToolError("ffmpeg not found in PATH")
    if not is_available(path):
        raise ToolError(f"ffmpeg is not available: {path}")
    return path


def read_codec_listing(ffmpeg_path: Path) -> str:
    """Capture the raw ``ffmpeg -codecs`` listing.

    Args:
        ffmpeg_path: Path to ffmpeg.

    Returns:
        The listing text (stdout).

    Raises:
        ToolError: If the command fails or times out.
    """
    try:
        stdout, stderr, rc = run_command(
            [ffmpeg_path, "-hide_banner", "-codecs"], timeout=DETECTION_TIMEOUT
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise ToolError(f"Failed to run ffmpeg -codecs: {e}") from e
    if rc != 0:
        raise ToolError(f"ffmpeg -codecs exited with status {rc}: {stderr.strip()}")
    return stdout


def list_codecs(ffmpeg_path: Path) -> list[Codec]:
    """Enumerate the codecs supported by an ffmpeg build.

    Args:
        ffmpeg_path: Path to ffmpeg.

    Returns:
        Parsed codecs in listing order.

    Raises:
        ToolError: If ffmpeg fails.
        CodecListingError: If the listing cannot be parsed.
    """
    codecs = parse_codec_listing(read_codec_listing(ffmpeg_path))
    logger.info("ffmpeg reports %d codecs", len(codecs))
    return codecs
