"""VMAF scoring through ffmpeg's libvmaf filter."""

import logging
import re
import subprocess  # nosec B404 - only for TimeoutExpired
from pathlib import Path

from rqd.core.subprocess_utils import run_command

logger = logging.getLogger(__name__)

# libvmaf prints e.g. "[Parsed_libvmaf_0 @ 0x...] VMAF score: 93.412345"
VMAF_SCORE_PATTERN = re.compile(r"VMAF score: ([0-9.]+)")


def parse_vmaf_score(output: str) -> float | None:
    """Extract the VMAF score from ffmpeg's diagnostic output.

    Args:
        output: ffmpeg stderr.

    Returns:
        The first reported score, or None if absent or malformed.
    """
    match = VMAF_SCORE_PATTERN.search(output)
    if not match:
        return None
    try:
        return float(match.group(1))
    except ValueError:
        return None


def build_vmaf_command(ffmpeg_path: Path, source: Path, encoded: Path) -> list[str]:
    """Build the libvmaf comparison command (distorted first, reference second)."""
    return [
        str(ffmpeg_path),
        "-i",
        str(encoded),
        "-i",
        str(source),
        "-filter_complex",
        "libvmaf",
        "-f",
        "null",
        "-",
    ]


def evaluate(
    ffmpeg_path: Path,
    source: Path,
    encoded: Path,
    timeout: int | None = None,
) -> float | None:
    """Score an encoded file against its source.

    Args:
        ffmpeg_path: Path to ffmpeg (built with libvmaf).
        source: Reference file.
        encoded: Distorted file.
        timeout: Timeout in seconds, or None.

    Returns:
        VMAF score, or None if ffmpeg produced no score.
    """
    logger.info("Performing VMAF analysis on %s", encoded)
    try:
        stdout, stderr, _ = run_command(
            build_vmaf_command(ffmpeg_path, source, encoded), timeout=timeout
        )
    except subprocess.TimeoutExpired:
        logger.warning("VMAF analysis of %s timed out after %ss", encoded, timeout)
        return None
    except OSError as e:
        logger.warning("Could not start ffmpeg: %s", e)
        return None

    score = parse_vmaf_score(stderr)
    if score is None:
        logger.warning(
            "Unable to determine VMAF score for %s\n"
            "-----ffmpeg stdout-----\n%s\n-----ffmpeg stderr-----\n%s",
            encoded,
            stdout,
            stderr,
        )
    return score
