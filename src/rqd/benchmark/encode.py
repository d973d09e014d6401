"""Encode a source file with each selected encoder across a quality ladder."""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - only for TimeoutExpired
from collections.abc import Iterable, Sequence
from pathlib import Path

from rqd.benchmark.models import EncodeJob
from rqd.codecs import Codec
from rqd.config.models import BenchmarkConfig
from rqd.core.subprocess_utils import run_command
from rqd.logging import benchmark_context

logger = logging.getLogger(__name__)


def output_path_for(
    work_dir: Path,
    stem: str,
    extension: str,
    encoder: str,
    quality: int,
    container: str,
) -> Path:
    """Build the output path ``<stem>.<extension>.<encoder>.q<quality>.<container>``."""
    return work_dir / f"{stem}.{extension}.{encoder}.q{quality}.{container}"


def plan_encodes(
    source: Path,
    codecs: Iterable[Codec],
    work_dir: Path,
    levels: Sequence[int],
    container: str = "mp4",
) -> list[EncodeJob]:
    """Expand codecs into encode jobs.

    Each codec contributes its encoder candidates (the explicit encoder
    list, or the codec identifier), each run at every quality level.

    Args:
        source: File to encode.
        codecs: Selected codecs.
        work_dir: Directory receiving encoded outputs.
        levels: Quality ladder.
        container: Output container extension.

    Returns:
        Jobs grouped by codec, then encoder, then quality level.
    """
    jobs: list[EncodeJob] = []
    for codec in codecs:
        for encoder in codec.encoder_candidates():
            for quality in levels:
                jobs.append(
                    EncodeJob(
                        extension=codec.extension,
                        encoder=encoder,
                        quality=quality,
                        output_path=output_path_for(
                            work_dir,
                            source.stem,
                            codec.extension,
                            encoder,
                            quality,
                            container,
                        ),
                    )
                )
    return jobs


def build_encode_command(ffmpeg_path: Path, source: Path, job: EncodeJob) -> list[str]:
    """Build the ffmpeg command line for one job. Audio is stream-copied."""
    return [
        str(ffmpeg_path),
        "-i",
        str(source),
        "-c:v",
        job.encoder,
        "-q:v",
        str(job.quality),
        "-c:a",
        "copy",
        str(job.output_path),
    ]


def _run_encode(
    ffmpeg_path: Path, source: Path, job: EncodeJob, timeout: int | None
) -> bool:
    """Run one encode. Returns True on success."""
    try:
        _, stderr, rc = run_command(
            build_encode_command(ffmpeg_path, source, job), timeout=timeout
        )
    except subprocess.TimeoutExpired:
        return False
    except OSError as e:
        logger.warning("Could not start ffmpeg: %s", e)
        return False

    if rc != 0:
        logger.debug("ffmpeg stderr:\n%s", stderr)
        return False
    return True


def encode_all(
    ffmpeg_path: Path,
    source: Path,
    codecs: Iterable[Codec],
    config: BenchmarkConfig,
) -> list[Path]:
    """Encode ``source`` with every selected encoder and quality level.

    Outputs that already exist are reused without re-encoding. When an
    encode fails, its partial output is removed and the rest of that
    encoder's ladder is skipped.

    Args:
        ffmpeg_path: Path to ffmpeg.
        source: File to encode.
        codecs: Selected codecs.
        config: Benchmark configuration.

    Returns:
        Paths of encoded files, in job order.
    """
    work_dir = source.parent / config.work_dir_name
    work_dir.mkdir(parents=True, exist_ok=True)

    jobs = plan_encodes(
        source, codecs, work_dir, config.quality_levels, config.container
    )
    logger.info("Planned %d encode(s) into %s", len(jobs), work_dir)

    failed: set[tuple[str, str]] = set()
    files: list[Path] = []
    for job in jobs:
        key = (job.extension, job.encoder)
        if key in failed:
            continue

        with benchmark_context(job.encoder, job.quality):
            if job.output_path.exists():
                logger.info("%s already exists, skipping", job.output_path)
                files.append(job.output_path)
                continue

            logger.info("Encoding %s", job.output_path.name)
            if not _run_encode(ffmpeg_path, source, job, config.encode_timeout):
                logger.warning(
                    "ffmpeg failed, skipping %s (%s)", job.encoder, job.extension
                )
                job.output_path.unlink(missing_ok=True)
                failed.add(key)
                continue

            files.append(job.output_path)

    return files
