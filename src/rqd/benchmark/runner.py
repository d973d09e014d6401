"""Benchmark orchestration: encode, score, and collect results."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from rqd.benchmark.encode import encode_all
from rqd.benchmark.models import BenchmarkResult
from rqd.benchmark.vmaf import evaluate
from rqd.codecs import Codec
from rqd.config.models import BenchmarkConfig

logger = logging.getLogger(__name__)


def collect_results(
    ffmpeg_path: Path,
    source: Path,
    encoded_files: Iterable[Path],
    timeout: int | None = None,
) -> list[BenchmarkResult]:
    """Score encoded files and build result rows.

    The first row is always the source itself. Files without a VMAF score
    are left out.

    Args:
        ffmpeg_path: Path to ffmpeg.
        source: Reference file.
        encoded_files: Encoded outputs to score.
        timeout: Per-evaluation timeout in seconds.

    Returns:
        Result rows, source first, then encoded files in input order.
    """
    original_size = source.stat().st_size
    results = [BenchmarkResult.for_original(source.stem, original_size)]

    for path in encoded_files:
        encoded_size = path.stat().st_size
        score = evaluate(ffmpeg_path, source, path, timeout=timeout)
        if score is None:
            continue
        try:
            results.append(
                BenchmarkResult.for_encoded(
                    filename=path.stem,
                    vmaf=score,
                    original_size=original_size,
                    encoded_size=encoded_size,
                )
            )
        except ValueError as e:
            logger.warning("Discarding result for %s: %s", path, e)

    return results


def run_benchmark(
    ffmpeg_path: Path,
    source: Path,
    codecs: Iterable[Codec],
    config: BenchmarkConfig,
) -> list[BenchmarkResult]:
    """Encode ``source`` with the selected codecs and score every output.

    Args:
        ffmpeg_path: Path to ffmpeg.
        source: File to benchmark.
        codecs: Selected codecs.
        config: Benchmark configuration.

    Returns:
        Result rows, source first.

    Raises:
        FileNotFoundError: If ``source`` is not a file.
    """
    source = source.resolve()
    if not source.is_file():
        raise FileNotFoundError(f"{source} is not a file")

    encoded = encode_all(ffmpeg_path, source, codecs, config)
    logger.info("Encoded %d file(s); scoring", len(encoded))
    results = collect_results(
        ffmpeg_path, source, encoded, timeout=config.evaluate_timeout
    )
    logger.info("Benchmark complete: %d scored file(s)", len(results) - 1)
    return results
