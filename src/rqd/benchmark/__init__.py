"""Rate/quality benchmarking of ffmpeg encoders.

Encodes a source file with each selected encoder across a quality ladder
and scores every output with VMAF.
"""

from rqd.benchmark.encode import (
    build_encode_command,
    encode_all,
    output_path_for,
    plan_encodes,
)
from rqd.benchmark.models import RESULT_COLUMNS, BenchmarkResult, EncodeJob
from rqd.benchmark.runner import collect_results, run_benchmark
from rqd.benchmark.vmaf import (
    VMAF_SCORE_PATTERN,
    build_vmaf_command,
    evaluate,
    parse_vmaf_score,
)

__all__ = [
    # Models
    "BenchmarkResult",
    "EncodeJob",
    "RESULT_COLUMNS",
    # Encoding
    "build_encode_command",
    "encode_all",
    "output_path_for",
    "plan_encodes",
    # Scoring
    "VMAF_SCORE_PATTERN",
    "build_vmaf_command",
    "evaluate",
    "parse_vmaf_score",
    # Orchestration
    "collect_results",
    "run_benchmark",
]
