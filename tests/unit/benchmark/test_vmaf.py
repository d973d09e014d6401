"""Unit tests for VMAF scoring."""

import logging
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from rqd.benchmark import build_vmaf_command, evaluate, parse_vmaf_score

LIBVMAF_STDERR = """\
frame=  240 fps= 38 q=-0.0 Lsize=N/A time=00:00:10.00 bitrate=N/A speed=1.59x
[Parsed_libvmaf_0 @ 0x55d4c8a3c2c0] VMAF score: 93.412345
"""


class TestParseVmafScore:
    """Tests for parse_vmaf_score()."""

    def test_extracts_score(self) -> None:
        """Should extract the score from libvmaf output."""
        assert parse_vmaf_score(LIBVMAF_STDERR) == pytest.approx(93.412345)

    def test_integer_score(self) -> None:
        """Should accept a score without a fraction."""
        assert parse_vmaf_score("VMAF score: 100") == 100.0

    def test_missing_score(self) -> None:
        """Should return None when no score is printed."""
        assert parse_vmaf_score("Error initializing filter 'libvmaf'") is None

    def test_malformed_number(self) -> None:
        """Should return None for a malformed number."""
        assert parse_vmaf_score("VMAF score: 9.3.4") is None

    def test_first_score_wins(self) -> None:
        """Should use the first reported score."""
        assert parse_vmaf_score("VMAF score: 80.0\nVMAF score: 90.0") == 80.0


class TestBuildVmafCommand:
    """Tests for build_vmaf_command()."""

    def test_distorted_first(self) -> None:
        """Should pass the encoded file first and the reference second."""
        cmd = build_vmaf_command(Path("ffmpeg"), Path("src.mkv"), Path("enc.mp4"))
        assert cmd == [
            "ffmpeg",
            "-i",
            "enc.mp4",
            "-i",
            "src.mkv",
            "-filter_complex",
            "libvmaf",
            "-f",
            "null",
            "-",
        ]


class TestEvaluate:
    """Tests for evaluate()."""

    def test_returns_score(self) -> None:
        """Should return the parsed score."""
        with patch(
            "rqd.benchmark.vmaf.run_command", return_value=("", LIBVMAF_STDERR, 0)
        ):
            score = evaluate(Path("ffmpeg"), Path("a.mkv"), Path("b.mp4"))

        assert score == pytest.approx(93.412345)

    def test_no_score_logs_output(self, caplog) -> None:
        """Should log ffmpeg output when no score is found."""
        with patch(
            "rqd.benchmark.vmaf.run_command",
            return_value=("some stdout", "No such filter: 'libvmaf'", 1),
        ):
            score = evaluate(Path("ffmpeg"), Path("a.mkv"), Path("b.mp4"))

        assert score is None
        assert "Unable to determine VMAF score" in caplog.text
        assert "No such filter" in caplog.text

    def test_timeout_returns_none(self) -> None:
        """Should return None and pass the timeout through to ffmpeg."""
        with patch(
            "rqd.benchmark.vmaf.run_command",
            side_effect=subprocess.TimeoutExpired("ffmpeg", 30),
        ) as mock:
            score = evaluate(Path("ffmpeg"), Path("a.mkv"), Path("b.mp4"), timeout=30)

        assert score is None
        assert mock.call_args.kwargs["timeout"] == 30

    def test_timeout_logs_warning(self, caplog) -> None:
        """Should log a warning naming the encoded file when scoring times out."""
        with patch(
            "rqd.benchmark.vmaf.run_command",
            side_effect=subprocess.TimeoutExpired("ffmpeg", 30),
        ):
            with caplog.at_level(logging.WARNING, logger="rqd.benchmark.vmaf"):
                evaluate(Path("ffmpeg"), Path("a.mkv"), Path("b.mp4"), timeout=30)

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "b.mp4" in warnings[0].getMessage()
        assert "timed out after 30s" in warnings[0].getMessage()
