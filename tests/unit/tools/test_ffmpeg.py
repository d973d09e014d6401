"""Unit tests for ffmpeg detection and codec listing."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from rqd.codecs import StructuralError
from rqd.tools import (
    ToolError,
    find_ffmpeg,
    is_available,
    list_codecs,
    read_codec_listing,
    require_ffmpeg,
)


class TestFindFfmpeg:
    """Tests for find_ffmpeg()."""

    def test_configured_path_used_when_file(self, tmp_path: Path) -> None:
        """Should use a configured path that exists without searching PATH."""
        ffmpeg = tmp_path / "ffmpeg"
        ffmpeg.touch()

        with patch("rqd.tools.ffmpeg.shutil.which") as mock_which:
            assert find_ffmpeg(ffmpeg) == ffmpeg
            mock_which.assert_not_called()

    def test_falls_back_to_path_lookup(self, tmp_path: Path) -> None:
        """Should search PATH when the configured path is missing."""
        with patch("rqd.tools.ffmpeg.shutil.which", return_value="/usr/bin/ffmpeg"):
            assert find_ffmpeg(tmp_path / "missing") == Path("/usr/bin/ffmpeg")

    def test_returns_none_when_not_found(self) -> None:
        """Should return None when ffmpeg is nowhere."""
        with patch("rqd.tools.ffmpeg.shutil.which", return_value=None):
            assert find_ffmpeg() is None


class TestIsAvailable:
    """Tests for is_available()."""

    def test_none_path(self) -> None:
        """Should report None as unavailable."""
        assert is_available(None) is False

    def test_successful_help(self) -> None:
        """Should run ffmpeg --help and accept exit code 0."""
        with patch("rqd.tools.ffmpeg.run_command", return_value=("", "", 0)) as mock:
            assert is_available(Path("/usr/bin/ffmpeg")) is True

        args = mock.call_args[0][0]
        assert args == [Path("/usr/bin/ffmpeg"), "--help"]

    def test_nonzero_exit(self) -> None:
        """Should report a failing ffmpeg as unavailable."""
        with patch("rqd.tools.ffmpeg.run_command", return_value=("", "boom", 1)):
            assert is_available(Path("/usr/bin/ffmpeg")) is False

    def test_os_error(self) -> None:
        """Should report an unrunnable binary as unavailable."""
        with patch("rqd.tools.ffmpeg.run_command", side_effect=PermissionError()):
            assert is_available(Path("/usr/bin/ffmpeg")) is False

    def test_timeout(self) -> None:
        """Should report a hanging ffmpeg as unavailable."""
        with patch(
            "rqd.tools.ffmpeg.run_command",
            side_effect=subprocess.TimeoutExpired("ffmpeg", 10),
        ):
            assert is_available(Path("/usr/bin/ffmpeg")) is False


class TestRequireFfmpeg:
    """Tests for require_ffmpeg()."""

    def test_not_found(self) -> None:
        """Should raise ToolError when ffmpeg is not found."""
        with patch("rqd.tools.ffmpeg.find_ffmpeg", return_value=None):
            with pytest.raises(ToolError, match="not found"):
                require_ffmpeg()

    def test_not_runnable(self) -> None:
        """Should raise ToolError when ffmpeg cannot run."""
        with (
            patch("rqd.tools.ffmpeg.find_ffmpeg", return_value=Path("/bin/ffmpeg")),
            patch("rqd.tools.ffmpeg.is_available", return_value=False),
        ):
            with pytest.raises(ToolError, match="not available"):
                require_ffmpeg()

    def test_returns_path(self) -> None:
        """Should return the path of a working ffmpeg."""
        with (
            patch("rqd.tools.ffmpeg.find_ffmpeg", return_value=Path("/bin/ffmpeg")),
            patch("rqd.tools.ffmpeg.is_available", return_value=True),
        ):
            assert require_ffmpeg() == Path("/bin/ffmpeg")


class TestReadCodecListing:
    """Tests for read_codec_listing() and list_codecs()."""

    def test_runs_codecs_command(self, codec_listing: str) -> None:
        """Should run ffmpeg -hide_banner -codecs and return stdout."""
        with patch(
            "rqd.tools.ffmpeg.run_command", return_value=(codec_listing, "", 0)
        ) as mock:
            assert read_codec_listing(Path("ffmpeg")) == codec_listing

        assert mock.call_args[0][0] == [Path("ffmpeg"), "-hide_banner", "-codecs"]

    def test_nonzero_exit_raises(self) -> None:
        """Should raise ToolError with the status and stderr."""
        with patch("rqd.tools.ffmpeg.run_command", return_value=("", "bad\n", 1)):
            with pytest.raises(ToolError, match="status 1: bad"):
                read_codec_listing(Path("ffmpeg"))

    def test_os_error_raises(self) -> None:
        """Should wrap OSError in ToolError."""
        with patch("rqd.tools.ffmpeg.run_command", side_effect=FileNotFoundError()):
            with pytest.raises(ToolError):
                read_codec_listing(Path("ffmpeg"))

    def test_list_codecs_parses(self, codec_listing: str) -> None:
        """Should parse the listing into codecs."""
        with patch("rqd.tools.ffmpeg.run_command", return_value=(codec_listing, "", 0)):
            codecs = list_codecs(Path("ffmpeg"))

        assert len(codecs) == 13

    def test_list_codecs_propagates_parse_errors(self) -> None:
        """Should let parse errors propagate."""
        with patch("rqd.tools.ffmpeg.run_command", return_value=("garbage", "", 0)):
            with pytest.raises(StructuralError):
                list_codecs(Path("ffmpeg"))
