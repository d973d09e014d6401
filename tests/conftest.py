"""Shared test fixtures for rqd."""

import shutil
import tempfile
from pathlib import Path

import pytest
from click.testing import CliRunner

# Trimmed `ffmpeg -hide_banner -codecs` output from an ffmpeg 6 build
SAMPLE_CODEC_LISTING = """\
Codecs:
 D..... = Decoding supported
 .E.... = Encoding supported
 ..V... = Video codec
 ..A... = Audio codec
 ..S... = Subtitle codec
 ..D... = Data codec
 ..T... = Attachment codec
 ...I.. = Intra frame-only codec
 ....L. = Lossy compression
 .....S = Lossless compression
 -------
 D.VI.S 012v                 Uncompressed 4:2:2 10-bit
 DEV.LS h264                 H.264 / AVC / MPEG-4 AVC / MPEG-4 part 10 (decoders: h264 h264_qsv h264_cuvid ) (encoders: libx264 libx264rgb h264_nvenc h264_qsv h264_vaapi )
 DEV.L. hevc                 H.265 / HEVC (High Efficiency Video Coding) (decoders: hevc hevc_qsv hevc_cuvid ) (encoders: libx265 hevc_nvenc hevc_qsv hevc_vaapi )
 DEV.L. av1                  Alliance for Open Media AV1 (decoders: libdav1d libaom-av1 av1 av1_cuvid av1_qsv ) (encoders: libaom-av1 librav1e libsvtav1 av1_nvenc av1_qsv av1_vaapi )
 DEVIL. mjpeg                Motion JPEG (decoders: mjpeg mjpeg_cuvid mjpeg_qsv ) (encoders: mjpeg mjpeg_qsv mjpeg_vaapi )
 DEV.L. vp9                  Google VP9 (decoders: vp9 libvpx-vp9 vp9_cuvid vp9_qsv ) (encoders: libvpx-vp9 vp9_vaapi vp9_qsv )
 DEV.L. mpeg4                MPEG-4 part 2 (encoders: mpeg4 libxvid )
 DEA.L. aac                  AAC (Advanced Audio Coding) (decoders: aac aac_fixed )
 D.AIL. acelp.kelvin         Sipro ACELP.KELVIN
 DEA..S flac                 FLAC (Free Lossless Audio Codec)
 DES... ass                  ASS (Advanced SSA) subtitle (decoders: ssa ass ) (encoders: ssa ass )
 ..D... klv                  SMPTE 336M Key-Length-Value (KLV) metadata
 ..T... ttf                  TrueType font
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test isolation."""
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture
def codec_listing() -> str:
    """Return a realistic ffmpeg codec listing."""
    return SAMPLE_CODEC_LISTING


@pytest.fixture
def source_video(temp_dir: Path) -> Path:
    """Create a placeholder source video of 1000 bytes."""
    path = temp_dir / "clip.mkv"
    path.write_bytes(b"\0" * 1000)
    return path


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()
