"""Fixtures for CLI command tests."""

from pathlib import Path
from unittest.mock import patch

import pytest

from rqd.codecs import parse_codec_listing
from rqd.config import RQDConfig


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep CLI invocations from reconfiguring the root logger."""
    with patch("rqd.cli.configure_logging_from_cli") as mock_configure:
        yield mock_configure


@pytest.fixture
def cli_obj() -> dict:
    """Click context object with a default configuration injected."""
    return {"config": RQDConfig()}


@pytest.fixture
def codecs(codec_listing: str):
    return parse_codec_listing(codec_listing)


@pytest.fixture
def listing_file(tmp_path: Path, codec_listing: str) -> Path:
    path = tmp_path / "codecs.txt"
    path.write_text(codec_listing)
    return path
