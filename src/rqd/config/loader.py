"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (RQD_*)
3. Config file (~/.rqd/config.toml)
4. Default values

Environment variables:
- RQD_CONFIG_PATH: Path to config file (overrides default location)
- RQD_FFMPEG_PATH: Path to ffmpeg executable
- RQD_QUALITY_LEVELS: Comma-separated -q:v ladder (e.g. "100,90,80")
- RQD_WORK_DIR_NAME: Output directory name created next to the source file
- RQD_ENCODE_TIMEOUT: Timeout in seconds for each encode
- RQD_EVALUATE_TIMEOUT: Timeout in seconds for each VMAF evaluation
- RQD_LOG_LEVEL: debug, info, warning or error
- RQD_LOG_FILE: Log file path
- RQD_LOG_FORMAT: text or json
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from rqd.config.env import EnvReader
from rqd.config.models import (
    DEFAULT_QUALITY_LEVELS,
    BenchmarkConfig,
    LoggingConfig,
    RQDConfig,
    SelectionConfig,
    ToolPathsConfig,
)

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".rqd"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


def get_default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the default config file path.

    Can be overridden by RQD_CONFIG_PATH environment variable.
    """
    env_path = EnvReader(env).get_path("RQD_CONFIG_PATH", must_exist=False)
    return env_path or DEFAULT_CONFIG_FILE


def load_config_file(
    path: Path | None = None, env: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        path: Path to config file. If None, uses default location.
        env: Optional environment mapping (for RQD_CONFIG_PATH).

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist or
        cannot be parsed.
    """
    if path is None:
        path = get_default_config_path(env)

    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load config file %s: %s", path, e)
        return {}

    logger.debug("Loaded config from %s", path)
    return config


def _section(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a config file table, raising ValueError if it is not one."""
    section = file_config.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a table, got {section!r}")
    return section


def _as_tuple(section: dict[str, Any], key: str, default: tuple) -> tuple:
    value = section.get(key, default)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{key} must be a list, got {value!r}")
    return tuple(value)


def _optional_path(key: str, value: Any) -> Path | None:
    if not value:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a path string, got {value!r}")
    return Path(value).expanduser()


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    ffmpeg_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> RQDConfig:
    """Get rqd configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides RQD_CONFIG_PATH).
        ffmpeg_path: CLI override for ffmpeg path.
        env: Environment mapping to read instead of os.environ.

    Returns:
        RQDConfig with merged configuration.

    Raises:
        ValueError: If a config file section is not a table, or a merged
            value has the wrong type or fails model validation.
    """
    reader = EnvReader(env)
    file_config = load_config_file(config_path, env)

    # Build tool paths config
    tools_file = _section(file_config, "tools")
    tools = ToolPathsConfig(
        ffmpeg=(
            ffmpeg_path
            or reader.get_path("RQD_FFMPEG_PATH")
            or _optional_path("ffmpeg", tools_file.get("ffmpeg"))
        ),
    )

    # Build benchmark config
    bench_file = _section(file_config, "benchmark")
    env_levels = reader.get_int_list("RQD_QUALITY_LEVELS")
    quality_levels = (
        tuple(env_levels)
        if env_levels
        else _as_tuple(bench_file, "quality_levels", DEFAULT_QUALITY_LEVELS)
    )
    benchmark = BenchmarkConfig(
        quality_levels=quality_levels,
        work_dir_name=reader.get_str(
            "RQD_WORK_DIR_NAME", bench_file.get("work_dir_name", "rqd")
        ),
        container=bench_file.get("container", "mp4"),
        encode_timeout=reader.get_int(
            "RQD_ENCODE_TIMEOUT", bench_file.get("encode_timeout")
        ),
        evaluate_timeout=reader.get_int(
            "RQD_EVALUATE_TIMEOUT", bench_file.get("evaluate_timeout")
        ),
    )

    # Build selection config
    selection_file = _section(file_config, "selection")
    selection_defaults = SelectionConfig()
    selection = SelectionConfig(
        hardware_suffixes=_as_tuple(
            selection_file, "hardware_suffixes", selection_defaults.hardware_suffixes
        ),
        recommended=_as_tuple(
            selection_file, "recommended", selection_defaults.recommended
        ),
    )

    # Build logging config
    logging_file = _section(file_config, "logging")
    logging_defaults = LoggingConfig()
    log_config = LoggingConfig(
        level=reader.get_str("RQD_LOG_LEVEL", logging_file.get("level", "info")),
        file=(
            reader.get_path("RQD_LOG_FILE", must_exist=False)
            or _optional_path("file", logging_file.get("file"))
        ),
        format=reader.get_str("RQD_LOG_FORMAT", logging_file.get("format", "text")),
        include_stderr=logging_file.get("include_stderr", False),
        max_bytes=logging_file.get("max_bytes", logging_defaults.max_bytes),
        backup_count=logging_file.get("backup_count", logging_defaults.backup_count),
    )

    return RQDConfig(
        tools=tools,
        benchmark=benchmark,
        selection=selection,
        logging=log_config,
    )
