"""Configuration management for rqd.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (RQD_*)
3. Config file (~/.rqd/config.toml)
4. Default values (lowest priority)
"""

from rqd.config.env import EnvReader
from rqd.config.loader import (
    DEFAULT_CONFIG_FILE,
    get_config,
    get_default_config_path,
    load_config_file,
)
from rqd.config.logging_factory import (
    build_logging_config,
    configure_logging_from_cli,
)
from rqd.config.models import (
    DEFAULT_QUALITY_LEVELS,
    BenchmarkConfig,
    LoggingConfig,
    RQDConfig,
    SelectionConfig,
    ToolPathsConfig,
)

__all__ = [
    # Models
    "DEFAULT_QUALITY_LEVELS",
    "BenchmarkConfig",
    "LoggingConfig",
    "RQDConfig",
    "SelectionConfig",
    "ToolPathsConfig",
    # Loader
    "DEFAULT_CONFIG_FILE",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    # Helpers
    "EnvReader",
    "build_logging_config",
    "configure_logging_from_cli",
]
