"""Environment variable reader with dependency injection support.

This module provides the EnvReader class for reading and parsing environment
variables with type conversion. It accepts an optional env mapping so tests
never have to touch os.environ.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


class EnvReader:
    """Environment variable reader with type conversion and validation.

    Example:
        reader = EnvReader()
        timeout = reader.get_int("RQD_ENCODE_TIMEOUT")

        reader = EnvReader(env={"RQD_ENCODE_TIMEOUT": "600"})
        timeout = reader.get_int("RQD_ENCODE_TIMEOUT")  # Returns 600
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        """Initialize the environment reader.

        Args:
            env: Optional mapping to use instead of os.environ.
        """
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def get_str(self, var: str, default: str | None = None) -> str | None:
        """Get a string from environment variable.

        Empty values are treated as unset.
        """
        value = self._env.get(var)
        if not value:
            return default
        return value

    def get_int(self, var: str, default: int | None = None) -> int | None:
        """Get an integer from environment variable.

        Args:
            var: Environment variable name.
            default: Default value if not set or invalid.

        Returns:
            Parsed integer value, or default if not set or invalid.
            Logs a warning if the value is set but cannot be parsed.
        """
        value = self._env.get(var)
        if not value:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid integer value for %s: %s", var, value)
            return default

    def get_bool(self, var: str, default: bool | None = None) -> bool | None:
        """Get a boolean from environment variable.

        "true", "1", "yes" and "on" (case-insensitive) are true; any other
        non-empty value is false.
        """
        value = self._env.get(var)
        if value is None:
            return default
        return value.lower() in ("true", "1", "yes", "on")

    def get_path(
        self, var: str, must_exist: bool = True, default: Path | None = None
    ) -> Path | None:
        """Get a path from environment variable.

        Args:
            var: Environment variable name.
            must_exist: If True, a path that does not exist is logged and
                ignored.
            default: Default value if not set or path doesn't exist.

        Returns:
            Path object, or default.
        """
        value = self._env.get(var)
        if not value:
            return default

        path = Path(value).expanduser()
        if must_exist and not path.exists():
            logger.warning(
                "Environment variable %s points to non-existent path: %s",
                var,
                value,
            )
            return default
        return path

    def get_int_list(
        self, var: str, separator: str = ",", default: list[int] | None = None
    ) -> list[int] | None:
        """Get a list of integers from a separator-delimited variable.

        Returns default (and logs a warning) if any element is not an integer.
        """
        value = self._env.get(var)
        if not value:
            return default
        try:
            return [int(part) for part in value.split(separator) if part.strip()]
        except ValueError:
            logger.warning("Invalid integer list for %s: %s", var, value)
            return default
