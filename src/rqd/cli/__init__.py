"""CLI module for rqd."""

import logging
import sys
from pathlib import Path

import click

from rqd.cli.exit_codes import ExitCode
from rqd.cli.output import error_exit
from rqd.config import RQDConfig, configure_logging_from_cli, get_config

_logging_configured: bool = False

logger = logging.getLogger(__name__)


def _configure_logging(
    config: RQDConfig,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Configure logging from config plus CLI overrides (once per process)."""
    global _logging_configured
    if _logging_configured:
        return

    configure_logging_from_cli(
        config.logging,
        level=log_level,
        file=log_file,
        format="json" if log_json else None,
    )
    _logging_configured = True


def _is_interactive() -> bool:
    """Check if running in interactive mode (TTY).

    Extracted as a function to allow mocking in tests.
    """
    return sys.stdin.isatty()


@click.group()
@click.version_option(package_name="rqd")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.rqd/config.toml).",
)
@click.option(
    "--ffmpeg",
    "ffmpeg_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to the ffmpeg executable.",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    ffmpeg_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """rqd - Benchmark ffmpeg encoders by size and VMAF quality."""
    ctx.ensure_object(dict)

    # Preserve a config injected by tests
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = get_config(
                config_path=config_path, ffmpeg_path=ffmpeg_path
            )
        except ValueError as e:
            error_exit(f"Invalid configuration: {e}", ExitCode.CONFIG_ERROR)
    elif ffmpeg_path is not None:
        ctx.obj["config"].tools.ffmpeg = ffmpeg_path

    try:
        _configure_logging(ctx.obj["config"], log_level, log_file, log_json)
    except ValueError as e:
        error_exit(f"Invalid logging configuration: {e}", ExitCode.CONFIG_ERROR)


# Defer import to avoid circular dependency
def _register_commands():
    from rqd.cli.bench import bench_command
    from rqd.cli.codecs import codecs_command

    main.add_command(bench_command)
    main.add_command(codecs_command)


_register_commands()
