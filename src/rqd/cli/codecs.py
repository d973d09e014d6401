"""rqd codecs command: show the parsed ffmpeg codec listing."""

import json
from pathlib import Path

import click

from rqd.cli.exit_codes import ExitCode
from rqd.cli.output import error_exit
from rqd.codecs import (
    Codec,
    CodecKind,
    CodecListingError,
    parse_codec_listing,
    select_hardware,
)
from rqd.config import RQDConfig
from rqd.tools import ToolError, list_codecs, require_ffmpeg


def load_codecs(
    config: RQDConfig, from_file: Path | None, json_output: bool = False
) -> list[Codec]:
    """Parse codecs from a saved listing or from ffmpeg, exiting on failure."""
    try:
        if from_file is not None:
            return parse_codec_listing(
                from_file.read_text(encoding="utf-8", errors="replace")
            )
        return list_codecs(require_ffmpeg(config.tools.ffmpeg))
    except ToolError as e:
        error_exit(str(e), ExitCode.TOOL_NOT_AVAILABLE, json_output)
    except CodecListingError as e:
        error_exit(
            f"Could not parse codec listing: {e.format_error()}",
            ExitCode.PARSE_ERROR,
            json_output,
        )


def format_codec_line(codec: Codec) -> str:
    """Format one codec for the listing display."""
    line = f"{codec.flags} {codec.extension:<20} {codec.name}"
    if codec.encoders:
        line += f"  [encoders: {', '.join(codec.encoders)}]"
    if codec.decoders:
        line += f"  [decoders: {', '.join(codec.decoders)}]"
    return line


@click.command("codecs")
@click.option(
    "--kind",
    type=click.Choice([kind.value for kind in CodecKind], case_sensitive=False),
    default=None,
    help="Only show codecs of this media kind.",
)
@click.option("--encodable", is_flag=True, help="Only show codecs with an encoder.")
@click.option(
    "--hardware",
    is_flag=True,
    help="Only show video codecs with a hardware encoder.",
)
@click.option(
    "--from-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Parse a saved 'ffmpeg -codecs' listing instead of running ffmpeg.",
)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON.")
@click.pass_context
def codecs_command(
    ctx: click.Context,
    kind: str | None,
    encodable: bool,
    hardware: bool,
    from_file: Path | None,
    json_output: bool,
) -> None:
    """List the codecs supported by ffmpeg.

    Runs 'ffmpeg -codecs' (or reads a saved listing) and shows the parsed
    capability flags and encoder/decoder implementations.
    """
    config: RQDConfig = ctx.obj["config"]
    codecs = load_codecs(config, from_file, json_output)

    if kind is not None:
        wanted = CodecKind(kind.lower())
        codecs = [codec for codec in codecs if codec.kind is wanted]
    if encodable:
        codecs = [codec for codec in codecs if codec.encodable]
    if hardware:
        codecs = select_hardware(codecs, config.selection.hardware_suffixes)

    if json_output:
        click.echo(json.dumps([codec.to_dict() for codec in codecs], indent=2))
        return

    if not codecs:
        click.echo("No matching codecs.")
        return

    for codec in codecs:
        click.echo(format_codec_line(codec))
    click.echo()
    click.echo(f"{len(codecs)} codec(s)")
