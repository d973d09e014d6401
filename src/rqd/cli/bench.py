"""rqd bench command: encode a file with selected codecs and score with VMAF."""

import logging
from pathlib import Path

import click

from rqd.benchmark import RESULT_COLUMNS, run_benchmark
from rqd.cli import _is_interactive
from rqd.cli.exit_codes import ExitCode
from rqd.cli.output import error_exit
from rqd.codecs import (
    Codec,
    CodecListingError,
    SelectionPreset,
    UnknownCodecError,
    select_codecs,
    select_video_encodable,
)
from rqd.config import RQDConfig
from rqd.reports import (
    RESULT_TABLE_COLUMNS,
    ReportFormat,
    render_csv,
    render_json,
    render_text_table,
    results_to_display_rows,
    results_to_rows,
    write_report_to_file,
)
from rqd.tools import ToolError, list_codecs, require_ffmpeg

logger = logging.getLogger(__name__)


def _prompt_preset() -> SelectionPreset:
    """Ask which selection preset to use."""
    click.echo("Which video codecs would you like to test?")
    for preset in SelectionPreset:
        click.echo(f"  {preset.value:<12} {preset.description}")
    choice = click.prompt(
        "Preset",
        type=click.Choice([preset.value for preset in SelectionPreset]),
        default=SelectionPreset.RECOMMENDED.value,
    )
    return SelectionPreset(choice)


def parse_index_selection(text: str, count: int) -> list[int]:
    """Parse a comma-separated list of 1-based indices.

    Raises:
        click.BadParameter: On non-numeric or out-of-range entries, or an
            empty selection.
    """
    indices: list[int] = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit() or not 1 <= int(part) <= count:
            raise click.BadParameter(f"'{part}' is not a number from 1 to {count}")
        indices.append(int(part) - 1)
    if not indices:
        raise click.BadParameter("select at least one codec")
    return indices


def _prompt_custom(codecs: list[Codec]) -> list[str]:
    """Ask the user to pick codecs from the encodable video codecs."""
    candidates = select_video_encodable(codecs)
    if not candidates:
        return []

    click.echo("Please select your desired codecs:")
    for number, codec in enumerate(candidates, start=1):
        click.echo(f"  {number:>3}. {codec.name} ({codec.extension})")

    indices = click.prompt(
        "Codec numbers (comma-separated)",
        value_proc=lambda text: parse_index_selection(text, len(candidates)),
    )
    return [candidates[index].extension for index in indices]


def _resolve_preset(
    preset: str | None, codec_names: tuple[str, ...]
) -> SelectionPreset:
    if preset is not None:
        return SelectionPreset(preset)
    if codec_names:
        return SelectionPreset.CUSTOM
    if _is_interactive():
        return _prompt_preset()
    error_exit(
        "No codec selection given. Use --preset or --codec.",
        ExitCode.INVALID_SELECTION,
    )


def _render_report(results: list, report_format: ReportFormat) -> str:
    rows = results_to_rows(results)
    if report_format is ReportFormat.JSON:
        return render_json(rows) + "\n"
    return render_csv(rows, RESULT_COLUMNS)


@click.command("bench")
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("results.csv"),
    show_default=True,
    help="Report file to write.",
)
@click.option(
    "--format",
    "report_format",
    type=click.Choice([fmt.value for fmt in ReportFormat]),
    default=ReportFormat.CSV.value,
    show_default=True,
    help="Report file format.",
)
@click.option(
    "--preset",
    type=click.Choice([preset.value for preset in SelectionPreset]),
    default=None,
    help="Codec selection preset (prompted when omitted on a TTY).",
)
@click.option(
    "--codec",
    "codec_names",
    multiple=True,
    help="Codec name or identifier for the custom preset (repeatable).",
)
@click.option("--force", is_flag=True, help="Overwrite an existing report.")
@click.pass_context
def bench_command(
    ctx: click.Context,
    path: Path,
    output: Path,
    report_format: str,
    preset: str | None,
    codec_names: tuple[str, ...],
    force: bool,
) -> None:
    """Encode PATH with the selected codecs at several quality levels.

    Every encoded file is scored against PATH with ffmpeg's libvmaf filter.
    Results are shown as a table and written to the report file.
    """
    config: RQDConfig = ctx.obj["config"]

    if not path.is_file():
        error_exit(f"{path} is not a file", ExitCode.TARGET_NOT_FOUND)
    if output.exists() and not force:
        error_exit(
            f"{output} already exists. Use --force to overwrite.",
            ExitCode.OUTPUT_EXISTS,
        )

    try:
        ffmpeg_path = require_ffmpeg(config.tools.ffmpeg)
    except ToolError as e:
        error_exit(str(e), ExitCode.TOOL_NOT_AVAILABLE)

    selection = _resolve_preset(preset, codec_names)
    try:
        codecs = list_codecs(ffmpeg_path)
    except ToolError as e:
        error_exit(str(e), ExitCode.TOOL_NOT_AVAILABLE)
    except CodecListingError as e:
        error_exit(
            f"Could not parse codec listing: {e.format_error()}", ExitCode.PARSE_ERROR
        )

    names = list(codec_names)
    if selection is SelectionPreset.CUSTOM and not names:
        if not _is_interactive():
            error_exit(
                "The custom preset needs at least one --codec.",
                ExitCode.INVALID_SELECTION,
            )
        names = _prompt_custom(codecs)

    try:
        selected = select_codecs(
            codecs,
            selection,
            names=names,
            hardware_suffixes=config.selection.hardware_suffixes,
            recommended=config.selection.recommended,
        )
    except UnknownCodecError as e:
        error_exit(str(e), ExitCode.INVALID_SELECTION)

    if not selected:
        error_exit("No codecs matched the selection.", ExitCode.INVALID_SELECTION)

    extensions = ", ".join(codec.extension for codec in selected)
    click.echo(f"Benchmarking {len(selected)} codec(s): {extensions}")

    try:
        results = run_benchmark(ffmpeg_path, path, selected, config.benchmark)
    except OSError as e:
        error_exit(f"Benchmark failed: {e}", ExitCode.OPERATION_FAILED)

    click.echo()
    click.echo(
        render_text_table(results_to_display_rows(results), RESULT_TABLE_COLUMNS)
    )
    click.echo()

    try:
        write_report_to_file(
            _render_report(results, ReportFormat(report_format)), output, force=force
        )
    except (FileExistsError, OSError) as e:
        error_exit(f"Could not write report: {e}", ExitCode.OPERATION_FAILED)

    logger.info("Wrote %d result row(s) to %s", len(results), output)
    click.echo(f"Results written to {output}")
