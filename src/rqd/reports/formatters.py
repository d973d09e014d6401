"""Output formatting utilities for reports."""

import csv
import io
import json
import os
import tempfile
from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import Any

from rqd.benchmark.models import BenchmarkResult
from rqd.core.formatting import format_file_size, format_ratio, format_score


class ReportFormat(Enum):
    """Supported output formats for reports."""

    CSV = "csv"
    JSON = "json"


# (header, key, width) layout of the results table
RESULT_TABLE_COLUMNS: list[tuple[str, str, int]] = [
    ("Filename", "filename", 48),
    ("VMAF Score", "vmaf", 10),
    ("Size", "size", 10),
    ("Size (bytes)", "size_bytes", 14),
    ("Compression Ratio", "compression_ratio", 17),
]


def results_to_rows(results: Iterable[BenchmarkResult]) -> list[dict[str, Any]]:
    """Convert results to raw row dicts (for CSV and JSON)."""
    return [result.model_dump() for result in results]


def results_to_display_rows(
    results: Iterable[BenchmarkResult],
) -> list[dict[str, Any]]:
    """Convert results to formatted row dicts (for the text table)."""
    return [
        {
            "filename": result.filename,
            "vmaf": format_score(result.vmaf),
            "size": format_file_size(result.size_bytes),
            "size_bytes": result.size_bytes,
            "compression_ratio": format_ratio(result.compression_ratio),
        }
        for result in results
    ]


def render_text_table(
    rows: list[dict[str, Any]],
    columns: list[tuple[str, str, int]],
) -> str:
    """Render rows as aligned text table.

    Args:
        rows: List of row dictionaries.
        columns: List of (header, key, width) tuples defining column layout.

    Returns:
        Formatted table string.
    """
    if not rows:
        return ""

    header_parts = []
    for header, _key, width in columns:
        header_parts.append(f"{header:<{width}}")
    header_line = " ".join(header_parts)

    try:
        terminal_width = os.get_terminal_size().columns
    except OSError:
        terminal_width = 120

    separator = "-" * min(len(header_line), terminal_width)

    lines = [header_line, separator]
    for row in rows:
        row_parts = []
        for _header, key, width in columns:
            value = str(row.get(key, "-"))
            if len(value) > width:
                value = value[: width - 3] + "..."
            row_parts.append(f"{value:<{width}}")
        lines.append(" ".join(row_parts).rstrip())

    return "\n".join(lines)


def render_csv(
    rows: list[dict[str, Any]],
    columns: list[str],
) -> str:
    """Render rows as CSV with headers.

    Args:
        rows: List of row dictionaries.
        columns: List of column keys for CSV headers.

    Returns:
        CSV formatted string with headers.
    """
    output = io.StringIO()
    writer = csv.DictWriter(
        output,
        fieldnames=columns,
        extrasaction="ignore",
    )
    writer.writeheader()

    for row in rows:
        clean_row = {}
        for col in columns:
            value = row.get(col)
            if value is None:
                clean_row[col] = ""
            elif isinstance(value, bool):
                clean_row[col] = str(value).casefold()
            else:
                clean_row[col] = str(value)
        writer.writerow(clean_row)

    return output.getvalue()


def render_json(rows: list[dict[str, Any]]) -> str:
    """Render rows as a JSON array."""
    return json.dumps(rows, indent=2, default=str)


def _atomic_write_text(path: Path, content: str) -> None:
    """Write content to file atomically using temp file + rename.

    Raises:
        OSError: If write or rename fails.
    """
    # Same directory keeps the rename on one filesystem
    fd, temp_path_str = tempfile.mkstemp(
        suffix=path.suffix,
        dir=path.parent,
        text=True,
    )
    temp_path = Path(temp_path_str)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        temp_path.replace(path)
    except Exception:
        temp_path.unlink(missing_ok=True)
        raise


def write_report_to_file(
    content: str,
    output_path: Path,
    force: bool = False,
) -> None:
    """Write report content to file with overwrite protection.

    Args:
        content: Report content to write.
        output_path: Target file path.
        force: If True, overwrite existing file.

    Raises:
        FileExistsError: If file exists and force is False.
        OSError: If write fails.
    """
    if output_path.exists() and not force:
        raise FileExistsError(f"File exists: {output_path}. Use --force to overwrite.")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    _atomic_write_text(output_path, content)
