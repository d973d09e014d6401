"""Benchmark report rendering (text table, CSV, JSON)."""

from rqd.reports.formatters import (
    RESULT_TABLE_COLUMNS,
    ReportFormat,
    render_csv,
    render_json,
    render_text_table,
    results_to_display_rows,
    results_to_rows,
    write_report_to_file,
)

__all__ = [
    "RESULT_TABLE_COLUMNS",
    "ReportFormat",
    "render_csv",
    "render_json",
    "render_text_table",
    "results_to_display_rows",
    "results_to_rows",
    "write_report_to_file",
]
