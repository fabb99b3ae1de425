"""
Presentation adapters over ValidationReport / DirectoryRunResult values.
"""
from .cli_report import (
    USAGE,
    exit_code_for_report,
    exit_code_for_run,
    render_report,
    render_scan_header,
    render_file_outcome,
    render_scan_summary,
)
from .json_report import api_description, render_json

__all__ = [
    "USAGE",
    "exit_code_for_report",
    "exit_code_for_run",
    "render_report",
    "render_scan_header",
    "render_file_outcome",
    "render_scan_summary",
    "api_description",
    "render_json",
]
