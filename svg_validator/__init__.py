"""
SVG PHP+PWA Validator - static validation of PHP+SVG progressive web apps.
"""
from svg_validator.engine import SVGValidator, scan_directory
from svg_validator.schemas import DirectoryRunResult, Summary, TestRecord, ValidationReport

__version__ = "1.0.0"

__all__ = [
    "SVGValidator",
    "scan_directory",
    "DirectoryRunResult",
    "Summary",
    "TestRecord",
    "ValidationReport",
]
