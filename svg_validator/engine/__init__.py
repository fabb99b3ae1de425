"""
Validation engine: accumulator, single-document evaluator, directory scanner.
"""
from .accumulator import ResultAccumulator
from .syntax_checker import PhpLintChecker, SyntaxChecker
from .evaluator import SVGValidator, build_default_groups
from .directory_scanner import find_svg_files, scan_directory

__all__ = [
    "ResultAccumulator",
    "PhpLintChecker",
    "SyntaxChecker",
    "SVGValidator",
    "build_default_groups",
    "find_svg_files",
    "scan_directory",
]
