"""
Command line entry point: validate a single file or scan a directory.
"""
import argparse
import sys
from pathlib import Path

from svg_validator.engine import SVGValidator, find_svg_files, scan_directory
from svg_validator.presentation import (
    USAGE,
    exit_code_for_report,
    exit_code_for_run,
    render_file_outcome,
    render_json,
    render_report,
    render_scan_header,
    render_scan_summary,
)
from svg_validator.utils import ConfigError, get_config, get_logger, reload_config, set_log_level, write_json

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svg-validate",
        description="Validate PHP+SVG progressive web app files",
        add_help=True,
    )
    parser.add_argument(
        "target",
        nargs="?",
        help="SVG file or directory to validate (directories are scanned recursively)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file (default: configs/validator.yaml)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the JSON report instead of the text report"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Also write the JSON report to this file"
    )
    parser.add_argument(
        "--runtime-checks",
        action="store_true",
        help="Enable runtime checks (php -l syntax check and runtime heuristics)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress to stderr"
    )
    return parser


def resolve_target(target: str, fallback_base: str = "..") -> Path:
    """
    Resolve the CLI target.

    A relative path that does not exist is retried under `fallback_base`.
    The retried path is returned even if it is also missing so the caller
    reports the final location.
    """
    path = Path(target)
    if path.exists() or path.is_absolute():
        return path
    candidate = Path(fallback_base) / target
    logger.info(f"{path} not found, retrying as {candidate}")
    return candidate


def run_directory(directory: Path, validator: SVGValidator, as_json: bool, output: str | None) -> int:
    files = find_svg_files(directory, validator.config.extension)

    if not as_json:
        print(render_scan_header(directory, files))
    if not files and not as_json:
        return 1

    on_outcome = None if as_json else (lambda outcome: print(render_file_outcome(outcome)))
    run = scan_directory(directory, validator, on_outcome=on_outcome, files=files)

    if as_json:
        print(render_json(run))
    else:
        print(render_scan_summary(run))
    if output:
        write_json(output, run)
    return exit_code_for_run(run)


def run_file(path: Path, validator: SVGValidator, as_json: bool, output: str | None) -> int:
    report = validator.evaluate(path)
    print(render_json(report) if as_json else render_report(report))
    if output:
        write_json(output, report)
    return exit_code_for_report(report)


def main(argv: list[str] | None = None) -> int:
    """
    Run the CLI.

    Returns:
        Process exit code: 0 when everything passed, 1 on any failure,
        missing argument, or missing file
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level("INFO")

    if args.target is None:
        print(USAGE)
        return 1

    try:
        if args.config:
            reload_config(args.config)
    except ConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    cfg = get_config()
    validator = SVGValidator(
        config=cfg,
        runtime_checks=True if args.runtime_checks else None,
    )

    target = resolve_target(args.target, cfg.get("cli.fallback_base", ".."))
    if target.is_dir():
        return run_directory(target, validator, args.json, args.output)
    return run_file(target, validator, args.json, args.output)


if __name__ == "__main__":
    sys.exit(main())
