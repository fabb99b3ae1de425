"""
Human-readable text rendering for the command line.
"""
from pathlib import Path

from svg_validator.schemas import DirectoryRunResult, FileOutcome, ValidationReport, now_timestamp

RULE = "=" * 80
THIN_RULE = "-" * 80

USAGE = """🔍 SVG PHP+PWA Validator - Command Line Interface
===============================================

Usage: svg-validate <svg-file-or-directory> [--json] [--output FILE] [--runtime-checks]
Examples:
  Single file: svg-validate ../devmind.svg
  Directory:   svg-validate ../correct/
  All folders: svg-validate ../
"""


def exit_code_for_report(report: ValidationReport) -> int:
    return 0 if report.all_passed else 1


def exit_code_for_run(run: DirectoryRunResult) -> int:
    return 1 if run.failed_files > 0 or run.total_files == 0 else 0


def render_report(report: ValidationReport) -> str:
    """Detailed single-file report: summary block, per-test table, errors, warnings."""
    lines: list[str] = []
    header = f"🚀 Testing SVG file: {report.file}"
    lines.append(header)
    lines.append("=" * (len(str(report.file)) + 19))
    lines.append("")

    if report.errors and not report.tests:
        lines.append("❌ Error: Could not test file")
        for error in report.errors:
            lines.append(f"   {error}")
        return "\n".join(lines)

    summary = report.summary
    lines.append("📊 Test Results Summary:")
    lines.append("------------------------")
    lines.append(f"Total Tests:  {summary.total}")
    lines.append(f"Passed:       {summary.passed} ✅")
    lines.append(f"Failed:       {summary.failed} ❌")
    lines.append(f"Warnings:     {summary.warnings} ⚠️")
    lines.append(f"Success Rate: {summary.success_rate}%")
    status = "✅ PASSED" if summary.status == "PASSED" else "❌ FAILED"
    lines.append(f"Status:       {status}")
    lines.append("")

    lines.append("📋 Detailed Test Results:")
    lines.append("--------------------------")
    for test in report.tests:
        mark = "✅" if test.passed else "❌"
        lines.append(f"{test.name:<30} {mark} {test.description}")

    if report.errors:
        lines.append("")
        lines.append("🔴 Errors:")
        lines.append("----------")
        lines.extend(f"• {error}" for error in report.errors)

    if report.warnings:
        lines.append("")
        lines.append("⚠️  Warnings:")
        lines.append("-------------")
        lines.extend(f"• {warning}" for warning in report.warnings)

    lines.append("")
    lines.append(f"🕒 Test completed at: {report.timestamp}")
    return "\n".join(lines)


def render_scan_header(directory: Path | str, files: list[Path]) -> str:
    lines = [f"🚀 Scanning directory recursively: {directory}"]
    lines.append("=" * (len(str(directory)) + 33))
    lines.append("")
    if not files:
        lines.append(f"❌ No SVG files found in directory: {directory}")
        return "\n".join(lines)

    lines.append(f"📁 Found {len(files)} SVG files:")
    lines.extend(f"   📄 {path}" for path in files)
    lines.append("")
    return "\n".join(lines)


def render_file_outcome(outcome: FileOutcome) -> str:
    """Short pass/fail block printed for each file during a directory scan."""
    lines = [THIN_RULE, f"🔍 Testing: {outcome.path}", THIN_RULE]

    if outcome.report is None:
        lines.append(f"⚠️ SKIPPED: {outcome.skipped_reason}")
        lines.append("")
        return "\n".join(lines)

    report = outcome.report
    counts = f"{report.summary.passed}/{report.summary.total} tests"
    if outcome.passed:
        lines.append(f"✅ PASSED ({counts})")
    else:
        lines.append(f"❌ FAILED ({counts})")
        failed = report.failed_tests()
        if failed:
            lines.append("")
            lines.append("📋 Failed Tests:")
            lines.extend(f"   ❌ {t.name}: {t.description}" for t in failed)
        for error in report.errors:
            lines.append(f"   🔴 {error}")
    lines.append("")
    return "\n".join(lines)


def render_scan_summary(run: DirectoryRunResult) -> str:
    lines = [RULE, "📊 DIRECTORY SCAN SUMMARY", RULE]
    lines.append(f"Total Files:  {run.total_files}")
    lines.append(f"Passed:       {run.passed_files} ✅")
    lines.append(f"Failed:       {run.failed_files} ❌")
    lines.append(f"Success Rate: {run.success_rate}%")

    failed = [o for o in run.outcomes if o.report is not None and not o.passed]
    if failed:
        lines.append("")
        lines.append("❌ Failed Files:")
        for outcome in failed:
            summary = outcome.report.summary
            lines.append(f"   📄 {outcome.path} ({summary.passed}/{summary.total})")

    if run.skipped:
        lines.append("")
        lines.append("⚠️ Skipped Files:")
        lines.extend(f"   📄 {path}" for path in run.skipped)

    lines.append("")
    lines.append(f"🕒 Scan completed at: {now_timestamp()}")
    return "\n".join(lines)
