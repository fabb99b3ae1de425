from __future__ import annotations

from pathlib import Path

from svg_validator.engine import SVGValidator, find_svg_files, scan_directory
from svg_validator.utils import FileSystemSource


class _SpySource(FileSystemSource):
    """Filesystem source that records which files were actually read."""

    def __init__(self):
        self.read: list[Path] = []

    def read_bytes(self, path: Path) -> bytes:
        self.read.append(Path(path))
        return super().read_bytes(path)


def test_find_svg_files_is_recursive_sorted_and_case_insensitive(tmp_path: Path) -> None:
    (tmp_path / "b").mkdir()
    (tmp_path / "a" / "deep").mkdir(parents=True)
    (tmp_path / "b" / "z.svg").write_text("<svg/>", encoding="utf-8")
    (tmp_path / "a" / "deep" / "Icon.SVG").write_text("<svg/>", encoding="utf-8")
    (tmp_path / "top.svg").write_text("<svg/>", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("<svg/>", encoding="utf-8")
    (tmp_path / "dir.svg").mkdir()

    files = find_svg_files(tmp_path)

    assert files == sorted(files, key=str)
    assert {p.name for p in files} == {"z.svg", "Icon.SVG", "top.svg"}


def test_find_svg_files_on_missing_directory(tmp_path: Path) -> None:
    assert find_svg_files(tmp_path / "nope") == []


def test_oversized_files_are_skipped_without_reading(tmp_path: Path, good_svg: str) -> None:
    small = tmp_path / "a_small.svg"
    small.write_text(good_svg, encoding="utf-8")
    big = tmp_path / "b_big.svg"
    big.write_text(good_svg + " " * (3000 - len(good_svg.encode("utf-8"))), encoding="utf-8")

    source = _SpySource()
    validator = SVGValidator(source=source, runtime_checks=False)
    run = scan_directory(tmp_path, validator, max_file_size=2000)

    assert source.read == [small]
    assert [o.path for o in run.outcomes] == [str(small), str(big)]
    assert run.outcomes[1].skipped
    assert run.outcomes[1].size == 3000
    assert run.outcomes[1].skipped_reason == "File too large (0.0MB) - would exhaust memory"
    assert run.total_files == 2
    assert run.passed_files == 1
    assert run.failed_files == 1
    assert run.success_rate == 50.0
    assert run.skipped == [str(big)]


def test_scan_mixes_passing_and_failing_files(tmp_path: Path, good_svg: str, plain_svg: str) -> None:
    (tmp_path / "good.svg").write_text(good_svg, encoding="utf-8")
    (tmp_path / "plain.svg").write_text(plain_svg, encoding="utf-8")
    seen = []

    run = scan_directory(
        tmp_path,
        SVGValidator(runtime_checks=False),
        on_outcome=lambda outcome: seen.append(Path(outcome.path).name),
    )

    assert seen == ["good.svg", "plain.svg"]
    assert run.passed_files == 1
    assert run.failed_files == 1
    assert run.outcomes[0].passed
    assert not run.outcomes[1].passed
    assert set(run.per_file) == {str(tmp_path / "good.svg"), str(tmp_path / "plain.svg")}


def test_scan_empty_directory(tmp_path: Path) -> None:
    run = scan_directory(tmp_path, SVGValidator(runtime_checks=False))

    assert run.outcomes == []
    assert run.total_files == 0
    assert run.success_rate == 0
