from __future__ import annotations

from pathlib import Path

import orjson

from svg_validator.cli import main, resolve_target
from svg_validator.utils import read_json


def test_no_arguments_prints_usage(capsys) -> None:
    assert main([]) == 1
    assert "Usage: svg-validate" in capsys.readouterr().out


def test_single_passing_file(write_svg, good_svg: str, capsys) -> None:
    path = write_svg(good_svg)

    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert f"🚀 Testing SVG file: {path}" in out
    assert "Total Tests:  31" in out
    assert "✅ PASSED" in out


def test_single_failing_file_json(write_svg, plain_svg: str, capsys) -> None:
    path = write_svg(plain_svg)

    assert main([str(path), "--json"]) == 1
    data = orjson.loads(capsys.readouterr().out)
    assert data["file"] == str(path)
    assert data["summary"]["status"] == "FAILED"
    assert data["summary"]["total"] == 31


def test_missing_file_exits_nonzero(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "missing.svg"

    assert main([str(missing)]) == 1
    out = capsys.readouterr().out
    assert "❌ Error: Could not test file" in out
    assert f"File not found: {missing}" in out


def test_relative_target_falls_back_to_parent(tmp_path: Path, good_svg: str, monkeypatch, capsys) -> None:
    (tmp_path / "app.svg").write_text(good_svg, encoding="utf-8")
    workdir = tmp_path / "tools"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    assert resolve_target("app.svg") == Path("..") / "app.svg"
    assert main(["app.svg"]) == 0
    assert "../app.svg" in capsys.readouterr().out


def test_directory_scan_text_output(tmp_path: Path, good_svg: str, plain_svg: str, capsys) -> None:
    (tmp_path / "good.svg").write_text(good_svg, encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "plain.svg").write_text(plain_svg, encoding="utf-8")

    assert main([str(tmp_path)]) == 1
    out = capsys.readouterr().out
    assert "📁 Found 2 SVG files:" in out
    assert "📊 DIRECTORY SCAN SUMMARY" in out
    assert "Success Rate: 50.0%" in out
    assert "❌ Failed Files:" in out


def test_directory_scan_all_passing_writes_output(tmp_path: Path, good_svg: str, capsys) -> None:
    apps = tmp_path / "apps"
    apps.mkdir()
    (apps / "one.svg").write_text(good_svg, encoding="utf-8")
    output = tmp_path / "out" / "run.json"

    assert main([str(apps), "--json", "--output", str(output)]) == 0
    printed = orjson.loads(capsys.readouterr().out)
    saved = read_json(output)
    assert printed["passed_files"] == 1
    assert saved["total_files"] == 1
    assert saved["outcomes"][0]["report"]["summary"]["status"] == "PASSED"


def test_empty_directory_exits_nonzero(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path)]) == 1
    assert "No SVG files found in directory" in capsys.readouterr().out


def test_missing_config_file(write_svg, good_svg: str, tmp_path: Path, capsys) -> None:
    path = write_svg(good_svg)

    assert main([str(path), "--config", str(tmp_path / "nope.yaml")]) == 1
    assert "Config file not found" in capsys.readouterr().err
