from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


GOOD_SVG = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" xmlns:xhtml="http://www.w3.org/1999/xhtml" width="400" height="300" viewBox="0 0 400 300">
  <?php $title = "Counter"; ?>
  <rect x="0" y="0" width="400" height="300" fill="#fafafa"/>
  <text x="10" y="20"><?= htmlspecialchars($title) ?></text>
  <foreignObject x="10" y="40" width="200" height="60">
    <xhtml:form method="post">
      <xhtml:input type="text" name="q"/>
      <xhtml:button type="submit">Go</xhtml:button>
    </xhtml:form>
  </foreignObject>
</svg>
"""

PLAIN_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10" viewBox="0 0 10 10">
  <circle cx="5" cy="5" r="4"/>
</svg>
"""


@pytest.fixture
def good_svg() -> str:
    return GOOD_SVG


@pytest.fixture
def plain_svg() -> str:
    return PLAIN_SVG


@pytest.fixture
def write_svg(tmp_path: Path) -> Callable[..., Path]:
    def _write(content: str | bytes, name: str = "app.svg") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
