from __future__ import annotations

from pathlib import Path

import pytest

from svg_validator.rules import primitives as p
from svg_validator.utils import Document, DocumentNotFoundError, load_document


PREDICATES = [
    p.is_well_formed_xml,
    p.has_svg_namespace,
    p.has_root_svg,
    p.has_namespaced_svg_root,
    p.has_xhtml_namespace_on_root,
    p.has_external_href,
    p.has_g_transform,
    p.has_g_elements,
    p.has_external_stylesheet,
    p.has_script_src,
    p.has_remote_reference,
    p.has_php_inside_svg,
    p.has_form_controls,
    p.has_pseudo_buttons,
    p.has_xhtml_controls,
]

AWKWARD_INPUTS = [
    "",
    "   \n\t",
    "<svg",
    "</svg><svg>",
    "<?php unterminated",
    "<svg>��</svg>",
    "<foreignObject><foreignObject>",
    "<" * 1000,
]


@pytest.mark.parametrize("predicate", PREDICATES, ids=lambda f: f.__name__)
@pytest.mark.parametrize("text", AWKWARD_INPUTS)
def test_predicates_are_total(predicate, text: str) -> None:
    assert isinstance(predicate(text), bool)


def test_strip_php_blocks_spans_lines() -> None:
    text = "<svg><?php\n$a = 1;\n?><?= $a\n?></svg>"
    assert p.strip_php_blocks(text) == "<svg></svg>"


def test_strip_php_blocks_is_non_greedy() -> None:
    text = "<?php $a = 1; ?><svg/><?php $b = 2; ?>"
    assert p.strip_php_blocks(text) == "<svg/>"


@pytest.mark.parametrize(
    "text, expected",
    [
        ('<svg xmlns="http://www.w3.org/2000/svg"/>', True),
        ('<svg:svg xmlns:svg="http://www.w3.org/2000/svg"/>', True),
        ("<svg xmlns='http://www.w3.org/2000/svg'/>", True),
        ('<svg xmlns="http://www.w3.org/1999/xhtml"/>', False),
        ("<svg/>", False),
    ],
)
def test_svg_namespace(text: str, expected: bool) -> None:
    assert p.has_svg_namespace(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ('<a href="https://cdn.example.com/x.css">', True),
        ('<use xlink:href="FTP://files.example.com/a.svg"/>', True),
        ('<a href="#local">', False),
        ('<a href="/relative/path">', False),
    ],
)
def test_external_href(text: str, expected: bool) -> None:
    assert p.has_external_href(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("<g>", True),
        ('<g id="a">', True),
        ("<g\n>", True),
        ("<glyph/>", False),
        ("<rect/>", False),
    ],
)
def test_g_elements(text: str, expected: bool) -> None:
    assert p.has_g_elements(text) is expected


def test_remote_reference_includes_protocol_relative() -> None:
    assert p.has_remote_reference('<image src="//cdn.example.com/a.png"/>')
    assert p.has_remote_reference('<a href="http://example.com">')
    assert not p.has_remote_reference('<image src="data:image/png;base64,AAAA"/>')


def test_php_inside_svg_ignores_code_outside_root() -> None:
    outside = '<?php $x = 1; ?>\n<svg xmlns="http://www.w3.org/2000/svg"><rect/></svg>'
    inside = '<svg xmlns="http://www.w3.org/2000/svg"><?= $x ?></svg>'
    assert not p.has_php_inside_svg(outside)
    assert p.has_php_inside_svg(inside)


def test_form_controls_accept_both_spellings() -> None:
    assert p.has_form_controls("<button>Go</button>")
    assert p.has_form_controls('<xhtml:select name="a"></xhtml:select>')
    assert not p.has_form_controls("<div>text</div>")


def test_document_flags_non_utf8_bytes() -> None:
    doc = Document(path=Path("x.svg"), raw=b"<svg>\xff\xfe</svg>", size=11)
    assert doc.is_utf8 is False
    assert doc.text.startswith("<svg>")


def test_document_has_php_markers() -> None:
    assert Document.from_text("<svg><?php ?></svg>").has_php
    assert Document.from_text("<svg><?= 1 ?></svg>").has_php
    assert not Document.from_text("<?xml version='1.0'?><svg/>").has_php


def test_load_document_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(DocumentNotFoundError) as excinfo:
        load_document(tmp_path / "gone.svg")
    assert str(excinfo.value) == f"File not found: {tmp_path / 'gone.svg'}"


def test_load_document_reads_bytes(tmp_path: Path) -> None:
    path = tmp_path / "a.svg"
    path.write_bytes(b"<svg/>")
    doc = load_document(path)

    assert doc.raw == b"<svg/>"
    assert doc.size == 6
    assert doc.readable
    assert doc.extension == "svg"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("<svg><xhtml:input/></svg>", True),
        ('<svg xmlns="http://www.w3.org/2000/svg"><a:b c:d="1"/></svg>', True),
        ("<svg><rect></svg>", False),
        ("<svg/><svg/>", False),
        ("<svg>&nbsp;</svg>", False),
        ('<svg a="1" a="2"/>', False),
    ],
)
def test_well_formedness_ignores_namespace_binding(text: str, expected: bool) -> None:
    assert p.is_well_formed_xml(text) is expected
