"""
Rule primitives - atomic predicates over raw document text.

Every function here is total: empty strings, replacement characters from
undecodable bytes, and malformed markup all resolve to a boolean.
"""
import re
from xml.parsers.expat import ExpatError, ParserCreate

SVG_NS = "http://www.w3.org/2000/svg"
XHTML_NS = "http://www.w3.org/1999/xhtml"

FORM_CONTROLS = ("input", "button", "select", "textarea")

_PHP_BLOCK_RES = (
    re.compile(r"<\?php.*?\?>", re.DOTALL),
    re.compile(r"<\?=.*?\?>", re.DOTALL),
)
_SVG_NAMESPACE_RE = re.compile(r"""xmlns(?::svg)?=["']""" + re.escape(SVG_NS) + r"""["']""")
_ROOT_SVG_RE = re.compile(r"<svg[^>]*>")
_NAMESPACED_SVG_ROOT_RE = re.compile(r"""<svg[^>]*xmlns=["']""" + re.escape(SVG_NS) + r"""["']""")
_XHTML_ON_SVG_RE = re.compile(r"""<svg[^>]*xmlns:xhtml=["']""" + re.escape(XHTML_NS) + r"""["']""")
_SVG_BODY_RE = re.compile(r"<svg[^>]*>(.*?)</svg>", re.DOTALL)
_FOREIGN_OBJECT_BODY_RE = re.compile(r"<foreignObject[^>]*>(.*?)</foreignObject>", re.DOTALL)
_EXTERNAL_HREF_RE = re.compile(r"""href=["']((http|https|ftp)://)""", re.IGNORECASE)
_G_TRANSFORM_RE = re.compile(r"<g[^>]*transform=")
_G_ELEMENT_RE = re.compile(r"<g[\s>]")
_EXTERNAL_STYLESHEET_RE = re.compile(r"""link[^>]*rel=["']*stylesheet["']""")
_SCRIPT_SRC_RE = re.compile(r"<script[^>]*src=")
_REMOTE_SRC_RE = re.compile(r"""src=["'](http|https|//)""")
_REMOTE_HREF_RE = re.compile(r"""href=["'](http|https|//)""")
_RECT_ONCLICK_RE = re.compile(r"<rect[^>]*onclick=")


def contains_any(text: str, needles) -> bool:
    return any(needle in text for needle in needles)


def strip_php_blocks(text: str) -> str:
    """Remove `<?php ... ?>` and `<?= ... ?>` blocks (non-greedy, across lines)."""
    for pattern in _PHP_BLOCK_RES:
        text = pattern.sub("", text)
    return text


def is_well_formed_xml(text: str) -> bool:
    """
    Well-formedness only. Namespace prefixes are not resolved, so an
    undeclared prefix such as `xhtml:` still parses.
    """
    if not text.strip():
        return False
    parser = ParserCreate()
    try:
        parser.Parse(text, True)
    except ExpatError:
        return False
    return True


def has_svg_namespace(text: str) -> bool:
    return _SVG_NAMESPACE_RE.search(text) is not None


def has_root_svg(text: str) -> bool:
    return _ROOT_SVG_RE.search(text) is not None


def has_namespaced_svg_root(text: str) -> bool:
    return _NAMESPACED_SVG_ROOT_RE.search(text) is not None


def has_xhtml_namespace_on_root(text: str) -> bool:
    return _XHTML_ON_SVG_RE.search(text) is not None


def has_external_href(text: str) -> bool:
    return _EXTERNAL_HREF_RE.search(text) is not None


def has_g_transform(text: str) -> bool:
    return _G_TRANSFORM_RE.search(text) is not None


def has_g_elements(text: str) -> bool:
    return _G_ELEMENT_RE.search(text) is not None


def has_external_stylesheet(text: str) -> bool:
    return _EXTERNAL_STYLESHEET_RE.search(text) is not None


def has_script_src(text: str) -> bool:
    return _SCRIPT_SRC_RE.search(text) is not None


def has_remote_reference(text: str) -> bool:
    """Any src= or href= pointing at http(s) or a protocol-relative URL."""
    return _REMOTE_SRC_RE.search(text) is not None or _REMOTE_HREF_RE.search(text) is not None


def svg_body(text: str) -> str | None:
    """Content between the first `<svg ...>` and the next `</svg>`."""
    match = _SVG_BODY_RE.search(text)
    return match.group(1) if match else None


def foreign_object_body(text: str) -> str | None:
    match = _FOREIGN_OBJECT_BODY_RE.search(text)
    return match.group(1) if match else None


def has_php_inside_svg(text: str) -> bool:
    body = svg_body(text)
    if body is None:
        return False
    return contains_any(body, ("<?php", "<?=", "<?"))


def has_form_controls(fragment: str) -> bool:
    """Plain or xhtml:-prefixed input/button/select/textarea tags."""
    return any(
        f"<{tag}" in fragment or f"<xhtml:{tag}" in fragment
        for tag in FORM_CONTROLS
    )


def has_pseudo_buttons(text: str) -> bool:
    """SVG rect+text imitating a button."""
    rect_with_onclick = _RECT_ONCLICK_RE.search(text) is not None
    button_classes = 'class="button"' in text and 'class="button-text"' in text
    return rect_with_onclick or button_classes


def has_xhtml_controls(text: str) -> bool:
    return "<xhtml:button" in text or "<xhtml:input" in text
