"""
SVG structure and validity.
"""
from svg_validator.rules import primitives as p
from svg_validator.rules.base_group import BaseRuleGroup, Rule
from svg_validator.utils import Document


def _valid_xml(doc: Document) -> bool:
    # Hybrid documents are parsed with their PHP blocks removed
    text = p.strip_php_blocks(doc.text) if doc.has_php else doc.text
    return p.is_well_formed_xml(text)


def _valid_xml_description(doc: Document) -> str:
    if doc.has_php:
        return "Valid XML structure (PHP+SVG compatible)"
    return "Valid XML structure"


class StructureGroup(BaseRuleGroup):
    """Well-formedness, namespace, root element and flat element tree."""

    @property
    def name(self) -> str:
        return "structure"

    @property
    def display_name(self) -> str:
        return "SVG Structure"

    def rules(self) -> tuple[Rule, ...]:
        return (
            Rule("valid_xml", _valid_xml_description, _valid_xml),
            Rule("svg_namespace", "SVG namespace present",
                 lambda d: p.has_svg_namespace(d.text)),
            Rule("root_svg_element", "Root SVG element present",
                 lambda d: p.has_root_svg(d.text)),
            Rule("viewbox_attribute", "ViewBox attribute present",
                 lambda d: "viewBox=" in d.text),
            Rule("dimensions", "Width and Height defined",
                 lambda d: "width=" in d.text and "height=" in d.text),
            Rule("no_external_deps", "No external dependencies",
                 lambda d: not p.has_external_href(d.text)),
            Rule("no_g_transform", "No g transform elements",
                 lambda d: not p.has_g_transform(d.text)),
            Rule("no_g_elements", "No g elements (use direct SVG elements instead)",
                 lambda d: not p.has_g_elements(d.text)),
        )
