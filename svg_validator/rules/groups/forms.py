"""
HTML form elements for interactive PWAs.

Interactive controls belong in a foreignObject as real XHTML elements,
not in SVG shapes with click handlers.
"""
from svg_validator.rules import primitives as p
from svg_validator.rules.base_group import Advisory, BaseRuleGroup, Rule
from svg_validator.utils import Document


def _has_foreign_object(doc: Document) -> bool:
    return "<foreignObject" in doc.text


def _form_controls_embedded(doc: Document) -> bool:
    if not _has_foreign_object(doc):
        return True
    body = p.foreign_object_body(doc.text)
    return body is not None and p.has_form_controls(body)


def _form_controls_description(doc: Document) -> str:
    if _has_foreign_object(doc):
        return "HTML form elements (input, button) in foreignObject"
    return "HTML form elements not required (no foreignObject)"


def _no_pseudo_buttons(doc: Document) -> bool:
    # Hybrid rect+xhtml usage is tolerated
    return not p.has_pseudo_buttons(doc.text) or p.has_xhtml_controls(doc.text)


def _proper_interactivity(doc: Document) -> bool:
    return not ("onclick=" in doc.text and not _has_foreign_object(doc))


def _xhtml_namespace(doc: Document) -> bool:
    if not _has_foreign_object(doc):
        return True
    return p.has_xhtml_namespace_on_root(doc.text)


class HTMLFormElementsGroup(BaseRuleGroup):

    @property
    def name(self) -> str:
        return "html_form_elements"

    @property
    def display_name(self) -> str:
        return "HTML Form Elements"

    def rules(self) -> tuple[Rule, ...]:
        return (
            Rule("foreign_object_present", "foreignObject elements present",
                 _has_foreign_object),
            Rule("html_form_elements", _form_controls_description,
                 _form_controls_embedded),
            Rule("no_pseudo_buttons", "No pseudo-buttons (or hybrid usage allowed)",
                 _no_pseudo_buttons),
            Rule("proper_interactivity", "Interactive elements properly embedded",
                 _proper_interactivity),
            Rule("xhtml_namespace", "XHTML namespace present when using foreignObject",
                 _xhtml_namespace),
        )

    def advisories(self) -> tuple[Advisory, ...]:
        return (
            Advisory(
                lambda d: not _has_foreign_object(d),
                "Consider using foreignObject to embed HTML form elements for better interactivity",
            ),
            Advisory(
                lambda d: _has_foreign_object(d) and not _xhtml_namespace(d),
                "Add xmlns:xhtml='http://www.w3.org/1999/xhtml' to <svg> tag "
                "when using foreignObject with HTML",
            ),
        )
