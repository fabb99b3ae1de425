"""
PWA compatibility: everything needed to render must live in the file.
"""
from svg_validator.rules import primitives as p
from svg_validator.rules.base_group import BaseRuleGroup, Rule


class PWACompatibilityGroup(BaseRuleGroup):

    @property
    def name(self) -> str:
        return "pwa_compatibility"

    @property
    def display_name(self) -> str:
        return "PWA Compatibility"

    def rules(self) -> tuple[Rule, ...]:
        return (
            Rule("inline_styles", "Uses inline styles",
                 lambda d: not p.has_external_stylesheet(d.text)),
            Rule("responsive_design", "Responsive design elements",
                 lambda d: "viewBox=" in d.text or "preserveAspectRatio=" in d.text),
            Rule("no_js_deps", "No external JavaScript dependencies",
                 lambda d: not p.has_script_src(d.text)),
            Rule("self_contained", "Self-contained SVG",
                 lambda d: not p.has_remote_reference(d.text)),
        )
