"""
PHP integration and security checks.
"""
from svg_validator.rules import primitives as p
from svg_validator.rules.base_group import BaseRuleGroup, Rule
from svg_validator.utils import Document
from svg_validator.utils.safety import (
    find_dangerous_functions,
    has_sql_injection_risk,
    has_unescaped_echo,
)


def _dangerous_functions_warning(doc: Document) -> str:
    return "Dangerous functions detected: " + ", ".join(find_dangerous_functions(doc.text))


class PHPIntegrationGroup(BaseRuleGroup):
    """Embedded PHP placement, file encoding, and heuristic security findings."""

    @property
    def name(self) -> str:
        return "php_integration"

    @property
    def display_name(self) -> str:
        return "PHP Integration"

    def rules(self) -> tuple[Rule, ...]:
        return (
            Rule("php_in_svg", "PHP code embedded within SVG tags",
                 lambda d: p.has_php_inside_svg(d.text)),
            Rule("php_tags_present", "PHP tags present in file",
                 lambda d: d.has_php),
            # XML prolog is optional; namespaced root + PHP is enough
            Rule("php_svg_structure", "Proper PHP+SVG file structure",
                 lambda d: p.has_namespaced_svg_root(d.text) and d.has_php),
            Rule("utf8_encoding", "UTF-8 encoding",
                 lambda d: d.is_utf8),
            *self.security_rules(),
        )

    @staticmethod
    def security_rules() -> tuple[Rule, ...]:
        return (
            Rule(
                "security_dangerous_functions",
                "No dangerous PHP functions",
                lambda d: not find_dangerous_functions(d.text),
                warn_on_fail=_dangerous_functions_warning,
            ),
            Rule(
                "security_xss_protection",
                "No direct user input echoing",
                lambda d: not has_unescaped_echo(d.text),
                warn_on_fail="Potential XSS vulnerability: Use htmlspecialchars() for user input",
            ),
            Rule(
                "security_sql_injection",
                "No direct SQL query with user input",
                lambda d: not has_sql_injection_risk(d.text),
                warn_on_fail="Potential SQL injection: Use prepared statements",
            ),
        )
