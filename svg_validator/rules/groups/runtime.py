"""
Runtime/functional error heuristics (opt-in).

Catches problems that only show up when the server runs the document:
parse errors, mixed control-flow syntax, missing error handling, and
output emitted before headers.
"""
import re

from svg_validator.rules.base_group import BaseRuleGroup, Rule
from svg_validator.utils import Document

RUNTIME_ISSUE_PATTERNS = [
    # Mixed brace and alternative syntax
    re.compile(r"}\s*endforeach\s*;"),
    re.compile(r"}\s*endif\s*;"),
    re.compile(r"}\s*endwhile\s*;"),
    # echo statement without a terminating semicolon on its line
    re.compile(r"echo\s+[^;\n]*\n"),
]

ERROR_HANDLING_MARKERS = ("try {", "catch", "error_reporting", "ini_set", "set_error_handler")

_PHP_SECTION_RE = re.compile(r"<\?php(.*?)\?>", re.DOTALL)
_HEADER_CALL_RE = re.compile(r"header\s*\(")
_OUTPUT_CALL_RE = re.compile(r"(echo|print|printf|var_dump)\s*\(")
JSON_HEADER = "header('Content-Type: application/json')"


def has_runtime_issues(text: str) -> bool:
    return any(pattern.search(text) for pattern in RUNTIME_ISSUE_PATTERNS)


def has_error_handling(text: str) -> bool:
    return any(marker in text for marker in ERROR_HANDLING_MARKERS)


def has_output_before_headers(text: str) -> bool:
    for section in _PHP_SECTION_RE.findall(text):
        header = _HEADER_CALL_RE.search(section)
        if header and _OUTPUT_CALL_RE.search(section[:header.start()]):
            return True

    # An XML prolog ahead of a JSON API header breaks the JSON response
    xml_pos = text.find("<?xml")
    json_pos = text.find(JSON_HEADER)
    return xml_pos != -1 and json_pos != -1 and xml_pos < json_pos


class RuntimeChecksGroup(BaseRuleGroup):

    def __init__(self, syntax_checker):
        super().__init__()
        self.syntax_checker = syntax_checker

    @property
    def name(self) -> str:
        return "runtime"

    @property
    def display_name(self) -> str:
        return "Runtime Checks"

    def _syntax_ok(self, doc: Document) -> bool:
        if not doc.readable:
            return False
        return self.syntax_checker.check(doc.path)

    def rules(self) -> tuple[Rule, ...]:
        return (
            Rule("php_syntax", "PHP syntax is valid (no parse errors)",
                 self._syntax_ok,
                 warn_on_fail=lambda d: f"PHP syntax check failed for {d.path.name}"),
            Rule("runtime_safety", "No obvious runtime issues detected",
                 lambda d: not has_runtime_issues(d.text)),
            Rule("error_handling", "Proper error handling implemented",
                 lambda d: has_error_handling(d.text)),
            Rule("output_order", "No output before headers (prevents JSON parse errors)",
                 lambda d: not has_output_before_headers(d.text)),
        )
