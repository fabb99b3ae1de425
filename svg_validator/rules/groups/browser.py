"""
Browser compatibility.
"""
from svg_validator.rules.base_group import BaseRuleGroup, Rule
from svg_validator.utils import Document

# foreignObject is allowed
UNSUPPORTED_ELEMENTS = ("switch",)

DEFAULT_MAX_FILE_SIZE = 1024 * 1024


class BrowserCompatibilityGroup(BaseRuleGroup):

    def __init__(self, max_file_size: int = DEFAULT_MAX_FILE_SIZE):
        super().__init__()
        self.max_file_size = max_file_size

    @property
    def name(self) -> str:
        return "browser_compatibility"

    @property
    def display_name(self) -> str:
        return "Browser Compatibility"

    def _size_warning(self, doc: Document) -> str:
        return f"File size is {round(doc.size / 1024, 2)}KB, consider optimization"

    def _size_description(self) -> str:
        if self.max_file_size == DEFAULT_MAX_FILE_SIZE:
            return "File size under 1MB"
        return f"File size under {round(self.max_file_size / 1024, 2)}KB"

    def rules(self) -> tuple[Rule, ...]:
        return (
            Rule("standard_elements", "Uses only standard SVG elements (foreignObject allowed)",
                 lambda d: not any(f"<{el}" in d.text for el in UNSUPPORTED_ELEMENTS)),
            # No real CSS check is performed
            Rule("css_compatibility", "CSS properties compatible",
                 lambda d: True),
            Rule("file_size", self._size_description(),
                 lambda d: d.size < self.max_file_size,
                 warn_on_fail=self._size_warning),
        )
