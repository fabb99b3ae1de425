"""
Linux desktop preview compatibility (file managers and thumbnailers).
"""
from svg_validator.rules.base_group import BaseRuleGroup, Rule


class LinuxPreviewGroup(BaseRuleGroup):

    def __init__(self, extension: str = "svg"):
        super().__init__()
        self.extension = extension.lstrip(".").lower()

    @property
    def name(self) -> str:
        return "linux_preview"

    @property
    def display_name(self) -> str:
        return "Linux Preview"

    def rules(self) -> tuple[Rule, ...]:
        return (
            Rule("file_readable", "File is readable",
                 lambda d: d.readable),
            Rule("correct_extension", f"Correct .{self.extension} extension",
                 lambda d: d.extension == self.extension),
            Rule("svg_header", "SVG header present",
                 lambda d: d.text.startswith("<?xml") or "<svg" in d.text),
        )
