"""
Rule engine: primitives, declarative rule descriptors, and rule groups.
"""
from .base_group import Advisory, BaseRuleGroup, GroupResult, Rule, run_rules
from .groups import (
    StructureGroup,
    PWACompatibilityGroup,
    PHPIntegrationGroup,
    BrowserCompatibilityGroup,
    LinuxPreviewGroup,
    HTMLFormElementsGroup,
    RuntimeChecksGroup,
)

__all__ = [
    "Advisory",
    "BaseRuleGroup",
    "GroupResult",
    "Rule",
    "run_rules",
    "StructureGroup",
    "PWACompatibilityGroup",
    "PHPIntegrationGroup",
    "BrowserCompatibilityGroup",
    "LinuxPreviewGroup",
    "HTMLFormElementsGroup",
    "RuntimeChecksGroup",
]
