"""
Rule group modules.
"""
from .structure import StructureGroup
from .pwa import PWACompatibilityGroup
from .php_integration import PHPIntegrationGroup
from .browser import BrowserCompatibilityGroup
from .preview import LinuxPreviewGroup
from .forms import HTMLFormElementsGroup
from .runtime import RuntimeChecksGroup

__all__ = [
    "StructureGroup",
    "PWACompatibilityGroup",
    "PHPIntegrationGroup",
    "BrowserCompatibilityGroup",
    "LinuxPreviewGroup",
    "HTMLFormElementsGroup",
    "RuntimeChecksGroup",
]
