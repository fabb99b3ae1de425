"""
External PHP syntax checking.
"""
import subprocess
from pathlib import Path
from typing import Protocol

from svg_validator.utils import get_logger

logger = get_logger(__name__)


class SyntaxChecker(Protocol):
    """Answers whether the embedded code in a file parses."""

    def check(self, path: Path) -> bool: ...


class PhpLintChecker:
    """
    Runs `php -l <file>` and maps exit code 0 to valid.

    The file is never executed. A missing binary or a timeout counts as
    invalid and is logged.
    """

    def __init__(self, php_binary: str = "php", timeout_seconds: float = 10):
        self.php_binary = php_binary
        self.timeout_seconds = timeout_seconds

    def check(self, path: Path) -> bool:
        try:
            result = subprocess.run(
                [self.php_binary, "-l", str(path)],
                capture_output=True,
                text=True,
                timeout=self.timeout_seconds,
            )
        except FileNotFoundError:
            logger.warning(f"PHP binary not found: {self.php_binary}")
            return False
        except subprocess.TimeoutExpired:
            logger.warning(f"php -l timed out after {self.timeout_seconds}s on {path}")
            return False

        if result.returncode != 0:
            logger.info(f"php -l reported errors for {path}: {result.stdout.strip() or result.stderr.strip()}")
        return result.returncode == 0
