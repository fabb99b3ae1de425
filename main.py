"""
SVG PHP+PWA Validator.
Validates a single PHP+SVG file or recursively scans a directory.

Usage:
    python main.py <svg-file-or-directory> [--json] [--output FILE] [--runtime-checks]
"""
import sys
from pathlib import Path

# Allow running from a source checkout without installing
sys.path.insert(0, str(Path(__file__).parent))

from svg_validator.cli import main


if __name__ == "__main__":
    sys.exit(main())
