"""
Machine-readable JSON rendering, shared by the CLI --json mode and the HTTP API.
"""
from svg_validator.schemas import DirectoryRunResult, ValidationReport
from svg_validator.utils import dumps_json, get_config


def render_json(result: ValidationReport | DirectoryRunResult) -> str:
    """Pretty-printed JSON for a report or a directory run."""
    return dumps_json(result)


def api_description() -> dict:
    """Static API descriptor returned for unmatched requests."""
    cfg = get_config()
    return {
        "name": "SVG PWA Validator API",
        "version": cfg.version,
        "description": "API for validating SVG files for PWA and PHP compatibility",
        "endpoints": [
            {
                "method": "GET",
                "url": "?file=path/to/file.svg",
                "description": "Test SVG file via GET parameter",
            },
            {
                "method": "POST",
                "url": "/",
                "description": "Test SVG file via POST JSON",
                "body": {"file": "path/to/file.svg"},
            },
        ],
        "cli_usage": {
            "command": "svg-validate <svg-file>",
            "example": "svg-validate ../devmind.svg",
        },
    }
