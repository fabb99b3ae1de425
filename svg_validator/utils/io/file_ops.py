"""
基础文件读写操作

提供 JSON 文件的读写功能，自动创建父目录。
"""
from pathlib import Path
from typing import Any

import orjson
from pydantic import BaseModel


def dumps_json(obj: Any, indent: bool = True) -> str:
    """
    Serialize an object (or pydantic model) to a JSON string.

    Args:
        obj: Object to serialize
        indent: Pretty-print with 2-space indentation

    Returns:
        JSON text
    """
    if isinstance(obj, BaseModel):
        obj = obj.model_dump(mode="json")
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(obj, option=option).decode("utf-8")


def read_json(path: Path | str) -> dict | None:
    """
    Read JSON file and return as dict.

    Args:
        path: Path to JSON file

    Returns:
        Parsed dict or None if file doesn't exist or parse fails
    """
    path = Path(path)
    if not path.exists():
        return None

    try:
        return orjson.loads(path.read_bytes())
    except (orjson.JSONDecodeError, OSError):
        return None


def write_json(path: Path | str, obj: Any) -> None:
    """
    Write object to JSON file with automatic parent directory creation.

    Args:
        path: Path to output JSON file
        obj: Object (or pydantic model) to serialize
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        f.write(dumps_json(obj))
        f.write('\n')


def parse_json_object(raw: bytes | str) -> dict | None:
    """
    Parse a JSON document that is expected to be an object.

    Returns:
        The parsed dict, or None for invalid JSON or a non-object payload
    """
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None

