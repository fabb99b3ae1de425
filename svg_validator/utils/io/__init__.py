"""
I/O - 输入输出操作模块

包含文档加载和 JSON 读写功能。
"""

from .file_ops import (
    dumps_json,
    read_json,
    write_json,
    parse_json_object,
)
from .loaders import (
    PHP_OPEN_MARKERS,
    Document,
    DocumentSource,
    FileSystemSource,
    load_document,
)

__all__ = [
    # File operations
    "dumps_json",
    "read_json",
    "write_json",
    "parse_json_object",
    # Loaders
    "PHP_OPEN_MARKERS",
    "Document",
    "DocumentSource",
    "FileSystemSource",
    "load_document",
]
