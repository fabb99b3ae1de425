"""
文档加载器

提供 DocumentSource 协议（存在性、大小、可读性、读取字节）以及
校验规则使用的不可变 Document 快照。
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from svg_validator.utils.core.errors import DocumentNotFoundError
from svg_validator.utils.core.logger import get_logger

logger = get_logger(__name__)

PHP_OPEN_MARKERS = ("<?php", "<?=")


class DocumentSource(Protocol):
    """Read-only access to documents on some storage."""

    def exists(self, path: Path) -> bool: ...

    def is_file(self, path: Path) -> bool: ...

    def size(self, path: Path) -> int | None: ...

    def is_readable(self, path: Path) -> bool: ...

    def read_bytes(self, path: Path) -> bytes: ...


class FileSystemSource:
    """DocumentSource backed by the local filesystem."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_file(self, path: Path) -> bool:
        return Path(path).is_file()

    def size(self, path: Path) -> int | None:
        try:
            return Path(path).stat().st_size
        except OSError:
            return None

    def is_readable(self, path: Path) -> bool:
        return os.access(path, os.R_OK)

    def read_bytes(self, path: Path) -> bytes:
        return Path(path).read_bytes()


@dataclass(frozen=True)
class Document:
    """
    Immutable snapshot of one document as seen by the rules.

    `text` is the UTF-8 decoding of `raw` with undecodable bytes replaced,
    so text rules always receive a str; `is_utf8` records whether the
    strict decode succeeded.
    """
    path: Path
    raw: bytes = b""
    size: int = 0
    readable: bool = True
    text: str = field(init=False)
    is_utf8: bool = field(init=False)

    def __post_init__(self):
        try:
            text = self.raw.decode("utf-8")
            is_utf8 = True
        except UnicodeDecodeError:
            text = self.raw.decode("utf-8", errors="replace")
            is_utf8 = False
        object.__setattr__(self, "text", text)
        object.__setattr__(self, "is_utf8", is_utf8)

    @property
    def has_php(self) -> bool:
        """True when the document carries an embedded PHP opening marker."""
        return any(marker in self.text for marker in PHP_OPEN_MARKERS)

    @property
    def extension(self) -> str:
        return self.path.suffix.lstrip(".").lower()

    @classmethod
    def from_text(cls, text: str, path: Path | str = "document.svg", readable: bool = True) -> "Document":
        raw = text.encode("utf-8")
        return cls(path=Path(path), raw=raw, size=len(raw), readable=readable)


def load_document(path: Path | str, source: DocumentSource | None = None) -> Document:
    """
    Load a document snapshot through a DocumentSource.

    Unreadable files yield an empty, unreadable snapshot instead of raising,
    so every content rule still resolves to a boolean.

    Args:
        path: Document path
        source: Storage backend (defaults to the local filesystem)

    Returns:
        Document snapshot

    Raises:
        DocumentNotFoundError: path does not exist
    """
    source = source or FileSystemSource()
    path = Path(path)
    if not source.exists(path):
        raise DocumentNotFoundError(path)

    size = source.size(path) or 0
    readable = source.is_readable(path)
    raw = b""
    if readable:
        try:
            raw = source.read_bytes(path)
        except OSError as e:
            logger.warning(f"Could not read {path}: {e}")
            readable = False

    return Document(path=path, raw=raw, size=size, readable=readable)
