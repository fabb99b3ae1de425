"""
数据模型包 - 校验报告相关的 Pydantic 数据结构
"""

from .base import (
    now_timestamp,
    success_rate,
)
from .reports import (
    TestRecord,
    Summary,
    ValidationReport,
    FileOutcome,
    DirectoryRunResult,
)

__all__ = [
    "now_timestamp",
    "success_rate",
    "TestRecord",
    "Summary",
    "ValidationReport",
    "FileOutcome",
    "DirectoryRunResult",
]
