from datetime import datetime
from typing import Literal

TestStatus = Literal["PASS", "FAIL"]
RunStatus = Literal["PASSED", "FAILED"]


def now_timestamp() -> str:
    """返回当前本地时间，格式 YYYY-MM-DD HH:MM:SS"""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def success_rate(passed: int, total: int, ndigits: int = 2) -> float:
    """计算通过率百分比；total 为 0 时返回 0"""
    if total <= 0:
        return 0
    return round(passed / total * 100, ndigits)
