"""
Safety sub-package.
Provides heuristic security scanning for embedded PHP.
"""
from .scanner import (
    DANGEROUS_FUNCTIONS,
    PARAMETERIZATION_KEYWORDS,
    SECURITY_PATTERNS,
    find_dangerous_functions,
    has_unescaped_echo,
    has_sql_injection_risk,
)

__all__ = [
    "DANGEROUS_FUNCTIONS",
    "PARAMETERIZATION_KEYWORDS",
    "SECURITY_PATTERNS",
    "find_dangerous_functions",
    "has_unescaped_echo",
    "has_sql_injection_risk",
]
