"""
Security heuristics for embedded PHP.
Textual pattern matches only; they can match inside comments or string
literals and do not follow data flow.
"""
import re


# Functions that execute processes, evaluate code, or touch the filesystem
DANGEROUS_FUNCTIONS = [
    "eval",
    "exec",
    "system",
    "shell_exec",
    "passthru",
    "file_get_contents",
    "file_put_contents",
    "unlink",
    "rmdir",
]

REQUEST_PARAM = r"\$_(?:GET|POST|REQUEST)\b"

# Raw query execution calls
QUERY_CALL = r"(?:\bmysql_query|\bmysqli_query|\bpg_query|->\s*query)\s*\("

# Any of these between the parameter and the query call counts as parameterization
PARAMETERIZATION_KEYWORDS = [
    "prepare",
    "bind_param",
    "bindParam",
    "bindValue",
    "real_escape_string",
    "escape_string",
    "quote",
]

SECURITY_PATTERNS = [
    {
        "type": "UNESCAPED_ECHO",
        "pattern": r"(?:\b(?:echo|print)\s+|<\?=\s*)" + REQUEST_PARAM,
        "description": "Request parameter written to output without escaping",
    },
    {
        "type": "SQL_INJECTION",
        # Same line, either order
        "pattern": (
            r"(?:" + REQUEST_PARAM + r"[^\n]*?" + QUERY_CALL + r")"
            r"|(?:" + QUERY_CALL + r"[^\n]*?" + REQUEST_PARAM + r")"
        ),
        "description": "Request parameter used in a raw SQL query",
    },
]

_DANGEROUS_RES = {
    func: re.compile(r"\b" + re.escape(func) + r"\s*\(") for func in DANGEROUS_FUNCTIONS
}
_UNESCAPED_ECHO_RE = re.compile(SECURITY_PATTERNS[0]["pattern"], re.IGNORECASE)
_SQL_RE = re.compile(SECURITY_PATTERNS[1]["pattern"], re.IGNORECASE)
_PARAMETERIZED_RE = re.compile(
    "|".join(re.escape(k) for k in PARAMETERIZATION_KEYWORDS), re.IGNORECASE
)


def find_dangerous_functions(text: str) -> list[str]:
    """
    Find deny-listed functions that appear as calls.

    Args:
        text: Document text

    Returns:
        Offending function names, in deny-list order
    """
    return [func for func, pattern in _DANGEROUS_RES.items() if pattern.search(text)]


def has_unescaped_echo(text: str) -> bool:
    """True when a request parameter is echoed without an escaping call around it."""
    return _UNESCAPED_ECHO_RE.search(text) is not None


def has_sql_injection_risk(text: str) -> bool:
    """
    True when a request parameter and a raw query call share a line with no
    parameterization keyword in between.
    """
    for match in _SQL_RE.finditer(text):
        if not _PARAMETERIZED_RE.search(match.group(0)):
            return True
    return False

