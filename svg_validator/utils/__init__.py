"""
工具模块 - 配置管理、日志、文档加载与安全扫描
"""

from .core import (
    Config,
    config,
    get_config,
    reload_config,
    ValidatorError,
    ConfigError,
    DocumentNotFoundError,
    get_logger,
    set_log_level,
    LoggerManager,
)
from .io import (
    dumps_json,
    read_json,
    write_json,
    parse_json_object,
    Document,
    DocumentSource,
    FileSystemSource,
    load_document,
)
from .safety import (
    DANGEROUS_FUNCTIONS,
    find_dangerous_functions,
    has_unescaped_echo,
    has_sql_injection_risk,
)

__all__ = [
    # Config
    "Config",
    "config",
    "get_config",
    "reload_config",
    # Errors
    "ValidatorError",
    "ConfigError",
    "DocumentNotFoundError",
    # Logger
    "get_logger",
    "set_log_level",
    "LoggerManager",
    # I/O
    "dumps_json",
    "read_json",
    "write_json",
    "parse_json_object",
    "Document",
    "DocumentSource",
    "FileSystemSource",
    "load_document",
    # Safety
    "DANGEROUS_FUNCTIONS",
    "find_dangerous_functions",
    "has_unescaped_echo",
    "has_sql_injection_risk",
]
