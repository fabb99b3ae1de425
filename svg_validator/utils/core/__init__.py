"""
Core - 核心基础设施模块

包含配置管理、日志和异常定义。
"""

from .config import Config, config, get_config, reload_config
from .errors import ConfigError, DocumentNotFoundError, ValidatorError
from .logger import get_logger, set_log_level, LoggerManager

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
]
