"""
配置管理 - 读取 YAML 配置文件并支持环境变量覆盖
"""
import copy
import os
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError


# 内置默认配置（YAML 文件中的值会覆盖这些默认值）
DEFAULTS: dict = {
    "validator": {
        "name": "SVG PWA Validator",
        "version": "1.0.0",
        "extension": "svg",
    },
    "limits": {
        # 单文件 file_size 检查的上限（1 MiB）
        "max_file_size": 1024 * 1024,
        # 目录扫描时跳过的文件大小上限（50 MiB）
        "max_scan_file_size": 50 * 1024 * 1024,
    },
    "runtime_checks": {
        "enabled": False,
        "php_binary": "php",
        "timeout_seconds": 10,
    },
    "cli": {
        "fallback_base": "..",
    },
    "api": {
        "host": "127.0.0.1",
        "port": 8000,
    },
    "logging": {
        "level": "WARNING",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "file": None,
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    """递归合并两个字典，override 优先"""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """配置管理类 - 单例模式"""

    _instance = None
    _config: dict = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """初始化配置（仅在第一次创建时执行）"""
        if not self._config:
            self.reload()

    def reload(self, config_path: str | Path | None = None):
        """
        重新加载配置文件

        Args:
            config_path: 配置文件路径，默认为 $SVG_VALIDATOR_CONFIG 或 configs/validator.yaml

        Raises:
            ConfigError: 显式指定的配置文件不存在，或 YAML 内容无效
        """
        explicit = config_path is not None or "SVG_VALIDATOR_CONFIG" in os.environ
        if config_path is None:
            env_path = os.environ.get("SVG_VALIDATOR_CONFIG")
            if env_path:
                config_path = Path(env_path)
            else:
                # 默认配置文件路径
                project_root = Path(__file__).parent.parent.parent.parent
                config_path = project_root / "configs" / "validator.yaml"
        else:
            config_path = Path(config_path)

        loaded: dict = {}
        if config_path.exists():
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
            if not isinstance(loaded, dict):
                raise ConfigError(f"Config root must be a mapping: {config_path}")
        elif explicit:
            raise ConfigError(f"Config file not found: {config_path}")

        self._config = _deep_merge(DEFAULTS, loaded)
        self.config_path = config_path

        # 应用环境变量覆盖
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """应用环境变量覆盖配置"""
        if 'SVG_VALIDATOR_LOG_LEVEL' in os.environ:
            self._set_nested('logging.level', os.environ['SVG_VALIDATOR_LOG_LEVEL'])

        if 'SVG_VALIDATOR_MAX_FILE_SIZE' in os.environ:
            self._set_nested('limits.max_file_size', int(os.environ['SVG_VALIDATOR_MAX_FILE_SIZE']))

        if 'SVG_VALIDATOR_MAX_SCAN_FILE_SIZE' in os.environ:
            self._set_nested(
                'limits.max_scan_file_size', int(os.environ['SVG_VALIDATOR_MAX_SCAN_FILE_SIZE'])
            )

        # 运行时检查（php -l）
        if 'SVG_VALIDATOR_RUNTIME_CHECKS' in os.environ:
            self._set_nested('runtime_checks.enabled', _as_bool(os.environ['SVG_VALIDATOR_RUNTIME_CHECKS']))

        if 'PHP_BINARY' in os.environ:
            self._set_nested('runtime_checks.php_binary', os.environ['PHP_BINARY'])

        # HTTP 服务配置
        if 'SVG_VALIDATOR_API_HOST' in os.environ:
            self._set_nested('api.host', os.environ['SVG_VALIDATOR_API_HOST'])

        if 'SVG_VALIDATOR_API_PORT' in os.environ:
            self._set_nested('api.port', int(os.environ['SVG_VALIDATOR_API_PORT']))

    def _set_nested(self, key_path: str, value: Any):
        """
        设置嵌套字典的值

        Args:
            key_path: 点分隔的键路径，如 "limits.max_file_size"
            value: 要设置的值
        """
        keys = key_path.split('.')
        d = self._config

        for key in keys[:-1]:
            if key not in d or not isinstance(d[key], dict):
                d[key] = {}
            d = d[key]

        d[keys[-1]] = value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        获取配置值

        Args:
            key_path: 点分隔的键路径，如 "runtime_checks.enabled"
            default: 默认值

        Returns:
            配置值或默认值
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def __getitem__(self, key: str) -> Any:
        """支持字典式访问"""
        return self.get(key)

    @property
    def version(self) -> str:
        """校验引擎版本"""
        return str(self.get('validator.version', '1.0.0'))

    @property
    def extension(self) -> str:
        """目标文件扩展名（不含点）"""
        return str(self.get('validator.extension', 'svg')).lstrip('.').lower()

    @property
    def max_file_size(self) -> int:
        """file_size 检查的上限（字节）"""
        return int(self.get('limits.max_file_size', 1024 * 1024))

    @property
    def max_scan_file_size(self) -> int:
        """目录扫描时跳过的文件大小上限（字节）"""
        return int(self.get('limits.max_scan_file_size', 50 * 1024 * 1024))

    @property
    def runtime_checks_enabled(self) -> bool:
        """是否启用运行时检查"""
        return bool(self.get('runtime_checks.enabled', False))


# 全局配置实例
config = Config()


def get_config() -> Config:
    """获取全局配置实例"""
    return config


def reload_config(config_path: str | Path | None = None):
    """重新加载配置"""
    config.reload(config_path)
