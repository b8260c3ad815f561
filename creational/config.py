#!/usr/bin/env python3
"""
配置 - 演示运行与报告的进程级配置

环境变量:
    CREATIONAL_LOG_LEVEL      日志级别 (DEBUG/INFO/WARNING/ERROR/CRITICAL)
    CREATIONAL_REPORT_FORMAT  报告格式 (text/markdown/json)
    CREATIONAL_WAIT_TIMEOUT   等待单例构造的超时秒数，空表示不限
    CREATIONAL_PLATFORM       抽象工厂演示使用的平台 (Windows/MacOS)
"""

import logging
import math
import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional

from creational.exceptions import ConfigError
from creational.patterns.lazy import LazySingleton

logger = logging.getLogger(__name__)

ENV_PREFIX = "CREATIONAL_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
REPORT_FORMATS = ("text", "markdown", "json")
PLATFORMS = ("Windows", "MacOS")


@dataclass
class CreationalConfig:
    """演示配置"""
    log_level: str = "INFO"
    report_format: str = "text"
    wait_timeout: Optional[float] = None  # 秒
    platform: Optional[str] = None  # None 表示按 sys.platform 检测

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """校验配置，非法值抛出 ConfigError"""
        level = str(self.log_level).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(
                f"无效的日志级别: {self.log_level}",
                details={"key": "log_level", "allowed": list(LOG_LEVELS)},
            )
        self.log_level = level

        if self.report_format not in REPORT_FORMATS:
            raise ConfigError(
                f"不支持的报告格式: {self.report_format}",
                details={"key": "report_format", "allowed": list(REPORT_FORMATS)},
            )

        if self.wait_timeout is not None and (
            not math.isfinite(self.wait_timeout) or self.wait_timeout <= 0
        ):
            raise ConfigError(
                f"超时时间必须为有限正数: {self.wait_timeout}",
                details={"key": "wait_timeout"},
            )

        if self.platform is not None and self.platform not in PLATFORMS:
            raise ConfigError(
                f"未知平台: {self.platform}",
                details={"key": "platform", "allowed": list(PLATFORMS)},
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CreationalConfig":
        """
        从环境变量加载配置

        Args:
            environ: 环境变量映射，默认 os.environ

        Returns:
            配置对象
        """
        env = os.environ if environ is None else environ
        kwargs: Dict[str, Any] = {}

        if env.get(f"{ENV_PREFIX}LOG_LEVEL"):
            kwargs["log_level"] = env[f"{ENV_PREFIX}LOG_LEVEL"]

        if env.get(f"{ENV_PREFIX}REPORT_FORMAT"):
            kwargs["report_format"] = env[f"{ENV_PREFIX}REPORT_FORMAT"].lower()

        raw_timeout = env.get(f"{ENV_PREFIX}WAIT_TIMEOUT")
        if raw_timeout:
            try:
                kwargs["wait_timeout"] = float(raw_timeout)
            except ValueError as e:
                raise ConfigError(
                    f"无效的超时时间: {raw_timeout}",
                    details={"key": f"{ENV_PREFIX}WAIT_TIMEOUT"},
                    cause=e,
                ) from e

        if env.get(f"{ENV_PREFIX}PLATFORM"):
            kwargs["platform"] = env[f"{ENV_PREFIX}PLATFORM"]

        config = cls(**kwargs)
        logger.debug(f"已加载配置: {config.to_dict()}")
        return config

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


_config = LazySingleton(CreationalConfig.from_env, name="CreationalConfig")


def get_config() -> CreationalConfig:
    """获取进程级配置（首次调用时从环境变量加载）"""
    return _config.get_instance()
