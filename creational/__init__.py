"""
creational-patterns - Core Module

创建型设计模式演示目录，以及线程安全的延迟单例原语。
"""

from creational.patterns import (
    AsyncLazySingleton,
    ConstructionState,
    LazySingleton,
    SingletonMeta,
    lazy_singleton,
    singleton,
)
from creational.exceptions import (
    CreationalError,
    ConstructionError,
    ConstructionTimeout,
    ReentrancyError,
)

__version__ = "1.0.0"

__all__ = [
    # 单例原语
    "LazySingleton",
    "AsyncLazySingleton",
    "ConstructionState",
    "lazy_singleton",
    "SingletonMeta",
    "singleton",
    # 异常
    "CreationalError",
    "ConstructionError",
    "ConstructionTimeout",
    "ReentrancyError",
]
