#!/usr/bin/env python3
"""
creational/patterns/ - 单例与延迟初始化原语

提供统一的单例实现，避免在项目中重复实现。
"""

from .lazy import ConstructionState, LazySingleton, lazy_singleton
from .async_lazy import AsyncLazySingleton
from .singleton import SingletonMeta, singleton

__all__ = [
    "ConstructionState",
    "LazySingleton",
    "lazy_singleton",
    "AsyncLazySingleton",
    "SingletonMeta",
    "singleton",
]
