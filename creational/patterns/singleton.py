#!/usr/bin/env python3
"""
creational/patterns/singleton.py - 类级别单例实现

提供两种单例实现方式：
1. SingletonMeta - 元类方式，适用于需要继承的类（加锁 + 双重检查）
2. singleton - 装饰器方式，适用于简单类

使用示例:

    # 方式1: 元类
    class MyManager(metaclass=SingletonMeta):
        def __init__(self, config=None):
            self.config = config

    # 方式2: 装饰器
    @singleton
    class MyService:
        pass

线程安全：两种实现都是线程安全的。
与 LazySingleton 一致：构造失败抛出 ConstructionError 且不缓存，下一次调用会重试；
在 __init__ 内再次实例化自身抛出 ReentrancyError。
只有第一次成功构造时传入的参数生效，之后的参数被忽略。

测试注意：
    测试时需要重置单例状态，使用 SingletonMeta.reset(ClassName) 或
    ClassName.reset_instance() (对于装饰器方式)
"""

import logging
import threading
from typing import Any, Dict, Set, Type, TypeVar

from creational.exceptions import ConstructionError, ReentrancyError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SingletonMeta(type):
    """
    线程安全的单例元类

    使用方式:
        class MyClass(metaclass=SingletonMeta):
            pass

    重置单例 (仅用于测试):
        SingletonMeta.reset(MyClass)
    """

    _instances: Dict[Type, Any] = {}
    _constructing: Set[Type] = set()
    _lock: threading.RLock = threading.RLock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                # 双重检查锁定
                if cls not in cls._instances:
                    if cls in cls._constructing:
                        # RLock 只允许构造线程自己走到这里
                        raise ReentrancyError(
                            f"{cls.__name__} 在构造过程中被重入实例化",
                            holder=cls.__name__,
                        )
                    cls._constructing.add(cls)
                    try:
                        instance = super().__call__(*args, **kwargs)
                    except (ReentrancyError, ConstructionError):
                        raise
                    except Exception as e:
                        logger.warning(f"单例构造失败: {cls.__name__} - {e}")
                        raise ConstructionError(
                            f"{cls.__name__} 构造失败",
                            holder=cls.__name__,
                            cause=e,
                        ) from e
                    finally:
                        cls._constructing.discard(cls)
                    cls._instances[cls] = instance
                    logger.debug(f"单例已创建: {cls.__name__}")
        return cls._instances[cls]

    @classmethod
    def reset(mcs, cls: Type) -> None:
        """
        重置指定类的单例实例 (仅用于测试)

        Args:
            cls: 要重置的类
        """
        with mcs._lock:
            if cls in mcs._instances:
                del mcs._instances[cls]

    @classmethod
    def has_instance(mcs, cls: Type) -> bool:
        return cls in mcs._instances


def singleton(cls: Type[T]) -> Type[T]:
    """
    单例装饰器

    使用方式:
        @singleton
        class MyClass:
            pass

    重置单例 (仅用于测试):
        MyClass.reset_instance()
    """
    cls._instance = None
    cls._lock = threading.RLock()
    cls._constructing = False
    original_new = cls.__new__
    original_init = cls.__init__

    def new_singleton(klass, *args, **kwargs):
        if klass._instance is None:
            with klass._lock:
                if klass._instance is None:
                    if klass._constructing:
                        raise ReentrancyError(
                            f"{klass.__name__} 在构造过程中被重入实例化",
                            holder=klass.__name__,
                        )
                    klass._constructing = True
                    try:
                        if original_new is object.__new__:
                            instance = original_new(klass)
                        else:
                            instance = original_new(klass, *args, **kwargs)
                        if original_init is not object.__init__:
                            original_init(instance, *args, **kwargs)
                    except (ReentrancyError, ConstructionError):
                        raise
                    except Exception as e:
                        logger.warning(f"单例构造失败: {klass.__name__} - {e}")
                        raise ConstructionError(
                            f"{klass.__name__} 构造失败",
                            holder=klass.__name__,
                            cause=e,
                        ) from e
                    finally:
                        klass._constructing = False
                    klass._instance = instance
                    logger.debug(f"单例已创建: {klass.__name__}")
        return klass._instance

    def init_once(self, *args, **kwargs):
        # __init__ 已在 __new__ 中执行过一次
        pass

    def reset_instance(klass) -> None:
        with klass._lock:
            klass._instance = None

    cls.__new__ = new_singleton
    cls.__init__ = init_once
    cls.reset_instance = classmethod(reset_instance)
    return cls
