#!/usr/bin/env python3
"""
creational/patterns/lazy.py - 线程安全的延迟单例持有者

LazySingleton 把"首次访问时构造唯一实例"封装为一个显式的对象，
生命周期通过 ConstructionState 暴露出来:

    NOT_STARTED -> IN_PROGRESS -> DONE
    IN_PROGRESS -> NOT_STARTED   (构造失败，允许之后重试)

使用示例:

    settings = LazySingleton(load_settings, name="settings")

    def handler():
        cfg = settings.get_instance()   # 或 settings()

    # 装饰器
    @lazy_singleton
    def get_registry():
        return Registry()

    registry = get_registry()

线程安全：所有状态转换都在同一个 Condition 下完成；
初始化函数在锁外执行，等待者阻塞在 Condition 上，不会自旋。
"""

import logging
import threading
import time
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from creational.exceptions import (
    ConstructionError,
    ConstructionTimeout,
    ReentrancyError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConstructionState(Enum):
    """构造状态"""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class LazySingleton(Generic[T]):
    """
    延迟单例持有者

    特性:
    - 只构造一次：任意数量的并发调用者只会触发一次成功的初始化
    - 可见性：观察到 DONE 的调用者一定能拿到完整构造的实例
    - 失败可重试：初始化失败抛出 ConstructionError，状态回到 NOT_STARTED
    - 重入检测：初始化函数内再次调用 get_instance() 抛出 ReentrancyError
    - 可选等待超时：等待他人构造超过 timeout 秒抛出 ConstructionTimeout

    持有者没有 reset / dispose，实例一直存活到进程结束。
    """

    def __init__(self, initializer: Callable[[], T], name: Optional[str] = None):
        """
        Args:
            initializer: 无参工厂函数
            name: 持有者名称，用于日志和异常详情
        """
        if not callable(initializer):
            raise TypeError(f"initializer 必须可调用: {initializer!r}")

        self._initializer = initializer
        self._name = name or getattr(initializer, "__qualname__", repr(initializer))
        self._cond = threading.Condition(threading.Lock())
        self._state = ConstructionState.NOT_STARTED
        self._value: Optional[T] = None
        self._owner: Optional[int] = None
        self._attempt = 0
        self._last_error: Optional[BaseException] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> ConstructionState:
        """当前构造状态"""
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is ConstructionState.DONE

    def get_instance(self, timeout: Optional[float] = None) -> T:
        """
        获取唯一实例，首次调用时构造

        Args:
            timeout: 等待其他调用者完成构造的最长秒数，None 表示一直等待

        Returns:
            共享实例

        Raises:
            ConstructionError: 初始化函数失败（本次构造者或等待本次构造的调用者）
            ReentrancyError: 在初始化函数内部重入
            ConstructionTimeout: 等待超时
        """
        # 快速路径：_value 先于 _state 发布
        if self._state is ConstructionState.DONE:
            return self._value

        me = threading.get_ident()

        with self._cond:
            if self._state is ConstructionState.IN_PROGRESS:
                if self._owner == me:
                    logger.error(f"检测到重入构造: {self._name}")
                    raise ReentrancyError(
                        f"get_instance() 在 {self._name} 的初始化函数内被重入调用",
                        holder=self._name,
                    )
                self._wait_for_attempt(self._attempt, timeout)
                if self._state is ConstructionState.DONE:
                    return self._value
                raise ConstructionError(
                    f"{self._name} 构造失败",
                    holder=self._name,
                    cause=self._last_error,
                )

            # 双重检查
            if self._state is ConstructionState.DONE:
                return self._value

            self._attempt += 1
            self._state = ConstructionState.IN_PROGRESS
            self._owner = me

        return self._construct()

    def _wait_for_attempt(self, attempt: int, timeout: Optional[float]) -> None:
        """在 Condition 上等待指定的构造尝试结束（调用方已持有锁）"""
        finished = self._cond.wait_for(
            lambda: self._attempt != attempt
            or self._state is not ConstructionState.IN_PROGRESS,
            timeout=timeout,
        )
        if not finished:
            logger.warning(f"等待 {self._name} 构造超时 ({timeout}秒)")
            raise ConstructionTimeout(
                f"等待 {self._name} 构造超时",
                timeout=timeout,
                holder=self._name,
            )

    def _construct(self) -> T:
        """在锁外执行初始化函数，然后发布结果或回退状态"""
        logger.debug(f"开始构造: {self._name} (第{self._attempt}次尝试)")
        start = time.perf_counter()
        try:
            value = self._initializer()
        except BaseException as e:
            with self._cond:
                self._last_error = e
                self._owner = None
                self._state = ConstructionState.NOT_STARTED
                self._cond.notify_all()
            if not isinstance(e, Exception):
                raise
            logger.warning(f"构造失败: {self._name} - {type(e).__name__}: {e}")
            raise ConstructionError(
                f"{self._name} 构造失败",
                holder=self._name,
                cause=e,
            ) from e

        with self._cond:
            self._value = value
            self._last_error = None
            self._owner = None
            self._state = ConstructionState.DONE
            self._cond.notify_all()

        elapsed = time.perf_counter() - start
        logger.info(f"构造完成: {self._name} ({elapsed:.3f}秒)")
        return value

    def __call__(self) -> T:
        return self.get_instance()

    def __repr__(self) -> str:
        return f"<LazySingleton({self._name}) state={self._state.value}>"


def lazy_singleton(func: Callable[[], T]) -> LazySingleton[T]:
    """
    把无参工厂函数变成延迟单例持有者

    使用方式:
        @lazy_singleton
        def get_cache():
            return Cache()

        cache = get_cache()  # 首次调用时构造
    """
    return LazySingleton(func, name=getattr(func, "__qualname__", None))
