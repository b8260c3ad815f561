#!/usr/bin/env python3
"""
creational/patterns/async_lazy.py - asyncio 版本的延迟单例持有者

与 LazySingleton 契约相同，区别在于构造期间到达的调用者通过 await 协作式等待，
不阻塞事件循环线程。初始化函数可以是协程函数，也可以是普通函数。

使用示例:

    engine = AsyncLazySingleton(create_engine, name="engine")

    async def handler():
        eng = await engine.get_instance()

注意：持有者绑定在首次使用它的事件循环上，不要跨事件循环共享。
"""

import asyncio
import inspect
import logging
import time
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar, Union

from creational.exceptions import (
    ConstructionError,
    ConstructionTimeout,
    ReentrancyError,
)
from creational.patterns.lazy import ConstructionState

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncLazySingleton(Generic[T]):
    """
    异步延迟单例持有者

    - 首个调用者在任何 await 之前同步占用构造尝试，事件循环单线程保证这一步是原子的
    - 构造期间到达的调用者等待该次尝试的 Future，超时不影响正在进行的构造
    - 构造失败时，等待同一次构造的调用者都会收到 ConstructionError
    - 同一任务内重入抛出 ReentrancyError
    """

    def __init__(
        self,
        initializer: Callable[[], Union[T, Awaitable[T]]],
        name: Optional[str] = None,
    ):
        if not callable(initializer):
            raise TypeError(f"initializer 必须可调用: {initializer!r}")

        self._initializer = initializer
        self._name = name or getattr(initializer, "__qualname__", repr(initializer))
        self._state = ConstructionState.NOT_STARTED
        self._value: Optional[T] = None
        self._owner: Optional[asyncio.Task] = None
        self._attempt = 0
        # 当前构造尝试的结果：None 表示成功，否则为导致失败的异常
        self._pending: Optional["asyncio.Future[Optional[BaseException]]"] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> ConstructionState:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is ConstructionState.DONE

    async def get_instance(self, timeout: Optional[float] = None) -> T:
        """
        获取唯一实例，首次调用时构造

        Args:
            timeout: 等待其他任务完成构造的最长秒数

        Raises:
            ConstructionError: 初始化失败
            ReentrancyError: 初始化函数内重入
            ConstructionTimeout: 等待超时
        """
        if self._state is ConstructionState.DONE:
            return self._value

        task = asyncio.current_task()
        if self._state is ConstructionState.IN_PROGRESS:
            if self._owner is task:
                logger.error(f"检测到重入构造: {self._name}")
                raise ReentrancyError(
                    f"get_instance() 在 {self._name} 的初始化函数内被重入调用",
                    holder=self._name,
                )
            return await self._wait_for_attempt(self._pending, timeout)

        # 占用本次构造尝试，此前不能有 await
        self._attempt += 1
        self._state = ConstructionState.IN_PROGRESS
        self._owner = task
        self._pending = asyncio.get_running_loop().create_future()
        return await self._construct(self._pending)

    async def _wait_for_attempt(
        self,
        pending: "asyncio.Future[Optional[BaseException]]",
        timeout: Optional[float],
    ) -> T:
        """等待指定的构造尝试结束"""
        try:
            error = await asyncio.wait_for(asyncio.shield(pending), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning(f"等待 {self._name} 构造超时 ({timeout}秒)")
            raise ConstructionTimeout(
                f"等待 {self._name} 构造超时",
                timeout=timeout,
                holder=self._name,
            ) from None

        if error is None:
            return self._value
        raise ConstructionError(
            f"{self._name} 构造失败",
            holder=self._name,
            cause=error,
        )

    async def _construct(self, pending: "asyncio.Future[Optional[BaseException]]") -> T:
        """执行初始化函数，然后发布结果或回退状态"""
        logger.debug(f"开始构造: {self._name} (第{self._attempt}次尝试)")
        start = time.perf_counter()
        try:
            value: Any = self._initializer()
            if inspect.isawaitable(value):
                value = await value
        except BaseException as e:
            self._owner = None
            self._state = ConstructionState.NOT_STARTED
            pending.set_result(e)
            if not isinstance(e, Exception):
                raise
            logger.warning(f"构造失败: {self._name} - {type(e).__name__}: {e}")
            raise ConstructionError(
                f"{self._name} 构造失败",
                holder=self._name,
                cause=e,
            ) from e

        self._value = value
        self._owner = None
        self._state = ConstructionState.DONE
        pending.set_result(None)

        elapsed = time.perf_counter() - start
        logger.info(f"构造完成: {self._name} ({elapsed:.3f}秒)")
        return value

    def __repr__(self) -> str:
        return f"<AsyncLazySingleton({self._name}) state={self._state.value}>"
