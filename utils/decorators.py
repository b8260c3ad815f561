#!/usr/bin/env python3
"""
装饰器库 - 提供日志、性能监控等通用装饰器
消除演示代码中重复的横切关注点
"""

import time
import functools
import logging
from typing import Callable

logger = logging.getLogger(__name__)


def log_execution(func: Callable) -> Callable:
    """
    日志装饰器 - 记录函数执行

    使用:
        @log_execution
        def run():
            pass
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        func_name = f"{func.__module__}.{func.__name__}"
        logger.info(f"开始执行: {func_name}")
        try:
            result = func(*args, **kwargs)
            logger.info(f"执行成功: {func_name}")
            return result
        except Exception as e:
            logger.error(f"执行失败: {func_name} - {e}")
            raise
    return wrapper


def measure_time(func: Callable) -> Callable:
    """
    性能监控装饰器 - 测量函数执行时间

    使用:
        @measure_time
        def slow_function():
            time.sleep(1)
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start
            logger.debug(f"{func.__name__} 执行时间: {elapsed:.3f}秒")

    return wrapper
