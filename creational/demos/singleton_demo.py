#!/usr/bin/env python3
"""
单例模式 - 保证一个类只有一个实例并提供全局访问点

三种实现:
1. LazySingleton 持有者 - 首次访问时构造
2. SingletonMeta 元类 - 加锁 + 双重检查
3. 静态初始化 - 模块导入时构造（导入锁保证只执行一次）
"""

import logging
from typing import List

from creational.config import get_config
from creational.demos.base import Echo, Transcript
from creational.patterns import LazySingleton, SingletonMeta
from utils.decorators import log_execution, measure_time

logger = logging.getLogger(__name__)


class Singleton:
    """通过 LazySingleton 持有者访问的单例"""

    created: List[str] = []

    def __init__(self):
        Singleton.created.append("Singleton instance created")
        logger.info("Singleton instance created")

    def do_something(self) -> str:
        return "Singleton is doing something"


_instance: LazySingleton[Singleton] = LazySingleton(Singleton, name="Singleton")


def get_singleton() -> Singleton:
    """公共访问点"""
    return _instance.get_instance(timeout=get_config().wait_timeout)


class SingletonDoubleCheck(metaclass=SingletonMeta):
    """加锁 + 双重检查"""


class SingletonStatic:
    """静态初始化：实例在模块导入时创建"""

    _instance: "SingletonStatic"

    @classmethod
    def instance(cls) -> "SingletonStatic":
        return cls._instance


SingletonStatic._instance = SingletonStatic()


@log_execution
@measure_time
def run(echo: Echo = print) -> List[str]:
    """运行单例演示"""
    out = Transcript(echo)
    out.say("===== Singleton Pattern Demo =====")

    was_created = _instance.is_initialized
    instance1 = get_singleton()
    if not was_created:
        out.say(Singleton.created[-1])
    out.say(instance1.do_something())

    instance2 = get_singleton()
    out.say(f"Same instance? {instance1 is instance2}")

    out.say("Accessing another singleton implementation:")
    instance3 = SingletonDoubleCheck()
    out.say(f"Double-check lock same instance? {instance3 is SingletonDoubleCheck()}")
    out.say(f"Static initialization same instance? {SingletonStatic.instance() is SingletonStatic.instance()}")
    return out.lines
