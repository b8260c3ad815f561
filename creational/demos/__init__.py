#!/usr/bin/env python3
"""
演示注册表 - 统一查找和运行创建型模式演示
"""

import importlib
import logging
from typing import Callable, Dict, List, Optional

from creational.demos.base import Echo, Transcript
from creational.exceptions import DemoNotFound

logger = logging.getLogger(__name__)

DemoRunner = Callable[..., List[str]]


class DemoRegistry:
    """
    演示注册表

    特性:
    - 按名称注册演示
    - 支持别名
    - 支持列表查询与批量运行
    """

    _registry: Dict[str, DemoRunner] = {}
    _aliases: Dict[str, str] = {}

    @classmethod
    def register(cls, name: str, runner: DemoRunner, aliases: List[str] = None):
        """
        注册演示

        Args:
            name: 演示名称
            runner: 运行函数，签名 run(echo=print) -> List[str]
            aliases: 别名列表
        """
        cls._registry[name] = runner
        logger.debug(f"注册演示: {name} -> {runner.__module__}")

        if aliases:
            for alias in aliases:
                cls._aliases[alias] = name

    @classmethod
    def resolve(cls, name: str) -> str:
        """解析别名，返回正式名称"""
        key = name.strip().lower().replace("-", "_")
        actual_name = cls._aliases.get(key, key)
        if actual_name not in cls._registry:
            raise DemoNotFound(
                f"未知的演示: {name}. 可用演示: {', '.join(cls.list_demos())}",
                demo=name,
            )
        return actual_name

    @classmethod
    def get(cls, name: str) -> DemoRunner:
        return cls._registry[cls.resolve(name)]

    @classmethod
    def run(cls, name: str, echo: Echo = print) -> List[str]:
        """运行单个演示并返回输出记录"""
        return cls.get(name)(echo=echo)

    @classmethod
    def list_demos(cls) -> List[str]:
        """列出所有已注册的演示"""
        return sorted(cls._registry.keys())

    @classmethod
    def list_aliases(cls) -> Dict[str, str]:
        return cls._aliases.copy()

    @classmethod
    def get_demo_info(cls, name: str) -> Dict:
        """
        获取演示信息

        Returns:
            演示信息字典，包含名称、模块和模块说明首行
        """
        actual_name = cls.resolve(name)
        runner = cls._registry[actual_name]
        module_doc = ""
        module = importlib.import_module(runner.__module__)
        if module.__doc__:
            module_doc = module.__doc__.strip().splitlines()[0]

        return {
            "name": actual_name,
            "module": runner.__module__,
            "aliases": sorted(a for a, n in cls._aliases.items() if n == actual_name),
            "doc": module_doc or "无描述",
        }

    @classmethod
    def run_all(cls, echo: Echo = print, names: Optional[List[str]] = None) -> Dict[str, List[str]]:
        """
        依次运行演示

        Args:
            echo: 输出函数
            names: 要运行的演示，默认全部

        Returns:
            {演示名称: 输出记录}
        """
        selected = [cls.resolve(n) for n in names] if names else cls.list_demos()
        transcripts = {}
        for name in selected:
            transcripts[name] = cls.run(name, echo=echo)
        return transcripts


def register_demos():
    """注册全部创建型模式演示"""
    from creational.demos import (
        abstract_factory,
        builder,
        factory_method,
        prototype,
        singleton_demo,
    )

    DemoRegistry.register("abstract_factory", abstract_factory.run, aliases=["abstractfactory", "af"])
    DemoRegistry.register("builder", builder.run, aliases=["house"])
    DemoRegistry.register("factory_method", factory_method.run, aliases=["factory", "fm"])
    DemoRegistry.register("prototype", prototype.run, aliases=["clone"])
    DemoRegistry.register("singleton", singleton_demo.run, aliases=["lazy"])

    logger.debug(f"已注册 {len(DemoRegistry.list_demos())} 个演示")


register_demos()

__all__ = ["DemoRegistry", "Transcript", "register_demos"]
