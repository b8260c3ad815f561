#!/usr/bin/env python3
"""
演示基础组件 - 输出记录
"""

from typing import Callable, List, Optional

Echo = Optional[Callable[[str], None]]


class Transcript:
    """
    演示输出记录

    每一行既交给 echo（默认 print）输出，也保存在 lines 中，
    便于测试断言和生成报告。echo=None 时静默记录。
    """

    def __init__(self, echo: Echo = print):
        self.lines: List[str] = []
        self._echo = echo

    def say(self, text: str = "") -> None:
        self.lines.append(text)
        if self._echo is not None:
            self._echo(text)

    def extend(self, texts) -> None:
        for text in texts:
            self.say(text)
