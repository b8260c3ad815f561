#!/usr/bin/env python3
"""
抽象工厂模式 - 创建一组相关产品而不指定具体类

意图:
- 为一族相关或相互依赖的对象提供创建接口
- 客户端只依赖抽象工厂和抽象产品

这里的产品族是两套 GUI 控件：Windows 风格与 MacOS 风格。
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import List, Optional

from creational.config import get_config
from creational.demos.base import Echo, Transcript
from utils.decorators import log_execution, measure_time

logger = logging.getLogger(__name__)


# ==================== 抽象产品 ====================

class Button(ABC):
    @abstractmethod
    def render(self) -> str: ...

    @abstractmethod
    def handle_click(self) -> str: ...


class TextBox(ABC):
    @abstractmethod
    def render(self) -> str: ...

    @abstractmethod
    def handle_input(self) -> str: ...


class Checkbox(ABC):
    @abstractmethod
    def render(self) -> str: ...

    @abstractmethod
    def toggle(self) -> str: ...


# ==================== Windows 产品族 ====================

class WindowsButton(Button):
    def render(self) -> str:
        return "Rendering a button in Windows style"

    def handle_click(self) -> str:
        return "Windows button click handled"


class WindowsTextBox(TextBox):
    def render(self) -> str:
        return "Rendering a textbox in Windows style"

    def handle_input(self) -> str:
        return "Windows textbox input handled"


class WindowsCheckbox(Checkbox):
    def render(self) -> str:
        return "Rendering a checkbox in Windows style"

    def toggle(self) -> str:
        return "Windows checkbox toggled"


# ==================== MacOS 产品族 ====================

class MacOSButton(Button):
    def render(self) -> str:
        return "Rendering a button in MacOS style"

    def handle_click(self) -> str:
        return "MacOS button click handled"


class MacOSTextBox(TextBox):
    def render(self) -> str:
        return "Rendering a textbox in MacOS style"

    def handle_input(self) -> str:
        return "MacOS textbox input handled"


class MacOSCheckbox(Checkbox):
    def render(self) -> str:
        return "Rendering a checkbox in MacOS style"

    def toggle(self) -> str:
        return "MacOS checkbox toggled"


# ==================== 抽象工厂与具体工厂 ====================

class GUIFactory(ABC):
    """抽象工厂"""

    platform: str = ""

    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_text_box(self) -> TextBox: ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox: ...


class WindowsGUIFactory(GUIFactory):
    platform = "Windows"

    def create_button(self) -> Button:
        return WindowsButton()

    def create_text_box(self) -> TextBox:
        return WindowsTextBox()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class MacOSGUIFactory(GUIFactory):
    platform = "MacOS"

    def create_button(self) -> Button:
        return MacOSButton()

    def create_text_box(self) -> TextBox:
        return MacOSTextBox()

    def create_checkbox(self) -> Checkbox:
        return MacOSCheckbox()


# ==================== 客户端 ====================

class Application:
    """只依赖抽象工厂和抽象产品的客户端"""

    def __init__(self, factory: GUIFactory):
        self._button = factory.create_button()
        self._text_box = factory.create_text_box()
        self._checkbox = factory.create_checkbox()

    def render_ui(self) -> List[str]:
        return [
            self._button.render(),
            self._text_box.render(),
            self._checkbox.render(),
        ]

    def handle_user_interaction(self) -> List[str]:
        return [
            self._button.handle_click(),
            self._text_box.handle_input(),
            self._checkbox.toggle(),
        ]


def detect_platform(platform: Optional[str] = None) -> str:
    """
    根据平台名称选择产品族

    名称中含 "win"（不区分大小写，darwin 除外）视为 Windows，其余一律 MacOS。
    """
    name = (platform or sys.platform).lower()
    if "win" in name and not name.startswith("darwin"):
        return "Windows"
    return "MacOS"


def factory_for_platform(platform: Optional[str] = None) -> GUIFactory:
    """按平台返回具体工厂"""
    if detect_platform(platform) == "Windows":
        return WindowsGUIFactory()
    return MacOSGUIFactory()


@log_execution
@measure_time
def run(echo: Echo = print, platform: Optional[str] = None) -> List[str]:
    """
    运行抽象工厂演示

    Args:
        echo: 输出函数，None 表示静默
        platform: 平台名称，默认取配置或 sys.platform

    Returns:
        输出记录
    """
    out = Transcript(echo)
    out.say("===== Abstract Factory Pattern Demo =====")

    out.say("")
    out.say("Creating Windows application:")
    windows_app = Application(WindowsGUIFactory())
    out.extend(windows_app.render_ui())
    out.extend(windows_app.handle_user_interaction())

    out.say("")
    out.say("Creating MacOS application:")
    macos_app = Application(MacOSGUIFactory())
    out.extend(macos_app.render_ui())
    out.extend(macos_app.handle_user_interaction())

    if platform is None:
        platform = get_config().platform

    out.say("")
    out.say("Configuring application based on operating system:")
    detected = detect_platform(platform)
    out.say(f"Detected OS: {detected}")
    logger.debug(f"抽象工厂演示使用平台: {detected}")

    app = Application(factory_for_platform(detected))
    out.extend(app.render_ui())
    return out.lines
