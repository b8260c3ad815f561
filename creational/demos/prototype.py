#!/usr/bin/env python3
"""
原型模式 - 通过复制已有对象创建新对象

Person 使用浅拷贝 (copy.copy)，Address 使用显式逐字段复制。
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from creational.demos.base import Echo, Transcript
from utils.decorators import log_execution, measure_time

logger = logging.getLogger(__name__)

P = TypeVar("P", bound="Prototype")


class Prototype(ABC, Generic[P]):
    """原型接口"""

    @abstractmethod
    def clone(self) -> P: ...


class Person(Prototype["Person"]):
    def __init__(self, name: str, age: int):
        self.name = name
        self.age = age

    def clone(self) -> "Person":
        # 浅拷贝
        return copy.copy(self)

    def __str__(self) -> str:
        return f"Person: {self.name}, Age: {self.age}"


class Address(Prototype["Address"]):
    def __init__(self, city: str):
        self.city = city

    def clone(self) -> "Address":
        return Address(self.city)

    def __str__(self) -> str:
        return f"Address: {self.city}"


@log_execution
@measure_time
def run(echo: Echo = print) -> List[str]:
    """运行原型演示"""
    out = Transcript(echo)
    out.say("===== Prototype Pattern Demo ======")

    original_person = Person("John Doe", 30)
    cloned_person = original_person.clone()
    cloned_person.name = "Jane Doe"

    out.say(f"Original: {original_person}")
    out.say(f"Clone:    {cloned_person}")

    original_address = Address("New York")
    cloned_address = original_address.clone()
    cloned_address.city = "Los Angeles"

    out.say(f"Original: {original_address}")
    out.say(f"Clone:    {cloned_address}")
    return out.lines
