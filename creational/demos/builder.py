#!/usr/bin/env python3
"""
生成器模式 - 分步构建复杂对象

意图:
- 把复杂对象的构建过程与其表示分离
- 同样的构建过程可以得到不同的表示

包含经典的 Builder + Director 组合，以及链式调用的 FluentHouseBuilder。
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Callable, List, Optional

from creational.demos.base import Echo, Transcript
from creational.exceptions import BuildError
from utils.decorators import log_execution, measure_time

logger = logging.getLogger(__name__)

REQUIRED_PARTS = ("foundation", "structure", "roof")


# ==================== 产品 ====================

@dataclass
class House:
    """要构建的复杂对象"""
    # 必需部件
    foundation: Optional[str] = None
    structure: Optional[str] = None
    roof: Optional[str] = None

    # 可选部件
    interior: Optional[str] = None
    exterior: Optional[str] = None
    garden: Optional[str] = None
    garage: Optional[str] = None
    swimming_pool: Optional[str] = None

    def missing_parts(self) -> List[str]:
        return [part for part in REQUIRED_PARTS if not getattr(self, part)]

    def show_details(self) -> List[str]:
        """必需部件总是列出，可选部件只列出已建造的"""
        lines = [
            "House Details:",
            f"- Foundation: {self.foundation}",
            f"- Structure: {self.structure}",
            f"- Roof: {self.roof}",
        ]
        for f in fields(self):
            if f.name in REQUIRED_PARTS:
                continue
            value = getattr(self, f.name)
            if value:
                label = f.name.replace("_", " ").title()
                lines.append(f"- {label}: {value}")
        return lines


# ==================== 生成器接口 ====================

class HouseBuilder(ABC):
    """生成器接口：每个步骤建造一个部件并返回一行说明"""

    label: str = ""

    def __init__(self):
        self._house = House()
        self.log: List[str] = []

    def _build(self, part: str, value: str) -> None:
        setattr(self._house, part, value)
        line = f"{self.label}: Building {value[0].lower()}{value[1:]}"
        self.log.append(line)
        logger.debug(line)

    @abstractmethod
    def build_foundation(self) -> None: ...

    @abstractmethod
    def build_structure(self) -> None: ...

    @abstractmethod
    def build_roof(self) -> None: ...

    @abstractmethod
    def build_interior(self) -> None: ...

    @abstractmethod
    def build_exterior(self) -> None: ...

    @abstractmethod
    def build_garden(self) -> None: ...

    @abstractmethod
    def build_garage(self) -> None: ...

    @abstractmethod
    def build_swimming_pool(self) -> None: ...

    def get_house(self) -> House:
        return self._house


# ==================== 具体生成器 ====================

class StandardHouseBuilder(HouseBuilder):
    label = "Standard House"

    def build_foundation(self) -> None:
        self._build("foundation", "Standard concrete foundation")

    def build_structure(self) -> None:
        self._build("structure", "Wooden frame structure")

    def build_roof(self) -> None:
        self._build("roof", "Standard shingle roof")

    def build_interior(self) -> None:
        self._build("interior", "Basic interior with standard finishes")

    def build_exterior(self) -> None:
        self._build("exterior", "Vinyl siding exterior")

    def build_garden(self) -> None:
        self._build("garden", "Small garden with basic landscaping")

    def build_garage(self) -> None:
        self._build("garage", "Single car garage")

    def build_swimming_pool(self) -> None:
        # 标准户型不含泳池
        pass


class LuxuryHouseBuilder(HouseBuilder):
    label = "Luxury House"

    def build_foundation(self) -> None:
        self._build("foundation", "Reinforced concrete foundation with waterproofing")

    def build_structure(self) -> None:
        self._build("structure", "Steel and concrete structure with high insulation")

    def build_roof(self) -> None:
        self._build("roof", "Slate tile roof with advanced insulation")

    def build_interior(self) -> None:
        self._build("interior", "Premium interior with marble floors and designer furniture")

    def build_exterior(self) -> None:
        self._build("exterior", "Stone facade exterior with premium finishes")

    def build_garden(self) -> None:
        self._build("garden", "Large landscaped garden with fountain and lighting")

    def build_garage(self) -> None:
        self._build("garage", "Three car garage with automated doors")

    def build_swimming_pool(self) -> None:
        self._build("swimming_pool", "Large heated swimming pool with jacuzzi")


# ==================== 指挥者 ====================

class HouseDirector:
    """编排建造步骤"""

    def __init__(self, builder: HouseBuilder):
        self._builder = builder

    def change_builder(self, builder: HouseBuilder) -> None:
        self._builder = builder

    def build_minimal_house(self) -> None:
        self._builder.build_foundation()
        self._builder.build_structure()
        self._builder.build_roof()

    def build_full_featured_house(self) -> None:
        self.build_minimal_house()
        self._builder.build_interior()
        self._builder.build_exterior()
        self._builder.build_garden()
        self._builder.build_garage()
        self._builder.build_swimming_pool()

    def build_custom_house(
        self,
        interior: bool = False,
        exterior: bool = False,
        garden: bool = False,
        garage: bool = False,
        swimming_pool: bool = False,
    ) -> None:
        self.build_minimal_house()
        if interior:
            self._builder.build_interior()
        if exterior:
            self._builder.build_exterior()
        if garden:
            self._builder.build_garden()
        if garage:
            self._builder.build_garage()
        if swimming_pool:
            self._builder.build_swimming_pool()


# ==================== 链式生成器 ====================

class FluentHouseBuilder:
    """链式调用的生成器，build() 校验必需部件"""

    def __init__(self, on_step: Optional[Callable[[str], None]] = None):
        self._house = House()
        self._on_step = on_step
        self.log: List[str] = []

    def _with(self, part: str, value: str) -> "FluentHouseBuilder":
        setattr(self._house, part, value)
        line = f"Fluent Builder: Building {part.replace('_', ' ')}: {value}"
        self.log.append(line)
        if self._on_step is not None:
            self._on_step(line)
        return self

    def with_foundation(self, foundation: str) -> "FluentHouseBuilder":
        return self._with("foundation", foundation)

    def with_structure(self, structure: str) -> "FluentHouseBuilder":
        return self._with("structure", structure)

    def with_roof(self, roof: str) -> "FluentHouseBuilder":
        return self._with("roof", roof)

    def with_interior(self, interior: str) -> "FluentHouseBuilder":
        return self._with("interior", interior)

    def with_exterior(self, exterior: str) -> "FluentHouseBuilder":
        return self._with("exterior", exterior)

    def with_garden(self, garden: str) -> "FluentHouseBuilder":
        return self._with("garden", garden)

    def with_garage(self, garage: str) -> "FluentHouseBuilder":
        return self._with("garage", garage)

    def with_swimming_pool(self, swimming_pool: str) -> "FluentHouseBuilder":
        return self._with("swimming_pool", swimming_pool)

    def build(self) -> House:
        missing = self._house.missing_parts()
        if missing:
            raise BuildError(
                f"缺少必需部件: {', '.join(missing)}",
                missing=missing,
            )
        return self._house


@log_execution
@measure_time
def run(echo: Echo = print) -> List[str]:
    """运行生成器演示"""
    out = Transcript(echo)
    out.say("===== Builder Pattern Demo =====")

    out.say("")
    out.say("1. Building a minimal standard house:")
    standard_builder = StandardHouseBuilder()
    director = HouseDirector(standard_builder)
    director.build_minimal_house()
    out.extend(standard_builder.log)
    out.extend(standard_builder.get_house().show_details())

    out.say("")
    out.say("2. Building a full featured luxury house:")
    luxury_builder = LuxuryHouseBuilder()
    director.change_builder(luxury_builder)
    director.build_full_featured_house()
    out.extend(luxury_builder.log)
    out.extend(luxury_builder.get_house().show_details())

    out.say("")
    out.say("3. Building a custom standard house:")
    custom_builder = StandardHouseBuilder()
    director.change_builder(custom_builder)
    director.build_custom_house(
        interior=True,
        exterior=True,
        garden=False,
        garage=True,
        swimming_pool=False,
    )
    out.extend(custom_builder.log)
    out.extend(custom_builder.get_house().show_details())

    out.say("")
    out.say("4. Using the Fluent Builder:")
    fluent_house = (
        FluentHouseBuilder(on_step=out.say)
        .with_foundation("Deep concrete foundation")
        .with_structure("Brick structure")
        .with_roof("Metal roof")
        .with_interior("Modern interior")
        .with_garage("Double garage")
        .build()
    )
    out.extend(fluent_house.show_details())
    return out.lines
