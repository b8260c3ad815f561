#!/usr/bin/env python3
"""
工厂方法模式 - 由子类决定实例化哪个类

同时提供一个简单工厂（非 GoF 模式，但很常用）作对比。
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Type, Union

from creational.demos.base import Echo, Transcript
from creational.exceptions import UnknownProductError
from utils.decorators import log_execution, measure_time

logger = logging.getLogger(__name__)


# ==================== 产品 ====================

class Vehicle(ABC):
    @abstractmethod
    def drive(self) -> str: ...


class Car(Vehicle):
    def drive(self) -> str:
        return "The car is being driven"


class Motorcycle(Vehicle):
    def drive(self) -> str:
        return "The motorcycle is being driven"


class Truck(Vehicle):
    def drive(self) -> str:
        return "The truck is being driven"


# ==================== 创建者 ====================

class VehicleFactory(ABC):
    """声明工厂方法的创建者"""

    @abstractmethod
    def create_vehicle(self) -> Vehicle:
        """工厂方法"""

    def test_vehicle(self) -> List[str]:
        """使用工厂方法的模板方法"""
        vehicle = self.create_vehicle()
        return ["Testing vehicle...", vehicle.drive()]


class CarFactory(VehicleFactory):
    def create_vehicle(self) -> Vehicle:
        return Car()


class MotorcycleFactory(VehicleFactory):
    def create_vehicle(self) -> Vehicle:
        return Motorcycle()


class TruckFactory(VehicleFactory):
    def create_vehicle(self) -> Vehicle:
        return Truck()


# ==================== 简单工厂 ====================

class VehicleType(Enum):
    CAR = "car"
    MOTORCYCLE = "motorcycle"
    TRUCK = "truck"


class SimpleVehicleFactory:
    """按类型参数分派的简单工厂"""

    _registry: Dict[VehicleType, Type[Vehicle]] = {
        VehicleType.CAR: Car,
        VehicleType.MOTORCYCLE: Motorcycle,
        VehicleType.TRUCK: Truck,
    }

    def create_vehicle(self, vehicle_type: Union[VehicleType, str]) -> Vehicle:
        """
        创建交通工具

        Args:
            vehicle_type: VehicleType 或其字符串值（不区分大小写）

        Raises:
            UnknownProductError: 类型无法识别
        """
        if not isinstance(vehicle_type, VehicleType):
            try:
                vehicle_type = VehicleType(str(vehicle_type).lower())
            except ValueError as e:
                raise UnknownProductError(
                    f"Invalid vehicle type: {vehicle_type}",
                    details={"type": str(vehicle_type),
                             "available": [t.value for t in VehicleType]},
                    cause=e,
                ) from e

        return self._registry[vehicle_type]()


@log_execution
@measure_time
def run(echo: Echo = print) -> List[str]:
    """运行工厂方法演示"""
    out = Transcript(echo)
    out.say("===== Factory Method Pattern Demo =====")

    car_factory = CarFactory()
    motorcycle_factory = MotorcycleFactory()
    truck_factory = TruckFactory()

    for factory in (car_factory, motorcycle_factory, truck_factory):
        out.say(factory.create_vehicle().drive())

    out.say("")
    out.say("Testing vehicles with template method:")
    out.extend(car_factory.test_vehicle())
    out.extend(motorcycle_factory.test_vehicle())

    out.say("")
    out.say("Using Simple Factory:")
    simple_factory = SimpleVehicleFactory()
    out.say(simple_factory.create_vehicle(VehicleType.CAR).drive())
    return out.lines
