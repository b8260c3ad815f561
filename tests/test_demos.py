#!/usr/bin/env python3
"""
创建型模式演示测试套件
"""

import unittest

import pytest

from creational.demos import DemoRegistry, Transcript
from creational.demos import abstract_factory, builder, factory_method, prototype, singleton_demo
from creational.exceptions import BuildError, DemoNotFound, UnknownProductError


class TestAbstractFactory(unittest.TestCase):
    """抽象工厂测试"""

    def test_windows_family(self):
        app = abstract_factory.Application(abstract_factory.WindowsGUIFactory())
        self.assertEqual(app.render_ui(), [
            "Rendering a button in Windows style",
            "Rendering a textbox in Windows style",
            "Rendering a checkbox in Windows style",
        ])
        self.assertEqual(app.handle_user_interaction(), [
            "Windows button click handled",
            "Windows textbox input handled",
            "Windows checkbox toggled",
        ])

    def test_macos_family(self):
        app = abstract_factory.Application(abstract_factory.MacOSGUIFactory())
        self.assertIn("MacOS checkbox toggled", app.handle_user_interaction())

    def test_platform_detection(self):
        self.assertEqual(abstract_factory.detect_platform("win32"), "Windows")
        self.assertEqual(abstract_factory.detect_platform("cygwin"), "Windows")
        self.assertEqual(abstract_factory.detect_platform("darwin"), "MacOS")
        self.assertEqual(abstract_factory.detect_platform("linux"), "MacOS")
        self.assertIsInstance(
            abstract_factory.factory_for_platform("Windows"),
            abstract_factory.WindowsGUIFactory,
        )

    def test_run_transcript(self):
        lines = abstract_factory.run(echo=None, platform="Windows")
        self.assertEqual(lines[0], "===== Abstract Factory Pattern Demo =====")
        self.assertIn("Detected OS: Windows", lines)
        self.assertEqual(lines[-1], "Rendering a checkbox in Windows style")


class TestBuilder(unittest.TestCase):
    """生成器测试"""

    def test_minimal_house(self):
        b = builder.StandardHouseBuilder()
        builder.HouseDirector(b).build_minimal_house()
        house = b.get_house()
        self.assertEqual(house.foundation, "Standard concrete foundation")
        self.assertIsNone(house.interior)
        self.assertEqual(b.log[0], "Standard House: Building standard concrete foundation")
        self.assertEqual(len(house.show_details()), 4)

    def test_standard_house_has_no_pool(self):
        b = builder.StandardHouseBuilder()
        builder.HouseDirector(b).build_full_featured_house()
        self.assertIsNone(b.get_house().swimming_pool)
        self.assertEqual(len(b.log), 7)

    def test_luxury_house_details(self):
        b = builder.LuxuryHouseBuilder()
        builder.HouseDirector(b).build_full_featured_house()
        details = b.get_house().show_details()
        self.assertIn("- Swimming Pool: Large heated swimming pool with jacuzzi", details)
        self.assertEqual(len(details), 9)

    def test_custom_house(self):
        b = builder.StandardHouseBuilder()
        director = builder.HouseDirector(builder.LuxuryHouseBuilder())
        director.change_builder(b)
        director.build_custom_house(interior=True, exterior=True, garage=True)
        house = b.get_house()
        self.assertEqual(house.garage, "Single car garage")
        self.assertIsNone(house.garden)

    def test_fluent_builder(self):
        steps = []
        house = (
            builder.FluentHouseBuilder(on_step=steps.append)
            .with_foundation("Deep concrete foundation")
            .with_structure("Brick structure")
            .with_roof("Metal roof")
            .with_swimming_pool("Indoor pool")
            .build()
        )
        self.assertEqual(house.roof, "Metal roof")
        self.assertEqual(steps[-1], "Fluent Builder: Building swimming pool: Indoor pool")

    def test_fluent_builder_requires_parts(self):
        with self.assertRaises(BuildError) as ctx:
            builder.FluentHouseBuilder().with_foundation("Slab").build()
        self.assertEqual(ctx.exception.missing, ["structure", "roof"])


class TestFactoryMethod(unittest.TestCase):
    """工厂方法测试"""

    def test_concrete_creators(self):
        self.assertEqual(factory_method.CarFactory().create_vehicle().drive(),
                         "The car is being driven")
        self.assertEqual(factory_method.TruckFactory().test_vehicle(),
                         ["Testing vehicle...", "The truck is being driven"])

    def test_simple_factory(self):
        factory = factory_method.SimpleVehicleFactory()
        self.assertIsInstance(factory.create_vehicle(factory_method.VehicleType.CAR),
                              factory_method.Car)
        self.assertIsInstance(factory.create_vehicle("Motorcycle"),
                              factory_method.Motorcycle)

    def test_simple_factory_unknown_type(self):
        with self.assertRaises(UnknownProductError) as ctx:
            factory_method.SimpleVehicleFactory().create_vehicle("boat")
        self.assertIn("boat", ctx.exception.message)

    def test_every_vehicle_type_is_buildable(self):
        factory = factory_method.SimpleVehicleFactory()
        for vehicle_type in factory_method.VehicleType:
            with self.subTest(vehicle_type=vehicle_type):
                self.assertIsInstance(factory.create_vehicle(vehicle_type), factory_method.Vehicle)


class TestPrototype(unittest.TestCase):
    """原型测试"""

    def test_person_shallow_clone(self):
        original = prototype.Person("John Doe", 30)
        clone = original.clone()
        clone.name = "Jane Doe"
        self.assertIsNot(clone, original)
        self.assertEqual(str(original), "Person: John Doe, Age: 30")
        self.assertEqual(str(clone), "Person: Jane Doe, Age: 30")

    def test_address_field_copy(self):
        original = prototype.Address("New York")
        clone = original.clone()
        clone.city = "Los Angeles"
        self.assertEqual(str(original), "Address: New York")
        self.assertEqual(str(clone), "Address: Los Angeles")


class TestSingletonDemo(unittest.TestCase):
    def test_run(self):
        lines = singleton_demo.run(echo=None)
        self.assertIn("Same instance? True", lines)
        self.assertIn("Double-check lock same instance? True", lines)
        self.assertIn("Static initialization same instance? True", lines)
        self.assertIs(singleton_demo.get_singleton(), singleton_demo.get_singleton())
        self.assertEqual(singleton_demo.Singleton.created.count("Singleton instance created"), 1)

    def test_creation_message_only_once(self):
        singleton_demo.run(echo=None)
        lines = singleton_demo.run(echo=None)
        self.assertNotIn("Singleton instance created", lines)


class TestDemoRegistry(unittest.TestCase):
    def test_all_demos_registered(self):
        self.assertEqual(
            DemoRegistry.list_demos(),
            ["abstract_factory", "builder", "factory_method", "prototype", "singleton"],
        )

    def test_aliases(self):
        self.assertEqual(DemoRegistry.resolve("fm"), "factory_method")
        self.assertEqual(DemoRegistry.resolve("Abstract-Factory"), "abstract_factory")

    def test_unknown_demo(self):
        with self.assertRaises(DemoNotFound) as ctx:
            DemoRegistry.get("adapter")
        self.assertEqual(ctx.exception.demo, "adapter")

    def test_demo_info(self):
        info = DemoRegistry.get_demo_info("clone")
        self.assertEqual(info["name"], "prototype")
        self.assertEqual(info["aliases"], ["clone"])
        self.assertTrue(info["doc"].startswith("原型模式"))


def test_transcript_echoes_and_records():
    echoed = []
    out = Transcript(echoed.append)
    out.say("a")
    out.extend(["b", "c"])
    assert out.lines == ["a", "b", "c"]
    assert echoed == ["a", "b", "c"]


@pytest.mark.parametrize("name", ["builder", "factory_method", "prototype", "singleton"])
def test_every_demo_prints_header(name, capsys):
    lines = DemoRegistry.run(name)
    captured = capsys.readouterr()
    assert lines[0].startswith("=====")
    assert lines[0] in captured.out


def test_run_all_selected():
    transcripts = DemoRegistry.run_all(echo=None, names=["prototype", "fm"])
    assert list(transcripts) == ["prototype", "factory_method"]
    assert "Clone:    Address: Los Angeles" in transcripts["prototype"]
