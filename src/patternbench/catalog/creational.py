"""Creational pattern examples."""

import copy
import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Protocol

from ..core.contract import PatternExample
from ..models.example_models import PatternCategory


# Factory Method

class Transport(Protocol):
    def deliver(self) -> str: ...


class Truck:
    def deliver(self) -> str:
        return "truck delivers by road"


class Ship:
    def deliver(self) -> str:
        return "ship delivers by sea"


class Logistics:
    """Plans deliveries with whatever transport its factory method creates."""

    def __init__(self, create_transport: Callable[[], Transport]):
        self._create_transport = create_transport

    def plan_delivery(self) -> str:
        return self._create_transport().deliver()


class FactoryMethodExample(PatternExample):
    name = "FactoryMethod"
    category = PatternCategory.CREATIONAL
    intent = "Let the creator decide which concrete product to instantiate"
    expected_outcome = ("truck delivers by road", "ship delivers by sea")

    def setup(self) -> None:
        self._planners = [Logistics(Truck), Logistics(Ship)]

    def run(self) -> List[str]:
        return [planner.plan_delivery() for planner in self._planners]


# Abstract Factory

class WindowsButton:
    def paint(self) -> str:
        return "windows button"


class WindowsCheckbox:
    def paint(self) -> str:
        return "windows checkbox"


class MacButton:
    def paint(self) -> str:
        return "mac button"


class MacCheckbox:
    def paint(self) -> str:
        return "mac checkbox"


class WindowsWidgetFactory:
    def create_button(self) -> WindowsButton:
        return WindowsButton()

    def create_checkbox(self) -> WindowsCheckbox:
        return WindowsCheckbox()


class MacWidgetFactory:
    def create_button(self) -> MacButton:
        return MacButton()

    def create_checkbox(self) -> MacCheckbox:
        return MacCheckbox()


def render_dialog(factory) -> str:
    """Render a dialog using only the factory interface."""
    return f"{factory.create_button().paint()} | {factory.create_checkbox().paint()}"


class AbstractFactoryExample(PatternExample):
    name = "AbstractFactory"
    category = PatternCategory.CREATIONAL
    intent = "Create families of related objects without naming their classes"
    expected_outcome = (
        "windows button | windows checkbox",
        "mac button | mac checkbox",
    )

    def setup(self) -> None:
        self._factories = [WindowsWidgetFactory(), MacWidgetFactory()]

    def run(self) -> List[str]:
        return [render_dialog(factory) for factory in self._factories]


# Builder

@dataclass
class Burger:
    bun: str = ""
    patty: str = ""
    toppings: List[str] = field(default_factory=list)

    def describe(self) -> str:
        return ", ".join([f"{self.bun} bun", f"{self.patty} patty"] + self.toppings)


class BurgerBuilder:
    """Step-by-step burger construction with a fluent interface."""

    def __init__(self):
        self._burger = Burger()

    def bun(self, kind: str) -> "BurgerBuilder":
        self._burger.bun = kind
        return self

    def patty(self, kind: str) -> "BurgerBuilder":
        self._burger.patty = kind
        return self

    def add(self, topping: str) -> "BurgerBuilder":
        self._burger.toppings.append(topping)
        return self

    def build(self) -> Burger:
        burger, self._burger = self._burger, Burger()
        return burger


class BurgerDirector:
    """Knows the recipes, delegates construction to the builder."""

    def __init__(self, builder: BurgerBuilder):
        self.builder = builder

    def classic(self) -> Burger:
        return self.builder.bun("sesame").patty("beef").add("cheese").add("lettuce").build()

    def veggie(self) -> Burger:
        return self.builder.bun("whole-wheat").patty("bean").add("tomato").build()


class BuilderExample(PatternExample):
    name = "Builder"
    category = PatternCategory.CREATIONAL
    intent = "Separate the construction of a complex object from its representation"
    expected_outcome = (
        "classic: sesame bun, beef patty, cheese, lettuce",
        "veggie: whole-wheat bun, bean patty, tomato",
    )

    def setup(self) -> None:
        self._director = BurgerDirector(BurgerBuilder())

    def run(self) -> List[str]:
        return [
            f"classic: {self._director.classic().describe()}",
            f"veggie: {self._director.veggie().describe()}",
        ]


# Prototype

@dataclass
class Shape:
    kind: str
    color: str
    dimensions: Dict[str, float] = field(default_factory=dict)

    def clone(self) -> "Shape":
        return copy.deepcopy(self)


class ShapeCache:
    """Registry of preconfigured prototypes handed out as clones."""

    def __init__(self):
        self._prototypes: Dict[str, Shape] = {}

    def add(self, key: str, prototype: Shape) -> None:
        self._prototypes[key] = prototype

    def prototype(self, key: str) -> Shape:
        return self._prototypes[key]

    def clone(self, key: str) -> Shape:
        return self._prototypes[key].clone()


class PrototypeExample(PatternExample):
    name = "Prototype"
    category = PatternCategory.CREATIONAL
    intent = "Create new objects by copying a configured prototype"
    expected_outcome = (
        "clone circle is a new object: true",
        "prototype color: red",
        "clone color: blue",
    )

    def setup(self) -> None:
        self._cache = ShapeCache()
        self._cache.add("circle", Shape("circle", "red", {"radius": 5.0}))

    def run(self) -> List[str]:
        original = self._cache.prototype("circle")
        clone = self._cache.clone("circle")
        clone.color = "blue"
        return [
            f"clone {clone.kind} is a new object: {str(clone is not original).lower()}",
            f"prototype color: {original.color}",
            f"clone color: {clone.color}",
        ]


# Singleton

class AppSettings:
    """Process-wide settings; obtain it through get_app_settings()."""

    instances_created = 0

    def __init__(self):
        AppSettings.instances_created += 1
        self.values: Dict[str, str] = {}


_settings: Optional[AppSettings] = None
_settings_lock = threading.Lock()


def get_app_settings() -> AppSettings:
    """Return the shared settings, constructing them on first access."""
    global _settings
    if _settings is None:
        with _settings_lock:
            if _settings is None:
                _settings = AppSettings()
    return _settings


class SingletonExample(PatternExample):
    name = "Singleton"
    category = PatternCategory.CREATIONAL
    intent = "Ensure a class has one instance with a global access point"
    expected_outcome = (
        "instance-1==instance-2: true",
        "instances constructed: 1",
    )

    def setup(self) -> None:
        self._accessor = get_app_settings

    def run(self) -> List[str]:
        first = self._accessor()
        second = self._accessor()
        return [
            f"instance-1==instance-2: {str(first is second).lower()}",
            f"instances constructed: {AppSettings.instances_created}",
        ]


EXAMPLES = [
    AbstractFactoryExample,
    BuilderExample,
    FactoryMethodExample,
    PrototypeExample,
    SingletonExample,
]
