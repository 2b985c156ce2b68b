"""Structural pattern examples."""

import itertools
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from ..core.contract import PatternExample
from ..models.example_models import PatternCategory


# Adapter

class CelsiusSensor:
    def __init__(self, celsius: float):
        self._celsius = celsius

    def read_celsius(self) -> float:
        return self._celsius


class LegacyFahrenheitSensor:
    """Third-party sensor with an incompatible interface."""

    def __init__(self, fahrenheit: float):
        self._fahrenheit = fahrenheit

    def get_temperature_f(self) -> float:
        return self._fahrenheit


class FahrenheitAdapter:
    """Exposes a legacy sensor through the read_celsius() interface."""

    def __init__(self, sensor: LegacyFahrenheitSensor):
        self._sensor = sensor

    def read_celsius(self) -> float:
        return (self._sensor.get_temperature_f() - 32) * 5 / 9


class AdapterExample(PatternExample):
    name = "Adapter"
    category = PatternCategory.STRUCTURAL
    intent = "Convert an interface into the one clients expect"
    expected_outcome = (
        "native sensor reads 21.5 C",
        "legacy sensor reads 20.0 C",
    )

    def setup(self) -> None:
        self._sensors = [
            ("native", CelsiusSensor(21.5)),
            ("legacy", FahrenheitAdapter(LegacyFahrenheitSensor(68.0))),
        ]

    def run(self) -> List[str]:
        return [
            f"{label} sensor reads {sensor.read_celsius():.1f} C"
            for label, sensor in self._sensors
        ]


# Bridge

class VectorRenderer:
    def render_circle(self, radius: float) -> str:
        return f"drawing circle of radius {radius:g} as vectors"


class RasterRenderer:
    def render_circle(self, radius: float) -> str:
        return f"drawing circle of radius {radius:g} as pixels"


class Circle:
    """Abstraction side of the bridge; rendering is delegated."""

    def __init__(self, renderer, radius: float):
        self.renderer = renderer
        self.radius = radius

    def draw(self) -> str:
        return self.renderer.render_circle(self.radius)

    def resize(self, factor: float) -> None:
        self.radius *= factor


class BridgeExample(PatternExample):
    name = "Bridge"
    category = PatternCategory.STRUCTURAL
    intent = "Decouple an abstraction from its implementation so both can vary"
    expected_outcome = (
        "drawing circle of radius 5 as vectors",
        "drawing circle of radius 10 as pixels",
    )

    def setup(self) -> None:
        self._vector_circle = Circle(VectorRenderer(), 5)
        self._raster_circle = Circle(RasterRenderer(), 5)

    def run(self) -> List[str]:
        raster = Circle(self._raster_circle.renderer, self._raster_circle.radius)
        raster.resize(2)
        return [self._vector_circle.draw(), raster.draw()]


# Composite

class File:
    def __init__(self, name: str, size: int):
        self.name = name
        self._size = size

    def size(self) -> int:
        return self._size

    def lines(self, depth: int = 0) -> List[str]:
        return [f"{'  ' * depth}{self.name} ({self._size})"]


class Directory:
    """Composite node; sizes and listings aggregate over its children."""

    def __init__(self, name: str, children: Sequence[Union[File, "Directory"]] = ()):
        self.name = name
        self.children = list(children)

    def size(self) -> int:
        return sum(child.size() for child in self.children)

    def lines(self, depth: int = 0) -> List[str]:
        lines = [f"{'  ' * depth}{self.name} ({self.size()})"]
        for child in self.children:
            lines.extend(child.lines(depth + 1))
        return lines


class CompositeExample(PatternExample):
    name = "Composite"
    category = PatternCategory.STRUCTURAL
    intent = "Treat individual objects and compositions of objects uniformly"
    expected_outcome = (
        "project (600)",
        "  README.md (100)",
        "  src (500)",
        "    main.py (300)",
        "    util.py (200)",
    )

    def setup(self) -> None:
        self._root = Directory(
            "project",
            [
                File("README.md", 100),
                Directory("src", [File("main.py", 300), File("util.py", 200)]),
            ],
        )

    def run(self) -> List[str]:
        return self._root.lines()


# Decorator

class Espresso:
    def description(self) -> str:
        return "espresso"

    def cost(self) -> float:
        return 2.00


class CondimentDecorator:
    """Wraps a beverage and adds one condiment to it."""

    def __init__(self, beverage, condiment: str, price: float):
        self._beverage = beverage
        self._condiment = condiment
        self._price = price

    def description(self) -> str:
        return f"{self._beverage.description()}, {self._condiment}"

    def cost(self) -> float:
        return self._beverage.cost() + self._price


def with_milk(beverage) -> CondimentDecorator:
    return CondimentDecorator(beverage, "milk", 0.50)


def with_sugar(beverage) -> CondimentDecorator:
    return CondimentDecorator(beverage, "sugar", 0.25)


class DecoratorExample(PatternExample):
    name = "Decorator"
    category = PatternCategory.STRUCTURAL
    intent = "Attach responsibilities to an object dynamically"
    expected_outcome = (
        "espresso: 2.00",
        "espresso, milk: 2.50",
        "espresso, milk, sugar: 2.75",
    )

    def setup(self) -> None:
        plain = Espresso()
        milky = with_milk(plain)
        self._orders = [plain, milky, with_sugar(milky)]

    def run(self) -> List[str]:
        return [f"{order.description()}: {order.cost():.2f}" for order in self._orders]


# Facade

class Lights:
    def __init__(self, log: List[str]):
        self._log = log

    def dim(self, level: int) -> None:
        self._log.append(f"lights dimmed to {level}%")


class Projector:
    def __init__(self, log: List[str]):
        self._log = log

    def on(self) -> None:
        self._log.append("projector on")


class Amplifier:
    def __init__(self, log: List[str]):
        self._log = log

    def set_volume(self, volume: int) -> None:
        self._log.append(f"amplifier volume {volume}")


class HomeTheaterFacade:
    """One call drives the whole subsystem in the right order."""

    def __init__(self, log: List[str]):
        self._log = log
        self._lights = Lights(log)
        self._projector = Projector(log)
        self._amplifier = Amplifier(log)

    def watch_movie(self, title: str) -> None:
        self._lights.dim(10)
        self._projector.on()
        self._amplifier.set_volume(5)
        self._log.append(f"playing {title}")


class FacadeExample(PatternExample):
    name = "Facade"
    category = PatternCategory.STRUCTURAL
    intent = "Provide a simple interface to a complex subsystem"
    expected_outcome = (
        "lights dimmed to 10%",
        "projector on",
        "amplifier volume 5",
        "playing Alien",
    )

    def setup(self) -> None:
        self._title = "Alien"

    def run(self) -> List[str]:
        log: List[str] = []
        HomeTheaterFacade(log).watch_movie(self._title)
        return log


# Flyweight

class TreeType:
    """Shared intrinsic state of many trees."""

    def __init__(self, species: str, color: str):
        self.species = species
        self.color = color


class TreeTypeFactory:
    def __init__(self):
        self._types: Dict[Tuple[str, str], TreeType] = {}

    def get(self, species: str, color: str) -> TreeType:
        key = (species, color)
        if key not in self._types:
            self._types[key] = TreeType(species, color)
        return self._types[key]

    def __len__(self) -> int:
        return len(self._types)


def cycling_picker(choices: Sequence[str]) -> Callable[[], str]:
    """Deterministic color source cycling through the choices."""
    return itertools.cycle(choices).__next__


class FlyweightExample(PatternExample):
    name = "Flyweight"
    category = PatternCategory.STRUCTURAL
    intent = "Share fine-grained objects to support large numbers of them"
    expected_outcome = (
        "planted 7 trees",
        "tree types in cache: 3",
        "first tree: oak/green at (0, 0)",
    )

    COLORS = ("green", "red", "yellow")

    def __init__(self, color_source: Optional[Callable[[Sequence[str]], Callable[[], str]]] = None):
        """
        Initialize flyweight example.

        Args:
            color_source: Builds a zero-argument color picker from the
                palette. Pass e.g. ``lambda c: partial(random.Random(7).choice, c)``
                for seeded randomness.
        """
        self._color_source = color_source or cycling_picker

    def setup(self) -> None:
        self._palette = self.COLORS

    def run(self) -> List[str]:
        factory = TreeTypeFactory()
        pick_color = self._color_source(self._palette)
        forest = [
            ((i, i * 2), factory.get("oak", pick_color()))
            for i in range(7)
        ]
        (x, y), first = forest[0]
        return [
            f"planted {len(forest)} trees",
            f"tree types in cache: {len(factory)}",
            f"first tree: {first.species}/{first.color} at ({x}, {y})",
        ]


# Proxy

class RealImage:
    def __init__(self, filename: str, log: List[str]):
        self.filename = filename
        self._log = log
        self._log.append(f"loading {filename}")

    def display(self) -> None:
        self._log.append(f"displaying {self.filename}")


class LazyImageProxy:
    """Defers loading the real image until it is first displayed."""

    def __init__(self, filename: str, log: List[str]):
        self.filename = filename
        self._log = log
        self._image: Optional[RealImage] = None

    def display(self) -> None:
        if self._image is None:
            self._image = RealImage(self.filename, self._log)
        self._image.display()


class ProxyExample(PatternExample):
    name = "Proxy"
    category = PatternCategory.STRUCTURAL
    intent = "Provide a placeholder that controls access to another object"
    expected_outcome = (
        "proxy created for photo.png",
        "loading photo.png",
        "displaying photo.png",
        "displaying photo.png",
    )

    def setup(self) -> None:
        self._filename = "photo.png"

    def run(self) -> List[str]:
        log: List[str] = []
        image = LazyImageProxy(self._filename, log)
        log.append(f"proxy created for {image.filename}")
        image.display()
        image.display()
        return log


EXAMPLES = [
    AdapterExample,
    BridgeExample,
    CompositeExample,
    DecoratorExample,
    FacadeExample,
    FlyweightExample,
    ProxyExample,
]
