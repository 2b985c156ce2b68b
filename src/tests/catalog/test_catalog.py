"""Tests for the built-in pattern catalogue."""

import random
import threading
from functools import partial

import pytest

from patternbench.catalog import (
    ALL_EXAMPLES,
    build_default_registry,
    get_default_registry,
    register_builtin_examples,
)
from patternbench.catalog.behavioral import ShapeTag, AreaVisitor, parse_rpn
from patternbench.catalog.creational import AppSettings, get_app_settings
from patternbench.catalog.structural import FlyweightExample
from patternbench.core.exceptions import DuplicateNameError
from patternbench.core.registry import ExampleRegistry
from patternbench.core.runner import ExampleRunner
from patternbench.models.example_models import PatternCategory, RunStatus


EXPECTED_NAMES = [
    # Creational
    "AbstractFactory", "Builder", "FactoryMethod", "Prototype", "Singleton",
    # Structural
    "Adapter", "Bridge", "Composite", "Decorator", "Facade", "Flyweight", "Proxy",
    # Behavioral
    "ChainOfResponsibility", "Command", "Interpreter", "Iterator", "Mediator",
    "Memento", "Observer", "State", "Strategy", "TemplateMethod", "Visitor",
]


class TestCatalogue:
    """Tests for catalogue registration."""

    def test_all_23_patterns_registered_in_order(self):
        registry = build_default_registry()
        assert registry.names() == EXPECTED_NAMES

    def test_category_counts(self):
        registry = build_default_registry()
        assert len(registry.by_category(PatternCategory.CREATIONAL)) == 5
        assert len(registry.by_category(PatternCategory.STRUCTURAL)) == 7
        assert len(registry.by_category(PatternCategory.BEHAVIORAL)) == 11

    def test_every_example_declares_metadata(self):
        for example_class in ALL_EXAMPLES:
            description = example_class().describe()
            assert description.name == example_class.name
            assert description.intent
            assert example_class.expected_outcome

    def test_registering_twice_fails(self):
        registry = build_default_registry()
        with pytest.raises(DuplicateNameError):
            register_builtin_examples(registry)
        assert len(registry) == 23

    def test_default_registry_is_shared(self):
        assert get_default_registry() is get_default_registry()

    def test_default_registry_built_once_under_concurrency(self):
        seen = []
        threads = [
            threading.Thread(target=lambda: seen.append(get_default_registry()))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(registry) for registry in seen}) == 1


class TestCatalogueRuns:
    """Every catalogue example must pass through the runner."""

    def test_run_all_succeeds(self):
        results = ExampleRunner(build_default_registry()).run_all()

        failures = {r.name: r.failure_reason for r in results if r.status != RunStatus.SUCCESS}
        assert failures == {}
        assert len(results) == 23

    @pytest.mark.parametrize("name", EXPECTED_NAMES)
    def test_each_example_is_deterministic(self, name):
        runner = ExampleRunner(build_default_registry())

        first = runner.run_one(name)
        second = runner.run_one(name)

        assert first.status == second.status == RunStatus.SUCCESS
        assert first.output == second.output

    def test_setup_is_idempotent(self):
        for example_class in ALL_EXAMPLES:
            example = example_class()
            example.setup()
            example.setup()
            assert tuple(example.run()) == tuple(example_class.expected_outcome)

    @pytest.mark.parametrize("example_class", ALL_EXAMPLES, ids=lambda cls: cls.name)
    def test_run_is_repeatable_on_one_instance(self, example_class):
        example = example_class()
        example.setup()

        first = tuple(example.run())
        second = tuple(example.run())

        assert first == second == tuple(example_class.expected_outcome)


class TestPatternDetails:
    """Spot checks of individual pattern implementations."""

    def test_singleton_accessor_returns_one_instance(self):
        instances = []
        threads = [
            threading.Thread(target=lambda: instances.append(get_app_settings()))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert all(instance is instances[0] for instance in instances)
        assert AppSettings.instances_created == 1

    def test_visitor_rejects_unknown_tag(self):
        with pytest.raises(ValueError):
            AreaVisitor().visit("hexagon", {})

    def test_visitor_accepts_tag_values(self):
        assert AreaVisitor().visit(ShapeTag.RECTANGLE, {"width": 1.5, "height": 2}) == (
            "area of rectangle: 3.00"
        )

    def test_interpreter_rejects_malformed_expression(self):
        with pytest.raises(ValueError):
            parse_rpn("1 +")
        with pytest.raises(ValueError):
            parse_rpn("1 2")

    def test_flyweight_with_seeded_random_source(self):
        example = FlyweightExample(
            color_source=lambda colors: partial(random.Random(7).choice, colors)
        )
        example.setup()
        lines = example.run()

        assert lines[0] == "planted 7 trees"
        types_in_cache = int(lines[1].rsplit(" ", 1)[1])
        assert 1 <= types_in_cache <= 3
