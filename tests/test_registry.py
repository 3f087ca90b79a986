"""Tests for example declaration and the registry."""

import pytest

from catalog.errors import DuplicateIdError, NotFoundError, RegistryFrozenError
from catalog.example import Category, Example, Transcript
from catalog.registry import ExampleRegistry, default_registry, load_catalog

from tests.conftest import make_example, printing


class TestTranscript:
    def test_write_splits_on_newlines(self):
        out = Transcript()
        out.write("one\ntwo")
        out.write()
        out.write("three\n")

        assert out.lines == ("one", "two", "", "three", "")
        assert len(out) == 5

    def test_lines_is_a_snapshot(self):
        out = Transcript()
        out.write("a")
        snapshot = out.lines
        out.write("b")

        assert snapshot == ("a",)


class TestCategory:
    @pytest.mark.parametrize("value", ["structural", "STRUCTURAL", " Structural "])
    def test_parse_is_case_insensitive(self, value):
        assert Category.parse(value) is Category.STRUCTURAL

    def test_parse_unknown_category(self):
        with pytest.raises(ValueError, match="Unknown category"):
            Category.parse("architectural")


class TestExample:
    def test_run_returns_captured_lines(self):
        entry = make_example("strategy/demo", printing("first", "second"))
        assert entry.run() == ("first", "second")

    def test_pattern_is_id_prefix(self):
        entry = make_example("observer/shop-prices", printing())
        assert entry.pattern == "observer"


class TestExampleRegistry:
    def test_registration_order_is_preserved(self, abc_registry):
        assert abc_registry.ids() == ["a", "b", "c"]
        assert [entry.id for entry in abc_registry.list()] == ["a", "b", "c"]

    def test_get_known_id(self, abc_registry):
        entry = abc_registry.get("b")
        assert entry.id == "b"
        assert entry.category is Category.CREATIONAL

    def test_get_unknown_id(self, abc_registry):
        with pytest.raises(NotFoundError) as excinfo:
            abc_registry.get("missing")

        assert excinfo.value.example_id == "missing"
        assert str(excinfo.value) == "Example 'missing' not found"
        assert isinstance(excinfo.value, KeyError)

    def test_duplicate_id_is_rejected(self):
        registry = ExampleRegistry()
        registry.register(make_example("dup", printing("one")))

        with pytest.raises(DuplicateIdError) as excinfo:
            registry.register(make_example("dup", printing("two")))

        assert excinfo.value.example_id == "dup"
        assert registry.get("dup").run() == ("one",)
        assert len(registry) == 1

    def test_from_examples_aborts_on_duplicates(self):
        with pytest.raises(DuplicateIdError):
            ExampleRegistry.from_examples(
                [make_example("x", printing()), make_example("x", printing())]
            )

    def test_frozen_registry_rejects_registration(self, abc_registry):
        assert abc_registry.is_frozen

        with pytest.raises(RegistryFrozenError):
            abc_registry.register(make_example("d", printing()))

        assert "d" not in abc_registry

    def test_list_filters_by_category(self, abc_registry):
        view = abc_registry.list(Category.STRUCTURAL)
        assert view.ids() == ["c"]
        assert len(view) == 1

    def test_list_view_is_restartable(self, abc_registry):
        view = abc_registry.list()
        assert [e.id for e in view] == [e.id for e in view]

    def test_empty_registry(self):
        registry = ExampleRegistry.from_examples([])

        assert list(registry.list()) == []
        assert registry.ids() == []
        assert registry.categories() == []

    def test_categories_in_first_seen_order(self, abc_registry):
        assert abc_registry.categories() == [
            Category.BEHAVIORAL,
            Category.CREATIONAL,
            Category.STRUCTURAL,
        ]

    def test_contains(self, abc_registry):
        assert "a" in abc_registry
        assert "z" not in abc_registry


class TestCatalog:
    def test_catalog_ids_are_unique_and_grouped_by_family(self):
        registry = load_catalog()
        ids = registry.ids()

        assert len(ids) == len(set(ids))
        assert registry.categories() == [
            Category.BEHAVIORAL,
            Category.CREATIONAL,
            Category.STRUCTURAL,
        ]

    def test_catalog_starts_with_chain_of_responsibility(self):
        ids = load_catalog().ids()
        assert ids[0] == "chain-of-responsibility/number-ranges"
        assert ids[-1] == "flyweight/coffee-flavours"

    def test_every_example_has_title_and_description(self):
        for entry in load_catalog().list():
            assert isinstance(entry, Example)
            assert entry.title
            assert entry.description

    def test_default_registry_is_cached(self):
        assert default_registry() is default_registry()
        assert default_registry().is_frozen
