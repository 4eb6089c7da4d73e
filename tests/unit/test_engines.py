"""
Unit tests for the format engines and the engine registry
(gray_matter.engines, gray_matter.registry).
"""

from __future__ import annotations

import datetime

import pytest

from gray_matter import Matter, Pod
from gray_matter.engines import JSON, TOML, YAML, Engine
from gray_matter.exceptions import EngineError, UnknownEngineError
from gray_matter.registry import (
    _ENGINE_MAP,
    available_engines,
    get_engine,
    register_engine,
    resolve_engine,
)


class KeyValue(Engine):
    """Minimal custom engine: one ``key=value`` pair per line."""

    name = "kv"

    def parse(self, content: str) -> Pod:
        data = {}
        for line in content.splitlines():
            if "=" not in line:
                raise EngineError(f"Missing '=' in {line!r}", engine=self.name)
            key, value = line.split("=", 1)
            data[key.strip()] = value.strip()
        return Pod(data)


class Broken(Engine):
    """Engine that violates the contract by raising a non-EngineError."""

    name = "broken"

    def parse(self, content: str) -> Pod:
        raise RuntimeError("engine bug")


@pytest.fixture
def clean_registry():
    """Restore the registry after tests that register engines."""
    saved = dict(_ENGINE_MAP)
    yield
    _ENGINE_MAP.clear()
    _ENGINE_MAP.update(saved)


# ---------------------------------------------------------------------------
# Engines
# ---------------------------------------------------------------------------

class TestYAML:
    """Tests for the YAML engine."""

    def test_mapping(self):
        assert YAML().parse("title: Home\ncount: 3") == {"title": "Home", "count": 3}

    def test_native_types(self):
        pod = YAML().parse("draft: false\nratio: 0.5\ndate: 2024-01-31")
        assert pod["draft"].as_bool() is False
        assert pod["ratio"].as_float() == 0.5
        assert pod["date"].value == datetime.date(2024, 1, 31)

    def test_null_document(self):
        assert YAML().parse("~").is_null()

    def test_invalid_raises_engine_error(self):
        with pytest.raises(EngineError, match=r"\[yaml\] Invalid YAML"):
            YAML().parse("a: [1, 2")

    def test_unsafe_tag_rejected(self):
        with pytest.raises(EngineError):
            YAML().parse("x: !!python/object/apply:os.system ['true']")


class TestJSON:
    """Tests for the JSON engine."""

    def test_object(self):
        assert JSON().parse('{"title": "Home", "n": 1}') == {"title": "Home", "n": 1}

    def test_integer_stays_int(self):
        pod = JSON().parse('{"int": 42, "float": 3.5}')
        assert type(pod["int"].value) is int
        assert type(pod["float"].value) is float

    def test_invalid_raises_engine_error(self):
        with pytest.raises(EngineError, match=r"\[json\]"):
            JSON().parse("title: Home")

    def test_in_matter(self, json_matter):
        result = json_matter.parse('---\n{"title": "Home"}\n---\nbody')
        assert result.metadata == {"title": "Home"}
        assert result.content == "body"


class TestOversizedInput:
    """Limits hit inside the format libraries surface as EngineError."""

    @pytest.mark.parametrize(
        ("engine", "content"),
        [
            (JSON(), '{"n": ' + "1" * 5000 + "}"),
            (TOML(), "n = " + "1" * 5000),
        ],
        ids=["json", "toml"],
    )
    def test_integer_past_digit_limit(self, engine, content):
        with pytest.raises(EngineError, match=rf"\[{engine.name}\]"):
            engine.parse(content)

    @pytest.mark.parametrize("engine", [YAML(), JSON(), TOML()], ids=["yaml", "json", "toml"])
    def test_nesting_too_deep(self, engine):
        with pytest.raises(EngineError, match=rf"\[{engine.name}\]"):
            engine.parse("[" * 100000 + "]" * 100000)


class TestTOML:
    """Tests for the TOML engine."""

    def test_table(self):
        pod = TOML().parse('title = "Home"\n[author]\nname = "Ada"')
        assert pod == {"title": "Home", "author": {"name": "Ada"}}

    def test_datetime(self):
        pod = TOML().parse("published = 2024-01-31T10:00:00Z")
        assert isinstance(pod["published"].value, datetime.datetime)

    def test_invalid_raises_engine_error(self):
        with pytest.raises(EngineError, match=r"\[toml\]"):
            TOML().parse("title: Home")


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class TestRegistry:
    """Tests for engine lookup and registration."""

    def test_builtins_available(self):
        assert {"yaml", "yml", "json", "toml"} <= set(available_engines())

    @pytest.mark.parametrize(
        ("name", "cls"),
        [("yaml", YAML), ("YAML", YAML), ("yml", YAML), ("json", JSON), (" toml ", TOML)],
    )
    def test_get_engine(self, name, cls):
        assert isinstance(get_engine(name), cls)

    def test_unknown_engine(self):
        with pytest.raises(UnknownEngineError, match="Unknown engine 'ini'"):
            get_engine("ini")

    def test_unknown_engine_is_key_error(self):
        with pytest.raises(KeyError):
            Matter(engine="ini")

    def test_register_custom_engine(self, clean_registry):
        register_engine("kv", KeyValue)
        result = Matter(engine="kv").parse("---\ntitle = Home\n---\nbody")
        assert result.metadata == {"title": "Home"}

    def test_register_duplicate_rejected(self, clean_registry):
        with pytest.raises(ValueError, match="already registered"):
            register_engine("yaml", KeyValue)

    def test_register_replace(self, clean_registry):
        register_engine("yaml", KeyValue, replace=True)
        assert isinstance(get_engine("yaml"), KeyValue)

    def test_register_non_engine_rejected(self, clean_registry):
        with pytest.raises(TypeError):
            register_engine("dict", dict)

    def test_register_empty_name_rejected(self, clean_registry):
        with pytest.raises(ValueError):
            register_engine("  ", KeyValue)


class TestResolveEngine:
    """Matter accepts engine names, classes and instances."""

    def test_instance_returned_as_is(self):
        engine = TOML()
        assert resolve_engine(engine) is engine

    def test_class_instantiated(self):
        assert isinstance(resolve_engine(JSON), JSON)

    def test_bad_type(self):
        with pytest.raises(TypeError):
            resolve_engine(42)

    def test_matter_engine_fixed(self):
        matter = Matter(KeyValue)
        assert isinstance(matter.engine, KeyValue)
        with pytest.raises(AttributeError):
            matter.engine = YAML()

    def test_custom_engine_failure_swallowed(self):
        result = Matter(KeyValue).parse("---\nno separator\n---\nbody")
        assert result.metadata is None
        assert result.raw_matter == "no separator"

    def test_contract_violation_propagates(self):
        with pytest.raises(RuntimeError, match="engine bug"):
            Matter(Broken).parse("---\na: 1\n---\nbody")

    def test_repr(self):
        assert repr(Matter("toml", fence="+++")) == (
            "Matter(engine=TOML(), fence='+++', excerpt_fence=None)"
        )
