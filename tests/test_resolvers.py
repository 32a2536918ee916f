"""
Тесты для стратегий разрешения плейсхолдеров.
"""

from dataclasses import dataclass

import pytest
from pydantic import BaseModel, Field

from text_placeholder import Template
from text_placeholder.errors import SerializationError
from text_placeholder.resolvers import MappingResolver, Resolver, StructResolver, StructView


@dataclass
class Context:
    name: str
    count: int


class TestMappingResolver:

    def test_lenient_missing_is_empty(self):
        resolver = MappingResolver({"a": "1"})
        assert resolver("a") == "1"
        assert resolver("b") == ""

    def test_strict_missing_is_none(self):
        resolver = MappingResolver({"a": "1"}, strict=True)
        assert resolver("a") == "1"
        assert resolver("b") is None

    def test_implements_protocol(self):
        assert isinstance(MappingResolver({}), Resolver)
        assert isinstance(StructResolver(StructView({})), Resolver)


class TestStructView:

    def test_serializes_dataclass(self):
        view = StructView.from_value(Context(name="x", count=3))
        assert view.data == {"name": "x", "count": 3}
        assert view.get("name") == "x"
        assert view.get("count") is None
        assert view.get("missing") is None

    def test_non_mapping_data(self):
        view = StructView.from_value("just a string")
        assert view.get("just a string") is None

    def test_unserializable_value(self):
        class Opaque:
            pass

        with pytest.raises(SerializationError):
            StructView.from_value({"key": Opaque()})


class Account(BaseModel):
    first_name: str = Field(serialization_alias="firstName")


class TestStructResolver:

    def test_serializes_once(self, monkeypatch):
        calls = []
        original = StructView.from_value.__func__

        def counting(cls, value):
            calls.append(value)
            return original(cls, value)

        monkeypatch.setattr(StructView, "from_value", classmethod(counting))

        Template("{{name}} {{name}} {{count}}").fill_struct(Context(name="n", count=1))
        assert len(calls) == 1

    def test_fields_resolve_by_serialized_name(self):
        resolver = StructResolver.from_value(Account(first_name="A"), strict=True)
        assert resolver("firstName") == "A"
        assert resolver("first_name") is None

    def test_lenient_and_strict(self):
        view = StructView({"name": "x", "count": 1})
        assert StructResolver(view)("count") == ""
        assert StructResolver(view, strict=True)("count") is None
        assert StructResolver(view, strict=True)("name") == "x"
