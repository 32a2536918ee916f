"""
Тесты загрузки контекста подстановки из YAML/JSON-файлов.
"""

import textwrap

import pytest

from text_placeholder.context_loader import load_context, parse_assignments
from text_placeholder.errors import ContextLoadError

from .conftest import write


class TestLoadContext:

    def test_yaml_mapping(self, tmp_path):
        path = write(tmp_path / "ctx.yaml", textwrap.dedent("""
            name: World
            count: 3
            enabled: true
            nothing: null
        """))
        assert load_context(path) == {
            "name": "World",
            "count": "3",
            "enabled": "true",
            "nothing": "",
        }

    def test_scalars_keep_source_text(self, tmp_path):
        path = write(tmp_path / "ctx.yaml", textwrap.dedent("""
            version: 1.10
            hex: 0x10
            stamp: 2024-01-01T10:00:00
            flag: True
            tilde: ~
            empty:
        """))
        assert load_context(path) == {
            "version": "1.10",
            "hex": "0x10",
            "stamp": "2024-01-01T10:00:00",
            "flag": "True",
            "tilde": "",
            "empty": "",
        }

    def test_json_mapping(self, tmp_path):
        path = write(tmp_path / "ctx.json", '{"first": "one", "second": 2}')
        assert load_context(path) == {"first": "one", "second": "2"}

    def test_empty_file(self, tmp_path):
        path = write(tmp_path / "ctx.yaml", "")
        assert load_context(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ContextLoadError, match="not found"):
            load_context(tmp_path / "absent.yaml")

    def test_top_level_must_be_mapping(self, tmp_path):
        path = write(tmp_path / "ctx.yaml", "- a\n- b\n")
        with pytest.raises(ContextLoadError, match="mapping"):
            load_context(path)

    def test_nested_values_rejected(self, tmp_path):
        path = write(tmp_path / "ctx.yaml", "outer:\n  inner: x\n")
        with pytest.raises(ContextLoadError, match="'outer'"):
            load_context(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "ctx.yaml"
        path.write_bytes(b"a: \xff\xfe\n")
        with pytest.raises(ContextLoadError, match="Failed to parse"):
            load_context(path)

    def test_invalid_yaml(self, tmp_path):
        path = write(tmp_path / "ctx.yaml", "key: [unclosed\n")
        with pytest.raises(ContextLoadError, match="Failed to parse"):
            load_context(path)


class TestParseAssignments:

    def test_none(self):
        assert parse_assignments(None) == {}

    def test_pairs(self):
        assert parse_assignments(["a=1", " b =x=y", "c="]) == {"a": "1", "b": "x=y", "c": ""}

    def test_invalid_pair(self):
        with pytest.raises(ValueError, match="KEY=VALUE"):
            parse_assignments(["novalue"])
