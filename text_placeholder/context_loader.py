from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable

from ruamel.yaml import YAML
from ruamel.yaml.constructor import SafeConstructor
from ruamel.yaml.error import YAMLError

from .errors import ContextLoadError

# --------------------------------------------------------------------------- #
# YAML loader (JSON тоже читается: это подмножество YAML)
# --------------------------------------------------------------------------- #
class _SourceTextConstructor(SafeConstructor):
    """Безопасный конструктор, оставляющий скаляры в исходной записи (кроме null)."""


for _tag in ("int", "float", "bool", "timestamp"):
    _SourceTextConstructor.add_constructor(
        f"tag:yaml.org,2002:{_tag}", SafeConstructor.construct_yaml_str
    )

_yaml = YAML(typ="safe", pure=True)
_yaml.Constructor = _SourceTextConstructor


# --------------------------------------------------------------------------- #
# HELPERS
# --------------------------------------------------------------------------- #
def _to_str(key: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ContextLoadError(f"Context value for '{key}' must be a scalar, got {type(value).__name__}")
    return str(value)


# --------------------------------------------------------------------------- #
# PUBLIC API
# --------------------------------------------------------------------------- #
def load_context(path: Path) -> Dict[str, str]:
    """
    Загрузить контекст подстановки из YAML/JSON-файла.

    • Пустой файл даёт пустой контекст.
    • Верхний уровень обязан быть отображением.
    • Скаляры берутся в исходной записи: 1.10 остаётся "1.10", 0x10 остаётся "0x10".
    • null и пустое значение становятся пустой строкой.
    • Вложенные коллекции запрещены: шаблонизатор плоский.
    """
    if not path.is_file():
        raise ContextLoadError(f"Context file not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            raw = _yaml.load(f)
    except (YAMLError, UnicodeDecodeError) as e:
        raise ContextLoadError(f"Failed to parse context file {path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ContextLoadError(
            f"Context file {path} must contain a mapping at the top level, got {type(raw).__name__}"
        )

    return {str(k): _to_str(str(k), v) for k, v in raw.items()}


def parse_assignments(pairs: Iterable[str] | None) -> Dict[str, str]:
    """Парсит список 'KEY=VALUE' в словарь; значение может содержать '='."""
    result: Dict[str, str] = {}
    if not pairs:
        return result

    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"Invalid assignment '{pair}'. Expected 'KEY=VALUE'")
        key, value = pair.split("=", 1)
        result[key.strip()] = value

    return result


__all__ = ["load_context", "parse_assignments"]
