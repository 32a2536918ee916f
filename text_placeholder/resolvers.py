"""
Стратегии разрешения плейсхолдеров.

Каждая стратегия отвечает на один вопрос: какое значение подставить
вместо плейсхолдера с данным именем. None означает, что значения нет,
и решение о дальнейших действиях принимает шаблон.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Protocol, runtime_checkable

from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from .errors import SerializationError

logger = logging.getLogger(__name__)

ResolverFn = Callable[[str], Optional[str]]

_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


@runtime_checkable
class Resolver(Protocol):
    """
    Протокол стратегии разрешения плейсхолдеров.

    Экземпляр, реализующий протокол, вызывается шаблоном ровно один раз
    на каждый плейсхолдер, слева направо.
    """

    def __call__(self, name: str) -> Optional[str]:
        """
        Возвращает значение для плейсхолдера.

        Args:
            name: Имя плейсхолдера без разделителей и окружающих пробелов

        Returns:
            Подставляемая строка или None, если значения нет
        """
        ...


class MappingResolver:
    """
    Поиск значения в отображении имя → строка.

    В нестрогом режиме отсутствующий ключ превращается в пустую строку.
    """

    def __init__(self, replacements: Mapping[str, str], strict: bool = False):
        self.replacements = replacements
        self.strict = strict

    def __call__(self, name: str) -> Optional[str]:
        value = self.replacements.get(name)
        if value is None and not self.strict:
            return ""
        return value


class StructView:
    """
    Сериализованное представление структурированного контекста.

    Хранит результат сериализации верхнего уровня и отдаёт только
    строковые поля. Числа, булевы значения, null и вложенные объекты
    считаются отсутствующими.
    """

    def __init__(self, data: Any):
        self.data = data

    @classmethod
    def from_value(cls, value: Any) -> "StructView":
        """
        Сериализует значение в JSON-совместимую структуру.

        Поддерживаются dataclass-ы, pydantic-модели, словари и всё,
        что умеет сериализовать pydantic. Поля берутся под именами
        сериализации (serialization_alias), а не под именами атрибутов.

        Raises:
            SerializationError: Если значение не сериализуется
        """
        try:
            data = _ANY_ADAPTER.dump_python(value, mode="json", by_alias=True)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            logger.debug(f"Failed to serialize context of type {type(value).__name__}: {e}")
            raise SerializationError(e) from e
        return cls(data)

    def get(self, name: str) -> Optional[str]:
        if not isinstance(self.data, dict):
            return None
        value = self.data.get(name)
        return value if isinstance(value, str) else None


class StructResolver:
    """Поиск значения среди строковых полей сериализованной структуры."""

    def __init__(self, view: StructView, strict: bool = False):
        self.view = view
        self.strict = strict

    @classmethod
    def from_value(cls, value: Any, strict: bool = False) -> "StructResolver":
        return cls(StructView.from_value(value), strict=strict)

    def __call__(self, name: str) -> Optional[str]:
        value = self.view.get(name)
        if value is None and not self.strict:
            return ""
        return value


__all__ = [
    "Resolver",
    "ResolverFn",
    "MappingResolver",
    "StructView",
    "StructResolver",
]
