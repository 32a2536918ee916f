"""
Шаблон с именованными плейсхолдерами.

Шаблон токенизируется один раз при создании и дальше не меняется.
Все варианты заполнения сводятся к fill_with с подходящей стратегией
разрешения из модуля resolvers.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Tuple

from .errors import PlaceholderError
from .lexer import DEFAULT_END, DEFAULT_START, tokenize_template
from .resolvers import MappingResolver, ResolverFn, StructResolver
from .tokens import Token, TokenType

logger = logging.getLogger(__name__)


class Template:
    """
    Неизменяемый шаблон.

    Хранит упорядоченный список токенов, полученный из текста
    и пары разделителей. Для повторного разбора нужно создать новый шаблон.
    """

    def __init__(self, text: str, start: str = DEFAULT_START, end: str = DEFAULT_END):
        """
        Создаёт шаблон и сразу токенизирует текст.

        Args:
            text: Текст шаблона
            start: Открывающий разделитель плейсхолдера
            end: Закрывающий разделитель плейсхолдера

        Raises:
            ValueError: Если один из разделителей пуст
        """
        self._text = text
        self._start = start
        self._end = end
        self._tokens: Tuple[Token, ...] = tuple(tokenize_template(text, start, end))

    @classmethod
    def new(cls, text: str) -> "Template":
        """Шаблон с разделителями в стиле handlebars: {{name}}."""
        return cls(text)

    @classmethod
    def new_with_placeholder(cls, text: str, start: str, end: str) -> "Template":
        """Шаблон с произвольными разделителями, например [name]."""
        return cls(text, start, end)

    @property
    def text(self) -> str:
        return self._text

    @property
    def start(self) -> str:
        return self._start

    @property
    def end(self) -> str:
        return self._end

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    def placeholder_names(self) -> List[str]:
        """Имена плейсхолдеров в порядке появления, с повторами."""
        return [t.value for t in self._tokens if t.is_placeholder]

    # ---- Заполнение ----

    def fill_with(self, replacements: ResolverFn) -> str:
        """
        Заполняет шаблон значениями, которые возвращает функция.

        Самая общая форма заполнения: остальные fill_* реализованы через неё.
        Функция вызывается ровно один раз на каждый плейсхолдер, слева направо,
        и может иметь состояние. Для текстовых фрагментов она не вызывается.

        Args:
            replacements: Функция имя → значение или None

        Returns:
            Заполненный текст

        Raises:
            PlaceholderError: Если функция вернула None; частичный
                результат отбрасывается
        """
        parts: List[str] = []

        for token in self._tokens:
            if token.type is TokenType.TEXT:
                parts.append(token.value)
                continue

            value = replacements(token.value)
            if value is None:
                logger.debug(f"No value for placeholder '{token.value}' at {token.position}")
                raise PlaceholderError(token.value)
            parts.append(value)

        return "".join(parts)

    def fill(self, replacements: Mapping[str, str]) -> str:
        """
        Заполняет шаблон значениями из отображения.

        Плейсхолдеры без значения заменяются пустой строкой.
        Версия с ошибкой на отсутствующее значение: fill_strict.
        """
        return self.fill_with(MappingResolver(replacements))

    def fill_strict(self, replacements: Mapping[str, str]) -> str:
        """
        Заполняет шаблон значениями из отображения.

        Raises:
            PlaceholderError: Для первого плейсхолдера без значения
        """
        return self.fill_with(MappingResolver(replacements, strict=True))

    def fill_struct(self, replacements: Any) -> str:
        """
        Заполняет шаблон строковыми полями структуры.

        Структура (dataclass, pydantic-модель, словарь) сериализуется
        один раз на вызов. Отсутствующие и нестроковые поля заменяются
        пустой строкой.

        Raises:
            SerializationError: Если структуру не удалось сериализовать
        """
        return self.fill_with(StructResolver.from_value(replacements))

    def fill_struct_strict(self, replacements: Any) -> str:
        """
        Заполняет шаблон строковыми полями структуры.

        Raises:
            SerializationError: Если структуру не удалось сериализовать
            PlaceholderError: Для первого отсутствующего или нестрокового поля
        """
        return self.fill_with(StructResolver.from_value(replacements, strict=True))

    def __repr__(self) -> str:
        return f"Template({self._text!r}, start={self._start!r}, end={self._end!r})"


__all__ = ["Template"]
