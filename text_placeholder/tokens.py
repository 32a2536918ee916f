"""
Лексические типы шаблонизатора.

Определяет типы токенов, на которые лексер разбивает исходный текст:
обычный текст и именованные плейсхолдеры.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenType(enum.Enum):
    """Типы токенов в шаблоне."""
    TEXT = "TEXT"
    PLACEHOLDER = "PLACEHOLDER"


@dataclass(frozen=True)
class Token:
    """
    Токен с позиционной информацией.

    Для TEXT-токенов value содержит фрагмент исходного текста как есть.
    Для PLACEHOLDER-токенов value содержит имя плейсхолдера без
    окружающих пробелов и без разделителей.
    """
    type: TokenType
    value: str
    position: int        # Позиция начала сырого фрагмента в исходном тексте

    @property
    def is_placeholder(self) -> bool:
        return self.type is TokenType.PLACEHOLDER

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.position})"


__all__ = ["TokenType", "Token"]
