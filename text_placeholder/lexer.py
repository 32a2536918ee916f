"""
Лексический анализатор шаблонов с плейсхолдерами.

Разбивает исходный текст на чередующиеся TEXT и PLACEHOLDER токены,
используя заданные открывающий и закрывающий разделители.
Лексер никогда не падает на содержимом: незакрытый плейсхолдер
превращается в обычный текст.
"""

from __future__ import annotations

import enum
import logging
from typing import Iterator, List

from .tokens import Token, TokenType

logger = logging.getLogger(__name__)

DEFAULT_START = "{{"
DEFAULT_END = "}}"


class LexerState(enum.Enum):
    """Состояния автомата лексера."""
    TEXT = "TEXT"
    PLACEHOLDER = "PLACEHOLDER"


class PlaceholderLexer:
    """
    Ленивый одноразовый итератор токенов.

    Каждый вызов next() отрезает очередной фрагмент от ещё не разобранного
    остатка текста. Когда остаток пуст, итерация завершается навсегда.
    """

    def __init__(self, text: str, start: str = DEFAULT_START, end: str = DEFAULT_END):
        """
        Инициализирует лексер.

        Args:
            text: Исходный текст шаблона
            start: Открывающий разделитель плейсхолдера
            end: Закрывающий разделитель плейсхолдера

        Raises:
            ValueError: Если один из разделителей пуст
        """
        if not start or not end:
            raise ValueError("Placeholder delimiters must be non-empty strings")

        self.text = text
        self.start = start
        self.end = end

        # Неразобранный остаток хранится как смещение в исходном тексте
        self.position = 0
        self.state = LexerState.TEXT

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self.position >= len(self.text):
            raise StopIteration

        if self.state is LexerState.TEXT:
            return self._parse_text()
        return self._parse_placeholder()

    def _parse_text(self) -> Token:
        """Собирает текст до следующего открывающего разделителя."""
        begin = self.position
        index = self.text.find(self.start, begin)

        if index == -1:
            self.position = len(self.text)
            return Token(TokenType.TEXT, self.text[begin:], begin)

        self.position = index
        self.state = LexerState.PLACEHOLDER
        return Token(TokenType.TEXT, self.text[begin:index], begin)

    def _parse_placeholder(self) -> Token:
        """
        Разбирает плейсхолдер, начинающийся с открывающего разделителя.

        Закрывающий разделитель ищется во всём остатке, включая сам
        открывающий разделитель. Если он не найден, остаток целиком
        становится текстом.
        """
        begin = self.position
        self.state = LexerState.TEXT
        index = self.text.find(self.end, begin)

        if index == -1:
            self.position = len(self.text)
            logger.debug(f"Unterminated placeholder at {begin}, treating the rest as text")
            return Token(TokenType.TEXT, self.text[begin:], begin)

        # Пересекающиеся разделители дают пустое имя
        name_begin = min(begin + len(self.start), index)
        name = self.text[name_begin:index].strip(" ")
        self.position = index + len(self.end)
        return Token(TokenType.PLACEHOLDER, name, begin)


def tokenize_template(text: str, start: str = DEFAULT_START, end: str = DEFAULT_END) -> List[Token]:
    """
    Полностью токенизирует текст шаблона.

    Args:
        text: Исходный текст шаблона
        start: Открывающий разделитель
        end: Закрывающий разделитель

    Returns:
        Список токенов в порядке следования в тексте
    """
    tokens = list(PlaceholderLexer(text, start, end))
    logger.debug(f"Tokenized text of length {len(text)} into {len(tokens)} tokens")
    return tokens


__all__ = ["PlaceholderLexer", "LexerState", "tokenize_template", "DEFAULT_START", "DEFAULT_END"]
