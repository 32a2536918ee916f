"""
Ошибки шаблонизатора.

TemplateError и его наследники описывают ситуации, которые исправляет
пользователь: нет значения для плейсхолдера, контекст не сериализуется,
файл контекста битый. CLI печатает их как короткое сообщение без трейсбека.
"""

from __future__ import annotations


class TemplateError(Exception):
    """
    Base class for all user-facing errors in text-placeholder.

    These errors indicate problems that the user can fix:
    missing context values, unserializable context objects,
    malformed context files.
    """
    pass


class PlaceholderError(TemplateError):
    """A placeholder had no resolvable value during a strict fill."""

    def __init__(self, name: str):
        self.name = name
        self.message = f"missing value for placeholder named '{name}'."
        super().__init__(f"Error while replacing placeholder. Reason: {self.message}")


class SerializationError(TemplateError):
    """The struct context could not be converted to a structured value."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(
            f"Error while converting the context to a structured value. Error: {cause}"
        )


class ContextLoadError(TemplateError):
    """Context file is missing or does not describe a flat mapping."""
    pass


__all__ = ["TemplateError", "PlaceholderError", "SerializationError", "ContextLoadError"]
