"""
Минимальный шаблонизатор с именованными плейсхолдерами.

Плейсхолдеры по умолчанию записываются в синтаксисе handlebars ({{name}}),
но разделители можно переопределить. Значения берутся из словаря,
функции или сериализуемой структуры.
"""

from __future__ import annotations

from .errors import ContextLoadError, PlaceholderError, SerializationError, TemplateError
from .lexer import DEFAULT_END, DEFAULT_START, PlaceholderLexer, tokenize_template
from .resolvers import MappingResolver, Resolver, ResolverFn, StructResolver, StructView
from .template import Template
from .tokens import Token, TokenType

__all__ = [
    "Template",
    "Token",
    "TokenType",
    "PlaceholderLexer",
    "tokenize_template",
    "DEFAULT_START",
    "DEFAULT_END",
    "Resolver",
    "ResolverFn",
    "MappingResolver",
    "StructResolver",
    "StructView",
    "TemplateError",
    "PlaceholderError",
    "SerializationError",
    "ContextLoadError",
]
