from __future__ import annotations

from importlib import metadata


def tool_version() -> str:
    """Версия установленного дистрибутива text-placeholder или 0.0.0 вне установки."""
    try:
        return metadata.version("text-placeholder")
    except metadata.PackageNotFoundError:
        return "0.0.0"

__all__ = ["tool_version"]
