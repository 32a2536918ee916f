from pathlib import Path

import pytest


def write(p: Path, text: str) -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8", newline="\n")
    return p


@pytest.fixture
def tpl_file(tmp_path: Path) -> Path:
    """Файл шаблона с двумя плейсхолдерами, один из которых повторяется."""
    return write(tmp_path / "greeting.txt", "Hello {{ name }}, {{greeting}} {{name}}!\n")


@pytest.fixture(autouse=True)
def _no_debug_env(monkeypatch):
    # CLI включает DEBUG-логирование по переменной окружения
    monkeypatch.delenv("TEXTPH_DEBUG", raising=False)
