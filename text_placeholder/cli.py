from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, Optional

from .context_loader import load_context, parse_assignments
from .errors import TemplateError
from .lexer import DEFAULT_END, DEFAULT_START
from .template import Template
from .version import tool_version

_LOG = logging.getLogger("text_placeholder")


def _setup_logging() -> None:
    level = logging.DEBUG if os.environ.get("TEXTPH_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _LOG.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="textph",
        description="Fill named placeholders in a text template",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Общие аргументы для render/names
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "template",
            help="путь к файлу шаблона или - для чтения из stdin",
        )
        sp.add_argument(
            "--start",
            default=DEFAULT_START,
            help=f"открывающий разделитель плейсхолдера (по умолчанию {DEFAULT_START!r})",
        )
        sp.add_argument(
            "--end",
            default=DEFAULT_END,
            help=f"закрывающий разделитель плейсхолдера (по умолчанию {DEFAULT_END!r})",
        )

    sp_render = sub.add_parser("render", help="Заполнить шаблон и вывести результат")
    add_common(sp_render)
    sp_render.add_argument(
        "--context",
        metavar="FILE",
        help="YAML/JSON-файл с плоским отображением имя → значение",
    )
    sp_render.add_argument(
        "--set",
        dest="assignments",
        action="append",
        metavar="KEY=VALUE",
        help="значение плейсхолдера (можно указать несколько, перекрывает --context)",
    )
    sp_render.add_argument(
        "--strict",
        action="store_true",
        help="ошибка, если для плейсхолдера нет значения",
    )

    sp_names = sub.add_parser("names", help="Список имён плейсхолдеров шаблона")
    add_common(sp_names)

    return p


def _read_template(arg: str) -> str:
    # Чтение из stdin
    if arg == "-":
        return sys.stdin.read()

    path = Path(arg)
    if not path.is_file():
        raise ValueError(f"Template file not found: {path}")
    return path.read_text(encoding="utf-8")


def _replacements(ns: argparse.Namespace) -> Dict[str, str]:
    result: Dict[str, str] = {}
    if ns.context:
        result.update(load_context(Path(ns.context)))
    result.update(parse_assignments(ns.assignments))
    return result


def main(argv: Optional[list[str]] = None) -> int:
    _setup_logging()
    ns = _build_parser().parse_args(argv)

    try:
        template = Template(_read_template(ns.template), ns.start, ns.end)

        if ns.cmd == "render":
            replacements = _replacements(ns)
            _LOG.debug("Rendering %d placeholders with %d values", len(template.placeholder_names()), len(replacements))
            if ns.strict:
                text = template.fill_strict(replacements)
            else:
                text = template.fill(replacements)
            sys.stdout.write(text)
            return 0

        if ns.cmd == "names":
            seen = dict.fromkeys(template.placeholder_names())
            for name in seen:
                sys.stdout.write(name + "\n")
            return 0

    except (TemplateError, ValueError, OSError) as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
