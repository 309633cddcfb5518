"""Timestamped, labeled terminal output plus small time/uid helpers.

Every line has the shape ``<UTC ISO timestamp> [<LABEL>] <body>``. INFO goes
to stdout, WARN and ERROR to stderr. Lines are built as ``rich.text.Text`` so
action descriptions are printed literally and never parsed as markup.
"""
from __future__ import annotations

import secrets
from datetime import datetime, timezone

from rich.console import Console
from rich.text import Text

out = Console(highlight=False, soft_wrap=True)
err = Console(stderr=True, highlight=False, soft_wrap=True)


def get_utc(signature: str = "%Y%m%dT%H%M") -> str:
    return datetime.now(timezone.utc).strftime(signature)


def get_uid(length: int = 6) -> str:
    return secrets.token_hex((length + 1) // 2)[:length]


def strip_color(text: str) -> str:
    return Text.from_ansi(text.replace("\r", "")).plain


def message(title: str = "INFO", body: str = "¯\\_(ツ)_/¯", *, style: str = "", stderr: bool = False) -> None:
    stamp = get_utc("%Y-%m-%dT%H:%M:%S+00:00")
    line = Text.assemble(
        f"{stamp} [",
        (title, f"bold {style}".strip()),
        "] ",
        (body, "bold"),
    )
    (err if stderr else out).print(line)


def info(body: str = "Sometime interesting happened. ¯\\_(ツ)_/¯") -> None:
    message("INFO", body, style="green")


def warn(body: str = "Something is weird. ¯\\_(ツ)_/¯") -> None:
    message("WARN", body, style="yellow", stderr=True)


def error(body: str = "We messed up. ¯\\_(ツ)_/¯") -> None:
    message("ERROR", body, style="red", stderr=True)
