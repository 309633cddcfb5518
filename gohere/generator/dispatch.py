"""Actions and the dispatcher that performs or announces them.

Nothing outside this module touches the filesystem or spawns a process on
behalf of a scaffolding run. Callers build an action and hand it to
``Dispatcher.dispatch``; in dry-run mode the action is only described.
"""
from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from ..utils.console import info
from .errors import ExecutionError


@dataclass(frozen=True)
class Command:
    program: str
    args: Tuple[str, ...] = ()
    cwd: Optional[Path] = None

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def describe(self) -> str:
        return shlex.join(self.argv)


@dataclass(frozen=True)
class MakeDir:
    path: Path

    def describe(self) -> str:
        return shlex.join(["mkdir", "-p", str(self.path)])


@dataclass(frozen=True)
class WriteFile:
    path: Path
    content: str = field(repr=False)

    def describe(self) -> str:
        return f"write {shlex.quote(str(self.path))} ({len(self.content.encode('utf-8'))} bytes)"


Action = Union[Command, MakeDir, WriteFile]


@dataclass(frozen=True)
class ActionResult:
    action: Action
    performed: bool
    returncode: Optional[int] = None


class Dispatcher:
    def __init__(self, dry_run: bool, report: Callable[[str], None] = info) -> None:
        self.dry_run = dry_run
        self.report = report

    def dispatch(self, action: Action) -> ActionResult:
        if self.dry_run:
            self.report(f"[DRY RUN] Would execute: {action.describe()}")
            return ActionResult(action, performed=False)
        self.report(f"→ {action.describe()}")
        if isinstance(action, Command):
            return self._run(action)
        try:
            if isinstance(action, MakeDir):
                action.path.mkdir(parents=True, exist_ok=True)
            elif isinstance(action, WriteFile):
                action.path.parent.mkdir(parents=True, exist_ok=True)
                action.path.write_text(action.content, encoding="utf-8")
            else:
                raise TypeError(f"Unsupported action: {action!r}")
        except OSError as exc:
            raise ExecutionError(action, reason=str(exc)) from exc
        return ActionResult(action, performed=True)

    def _run(self, cmd: Command) -> ActionResult:
        try:
            r = subprocess.run(cmd.argv, check=True, cwd=str(cmd.cwd) if cmd.cwd else None)
        except subprocess.CalledProcessError as exc:
            raise ExecutionError(cmd, returncode=exc.returncode) from exc
        except OSError as exc:
            raise ExecutionError(cmd, reason=str(exc)) from exc
        return ActionResult(cmd, performed=True, returncode=r.returncode)
