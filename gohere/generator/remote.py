"""GitHub repository creation and the initial push."""
from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Optional

from ..utils.console import info, warn
from ..utils.settings import Settings
from .dispatch import Command, Dispatcher
from .errors import MissingToolError
from .models import Configuration

SSH_PROBE_TIMEOUT = 30


def check_remote_auth() -> Optional[str]:
    """Probe GitHub SSH auth; only ever logs, never fails the caller."""
    try:
        r = subprocess.run(
            ["ssh", "-T", "git@github.com"],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            timeout=SSH_PROBE_TIMEOUT,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        warn(f"SSH check against github.com failed: {exc}")
        return None
    # github answers on stderr and exits 1 even when the key is accepted
    first = (r.stderr or r.stdout).strip().split(",")[0]
    if first:
        info(first)
    return first or None


def require_tool(name: str, hint: str) -> str:
    path = shutil.which(name)
    if path is None:
        raise MissingToolError(hint)
    return path


def create_remote(root: Path, config: Configuration, settings: Settings, dispatcher: Dispatcher) -> None:
    require_tool("gh", "GitHub CLI (gh) is not installed. Please install it first.")
    dispatcher.dispatch(Command("git", ("init", "--initial-branch", settings.branch), cwd=root))
    dispatcher.dispatch(Command(
        "gh",
        ("repo", "create", f"{config.user}/{config.project}", f"--{settings.visibility}",
         "--source", ".", "--remote", "origin"),
        cwd=root,
    ))


def publish(root: Path, settings: Settings, dispatcher: Dispatcher) -> None:
    dispatcher.dispatch(Command("git", ("add", "."), cwd=root))
    dispatcher.dispatch(Command("git", ("commit", "-m", settings.commit_message), cwd=root))
    dispatcher.dispatch(Command("git", ("push", "-u", "origin", settings.branch), cwd=root))
