from __future__ import annotations


class GohereError(Exception):
    """Base class for failures that abort a scaffolding run."""


class MissingToolError(GohereError):
    """A required external CLI is not on PATH."""


class ConfigError(GohereError):
    """The settings file could not be read or validated."""


class ExecutionError(GohereError):
    def __init__(self, action, returncode: int | None = None, reason: str = "") -> None:
        self.action = action
        self.returncode = returncode
        detail = reason or (f"exit status {returncode}" if returncode is not None else "failed")
        super().__init__(f"Action failed ({detail}): {action.describe()}")
