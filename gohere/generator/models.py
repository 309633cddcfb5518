from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

PROJECT_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9._-]*$"
# no control characters; they would not print literally in log lines
PRINTABLE_PATTERN = r"^[^\x00-\x1f\x7f]+$"


class Configuration(BaseModel):
    """Parsed command line; built once by the parser, read-only afterwards."""

    model_config = ConfigDict(frozen=True)

    project: str = Field(..., min_length=1, pattern=PROJECT_PATTERN)
    user: str = Field(..., min_length=1, pattern=PRINTABLE_PATTERN)
    dry_run: bool = False
    template_only: bool = False
