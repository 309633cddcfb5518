from pathlib import Path
from typing import List

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from ..generator.dispatch import Dispatcher
from ..generator.errors import ConfigError, MissingToolError
from ..generator.models import PRINTABLE_PATTERN, PROJECT_PATTERN, Configuration
from ..generator.scaffold import directory_plan, generated_files, run
from ..utils.settings import load_settings

app = FastAPI(title="gohere API", version="0.1.0")


class PlanReq(BaseModel):
    project: str = Field(..., min_length=1, pattern=PROJECT_PATTERN)
    user: str = Field(..., min_length=1, pattern=PRINTABLE_PATTERN)
    template_only: bool = False


class PlanRecorder(Dispatcher):
    """Dry-run dispatcher that keeps each description instead of logging it."""

    def __init__(self) -> None:
        super().__init__(dry_run=True, report=lambda _line: None)
        self.actions: List[str] = []

    def dispatch(self, action):
        self.actions.append(action.describe())
        return super().dispatch(action)


@app.get("/layout")
def layout(project: str = Query(..., min_length=1, pattern=PROJECT_PATTERN)):
    return {
        "directories": [p.as_posix() for p in directory_plan(project)],
        "files": [p.as_posix() for p, _ in generated_files(project)],
    }


@app.post("/plan")
def plan(req: PlanReq):
    config = Configuration(project=req.project, user=req.user, dry_run=True, template_only=req.template_only)
    recorder = PlanRecorder()
    notes: List[str] = []
    try:
        run(config, load_settings(), recorder, Path("."), report=notes.append)
    except MissingToolError as exc:
        raise HTTPException(status_code=412, detail=str(exc))
    except ConfigError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return {"project": config.project, "actions": recorder.actions, "notes": notes}
