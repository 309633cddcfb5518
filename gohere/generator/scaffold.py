"""Project layout and the fixed scaffolding sequence."""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Tuple

from ..utils.console import info
from ..utils.settings import Settings
from .content import render_gitignore, render_main_go, render_makefile
from .dispatch import Command, Dispatcher, MakeDir, WriteFile
from .models import Configuration
from .remote import create_remote, publish


def directory_plan(project: str) -> Tuple[Path, ...]:
    return (
        Path("cmd", project),
        Path("internal/app"),
        Path("internal/pkg/config"),
        Path("internal/pkg/database"),
        Path("internal/pkg/server"),
        Path("pkg/models"),
        Path("pkg/utils"),
        Path("api/v1"),
        Path("docs"),
        Path("test/integration"),
        Path("test/unit"),
    )


def generated_files(project: str) -> Tuple[Tuple[Path, str], ...]:
    """Relative path and content of each starter file, in write order."""
    return (
        (Path("cmd", project, "main.go"), render_main_go(project)),
        (Path("Makefile"), render_makefile(project)),
        (Path(".gitignore"), render_gitignore(project)),
    )


def module_path(config: Configuration, settings: Settings) -> str:
    return f"{settings.module_host}/{config.user}/{config.project}"


def build_structure(root: Path, config: Configuration, dispatcher: Dispatcher) -> None:
    for rel in directory_plan(config.project):
        dispatcher.dispatch(MakeDir(root / rel))
    for rel, content in generated_files(config.project):
        dispatcher.dispatch(WriteFile(root / rel, content))


def init_module(root: Path, config: Configuration, settings: Settings, dispatcher: Dispatcher) -> None:
    dispatcher.dispatch(Command("go", ("mod", "init", module_path(config, settings)), cwd=root))
    dispatcher.dispatch(Command("go", ("mod", "tidy"), cwd=root))


def install_dev_tools(root: Path, settings: Settings, dispatcher: Dispatcher) -> None:
    for tool in settings.dev_tools:
        dispatcher.dispatch(Command("go", ("install", tool), cwd=root))


def run(
    config: Configuration,
    settings: Settings,
    dispatcher: Dispatcher,
    workdir: Path,
    report: Callable[[str], None] = info,
) -> Path:
    """Scaffold ``workdir/<project>``; the first failing action aborts the run.

    ``report`` receives the progress lines that are not actions.
    """
    report(f"Setting up Go project: {module_path(config, settings)}")
    if config.dry_run:
        report("Running in dry-run mode - no changes will be made")

    root = Path(workdir) / config.project
    dispatcher.dispatch(MakeDir(root))
    build_structure(root, config, dispatcher)
    init_module(root, config, settings, dispatcher)
    install_dev_tools(root, settings, dispatcher)

    if not config.template_only:
        create_remote(root, config, settings, dispatcher)
        publish(root, settings, dispatcher)

    report("Project setup complete! 🎉")
    return root
