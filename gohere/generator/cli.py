import argparse
import sys
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError

from ..utils.console import error, warn
from ..utils.settings import load_settings
from .dispatch import Dispatcher
from .errors import GohereError
from .models import Configuration
from .remote import check_remote_auth
from .scaffold import run

USAGE = "gohere -p --project [PROJECT_NAME] -u --user [GITHUB_USER_NAME] [-d --dry-run] [-t --template-only]"


class UsageParser(argparse.ArgumentParser):
    """argparse that reports through our logger and exits 1 on bad input."""

    def error(self, message: str):
        warn(message)
        self.usage_exit()

    def usage_exit(self):
        self.print_help(sys.stderr)
        raise SystemExit(1)


def build_parser() -> UsageParser:
    p = UsageParser(
        prog="gohere",
        usage=USAGE,
        description="Bootstrap a Go backend service project.",
        allow_abbrev=False,
    )
    p.add_argument("--project", "-p", default="", help="Project name")
    p.add_argument("--user", "-u", default="", help="GitHub username")
    p.add_argument("--dry-run", "-d", action="store_true", help="Show commands without executing")
    p.add_argument("--template-only", "-t", action="store_true",
                   help="Create local structure without GitHub setup")
    return p


def parse_arguments(argv=None, probe: Optional[Callable[[], Optional[str]]] = None) -> Configuration:
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        warn(f"Unknown option: {unknown[0]}")
        parser.usage_exit()

    if not args.user:
        error("Github username is required.")
        parser.usage_exit()
    if not args.project:
        error("Project name is required.")
        parser.usage_exit()

    try:
        config = Configuration(
            project=args.project,
            user=args.user,
            dry_run=args.dry_run,
            template_only=args.template_only,
        )
    except ValidationError as exc:
        if any(e["loc"][0] == "user" for e in exc.errors()):
            error(f"Github username is invalid: {args.user!r}")
        else:
            error(f"Project name is invalid: {args.project}")
        parser.usage_exit()

    if not config.template_only:
        (probe or check_remote_auth)()
    return config


def main(argv=None) -> int:
    config = parse_arguments(argv)
    try:
        settings = load_settings()
        run(config, settings, Dispatcher(config.dry_run), Path.cwd())
    except GohereError as exc:
        error(str(exc))
        return 1
    return 0
