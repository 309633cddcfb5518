"""Starter file contents, rendered from in-memory Jinja templates.

Each ``render_*`` function depends only on the project name.
"""
from __future__ import annotations

from jinja2 import Environment, StrictUndefined

MAKEFILE = """\
.PHONY: build test lint run clean

build:
\tgo build -v ./cmd/{{ project }}

test:
\tgo test -v -race ./...

lint:
\tgolangci-lint run

run:
\tgo run cmd/{{ project }}/main.go

clean:
\trm -f {{ project }}
\tgo clean -cache
"""

MAIN_GO = """\
package main

import (
\t"fmt"
\t"log"
)

func main() {
\tlog.Println("Starting application...")
\tfmt.Println("Hello from {{ project }}!")
}
"""

GITIGNORE = """\
# Binaries and build
bin/
{{ project }}

# Dependencies
vendor/

# IDE
.idea/
.vscode/
*.swp

# Logs
*.log

# Environment variables
.env
"""

env = Environment(undefined=StrictUndefined, keep_trailing_newline=True, autoescape=False)


def _render(source: str, project: str) -> str:
    return env.from_string(source).render(project=project)


def render_makefile(project: str) -> str:
    return _render(MAKEFILE, project)


def render_main_go(project: str) -> str:
    return _render(MAIN_GO, project)


def render_gitignore(project: str) -> str:
    return _render(GITIGNORE, project)
