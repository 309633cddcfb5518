import subprocess

import pytest


class FakeRun:
    """Stands in for subprocess.run and records every argv it receives."""

    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on

    def __call__(self, argv, **kwargs):
        self.calls.append((list(argv), kwargs.get("cwd")))
        rc = 1 if self.fail_on and argv[: len(self.fail_on)] == self.fail_on else 0
        if rc and kwargs.get("check"):
            raise subprocess.CalledProcessError(rc, argv)
        return subprocess.CompletedProcess(argv, rc, "", "")


@pytest.fixture
def fake_run(monkeypatch):
    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("GOHERE_CONFIG", str(tmp_path / "no-such-config.yml"))
