from pathlib import Path

import pytest

from gohere.generator.errors import ConfigError
from gohere.utils.settings import DEFAULT_DEV_TOOLS, Settings, load_settings


def test_missing_file_gives_defaults(tmp_path: Path):
    s = load_settings(tmp_path / "absent.yml")
    assert s == Settings()
    assert s.dev_tools == DEFAULT_DEV_TOOLS
    assert (s.module_host, s.visibility, s.branch) == ("github.com", "public", "main")


def test_env_var_selects_file(tmp_path: Path, monkeypatch):
    cfg = tmp_path / "gohere.yml"
    cfg.write_text("visibility: private\nbranch: trunk\ndev_tools: []\n")
    monkeypatch.setenv("GOHERE_CONFIG", str(cfg))
    s = load_settings()
    assert s.visibility == "private"
    assert s.branch == "trunk"
    assert s.dev_tools == []


@pytest.mark.parametrize("body", ["visibility: secret\n", "colour: blue\n", "- a\n- b\n", "key: [unclosed\n"])
def test_bad_settings_raise(tmp_path: Path, body):
    cfg = tmp_path / "gohere.yml"
    cfg.write_text(body)
    with pytest.raises(ConfigError):
        load_settings(cfg)


def test_bad_settings_fail_main(tmp_path: Path, monkeypatch, capsys, fake_run):
    from gohere.generator.cli import main

    cfg = tmp_path / "gohere.yml"
    cfg.write_text("visibility: secret\n")
    monkeypatch.setenv("GOHERE_CONFIG", str(cfg))
    monkeypatch.chdir(tmp_path)
    assert main(["-t", "-p", "demo", "-u", "alice"]) == 1
    assert "Invalid settings" in capsys.readouterr().err
    assert fake_run.calls == []


def test_tab_in_commit_message_is_invalid(tmp_path: Path):
    cfg = tmp_path / "gohere.yml"
    cfg.write_text('commit_message: "first\\tcommit"\n')
    with pytest.raises(ConfigError):
        load_settings(cfg)
