from fastapi.testclient import TestClient

from gohere.api.app import app
from gohere.generator import remote

client = TestClient(app)


def test_layout():
    r = client.get("/layout", params={"project": "demo"})
    assert r.status_code == 200
    body = r.json()
    assert body["directories"][0] == "cmd/demo"
    assert body["files"] == ["cmd/demo/main.go", "Makefile", ".gitignore"]


def test_layout_rejects_bad_name():
    assert client.get("/layout", params={"project": "../x"}).status_code == 422


def test_plan_template_only(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    r = client.post("/plan", json={"project": "demo", "user": "alice", "template_only": True})
    assert r.status_code == 200
    actions = r.json()["actions"]
    assert actions[0] == "mkdir -p demo"
    assert "go mod init github.com/alice/demo" in actions
    assert not any(a.startswith("git ") or a.startswith("gh ") for a in actions)
    assert list(tmp_path.iterdir()) == []


def test_plan_with_remote(monkeypatch):
    monkeypatch.setattr(remote.shutil, "which", lambda name: "/usr/bin/gh")
    r = client.post("/plan", json={"project": "demo", "user": "alice"})
    assert r.json()["actions"][-1] == "git push -u origin main"


def test_plan_without_gh(monkeypatch):
    monkeypatch.setattr(remote.shutil, "which", lambda name: None)
    r = client.post("/plan", json={"project": "demo", "user": "alice"})
    assert r.status_code == 412


def test_plan_validation():
    assert client.post("/plan", json={"project": "", "user": "alice"}).status_code == 422


def test_plan_keeps_progress_lines_off_stdout(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    r = client.post("/plan", json={"project": "demo", "user": "alice", "template_only": True})
    assert r.json()["notes"] == [
        "Setting up Go project: github.com/alice/demo",
        "Running in dry-run mode - no changes will be made",
        "Project setup complete! 🎉",
    ]
    assert capsys.readouterr().out == ""


def test_plan_rejects_control_characters():
    assert client.post("/plan", json={"project": "demo", "user": "a\tb"}).status_code == 422
