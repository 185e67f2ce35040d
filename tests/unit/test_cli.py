import sqlite3
import sys

import pytest

from vidtube.api.deps import get_settings
from vidtube.app_shell import cli


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("VIDTUBE_DATA_DIR", str(tmp_path))
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["vidtube", *args])
    cli.main()


def test_migrate(data_dir, monkeypatch, capsys):
    run_cli(monkeypatch, "migrate")
    assert "Applied 1 migration(s)" in capsys.readouterr().out

    run_cli(monkeypatch, "migrate")
    assert "up to date" in capsys.readouterr().out

    conn = sqlite3.connect(data_dir / "vidtube.db")
    assert conn.execute("SELECT count(*) FROM users").fetchone()[0] == 0
    conn.close()


def test_check_rules(data_dir, monkeypatch, capsys):
    run_cli(monkeypatch, "check-rules")
    assert "Rules OK (vidtube v1)" in capsys.readouterr().out


def test_check_rules_missing_file(data_dir, tmp_path, monkeypatch):
    monkeypatch.setenv("VIDTUBE_RULES_PATH", str(tmp_path / "missing.yaml"))

    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "check-rules")
    assert exc.value.code == 1


def test_command_required(monkeypatch):
    with pytest.raises(SystemExit):
        run_cli(monkeypatch)
