from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from vidtube.adapters.sqlite.migrator import SQLiteMigrator
from vidtube.api.deps import get_rules, get_settings
from vidtube.rules.loader import load_rules
from vidtube.rules.models import Rules

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Uploads are checked by extension and declared MIME type, not by content.
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
MP4_BYTES = b"\x00\x00\x00\x18ftypmp42\x00\x00\x00\x00mp42isom"
PASSWORD = "s3cret!pass"


@pytest.fixture
def rules() -> Rules:
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    """Fresh SQLite database with every migration applied."""
    path = str(tmp_path / "vidtube.db")
    SQLiteMigrator(path).run_migrations()
    return path


@pytest.fixture
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """API client on an isolated data dir. Entering the client runs the lifespan (migrations)."""
    monkeypatch.setenv("VIDTUBE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("VIDTUBE_COOKIE_SECURE", "0")
    get_settings.cache_clear()
    get_rules.cache_clear()

    from vidtube.api.main import app

    with TestClient(app) as c:
        yield c

    get_settings.cache_clear()
    get_rules.cache_clear()


@pytest.fixture
def register(client: TestClient) -> Callable[..., dict[str, Any]]:
    """Register a user through the API and return the ``data`` of the response."""

    def _register(user_name: str, **overrides: Any) -> dict[str, Any]:
        form = {
            "userName": user_name,
            "fullName": user_name.title(),
            "email": f"{user_name}@example.com",
            "password": PASSWORD,
            **overrides,
        }
        res = client.post(
            "/api/v1/users/register",
            data=form,
            files={"avatar": (f"{user_name}.png", PNG_BYTES, "image/png")},
        )
        assert res.status_code == 201, res.text
        data: dict[str, Any] = res.json()["data"]
        return data

    return _register


@pytest.fixture
def login(client: TestClient) -> Callable[[str], dict[str, str]]:
    """Log in and return bearer headers. Cookies are dropped so several users can share a client."""

    def _login(user_name: str) -> dict[str, str]:
        res = client.post(
            "/api/v1/users/login", json={"userName": user_name, "password": PASSWORD}
        )
        assert res.status_code == 200, res.text
        client.cookies.clear()
        return {"Authorization": f"Bearer {res.json()['data']['accessToken']}"}

    return _login


@pytest.fixture
def publish(client: TestClient) -> Callable[..., dict[str, Any]]:
    def _publish(headers: dict[str, str], title: str = "My video", **fields: Any) -> dict[str, Any]:
        form = {"title": title, "description": "about", "isPublished": "true", "duration": "12.5"}
        form.update({k: str(v) for k, v in fields.items()})
        res = client.post(
            "/api/v1/videos",
            data=form,
            files={
                "videoFile": ("clip.mp4", MP4_BYTES, "video/mp4"),
                "thumbnail": ("thumb.png", PNG_BYTES, "image/png"),
            },
            headers=headers,
        )
        assert res.status_code == 201, res.text
        data: dict[str, Any] = res.json()["data"]
        return data

    return _publish
