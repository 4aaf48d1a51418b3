import pytest

from app.config import settings
from app.frontend import _resolve_asset

INDEX_HTML = "<!doctype html><div id='root'></div>"


@pytest.fixture
def static_dir(tmp_path, monkeypatch):
    public = tmp_path / "public"
    (public / "assets").mkdir(parents=True)
    (public / "index.html").write_text(INDEX_HTML)
    (public / "assets" / "app.js").write_text("console.log('board');")
    (tmp_path / "secret.txt").write_text("do not serve")
    monkeypatch.setattr(settings, "static_dir", public)
    return public


@pytest.mark.parametrize(
    "path",
    ["/", "/train/endgames", "/review/lichess/abcd1234", "/api/unknown", "/%00", "/a%00b", "/" + "a" * 300],
)
def test_unmatched_paths_serve_entry_point(client, static_dir, path):
    response = client.get(path)
    assert response.status_code == 200
    assert response.text == INDEX_HTML


def test_existing_asset_is_served(client, static_dir):
    response = client.get("/assets/app.js")
    assert response.status_code == 200
    assert response.text == "console.log('board');"


def test_assets_cannot_escape_static_dir(static_dir):
    assert _resolve_asset(static_dir, "../secret.txt") is None
    assert _resolve_asset(static_dir, "assets") is None
    assert _resolve_asset(static_dir, "a\x00b") is None
    assert _resolve_asset(static_dir, "b" * 300) is None
    assert _resolve_asset(static_dir, "assets/app.js") == (static_dir / "assets" / "app.js").resolve()


def test_bundled_entry_point_exists():
    assert (settings.static_dir / "index.html").is_file()
