import pytest

from replay_server.constants import NOT_FOUND_PAGE
from replay_server.static import AssetKind, StaticAsset, StaticAssetResponder, default_responder


def test_default_responder_registers_bundled_assets(static_root):
    responder = default_responder(static_root)
    assert responder.registered_paths() == ["/", "/test.js"]


def test_serves_in_memory_asset(tmp_path):
    responder = StaticAssetResponder(tmp_path)
    responder.register("/app.js", StaticAsset(AssetKind.JAVASCRIPT, data=b"let x = 1;"))
    resp = responder.serve("/app.js")
    assert resp.status_code == 200
    assert resp.body == b"let x = 1;"
    assert resp.media_type == "application/javascript"


def test_disk_asset_is_reread(static_root):
    responder = default_responder(static_root)
    (static_root / "index.html").write_bytes(b"changed")
    assert responder.serve("/").body == b"changed"


def test_missing_file_falls_back_to_404(tmp_path, caplog):
    responder = StaticAssetResponder(tmp_path)
    responder.register("/", StaticAsset(AssetKind.HTML, path="missing.html"))
    with caplog.at_level("WARNING", logger="replay_server.static"):
        resp = responder.serve("/")
    assert resp.status_code == 404
    assert resp.body.decode() == NOT_FOUND_PAGE
    assert "Cannot serve /" in caplog.text


def test_unregistered_path_is_404(tmp_path):
    assert StaticAssetResponder(tmp_path).serve("/nope").status_code == 404


def test_asset_needs_exactly_one_source():
    with pytest.raises(ValueError):
        StaticAsset(AssetKind.HTML)
    with pytest.raises(ValueError):
        StaticAsset(AssetKind.HTML, path="a.html", data=b"x")
