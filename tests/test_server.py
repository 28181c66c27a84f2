import pytest

import roguegrid.server as server_mod


@pytest.fixture()
def captured_run(monkeypatch, tmp_path, test_app):
    # test_app binds the shared SocketIO instance, which sets async_mode
    calls = {}

    class FakeApp:
        instance_path = str(tmp_path)

    def fake_run(app, **kwargs):
        calls.update(kwargs)

    monkeypatch.setattr(server_mod, "create_app", lambda: FakeApp())
    monkeypatch.setattr(server_mod, "configure_logging", lambda log_dir: str(tmp_path / "app.log"))
    monkeypatch.setattr(server_mod.socketio, "run", fake_run)
    return calls


def test_production_start_keeps_werkzeug_guard(captured_run):
    server_mod.start_server(host="127.0.0.1", port=5001)
    assert captured_run["allow_unsafe_werkzeug"] is False
    assert captured_run["debug"] is False
    assert (captured_run["host"], captured_run["port"]) == ("127.0.0.1", 5001)


def test_debug_start_allows_dev_server(captured_run):
    server_mod.start_server(port=5002, debug=True)
    assert captured_run["allow_unsafe_werkzeug"] is True
