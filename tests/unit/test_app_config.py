import pytest

from echobench.app import cli
from echobench.app.config import parse_socket_address
from echobench.app.metrics import endpoint_label


@pytest.mark.parametrize("value, expected", [
    ("127.0.0.1:9999", ("127.0.0.1", 9999)),
    ("localhost:8080", ("localhost", 8080)),
    ("0.0.0.0:1", ("0.0.0.0", 1)),
    ("[::1]:9999", ("::1", 9999)),
])
def test_parse_socket_address(value, expected):
    assert parse_socket_address(value) == expected


@pytest.mark.parametrize("value", ["", "localhost", "localhost:", ":9999", "host:port", "host:0", "host:70000"])
def test_parse_socket_address_rejects(value):
    with pytest.raises(ValueError):
        parse_socket_address(value)


def test_cli_starts_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    assert cli.main(["-s", "0.0.0.0:9000"]) == 0
    app, kwargs = calls[0]
    assert app == "echobench.app.main:app"
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 9000


def test_cli_rejects_bad_address(monkeypatch):
    monkeypatch.setattr(cli.uvicorn, "run", lambda *a, **kw: pytest.fail("server started"))
    with pytest.raises(SystemExit) as exc:
        cli.main(["--socket-address", "nowhere"])
    assert exc.value.code == 2


@pytest.mark.parametrize("path, label", [
    ("/healthz", "/healthz"),
    ("/metrics", "/metrics"),
    ("/endpoint", "echo"),
    ("/", "echo"),
    ("/metricsx", "echo"),
    ("/metrics/extra", "echo"),
    ("/healthz/", "echo"),
])
def test_endpoint_label(path, label):
    assert endpoint_label(path) == label
