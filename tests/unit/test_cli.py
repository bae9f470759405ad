"""Tests for the shopfront command-line interface."""

from typer.testing import CliRunner

from src.shopfront import cli
from src.shopfront.runtime.context import get_config

runner = CliRunner()


class FakeServer:
    """Stands in for uvicorn.Server and never binds a socket."""

    instances: list["FakeServer"] = []

    def __init__(self, config):
        self.config = config
        self.started = False
        FakeServer.instances.append(self)

    def run(self):
        pass


def test_init_db_creates_tables():
    result = runner.invoke(cli.app, ["init-db"])

    assert result.exit_code == 0
    assert "Tables created" in result.output


def test_serve_exits_with_error_when_server_does_not_start(monkeypatch):
    FakeServer.instances.clear()
    monkeypatch.setattr(cli.uvicorn, "Server", FakeServer)

    result = runner.invoke(cli.app, ["serve", "--port", "9099"])

    assert result.exit_code == 1
    (server,) = FakeServer.instances
    assert server.config.port == 9099
    assert server.config.app == cli.APP_IMPORT_PATH


def test_serve_uses_configured_port(monkeypatch):
    FakeServer.instances.clear()
    monkeypatch.setattr(cli.uvicorn, "Server", FakeServer)

    runner.invoke(cli.app, ["serve"])

    (server,) = FakeServer.instances
    config = get_config()
    assert server.config.port == config.app.port
    assert server.config.host == config.app.host
