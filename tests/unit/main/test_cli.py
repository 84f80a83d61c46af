from __future__ import annotations

from click.testing import CliRunner

from govee_web import __version__
from govee_web.main import cli as cli_module
from govee_web.main.cli import cli


def test_check_prints_masked_summary(monkeypatch) -> None:
    monkeypatch.setenv("GOVEE_API_KEY", "super-secret-key")

    result = CliRunner().invoke(cli, ["check"])

    assert result.exit_code == 0
    assert result.output.startswith("Settings OK")
    assert "******" in result.output
    assert "super-secret-key" not in result.output


def test_check_with_invalid_settings_exits_non_zero(monkeypatch) -> None:
    monkeypatch.setenv("GOVEE_REDIS_TTL_SECONDS", "0")

    result = CliRunner().invoke(cli, ["check"])

    assert result.exit_code == 1
    assert "Invalid settings" in result.output


def test_server_runs_uvicorn_factory(monkeypatch) -> None:
    calls = {}

    def fake_run(app, **kwargs) -> None:
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(cli_module.uvicorn, "run", fake_run)
    monkeypatch.setattr(cli_module, "update_logging_from_settings", lambda settings: None)
    monkeypatch.setenv("GOVEE_BIND_ADDR", "0.0.0.0")
    monkeypatch.setenv("GOVEE_PORT", "8123")

    result = CliRunner().invoke(cli, ["server"])

    assert result.exit_code == 0
    assert calls["app"] == "govee_web.main.app:create_app"
    assert calls["factory"] is True
    assert calls["host"] == "0.0.0.0"
    assert calls["port"] == 8123


def test_version_option() -> None:
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
