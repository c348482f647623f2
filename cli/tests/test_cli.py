from __future__ import annotations

import httpx
from typer.testing import CliRunner

from clearag_client import ClearAgClient, ClientConfig
from clearag_cli import config, main
from clearag_cli.commands import air_temp_cmd
from clearag_cli.http import make_client


def _use_tmp_config(monkeypatch, tmp_path) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)


def _mock_client(monkeypatch, status: int, payload) -> list[httpx.Request]:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(status, json=payload)

    def _make_client(cfg, **kwargs):  # noqa: ANN001, ANN003
        client_cfg = ClientConfig(app_id=cfg.app_id, app_key=cfg.app_key, failure_policy=cfg.failure_policy)
        return ClearAgClient(client_cfg, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(air_temp_cmd, "make_client", _make_client)
    return captured


def test_config_set_and_show(tmp_path, monkeypatch) -> None:
    _use_tmp_config(monkeypatch, tmp_path)
    runner = CliRunner()

    result = runner.invoke(
        main.app,
        ["config", "set", "--app-id", "my-id", "--app-key", "my-key", "--host", "staging.example.com/", "--policy", "strict"],
    )
    assert result.exit_code == 0

    cfg = config.load_config()
    assert cfg.app_id == "my-id"
    assert cfg.app_key == "my-key"
    assert cfg.host == "https://staging.example.com"
    assert cfg.failure_policy == "strict"

    shown = runner.invoke(main.app, ["config", "show"])
    assert shown.exit_code == 0
    assert "app_id=my-id" in shown.output
    assert "my-key" not in shown.output


def test_config_set_rejects_unknown_policy(tmp_path, monkeypatch) -> None:
    _use_tmp_config(monkeypatch, tmp_path)
    result = CliRunner().invoke(main.app, ["config", "set", "--policy", "lenient"])
    assert result.exit_code == 2
    assert not tmp_path.joinpath("config.toml").exists()


def test_air_temp_prints_payload(tmp_path, monkeypatch) -> None:
    _use_tmp_config(monkeypatch, tmp_path)
    captured = _mock_client(monkeypatch, 200, [{"date": "2020-01-01"}])

    result = CliRunner().invoke(
        main.app,
        ["air-temp", "--start", "1577836800", "--end", "1577923200", "--lat", "40.71", "--lon=-74.01"],
    )

    assert result.exit_code == 0
    assert "2020-01-01" in result.output
    assert captured[0].url.params["location"] == "40.71, -74.01"


def test_air_temp_not_found_warns(tmp_path, monkeypatch) -> None:
    _use_tmp_config(monkeypatch, tmp_path)
    _mock_client(monkeypatch, 404, {"error": "missing"})

    result = CliRunner().invoke(
        main.app,
        ["air-temp", "--start", "1", "--end", "2", "--location", "40.71, -74.01"],
    )

    assert result.exit_code == 0
    assert "No data found" in result.output


def test_air_temp_api_error_exits_nonzero(tmp_path, monkeypatch) -> None:
    _use_tmp_config(monkeypatch, tmp_path)
    _mock_client(monkeypatch, 500, {"error": "boom"})

    result = CliRunner().invoke(
        main.app,
        ["air-temp", "--start", "1", "--end", "2", "--location", "40.71, -74.01"],
    )

    assert result.exit_code == 1
    assert "API error 500" in result.output


def test_air_temp_requires_location(tmp_path, monkeypatch) -> None:
    _use_tmp_config(monkeypatch, tmp_path)
    result = CliRunner().invoke(main.app, ["air-temp", "--start", "1", "--end", "2", "--lat", "40.71"])
    assert result.exit_code == 2


def test_make_client_applies_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv(config.ENV_APP_ID, "env-id")
    monkeypatch.setenv(config.ENV_HOST, "localhost:8080/")
    monkeypatch.delenv(config.ENV_APP_KEY, raising=False)

    cfg = config.default_config()
    cfg.app_key = "file-key"
    client = make_client(cfg, verbose=True)

    assert client.config.app_id == "env-id"
    assert client.config.app_key == "file-key"
    assert client.config.host == "http://localhost:8080"
    assert client.config.debug is True
    assert client.config.logger_config.url is True


def test_make_client_host_override_wins(monkeypatch) -> None:
    monkeypatch.delenv(config.ENV_HOST, raising=False)
    client = make_client(config.default_config(), host_override="https://other.test/")
    assert client.config.host == "https://other.test"


def test_print_payload_handles_json_and_text(capsys) -> None:
    from clearag_cli import console

    console.print_payload({"air_temp_max": {"value": 5}})
    console.print_payload("date,value\n2020-01-01,[5]")
    console.print_payload(b"\x00\x01\x02")

    out = capsys.readouterr().out
    assert '"air_temp_max"' in out
    assert "2020-01-01,[5]" in out
    assert "<3 bytes>" in out
