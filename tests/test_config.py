"""
Tests for configuration loading and CLI overrides.
"""

import pytest
from pydantic import ValidationError

from time_mcp.cli import load_server_config, parse_args
from time_mcp.config_manager import ServerConfig, read_yaml, validate_config


def test_defaults():
    config = validate_config({})
    assert config.time_server == ServerConfig()
    assert config.time_server.transport == "stdio"
    assert config.time_server.port == 8080
    assert config.time_server.local_timezone == ""


def test_read_missing_yaml(tmp_path):
    assert read_yaml(tmp_path / "missing.yaml") == {}


def test_read_yaml_values(tmp_path):
    path = tmp_path / "conf.yaml"
    path.write_text(
        "time_server:\n"
        "  local_timezone: Europe/Berlin\n"
        "  transport: sse\n"
        "  port: 9090\n"
        "  log_level: debug\n",
        encoding="utf-8",
    )
    server = validate_config(read_yaml(path)).time_server
    assert server.local_timezone == "Europe/Berlin"
    assert server.transport == "sse"
    assert server.port == 9090
    assert server.log_level == "DEBUG"


def test_read_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "conf.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_yaml(path)


@pytest.mark.parametrize("port", [-1, 70000])
def test_invalid_port(port):
    with pytest.raises(ValidationError):
        validate_config({"time_server": {"port": port}})


def test_invalid_transport():
    with pytest.raises(ValidationError):
        validate_config({"time_server": {"transport": "carrier-pigeon"}})


def test_cli_flags_override_file(tmp_path):
    path = tmp_path / "conf.yaml"
    path.write_text("time_server:\n  local_timezone: Europe/Berlin\n  port: 9090\n", encoding="utf-8")

    args = parse_args(["-c", str(path), "-l", "Asia/Tokyo", "--transport", "sse", "--verbose"])
    server = load_server_config(args)

    assert server.local_timezone == "Asia/Tokyo"
    assert server.transport == "sse"
    assert server.port == 9090
    assert server.log_level == "DEBUG"


def test_cli_without_flags():
    assert load_server_config(parse_args([])) == ServerConfig()


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--version"])
    assert exc_info.value.code == 0
    assert "Time MCP Server 0.3.2" in capsys.readouterr().out
