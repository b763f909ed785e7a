"""Tests for the YAML-backed shell configuration."""
import os

import yaml

from param_shell.config import ShellConfig


def test_defaults_without_file(config_path):
    config = ShellConfig(config_path=config_path)
    assert config.data_path == "data.json"
    assert config.conditions_path == "conditions.js"
    assert config.marker == "$"
    assert config.output_format == "text"
    assert config.show_similar is True
    assert not os.path.exists(config_path)


def test_values_from_file(config_path):
    os.makedirs(os.path.dirname(config_path))
    with open(config_path, "w") as f:
        yaml.dump({
            "data_path": "payload.json",
            "marker": "@",
            "output_format": "table",
            "show_similar": False,
        }, f)
    config = ShellConfig(config_path=config_path)
    assert config.data_path == "payload.json"
    assert config.conditions_path == "conditions.js"
    assert config.marker == "@"
    assert config.output_format == "table"
    assert config.show_similar is False


def test_env_overrides_file(config_path, monkeypatch):
    os.makedirs(os.path.dirname(config_path))
    with open(config_path, "w") as f:
        yaml.dump({"data_path": "payload.json"}, f)
    monkeypatch.setenv("PARAM_SHELL_DATA", "/tmp/env.json")
    monkeypatch.setenv("PARAM_SHELL_CONDITIONS", "/tmp/env.js")
    config = ShellConfig(config_path=config_path)
    assert config.data_path == "/tmp/env.json"
    assert config.conditions_path == "/tmp/env.js"


def test_unreadable_yaml_falls_back_to_defaults(config_path):
    os.makedirs(os.path.dirname(config_path))
    with open(config_path, "w") as f:
        f.write("data_path: [unclosed\n")
    config = ShellConfig(config_path=config_path)
    assert config.data_path == "data.json"


def test_unknown_output_format_in_file(config_path):
    os.makedirs(os.path.dirname(config_path))
    with open(config_path, "w") as f:
        yaml.dump({"output_format": "xml"}, f)
    assert ShellConfig(config_path=config_path).output_format == "text"


def test_set_output(config_path):
    config = ShellConfig(config_path=config_path)
    assert config.set_output("json") is True
    assert config.output_format == "json"
    assert config.set_output("xml") is False
    assert config.output_format == "json"


def test_set_config_persists_with_private_mode(config_path):
    config = ShellConfig(config_path=config_path)
    assert config.set_config("data_path", "other.json") is True
    assert config.set_config("show_similar", "false") is True
    assert config.show_similar is False

    assert os.stat(config_path).st_mode & 0o777 == 0o600
    with open(config_path) as f:
        saved = yaml.safe_load(f)
    assert saved["data_path"] == "other.json"
    assert saved["show_similar"] is False

    reloaded = ShellConfig(config_path=config_path)
    assert reloaded.data_path == "other.json"
    assert reloaded.show_similar is False


def test_set_config_rejects_unknown_key_and_bad_format(config_path):
    config = ShellConfig(config_path=config_path)
    assert config.set_config("region", "eu") is False
    assert config.set_config("output_format", "xml") is False
    assert not os.path.exists(config_path)


def test_invalid_marker_in_file_falls_back_to_dollar(config_path):
    os.makedirs(os.path.dirname(config_path))
    for raw in ("marker: 1\n", "marker: ~\n", "marker: ''\n", "marker: [a]\n"):
        with open(config_path, "w") as f:
            f.write(raw)
        assert ShellConfig(config_path=config_path).marker == "$"


def test_set_config_rejects_empty_marker(config_path):
    config = ShellConfig(config_path=config_path)
    assert config.set_config("marker", "") is False
    assert config.marker == "$"
    assert config.set_config("marker", "@") is True
    assert config.marker == "@"
