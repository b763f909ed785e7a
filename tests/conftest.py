"""Shared test fixtures for Parameter Shell tests."""
import io
import json

import pytest
from rich.console import Console

SAMPLE_DATA = {
    "user": {
        "userName": "ada",
        "age": 36,
        "address": {"city": "London", "zipCode": "NW1"},
    },
    "orders": [
        {"id": 1, "total": 9.5},
        {"id": 2, "total": 3.0, "coupon": None},
    ],
    "active": True,
}

SAMPLE_CONDITIONS = """\
module.exports = {
  adult: ($age) => $age >= 18,
  local: ($city) => $city === 'London',
  mailing: ($zip) => $zip !== undefined,
};
"""

CONSOLE_MODULES = (
    "param_shell.commands",
    "param_shell.commands.general",
    "param_shell.commands.data_cmd",
    "param_shell.commands.validate_cmd",
    "param_shell.commands.search_cmd",
    "param_shell.commands.help_cmd",
    "param_shell.utils.output",
)


@pytest.fixture
def sample_data():
    return json.loads(json.dumps(SAMPLE_DATA))


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(SAMPLE_DATA), encoding="utf-8")
    return str(path)


@pytest.fixture
def conditions_file(tmp_path):
    path = tmp_path / "conditions.js"
    path.write_text(SAMPLE_CONDITIONS, encoding="utf-8")
    return str(path)


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    monkeypatch.delenv("PARAM_SHELL_DATA", raising=False)
    monkeypatch.delenv("PARAM_SHELL_CONDITIONS", raising=False)
    return str(tmp_path / "settings" / "config.yaml")


@pytest.fixture
def output(monkeypatch):
    """Redirect every module-level Rich console into one buffer.

    Returns a callable giving the text printed so far.
    """
    import importlib

    buf = io.StringIO()
    recorder = Console(file=buf, width=200, color_system=None, force_terminal=False)
    for name in CONSOLE_MODULES:
        module = importlib.import_module(name)
        monkeypatch.setattr(module, "console", recorder)
    monkeypatch.setattr("param_shell.utils.output.err_console", recorder)
    monkeypatch.setattr("param_shell.cli.err_console", recorder)
    return buf.getvalue
