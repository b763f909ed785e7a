"""Shell configuration state with YAML persistence."""
import logging
import os

import yaml

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("table", "json", "text")
DEFAULT_MARKER = "$"


def _valid_marker(value):
    return isinstance(value, str) and bool(value)


def _as_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


class ShellConfig:
    def __init__(self, config_path=None):
        self._config_path = config_path or os.path.expanduser("~/.param-shell/config.yaml")
        self._data = {}
        self._load()

        # Env vars override the config file
        self.data_path = os.environ.get("PARAM_SHELL_DATA") or self._data.get("data_path", "data.json")
        self.conditions_path = (
            os.environ.get("PARAM_SHELL_CONDITIONS") or self._data.get("conditions_path", "conditions.js")
        )
        self.marker = self._data.get("marker", DEFAULT_MARKER)
        if not _valid_marker(self.marker):
            self.marker = DEFAULT_MARKER
        self.output_format = self._data.get("output_format", "text")
        if self.output_format not in OUTPUT_FORMATS:
            self.output_format = "text"
        self.show_similar = _as_bool(self._data.get("show_similar", True))

    @property
    def config_path(self):
        return self._config_path

    def _load(self):
        """Load YAML config from disk if it exists."""
        if not os.path.exists(self._config_path):
            return
        try:
            with open(self._config_path, "r") as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable config %s: %s", self._config_path, e)
            return
        if isinstance(loaded, dict):
            self._data = loaded

    def _save(self):
        """Write config to YAML, creating directory if needed. File mode 0600."""
        config_dir = os.path.dirname(self._config_path)
        if config_dir and not os.path.exists(config_dir):
            os.makedirs(config_dir, mode=0o700, exist_ok=True)

        self._data.update(self.as_dict())

        fd = os.open(self._config_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as f:
            yaml.dump(self._data, f, default_flow_style=False, sort_keys=False)

    def as_dict(self):
        return {
            "data_path": self.data_path,
            "conditions_path": self.conditions_path,
            "marker": self.marker,
            "output_format": self.output_format,
            "show_similar": self.show_similar,
        }

    def set_config(self, key, value):
        """Set and persist a known config value. Returns False for unknown keys or bad values."""
        if key not in self.as_dict():
            return False
        if key == "output_format":
            if value not in OUTPUT_FORMATS:
                return False
        elif key == "marker":
            if not _valid_marker(value):
                return False
        elif key == "show_similar":
            value = _as_bool(value)
        setattr(self, key, value)
        self._save()
        return True

    def set_output(self, fmt):
        if fmt in OUTPUT_FORMATS:
            self.output_format = fmt
            return True
        return False
