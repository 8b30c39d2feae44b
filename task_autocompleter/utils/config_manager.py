# config_manager.py - JSON config manager

import json
import os

from task_autocompleter.utils.logger_utils import log

DEFAULT_CONFIG_PATH = "config.json"

DEFAULTS = {
    "max_suggestions": 5,  # size of the suggestion dropdown
    "min_query_length": 2,  # dropdown hidden below this many typed chars
    "tasks_path": os.path.join("data", "tasks.json"),
    "metrics_path": os.path.join("data", "metrics.json"),
    "log_path": os.path.join("logs", "task_autocompleter.log"),
    "log_level": "INFO",
}


def _coerce(key, val):
    """Convert `val` to the type of the key's default; ValueError if it can't be."""
    kind = type(DEFAULTS[key])
    # str(None) / int([]) style surprises are rejected outright
    if val is None or isinstance(val, (dict, list, bool)):
        raise ValueError(f"{key}: expected {kind.__name__}, got {val!r}")
    try:
        return kind(val)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{key}: expected {kind.__name__}, got {val!r}") from e


class Config:
    """
    defer_warnings: hold load warnings until flush_warnings(), so they can go
    to the log file named by this very config.
    """

    def __init__(self, path=DEFAULT_CONFIG_PATH, defer_warnings=False):
        self.path = path
        self.data = dict(DEFAULTS)
        self.warnings = []
        self._defer = defer_warnings
        self._load()

    def _warn(self, msg):
        if self._defer:
            self.warnings.append(msg)
        else:
            log.warning(msg)

    def flush_warnings(self):
        for msg in self.warnings:
            log.warning(msg)
        self.warnings = []
        self._defer = False

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                self._warn(f"[Config] could not parse {self.path}: {e}; using defaults")
                return
            if not isinstance(loaded, dict):
                self._warn(f"[Config] {self.path} is not a JSON object; using defaults")
                return
            for k, v in loaded.items():
                if k not in DEFAULTS:
                    continue
                try:
                    self.data[k] = _coerce(k, v)
                except ValueError as e:
                    self._warn(f"[Config] {e}; keeping default {DEFAULTS[k]!r}")
        else:
            self.save()

    def __getitem__(self, key):
        return self.data[key]

    def get(self, key, default=None):
        return self.data.get(key, default)

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def items(self):
        return sorted(self.data.items())

    def set(self, key, val):
        """Set an option, coercing to the default's type. Unknown keys raise KeyError."""
        if key not in DEFAULTS:
            raise KeyError(key)
        self.data[key] = _coerce(key, val)
        self.save()
        log.info(f"[Config] {key} = {self.data[key]!r}")
