# tests/conftest.py - shared fixtures

import json

import pytest

from task_autocompleter.core.engine import AutocompleteEngine
from task_autocompleter.utils.config_manager import Config
from task_autocompleter.utils.logger_utils import log


@pytest.fixture(autouse=True)
def quiet_log(tmp_path):
    """Send log lines to a temp file and keep them off stdout."""
    old = (log.path, log.level, log.echo)
    log.path = str(tmp_path / "test.log")
    log.level = "DEBUG"
    log.echo = False
    yield log
    log.path, log.level, log.echo = old


@pytest.fixture
def engine():
    return AutocompleteEngine()


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "tasks_path": str(tmp_path / "data" / "tasks.json"),
                "metrics_path": str(tmp_path / "data" / "metrics.json"),
                "log_path": str(tmp_path / "test.log"),
            }
        ),
        encoding="utf8",
    )
    return str(path)


@pytest.fixture
def cfg(config_path):
    return Config(config_path)
