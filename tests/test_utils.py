# tests/test_utils.py
# config manager, logger and metrics helpers

import json
import os

import pytest

from task_autocompleter.utils.config_manager import DEFAULTS, Config
from task_autocompleter.utils.logger_utils import Log
from task_autocompleter.utils.metrics_tracker import Metrics


def test_config_created_with_defaults(tmp_path):
    p = tmp_path / "config.json"
    c = Config(str(p))
    assert c.data == DEFAULTS
    assert json.loads(p.read_text(encoding="utf8")) == DEFAULTS


def test_config_merges_file(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"max_suggestions": 3, "bogus": 1}), encoding="utf8")
    c = Config(str(p))
    assert c["max_suggestions"] == 3
    assert c["min_query_length"] == 2
    assert "bogus" not in c.data


def test_config_bad_json_keeps_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text("[oops", encoding="utf8")
    assert Config(str(p)).data == DEFAULTS


def test_config_set_coerces_and_saves(tmp_path):
    p = tmp_path / "config.json"
    c = Config(str(p))
    c.set("max_suggestions", "8")
    assert c["max_suggestions"] == 8
    assert Config(str(p))["max_suggestions"] == 8


def test_config_set_rejects_unknown_and_bad(tmp_path):
    c = Config(str(tmp_path / "config.json"))
    with pytest.raises(KeyError):
        c.set("nope", "1")
    with pytest.raises(ValueError):
        c.set("max_suggestions", "many")


def test_log_levels_and_file(tmp_path, capsys):
    path = tmp_path / "logs" / "app.log"
    lg = Log(str(path), level="INFO", echo=True, use_color=False)
    lg.debug("hidden")
    lg.info("shown")
    lg.error("bad")
    text = path.read_text(encoding="utf-8")
    assert "hidden" not in text
    assert "INFO    | shown" in text
    assert "ERROR   | bad" in text
    out = capsys.readouterr().out
    assert "shown" in out and "hidden" not in out


def test_time_block_records_metric(tmp_path):
    path = tmp_path / "t.log"
    lg = Log(str(path), level="DEBUG", echo=False)
    with lg.time_block("work") as timer:
        sum(range(100))
    assert timer.elapsed >= 0
    assert "work done:" in path.read_text(encoding="utf-8")


def test_metrics_avg_and_persist(tmp_path):
    p = str(tmp_path / "metrics.json")
    m = Metrics(p)
    m.record("suggest_time", 0.2)
    m.record("suggest_time", 0.4)
    assert m.avg("suggest_time") == pytest.approx(0.3)
    assert m.avg("missing") == 0.0
    m.save()
    again = Metrics(p)
    assert again.summary()["suggest_time"] == (2, pytest.approx(0.3))


def test_metrics_in_memory_save_is_noop():
    m = Metrics()
    m.record("x", 1.0)
    m.save()
    assert m.last["x"] == 1.0


def test_config_load_coerces_types(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"max_suggestions": "3", "min_query_length": 1.0}), encoding="utf8")
    c = Config(str(p))
    assert c["max_suggestions"] == 3
    assert c["min_query_length"] == 1
    assert isinstance(c["min_query_length"], int)


@pytest.mark.parametrize(
    "raw",
    [
        {"max_suggestions": None},
        {"max_suggestions": "lots"},
        {"max_suggestions": [5]},
        {"max_suggestions": True},
        {"tasks_path": None},
        {"log_level": {"name": "DEBUG"}},
    ],
)
def test_config_load_bad_value_keeps_default(tmp_path, quiet_log, raw):
    p = tmp_path / "config.json"
    p.write_text(json.dumps(raw), encoding="utf8")
    c = Config(str(p))
    key = next(iter(raw))
    assert c[key] == DEFAULTS[key]
    with open(quiet_log.path, encoding="utf-8") as f:
        assert f"keeping default {DEFAULTS[key]!r}" in f.read()


def test_config_deferred_warnings_follow_log_path(tmp_path, quiet_log):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"max_suggestions": None}), encoding="utf8")
    c = Config(str(p), defer_warnings=True)
    assert len(c.warnings) == 1
    assert not os.path.exists(quiet_log.path)

    quiet_log.path = str(tmp_path / "elsewhere.log")
    c.flush_warnings()
    assert c.warnings == []
    with open(quiet_log.path, encoding="utf-8") as f:
        assert "max_suggestions" in f.read()


def test_metrics_save_creates_folder(tmp_path):
    p = tmp_path / "data" / "nested" / "metrics.json"
    m = Metrics(str(p))
    m.record("suggest_time", 0.1)
    m.save()
    assert json.loads(p.read_text(encoding="utf8")) == {"suggest_time": {"sum": 0.1, "count": 1}}
