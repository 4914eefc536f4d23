import argparse
import json
import logging

import pytest

from durspan.argtypes import duration_type, seconds_type
from durspan.config import duration_env
from durspan.duration import Duration
from durspan.errors import ParseFailed
from durspan.util.logging import configure_logging, get_logger


def test_duration_env_reads_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DURSPAN_TEST_TIMEOUT", "1h and 30m")
    assert duration_env("DURSPAN_TEST_TIMEOUT") == Duration(5_400, 0)


def test_duration_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DURSPAN_TEST_TIMEOUT", raising=False)
    assert duration_env("DURSPAN_TEST_TIMEOUT") is None
    assert duration_env("DURSPAN_TEST_TIMEOUT", "30s") == Duration(30, 0)
    assert duration_env("DURSPAN_TEST_TIMEOUT", Duration(5, 0)) == Duration(5, 0)
    monkeypatch.setenv("DURSPAN_TEST_TIMEOUT", "   ")
    assert duration_env("DURSPAN_TEST_TIMEOUT", "30s") == Duration(30, 0)


def test_duration_env_never_substitutes_default_for_bad_text(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DURSPAN_TEST_TIMEOUT", "30s later")
    with pytest.raises(ParseFailed):
        duration_env("DURSPAN_TEST_TIMEOUT", "30s")


def test_duration_type_for_argparse() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--timeout", type=duration_type)
    assert parser.parse_args(["--timeout", "2m 30s"]).timeout == Duration(150, 0)
    with pytest.raises(argparse.ArgumentTypeError):
        duration_type("2 fortnights")


def test_seconds_type() -> None:
    assert seconds_type(None) is None
    assert seconds_type(12) == 12.0
    assert seconds_type("30") == 30.0
    assert seconds_type("10m") == 600.0
    assert seconds_type("1.5 days") == 129_600.0
    assert seconds_type("250ms") == 0.25
    with pytest.raises(argparse.ArgumentTypeError):
        seconds_type("-5")
    with pytest.raises(argparse.ArgumentTypeError):
        seconds_type("5 parsecs")


def test_json_log_file(tmp_path) -> None:
    path = tmp_path / "durspan.jsonl"
    configure_logging(level="DEBUG", json_file=str(path), use_color=False)
    try:
        get_logger("tests").info("hello", extra={"input_text": "2h"})
        for handler in logging.getLogger("durspan").handlers:
            handler.flush()
        record = json.loads(path.read_text(encoding="utf-8").splitlines()[-1])
        assert record["logger"] == "durspan.tests"
        assert record["message"] == "hello"
        assert record["input_text"] == "2h"
    finally:
        configure_logging(level="WARNING", use_color=False)
