import json

import pytest

from durspan.cli import main
from durspan.util.exit_codes import ExitCode


def test_parse_plain_output(capsys: pytest.CaptureFixture) -> None:
    assert main(["parse", "--plain", "2h 15m", "0.0001 days"]) == ExitCode.SUCCESS
    out = capsys.readouterr().out.splitlines()
    assert out == ["8100.000000000", "8.640000000"]


def test_parse_json_output(capsys: pytest.CaptureFixture) -> None:
    assert main(["parse", "--json", "20min17nsec"]) == ExitCode.SUCCESS
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"input": "20min17nsec", "seconds": 1_200, "nanos": 17, "text": "20m 17ns"}


def test_parse_reports_invalid_text(capsys: pytest.CaptureFixture) -> None:
    assert main(["parse", "--plain", "1s", "2h xyz"]) == ExitCode.INVALID_DURATION
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["1.000000000"]
    assert "error: parsing duration failed at: xyz" in captured.err


def test_parse_reports_out_of_range(capsys: pytest.CaptureFixture) -> None:
    assert main(["parse", "100000000000000000000ns"]) == ExitCode.OUT_OF_RANGE
    assert "too large" in capsys.readouterr().err


def test_format(capsys: pytest.CaptureFixture) -> None:
    assert main(["format", "90061", "--nanos", "5"]) == ExitCode.SUCCESS
    assert capsys.readouterr().out.strip() == "1day 1h 1m 1s 5ns"


def test_format_rejects_bad_nanos(capsys: pytest.CaptureFixture) -> None:
    assert main(["format", "1", "--nanos", "1000000000"]) == ExitCode.OUT_OF_RANGE
    assert "nanos must be below" in capsys.readouterr().err


def test_normalize(capsys: pytest.CaptureFixture) -> None:
    assert main(["normalize", "90min", "2hand 15m"]) == ExitCode.SUCCESS
    assert capsys.readouterr().out.splitlines() == ["1h 30m", "2h 15m"]


def test_normalize_empty_input(capsys: pytest.CaptureFixture) -> None:
    assert main(["normalize", "  "]) == ExitCode.INVALID_DURATION
    assert "input is empty" in capsys.readouterr().err


def test_missing_command_is_usage_error() -> None:
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == ExitCode.INVALID_ARGS


def test_exit_code_messages() -> None:
    assert ExitCode.message(ExitCode.OUT_OF_RANGE) == "Duration out of range"
    assert ExitCode.message(42) == "Unknown exit code 42"
