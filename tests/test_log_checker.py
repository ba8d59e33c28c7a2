"""
Unit tests for log_checker: delimiter handling, per-line verdicts, aggregation.

The progress bar is replaced so tests stay quiet.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from check_config import CheckConfig
from exceptions import ValidationErrorKind
from fix_checksum import generate
from log_checker import (
    CheckRunResult,
    LineResult,
    aggregate_verdict,
    check_lines,
    check_log_file,
    check_message,
    normalize_delimiter,
)

SOH = "\x01"


@pytest.fixture(autouse=True)
def disable_alive_bar() -> Any:
    """Disable alive_bar during tests."""
    with patch("log_checker.alive_bar", MagicMock()):
        yield


@pytest.fixture
def piped_body(heartbeat_body: str) -> str:
    return heartbeat_body.replace(SOH, "|")


# ---------------------------------------------------------------------------
# normalize_delimiter
# ---------------------------------------------------------------------------


class TestNormalizeDelimiter:
    def test_pipe_replaced(self) -> None:
        assert normalize_delimiter("8=FIX.4.2|9=5|", "|") == f"8=FIX.4.2{SOH}9=5{SOH}"

    def test_empty_delimiter_is_noop(self) -> None:
        assert normalize_delimiter("a|b", "") == "a|b"

    def test_soh_delimiter_is_noop(self) -> None:
        line = f"8=FIX.4.2{SOH}"
        assert normalize_delimiter(line, SOH) == line


# ---------------------------------------------------------------------------
# check_message
# ---------------------------------------------------------------------------


class TestCheckMessage:
    def test_pass(self, heartbeat_body: str) -> None:
        result = check_message(f"{heartbeat_body}10=236{SOH}", 3)
        assert result == LineResult(
            line_number=3, verdict="PASS", expected="236", received="236"
        )

    def test_fail_records_both_values(self, heartbeat_body: str) -> None:
        result = check_message(f"{heartbeat_body}10=231{SOH}", 1)
        assert result.verdict == "FAIL"
        assert result.expected == "236"
        assert result.received == "231"
        assert result.error is None

    def test_received_value_is_zero_padded(self, heartbeat_body: str) -> None:
        result = check_message(f"{heartbeat_body}10=007{SOH}", 1)
        assert result.received == "007"

    def test_error_missing_field(self, heartbeat_body: str) -> None:
        result = check_message(heartbeat_body, 2)
        assert result.verdict == "ERROR"
        assert result.error_kind == ValidationErrorKind.FIELD_NOT_FOUND.value
        assert result.expected is None
        assert result.received is None

    def test_error_invalid_format(self, heartbeat_body: str) -> None:
        result = check_message(f"{heartbeat_body}10=2ZZ{SOH}", 2)
        assert result.verdict == "ERROR"
        assert result.error_kind == "checksum_field_invalid_format"
        assert "2ZZ" in (result.error or "")


# ---------------------------------------------------------------------------
# aggregate_verdict
# ---------------------------------------------------------------------------


def _line(verdict: str) -> LineResult:
    return LineResult(line_number=1, verdict=verdict)  # type: ignore[arg-type]


class TestAggregateVerdict:
    def test_empty_is_pass(self) -> None:
        assert aggregate_verdict([]) == "PASS"

    def test_all_pass(self) -> None:
        assert aggregate_verdict([_line("PASS"), _line("PASS")]) == "PASS"

    def test_fail_beats_pass(self) -> None:
        assert aggregate_verdict([_line("PASS"), _line("FAIL")]) == "FAIL"

    def test_error_beats_fail(self) -> None:
        assert aggregate_verdict([_line("FAIL"), _line("ERROR")]) == "ERROR"


# ---------------------------------------------------------------------------
# check_lines / check_log_file
# ---------------------------------------------------------------------------


class TestCheckLines:
    def test_mixed_lines(self, piped_body: str) -> None:
        lines = [
            f"{piped_body}10=236|\n",
            "\n",
            f"{piped_body}10=231|\r\n",
            piped_body,
        ]
        result = check_lines(lines, CheckConfig(), source="session.log")

        assert result.source == "session.log"
        assert [line.line_number for line in result.lines] == [1, 3, 4]
        assert [line.verdict for line in result.lines] == ["PASS", "FAIL", "ERROR"]
        assert result.skipped_lines == 1
        assert result.counts == {"PASS": 1, "FAIL": 1, "ERROR": 1}
        assert result.overall_verdict == "ERROR"

    def test_blank_lines_checked_when_not_skipped(self) -> None:
        result = check_lines(["", "   "], CheckConfig(skip_blank_lines=False))
        assert [line.error_kind for line in result.lines] == [
            "empty_message",
            "checksum_field_not_found",
        ]
        assert result.skipped_lines == 0

    def test_soh_log_without_translation(self, heartbeat_body: str) -> None:
        result = check_lines(
            [f"{heartbeat_body}10=236{SOH}"], CheckConfig(delimiter="")
        )
        assert result.overall_verdict == "PASS"

    def test_run_metadata(self, piped_body: str) -> None:
        result = check_lines([f"{piped_body}10=236|"])
        assert result.run_id
        assert result.started_at <= result.ended_at
        assert result.source == "<memory>"

    def test_to_dict_is_json_serialisable(self, piped_body: str) -> None:
        result = check_lines([f"{piped_body}10=231|"])
        data = json.loads(json.dumps(result.to_dict()))
        assert data["overall_verdict"] == "FAIL"
        assert data["counts"]["FAIL"] == 1
        assert data["lines"][0]["expected"] == "236"


class TestCheckLogFile:
    def test_reads_file(self, tmp_path: Path, piped_body: str) -> None:
        log = tmp_path / "session.log"
        log.write_text(
            f"{piped_body}10=236|\n{piped_body}10=236|\n", encoding="utf-8"
        )
        result = check_log_file(log)
        assert isinstance(result, CheckRunResult)
        assert result.overall_verdict == "PASS"
        assert len(result.lines) == 2
        assert result.source == str(log)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            check_log_file(tmp_path / "missing.log")

    def test_checksum_uses_configured_encoding(
        self, tmp_path: Path, heartbeat_body: str
    ) -> None:
        body = f"{heartbeat_body}58=café{SOH}"
        checksum = generate(body.encode("latin-1"))
        log = tmp_path / "latin1.log"
        log.write_bytes(f"{body}10={checksum}{SOH}\n".encode("latin-1"))

        result = check_log_file(log, CheckConfig(delimiter="", encoding="latin-1"))
        assert result.overall_verdict == "PASS"
