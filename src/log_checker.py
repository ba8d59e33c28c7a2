"""
Batch checksum checker for FIX log files.

Each non-blank line of the log is treated as one message. Only the checksum
field is examined; no other tags are parsed.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from alive_progress import alive_bar

from check_config import CheckConfig, default_check_config
from const import CHECKSUM_WIDTH, SOH
from exceptions import ChecksumValidationError
from fix_checksum import read_checksum_field

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

Verdict = Literal["PASS", "FAIL", "ERROR"]


@dataclass
class LineResult:
    """Outcome of checking a single log line."""

    line_number: int
    verdict: Verdict
    expected: str | None = None
    received: str | None = None
    error_kind: str | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        """Return a JSON-serialisable representation."""
        return {
            "line_number": self.line_number,
            "verdict": self.verdict,
            "expected": self.expected,
            "received": self.received,
            "error_kind": self.error_kind,
            "error": self.error,
        }


@dataclass
class CheckRunResult:
    """Aggregated outcome of checking every line of one source."""

    run_id: str
    source: str
    started_at: str  # ISO-8601
    ended_at: str  # ISO-8601
    lines: list[LineResult]
    overall_verdict: Verdict
    skipped_lines: int = 0

    @property
    def counts(self) -> dict[str, int]:
        """Return the number of lines per verdict."""
        totals = {"PASS": 0, "FAIL": 0, "ERROR": 0}
        for line in self.lines:
            totals[line.verdict] += 1
        return totals

    def to_dict(self) -> dict:
        """Return a JSON-serialisable representation of the run result."""
        return {
            "run_id": self.run_id,
            "source": self.source,
            "started_at": self.started_at,
            "ended_at": self.ended_at,
            "counts": self.counts,
            "skipped_lines": self.skipped_lines,
            "lines": [line.to_dict() for line in self.lines],
            "overall_verdict": self.overall_verdict,
        }


def normalize_delimiter(line: str, delimiter: str) -> str:
    """Replace the printable display delimiter with SOH."""
    if not delimiter or delimiter == SOH:
        return line
    return line.replace(delimiter, SOH)


def check_message(message: bytes | str, line_number: int) -> LineResult:
    """Check one SOH-delimited message and classify the outcome."""
    try:
        checksum_field = read_checksum_field(message)
    except ChecksumValidationError as exc:
        logger.debug("Line %s: %s", line_number, exc)
        return LineResult(
            line_number=line_number,
            verdict="ERROR",
            error_kind=str(exc.kind),
            error=str(exc),
        )

    verdict: Verdict = "PASS" if checksum_field.is_valid else "FAIL"
    if verdict == "FAIL":
        logger.debug(
            "Line %s: checksum mismatch, expected %s received %s",
            line_number,
            checksum_field.expected,
            checksum_field.received,
        )
    return LineResult(
        line_number=line_number,
        verdict=verdict,
        expected=f"{checksum_field.expected:0{CHECKSUM_WIDTH}d}",
        received=f"{checksum_field.received:0{CHECKSUM_WIDTH}d}",
    )


def aggregate_verdict(lines: Sequence[LineResult]) -> Verdict:
    """Return ERROR if any line errored, FAIL if any failed, else PASS."""
    verdicts = {line.verdict for line in lines}
    if "ERROR" in verdicts:
        return "ERROR"
    if "FAIL" in verdicts:
        return "FAIL"
    return "PASS"


def check_lines(
    lines: Sequence[str],
    cfg: CheckConfig | None = None,
    source: str = "<memory>",
) -> CheckRunResult:
    """Check every line and return the aggregated run result."""
    cfg = cfg or default_check_config()
    run_id = str(uuid.uuid4())
    started_at = datetime.now(UTC).isoformat()
    logger.info("Checking %d line(s) from %s (run %s)", len(lines), source, run_id)

    results: list[LineResult] = []
    skipped = 0
    with alive_bar(len(lines), title="Checksum") as pbar:
        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.rstrip("\r\n")
            if cfg.skip_blank_lines and not line.strip():
                skipped += 1
            else:
                # checksum covers the bytes in the log's own encoding
                message = normalize_delimiter(line, cfg.delimiter).encode(cfg.encoding)
                results.append(check_message(message, line_number))
            pbar()

    ended_at = datetime.now(UTC).isoformat()
    overall = aggregate_verdict(results)
    logger.info("Run %s finished: %s", run_id, overall)
    return CheckRunResult(
        run_id=run_id,
        source=source,
        started_at=started_at,
        ended_at=ended_at,
        lines=results,
        overall_verdict=overall,
        skipped_lines=skipped,
    )


def check_log_file(path: str | Path, cfg: CheckConfig | None = None) -> CheckRunResult:
    """Read a FIX log file and check the checksum of every message in it."""
    cfg = cfg or default_check_config()
    log_path = Path(path)
    if not log_path.is_file():
        msg = f"Log file not found: {log_path}"
        raise FileNotFoundError(msg)

    with log_path.open(encoding=cfg.encoding, newline="") as f:
        lines = f.readlines()
    return check_lines(lines, cfg, source=str(log_path))
