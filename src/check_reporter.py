"""Checksum run reporter: JSON file writer and console summary."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from tabulate import tabulate

from const import TEST_RESULTS_FOLDER

if TYPE_CHECKING:
    from log_checker import CheckRunResult

logger = logging.getLogger(__name__)

# Emoji indicators for quick scanning
_VERDICT_ICON = {"PASS": "✅ PASS", "FAIL": "❌ FAIL", "ERROR": "⚠️  ERROR"}


def write_json_report(
    result: CheckRunResult, output_dir: str = TEST_RESULTS_FOLDER
) -> Path | None:
    """Write <run_id>_checksum.json to *output_dir*; return its path or None."""
    out_dir = Path(output_dir)
    out_path = out_dir / f"{result.run_id}_checksum.json"
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        with out_path.open("w", encoding="utf-8") as f:
            json.dump(result.to_dict(), f, indent=4)
    except OSError:
        logger.exception("Failed to write checksum report to %s", out_path)
        return None
    logger.info("Checksum report written to %s", out_path)
    return out_path


def print_summary(result: CheckRunResult) -> None:
    """Print the lines that did not pass, followed by the totals."""
    counts = result.counts

    print()
    print(f"  Checksum Run  {result.run_id}")
    print(f"  Source: {result.source}")
    print(f"  Started: {result.started_at}   Ended: {result.ended_at}")

    rows = [
        [
            line.line_number,
            _VERDICT_ICON.get(line.verdict, line.verdict),
            line.expected or "-",
            line.received or "-",
            line.error or "",
        ]
        for line in result.lines
        if line.verdict != "PASS"
    ]
    if rows:
        print(
            tabulate(
                rows,
                headers=["Line", "Verdict", "Expected", "Received", "Error"],
                tablefmt="simple_grid",
            )
        )

    print(
        tabulate(
            [
                [
                    len(result.lines),
                    counts["PASS"],
                    counts["FAIL"],
                    counts["ERROR"],
                    result.skipped_lines,
                ]
            ],
            headers=["Checked", "Pass", "Fail", "Error", "Skipped"],
            tablefmt="simple_grid",
        )
    )
    overall = _VERDICT_ICON.get(result.overall_verdict, result.overall_verdict)
    print(f"  Overall: {overall}")
    print()
