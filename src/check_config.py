"""Typed configuration schema and loader for the log checksum checker."""

from __future__ import annotations

import codecs
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from const import DEFAULT_ENCODING, DISPLAY_DELIMITER, TEST_RESULTS_FOLDER


@dataclass
class CheckConfig:
    """Settings for a batch checksum run over a FIX log file."""

    # Printable stand-in for SOH used in the log; "" disables translation
    delimiter: str = DISPLAY_DELIMITER
    encoding: str = DEFAULT_ENCODING
    skip_blank_lines: bool = True
    output_dir: str = TEST_RESULTS_FOLDER
    write_report: bool = True

    def __post_init__(self) -> None:
        """Reject delimiters and encodings the checker cannot use."""
        if len(self.delimiter) > 1:
            msg = f"delimiter must be a single character, got {self.delimiter!r}"
            raise ValueError(msg)
        # "=" and digits belong to every tag=value pair
        if self.delimiter == "=" or self.delimiter.isdigit():
            msg = f"delimiter {self.delimiter!r} clashes with tag=value syntax"
            raise ValueError(msg)
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            msg = f"unknown encoding: {self.encoding!r}"
            raise ValueError(msg) from exc


def default_check_config() -> CheckConfig:
    """Return a CheckConfig with every field at its default."""
    return CheckConfig()


def _check_config_from_dict(d: dict[str, Any]) -> CheckConfig:
    return CheckConfig(
        delimiter=d.get("delimiter", DISPLAY_DELIMITER),
        encoding=d.get("encoding", DEFAULT_ENCODING),
        skip_blank_lines=bool(d.get("skip_blank_lines", True)),
        output_dir=d.get("output_dir", TEST_RESULTS_FOLDER),
        write_report=bool(d.get("write_report", True)),
    )


def load_check_config(path: str | Path) -> CheckConfig:
    """Load a CheckConfig from a JSON file."""
    with Path(path).open(encoding="utf-8") as f:
        data = json.load(f)
    return _check_config_from_dict(data)
