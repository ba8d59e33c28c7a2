"""Configuration for pytest."""

import sys
from pathlib import Path

import pytest

SOH = "\x01"

HEARTBEAT_FIELDS = [
    "8=FIX.4.2",
    "9=73",
    "35=0",
    "49=BRKR",
    "56=INVMGR",
    "34=235",
    "52=19980604-07:58:28",
    "112=19980604-07:58:28",
]


# Flat module layout: put src/ on sys.path
def _find_src_dir(start: Path, max_up: int = 6) -> Path | None:
    p = start.resolve()
    for _ in range(max_up):
        candidate = p / "src"
        if candidate.exists():
            return candidate
        p = p.parent
    return None


src_dir = _find_src_dir(Path(__file__).parent)
if src_dir:
    sys.path.insert(0, str(src_dir))


@pytest.fixture
def heartbeat_body() -> str:
    """FIX 4.2 heartbeat body up to, but not including, the checksum field."""
    return "".join(f"{field}{SOH}" for field in HEARTBEAT_FIELDS)
