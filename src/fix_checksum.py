"""Checksum generation and validation for the FIX tag 10 field."""

from __future__ import annotations

from dataclasses import dataclass

from const import (
    CHECKSUM_FIELD_PREFIX,
    CHECKSUM_MODULUS,
    CHECKSUM_WIDTH,
    DEFAULT_ENCODING,
)
from exceptions import (
    ChecksumFieldInvalidFormatError,
    ChecksumFieldNotFoundError,
    EmptyMessageError,
)


@dataclass(frozen=True)
class ChecksumField:
    """Location and values of a checksum field found in a message."""

    offset: int  # index of the SOH preceding "10="
    expected: int
    received: int

    @property
    def is_valid(self) -> bool:
        """Return True when the stored checksum matches the calculated one."""
        return self.expected == self.received


def _to_bytes(data: bytes | str) -> bytes:
    if not isinstance(data, str):
        return bytes(data)
    # surrogateescape restores the raw bytes behind undecodable argv/file text
    try:
        return data.encode(DEFAULT_ENCODING, errors="surrogateescape")
    except UnicodeEncodeError:
        # lone surrogates outside U+DC80..U+DCFF
        return data.encode(DEFAULT_ENCODING, errors="surrogatepass")


def calculate_checksum(data: bytes | str) -> int:
    """Calculate checksum by summing all bytes in the data modulo 256."""
    return sum(_to_bytes(data)) % CHECKSUM_MODULUS


def generate(body: bytes | str) -> str:
    """Return the zero-padded three digit checksum of an outbound body."""
    return f"{calculate_checksum(body):0{CHECKSUM_WIDTH}d}"


def _parse_value(window: bytes) -> int:
    # int() alone would accept "+12", " 12" and "1_2"
    if not window.isdigit():
        msg = f"invalid literal for checksum value: {window!r}"
        raise ValueError(msg)
    return int(window)


def read_checksum_field(message: bytes | str) -> ChecksumField:
    """
    Locate the checksum field and compute the checksum it should hold.

    The field is the first occurrence of SOH followed by ``10=``. The covered
    span runs from the start of the message up to and including that SOH,
    and the stored value is the three bytes after ``10=``. A trailing SOH
    after the value is not required.

    Raises
    ------
        EmptyMessageError: The message has zero length.
        ChecksumFieldNotFoundError: No SOH-anchored ``10=`` is present.
        ChecksumFieldInvalidFormatError: The value is truncated or is not
            three decimal digits.

    """
    data = _to_bytes(message)
    if not data:
        raise EmptyMessageError

    offset = data.find(CHECKSUM_FIELD_PREFIX)
    if offset < 0:
        raise ChecksumFieldNotFoundError

    start = offset + len(CHECKSUM_FIELD_PREFIX)
    end = start + CHECKSUM_WIDTH
    if end > len(data):
        available = len(data) - start
        details = f"expected {CHECKSUM_WIDTH} digits, got {available} byte(s)"
        raise ChecksumFieldInvalidFormatError(details)

    try:
        received = _parse_value(data[start:end])
    except ValueError as exc:
        raise ChecksumFieldInvalidFormatError(str(exc)) from exc

    return ChecksumField(
        offset=offset,
        expected=calculate_checksum(data[: offset + 1]),
        received=received,
    )


def validate(message: bytes | str) -> bool:
    """
    Validate the checksum of an inbound FIX message.

    Returns True when the stored value matches, False on a mismatch. Messages
    that cannot be checked raise a ChecksumValidationError subclass.
    """
    return read_checksum_field(message).is_valid
