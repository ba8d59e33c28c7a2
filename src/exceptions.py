"""Typed errors raised while locating and reading the checksum field."""

from enum import StrEnum

from const import CHECKSUM_TAG


class ValidationErrorKind(StrEnum):
    """Variant tag carried by every checksum validation error."""

    EMPTY_MESSAGE = "empty_message"
    FIELD_NOT_FOUND = "checksum_field_not_found"
    INVALID_FORMAT = "checksum_field_invalid_format"


class ChecksumValidationError(Exception):
    """Base class for messages that cannot be checked."""

    kind: ValidationErrorKind


class EmptyMessageError(ChecksumValidationError):
    """Raised when the message has zero length."""

    kind = ValidationErrorKind.EMPTY_MESSAGE

    def __init__(self) -> None:
        """Initialize with a fixed message."""
        super().__init__("Message is empty")


class ChecksumFieldNotFoundError(ChecksumValidationError):
    """Raised when no SOH-anchored 10= tag is present."""

    kind = ValidationErrorKind.FIELD_NOT_FOUND

    def __init__(self) -> None:
        """Initialize with a fixed message."""
        super().__init__(f"Checksum field ({CHECKSUM_TAG}) not found")


class ChecksumFieldInvalidFormatError(ChecksumValidationError):
    """Raised when the value after 10= is not three decimal digits."""

    kind = ValidationErrorKind.INVALID_FORMAT

    def __init__(self, details: str) -> None:
        """Initialize with a description of what was wrong with the value."""
        self.details = details
        super().__init__(f"Checksum field has invalid format: {details}")
