# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Exceptions raised by the deckstring codec.

All errors derive from DeckstringError, which is a ValueError: every
failure is a malformed-input failure local to the call that raised it.
"""

from contextlib import contextmanager
from typing import Iterator, Optional


class DeckstringError(ValueError):
    """Base exception for deckstring codec errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.context: Optional[str] = None
        self.index: Optional[int] = None

    def __str__(self) -> str:
        message = self.message
        if self.index is not None:
            message = f"{message} (element {self.index})"
        if self.context:
            return f"{self.context}: {message}"
        return message


class TextDecodingError(DeckstringError):
    """The deckstring is not valid base64."""
    pass


class TruncatedStreamError(DeckstringError):
    """The byte stream ended before the layout was complete."""
    pass


class VarintOverflowError(DeckstringError):
    """A varint does not fit in 64 bits."""
    pass


class InvalidReservedError(DeckstringError):
    """The reserved header field is not zero."""

    def __init__(self, value: int):
        super().__init__(f"unexpected reserved byte: {value}")
        self.value = value


class UnsupportedVersionError(DeckstringError):
    """The version header field is not the supported version."""

    def __init__(self, version: int):
        super().__init__(f"unsupported version: {version}")
        self.version = version


class InvalidCardCountError(DeckstringError):
    """A card has a count of zero."""

    def __init__(self, dbf_id: int, count: int = 0):
        super().__init__(f"invalid card count {count} for DBF ID {dbf_id}")
        self.dbf_id = dbf_id
        self.count = count


@contextmanager
def error_context(context: str) -> Iterator[None]:
    """
    Annotate any DeckstringError escaping the block with an operation name.

    Args:
        context: Operation name, e.g. "deckstring decode"

    Raises:
        DeckstringError: The original error, with its context set
    """
    try:
        yield
    except DeckstringError as e:
        e.context = context
        raise
