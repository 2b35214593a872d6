# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Deckstring encoding and decoding.

A deckstring is base64 text over a flat run of varints:

    reserved (0), version, format,
    hero count, heroes...,
    count of 1x cards, their DBF IDs...,
    count of 2x cards, their DBF IDs...,
    count of other cards, (DBF ID, count) pairs...

Cards with one or two copies carry no count field; only unusual counts
pay for an explicit one. Encoding is canonical: heroes and each card
group are written in ascending DBF ID order, so equal decks always
produce identical deckstrings.
"""

import base64
import binascii
import io
from typing import List, Union

from .deck import RESERVED, VERSION, Card, Deck, format_from_value
from .errors import (
    InvalidCardCountError,
    InvalidReservedError,
    TextDecodingError,
    UnsupportedVersionError,
    error_context,
)
from .varint import VarintReader, VarintWriter

# Group 3 holds every card whose count is not 1 or 2
EXPLICIT_COUNT_GROUP = 3


def _card_group(count: int) -> int:
    """Return the group (1, 2 or 3) a card with this count is written in."""
    return count if count < EXPLICIT_COUNT_GROUP else EXPLICIT_COUNT_GROUP


def decode_bytes(data: bytes) -> Deck:
    """
    Decode the binary (unframed) form of a deckstring.

    Args:
        data: Raw deckstring bytes

    Returns:
        Canonical Deck

    Raises:
        TruncatedStreamError: If data ends before the layout is complete
        VarintOverflowError: If a field does not fit in 64 bits
        InvalidReservedError: If the reserved field is not zero
        UnsupportedVersionError: If the version is not VERSION
        InvalidCardCountError: If an explicit card count is zero
    """
    varint = VarintReader(io.BytesIO(data))

    reserved, version, fmt, hero_count = varint.read_many(4)
    if reserved != RESERVED:
        raise InvalidReservedError(reserved)
    if version != VERSION:
        raise UnsupportedVersionError(version)

    heroes = sorted(varint.read_many(hero_count))

    cards: List[Card] = []
    for group in range(1, EXPLICIT_COUNT_GROUP + 1):
        length = varint.read_one()
        for _ in range(length):
            dbf_id = varint.read_one()
            count = group
            if group == EXPLICIT_COUNT_GROUP:
                count = varint.read_one()
                if count < 1:
                    raise InvalidCardCountError(dbf_id, count)
            cards.append((dbf_id, count))

    cards.sort(key=lambda card: card[0])

    return Deck(format=format_from_value(fmt), heroes=heroes, cards=cards)


def encode_bytes(deck: Deck) -> bytes:
    """
    Encode a deck to the binary (unframed) form of a deckstring.

    Args:
        deck: Deck to encode; heroes and cards may be in any order

    Returns:
        Canonical deckstring bytes

    Raises:
        InvalidCardCountError: If any card has a count below 1
    """
    # Gather cards into groups based on their count in the deck
    groups: List[List[Card]] = [[], [], []]
    for dbf_id, count in deck.cards:
        if count < 1:
            raise InvalidCardCountError(dbf_id, count)
        groups[_card_group(count) - 1].append((dbf_id, count))

    buf = io.BytesIO()
    varint = VarintWriter(buf)

    varint.write_many([RESERVED, VERSION, deck.format, len(deck.heroes)])
    varint.write_many(sorted(deck.heroes))

    for group, cards in enumerate(groups, start=1):
        cards.sort(key=lambda card: card[0])
        varint.write_one(len(cards))
        for dbf_id, count in cards:
            varint.write_one(dbf_id)
            if group == EXPLICIT_COUNT_GROUP:
                varint.write_one(count)

    varint.flush()
    return buf.getvalue()


def decode(deckstring: Union[str, bytes]) -> Deck:
    """
    Decode a deckstring into a deck.

    Decodings are canonical: the deck's heroes and cards are ordered by
    DBF ID ascending.

    Args:
        deckstring: Base64 deckstring; surrounding whitespace is ignored

    Returns:
        Decoded Deck

    Raises:
        TextDecodingError: If the deckstring is not valid base64
        DeckstringError: If the decoded bytes are malformed (see
            decode_bytes)
    """
    with error_context("deckstring decode"):
        return decode_bytes(_unframe(deckstring))


def encode(deck: Deck) -> str:
    """
    Encode a deck into a deckstring.

    Args:
        deck: Deck to encode

    Returns:
        Canonical base64 deckstring

    Raises:
        InvalidCardCountError: If any card has a count below 1
    """
    with error_context("deckstring encode"):
        return _frame(encode_bytes(deck))


def _frame(data: bytes) -> str:
    """Apply the base64 text encoding."""
    return base64.b64encode(data).decode("ascii")


def _unframe(deckstring: Union[str, bytes]) -> bytes:
    """Remove the base64 text encoding."""
    try:
        return base64.b64decode(deckstring.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise TextDecodingError(f"invalid base64: {e}") from e
