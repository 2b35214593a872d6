# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Hearthstone deckstrings - Python codec library.

This package encodes and decodes Hearthstone deckstrings, the compact
base64 strings the game uses to share deck lists. Heroes and cards are
identified by DBF IDs; combine them with a card database such as
HearthstoneJSON for names, costs and classes.

Example usage:
    from hs_deckstring import Deck, Format, decode, encode

    deck = decode("AAECAR8GxwPJBLsFmQfZB/gIDI0B2AGoArUDhwSSBe0G6wfbCe0JgQr+DAA=")
    print(f"Format: {deck.format}, heroes: {deck.heroes}")

    for dbf_id, count in deck.cards:
        print(f"{count}x {dbf_id}")

    deckstring = encode(Deck(format=Format.WILD, heroes=[7], cards=[(1, 2)]))
"""

from .codec import decode, decode_bytes, encode, encode_bytes
from .deck import RESERVED, VERSION, Card, Deck, Format
from .errors import (
    DeckstringError,
    TextDecodingError,
    TruncatedStreamError,
    VarintOverflowError,
    InvalidReservedError,
    UnsupportedVersionError,
    InvalidCardCountError,
)
from .varint import (
    MAX_UINT64,
    VarintReader,
    VarintWriter,
    encode_varint,
    decode_varint,
)

__version__ = "0.1.0"

__all__ = [
    # Codec
    "decode",
    "decode_bytes",
    "encode",
    "encode_bytes",
    # Deck model
    "Card",
    "Deck",
    "Format",
    "RESERVED",
    "VERSION",
    # Errors
    "DeckstringError",
    "TextDecodingError",
    "TruncatedStreamError",
    "VarintOverflowError",
    "InvalidReservedError",
    "UnsupportedVersionError",
    "InvalidCardCountError",
    # Varint
    "MAX_UINT64",
    "VarintReader",
    "VarintWriter",
    "encode_varint",
    "decode_varint",
]
