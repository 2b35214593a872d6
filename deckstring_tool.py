#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for Hearthstone deckstrings.

Usage:
    python deckstring_tool.py decode AAECAR8GxwPJBLsFmQfZB/gIDI0B2AGoArUDhwSSBe0G6wfbCe0JgQr+DAA=
    python deckstring_tool.py encode --format 2 --hero 31 --card 141:2 --card 455
    python deckstring_tool.py canonical AAEAAgIBAAAA
"""

import argparse
import sys
from typing import List, Optional, Tuple

from hs_deckstring import Deck, decode, encode


def parse_card(text: str) -> Tuple[int, int]:
    """Parse a card argument of the form ID or ID:COUNT."""
    dbf_id, sep, count = text.partition(":")
    try:
        return int(dbf_id), (int(count) if sep else 1)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid card {text!r}, expected ID[:COUNT]")


def cmd_decode(deckstring: str):
    """Print the contents of a deckstring."""
    deck = decode(deckstring)

    print("Deck:")
    print(f"  Format: {deck.format!s}")
    print(f"  Heroes: {', '.join(str(hero) for hero in deck.heroes) or '-'}")
    print(f"  Cards:  {deck.card_count}")
    for dbf_id, count in deck.cards:
        print(f"    {count}x {dbf_id}")


def cmd_encode(fmt: int, heroes: List[int], cards: List[Tuple[int, int]]):
    """Print the deckstring for a deck given on the command line."""
    print(encode(Deck(format=fmt, heroes=heroes, cards=cards)))


def cmd_canonical(deckstring: str):
    """Print the canonical form of a deckstring."""
    print(encode(decode(deckstring)))


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Encode and decode Hearthstone deckstrings"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Show the contents of a deckstring")
    decode_parser.add_argument("deckstring", help="Base64 deckstring")

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Build a deckstring")
    encode_parser.add_argument("--format", "-f", type=int, default=2,
                               help="Game format (1=Wild, 2=Standard)")
    encode_parser.add_argument("--hero", type=int, action="append", default=[],
                               help="Hero DBF ID (repeatable)")
    encode_parser.add_argument("--card", "-c", type=parse_card, action="append", default=[],
                               help="Card as ID or ID:COUNT (repeatable)")

    # canonical command
    canonical_parser = subparsers.add_parser("canonical", help="Re-encode a deckstring canonically")
    canonical_parser.add_argument("deckstring", help="Base64 deckstring")

    args = parser.parse_args(argv)

    try:
        if args.command == "decode":
            cmd_decode(args.deckstring)
        elif args.command == "encode":
            cmd_encode(args.format, args.hero, args.card)
        elif args.command == "canonical":
            cmd_canonical(args.deckstring)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
