# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Deck data model.

IDs are Hearthstone DBF IDs, opaque unsigned 64-bit integers. The codec
never looks them up; card names, costs and classes come from an
external database such as HearthstoneJSON.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Tuple, Union

RESERVED = 0
VERSION = 1


class Format(IntEnum):
    """Game formats with a name. Any unsigned 64-bit value is accepted."""
    WILD = 1
    STANDARD = 2

    def __str__(self) -> str:
        return self.name


Card = Tuple[int, int]


def format_from_value(value: int) -> Union[Format, int]:
    """Return the Format member for value, or value itself if unnamed."""
    try:
        return Format(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class Deck:
    """
    A deck: game format, hero DBF IDs and (DBF ID, count) card pairs.

    Heroes and cards keep the order they were given in. Decoded decks
    are canonical: heroes ascending, cards ascending by DBF ID.
    """
    format: int = 0
    heroes: Tuple[int, ...] = field(default_factory=tuple)
    cards: Tuple[Card, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "heroes", tuple(self.heroes))
        object.__setattr__(
            self, "cards", tuple((dbf_id, count) for dbf_id, count in self.cards)
        )

    @property
    def card_count(self) -> int:
        """Total number of cards, counting copies."""
        return sum(count for _, count in self.cards)

    def canonical(self) -> "Deck":
        """Return a copy with heroes and cards in encoding order."""
        return Deck(
            format=self.format,
            heroes=sorted(self.heroes),
            cards=sorted(self.cards, key=lambda card: card[0]),
        )
