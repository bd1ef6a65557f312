#!/usr/bin/env python3
"""
Passphrase Generator - Dice Advisor
Ranks common dice by how many rolls they need per dictionary unit.
"""

from dataclasses import dataclass
from typing import List

from .exceptions import InvalidRange
from .models import DiceSpec


COMMON_DICE = [3, 4, 6, 8, 10, 12, 20, 30, 100]


@dataclass(frozen=True)
class CandidateDice:
    """Expected cost of drawing one unit with a given die

    ``rolls`` is the smallest r with sides ** r >= limit. ``reroll_pct`` is
    the share of those outcomes that land in the remainder zone.
    """
    sides: int
    rolls: int
    reroll_pct: float
    average_rolls: float

    @classmethod
    def from_sides_and_limit(cls, sides: int, limit: int) -> "CandidateDice":
        DiceSpec(sides)
        if limit < 2:
            raise InvalidRange(f"cannot plan dice for a range of {limit}", size=limit)

        rolls = 1
        total = sides
        while total < limit:
            rolls += 1
            total *= sides

        reroll_pct = (total - limit) / total
        return cls(
            sides=sides,
            rolls=rolls,
            reroll_pct=reroll_pct,
            average_rolls=rolls + rolls * reroll_pct,
        )

    @classmethod
    def ordered_for_limit(cls, limit: int) -> List["CandidateDice"]:
        options = [cls.from_sides_and_limit(sides, limit) for sides in COMMON_DICE]
        options.sort(key=lambda dice: (dice.average_rolls, dice.sides))
        return options

    def describe(self) -> str:
        return (
            f"d{self.sides}: {self.rolls} rolls per unit, "
            f"{self.reroll_pct:.1%} reroll chance, ~{self.average_rolls:.2f} rolls on average"
        )
