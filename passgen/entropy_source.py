#!/usr/bin/env python3
"""
Passphrase Generator - Entropy Sources
Uniform integers in [0, n) from the OS CSPRNG or from physical dice.

Both sources expose ``randbelow(n)``. Every call is independent: no
accumulator state survives from one call to the next.
"""

import secrets
from typing import Callable, Optional, Protocol

from .exceptions import EntropySourceFailure, InvalidRange
from .logger import get_logger
from .models import DiceSpec
from .prompts import DiceRollPrompt


logger = get_logger(__name__)

# Called with the number of sides, returns one roll in [1, sides]
RollReader = Callable[[int], int]


def _check_range(n: int) -> None:
    if n < 2:
        raise InvalidRange(f"cannot sample uniformly from a range of {n}", size=n)


class EntropySource(Protocol):
    """Anything that yields uniform, independent integers in [0, n)"""

    name: str

    def randbelow(self, n: int) -> int:
        ...


# ============================================================================
# OS CSPRNG
# ============================================================================

class CryptoRNG:
    """Operating system CSPRNG

    ``secrets.SystemRandom.randrange`` rejection-samples over
    ``getrandbits`` so there is no modulo bias. Any object with a
    ``randrange`` method may be injected in its place, for replaying a
    known sequence in tests.
    """

    name = "os"

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else secrets.SystemRandom()

    def randbelow(self, n: int) -> int:
        _check_range(n)
        try:
            return self._rng.randrange(n)
        except (OSError, NotImplementedError) as e:
            raise EntropySourceFailure(
                f"operating system random number generator failed: {e}",
                source=self.name,
            ) from e


# ============================================================================
# Physical dice
# ============================================================================

class DiceRNG:
    """Uniform integers from rolls of a die with 2 to 144 sides

    Rolls are folded into a mixed-radix accumulator::

        acc = acc * sides + (roll - 1)
        acc_range = acc_range * sides

    Once ``acc_range >= n``, let ``limit`` be the largest multiple of n not
    above ``acc_range``. Values below ``limit`` map onto [0, n) evenly and
    ``acc % n`` is returned. A value at or above ``limit`` is still uniform
    over the leftover ``acc_range - limit`` values, so only ``limit`` is
    subtracted and rolling continues from there instead of starting over.
    """

    name = "dice"

    def __init__(self, sides: int, read_roll: RollReader):
        self.spec = DiceSpec(sides)
        self.sides = self.spec.sides
        self._read_roll = read_roll
        self.rolls_used = 0

    def _roll(self) -> int:
        roll = self._read_roll(self.sides)
        if isinstance(roll, bool) or not isinstance(roll, int) or not 1 <= roll <= self.sides:
            raise ValueError(f"roll {roll!r} outside 1-{self.sides}")
        self.rolls_used += 1
        return roll - 1

    def randbelow(self, n: int) -> int:
        _check_range(n)

        acc = 0
        acc_range = 1
        rolls = 0
        while True:
            while acc_range < n:
                acc = acc * self.sides + self._roll()
                acc_range *= self.sides
                rolls += 1

            limit = acc_range - acc_range % n
            if acc < limit:
                logger.debug(f"range {n}: accepted after {rolls} rolls")
                return acc % n

            acc -= limit
            acc_range -= limit


def create_entropy_source(
    dice_sides: Optional[int] = None,
    read_roll: Optional[RollReader] = None,
) -> EntropySource:
    """Pick the OS CSPRNG, or dice when a number of sides is given."""
    if dice_sides is None:
        return CryptoRNG()
    if read_roll is None:
        read_roll = DiceRollPrompt()
    return DiceRNG(dice_sides, read_roll)
