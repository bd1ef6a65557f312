#!/usr/bin/env python3
"""
Passphrase Generator - Data Models
Targets, dice, sampling results and configuration.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .exceptions import ConfigurationError, InvalidDiceSpec, InvalidTarget


MIN_DICE_SIDES = 2
MAX_DICE_SIDES = 144
MAX_LENGTH = 65535
DEFAULT_BITS = 72.0
DEFAULT_DICTIONARY = "eff"


# ============================================================================
# Target Models
# ============================================================================

@dataclass(frozen=True)
class EntropyTarget:
    """Either a minimum number of bits or an explicit unit count

    When both are set, the unit count wins.
    """
    bits: Optional[float] = None       # minimum entropy in bits
    length: Optional[int] = None       # explicit number of units

    def __post_init__(self):
        if self.bits is None and self.length is None:
            raise InvalidTarget("either a bits target or a length is required")

    @classmethod
    def from_bits(cls, bits: float) -> "EntropyTarget":
        return cls(bits=bits)

    @classmethod
    def from_length(cls, length: int) -> "EntropyTarget":
        return cls(length=length)

    @classmethod
    def resolve(cls, bits: Optional[float], length: Optional[int]) -> "EntropyTarget":
        """Build the target the generator will use; length overrides bits."""
        if length is not None:
            return cls.from_length(length)
        return cls.from_bits(bits if bits is not None else DEFAULT_BITS)

    @property
    def is_length(self) -> bool:
        return self.length is not None

    def describe(self) -> str:
        if self.is_length:
            return f"length={self.length}"
        return f"bits={self.bits}"


@dataclass(frozen=True)
class DiceSpec:
    """A physical die with `sides` faces numbered 1..sides"""
    sides: int

    def __post_init__(self):
        if isinstance(self.sides, bool) or not isinstance(self.sides, int):
            raise InvalidDiceSpec(f"dice sides must be an integer, got {self.sides!r}")
        if not MIN_DICE_SIDES <= self.sides <= MAX_DICE_SIDES:
            raise InvalidDiceSpec(
                f"dice must have between {MIN_DICE_SIDES} and {MAX_DICE_SIDES} sides, "
                f"got {self.sides}",
                sides=self.sides,
            )


# ============================================================================
# Result Models
# ============================================================================

@dataclass(frozen=True)
class SampleResult:
    """How many units to draw and what that buys"""
    unit_count: int                    # units per passphrase
    dictionary_size: int               # N
    combinations: int                  # N ** unit_count, exact
    entropy_bits: float                # log2(combinations)

    @property
    def bits_per_unit(self) -> float:
        return math.log2(self.dictionary_size)


@dataclass(frozen=True)
class Passphrase:
    """One generated passphrase

    Indices are positions in the dictionary, drawn independently and
    uniformly with replacement.
    """
    indices: Tuple[int, ...]
    units: Tuple[str, ...]
    separator: str = " "

    @property
    def text(self) -> str:
        return self.separator.join(self.units)

    def __len__(self) -> int:
        return len(self.units)

    def __str__(self) -> str:
        return self.text


# ============================================================================
# Configuration Models
# ============================================================================

@dataclass
class GeneratorConfig:
    """Resolved command line configuration"""
    bits: float = DEFAULT_BITS               # entropy target
    length: Optional[int] = None             # overrides bits
    dictionary: str = DEFAULT_DICTIONARY     # built-in dictionary name
    file: Optional[str] = None               # external word list
    separator: Optional[str] = None          # None uses the dictionary default
    count: int = 1                           # passphrases to print
    dice_sides: Optional[int] = None         # dice mode when set
    verbose: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def validate(self) -> None:
        """Check option ranges, raising the matching error on the first problem."""
        if self.count < 1:
            raise ConfigurationError(f"count must be at least 1, got {self.count}", "count")
        if self.length is not None and not 1 <= self.length <= MAX_LENGTH:
            raise ConfigurationError(
                f"length must be between 1 and {MAX_LENGTH}, got {self.length}", "length"
            )
        if self.length is None and not (math.isfinite(self.bits) and self.bits > 0):
            raise ConfigurationError(f"bits must be a positive number, got {self.bits}", "bits")
        if self.dice_sides is not None:
            DiceSpec(self.dice_sides)

    def target(self) -> EntropyTarget:
        return EntropyTarget.resolve(self.bits, self.length)
