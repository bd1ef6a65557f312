#!/usr/bin/env python3
"""
Passphrase Generator - Sample Size Calculator
Works out how many units a passphrase needs for a target.
"""

import math

from .exceptions import InvalidTarget
from .logger import get_logger
from .models import MAX_LENGTH, EntropyTarget, SampleResult


logger = get_logger(__name__)


class SampleSizeCalculator:
    """Turns an EntropyTarget and a dictionary size into a SampleResult

    For a bits target the unit count is the smallest k with
    k * log2(N) >= bits. For a length target k is taken as given.
    Either way k may not exceed MAX_LENGTH.
    The combination count N ** k is an exact integer.
    """

    @staticmethod
    def unit_count_for_bits(bits: float, dictionary_size: int) -> int:
        """Smallest k >= 1 with k * log2(dictionary_size) >= bits."""
        bits_per_unit = math.log2(dictionary_size)
        count = max(1, math.ceil(bits / bits_per_unit))
        # the division may round across an integer in either direction
        while count * bits_per_unit < bits:
            count += 1
        while count > 1 and (count - 1) * bits_per_unit >= bits:
            count -= 1
        return count

    @classmethod
    def compute(cls, target: EntropyTarget, dictionary_size: int) -> SampleResult:
        """Compute the unit count, combinations and entropy

        Args:
            target: bits or explicit length, length wins when both are set
            dictionary_size: number of units N in the dictionary

        Returns:
            SampleResult for this target and dictionary size

        Raises:
            InvalidTarget: N < 2, bits <= 0 or not finite, length < 1, or more
                than MAX_LENGTH units needed
        """
        if dictionary_size < 2:
            raise InvalidTarget(
                f"dictionary of size {dictionary_size} carries no entropy",
                target=target.describe(),
            )

        if target.is_length:
            if target.length < 1:
                raise InvalidTarget(
                    f"length must be at least 1, got {target.length}",
                    target=target.describe(),
                )
            unit_count = target.length
        else:
            bits = target.bits
            if not math.isfinite(bits) or bits <= 0:
                raise InvalidTarget(
                    f"bits target must be positive, got {bits}",
                    target=target.describe(),
                )
            unit_count = cls.unit_count_for_bits(bits, dictionary_size)

        if unit_count > MAX_LENGTH:
            raise InvalidTarget(
                f"{unit_count} units from {dictionary_size} entries exceeds the "
                f"{MAX_LENGTH} unit limit",
                target=target.describe(),
            )

        result = SampleResult(
            unit_count=unit_count,
            dictionary_size=dictionary_size,
            combinations=dictionary_size ** unit_count,
            entropy_bits=unit_count * math.log2(dictionary_size),
        )
        logger.debug(
            f"{target.describe()} over {dictionary_size} units -> "
            f"{unit_count} units, {result.entropy_bits:.2f} bits"
        )
        return result
