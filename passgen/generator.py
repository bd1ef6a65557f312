#!/usr/bin/env python3
"""
Passphrase Generator - Generator
Combines the sample size calculator, an entropy source and a dictionary.
"""

from typing import List, Optional

from .dictionary import Dictionary
from .entropy_source import EntropySource
from .exceptions import EmptyDictionary, InvalidTarget
from .logger import get_logger
from .models import EntropyTarget, Passphrase, SampleResult
from .sample_size import SampleSizeCalculator


logger = get_logger(__name__)


class PassphraseGenerator:
    """Generates passphrases that meet an EntropyTarget

    The SampleResult is computed once per call and kept in
    ``last_result`` for reporting. Every unit of every passphrase is a
    separate ``randbelow`` draw, so passphrases share no randomness.
    """

    def __init__(self, calculator: Optional[SampleSizeCalculator] = None):
        self.calculator = calculator or SampleSizeCalculator()
        self.last_result: Optional[SampleResult] = None

    def plan(self, dictionary: Dictionary, target: EntropyTarget) -> SampleResult:
        """Validate the dictionary and compute the SampleResult for it."""
        size = dictionary.size()
        if size < 2:
            raise EmptyDictionary(
                f"cannot sample from a dictionary of {size} entries",
                size=size,
                name=getattr(dictionary, "name", ""),
            )
        result = self.calculator.compute(target, size)
        self.last_result = result
        return result

    def generate_passphrases(
        self,
        dictionary: Dictionary,
        target: EntropyTarget,
        entropy_source: EntropySource,
        count: int = 1,
        separator: str = " ",
    ) -> List[Passphrase]:
        """Generate `count` passphrases

        Raises:
            EmptyDictionary: dictionary holds fewer than 2 units
            InvalidTarget: bad target or count below 1
            EntropySourceFailure: the OS RNG could not be read
        """
        if count < 1:
            raise InvalidTarget(f"count must be at least 1, got {count}", target=f"count={count}")

        result = self.plan(dictionary, target)
        size = result.dictionary_size

        logger.info(
            f"Generating {count} passphrase(s) of {result.unit_count} units "
            f"from {size} entries ({result.entropy_bits:.2f} bits each) "
            f"using {getattr(entropy_source, 'name', type(entropy_source).__name__)}"
        )

        passphrases = []
        for _ in range(count):
            indices = tuple(entropy_source.randbelow(size) for _ in range(result.unit_count))
            units = tuple(dictionary.unit_at(i) for i in indices)
            passphrases.append(Passphrase(indices=indices, units=units, separator=separator))
        return passphrases

    def generate(
        self,
        dictionary: Dictionary,
        target: EntropyTarget,
        entropy_source: EntropySource,
        count: int = 1,
        separator: str = " ",
    ) -> List[str]:
        """Same as generate_passphrases but returns the joined strings."""
        return [
            p.text
            for p in self.generate_passphrases(dictionary, target, entropy_source, count, separator)
        ]
