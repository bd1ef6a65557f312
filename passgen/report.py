#!/usr/bin/env python3
"""
Passphrase Generator - Strength Report
Strength labels and attack time estimates for a SampleResult.

All arithmetic on combination counts stays in exact integers.
"""

import sys
from typing import List, Tuple

from .dictionary import Dictionary
from .models import SampleResult


STRENGTH_THRESHOLDS = [
    (29, "very weak"),
    (36, "weak"),
    (49, "somewhat weak"),
    (60, "reasonable"),
    (70, "strong"),
    (127, "very strong"),
    (256, "cryptographic"),
]

# (limit before moving to the next unit, singular, plural), starting from minutes
DURATION_UNITS = [
    (60, "minute", "minutes"),
    (24, "hour", "hours"),
    (30, "day", "days"),
    (12, "month", "months"),
    (10, "year", "years"),
    (10, "decade", "decades"),
    (10, "century", "centuries"),
    (1000, "millennium", "millennia"),
    (1000, "million year", "million years"),
    (1000, "billion year", "billion years"),
]


def password_strength(entropy_bits: float) -> str:
    bits = int(entropy_bits)
    for threshold, label in STRENGTH_THRESHOLDS:
        if bits < threshold:
            return label
    return "overkill"


def crack_times(combinations: int) -> List[Tuple[str, int]]:
    """Seconds to exhaust the search space for a few attacker profiles."""
    return [
        ("Online, unthrottled (10/s)", combinations // 10),
        ("Online, throttled (1/s)", combinations),
        ("Offline, slow (1e4/s)", combinations // 1000),
        ("Offline, fast (1e10/s)", combinations // 10_000_000_000),
        ("Offline, extreme (1e12/s)", combinations // 1_000_000_000_000),
    ]


def human_duration(seconds: int) -> str:
    if seconds < 1:
        return "less than a second"
    if seconds < 60:
        return "less than a minute"

    interval = seconds // 60
    for limit, single, plural in DURATION_UNITS:
        if interval < limit:
            return f"{interval} {single if interval == 1 else plural}"
        interval //= limit

    return "trillions of years"


def exact_decimal(value: int) -> str:
    """Full decimal digits of value, lifting the int-to-str digit limit of Python 3.11+"""
    if not hasattr(sys, "set_int_max_str_digits"):
        return str(value)
    limit = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        return str(value)
    finally:
        sys.set_int_max_str_digits(limit)


def build_report(dictionary: Dictionary, result: SampleResult) -> List[str]:
    """Render the verbose report as '#'-prefixed lines"""
    lines = [
        f"# {'Dictionary':>12}: {dictionary.name}",
    ]
    if dictionary.description:
        lines.append(f"# {'Description':>12}: {dictionary.description.replace(chr(10), '')}")
    lines += [
        f"# {'Combinations':>12}: {result.dictionary_size}^{result.unit_count} = {exact_decimal(result.combinations)}",
        f"# {'Entropy':>12}: {result.entropy_bits:.2f} bits ({password_strength(result.entropy_bits)})",
        "#",
        "# Attack time estimate:",
    ]
    for attack, seconds in crack_times(result.combinations):
        lines.append(f"# {attack:>28}: {human_duration(seconds)}")
    lines.append("#")
    return lines
