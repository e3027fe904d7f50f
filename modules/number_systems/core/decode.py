from __future__ import annotations

from typing import List

from modules.number_systems.core.encode import (
    NARRATED_BITS,
    decimal_text,
    narrated_in_full,
)
from modules.number_systems.core.systems import digit_value


def decode(digits: str, base: int) -> int:
    # Only call with input that validate() accepted.
    magnitude = 0
    for char in digits:
        magnitude = magnitude * base + digit_value(char)
    return magnitude


def expansion_terms(digits: str, base: int) -> List[str]:
    terms: List[str] = []
    last = len(digits) - 1
    weight = 1
    for index in range(last, -1, -1):
        value = digit_value(digits[index])
        terms.append(f"{value} × {base}^{last - index} = {value * weight}")
        weight *= base
    terms.reverse()
    return terms


def _summary_terms(digits: str, base: int) -> str:
    last = len(digits) - 1
    first = f"{digit_value(digits[0])} × {base}^{last}"
    final = f"{digit_value(digits[-1])} × {base}^0"
    return f"{first} + … + {final} ({len(digits)} terms)"


def decode_steps(digits: str, base: int, magnitude: int, *, step_number: int = 1) -> List[str]:
    # leading zeros can make the digits long while the magnitude stays small
    if narrated_in_full(magnitude) and len(digits) <= NARRATED_BITS:
        expansion = " + ".join(expansion_terms(digits, base))
    else:
        expansion = _summary_terms(digits, base)
    return [
        f"Step {step_number}: Convert {digits} (base {base}) to decimal",
        "   " + expansion,
        f"   = {decimal_text(magnitude)} (decimal)",
    ]
