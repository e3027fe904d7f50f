from __future__ import annotations

from typing import List, Tuple

from modules.number_systems.core.systems import digit_for


ZERO_STEP = "0 is zero in every base, so no conversion is needed."

# Past this size the traces summarize instead of listing every intermediate value.
NARRATED_BITS = 256

_FORMAT_CODES = {2: "b", 8: "o", 16: "X"}
_DECIMAL_CHUNK = 10**18


def narrated_in_full(magnitude: int) -> bool:
    return magnitude.bit_length() <= NARRATED_BITS


def decimal_text(value: int) -> str:
    # str(int) raises once a value passes sys.get_int_max_str_digits().
    try:
        return str(value)
    except ValueError:
        pass
    chunks: List[int] = []
    while value:
        value, chunk = divmod(value, _DECIMAL_CHUNK)
        chunks.append(chunk)
    head = str(chunks.pop())
    return head + "".join(f"{chunk:018d}" for chunk in reversed(chunks))


def to_digits(magnitude: int, base: int) -> str:
    if base == 10:
        return decimal_text(magnitude)
    code = _FORMAT_CODES.get(base)
    if code is not None:
        return format(magnitude, code)
    if magnitude == 0:
        return "0"
    digits: List[str] = []
    while magnitude > 0:
        magnitude, remainder = divmod(magnitude, base)
        digits.append(digit_for(remainder))
    return "".join(reversed(digits))


def encode(magnitude: int, base: int, *, step_number: int = 1) -> Tuple[str, List[str]]:
    """Write ``magnitude`` in ``base`` by repeated division.

    Returns the uppercase digits and the narrated steps: a ``Step N`` header,
    one indented line per division and a closing line with the remainders
    read bottom to top. Zero short-circuits to a single explanatory line.
    Values past ``NARRATED_BITS`` get one summary line in place of the
    division run.
    """
    if magnitude == 0:
        return "0", [ZERO_STEP]

    if not narrated_in_full(magnitude):
        digits = to_digits(magnitude, base)
        return digits, [
            f"Step {step_number}: Convert the decimal value to base {base}",
            f"   {len(digits)} divisions by {base}, each remainder giving one digit",
            f"   Reading remainders from bottom to top: {digits}",
        ]

    steps = [f"Step {step_number}: Convert {magnitude} (decimal) to base {base}"]
    collected: List[str] = []
    current = magnitude
    while current > 0:
        quotient, remainder = divmod(current, base)
        digit = digit_for(remainder)
        steps.append(f"   {current} ÷ {base} = {quotient} remainder {digit}")
        collected.append(digit)
        current = quotient

    # remainders arrive least significant first
    digits = "".join(reversed(collected))
    steps.append(f"   Reading remainders from bottom to top: {digits}")
    return digits, steps
