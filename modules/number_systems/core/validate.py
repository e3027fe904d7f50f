from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from modules.number_systems.core.systems import (
    allowed_digits,
    is_supported_base,
    unsupported_base_message,
)


EMPTY_INPUT = "empty_input"
INVALID_DIGIT = "invalid_digit"
UNSUPPORTED_BASE = "unsupported_base"


@dataclass(frozen=True)
class Ok:
    digits: str


@dataclass(frozen=True)
class Invalid:
    kind: str
    message: str
    char: str | None = None
    # zero-based index into the input as typed, whitespace included
    position: int | None = None


Validation = Union[Ok, Invalid]


def strip_whitespace(value: str) -> str:
    return "".join(value.split())


def validate(value: object, base: object) -> Validation:
    """Check that ``value`` only holds digits of ``base``.

    Whitespace anywhere in the input is ignored. On success the digits come
    back uppercased; nothing else is normalized, so leading zeros survive.
    """
    if not is_supported_base(base):
        return Invalid(UNSUPPORTED_BASE, unsupported_base_message(base))

    raw = "" if value is None else str(value)
    compact = strip_whitespace(raw)
    if not compact:
        return Invalid(EMPTY_INPUT, "Input cannot be empty.")

    allowed = set(allowed_digits(base))  # type: ignore[arg-type]
    for position, char in enumerate(raw):
        if not char.isspace() and char.upper() not in allowed:
            return Invalid(
                INVALID_DIGIT,
                f"Invalid digit '{char}' for base {base} at position {position + 1}.",
                char=char,
                position=position,
            )

    return Ok(compact.upper())
