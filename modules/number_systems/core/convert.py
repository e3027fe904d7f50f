from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from modules.number_systems.core.decode import decode, decode_steps
from modules.number_systems.core.encode import encode, to_digits
from modules.number_systems.core.systems import (
    NUMBER_SYSTEMS,
    system_for_base,
    unsupported_base_message,
)
from modules.number_systems.core.validate import Invalid, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    result: str
    steps: Tuple[str, ...]
    is_valid: bool
    error_message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "result": self.result,
            "steps": list(self.steps),
            "isValid": self.is_valid,
            "errorMessage": self.error_message,
        }


@dataclass(frozen=True)
class AllConversionsResult:
    binary: str
    octal: str
    decimal: str
    hexadecimal: str
    is_valid: bool
    error_message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "binary": self.binary,
            "octal": self.octal,
            "decimal": self.decimal,
            "hexadecimal": self.hexadecimal,
            "isValid": self.is_valid,
            "errorMessage": self.error_message,
        }


def invalid_result(message: str) -> ConversionResult:
    return ConversionResult(result="", steps=(), is_valid=False, error_message=message)


def invalid_all_result(message: str) -> AllConversionsResult:
    return AllConversionsResult(
        binary="",
        octal="",
        decimal="",
        hexadecimal="",
        is_valid=False,
        error_message=message,
    )


def _read_magnitude(value: object, from_base: object) -> Tuple[str, int | None, str | None]:
    outcome = validate(value, from_base)
    if isinstance(outcome, Invalid):
        logger.debug("Rejected %r for base %r: %s", value, from_base, outcome.kind)
        return "", None, outcome.message
    return outcome.digits, decode(outcome.digits, from_base), None  # type: ignore[arg-type]


def _convert_with_trace(
    digits: str, from_base: int, to_base: int, magnitude: int
) -> Tuple[str, List[str]]:
    if magnitude == 0:
        return encode(magnitude, to_base)
    if from_base == to_base:
        label = system_for_base(from_base).label  # type: ignore[union-attr]
        return to_digits(magnitude, to_base), [f"No conversion needed: {digits} is already in {label}"]

    steps: List[str] = []
    if from_base != 10:
        steps.extend(decode_steps(digits, from_base, magnitude, step_number=1))
    # dividing by ten to print a decimal teaches nothing
    if to_base == 10:
        return to_digits(magnitude, to_base), steps

    if steps:
        steps.append("")
    result, division = encode(magnitude, to_base, step_number=2 if steps else 1)
    steps.extend(division)
    return result, steps


def convert_number(value: object, from_base: object, to_base: object) -> ConversionResult:
    if system_for_base(from_base) is None:
        return invalid_result(unsupported_base_message(from_base, label="Source base"))
    if system_for_base(to_base) is None:
        return invalid_result(unsupported_base_message(to_base, label="Target base"))

    digits, magnitude, error = _read_magnitude(value, from_base)
    if error or magnitude is None:
        return invalid_result(error or "Invalid input.")

    result, steps = _convert_with_trace(digits, from_base, to_base, magnitude)  # type: ignore[arg-type]
    return ConversionResult(
        result=result,
        steps=tuple(steps),
        is_valid=True,
        error_message="",
    )


def convert_to_all_systems(value: object, from_base: object) -> AllConversionsResult:
    if system_for_base(from_base) is None:
        return invalid_all_result(unsupported_base_message(from_base, label="Source base"))

    _, magnitude, error = _read_magnitude(value, from_base)
    if error or magnitude is None:
        return invalid_all_result(error or "Invalid input.")

    encoded = {system.name: to_digits(magnitude, system.base) for system in NUMBER_SYSTEMS}
    return AllConversionsResult(
        binary=encoded["binary"],
        octal=encoded["octal"],
        decimal=encoded["decimal"],
        hexadecimal=encoded["hexadecimal"],
        is_valid=True,
        error_message="",
    )


def conversion_pairs() -> List[Dict[str, object]]:
    pairs: List[Dict[str, object]] = []
    for source in NUMBER_SYSTEMS:
        for target in NUMBER_SYSTEMS:
            if source is target:
                continue
            pairs.append(
                {
                    "from": source.name,
                    "to": target.name,
                    "from_base": source.base,
                    "to_base": target.base,
                    "label": f"{source.label} to {target.label}",
                }
            )
    return pairs


def swap(value: object, from_base: int, to_base: int) -> Tuple[str, int, int]:
    """Inputs for the reverse conversion; carries the result over when valid."""
    converted = convert_number(value, from_base, to_base)
    carried = converted.result if converted.is_valid else ("" if value is None else str(value))
    return carried, to_base, from_base
