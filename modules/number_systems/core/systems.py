from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple


DIGITS = "0123456789ABCDEF"


@dataclass(frozen=True)
class NumberSystem:
    name: str
    base: int
    label: str
    placeholder: str


NUMBER_SYSTEMS: Tuple[NumberSystem, ...] = (
    NumberSystem(name="binary", base=2, label="Binary", placeholder="1010"),
    NumberSystem(name="octal", base=8, label="Octal", placeholder="755"),
    NumberSystem(name="decimal", base=10, label="Decimal", placeholder="123"),
    NumberSystem(name="hexadecimal", base=16, label="Hexadecimal", placeholder="ABC"),
)

SUPPORTED_BASES: Tuple[int, ...] = tuple(system.base for system in NUMBER_SYSTEMS)

_BY_BASE = {system.base: system for system in NUMBER_SYSTEMS}
_BY_NAME = {system.name: system for system in NUMBER_SYSTEMS}


def is_supported_base(base: object) -> bool:
    # bool is an int subclass and 16.0 == 16, neither is a base
    if isinstance(base, bool) or not isinstance(base, int):
        return False
    return base in _BY_BASE


def system_for_base(base: object) -> NumberSystem | None:
    if not is_supported_base(base):
        return None
    return _BY_BASE[base]  # type: ignore[index]


def system_for_name(name: str | None) -> NumberSystem | None:
    if not name:
        return None
    return _BY_NAME.get(name.strip().lower())


def unsupported_base_message(base: object, *, label: str = "Base") -> str:
    allowed = ", ".join(str(item) for item in SUPPORTED_BASES)
    return f"{label} {base!r} is not supported. Use one of {allowed}."


def parse_base(value: object, *, label: str) -> Tuple[int | None, str | None]:
    """Accept a base as an int, a numeric string ("16") or a system name."""
    if value is None:
        return None, f"{label} is required."
    if is_supported_base(value):
        return value, None  # type: ignore[return-value]
    raw = str(value).strip()
    if not raw:
        return None, f"{label} is required."

    system = system_for_name(raw)
    if system is not None:
        return system.base, None

    try:
        base = int(raw)
    except ValueError:
        return None, unsupported_base_message(raw, label=label)
    if base not in _BY_BASE:
        return None, unsupported_base_message(base, label=label)
    return base, None


def digit_value(char: str) -> int:
    return DIGITS.index(char.upper())


def digit_for(value: int) -> str:
    return DIGITS[value]


def allowed_digits(base: int) -> str:
    return DIGITS[:base]


def list_systems() -> List[Dict[str, object]]:
    return [
        {
            "name": system.name,
            "base": system.base,
            "label": system.label,
            "placeholder": system.placeholder,
        }
        for system in NUMBER_SYSTEMS
    ]
