"""Length conversions to and from twips."""

from __future__ import annotations

import re

TWIPS_PER_POINT = 20
TWIPS_PER_INCH = 1440
TWIPS_PER_CM = TWIPS_PER_INCH / 2.54
EMU_PER_TWIP = 635

_LENGTH_RE = re.compile(r'^\s*(-?\d+(?:\.\d+)?)\s*(twip|dxa|pt|cm|mm|in|emu)?\s*$', re.IGNORECASE)


def pt_to_twip(value: float | None) -> float:
    if value is None:
        return 0.0
    return float(value) * TWIPS_PER_POINT


def twip_to_pt(value: float | None) -> float:
    if value is None:
        return 0.0
    return float(value) / TWIPS_PER_POINT


def inch_to_twip(value: float | None) -> float:
    if value is None:
        return 0.0
    return float(value) * TWIPS_PER_INCH


def cm_to_twip(value: float | None) -> float:
    if value is None:
        return 0.0
    return float(value) * TWIPS_PER_CM


def emu_to_twip(value: float | None) -> float:
    if value is None:
        return 0.0
    return float(value) / EMU_PER_TWIP


_CONVERTERS = {
    'twip': float,
    'dxa': float,
    'pt': pt_to_twip,
    'cm': cm_to_twip,
    'mm': lambda value: cm_to_twip(value / 10),
    'in': inch_to_twip,
    'emu': emu_to_twip,
}


def parse_length(value: int | float | str | None) -> int | float | None:
    """
    Parse a length into twips.

    Numbers are taken as twips. Strings may carry a unit suffix
    ("2.5cm", "12pt", "1in", "20mm", "914400emu"); a bare numeric string is
    twips as well.

    Raises:
        ValueError: If the value is not a recognizable length
    """
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid length: {value!r}")

    match = _LENGTH_RE.match(value)
    if match is None:
        raise ValueError(f"Invalid length: {value!r}")

    number, unit = match.groups()
    unit = (unit or 'twip').lower()
    if unit in ('twip', 'dxa') and '.' not in number:
        return int(number)
    return _CONVERTERS[unit](float(number))
