"""Unit conversion helpers."""

from __future__ import annotations

from docx.shared import Cm, Inches, Length, Mm, Pt

from .exceptions import InvalidArgumentError

CM_PER_INCH = 2.54
TWIPS_PER_POINT = 20

_LENGTH_UNITS = {
    "in": Inches,
    "cm": Cm,
    "mm": Mm,
    "pt": Pt,
}


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def inches_from_cm(x: float | list[float] | tuple[float, ...]) -> float | list[float]:
    """Convert centimeters to inches.

    A list or tuple is converted element-wise and returned as a list.
    """
    if isinstance(x, (list, tuple)):
        return [inches_from_cm(item) for item in x]
    if not _is_number(x):
        raise InvalidArgumentError(f"'x' must be numeric, got {x!r}")
    return x / CM_PER_INCH


def points_to_twips(value: float) -> int:
    """Convert points to twips (1/20th of a point)."""
    return int(round(value * TWIPS_PER_POINT))


def length(value: float, unit: str = "in") -> Length:
    """Return a python-docx length for ``value`` expressed in ``unit``."""
    if unit not in _LENGTH_UNITS:
        raise InvalidArgumentError(f"'unit' must be one of {', '.join(_LENGTH_UNITS)}, got {unit!r}")
    if not _is_number(value):
        raise InvalidArgumentError(f"length must be numeric, got {value!r}")
    return _LENGTH_UNITS[unit](value)
