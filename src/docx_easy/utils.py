"""Shared helpers: console output, colors and per-item parameter normalization."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from docx.shared import RGBColor
from PIL import ImageColor

from .exceptions import InvalidArgumentError, LengthMismatchError

TRANSPARENT = "transparent"


def print_info(message: str) -> None:
    """Print info message."""
    print(f"[INFO] {message}")


def print_error(message: str) -> None:
    """Print error message."""
    print(f"[ERROR] {message}")


def color_to_rgb(color: str) -> RGBColor | None:
    """Convert a color name or ``#RRGGBB`` string to an ``RGBColor``.

    Returns None for ``"transparent"`` and None.
    """
    if color is None or color == TRANSPARENT:
        return None
    if not isinstance(color, str):
        raise InvalidArgumentError(f"color must be a string, got {color!r}")
    try:
        rgb = ImageColor.getrgb(color)
    except ValueError:
        raise InvalidArgumentError(f"unknown color: {color!r}") from None
    r, g, b = rgb[:3]
    return RGBColor(r, g, b)


def color_to_hex(color: str) -> str | None:
    """Convert a color to the ``RRGGBB`` form used in WordprocessingML."""
    rgb = color_to_rgb(color)
    return None if rgb is None else str(rgb)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def expand_to_length(value: Any, n: int, name: str) -> list:
    """Normalize a style parameter to a list of exactly ``n`` values.

    Scalars and one-element sequences are repeated, sequences of length ``n``
    are copied, anything else raises ``LengthMismatchError``.
    """
    if not _is_sequence(value):
        return [value] * n
    if len(value) == 1:
        return list(value) * n
    if len(value) != n:
        raise LengthMismatchError(name, n, len(value))
    return list(value)


def flags_from_indices(selection: bool | Iterable[int] | None, n: int, name: str) -> list[bool]:
    """Turn a selection of 1-based positions into ``n`` boolean flags.

    ``None`` selects nothing and a bool applies to every position.
    """
    if selection is None:
        return [False] * n
    if isinstance(selection, bool):
        return [selection] * n
    if isinstance(selection, int):
        selection = [selection]
    if isinstance(selection, str) or not isinstance(selection, Iterable):
        raise InvalidArgumentError(f"'{name}' must be None, a bool or positions, got {selection!r}")
    flags = [False] * n
    for index in selection:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgumentError(f"'{name}' must contain integer positions, got {index!r}")
        if not 1 <= index <= n:
            raise InvalidArgumentError(f"'{name}' position {index} is outside 1..{n}")
        flags[index - 1] = True
    return flags
