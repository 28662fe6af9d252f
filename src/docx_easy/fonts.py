"""Named font sizes and font-size resolution."""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType

from .exceptions import InvalidArgumentError, TypeMismatchError

# Chinese font size mapping (font name -> point size)
CHINESE_FONT_SIZE_MAP: Mapping[str, float] = MappingProxyType(
    {
        "初号": 42,
        "小初": 36,
        "一号": 26,
        "小一": 24,
        "二号": 22,
        "小二": 18,
        "三号": 16,
        "小三": 15,
        "四号": 14,
        "小四": 12,
        "五号": 10.5,
        "小五": 9,
        "六号": 7.5,
        "小六": 6.5,
        "七号": 5.5,
        "八号": 5,
    }
)


def _parse_number(value: str) -> float | None:
    try:
        number = float(value.strip())
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def _positive_points(number: float, value) -> float:
    if not math.isfinite(number) or number <= 0:
        raise InvalidArgumentError(f"'font_size' must be a positive number of points, got {value!r}")
    return number


def parse_font_size(value: int | float | str, mapping: Mapping[str, float] = CHINESE_FONT_SIZE_MAP) -> float:
    """Parse one font size, supporting both numeric (points) and named sizes.

    Numbers are taken as points, numeric strings are parsed, and any other
    string must be an exact key of ``mapping``.
    """
    if isinstance(value, bool):
        raise TypeMismatchError(f"font size must be a number or a string, got {value!r}")
    if isinstance(value, (int, float)):
        return _positive_points(float(value), value)
    if isinstance(value, str):
        number = _parse_number(value)
        if number is not None:
            return _positive_points(number, value)
        if value in mapping:
            return float(mapping[value])
        raise InvalidArgumentError(f"'font_size' must be a number or one of '{', '.join(mapping)}', got {value!r}")
    raise TypeMismatchError(f"font size must be a number or a string, got {type(value).__name__}")


def resolve_font_size(
    font_size: int | float | str | list | tuple = "小四",
    mapping: Mapping[str, float] = CHINESE_FONT_SIZE_MAP,
) -> float | list[float]:
    """Convert one or several font sizes to points.

    Examples:
        resolve_font_size(12)                    # 12.0
        resolve_font_size("小四")                # 12.0
        resolve_font_size([11, "小四", "14"])    # [11.0, 12.0, 14.0]
    """
    if isinstance(font_size, (list, tuple)):
        return [parse_font_size(item, mapping) for item in font_size]
    return parse_font_size(font_size, mapping)


def font_size_names(mapping: Mapping[str, float] = CHINESE_FONT_SIZE_MAP) -> list[str]:
    """Return the named sizes ordered from largest to smallest."""
    return sorted(mapping, key=lambda name: mapping[name], reverse=True)
