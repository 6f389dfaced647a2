"""Enumerated diagram settings and the lookup tables that map option values onto them.

Option values are stored as lowercase, hyphenated strings (``top-to-bottom``).
They are normalized to the enum member spelling (``TOP_TO_BOTTOM``) and then
looked up in an explicit table per enum.
"""

from __future__ import annotations

from enum import Enum, auto


def normalize_option_value(value: str) -> str:
    """Uppercase ``value`` and treat hyphens as underscores."""
    return value.upper().replace("-", "_")


class LineType(Enum):
    SPLINE = auto()
    POLYLINE = auto()
    ORTHO = auto()

    @classmethod
    def default(cls) -> LineType:
        return cls.ORTHO

    @classmethod
    def from_option_value(cls, value: str) -> LineType | None:
        return _LINE_TYPE_MAP.get(normalize_option_value(value))


class Visibility(Enum):
    PUBLIC = auto()
    PROTECTED = auto()
    PACKAGE = auto()
    PRIVATE = auto()

    @classmethod
    def default(cls) -> Visibility:
        return cls.PUBLIC

    @classmethod
    def from_option_value(cls, value: str) -> Visibility | None:
        return _VISIBILITY_MAP.get(normalize_option_value(value))


class Orientation(Enum):
    LEFT_TO_RIGHT = auto()
    TOP_TO_BOTTOM = auto()

    @classmethod
    def default(cls) -> Orientation:
        return cls.TOP_TO_BOTTOM

    @classmethod
    def from_option_value(cls, value: str) -> Orientation | None:
        return _ORIENTATION_MAP.get(normalize_option_value(value))


_LINE_TYPE_MAP: dict[str, LineType] = {
    "SPLINE": LineType.SPLINE,
    "POLYLINE": LineType.POLYLINE,
    "ORTHO": LineType.ORTHO,
}

_VISIBILITY_MAP: dict[str, Visibility] = {
    "PUBLIC": Visibility.PUBLIC,
    "PROTECTED": Visibility.PROTECTED,
    "PACKAGE": Visibility.PACKAGE,
    "PRIVATE": Visibility.PRIVATE,
}

_ORIENTATION_MAP: dict[str, Orientation] = {
    "LEFT_TO_RIGHT": Orientation.LEFT_TO_RIGHT,
    "TOP_TO_BOTTOM": Orientation.TOP_TO_BOTTOM,
}
