"""Tests for diagram_options.types — value normalization and enum lookup tables."""

from diagram_options.types import LineType, Orientation, Visibility, normalize_option_value


def test_normalize_uppercases_and_replaces_hyphens():
    assert normalize_option_value("top-to-bottom") == "TOP_TO_BOTTOM"
    assert normalize_option_value("ortho") == "ORTHO"


def test_line_type_lookup():
    assert LineType.from_option_value("spline") == LineType.SPLINE
    assert LineType.from_option_value("polyline") == LineType.POLYLINE
    assert LineType.from_option_value("ortho") == LineType.ORTHO


def test_visibility_lookup():
    assert Visibility.from_option_value("public") == Visibility.PUBLIC
    assert Visibility.from_option_value("protected") == Visibility.PROTECTED
    assert Visibility.from_option_value("package") == Visibility.PACKAGE
    assert Visibility.from_option_value("private") == Visibility.PRIVATE


def test_orientation_lookup():
    assert Orientation.from_option_value("left-to-right") == Orientation.LEFT_TO_RIGHT
    assert Orientation.from_option_value("top-to-bottom") == Orientation.TOP_TO_BOTTOM


def test_lookup_is_case_insensitive():
    assert LineType.from_option_value("Spline") == LineType.SPLINE
    assert Orientation.from_option_value("LEFT-TO-RIGHT") == Orientation.LEFT_TO_RIGHT


def test_unknown_value_returns_none():
    assert LineType.from_option_value("garbage") is None
    assert Visibility.from_option_value("") is None
    assert Orientation.from_option_value("left_to_right_ish") is None


def test_defaults():
    assert LineType.default() == LineType.ORTHO
    assert Visibility.default() == Visibility.PUBLIC
    assert Orientation.default() == Orientation.TOP_TO_BOTTOM
