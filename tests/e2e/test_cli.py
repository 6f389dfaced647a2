"""End-to-end tests for the diagram-options command."""

from click.testing import CliRunner

from diagram_options.__main__ import main


def test_defaults_printed_without_settings():
    result = CliRunner().invoke(main, [])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "linetype: ORTHO",
        "dependencies: PUBLIC",
        "package-orientation: TOP_TO_BOTTOM",
    ]


def test_settings_applied():
    result = CliRunner().invoke(
        main, ["--set", "linetype", "spline", "-s", "package-orientation", "left-to-right"]
    )
    assert result.exit_code == 0
    assert "linetype: SPLINE" in result.output
    assert "dependencies: PUBLIC" in result.output
    assert "package-orientation: LEFT_TO_RIGHT" in result.output


def test_invalid_value_exits_with_error():
    result = CliRunner().invoke(main, ["--set", "dependencies", "bogus"])
    assert result.exit_code == 1
    assert "error: Invalid value bogus for option -dependencies" in result.output


def test_unknown_option_exits_with_error():
    result = CliRunner().invoke(main, ["--set", "nope", "x"])
    assert result.exit_code == 1
    assert "error: Invalid option -nope" in result.output


def test_list_options():
    result = CliRunner().invoke(main, ["--list"])
    assert result.exit_code == 0
    assert "-linetype  polyline,spline,ortho (default: ortho)" in result.output
    assert "-package-orientation  left-to-right,top-to-bottom (default: top-to-bottom)" in result.output
