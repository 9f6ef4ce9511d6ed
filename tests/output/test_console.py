"""Tests for the Rich Console factory and theme."""

from io import StringIO

from surisign.output.console import create_console, get_output, style_for_curve


def test_returns_console_with_stringio() -> None:
    assert isinstance(create_console().file, StringIO)


def test_no_color_disables_ansi() -> None:
    console = create_console(no_color=True)
    console.print("[suri.error]boom[/suri.error]")
    output = get_output(console)
    assert "\x1b" not in output
    assert "boom" in output


def test_long_lines_are_not_wrapped() -> None:
    console = create_console(width=40)
    console.print("x" * 100)
    assert get_output(console) == "x" * 100 + "\n"


def test_style_for_curve() -> None:
    assert style_for_curve("ed25519") == "suri.curve.ed25519"
    assert style_for_curve("ecdsa") == ""
