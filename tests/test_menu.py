"""Tests for the interactive menu loop."""

from __future__ import annotations

import pytest

from shared.console import ForgeConsole
from passforge.core.engine import PassForgeEngine
from passforge.menu import Command, MenuController


def _controller(engine, console, scripted, lines, secrets=()) -> MenuController:
    return MenuController(
        engine,
        console,
        read_line=scripted(lines),
        read_secret=scripted(secrets),
    )


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", Command.CHECK),
        ("2", Command.GENERATE),
        (" 3 ", Command.CRACK_TIME),
        ("4", Command.BANNER),
        ("5", Command.EXIT),
        ("6", None),
        ("0", None),
        ("x", None),
        ("", None),
    ],
)
def test_command_parse(raw: str, expected) -> None:
    assert Command.parse(raw) is expected


def test_every_command_has_a_label() -> None:
    assert [c.label for c in Command] == [
        "Check password strength",
        "Generate a secure password",
        "Estimate time to crack",
        "ASCII banner generator",
        "Exit",
    ]


def test_exit_ends_the_loop(engine, console: ForgeConsole, scripted) -> None:
    _controller(engine, console, scripted, ["5"]).run()
    output = console.export_text()
    assert "[1] Check password strength" in output
    assert "Exiting. Stay safe!" in output


def test_end_of_input_ends_the_loop(engine, console: ForgeConsole, scripted) -> None:
    _controller(engine, console, scripted, []).run()
    assert "Exiting. Stay safe!" in console.export_text()


def test_keyboard_interrupt_ends_the_loop(engine, console: ForgeConsole) -> None:
    def interrupt(prompt: str) -> str:
        raise KeyboardInterrupt

    MenuController(engine, console, read_line=interrupt).run()
    assert "Exiting. Stay safe!" in console.export_text()


def test_strength_check(engine, console: ForgeConsole, scripted) -> None:
    _controller(engine, console, scripted, ["1", "", "5"], ["Aa1!"]).run()
    output = console.export_text()
    assert "Strong (4/5 criteria met)" in output
    assert "✗ At least 8 characters long" in output
    assert "✔ Contains uppercase letters" in output
    assert "Aa1!" not in output


def test_invalid_choice_reprompts(engine, console: ForgeConsole, scripted) -> None:
    _controller(engine, console, scripted, ["9", "", "5"]).run()
    output = console.export_text()
    assert "Invalid choice. Please try again." in output
    assert "Exiting. Stay safe!" in output


def test_generator_default_length(engine, console: ForgeConsole, scripted) -> None:
    _controller(engine, console, scripted, ["2", "", "", "5"]).run()
    assert "Your new secure password:" in console.export_text()


def test_generator_warns_on_short_length(engine, console: ForgeConsole, scripted) -> None:
    _controller(engine, console, scripted, ["2", "5", "", "5"]).run()
    output = console.export_text()
    assert "WARNING: A length below 8 is not recommended; using 8." in output
    assert "Your new secure password:" in output


def test_generator_reports_invalid_length(engine, console: ForgeConsole, scripted) -> None:
    _controller(engine, console, scripted, ["2", "abc", "", "5"]).run()
    output = console.export_text()
    assert "'abc' is not a whole number." in output
    assert "Exiting. Stay safe!" in output


def test_crack_time(engine, console: ForgeConsole, scripted) -> None:
    _controller(engine, console, scripted, ["3", "", "5"], ["aaaaaaaa"]).run()
    output = console.export_text()
    assert "Character pool (N): 26" in output
    assert "Password length (L): 8" in output
    assert "Assumed rate: 100,000,000,000 guesses/sec" in output
    assert "Estimated time to crack: less than a minute" in output


def test_crack_time_empty_password(engine, console: ForgeConsole, scripted) -> None:
    _controller(engine, console, scripted, ["3", "", "5"], [""]).run()
    output = console.export_text()
    assert "Password is empty or contains unrecognised characters." in output
    assert "Exiting. Stay safe!" in output


def test_banner_uses_typed_text(
    engine, console: ForgeConsole, scripted, monkeypatch: pytest.MonkeyPatch
) -> None:
    banners: list[str] = []
    monkeypatch.setattr(console, "banner", banners.append)
    _controller(engine, console, scripted, ["4", "Hi", "", "5"]).run()
    assert "Hi" in banners


def test_banner_defaults_on_blank_text(
    engine, console: ForgeConsole, scripted, monkeypatch: pytest.MonkeyPatch
) -> None:
    banners: list[str] = []
    monkeypatch.setattr(console, "banner", banners.append)
    _controller(engine, console, scripted, ["4", "   ", "", "5"]).run()
    # Title banner on both menu draws plus the default-text banner
    assert banners.count("PassForge") == 3


def test_dispatch_unknown_command(engine: PassForgeEngine, console: ForgeConsole) -> None:
    MenuController(engine, console).dispatch(None)
    assert "Invalid choice" in console.export_text()
