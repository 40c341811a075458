"""Tests for no-echo secret input."""

from __future__ import annotations

import io
from types import SimpleNamespace

import pytest

from passforge import terminal


class _FakeTTY(io.StringIO):
    def isatty(self) -> bool:
        return True

    def fileno(self) -> int:
        return 0


def _fake_termios(calls: list):
    def tcgetattr(fd):
        return [0, 0, 0, 0b1111, 0, 0, []]

    def tcsetattr(fd, when, attrs):
        calls.append(list(attrs))

    return SimpleNamespace(
        ECHO=0b1000,
        TCSAFLUSH=2,
        tcgetattr=tcgetattr,
        tcsetattr=tcsetattr,
    )


def test_read_secret_from_stream() -> None:
    stdin = io.StringIO("hunter2\nnext\n")
    stdout = io.StringIO()
    assert terminal.read_secret("Password: ", stdin=stdin, stdout=stdout) == "hunter2"
    assert stdout.getvalue() == "Password: \n"


def test_read_secret_strips_crlf() -> None:
    stdin = io.StringIO("abc\r\n")
    assert terminal.read_secret("", stdin=stdin, stdout=io.StringIO()) == "abc"


def test_read_secret_empty_line_is_empty_password() -> None:
    stdin = io.StringIO("\n")
    assert terminal.read_secret("", stdin=stdin, stdout=io.StringIO()) == ""


def test_read_secret_raises_on_eof() -> None:
    with pytest.raises(EOFError):
        terminal.read_secret("", stdin=io.StringIO(""), stdout=io.StringIO())


def test_echo_disabled_restores_attributes(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list = []
    monkeypatch.setattr(terminal, "termios", _fake_termios(calls))

    with terminal.echo_disabled(_FakeTTY()):
        assert calls[-1][3] == 0b0111

    assert calls[-1][3] == 0b1111


def test_echo_disabled_restores_attributes_on_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list = []
    monkeypatch.setattr(terminal, "termios", _fake_termios(calls))

    with pytest.raises(KeyboardInterrupt):
        with terminal.echo_disabled(_FakeTTY()):
            raise KeyboardInterrupt

    assert len(calls) == 2
    assert calls[-1][3] == 0b1111


def test_echo_disabled_ignores_non_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list = []
    monkeypatch.setattr(terminal, "termios", _fake_termios(calls))

    with terminal.echo_disabled(io.StringIO()):
        pass

    assert calls == []


def test_read_secret_on_tty_disables_echo(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list = []
    monkeypatch.setattr(terminal, "termios", _fake_termios(calls))

    secret = terminal.read_secret("", stdin=_FakeTTY("s3cret\n"), stdout=io.StringIO())

    assert secret == "s3cret"
    assert len(calls) == 2


def test_falls_back_to_getpass_without_termios(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(terminal, "termios", None)
    monkeypatch.setattr(terminal.getpass, "getpass", lambda prompt: "from-getpass")

    assert terminal.read_secret("", stdin=_FakeTTY(), stdout=io.StringIO()) == "from-getpass"
