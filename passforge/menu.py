"""
PassForge Interactive Menu
===========================

Numbered menu loop over the four PassForge functions. Each iteration
clears the screen, draws the title banner, reads a choice and dispatches
it through a :class:`Command` table. Recoverable errors are reported and
the loop continues; end of input or Ctrl-C ends the session cleanly.
"""

from __future__ import annotations

import enum
from typing import Callable, Optional

from shared.config import PassForgeConfig
from shared.console import ForgeConsole

from passforge.core.engine import PassForgeEngine
from passforge.core.exceptions import PassForgeError
from passforge.output.console import PassForgeConsoleOutput
from passforge.terminal import read_secret

LineReader = Callable[[str], str]


class Command(enum.IntEnum):
    """Menu entries, numbered as shown to the user."""

    CHECK = 1
    GENERATE = 2
    CRACK_TIME = 3
    BANNER = 4
    EXIT = 5

    @property
    def label(self) -> str:
        return _COMMAND_LABELS[self]

    @classmethod
    def parse(cls, raw: str) -> Optional[Command]:
        """Return the command for a typed choice, or ``None`` if invalid."""
        try:
            return cls(int(raw.strip()))
        except ValueError:
            return None


_COMMAND_LABELS: dict[Command, str] = {
    Command.CHECK: "Check password strength",
    Command.GENERATE: "Generate a secure password",
    Command.CRACK_TIME: "Estimate time to crack",
    Command.BANNER: "ASCII banner generator",
    Command.EXIT: "Exit",
}


class MenuController:
    """Runs the interactive menu.

    *read_line* and *read_secret* take a prompt and return one line of
    input without its newline; both raise :class:`EOFError` at end of input.
    """

    def __init__(
        self,
        engine: PassForgeEngine,
        console: ForgeConsole,
        *,
        settings: Optional[PassForgeConfig] = None,
        read_line: LineReader = input,
        read_secret: LineReader = read_secret,
    ) -> None:
        self.engine = engine
        self.console = console
        self.output = PassForgeConsoleOutput(console)
        self.settings = settings or engine.config.passforge
        self._read_line = read_line
        self._read_secret = read_secret
        self._handlers: dict[Command, Callable[[], None]] = {
            Command.CHECK: self.run_checker,
            Command.GENERATE: self.run_generator,
            Command.CRACK_TIME: self.run_crack_time,
            Command.BANNER: self.run_banner,
        }

    # ------------------------------------------------------------------ #
    #  Main loop
    # ------------------------------------------------------------------ #

    def run(self) -> None:
        """Loop until the user exits or input ends."""
        try:
            while self.step():
                pass
        except (EOFError, KeyboardInterrupt):
            self.console.blank()
        self.console.info("Exiting. Stay safe!")

    def step(self) -> bool:
        """Run one menu iteration; return ``False`` when the user exits."""
        self.console.clear()
        self.console.banner(self.settings.title)
        self.console.print("Choose an option:")
        for command in Command:
            self.console.print(f"  [{command.value}] {command.label}", markup=False)

        command = Command.parse(self._read_line("\nYour choice: "))
        self.console.blank()

        if command is Command.EXIT:
            return False
        self.dispatch(command)

        self.console.dim("\n\nPress Enter to return to the main menu.")
        self._read_line("")
        return True

    def dispatch(self, command: Optional[Command]) -> None:
        """Invoke the handler for *command*, reporting recoverable errors."""
        handler = self._handlers.get(command) if command is not None else None
        if handler is None:
            self.console.error("Invalid choice. Please try again.")
            return
        try:
            handler()
        except PassForgeError as exc:
            self.console.error(f"\n{exc}")

    # ------------------------------------------------------------------ #
    #  Handlers
    # ------------------------------------------------------------------ #

    def run_checker(self) -> None:
        self.console.section("Check password strength")
        password = self._read_secret("Enter your password: ")
        self.console.dim("\nAnalysing password...")
        self.output.display_strength(self.engine.check_strength(password))

    def run_generator(self) -> None:
        self.console.section("Generate a secure password")
        raw = self._read_line(
            f"Desired password length (default {self.settings.default_length}): "
        )
        requested = self.engine.parse_length(raw)
        self.output.display_generated(self.engine.generate_password(requested))

    def run_crack_time(self) -> None:
        self.console.section("Estimate time to crack")
        password = self._read_secret("Enter your password: ")
        self.output.display_crack_time(self.engine.estimate_crack_time(password))

    def run_banner(self) -> None:
        self.console.section("ASCII banner generator")
        text = self._read_line("Enter some text: ")
        if not text.strip():
            text = self.settings.default_banner_text
        self.console.blank()
        self.console.banner(text)
