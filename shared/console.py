"""
PassForge Console Interface
============================

Rich-powered console abstraction providing a unified presentation layer
for the PassForge tool.

The class wraps :class:`rich.console.Console` and adds convenience methods
for figlet banners, section headers and severity-coloured messages,
all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
    - pyfiglet: https://github.com/pwaller/pyfiglet
"""

from __future__ import annotations

from typing import IO, Any

import pyfiglet
from rich.console import Console
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all PassForge output
# ---------------------------------------------------------------------------
_FORGE_THEME = Theme(
    {
        "forge.border": "cyan",
        "forge.banner": "bright_blue",
        "forge.section": "bold yellow",
        "forge.success": "bold green",
        "forge.warning": "bold yellow",
        "forge.error": "bold red",
        "forge.info": "bold bright_blue",
        "forge.dim": "dim",
        "forge.highlight": "bold bright_white",
    }
)

_BORDER_CHAR = "═"


def render_figlet(
    text: str,
    *,
    font: str = "standard",
    width: int = 80,
) -> list[str]:
    """Render *text* as figlet art, each line centred to *width* columns.

    Trailing blank lines produced by figlet are dropped.

    Raises:
        pyfiglet.FontNotFound: If *font* is not a bundled figlet font.
    """
    art = pyfiglet.Figlet(font=font, width=width).renderText(text)
    lines = [line.rstrip() for line in art.splitlines()]
    while lines and not lines[-1]:
        lines.pop()
    return [line.center(width).rstrip() for line in lines]


class ForgeConsole:
    """Unified console interface for PassForge.

    Usage::

        con = ForgeConsole()
        con.banner("PassForge")
        con.section("Check password strength")
        con.success("Done")
    """

    def __init__(
        self,
        *,
        quiet: bool = False,
        record: bool = False,
        file: IO[str] | None = None,
        banner_font: str = "standard",
        banner_width: int = 80,
    ) -> None:
        """Initialise the console.

        Args:
            quiet:        Suppress all output (useful in library / test mode).
            record:       Enable Rich recording for text export.
            file:         Alternative output stream (defaults to stdout).
            banner_font:  pyfiglet font used by :meth:`banner`.
            banner_width: Column width the banner is centred within.
        """
        self._console = Console(
            theme=_FORGE_THEME,
            quiet=quiet,
            record=record,
            file=file,
            highlight=False,
        )
        self._banner_font = banner_font
        self._banner_width = banner_width

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner
    # ------------------------------------------------------------------ #

    def banner(self, title: str) -> None:
        """Print *title* as centred figlet art between two borders."""
        border = _BORDER_CHAR * self._banner_width
        self._console.print(border, style="forge.border", no_wrap=True, crop=False)
        for line in render_figlet(
            title, font=self._banner_font, width=self._banner_width
        ):
            self._console.print(
                Text(line, style="forge.banner"), no_wrap=True, crop=False
            )
        self._console.print(border, style="forge.border", no_wrap=True, crop=False)
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Section header
    # ------------------------------------------------------------------ #

    def section(self, title: str) -> None:
        """Print a section heading such as ``--- Generate password ---``."""
        self._console.print(Text(f"--- {title} ---", style="forge.section"))

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(Text(message, style="forge.success"))

    def warning(self, message: str) -> None:
        self._console.print(Text(f"WARNING: {message}", style="forge.warning"))

    def error(self, message: str) -> None:
        self._console.print(Text(message, style="forge.error"))

    def info(self, message: str) -> None:
        self._console.print(Text(message, style="forge.info"))

    def dim(self, message: str) -> None:
        self._console.print(Text(message, style="forge.dim"))

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def blank(self, count: int = 1) -> None:
        """Print *count* blank lines."""
        for _ in range(count):
            self._console.print()

    def clear(self) -> None:
        """Clear the screen when attached to a terminal."""
        if self._console.is_terminal:
            self._console.clear()

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
