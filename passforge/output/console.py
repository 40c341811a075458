"""
PassForge Console Output
=========================

Rich-based renderers for PassForge results: the strength criteria
checklist, generated passwords and crack-time analysis.

Renderers only receive result models; they never call the analyzers.
"""

from __future__ import annotations

from typing import Optional

from rich.text import Text

from shared.console import ForgeConsole
from passforge.core.models import (
    CrackTimeEstimate,
    GeneratedPassword,
    StrengthReport,
)


# ===================================================================== #
#  Colour Maps and Labels
# ===================================================================== #

_STRENGTH_COLOURS: dict[str, str] = {
    "very weak": "red",
    "weak": "magenta",
    "medium": "yellow",
    "strong": "bright_green",
    "very strong": "green",
}

CRITERIA_LABELS: dict[str, str] = {
    "has_min_length": "At least 8 characters long",
    "has_upper": "Contains uppercase letters",
    "has_lower": "Contains lowercase letters",
    "has_digit": "Contains digits",
    "has_special": "Contains special characters",
}


class PassForgeConsoleOutput:
    """Console output formatters for PassForge results.

    Usage::

        output = PassForgeConsoleOutput(ForgeConsole())
        output.display_strength(report)
        output.display_generated(generated)
        output.display_crack_time(estimate)
    """

    def __init__(self, console: Optional[ForgeConsole] = None) -> None:
        self.console = console or ForgeConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Strength Display
    # ------------------------------------------------------------------ #

    def display_strength(self, report: StrengthReport) -> None:
        """Show the overall rating followed by a per-criterion checklist."""
        colour = _STRENGTH_COLOURS.get(report.label.value, "white")

        overall = Text("\nOverall rating: ")
        overall.append(report.label.value.capitalize(), style=colour)
        overall.append(f" ({report.score}/5 criteria met)")
        self._rich.print(overall)

        self._rich.print("\nDetailed analysis:")
        for criterion, met in report.classification.flags().items():
            line = Text()
            if met:
                line.append("✔", style="green")
            else:
                line.append("✗", style="red")
            line.append(f" {CRITERIA_LABELS[criterion]}")
            self._rich.print(line)

    # ------------------------------------------------------------------ #
    #  Generator Display
    # ------------------------------------------------------------------ #

    def display_generated(self, generated: GeneratedPassword) -> None:
        """Show a generated password, warning first if the length was raised."""
        if generated.clamped:
            self.console.warning(
                f"A length below {generated.length} is not recommended; "
                f"using {generated.length}."
            )
        self.console.success("\nYour new secure password:")
        self._rich.print(Text(generated.password, style="bold"))

    # ------------------------------------------------------------------ #
    #  Crack Time Display
    # ------------------------------------------------------------------ #

    def display_crack_time(self, estimate: CrackTimeEstimate) -> None:
        """Show pool size, length, assumed rate and the estimated duration."""
        self.console.dim("\n--- Crack time analysis ---")
        self._rich.print(f"Character pool (N): {estimate.pool_size}", markup=False)
        self._rich.print(f"Password length (L): {estimate.length}", markup=False)
        self._rich.print(
            f"Assumed rate: {estimate.guesses_per_second:,} guesses/sec",
            markup=False,
        )
        self._rich.print(
            f"Entropy: {estimate.entropy_bits:.2f} bits", markup=False
        )

        result = Text("\nEstimated time to crack: ", style="bold")
        result.append(estimate.display, style="bold green")
        self._rich.print(result)
