"""
PassForge Core Data Models
===========================

Pydantic models for the PassForge password tool. These represent the
structured results of character classification, strength scoring,
password generation and brute-force crack-time estimation.

All models are serialisable to JSON and consumed by both the console
renderers and the ``--output json`` CLI mode.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class StrengthLabel(str, enum.Enum):
    """Qualitative strength label derived from the 0-5 criteria score."""

    VERY_WEAK = "very weak"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very strong"


# ===================================================================== #
#  Classification and Strength Models
# ===================================================================== #


class ClassificationResult(BaseModel):
    """Which criteria a password satisfies.

    Attributes:
        has_min_length: Length is at least the minimum (8 characters).
        has_upper: Contains an ASCII uppercase letter.
        has_lower: Contains an ASCII lowercase letter.
        has_digit: Contains an ASCII digit.
        has_special: Contains a symbol from the special-character set.
    """

    model_config = ConfigDict(frozen=True)

    has_min_length: bool = False
    has_upper: bool = False
    has_lower: bool = False
    has_digit: bool = False
    has_special: bool = False

    def flags(self) -> dict[str, bool]:
        """Return the five flags in display order."""
        return {
            "has_min_length": self.has_min_length,
            "has_upper": self.has_upper,
            "has_lower": self.has_lower,
            "has_digit": self.has_digit,
            "has_special": self.has_special,
        }

    @property
    def count(self) -> int:
        """Number of satisfied criteria."""
        return sum(self.flags().values())


class StrengthReport(BaseModel):
    """Result of scoring a password against the five criteria.

    Attributes:
        score: Number of satisfied criteria in [0, 5].
        label: Qualitative strength label.
        classification: The underlying per-criterion flags.
    """

    score: int = Field(..., ge=0, le=5)
    label: StrengthLabel
    classification: ClassificationResult


# ===================================================================== #
#  Crack Time Models
# ===================================================================== #


class CrackTimeEstimate(BaseModel):
    """Brute-force crack time estimate for a single password.

    Attributes:
        pool_size: Effective character pool size (N).
        length: Password length in characters (L).
        guesses_per_second: Assumed attacker guess rate.
        seconds: Expected seconds to a 50% success chance; ``None`` when
            the value exceeds the float range.
        entropy_bits: Combinatorial entropy, ``L * log2(N)``.
        display: Human-readable duration.
        instant: Whether the duration rounds down to "instant".
    """

    pool_size: int = Field(..., gt=0)
    length: int = Field(..., gt=0)
    guesses_per_second: int
    seconds: Optional[float] = None
    entropy_bits: float
    display: str
    instant: bool = False


# ===================================================================== #
#  Generator Models
# ===================================================================== #


class GeneratedPassword(BaseModel):
    """A freshly generated password.

    Attributes:
        password: The generated password.
        length: Actual length of the password.
        requested_length: Length the caller asked for, ``None`` if the
            default length was used.
        clamped: Whether the requested length was raised to the minimum.
    """

    password: str
    length: int
    requested_length: Optional[int] = None
    clamped: bool = False
