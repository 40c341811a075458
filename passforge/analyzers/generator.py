"""
Password Generator
===================

Generates random passwords guaranteed to contain at least one lowercase
letter, uppercase letter, digit and special symbol.

Algorithm:
1. Draw one seed character from each of the four class sets.
2. Draw ``length - 4`` filler characters from the union of all sets.
3. Shuffle seeds and fillers together (Fisher-Yates) so the seeds do not
   sit at fixed positions.

All randomness comes from :mod:`secrets` (the operating system CSPRNG).

References:
    - Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2,
      Section 3.4.2 (Algorithm P).
    - Python ``secrets`` module. https://docs.python.org/3/library/secrets.html
"""

from __future__ import annotations

import secrets
import string

from passforge.core.exceptions import InvalidLengthError

# Generator special set; every symbol is also in the classifier's set.
GENERATOR_SPECIALS = "!@#$%^&*()_-+="

CLASS_SETS: tuple[str, ...] = (
    string.ascii_lowercase,
    string.ascii_uppercase,
    string.digits,
    GENERATOR_SPECIALS,
)

ALL_CHARACTERS = "".join(CLASS_SETS)

SEED_COUNT = len(CLASS_SETS)
DEFAULT_MAX_LENGTH = 1024


class PasswordGenerator:
    """Produces passwords covering all four character classes.

    Usage::

        generator = PasswordGenerator()
        generator.generate(16)
    """

    def __init__(self, max_length: int = DEFAULT_MAX_LENGTH) -> None:
        self.max_length = max_length

    def generate(self, length: int) -> str:
        """Generate a password of exactly *length* characters.

        Raises:
            InvalidLengthError: If *length* is below the four mandatory
                seed characters or above ``max_length``.
        """
        if length < SEED_COUNT:
            raise InvalidLengthError(
                f"Length must be at least {SEED_COUNT} to include every "
                f"character class (got {length})."
            )
        if length > self.max_length:
            raise InvalidLengthError(
                f"Length must not exceed {self.max_length} (got {length})."
            )

        chars = [secrets.choice(charset) for charset in CLASS_SETS]
        chars.extend(
            secrets.choice(ALL_CHARACTERS) for _ in range(length - SEED_COUNT)
        )
        self._shuffle(chars)
        return "".join(chars)

    @staticmethod
    def _shuffle(chars: list[str]) -> None:
        """In-place Fisher-Yates shuffle driven by ``secrets.randbelow``."""
        for i in range(len(chars) - 1, 0, -1):
            j = secrets.randbelow(i + 1)
            chars[i], chars[j] = chars[j], chars[i]
