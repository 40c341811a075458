"""
Character Classifier
=====================

Reports which character classes a password contains and whether it meets
the minimum length. The same classification drives both strength scoring
and the brute-force pool size used for crack-time estimation.

Character classes and their pool weights:
- Lowercase letters ``[a-z]``: 26
- Uppercase letters ``[A-Z]``: 26
- Digits ``[0-9]``: 10
- Special symbols ``!@#$%^&*()_+=[]{};':"\\|,.<>/?~-``: 32

Only ASCII is recognised; whitespace and non-ASCII letters belong to no
class.
"""

from __future__ import annotations

import re

from passforge.core.models import ClassificationResult

MIN_LENGTH = 8

SPECIAL_CHARACTERS = "!@#$%^&*()_+=[]{};':\"\\|,.<>/?~-"

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SPECIAL_RE = re.compile(r"""[!@#$%^&*()_+=\[\]{};':"\\|,.<>/?~-]""")

# Fixed brute-force pool weights per class
LOWER_POOL = 26
UPPER_POOL = 26
DIGIT_POOL = 10
SPECIAL_POOL = 32


class CharacterClassifier:
    """Classifies passwords by character class and length.

    Usage::

        classifier = CharacterClassifier()
        result = classifier.classify("Aa1!")
        classifier.pool_size(result)   # 94
    """

    def __init__(self, min_length: int = MIN_LENGTH) -> None:
        self.min_length = min_length

    def classify(self, password: str) -> ClassificationResult:
        """Return the five criteria flags for *password*."""
        return ClassificationResult(
            has_min_length=len(password) >= self.min_length,
            has_upper=_UPPER_RE.search(password) is not None,
            has_lower=_LOWER_RE.search(password) is not None,
            has_digit=_DIGIT_RE.search(password) is not None,
            has_special=_SPECIAL_RE.search(password) is not None,
        )

    @staticmethod
    def pool_size(classification: ClassificationResult) -> int:
        """Sum the pool weights of every class present.

        Returns 0 when no class is present (empty or unrecognised input).
        """
        pool = 0
        if classification.has_lower:
            pool += LOWER_POOL
        if classification.has_upper:
            pool += UPPER_POOL
        if classification.has_digit:
            pool += DIGIT_POOL
        if classification.has_special:
            pool += SPECIAL_POOL
        return pool
