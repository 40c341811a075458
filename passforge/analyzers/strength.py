"""
Strength Scorer
================

Counts how many of the five criteria a password satisfies and maps that
score to a qualitative label.

The minimum-length criterion counts toward the score exactly like the
character-class criteria, so a four-character password using all four
classes scores 4 ("strong").

Score thresholds:
- 0-1: very weak
- 2: weak
- 3: medium
- 4: strong
- 5: very strong
"""

from __future__ import annotations

from typing import Optional

from passforge.analyzers.classifier import CharacterClassifier
from passforge.core.models import (
    ClassificationResult,
    StrengthLabel,
    StrengthReport,
)

_LABELS: dict[int, StrengthLabel] = {
    0: StrengthLabel.VERY_WEAK,
    1: StrengthLabel.VERY_WEAK,
    2: StrengthLabel.WEAK,
    3: StrengthLabel.MEDIUM,
    4: StrengthLabel.STRONG,
    5: StrengthLabel.VERY_STRONG,
}


class StrengthScorer:
    """Scores classification results on a 0-5 scale.

    Usage::

        scorer = StrengthScorer()
        report = scorer.assess("MyP@ssw0rd")
        report.score, report.label   # (5, StrengthLabel.VERY_STRONG)
    """

    def __init__(self, classifier: Optional[CharacterClassifier] = None) -> None:
        self._classifier = classifier or CharacterClassifier()

    @staticmethod
    def label_for(score: int) -> StrengthLabel:
        """Map a score in [0, 5] to its label."""
        return _LABELS[score]

    def score(self, classification: ClassificationResult) -> StrengthReport:
        """Score an existing classification."""
        score = classification.count
        return StrengthReport(
            score=score,
            label=self.label_for(score),
            classification=classification,
        )

    def assess(self, password: str) -> StrengthReport:
        """Classify *password* and score the result."""
        return self.score(self._classifier.classify(password))
