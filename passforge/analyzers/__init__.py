"""
PassForge Analyzers
====================

Pure, stateless analysis components: classification, scoring,
generation and crack-time estimation.
"""

from passforge.analyzers.classifier import CharacterClassifier
from passforge.analyzers.strength import StrengthScorer
from passforge.analyzers.generator import PasswordGenerator
from passforge.analyzers.crack_time import CrackTimeEstimator, format_seconds

__all__ = [
    "CharacterClassifier",
    "StrengthScorer",
    "PasswordGenerator",
    "CrackTimeEstimator",
    "format_seconds",
]
