"""
PassForge Core Module
======================

Data models and exceptions for PassForge. The engine lives in
:mod:`passforge.core.engine`.
"""

from passforge.core.exceptions import (
    EmptyOrUnrecognizedInputError,
    InvalidLengthError,
    PassForgeError,
)
from passforge.core.models import (
    ClassificationResult,
    CrackTimeEstimate,
    GeneratedPassword,
    StrengthLabel,
    StrengthReport,
)

__all__ = [
    "PassForgeError",
    "EmptyOrUnrecognizedInputError",
    "InvalidLengthError",
    "ClassificationResult",
    "CrackTimeEstimate",
    "GeneratedPassword",
    "StrengthLabel",
    "StrengthReport",
]
