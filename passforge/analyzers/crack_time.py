"""
Crack Time Estimator
=====================

Estimates how long an offline brute-force attacker needs to find a
password with 50% probability, assuming a fixed guess rate:

    combinations = N ** L
    seconds      = combinations / (2 * guesses_per_second)

where N is the character pool size implied by the classes present and L
is the password length.

``N ** L`` is computed with Python's arbitrary-precision integers and the
division is kept exact as a :class:`fractions.Fraction`, so the unit ladder
comparison is exact for passwords of any length. Display values are
produced through :mod:`decimal` with an unbounded exponent range.

References:
    - NIST SP 800-63B (2017), Appendix A -- Strength of Memorized Secrets.
    - Bonneau, J. (2012). The Science of Guessing. IEEE S&P.
"""

from __future__ import annotations

import math
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Decimal, localcontext
from fractions import Fraction
from numbers import Rational
from typing import Optional, Union

from passforge.analyzers.classifier import CharacterClassifier
from passforge.core.exceptions import EmptyOrUnrecognizedInputError
from passforge.core.models import CrackTimeEstimate

DEFAULT_GUESSES_PER_SECOND = 100_000_000_000

INSTANT = "instant"
LESS_THAN_A_MINUTE = "less than a minute"

_INSTANT_THRESHOLD = Fraction(1, 1_000_000)

# Descending ladder of (label, seconds per unit)
TIME_UNITS: tuple[tuple[str, int], ...] = (
    ("century(ies)", 3_153_600_000),
    ("decade(s)", 315_360_000),
    ("year(s)", 31_536_000),
    ("month(s)", 2_592_000),
    ("day(s)", 86_400),
    ("hour(s)", 3_600),
    ("minute(s)", 60),
)

# Unit counts at or above this are shown in scientific notation
_SCIENTIFIC_THRESHOLD = 10**16

Seconds = Union[int, float, Fraction]


def _to_fraction(seconds: Seconds) -> Fraction:
    if isinstance(seconds, Fraction):
        return seconds
    if isinstance(seconds, Rational):
        return Fraction(seconds.numerator, seconds.denominator)
    if not math.isfinite(seconds):
        raise ValueError(f"seconds must be finite, got {seconds!r}")
    return Fraction(seconds)


def _format_quantity(value: Fraction) -> str:
    """Round *value* half-up to one decimal place.

    Very large values switch to ``1.2e+30`` notation.
    """
    with localcontext() as ctx:
        ctx.prec = 50
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        ctx.rounding = ROUND_HALF_UP
        quantity = Decimal(value.numerator) / Decimal(value.denominator)
        if value < _SCIENTIFIC_THRESHOLD:
            return str(quantity.quantize(Decimal("0.1")))
        return format(quantity, ".1e")


def format_seconds(seconds: Seconds) -> str:
    """Render a duration as a coarse, human-readable approximation.

    Accepts exact :class:`~fractions.Fraction` values as well as plain ints
    and finite floats; ``inf`` and ``nan`` raise :class:`ValueError`.

    Examples::

        format_seconds(0)              # 'instant'
        format_seconds(30)             # 'less than a minute'
        format_seconds(3_153_600_000)  # 'approx. 1.0 century(ies)'
    """
    exact = _to_fraction(seconds)
    if exact < _INSTANT_THRESHOLD:
        return INSTANT

    for label, unit_seconds in TIME_UNITS:
        if exact >= unit_seconds:
            return f"approx. {_format_quantity(exact / unit_seconds)} {label}"
    return LESS_THAN_A_MINUTE


class CrackTimeEstimator:
    """Estimates brute-force crack time from the character pool.

    Usage::

        estimator = CrackTimeEstimator()
        estimate = estimator.estimate("aaaaaaaa")
        estimate.display    # 'less than a minute'
    """

    def __init__(
        self,
        guesses_per_second: int = DEFAULT_GUESSES_PER_SECOND,
        classifier: Optional[CharacterClassifier] = None,
    ) -> None:
        if guesses_per_second <= 0:
            raise ValueError(
                f"guesses_per_second must be positive, got {guesses_per_second}"
            )
        self.guesses_per_second = int(guesses_per_second)
        self._classifier = classifier or CharacterClassifier()

    def pool_size(self, password: str) -> int:
        """Character pool size implied by the classes in *password*."""
        return self._classifier.pool_size(self._classifier.classify(password))

    def seconds_to_crack(self, pool_size: int, length: int) -> Fraction:
        """Exact expected seconds to crack a password of *length* from *pool_size*."""
        combinations = pool_size**length
        return Fraction(combinations, 2 * self.guesses_per_second)

    def estimate(self, password: str) -> CrackTimeEstimate:
        """Estimate crack time for *password*.

        Raises:
            EmptyOrUnrecognizedInputError: If the password is empty or has
                no recognised character class.
        """
        pool = self.pool_size(password)
        if pool == 0:
            raise EmptyOrUnrecognizedInputError()

        length = len(password)
        exact = self.seconds_to_crack(pool, length)
        display = format_seconds(exact)

        try:
            seconds: Optional[float] = float(exact)
        except OverflowError:
            seconds = None

        return CrackTimeEstimate(
            pool_size=pool,
            length=length,
            guesses_per_second=self.guesses_per_second,
            seconds=seconds,
            entropy_bits=round(length * math.log2(pool), 2),
            display=display,
            instant=display == INSTANT,
        )
