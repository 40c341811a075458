"""Tests for crack-time estimation and duration formatting."""

from __future__ import annotations

import math
from fractions import Fraction

import pytest

from passforge.analyzers.crack_time import CrackTimeEstimator, format_seconds
from passforge.core.exceptions import EmptyOrUnrecognizedInputError


@pytest.fixture
def estimator() -> CrackTimeEstimator:
    return CrackTimeEstimator()


@pytest.mark.parametrize("password", ["", "   ", "äöü"])
def test_no_pool_raises(estimator: CrackTimeEstimator, password: str) -> None:
    with pytest.raises(EmptyOrUnrecognizedInputError):
        estimator.estimate(password)


def test_eight_lowercase_letters(estimator: CrackTimeEstimator) -> None:
    estimate = estimator.estimate("aaaaaaaa")
    assert estimate.pool_size == 26
    assert estimate.length == 8
    assert estimate.seconds == pytest.approx(208_827_064_576 / 200_000_000_000)
    assert estimate.display == "less than a minute"
    assert estimate.entropy_bits == pytest.approx(37.6)
    assert not estimate.instant


def test_exact_seconds(estimator: CrackTimeEstimator) -> None:
    assert estimator.seconds_to_crack(26, 8) == Fraction(
        208_827_064_576, 200_000_000_000
    )


def test_full_pool_twenty_characters(estimator: CrackTimeEstimator) -> None:
    estimate = estimator.estimate("Aa1!" + "a" * 16)
    assert estimate.pool_size == 94
    assert estimate.length == 20
    assert estimate.seconds > 100 * 3_153_600_000
    assert estimate.display.startswith("approx. ")
    assert estimate.display.endswith(" century(ies)")


def test_very_long_password_does_not_overflow(estimator: CrackTimeEstimator) -> None:
    estimate = estimator.estimate("a" * 500)
    assert estimate.seconds is None
    assert estimate.display.endswith(" century(ies)")
    assert "e+" in estimate.display


def test_single_digit_is_instant(estimator: CrackTimeEstimator) -> None:
    estimate = estimator.estimate("7")
    assert estimate.display == "instant"
    assert estimate.instant


def test_custom_guess_rate() -> None:
    estimator = CrackTimeEstimator(guesses_per_second=1)
    assert estimator.estimate("aaaaaaaa").display == "approx. 33.1 century(ies)"


def test_guess_rate_must_be_positive() -> None:
    with pytest.raises(ValueError):
        CrackTimeEstimator(guesses_per_second=0)


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "instant"),
        (Fraction(1, 2_000_000), "instant"),
        (Fraction(1, 1_000_000), "less than a minute"),
        (59, "less than a minute"),
        (60, "approx. 1.0 minute(s)"),
        (75, "approx. 1.3 minute(s)"),
        (90.0, "approx. 1.5 minute(s)"),
        (3_600, "approx. 1.0 hour(s)"),
        (2 * 86_400, "approx. 2.0 day(s)"),
        (2_592_000, "approx. 1.0 month(s)"),
        (31_536_000, "approx. 1.0 year(s)"),
        (315_360_000, "approx. 1.0 decade(s)"),
        (3_153_600_000, "approx. 1.0 century(ies)"),
        (3_153_599_999, "approx. 10.0 decade(s)"),
    ],
)
def test_format_seconds(seconds, expected: str) -> None:
    assert format_seconds(seconds) == expected


def test_format_seconds_switches_to_scientific_notation() -> None:
    assert format_seconds(3_153_600_000 * 10**16) == "approx. 1.0e+16 century(ies)"
    assert format_seconds(3_153_600_000 * (10**16 - 1)) == (
        "approx. 9999999999999999.0 century(ies)"
    )


@pytest.mark.parametrize("seconds", [math.inf, -math.inf, math.nan])
def test_format_seconds_rejects_non_finite_floats(seconds: float) -> None:
    with pytest.raises(ValueError, match="finite"):
        format_seconds(seconds)
