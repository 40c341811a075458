"""
PassForge Engine
=================

Central orchestrator for the PassForge password tool. The
:class:`PassForgeEngine` wires the analyzers together with the configured
guess rate and length policy, and is the only entry point the CLI and the
interactive menu call.

Architecture follows the Facade pattern (Gamma et al., 1994).

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
"""

from __future__ import annotations

from typing import Optional

from shared.config import ForgeConfig
from shared.logger import ForgeLogger

from passforge.analyzers.classifier import CharacterClassifier
from passforge.analyzers.crack_time import CrackTimeEstimator
from passforge.analyzers.generator import PasswordGenerator
from passforge.analyzers.strength import StrengthScorer
from passforge.core.exceptions import (
    EmptyOrUnrecognizedInputError,
    InvalidLengthError,
)
from passforge.core.models import (
    CrackTimeEstimate,
    GeneratedPassword,
    StrengthReport,
)


class PassForgeEngine:
    """Orchestrates strength checks, generation and crack-time estimates.

    Usage::

        engine = PassForgeEngine()
        report = engine.check_strength("P@ssw0rd!")
        generated = engine.generate_password(20)
        estimate = engine.estimate_crack_time("P@ssw0rd!")

    Attributes:
        config: PassForge configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[ForgeConfig] = None,
        logger: Optional[ForgeLogger] = None,
    ) -> None:
        self.config = config or ForgeConfig()
        settings = self.config.global_settings
        self.logger = logger or ForgeLogger(
            "engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
        )

        tool = self.config.passforge
        self._classifier = CharacterClassifier()
        self._scorer = StrengthScorer(self._classifier)
        self._generator = PasswordGenerator(max_length=tool.max_length)
        self._estimator = CrackTimeEstimator(
            guesses_per_second=tool.guesses_per_second,
            classifier=self._classifier,
        )

    # ------------------------------------------------------------------ #
    #  Strength Check
    # ------------------------------------------------------------------ #

    def check_strength(self, password: str) -> StrengthReport:
        """Score *password* against the five strength criteria."""
        with self.logger.operation("check_strength"):
            report = self._scorer.assess(password)
            self.logger.info(
                "Strength assessed",
                length=len(password),
                score=report.score,
                label=report.label.value,
            )
            return report

    # ------------------------------------------------------------------ #
    #  Password Generation
    # ------------------------------------------------------------------ #

    def parse_length(self, raw: str) -> Optional[int]:
        """Parse a user-entered length.

        Returns ``None`` for blank input (use the default length).

        Raises:
            InvalidLengthError: If *raw* is not an integer.
        """
        text = raw.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            raise InvalidLengthError(
                f"'{text}' is not a whole number."
            ) from None

    def generate_password(
        self, requested_length: Optional[int] = None
    ) -> GeneratedPassword:
        """Generate a password, applying the length policy first.

        ``None`` selects the configured default length. Lengths below the
        configured minimum (including zero and negatives) are raised to the
        minimum and flagged as ``clamped``.

        Raises:
            InvalidLengthError: If the length exceeds the configured maximum.
        """
        tool = self.config.passforge
        with self.logger.operation("generate"):
            length = tool.default_length if requested_length is None else requested_length
            clamped = length < tool.min_length
            if clamped:
                self.logger.info(
                    "Requested length below minimum; clamping",
                    requested=length,
                    minimum=tool.min_length,
                )
                length = tool.min_length

            password = self._generator.generate(length)
            self.logger.info("Generated password", length=length)
            return GeneratedPassword(
                password=password,
                length=len(password),
                requested_length=requested_length,
                clamped=clamped,
            )

    # ------------------------------------------------------------------ #
    #  Crack Time Estimation
    # ------------------------------------------------------------------ #

    def estimate_crack_time(self, password: str) -> CrackTimeEstimate:
        """Estimate brute-force crack time for *password*.

        Raises:
            EmptyOrUnrecognizedInputError: If no character pool exists.
        """
        with self.logger.operation("crack_time"):
            try:
                with self.logger.timed("crack time estimate"):
                    estimate = self._estimator.estimate(password)
            except EmptyOrUnrecognizedInputError:
                self.logger.info("No estimate: empty or unrecognised input")
                raise
            self.logger.info(
                "Crack time estimated",
                pool_size=estimate.pool_size,
                length=estimate.length,
                display=estimate.display,
            )
            return estimate
