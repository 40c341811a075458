"""
PassForge Exceptions
=====================

Every error raised by the analyzers is recoverable: the interactive menu
reports it and re-prompts, the CLI prints it and exits with status 1.
"""


class PassForgeError(Exception):
    """Base class for user-facing PassForge errors."""


class EmptyOrUnrecognizedInputError(PassForgeError):
    """The password is empty or contains no recognised character class,
    so no character pool (and no crack-time estimate) exists."""

    def __init__(self) -> None:
        super().__init__("Password is empty or contains unrecognised characters.")


class InvalidLengthError(PassForgeError):
    """A requested password length cannot be honoured."""

    pass
