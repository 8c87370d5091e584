"""Exception hierarchy for resultkit."""

from __future__ import annotations


class ResultError(Exception):
    """Base exception for all resultkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidCastError(ResultError, TypeError):
    """A result was narrowed to the side that is not live.

    Also raised by ``Result.from_value`` when a bare value cannot be placed on
    exactly one side.
    """


class InvalidResultError(ResultError):
    """An error result was unwrapped and its payload is not an exception.

    The raw payload is kept on ``error`` for programmatic access.
    """

    def __init__(
        self, message: str, *, error: object = None, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.error = error


class ResultFormatError(ResultError, ValueError):
    """Tagged result input is malformed (bad status, missing field, bad payload)."""


class ConfigurationError(ResultError):
    """Codec configuration validation or resolution failed."""
