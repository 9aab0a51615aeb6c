"""
Akinator SDK — Errors

Every failure the SDK raises derives from AkinatorError. Transport
failures from requests (timeouts, DNS, refused connections) are not
wrapped and propagate as-is.
"""

from __future__ import annotations
from typing import Dict, Type


class AkinatorError(Exception):
    """Base class for errors raised by the Akinator SDK."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


class ParseResponseError(AkinatorError):
    """The API response could not be parsed."""


class NoDataFound(AkinatorError):
    """The expected data was missing from an Akinator page."""


class ServersDown(AkinatorError):
    """The Akinator servers in that region are currently down."""


class TechnicalError(AkinatorError):
    """There is a technical error with the Akinator servers."""


class SessionTimeout(AkinatorError):
    """The Akinator session timed out."""


class NoMoreQuestions(AkinatorError):
    """Akinator has no more questions to ask."""


class ConnectionFailed(AkinatorError):
    """Failed to connect to the Akinator servers."""


class CantGoBackAnyFurther(AkinatorError):
    """Already on the first question."""


class InvalidAnswer(AkinatorError, ValueError):
    """The given answer is not one Akinator understands."""


class NotStarted(AkinatorError):
    """The game has not been started yet."""


# Completion codes sent by the API in place of "OK"
COMPLETION_ERRORS: Dict[str, Type[AkinatorError]] = {
    "KO - SERVER DOWN": ServersDown,
    "KO - TECHNICAL ERROR": TechnicalError,
    "KO - TIMEOUT": SessionTimeout,
    "KO - ELEM LIST IS EMPTY": NoMoreQuestions,
    "WARN - NO QUESTION": NoMoreQuestions,
}


def error_for_completion(completion: str) -> AkinatorError:
    """Build the error matching a non-OK completion code."""
    error_cls = COMPLETION_ERRORS.get(completion, ConnectionFailed)
    return error_cls(f"Akinator returned '{completion}'")
