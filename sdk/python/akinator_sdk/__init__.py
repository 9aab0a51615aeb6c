"""
akinator-sdk

Python client for the Akinator guessing game web service.
https://akinator.com
"""

from .client import Akinator
from .game import Game
from .errors import (
    AkinatorError,
    ParseResponseError,
    NoDataFound,
    ServersDown,
    TechnicalError,
    SessionTimeout,
    NoMoreQuestions,
    ConnectionFailed,
    CantGoBackAnyFurther,
    InvalidAnswer,
    NotStarted,
)
from .types import (
    Answer,
    Theme,
    Question,
    Guess,
    Identification,
    ServerInfo,
)

__version__ = "0.1.0"
__all__ = [
    "Akinator",
    "Game",
    "AkinatorError",
    "ParseResponseError",
    "NoDataFound",
    "ServersDown",
    "TechnicalError",
    "SessionTimeout",
    "NoMoreQuestions",
    "ConnectionFailed",
    "CantGoBackAnyFurther",
    "InvalidAnswer",
    "NotStarted",
    "Answer",
    "Theme",
    "Question",
    "Guess",
    "Identification",
    "ServerInfo",
]
