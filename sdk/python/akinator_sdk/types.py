"""
Akinator SDK — Python Types

Enums for answers and themes, plus dataclasses for the API's response
shapes. The API sends most numbers as strings; from_dict converts them.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .errors import InvalidAnswer, ParseResponseError


_ANSWER_ALIASES = {
    "yes": 0, "y": 0, "0": 0,
    "no": 1, "n": 1, "1": 1,
    "i dont know": 2, "i don't know": 2, "idk": 2, "i": 2, "2": 2,
    "probably": 3, "p": 3, "3": 3,
    "probably not": 4, "pn": 4, "4": 4,
}

_THEME_ALIASES = {
    "a": 14, "animals": 14,
    "o": 2, "objects": 2,
}


class Answer(Enum):
    """An answer to one of Akinator's questions."""
    YES = 0
    NO = 1
    IDK = 2
    PROBABLY = 3
    PROBABLY_NOT = 4

    @staticmethod
    def parse(value: Union["Answer", int, str]) -> "Answer":
        """Parse 'yes', 'y', 'pn', 3, ... into an Answer. Raises InvalidAnswer."""
        if isinstance(value, Answer):
            return value
        code = _ANSWER_ALIASES.get(str(value).strip().lower())
        if code is None:
            raise InvalidAnswer(f"Invalid answer: {value!r}")
        return Answer(code)


class Theme(Enum):
    """What the player is thinking of. Values are Akinator subject ids."""
    CHARACTERS = 1
    OBJECTS = 2
    ANIMALS = 14

    @staticmethod
    def parse(value: Union["Theme", int, str, None]) -> "Theme":
        """Parse a theme name, alias or subject id. Unknown values mean characters."""
        if isinstance(value, Theme):
            return value
        if isinstance(value, int):
            return Theme(value) if value in (t.value for t in Theme) else Theme.CHARACTERS
        subject_id = _THEME_ALIASES.get(str(value or "").strip().lower())
        return Theme(subject_id) if subject_id else Theme.CHARACTERS


@dataclass
class Question:
    """A question and where the game stands (step_information)."""
    text: str
    step: int
    progression: float
    question_id: Optional[str] = None

    @staticmethod
    def from_dict(d: dict) -> "Question":
        try:
            return Question(
                text=d["question"],
                step=int(d.get("step", 0)),
                progression=float(d.get("progression", 0.0)),
                question_id=d.get("questionid"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ParseResponseError(f"Malformed question data: {e}") from e


@dataclass
class Identification:
    """Session credentials handed out by new_session."""
    session: str
    signature: str

    @staticmethod
    def from_dict(d: dict) -> "Identification":
        try:
            return Identification(
                session=str(d["session"]),
                signature=str(d["signature"]),
            )
        except (KeyError, TypeError) as e:
            raise ParseResponseError(f"Malformed identification data: {e}") from e


@dataclass
class Guess:
    """One of Akinator's guesses (an element of /list)."""
    id: str
    name: str
    award_id: str
    flag_photo: int
    description: str
    ranking: str
    picture_path: str
    absolute_picture_path: str

    @staticmethod
    def from_dict(d: dict) -> "Guess":
        try:
            return Guess(
                id=str(d["id"]),
                name=d["name"],
                award_id=str(d.get("award_id", "")),
                flag_photo=int(d.get("flag_photo", 0)),
                description=d.get("description", ""),
                ranking=str(d.get("ranking", "")),
                picture_path=d.get("picture_path", ""),
                absolute_picture_path=d.get("absolute_picture_path", ""),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ParseResponseError(f"Malformed guess data: {e}") from e


@dataclass
class ServerInfo:
    """A game server advertised on the Akinator landing page."""
    url: str
    subject_id: int
    theme_name: str

    @staticmethod
    def from_dict(d: dict) -> "ServerInfo":
        try:
            return ServerInfo(
                url=d["urlWs"],
                subject_id=int(d["subject_id"]),
                theme_name=d.get("translated_theme_name", ""),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ParseResponseError(f"Malformed server data: {e}") from e
