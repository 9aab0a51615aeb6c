"""
Akinator SDK — API Client

Handles all HTTP communication with the Akinator web service: finding a
game server, opening a session, answering, undoing and asking for guesses.
The API is undocumented and answers in JSONP; every method unwraps the
response, checks its completion code and raises on errors.
"""

from __future__ import annotations
import json
import logging
import re
import time
from typing import Any, Dict, List, Optional, Tuple, Union

import requests

from .errors import (
    CantGoBackAnyFurther,
    ConnectionFailed,
    NoDataFound,
    NotStarted,
    ParseResponseError,
    error_for_completion,
)
from .types import Answer, Guess, Identification, Question, ServerInfo, Theme

logger = logging.getLogger(__name__)

HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,image/apng,*/*;q=0.8",
    "Accept-Encoding": "gzip, deflate",
    "Accept-Language": "en-US,en;q=0.9",
    "User-Agent": (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) "
        "snap Chromium/81.0.4044.92 Chrome/81.0.4044.92 Safari/537.36"
    ),
    "X-Requested-With": "XMLHttpRequest",
}

CALLBACK_PREFIX = "jQuery331023608747682107778_"

SERVER_LIST_RE = re.compile(
    r'\[\{"translated_theme_name":".*?","urlWs":"https:\\/\\/srv\d+\.akinator\.com:\d+\\/ws",'
    r'"subject_id":"\d+"\}\]',
    re.IGNORECASE,
)
UID_RE = re.compile(r"var uid_ext_session = '([^']*)';", re.IGNORECASE)
FRONTADDR_RE = re.compile(r"var frontaddr = '([^']*)';", re.IGNORECASE)


def strip_jsonp(text: str) -> Dict[str, Any]:
    """Unwrap a `callback({...})` body and decode the JSON inside it."""
    start = text.find("(")
    end = text.rfind(")")
    if start == -1 or end <= start:
        raise ParseResponseError("Response is not wrapped in a JSONP callback")
    try:
        data = json.loads(text[start + 1:end])
    except ValueError as e:
        raise ParseResponseError(f"Failed to parse JSON: {e}") from e
    if not isinstance(data, dict):
        raise ParseResponseError("Expected a JSON object in the response")
    return data


class Akinator:
    """
    A single Akinator game session.

    Usage:
        aki = Akinator(theme="animals")
        question = aki.start()
        while aki.progression <= 80:
            question = aki.answer("yes")
        guess = aki.win()

    Args:
        language: Akinator site language, e.g. "en", "fr" (default: "en").
        theme: Theme, subject id or name (default: characters).
        child_mode: Restrict questions and guesses to child-safe ones.
        timeout: Request timeout in seconds (default: 10).
        base_url: Fixed site URL. When given, it is used as-is and the
            language (including with_language()) no longer changes it.
    """

    def __init__(
        self,
        language: str = "en",
        theme: Union[Theme, int, str] = Theme.CHARACTERS,
        child_mode: bool = False,
        timeout: int = 10,
        base_url: Optional[str] = None,
    ):
        self.language = language
        self.theme = Theme.parse(theme)
        self.child_mode = child_mode
        self.timeout = timeout
        self._base_url = base_url.rstrip("/") if base_url else None
        self._session = requests.Session()
        self._session.headers.update(HEADERS)

        # Session data, filled in by start()
        self.ws_url: Optional[str] = None
        self.uid: Optional[str] = None
        self.frontaddr: Optional[str] = None
        self.identification: Optional[Identification] = None
        self._timestamp = 0.0

        # Game state
        self.current_question: Optional[Question] = None
        self.progression = 0.0
        self.step = 0
        self.first_guess: Optional[Guess] = None
        self.guesses: List[Guess] = []

    def __enter__(self) -> "Akinator":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    # ─── Configuration ────────────────────────────────────────────────────

    @property
    def base_url(self) -> str:
        return self._base_url or f"https://{self.language}.akinator.com"

    def with_theme(self, theme: Union[Theme, int, str]) -> "Akinator":
        self.theme = Theme.parse(theme)
        return self

    def with_language(self, language: str) -> "Akinator":
        self.language = language
        return self

    def with_child_mode(self, child_mode: bool = True) -> "Akinator":
        self.child_mode = child_mode
        return self

    @property
    def question_filter(self) -> str:
        return "cat=1" if self.child_mode else ""

    @property
    def soft_constraint(self) -> str:
        return "ETAT='EN'" if self.child_mode else ""

    # ─── Internal ─────────────────────────────────────────────────────────

    def _request(self, url: str, params: Optional[dict] = None) -> str:
        """GET a URL and return the body text, raising on HTTP errors."""
        logger.debug(f"GET {url} params={params}")
        resp = self._session.get(url, params=params, timeout=self.timeout)

        if not resp.ok:
            raise ConnectionFailed(
                f"HTTP {resp.status_code} from {url}",
                status_code=resp.status_code,
            )

        return resp.text

    def _call(self, url: str, params: dict) -> Dict[str, Any]:
        """Call a JSONP endpoint and return its `parameters` on an OK completion."""
        data = strip_jsonp(self._request(url, params))
        completion = data.get("completion", "")

        if completion != "OK":
            logger.warning(f"{url} returned completion '{completion}'")
            raise error_for_completion(completion)

        parameters = data.get("parameters")
        if not isinstance(parameters, dict):
            raise ParseResponseError(f"No parameters in response from {url}")
        return parameters

    def _callback(self) -> str:
        return f"{CALLBACK_PREFIX}{int(self._timestamp * 1000)}"

    def _child_mod(self) -> str:
        return "true" if self.child_mode else "false"

    def _require_started(self) -> Identification:
        if self.identification is None or self.ws_url is None:
            raise NotStarted("Call start() before playing")
        return self.identification

    def _update_question(self, question: Question) -> None:
        self.current_question = question
        self.progression = question.progression
        self.step = question.step

    def _reset(self) -> None:
        self.identification = None
        self.current_question = None
        self.progression = 0.0
        self.step = 0
        self.first_guess = None
        self.guesses = []

    # ─── Handshake ────────────────────────────────────────────────────────

    def find_servers(self) -> List[ServerInfo]:
        """Read the list of game servers from the Akinator landing page."""
        html = self._request(self.base_url)
        match = SERVER_LIST_RE.search(html)
        if not match:
            raise NoDataFound("Could not find the server list")

        try:
            entries = json.loads(match.group(0))
        except ValueError as e:
            raise ParseResponseError(f"Failed to parse server list: {e}") from e

        return [ServerInfo.from_dict(e) for e in entries]

    def find_server(self) -> str:
        """Return the game server URL for the current theme."""
        for server in self.find_servers():
            if server.subject_id == self.theme.value:
                return server.url
        raise NoDataFound(f"No server found for theme {self.theme.name.lower()}")

    def find_session_info(self) -> Tuple[str, str]:
        """Return (uid_ext_session, frontaddr) scraped from the game page."""
        html = self._request(f"{self.base_url}/game")
        uid = UID_RE.search(html)
        frontaddr = FRONTADDR_RE.search(html)
        if not uid or not frontaddr:
            raise NoDataFound("Could not find the session info")
        return uid.group(1), frontaddr.group(1)

    # ─── Public API ───────────────────────────────────────────────────────

    def start(self) -> Optional[str]:
        """Open a new game and return the first question."""
        self._reset()
        self.ws_url = self.find_server()
        self.uid, self.frontaddr = self.find_session_info()
        self._timestamp = time.time()

        params = {
            "callback": self._callback(),
            "urlApiWs": self.ws_url,
            "partner": 1,
            "childMod": self._child_mod(),
            "player": "website-desktop",
            "uid_ext_session": self.uid,
            "frontaddr": self.frontaddr,
            "constraint": "ETAT<>'AV'",
            "soft_constraint": self.soft_constraint,
            "question_filter": self.question_filter,
        }
        parameters = self._call(f"{self.base_url}/new_session", params)

        try:
            self.identification = Identification.from_dict(parameters["identification"])
            question = Question.from_dict(parameters["step_information"])
        except KeyError as e:
            raise ParseResponseError(f"Missing {e} in new_session response") from e
        self._update_question(question)

        logger.info(
            f"Started {self.theme.name.lower()} game on {self.ws_url} "
            f"(session {self.identification.session})"
        )
        return question.text

    def answer(self, answer: Union[Answer, int, str]) -> Optional[str]:
        """Answer the current question and return the next one."""
        ans = Answer.parse(answer)
        ident = self._require_started()

        params = {
            "callback": self._callback(),
            "urlApiWs": self.ws_url,
            "childMod": self._child_mod(),
            "session": ident.session,
            "signature": ident.signature,
            "frontaddr": self.frontaddr,
            "step": self.step,
            "answer": ans.value,
            "question_filter": self.question_filter,
        }
        question = Question.from_dict(self._call(f"{self.base_url}/answer_api", params))
        self._update_question(question)
        return question.text

    def back(self) -> Optional[str]:
        """Undo the last answer and return the previous question."""
        ident = self._require_started()
        if self.step == 0:
            raise CantGoBackAnyFurther("Cannot go back any further, already on the first question")

        params = {
            "callback": self._callback(),
            "childMod": self._child_mod(),
            "session": ident.session,
            "signature": ident.signature,
            "step": self.step,
            "answer": -1,
            "question_filter": self.question_filter,
        }
        question = Question.from_dict(self._call(f"{self.ws_url}/cancel_answer", params))
        self._update_question(question)
        return question.text

    def win(self) -> Optional[Guess]:
        """Ask Akinator for its guesses. Returns the best one."""
        ident = self._require_started()

        params = {
            "callback": self._callback(),
            "childMod": self._child_mod(),
            "session": ident.session,
            "signature": ident.signature,
            "step": self.step,
        }
        parameters = self._call(f"{self.ws_url}/list", params)

        try:
            elements = parameters["elements"]
            self.guesses = [Guess.from_dict(e["element"]) for e in elements]
        except (KeyError, TypeError) as e:
            raise ParseResponseError(f"Malformed guess list: {e}") from e
        self.first_guess = self.guesses[0] if self.guesses else None

        logger.info(f"Received {len(self.guesses)} guesses at step {self.step}")
        return self.first_guess
