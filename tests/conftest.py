"""Shared test fixtures.

The Akinator client's requests.Session is swapped for a mock that serves
canned pages and JSONP bodies, so no test touches the network.
"""

import json
from unittest.mock import MagicMock

import pytest

from akinator_sdk import Akinator

WS_URL = "https://srv13.akinator.com:9196/ws"

LANDING_HTML = (
    "<html><script>var themes = "
    '[{"translated_theme_name":"Characters","urlWs":"https:\\/\\/srv13.akinator.com:9196\\/ws","subject_id":"1"},'
    '{"translated_theme_name":"Objects","urlWs":"https:\\/\\/srv3.akinator.com:9331\\/ws","subject_id":"2"},'
    '{"translated_theme_name":"Animals","urlWs":"https:\\/\\/srv2.akinator.com:9157\\/ws","subject_id":"14"}]'
    ";</script></html>"
)

GAME_HTML = (
    "<script>\n"
    "    var uid_ext_session = 'a1b2c3d4-uid';\n"
    "    var frontaddr = 'NDYuMTA1LjExMC40NQ==';\n"
    "</script>"
)


def jsonp(payload: dict, callback: str = "jQuery331023608747682107778_1700000000000") -> str:
    """Wrap a payload the way the Akinator API does."""
    return f"{callback}({json.dumps(payload)})"


def step_payload(question: str, step: int, progression: float) -> dict:
    return {
        "completion": "OK",
        "parameters": {
            "question": question,
            "step": str(step),
            "progression": f"{progression:.5f}",
            "questionid": str(100 + step),
        },
    }


def new_session_payload() -> dict:
    return {
        "completion": "OK",
        "parameters": {
            "identification": {"channel": 0, "session": "432", "signature": "98765321"},
            "step_information": {
                "question": "Is your character real?",
                "step": "0",
                "progression": "0.00000",
                "questionid": "266",
            },
        },
    }


def guess_payload() -> dict:
    return {
        "completion": "OK",
        "parameters": {
            "elements": [
                {"element": {
                    "id": "7512", "name": "Mario", "award_id": "-1", "flag_photo": 0,
                    "description": "Video game character", "ranking": "412",
                    "picture_path": "partenaire/m/mario.jpg",
                    "absolute_picture_path": "https://photos.clarinea.fr/partenaire/m/mario.jpg",
                }},
                {"element": {
                    "id": "1841", "name": "Luigi", "award_id": "-1", "flag_photo": 2,
                    "description": "Mario's brother", "ranking": "1590",
                    "picture_path": "partenaire/l/luigi.jpg",
                    "absolute_picture_path": "https://photos.clarinea.fr/partenaire/l/luigi.jpg",
                }},
            ],
            "NbObjetsPertinents": "2",
        },
    }


def make_response(text: str, status_code: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.text = text
    resp.status_code = status_code
    resp.ok = status_code < 400
    return resp


class FakeAkinatorServer:
    """Routes GET calls by URL to queued response bodies."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, url: str, *bodies: str, status_code: int = 200) -> None:
        self.routes.setdefault(url, []).extend(make_response(b, status_code) for b in bodies)

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params))
        queue = self.routes.get(url)
        if not queue:
            raise AssertionError(f"Unexpected request to {url}")
        return queue.pop(0) if len(queue) > 1 else queue[0]

    def params_for(self, url: str) -> list:
        return [p for u, p in self.calls if u == url]


@pytest.fixture
def server() -> FakeAkinatorServer:
    fake = FakeAkinatorServer()
    fake.add("https://en.akinator.com", LANDING_HTML)
    fake.add("https://en.akinator.com/game", GAME_HTML)
    fake.add("https://en.akinator.com/new_session", jsonp(new_session_payload()))
    return fake


@pytest.fixture
def aki(server: FakeAkinatorServer) -> Akinator:
    """An Akinator client wired to the fake server."""
    client = Akinator()
    client._session = MagicMock()
    client._session.get.side_effect = server.get
    return client


@pytest.fixture
def started(aki: Akinator) -> Akinator:
    aki.start()
    return aki
