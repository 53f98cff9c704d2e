import json

import httpx
import pytest

from livy_client import LivyClient

BASE_URL = "http://livy.test:8998"


class Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: object = {}

    def respond(self, body: object = None, status_code: int = 200) -> None:
        self.body = {} if body is None else body
        self.status_code = status_code

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> object:
        return json.loads(self.last.content)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def client(recorder: Recorder):
    c = LivyClient(BASE_URL + "/", transport=httpx.MockTransport(recorder))
    yield c
    c.close()
