"""
LivyClient: the synchronous entry point for the Livy REST API.
"""

from typing import Any, Optional

import httpx

from livy_client.auth import NegotiateAuth
from livy_client.batches import BatchesAPI
from livy_client.sessions import SessionsAPI
from livy_client.statements import StatementsAPI
from livy_client.transport.http import DEFAULT_REQUESTED_BY, DEFAULT_TIMEOUT, HttpClient


class LivyClient:
    """
    Livy REST API client.

    Example:
        with LivyClient("http://livy.example.com:8998") as client:
            session = client.sessions.create(NewSessionRequest(kind=SessionKind.PYSPARK))
            stmt = client.statements.run(session.id, RunStatementRequest(code="1 + 1"))

    Settings are fixed at construction. A single client may be shared between
    threads; every call is one independent request/response round trip.
    """

    def __init__(
        self,
        url: str,
        gssnegotiate: Optional[bool] = None,
        username: Optional[str] = None,
        requested_by: str = DEFAULT_REQUESTED_BY,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._gssnegotiate = gssnegotiate
        self._username = username

        auth = NegotiateAuth(principal=username) if gssnegotiate else None
        self.http = HttpClient(url, auth=auth, requested_by=requested_by, timeout=timeout, transport=transport)
        self.sessions = SessionsAPI(self.http)
        self.statements = StatementsAPI(self.http)
        self.batches = BatchesAPI(self.http)

    @property
    def url(self) -> str:
        return self.http.base_url

    @property
    def gssnegotiate(self) -> Optional[bool]:
        return self._gssnegotiate

    @property
    def username(self) -> Optional[str]:
        return self._username

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "LivyClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
