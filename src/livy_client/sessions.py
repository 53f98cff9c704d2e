"""
Interactive sessions REST API.
"""

from __future__ import annotations

from typing import Optional

from livy_client.models.session import (
    NewSessionRequest,
    Session,
    SessionKillResult,
    SessionLog,
    Sessions,
    SessionStateOnly,
)
from livy_client.transport.http import HttpClient, param, params


class SessionsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    def list(self, from_: Optional[int] = None, size: Optional[int] = None) -> Sessions:
        """GET /sessions"""
        query = params([param("from", from_), param("size", size)])
        return self._http.get(f"/sessions{query}", Sessions)

    def create(self, request: NewSessionRequest) -> Session:
        """POST /sessions"""
        return self._http.post("/sessions", Session, body=request)

    def get(self, session_id: int) -> Session:
        """GET /sessions/{sessionId}"""
        return self._http.get(f"/sessions/{session_id}", Session)

    def get_state(self, session_id: int) -> SessionStateOnly:
        """GET /sessions/{sessionId}/state"""
        return self._http.get(f"/sessions/{session_id}/state", SessionStateOnly)

    def kill(self, session_id: int) -> SessionKillResult:
        """DELETE /sessions/{sessionId}. Later reads of the session may 404."""
        return self._http.delete(f"/sessions/{session_id}", SessionKillResult, bodiless=True)

    delete = kill

    def log(self, session_id: int, from_: Optional[int] = None, size: Optional[int] = None) -> SessionLog:
        """GET /sessions/{sessionId}/log"""
        query = params([param("from", from_), param("size", size)])
        return self._http.get(f"/sessions/{session_id}/log{query}", SessionLog)
