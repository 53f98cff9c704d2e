"""
Statements REST API. Statements always belong to one interactive session.
"""

from livy_client.models.statement import (
    RunStatementRequest,
    Statement,
    StatementCancelResult,
    Statements,
)
from livy_client.transport.http import HttpClient


class StatementsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    def list(self, session_id: int) -> Statements:
        return self._http.get(f"/sessions/{session_id}/statements", Statements)

    def run(self, session_id: int, request: RunStatementRequest) -> Statement:
        """Submit code to the session. The returned statement is usually still `waiting`."""
        return self._http.post(f"/sessions/{session_id}/statements", Statement, body=request)

    def get(self, session_id: int, statement_id: int) -> Statement:
        return self._http.get(f"/sessions/{session_id}/statements/{statement_id}", Statement)

    def cancel(self, session_id: int, statement_id: int) -> StatementCancelResult:
        return self._http.post(
            f"/sessions/{session_id}/statements/{statement_id}/cancel",
            StatementCancelResult,
            bodiless=True,
        )
