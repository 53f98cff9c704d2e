"""
livy-client: Python client for the Apache Livy REST API.

Interactive sessions, statements and batch jobs over plain HTTP/JSON.
"""

from livy_client.client import LivyClient
from livy_client.auth import NegotiateAuth
from livy_client.sessions import SessionsAPI
from livy_client.statements import StatementsAPI
from livy_client.batches import BatchesAPI
from livy_client.errors import LivyError, TransportError, HttpStatusError, DecodeError
from livy_client.models.session import (
    NewSessionRequest,
    Session,
    SessionKind,
    SessionKillResult,
    SessionLog,
    Sessions,
    SessionState,
    SessionStateOnly,
)
from livy_client.models.statement import (
    RunStatementRequest,
    Statement,
    StatementCancelResult,
    StatementOutput,
    Statements,
    StatementState,
)
from livy_client.models.batch import (
    Batch,
    Batches,
    BatchKillResult,
    BatchLog,
    BatchStateOnly,
    NewBatchRequest,
)

__version__ = "0.1.0"
__all__ = [
    "LivyClient",
    "NegotiateAuth",
    "SessionsAPI",
    "StatementsAPI",
    "BatchesAPI",
    "LivyError",
    "TransportError",
    "HttpStatusError",
    "DecodeError",
    "NewSessionRequest",
    "Session",
    "SessionKind",
    "SessionKillResult",
    "SessionLog",
    "Sessions",
    "SessionState",
    "SessionStateOnly",
    "RunStatementRequest",
    "Statement",
    "StatementCancelResult",
    "StatementOutput",
    "Statements",
    "StatementState",
    "Batch",
    "Batches",
    "BatchKillResult",
    "BatchLog",
    "BatchStateOnly",
    "NewBatchRequest",
]
