"""
Statement models. The statement endpoints use snake_case keys on the wire.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from livy_client.models.base import LivyModel, LivyRequest


class StatementState(str, Enum):
    WAITING = "waiting"
    RUNNING = "running"
    AVAILABLE = "available"
    ERROR = "error"
    CANCELLING = "cancelling"
    CANCELLED = "cancelled"


class StatementOutput(LivyModel):
    status: Optional[str] = None
    execution_count: Optional[int] = Field(None, alias="execution_count")
    data: Optional[dict[str, Optional[str]]] = None


class Statement(LivyModel):
    id: Optional[int] = None
    state: Optional[StatementState] = None
    output: Optional[StatementOutput] = None


class Statements(LivyModel):
    total_statements: Optional[int] = Field(None, alias="total_statements")
    statements: Optional[list[Statement]] = None


class StatementCancelResult(LivyModel):
    msg: Optional[str] = None


class RunStatementRequest(LivyRequest):
    code: str
