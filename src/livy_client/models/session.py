"""
Interactive session models.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from livy_client.models.base import LivyModel, LivyRequest


class SessionState(str, Enum):
    NOT_STARTED = "not_started"
    STARTING = "starting"
    IDLE = "idle"
    BUSY = "busy"
    SHUTTING_DOWN = "shutting_down"
    ERROR = "error"
    DEAD = "dead"
    SUCCESS = "success"


class SessionKind(str, Enum):
    SPARK = "spark"
    PYSPARK = "pyspark"
    PYSPARK3 = "pyspark3"
    SPARKR = "sparkr"


class Session(LivyModel):
    id: Optional[int] = None
    app_id: Optional[str] = None
    owner: Optional[str] = None
    proxy_user: Optional[str] = None
    kind: Optional[SessionKind] = None
    log: Optional[list[str]] = None
    state: Optional[SessionState] = None
    app_info: Optional[dict[str, Optional[str]]] = None


class Sessions(LivyModel):
    """GET /sessions page"""
    from_: Optional[int] = Field(None, alias="from")
    total: Optional[int] = None
    sessions: Optional[list[Session]] = None


class SessionStateOnly(LivyModel):
    id: Optional[int] = None
    state: Optional[SessionState] = None


class SessionLog(LivyModel):
    id: Optional[int] = None
    from_: Optional[int] = Field(None, alias="from")
    total: Optional[int] = None
    log: Optional[list[str]] = None


class SessionKillResult(LivyModel):
    msg: Optional[str] = None


class NewSessionRequest(LivyRequest):
    """POST /sessions body. Only `kind` is required; the server defaults the rest."""
    kind: SessionKind
    proxy_user: Optional[str] = None
    jars: Optional[list[str]] = None
    py_files: Optional[list[str]] = None
    files: Optional[list[str]] = None
    driver_memory: Optional[str] = None
    driver_cores: Optional[int] = None
    executor_memory: Optional[str] = None
    executor_cores: Optional[int] = None
    num_executors: Optional[int] = None
    archives: Optional[list[str]] = None
    queue: Optional[str] = None
    name: Optional[str] = None
    conf: Optional[dict[str, str]] = None
    heartbeat_timeout_in_second: Optional[int] = None
