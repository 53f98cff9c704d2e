"""
Batch job models.

Batch `state` stays a plain string: the service reports batch states more
loosely than session states.
"""

from typing import Optional

from pydantic import Field

from livy_client.models.base import LivyModel, LivyRequest


class Batch(LivyModel):
    id: Optional[int] = None
    app_id: Optional[str] = None
    app_info: Optional[dict[str, Optional[str]]] = None
    log: Optional[list[str]] = None
    state: Optional[str] = None


class Batches(LivyModel):
    """GET /batches page. The service lists batches under `sessions`."""
    from_: Optional[int] = Field(None, alias="from")
    total: Optional[int] = None
    batches: Optional[list[Batch]] = Field(None, alias="sessions")


class BatchStateOnly(LivyModel):
    id: Optional[int] = None
    state: Optional[str] = None


class BatchLog(LivyModel):
    id: Optional[int] = None
    from_: Optional[int] = Field(None, alias="from")
    total: Optional[int] = None
    log: Optional[list[str]] = None


class BatchKillResult(LivyModel):
    msg: Optional[str] = None


class NewBatchRequest(LivyRequest):
    """POST /batches body. Only `file` is required."""
    file: str
    proxy_user: Optional[str] = None
    class_name: Optional[str] = None
    args: Optional[list[str]] = None
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
