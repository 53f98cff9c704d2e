"""
Batch jobs REST API.
"""

from __future__ import annotations

from typing import Optional

from livy_client.models.batch import (
    Batch,
    Batches,
    BatchKillResult,
    BatchLog,
    BatchStateOnly,
    NewBatchRequest,
)
from livy_client.transport.http import HttpClient, param, params


class BatchesAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    def list(self, from_: Optional[int] = None, size: Optional[int] = None) -> Batches:
        """GET /batches"""
        query = params([param("from", from_), param("size", size)])
        return self._http.get(f"/batches{query}", Batches)

    def create(self, request: NewBatchRequest) -> Batch:
        """POST /batches"""
        return self._http.post("/batches", Batch, body=request)

    def get(self, batch_id: int) -> Batch:
        """GET /batches/{batchId}"""
        return self._http.get(f"/batches/{batch_id}", Batch)

    def get_state(self, batch_id: int) -> BatchStateOnly:
        """GET /batches/{batchId}/state"""
        return self._http.get(f"/batches/{batch_id}/state", BatchStateOnly)

    def kill(self, batch_id: int) -> BatchKillResult:
        """DELETE /batches/{batchId}"""
        return self._http.delete(f"/batches/{batch_id}", BatchKillResult, bodiless=True)

    def log(self, batch_id: int, from_: Optional[int] = None, size: Optional[int] = None) -> BatchLog:
        """GET /batches/{batchId}/log"""
        query = params([param("from", from_), param("size", size)])
        return self._http.get(f"/batches/{batch_id}/log{query}", BatchLog)
