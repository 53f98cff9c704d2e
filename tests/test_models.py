"""Wire mapping of Livy payloads: enum tags, camelCase aliases, absent fields."""

import json

import pytest
from pydantic import ValidationError

from livy_client.models.batch import Batch, Batches, BatchStateOnly, NewBatchRequest
from livy_client.models.session import (
    NewSessionRequest,
    Session,
    SessionKind,
    SessionLog,
    Sessions,
    SessionState,
    SessionStateOnly,
)
from livy_client.models.statement import RunStatementRequest, Statement, Statements, StatementState

SESSION_STATE_TAGS = {
    SessionState.NOT_STARTED: "not_started",
    SessionState.STARTING: "starting",
    SessionState.IDLE: "idle",
    SessionState.BUSY: "busy",
    SessionState.SHUTTING_DOWN: "shutting_down",
    SessionState.ERROR: "error",
    SessionState.DEAD: "dead",
    SessionState.SUCCESS: "success",
}

def _decode(model, payload):
    return model.model_validate_json(json.dumps(payload))


STATEMENT_STATE_TAGS = {
    StatementState.WAITING: "waiting",
    StatementState.RUNNING: "running",
    StatementState.AVAILABLE: "available",
    StatementState.ERROR: "error",
    StatementState.CANCELLING: "cancelling",
    StatementState.CANCELLED: "cancelled",
}


def test_enum_variant_sets_are_closed():
    assert set(SessionState) == set(SESSION_STATE_TAGS)
    assert set(StatementState) == set(STATEMENT_STATE_TAGS)
    assert [k.value for k in SessionKind] == ["spark", "pyspark", "pyspark3", "sparkr"]


@pytest.mark.parametrize("state,tag", SESSION_STATE_TAGS.items())
def test_session_state_round_trip(state, tag):
    assert state.value == tag
    decoded = _decode(SessionStateOnly, {"id": 1, "state": tag})
    assert decoded.state is state
    assert decoded.model_dump(mode="json")["state"] == tag


@pytest.mark.parametrize("state,tag", STATEMENT_STATE_TAGS.items())
def test_statement_state_round_trip(state, tag):
    assert _decode(Statement, {"state": tag}).state is state


@pytest.mark.parametrize("kind", list(SessionKind))
def test_session_kind_round_trip(kind):
    body = NewSessionRequest(kind=kind).to_body()
    assert _decode(Session, body).kind is kind


@pytest.mark.parametrize("model,payload", [
    (SessionStateOnly, {"state": "sleeping"}),
    (SessionStateOnly, {"state": "notStarted"}),
    (SessionStateOnly, {"state": "Idle"}),
    (Statement, {"state": "done"}),
    (Session, {"kind": "scala"}),
])
def test_unknown_tag_is_rejected(model, payload):
    with pytest.raises(ValidationError):
        _decode(model, payload)


def test_batch_state_is_free_form():
    assert _decode(Batch, {"state": "running"}).state == "running"
    assert _decode(BatchStateOnly, {"id": 3, "state": "anything-goes"}).state == "anything-goes"


def test_every_response_field_may_be_absent():
    for model in (Session, Sessions, SessionStateOnly, SessionLog, Statement, Statements, Batch, Batches):
        decoded = _decode(model, {})
        assert all(value is None for value in decoded.model_dump().values()), model.__name__


def test_session_camel_case_fields():
    session = _decode(Session, {
        "id": 7,
        "appId": "application_1_0001",
        "owner": "alice",
        "proxyUser": "etl",
        "kind": "pyspark",
        "log": ["line 1"],
        "state": "busy",
        "appInfo": {"driverLogUrl": "http://nm/logs", "sparkUiUrl": None},
    })
    assert session.app_id == "application_1_0001"
    assert session.proxy_user == "etl"
    assert session.kind is SessionKind.PYSPARK
    assert session.state is SessionState.BUSY
    assert session.app_info == {"driverLogUrl": "http://nm/logs", "sparkUiUrl": None}


def test_log_page_from_key():
    log = _decode(SessionLog, {"id": 1, "from": 5, "total": 9, "log": ["a", "b"]})
    assert log.from_ == 5
    assert log.total == 9


def test_batches_listed_under_sessions_key():
    page = _decode(Batches, {"from": 0, "total": 1, "sessions": [{"id": 3, "state": "dead"}]})
    assert page.from_ == 0
    assert page.batches[0].id == 3


def test_statements_snake_case_keys():
    page = _decode(Statements, {
        "total_statements": 1,
        "statements": [{
            "id": 0,
            "state": "available",
            "output": {"status": "ok", "execution_count": 0, "data": {"text/plain": "2"}},
        }],
    })
    assert page.total_statements == 1
    output = page.statements[0].output
    assert output.execution_count == 0
    assert output.data["text/plain"] == "2"


def test_minimal_session_request():
    assert NewSessionRequest(kind=SessionKind.SPARK).to_body() == {"kind": "spark"}


def test_minimal_batch_request():
    assert NewBatchRequest(file="hdfs:///jobs/pi.py").to_body() == {"file": "hdfs:///jobs/pi.py"}


def test_statement_request():
    assert RunStatementRequest(code="1 + 1").to_body() == {"code": "1 + 1"}


def test_session_request_fields_use_wire_names():
    body = NewSessionRequest(
        kind=SessionKind.PYSPARK3,
        proxy_user="etl",
        py_files=["deps.zip"],
        driver_memory="2g",
        driver_cores=2,
        executor_memory="4g",
        executor_cores=4,
        num_executors=10,
        queue="default",
        conf={"spark.dynamicAllocation.enabled": "false"},
        heartbeat_timeout_in_second=60,
    ).to_body()
    assert body == {
        "kind": "pyspark3",
        "proxyUser": "etl",
        "pyFiles": ["deps.zip"],
        "driverMemory": "2g",
        "driverCores": 2,
        "executorMemory": "4g",
        "executorCores": 4,
        "numExecutors": 10,
        "queue": "default",
        "conf": {"spark.dynamicAllocation.enabled": "false"},
        "heartbeatTimeoutInSecond": 60,
    }


def test_batch_request_omits_only_absent_fields():
    body = NewBatchRequest(
        file="local:/opt/jobs/app.jar",
        class_name="com.example.Main",
        args=["--date", "2026-10-18"],
        jars=[],
        name="nightly",
    ).to_body()
    assert body == {
        "file": "local:/opt/jobs/app.jar",
        "className": "com.example.Main",
        "args": ["--date", "2026-10-18"],
        "jars": [],
        "name": "nightly",
    }
    assert None not in body.values()
