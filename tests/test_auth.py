"""SPNEGO negotiation flow with a stubbed GSSAPI binding."""

import types

import httpx
import pytest

from livy_client import HttpStatusError, LivyClient, TransportError
import livy_client.auth as auth_module


class FakeGSSError(Exception):
    pass


def _fake_kerberos(calls, fail=False):
    def init(service, principal=None, gssflags=0):
        calls.append(("init", service, principal))
        if fail:
            raise FakeGSSError("no credentials cache")
        return 1, "ctx"

    def step(context, challenge):
        calls.append(("step", context, challenge))
        return 1

    def response(context):
        return "dG9rZW4="

    def clean(context):
        calls.append(("clean", context))

    return types.SimpleNamespace(
        GSS_C_MUTUAL_FLAG=2,
        GSS_C_SEQUENCE_FLAG=8,
        GSSError=FakeGSSError,
        authGSSClientInit=init,
        authGSSClientStep=step,
        authGSSClientResponse=response,
        authGSSClientClean=clean,
    )


@pytest.fixture
def gss_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(auth_module, "kerberos", _fake_kerberos(calls))
    monkeypatch.setattr(auth_module, "KERBEROS_AVAILABLE", True)
    return calls


def _negotiating_server(seen):
    def handler(request):
        seen.append(request.headers.get("Authorization"))
        if request.headers.get("Authorization") != "Negotiate dG9rZW4=":
            return httpx.Response(401, headers={"WWW-Authenticate": "Negotiate"})
        return httpx.Response(200, json={"id": 1, "state": "idle"})
    return handler


def test_negotiate_retries_with_token(gss_calls):
    seen = []
    client = LivyClient(
        "http://livy.test:8998", gssnegotiate=True, username="alice@EXAMPLE.COM",
        transport=httpx.MockTransport(_negotiating_server(seen)),
    )

    session = client.sessions.get(1)

    assert session.id == 1
    assert seen == [None, "Negotiate dG9rZW4="]
    assert gss_calls[0] == ("init", "HTTP@livy.test", "alice@EXAMPLE.COM")
    assert ("clean", "ctx") in gss_calls


def test_negotiate_without_username_uses_default_principal(gss_calls):
    seen = []
    client = LivyClient("http://livy.test:8998", gssnegotiate=True,
                        transport=httpx.MockTransport(_negotiating_server(seen)))
    client.sessions.get(1)
    assert gss_calls[0] == ("init", "HTTP@livy.test", None)


def test_no_negotiation_without_challenge(gss_calls):
    client = LivyClient("http://livy.test:8998", gssnegotiate=True,
                        transport=httpx.MockTransport(lambda r: httpx.Response(200, json={"id": 1})))
    assert client.sessions.get(1).id == 1
    assert gss_calls == []


def test_unauthenticated_when_negotiate_disabled(gss_calls):
    seen = []
    client = LivyClient("http://livy.test:8998", gssnegotiate=False, username="alice",
                        transport=httpx.MockTransport(_negotiating_server(seen)))
    with pytest.raises(HttpStatusError) as exc:
        client.sessions.get(1)
    assert exc.value.status_code == 401
    assert seen == [None]
    assert gss_calls == []


def test_gss_failure_is_transport_error(monkeypatch):
    monkeypatch.setattr(auth_module, "kerberos", _fake_kerberos([], fail=True))
    monkeypatch.setattr(auth_module, "KERBEROS_AVAILABLE", True)
    client = LivyClient("http://livy.test:8998", gssnegotiate=True,
                        transport=httpx.MockTransport(_negotiating_server([])))
    with pytest.raises(TransportError):
        client.sessions.get(1)


def test_missing_kerberos_binding(monkeypatch):
    monkeypatch.setattr(auth_module, "KERBEROS_AVAILABLE", False)
    with pytest.raises(ImportError):
        auth_module.NegotiateAuth()


def test_challenge_parsing():
    resp = httpx.Response(401, headers=[("WWW-Authenticate", "Basic realm=x"), ("WWW-Authenticate", "Negotiate abc")])
    assert auth_module._negotiate_challenge(resp) == "abc"
    assert auth_module._negotiate_challenge(httpx.Response(401)) is None
