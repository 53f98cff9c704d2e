"""
SPNEGO (Negotiate) authentication for Livy servers behind Kerberos.

Requires the `kerberos` extra: pykerberos on Linux/Mac, winkerberos on Windows.
"""

import logging
from typing import Generator, Optional

import httpx

from livy_client.errors import TransportError

logger = logging.getLogger(__name__)

try:
    import kerberos
    KERBEROS_AVAILABLE = True
except ImportError:
    try:
        import winkerberos as kerberos  # Windows
        KERBEROS_AVAILABLE = True
    except ImportError:
        KERBEROS_AVAILABLE = False
        kerberos = None


def _negotiate_challenge(response: httpx.Response) -> Optional[str]:
    """Return the server token from a `WWW-Authenticate: Negotiate` header, "" if it has none."""
    for value in response.headers.get_list("www-authenticate"):
        scheme, _, token = value.strip().partition(" ")
        if scheme.lower() == "negotiate":
            return token.strip()
    return None


class NegotiateAuth(httpx.Auth):
    """
    httpx auth flow for `Negotiate` challenges.

    The request goes out unauthenticated first; on a 401 carrying a Negotiate
    challenge a GSSAPI token for `HTTP@<host>` is generated and the request is
    resent once. `principal` selects an explicit client principal (username);
    otherwise the default credential cache is used.
    """

    def __init__(self, principal: Optional[str] = None, service_name: str = "HTTP"):
        if not KERBEROS_AVAILABLE:
            raise ImportError(
                "Negotiate authentication requires 'pykerberos' (Linux/Mac) "
                "or 'winkerberos' (Windows). Install with: pip install livy-client[kerberos]"
            )
        self.principal = principal or None
        self.service_name = service_name

    def _token(self, host: str) -> str:
        service = f"{self.service_name}@{host}"
        gssflags = kerberos.GSS_C_MUTUAL_FLAG | kerberos.GSS_C_SEQUENCE_FLAG
        try:
            if self.principal:
                _, context = kerberos.authGSSClientInit(service, principal=self.principal, gssflags=gssflags)
            else:
                _, context = kerberos.authGSSClientInit(service, gssflags=gssflags)
            try:
                kerberos.authGSSClientStep(context, "")
                return kerberos.authGSSClientResponse(context)
            finally:
                kerberos.authGSSClientClean(context)
        except kerberos.GSSError as e:
            raise TransportError(f"SPNEGO negotiation with {service} failed: {e}", cause=e) from e

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        response = yield request
        if response.status_code != 401 or _negotiate_challenge(response) is None:
            return

        logger.debug("Negotiate challenge from %s", request.url.host)
        request.headers["Authorization"] = f"Negotiate {self._token(request.url.host)}"
        yield request
