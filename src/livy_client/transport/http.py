"""
REST HTTP transport for the Livy client.

One request in, one typed value or one LivyError out. Only HTTP 200 counts
as success.
"""

import logging
from enum import Enum
from typing import Any, Iterable, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from livy_client.errors import DecodeError, HttpStatusError, TransportError
from livy_client.models.base import LivyRequest

logger = logging.getLogger(__name__)

DEFAULT_REQUESTED_BY = "livy-client"
DEFAULT_TIMEOUT = 30.0

M = TypeVar("M", bound=BaseModel)


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


def param(key: str, value: Any) -> Optional[str]:
    """`key=value`, or None when the value is absent."""
    if value is None:
        return None
    return f"{key}={value}"


def params(fragments: Iterable[Optional[str]]) -> str:
    """Join present fragments as `?k1=v1&k2=v2`; empty string if none survive."""
    present = [f for f in fragments if f is not None]
    if not present:
        return ""
    return "?" + "&".join(present)


def _is_invalid_json(error: ValidationError) -> bool:
    return any(e["type"] == "json_invalid" for e in error.errors())


def remove_trailing_slash(url: str) -> str:
    """Strip a single trailing slash."""
    if url.endswith("/"):
        return url[:-1]
    return url


class HttpClient:
    def __init__(
        self,
        base_url: str,
        auth: Optional[httpx.Auth] = None,
        requested_by: str = DEFAULT_REQUESTED_BY,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._base_url = remove_trailing_slash(base_url)
        self._client = httpx.Client(
            auth=auth,
            headers={
                "User-Agent": "livy-client/0.1.0",
                "Accept": "application/json",
                "Content-Type": "application/json",
                "X-Requested-By": requested_by,
            },
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def send(
        self,
        method: Method,
        path: str,
        response_model: Type[M],
        body: Optional[LivyRequest] = None,
        bodiless: bool = False,
    ) -> M:
        """Send one request and decode the 200 response into `response_model`.

        `bodiless` operations accept an empty or non-JSON 200 body and return
        an empty `response_model()`.
        """
        url = self.url(path)
        payload = body.to_body() if body is not None else None

        logger.debug("%s %s", method.value, url)
        try:
            resp = self._client.request(method.value, url, json=payload)
        except httpx.HTTPError as e:
            raise TransportError(f"{method.value} {url} failed: {e}", cause=e) from e

        logger.debug("%s %s -> %d", method.value, url, resp.status_code)
        if resp.status_code != 200:
            raise HttpStatusError(resp.status_code, resp.text)

        try:
            return response_model.model_validate_json(resp.content)
        except ValidationError as e:
            if _is_invalid_json(e):
                if bodiless:
                    return response_model()
                raise DecodeError(f"response is not valid JSON: {e}", {"body": resp.text[:200]}) from e
            raise DecodeError(f"unexpected response shape for {response_model.__name__}: {e}") from e

    def get(self, path: str, response_model: Type[M]) -> M:
        return self.send(Method.GET, path, response_model)

    def post(
        self, path: str, response_model: Type[M], body: Optional[LivyRequest] = None, bodiless: bool = False,
    ) -> M:
        return self.send(Method.POST, path, response_model, body=body, bodiless=bodiless)

    def delete(self, path: str, response_model: Type[M], bodiless: bool = False) -> M:
        return self.send(Method.DELETE, path, response_model, bodiless=bodiless)

    def close(self) -> None:
        self._client.close()
