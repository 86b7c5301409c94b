"""
REST Action
===========

Base class for experiment actions that talk to the ContinuITy frontend over
HTTP. Provides ``get``/``post`` against a base URL built from host and port.
"""

from http import HTTPStatus
from typing import Any, Dict, Optional

import aiohttp

from experimentation.config.logging import get_logger
from experimentation.config.settings import get_settings
from .base import ExperimentAction

logger = get_logger(__name__)


class RestActionError(Exception):
    """Base exception for failed REST calls of an action."""

    pass


class HttpStatusError(RestActionError):
    """The server answered with an error status code."""

    def __init__(self, status: int, reason: Optional[str], body: str, url: str = ""):
        self.status = status
        self.reason = reason or _reason_phrase(status)
        self.body = body
        self.url = url
        super().__init__(f"{status} {self.reason}: {body}")


class HttpClientError(HttpStatusError):
    """4xx response."""


class HttpServerError(HttpStatusError):
    """5xx response."""


def _reason_phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return "Unknown"


class RestAction(ExperimentAction):
    """Experiment action with access to a REST endpoint."""

    def __init__(
        self,
        host: str,
        port: str = "80",
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.host = host
        self.port = str(port)
        self.settings = get_settings()
        self.logger: Any = logger.bind(component=self.name)  # structlog.BoundLoggerBase
        self._session = session
        self._owns_session = session is None

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get the supplied session or create a default one."""
        if self._session is None or (self._owns_session and self._session.closed):
            timeout = aiohttp.ClientTimeout(total=self.settings.request_timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if this action created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "RestAction":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def get(self, path: str, timeout: Optional[float] = None) -> Any:
        """
        Issue a GET request and return the parsed JSON body.

        Args:
            path: Path below the base URL
            timeout: Total timeout of this request in seconds; defaults to the session timeout

        Returns:
            The decoded body, or None if the body is empty

        Raises:
            HttpClientError / HttpServerError: On an error status code
        """
        return await self._request("GET", path, timeout=timeout)

    async def post(
        self,
        path: str,
        payload: Any,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Issue a POST request with a JSON body and return the parsed JSON body."""
        request_headers = {"Content-Type": "application/json"}
        if headers:
            request_headers.update(headers)
        return await self._request("POST", path, json=payload, headers=request_headers)

    async def _request(
        self, method: str, path: str, timeout: Optional[float] = None, **kwargs: Any
    ) -> Any:
        url = self.base_url + path
        session = await self._get_session()
        if timeout is not None:
            # Replaces the session timeout for this request only
            kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)

        self.logger.debug("Sending request", method=method, url=url)
        async with session.request(method, url, **kwargs) as response:
            if response.status >= 400:
                body = await response.text()
                if response.status >= 500:
                    raise HttpServerError(response.status, response.reason, body, url)
                raise HttpClientError(response.status, response.reason, body, url)

            self.logger.debug("Received response", method=method, url=url, status=response.status)
            # Empty bodies decode to None
            return await response.json(content_type=None)
