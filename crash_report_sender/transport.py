"""Transports that deliver an encoded crash report to a collector.

Both transports share one coroutine interface, ``post(url, headers, body)``,
and return a :class:`requests.models.Response`.
"""
from crash_report_sender import __version__
from crash_report_sender.exceptions import TransportError
from crash_report_sender.response import build_response
from crash_report_sender.utils import flatten_headers
from crash_report_sender.utils import make_headers
from crash_report_sender.utils import split_url
from functools import partial
from multidict import CIMultiDict
from typing import Optional
from typing import Union

import asyncio
import requests

USER_AGENT = f"crash-report-sender/{__version__}"


class Transport:
    """Base class for transports.

    ``headers`` are sent with every request, unless the request sets
    the same header itself.
    """

    def __init__(
        self,
        timeout: Optional[Union[int, float]] = None,
        headers: Optional[Union[dict, CIMultiDict]] = None,
    ):
        self.timeout = timeout
        self.headers = headers or {}

    def prepare_headers(
        self, headers: Optional[Union[dict, CIMultiDict]], body: bytes
    ) -> CIMultiDict:
        merged_headers = make_headers(self.headers, headers)
        merged_headers.setdefault("User-Agent", USER_AGENT)
        merged_headers["Content-Length"] = str(len(body))
        return merged_headers

    async def post(
        self, url: str, headers: Optional[Union[dict, CIMultiDict]], body: bytes
    ) -> requests.Response:
        raise NotImplementedError


class RequestsTransport(Transport):
    """Post over HTTP with a requests Session.

    Only plain http URLs are supported. The blocking call runs on the
    event loop's default executor.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[Union[int, float]] = None,
        headers: Optional[Union[dict, CIMultiDict]] = None,
    ):
        super().__init__(timeout=timeout, headers=headers)
        self.session = session or requests.Session()

    async def post(self, url, headers, body):
        scheme, host, _, _ = split_url(url)
        if scheme != "http":
            raise TransportError(f"Unsupported URL scheme {scheme!r}, only http is supported")
        if not host:
            raise TransportError(f"No host in URL {url!r}")

        merged_headers = self.prepare_headers(headers, body)
        post = partial(
            self.session.post,
            url,
            data=body,
            headers=dict(merged_headers),
            timeout=self.timeout,
            allow_redirects=False,
        )
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, post)
        except requests.RequestException as e:
            raise TransportError(f"Can't post to {url}: {e}") from e


class ASGITransport(Transport):
    """Post to an ASGI application in-process.

    Useful to run a collector application under test without a server.
    Only single-callable (ASGI 3) applications are supported. The request
    body is delivered in one ``http.request`` message; once the response
    is complete further ``receive`` calls report ``http.disconnect``.
    """

    def __init__(
        self,
        application,
        timeout: Optional[Union[int, float]] = None,
        headers: Optional[Union[dict, CIMultiDict]] = None,
        scope: Optional[dict] = None,
    ):
        super().__init__(timeout=timeout, headers=headers)
        self.application = application
        self._scope = scope or {}

    def build_scope(self, url, headers, body) -> dict:
        scheme, host, path, query_string_bytes = split_url(url)
        merged_headers = self.prepare_headers(headers, body)
        merged_headers.setdefault("host", host or "localhost")

        scope = {
            "type": "http",
            "http_version": "1.1",
            "asgi": {"version": "3.0"},
            "method": "POST",
            "scheme": scheme or "http",
            "path": path,
            "query_string": query_string_bytes,
            "root_path": "",
            "headers": flatten_headers(merged_headers),
        }
        scope.update(self._scope)
        return scope

    async def post(self, url, headers, body):
        scope = self.build_scope(url, headers, body)
        messages = []
        request_sent = False
        response_complete = asyncio.Event()

        async def receive():
            nonlocal request_sent
            if not request_sent:
                request_sent = True
                return {"type": "http.request", "body": body, "more_body": False}
            await response_complete.wait()
            return {"type": "http.disconnect"}

        async def send(message):
            messages.append(message)
            if message["type"] == "http.response.body" and not message.get(
                "more_body", False
            ):
                response_complete.set()

        # wait_for cancels the application when the timeout expires
        try:
            await asyncio.wait_for(self.application(scope, receive, send), self.timeout)
        except asyncio.TimeoutError as e:
            raise TransportError(f"Timed out waiting for {url}") from e
        except Exception as e:
            raise TransportError(f"Application failed handling {url}: {e!r}") from e

        return build_response(url, messages)
