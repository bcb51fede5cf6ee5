"""Test setup

Collector applications the transports and the sender are tested against.
"""
import pytest


class MockCollector(object):
    """A mock ASGI collector that records every request it receives"""

    status = 200
    response_body = b"OK"

    def __init__(self, **kwargs):
        for k, v in kwargs.items():
            setattr(self, k, v)
        self.requests = []

    async def handle_all(self, scope, receive, send):
        # Do nothing unless something monkeypatches us
        pass

    async def http_request(self, scope, receive, send, body):
        self.requests.append((scope, body))
        await send(
            {
                "type": "http.response.start",
                "headers": [(b"content-type", b"text/plain")],
                "status": self.status,
            }
        )
        await send({"type": "http.response.body", "body": self.response_body})

    async def __call__(self, scope, receive, send):
        await self.handle_all(scope, receive, send)
        if scope["type"] != "http":
            raise RuntimeError(f"Type '{scope['type']}' is not supported.")

        chunks = []
        # Receive http.requests until http.disconnect or more_body = False
        while True:
            msg = await receive()
            if msg["type"] == "http.disconnect":
                raise RuntimeError(f"Received http.disconnect message {msg}")
            chunks.append(msg.get("body", b""))
            if not msg.get("more_body", False):
                break
        return await self.http_request(scope, receive, send, b"".join(chunks))


@pytest.fixture(scope="function")
def mock_collector():
    """Create a mock collector to post crash reports to"""

    return MockCollector()


@pytest.fixture
def starlette_collector():
    from starlette.applications import Starlette
    from starlette.datastructures import UploadFile
    from starlette.responses import JSONResponse
    from starlette.routing import Route

    async def submit(request):
        form = await request.form()
        report = {"fields": {}, "files": {}}
        for name, value in form.multi_items():
            if isinstance(value, UploadFile):
                report["files"][name] = (
                    value.filename,
                    value.content_type,
                    await value.read(),
                )
            else:
                report["fields"][name] = value
        request.app.state.reports.append(report)
        return JSONResponse({"accepted": True})

    app = Starlette(routes=[Route("/submit", submit, methods=["POST"])])
    app.state.reports = []

    yield app


@pytest.fixture
def minidump(tmp_path):
    path = tmp_path / "crash.dmp"
    path.write_bytes(b"MDMP\x00\r\n--\r\n\x0d\x0a\xff\xfe")
    return path
