from crash_report_sender.exceptions import TransportError
from requests.models import Response
from requests.structures import CaseInsensitiveDict
from typing import List


def build_response(url: str, messages: List[dict]) -> Response:
    """Assemble a requests Response from the messages an ASGI app sent.

    The first message must be ``http.response.start``. Body chunks are
    joined in order.
    """
    if not messages or messages[0]["type"] != "http.response.start":
        raise TransportError(f"Application sent no response start for {url}")
    start, chunks = messages[0], messages[1:]

    response = Response()
    response.url = url
    response.status_code = start["status"]
    response.headers = CaseInsensitiveDict(
        [(k.decode("utf8"), v.decode("utf8")) for k, v in start.get("headers", [])]
    )
    response._content = b"".join(
        m.get("body", b"") for m in chunks if m["type"] == "http.response.body"
    )
    response._content_consumed = True
    return response
