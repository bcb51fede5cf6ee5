from multidict import CIMultiDict
from typing import Dict
from typing import List
from typing import Optional
from typing import Tuple
from typing import Union
from urllib.parse import quote
from urllib.parse import urlsplit


def flatten_headers(headers: Union[Dict, CIMultiDict]) -> List[Tuple]:
    return [(bytes(k.lower(), "utf8"), bytes(v, "utf8")) for k, v in headers.items()]


def parse_header_line(line: str) -> Tuple[str, str]:
    """Split a 'Name: value' header line, dropping the trailing CRLF."""
    name, _, value = line.rstrip("\r\n").partition(":")
    return name.strip(), value.strip()


def make_headers(
    defaults: Optional[Union[dict, CIMultiDict]],
    extra: Optional[Union[dict, CIMultiDict]] = None,
) -> CIMultiDict:
    """Merge transport defaults with per-request headers.

    Per-request headers win over the transport defaults.
    """
    headers = CIMultiDict(defaults or {})
    for k, v in (extra or {}).items():
        headers[k] = v
    return headers


def split_url(url: str) -> Tuple[str, str, str, bytes]:
    """Return scheme, host, path and raw query string of ``url``."""
    parts = urlsplit(url)
    path = parts.path or "/"
    query_string = quote(parts.query, safe="&=%").encode("ascii")
    return parts.scheme, parts.netloc, path, query_string
