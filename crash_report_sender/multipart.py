from crash_report_sender.boundary import generate_multipart_boundary
from crash_report_sender.exceptions import FileReadError
from crash_report_sender.text import to_wire_text
from typing import Mapping
from typing import Optional
from typing import Tuple

import random

MINIDUMP_FIELD_NAME = "upload_file_minidump"
MINIDUMP_CONTENT_TYPE = "application/octet-stream"


def multipart_content_type(boundary: str) -> str:
    return f"multipart/form-data; boundary={boundary}"


def build_request_header(boundary: str) -> str:
    return f"Content-Type: {multipart_content_type(boundary)}\r\n"


def build_part(
    boundary: str,
    field_name: str,
    value: bytes,
    filename: str = "",
    content_type: str = "",
) -> bytes:
    """
    One part of the body, terminated by CRLF:
        --boundary
        Content-Disposition: form-data; name="field_name"[; filename="filename"]
        [Content-Type: content_type]

        value
    """
    part = f'--{boundary}\r\nContent-Disposition: form-data; name="{field_name}"'
    if filename:
        part += f'; filename="{filename}"'

    if content_type:
        part += f"\r\nContent-Type: {content_type}"

    return to_wire_text(part) + b"\r\n\r\n" + value + b"\r\n"


def build_request_body(
    parameters: Mapping[str, str],
    dump_bytes: bytes,
    dump_display_name: str,
    boundary: str,
) -> bytes:
    """Build the whole request body, one part per parameter then the dump.

    Names and ``dump_display_name`` are written into Content-Disposition
    as they are, without escaping. Parameter names must pass
    check_parameters first; a display name holding '"', CR or LF yields a
    malformed part header. Values and dump bytes go in the part bodies
    and are not escaped either.

    Raises FileReadError when ``dump_bytes`` is empty.
    """
    if not dump_bytes:
        raise FileReadError(f"Minidump {dump_display_name!r} is empty or unreadable")

    return (
        b"".join(
            build_part(boundary, name, to_wire_text(value))
            for name, value in parameters.items()
        )
        + build_part(
            boundary,
            MINIDUMP_FIELD_NAME,
            dump_bytes,
            filename=dump_display_name,
            content_type=MINIDUMP_CONTENT_TYPE,
        )
        + bytes(f"--{boundary}--\r\n", "ascii")
    )


def encode_crash_report(
    parameters: Mapping[str, str],
    dump_bytes: bytes,
    dump_display_name: str,
    rng: Optional[random.Random] = None,
) -> Tuple[bytes, str]:
    boundary = generate_multipart_boundary(rng)

    body = build_request_body(parameters, dump_bytes, dump_display_name, boundary)
    header = build_request_header(boundary)

    return body, header
