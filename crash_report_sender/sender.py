"""Send a crash report to a collector.

A crash report is a multipart/form-data POST holding a set of string
parameters and one minidump file, sent in the ``upload_file_minidump``
field. The collector's response is not returned to the caller, only
whether it accepted the report.
"""
from crash_report_sender.exceptions import CrashReportError
from crash_report_sender.exceptions import ValidationError
from crash_report_sender.files import get_file_contents
from crash_report_sender.multipart import encode_crash_report
from crash_report_sender.transport import RequestsTransport
from crash_report_sender.transport import Transport
from crash_report_sender.utils import parse_header_line
from crash_report_sender.validation import check_parameters
from crash_report_sender.validation import is_valid_parameter_name
from typing import Mapping
from typing import Optional

import asyncio
import logging
import os
import random
import requests

logger = logging.getLogger(__name__)


async def send_crash_report_async(
    url: str,
    parameters: Mapping[str, str],
    dump_file_name: str,
    *,
    transport: Optional[Transport] = None,
    rng: Optional[random.Random] = None,
) -> bool:
    """Send ``dump_file_name`` and ``parameters`` as a multipart POST to ``url``.

    Arguments:
        url
            The collector URL. The default transport only supports http.

        parameters
            Names must contain only printable ASCII characters and may
            not contain a quote (") character.

        dump_file_name
            Path of the minidump. An empty or unreadable file fails the
            whole send, parameters are never sent on their own.
            Its base name is sent unescaped as the part filename, so it
            should not contain '"', CR or LF.

        transport
            Defaults to a RequestsTransport on a session closed after
            the post.

        rng
            Random source for the multipart boundary.

    Returns:
        True if the collector answered 200 OK.
    """
    try:
        response = await _send(url, parameters, dump_file_name, transport, rng)
    except CrashReportError as e:
        logger.warning("Crash report not sent to %s: %s", url, e)
        return False

    if response.status_code != requests.codes.ok:
        logger.warning(
            "Collector at %s rejected crash report with status %s",
            url,
            response.status_code,
        )
        return False

    logger.info("Crash report sent to %s", url)
    return True


def send_crash_report(
    url: str,
    parameters: Mapping[str, str],
    dump_file_name: str,
    *,
    transport: Optional[Transport] = None,
    rng: Optional[random.Random] = None,
) -> bool:
    """Blocking version of send_crash_report_async."""
    return asyncio.run(
        send_crash_report_async(
            url, parameters, dump_file_name, transport=transport, rng=rng
        )
    )


async def _send(url, parameters, dump_file_name, transport, rng):
    if not check_parameters(parameters):
        invalid = next(n for n in parameters if not is_valid_parameter_name(n))
        raise ValidationError(f"Invalid parameter name {invalid!r}", name=invalid)

    dump_bytes = get_file_contents(dump_file_name)
    body, header = encode_crash_report(
        parameters, dump_bytes, os.path.basename(dump_file_name), rng=rng
    )

    name, value = parse_header_line(header)
    if transport is not None:
        return await transport.post(url, {name: value}, body)
    with requests.Session() as session:
        return await RequestsTransport(session=session).post(url, {name: value}, body)
