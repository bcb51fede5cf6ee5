"""Upload crash reports as multipart/form-data POST requests."""
__version__ = "1.0.0"

from crash_report_sender.exceptions import CrashReportError  # noqa: E402
from crash_report_sender.multipart import build_request_body  # noqa: E402
from crash_report_sender.multipart import build_request_header  # noqa: E402
from crash_report_sender.multipart import encode_crash_report  # noqa: E402
from crash_report_sender.sender import send_crash_report  # noqa: E402
from crash_report_sender.sender import send_crash_report_async  # noqa: E402
from crash_report_sender.transport import ASGITransport  # noqa: E402
from crash_report_sender.transport import RequestsTransport  # noqa: E402
from crash_report_sender.validation import check_parameters  # noqa: E402

__all__ = [
    "ASGITransport",
    "CrashReportError",
    "RequestsTransport",
    "build_request_body",
    "build_request_header",
    "check_parameters",
    "encode_crash_report",
    "send_crash_report",
    "send_crash_report_async",
]
