"""Exceptions for crash report sending

Base Exception class and sub-classed exceptions, one per way a send can
be refused. Everything raised here is caught by the sender and reported
as a failed send.
"""
from typing import Optional


class CrashReportError(Exception):
    """An error in crash_report_sender"""


class ValidationError(CrashReportError):
    """A parameter name is empty, not printable ASCII or contains a quote"""

    def __init__(self, *args, name: Optional[str] = None):
        super().__init__(*args)
        self.name = name


class FileReadError(CrashReportError):
    """The minidump could not be read, or is empty"""

    def __init__(self, *args, path: Optional[str] = None):
        super().__init__(*args)
        self.path = path


class EncodingError(CrashReportError):
    """Text could not be represented as UTF-8"""


class TransportError(CrashReportError):
    """The request could not be delivered to the collector"""
