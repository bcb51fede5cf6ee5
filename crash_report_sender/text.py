from crash_report_sender.exceptions import EncodingError


def to_wire_text(text: str) -> bytes:
    """Encode text as UTF-8 for the request body.

    Surrogate pairs left as two code units, as text coming from a UTF-16
    source may be, are joined before encoding. A lone surrogate raises
    EncodingError.
    """
    if not isinstance(text, str):
        raise EncodingError(f"Expected text, got {type(text).__name__}")
    try:
        joined = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le")
        return joined.encode("utf-8")
    except UnicodeError as e:
        raise EncodingError(f"Can't encode {text!r} as UTF-8") from e


def from_wire_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError("Invalid UTF-8 in wire text") from e
