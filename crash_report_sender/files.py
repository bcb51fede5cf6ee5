import logging

logger = logging.getLogger(__name__)


def get_file_contents(path: str) -> bytes:
    """Read the whole file, or return b"" if it can't be read."""
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        logger.warning("Can't read %s: %s", path, e)
        return b""
