"""Line sources: read a text file as a list of lines (one test string each)."""

from pathlib import Path

from hashlab.utils.errors import SourceNotFound, SourceReadFailure
from hashlab.utils.logger import get_logger

logger = get_logger(__name__)


def read_lines(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read a file and return its lines without line terminators.

    Args:
        path: File to read.
        encoding: Text encoding of the file.

    Returns:
        List of lines, blank ones included.

    Raises:
        SourceNotFound: if the file does not exist.
        SourceReadFailure: if the file cannot be opened or decoded.
    """
    path = Path(path)
    if not path.exists():
        raise SourceNotFound(path)

    try:
        with open(path, "r", encoding=encoding) as f:
            lines = [line.rstrip("\n") for line in f]
    except FileNotFoundError:
        raise SourceNotFound(path) from None
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadFailure(path, str(e)) from e

    logger.debug(f"Read {len(lines)} lines from {path}")
    return lines
