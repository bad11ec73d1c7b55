"""Read markdown source text."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from cheatpage.config import CHEATPAGE_ENCODING
from cheatpage.exceptions import InputNotFoundError, OutputWriteError, ParseError

logger = logging.getLogger(__name__)

STDIO_PATH = "-"


def load_source(path: Path | str, *, encoding: str = CHEATPAGE_ENCODING) -> str:
    """Read the source file, or stdin when ``path`` is ``"-"``.

    Raises:
        InputNotFoundError: If the path does not exist or is not a file.
        ParseError: If the file is not valid text in ``encoding``.
    """
    if str(path) == STDIO_PATH:
        logger.debug("Reading markdown from stdin")
        try:
            return sys.stdin.read()
        except UnicodeDecodeError as exc:
            raise ParseError(f"Standard input is not valid text: {exc}") from exc

    source_path = Path(path)
    if not source_path.is_file():
        raise InputNotFoundError(f"Input file not found: {source_path}")
    logger.debug("Reading markdown from %s", source_path)
    try:
        return source_path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise ParseError(f"Input file {source_path} is not valid {encoding}: {exc}") from exc
    except OSError as exc:
        raise InputNotFoundError(f"Cannot read input file {source_path}: {exc}") from exc


def write_output(path: Path | str, content: str, *, encoding: str = CHEATPAGE_ENCODING) -> None:
    """Write rendered output to a file, or stdout when ``path`` is ``"-"``.

    Raises:
        OutputWriteError: If the file or its directory cannot be written.
    """
    if str(path) == STDIO_PATH:
        sys.stdout.write(content)
        return

    output_path = Path(path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding=encoding)
    except OSError as exc:
        raise OutputWriteError(f"Cannot write output file {output_path}: {exc}") from exc
    logger.debug("Wrote %d characters to %s", len(content), output_path)
