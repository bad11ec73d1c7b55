"""Custom exceptions for cheatpage."""


class CheatpageError(Exception):
    """Base exception for cheatpage operations."""


class InputNotFoundError(CheatpageError):
    """Input markdown file does not exist."""


class ParseError(CheatpageError):
    """Error during markdown parsing."""


class FrontMatterError(ParseError):
    """Front-matter block is missing, malformed, or lacks a required key."""


class DuplicateAnchorError(CheatpageError):
    """Two headings produced the same anchor id and disambiguation is off."""


class OutputWriteError(CheatpageError):
    """Rendered output could not be written."""


class DependencyError(CheatpageError):
    """A required runtime library is not installed."""
