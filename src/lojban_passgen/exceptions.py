"""
Exception classes for the Lojban password generator.

This module defines all custom exceptions used throughout the package,
organized in a hierarchy for easy handling.
"""

from typing import Optional


class PassgenError(Exception):
    """Base exception for all password generator errors."""

    pass


class DictionaryError(PassgenError):
    """Base class for errors raised while loading a dictionary table."""

    pass


class DictionaryFormatError(DictionaryError):
    """A data line is shorter than the table's fixed-column layout allows.

    Parsing stops at the first such line and no entries are returned.

    Attributes:
        source: Name of the table being parsed (file path or stream label)
        line: The 1-based line number of the offending line
        content: The offending line, without its terminator
        minimum: The minimum line length for this table
    """

    def __init__(self, source: str, line: int, content: str, minimum: int):
        self.source = source
        self.line = line
        self.content = content
        self.minimum = minimum
        super().__init__(
            f"{source}:{line}: line too short (expected >={minimum}): {content}"
        )


class DictionaryIOError(DictionaryError):
    """A dictionary table could not be opened or read.

    Attributes:
        path: The path that failed
        reason: The underlying OS error message
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"error reading dictionary {path}: {reason}")


class EmptyDictionaryError(DictionaryError):
    """A dictionary table holds no entries.

    The parser treats an empty table as valid; this is raised by the
    callers that need at least one entry to sample from.

    Attributes:
        table: Which table is empty ("gismu", "cmavo", ...)
    """

    def __init__(self, table: str, message: Optional[str] = None):
        self.table = table
        if message is None:
            message = f"No {table} entries loaded"
        super().__init__(message)


class EntropyError(PassgenError):
    """The secure random source failed.

    Generated words end up in passwords, so this is never recovered from
    with a weaker source.
    """

    pass


class ConfigError(PassgenError):
    """Configuration error.

    Raised when a configuration file cannot be read, does not hold a
    JSON object, or gives a field a value of the wrong type.
    """

    pass
