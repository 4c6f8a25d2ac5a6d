"""
Dictionary Parser - Strict fixed-column parsing of gismu and cmavo tables.

Both tables share the same contract:
- Line 1 is a header and is skipped without validation
- Every following line must reach the table's minimum length, otherwise
  parsing stops with DictionaryFormatError and nothing is returned
- A stream holding only the header (or nothing) yields no entries

Streams may yield text or bytes. Text lines are encoded with the table
encoding first, so both kinds are measured and sliced by byte offset,
which is how the published tables are laid out.
"""

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Callable, TypeVar, Union

from lojban_passgen.dictionary.columns import (
    CMAVO_COLUMNS,
    CMAVO_MIN_LENGTH,
    GISMU_COLUMNS,
    GISMU_MIN_LENGTH,
    Line,
    decode,
    extract_placements,
    extract_see_also,
    slice_columns,
    strip_line_ending,
)
from lojban_passgen.exceptions import DictionaryFormatError, DictionaryIOError
from lojban_passgen.logging_config import get_logger
from lojban_passgen.models import Cmavo, Gismu

logger = get_logger("dictionary.parser")

T = TypeVar("T")

DEFAULT_SOURCE = "<stream>"


def iter_data_lines(
    lines: Iterable[Line],
    minimum: int,
    source: str = DEFAULT_SOURCE,
    encoding: str = "utf-8",
) -> Iterator[tuple[int, bytes]]:
    """
    Yield (line_number, content) for every data line of a table.

    Text lines are encoded with ``encoding`` before the length check, so
    the minimum is always a byte count.

    Args:
        lines: Raw lines, with or without terminators
        minimum: Minimum accepted length of a data line
        source: Name used in error messages
        encoding: Table encoding, used to encode text lines and to render
            offending lines in error messages

    Yields:
        1-based line number and the line content as bytes, without its
        terminator

    Raises:
        DictionaryFormatError: If a data line is shorter than ``minimum``
        DictionaryIOError: If reading from the stream fails
    """
    try:
        for line_number, raw_line in enumerate(lines, 1):
            if line_number == 1:
                continue
            line = strip_line_ending(raw_line)
            if isinstance(line, str):
                line = line.encode(encoding, errors="replace")
            if len(line) < minimum:
                raise DictionaryFormatError(source, line_number, decode(line, encoding), minimum)
            yield line_number, line
    except OSError as e:
        raise DictionaryIOError(source, str(e)) from e


def _parse(
    lines: Iterable[Line],
    minimum: int,
    build: Callable[[Line], T],
    source: str,
    encoding: str,
) -> tuple[T, ...]:
    entries = [build(line) for _, line in iter_data_lines(lines, minimum, source, encoding)]
    logger.debug("Parsed %d entries from %s", len(entries), source)
    return tuple(entries)


def build_gismu(line: Line, encoding: str = "utf-8") -> Gismu:
    """Build a Gismu from one data line of at least GISMU_MIN_LENGTH."""
    fields = slice_columns(line, GISMU_COLUMNS, encoding)
    return Gismu(
        word=fields["word"],
        rafsi_cvc=fields["rafsi_cvc"],
        rafsi_ccv=fields["rafsi_ccv"],
        rafsi_cvv=fields["rafsi_cvv"],
        keyword=fields["keyword"],
        hint=fields["hint"],
        meaning=fields["meaning"],
        placements=extract_placements(fields["meaning"]),
        see_also=extract_see_also(decode(line, encoding)),
    )


def build_cmavo(line: Line, encoding: str = "utf-8") -> Cmavo:
    """Build a Cmavo from one data line of at least CMAVO_MIN_LENGTH."""
    fields = slice_columns(line, CMAVO_COLUMNS, encoding)
    return Cmavo(
        word=fields["word"],
        category=fields["category"],
        keyword=fields["keyword"],
        meaning=fields["meaning"],
        see_also=extract_see_also(decode(line, encoding)),
    )


def parse_gismu(
    lines: Iterable[Line],
    source: str = DEFAULT_SOURCE,
    encoding: str = "utf-8",
) -> tuple[Gismu, ...]:
    """
    Parse a gismu table.

    Args:
        lines: An open text or binary stream, or any iterable of lines
        source: Name used in error messages
        encoding: Encoding for byte lines

    Returns:
        All entries in file order

    Raises:
        DictionaryFormatError: On the first line shorter than 157 bytes
        DictionaryIOError: If reading from the stream fails
    """
    return _parse(lines, GISMU_MIN_LENGTH, lambda line: build_gismu(line, encoding), source, encoding)


def parse_cmavo(
    lines: Iterable[Line],
    source: str = DEFAULT_SOURCE,
    encoding: str = "utf-8",
) -> tuple[Cmavo, ...]:
    """
    Parse a cmavo table.

    Args:
        lines: An open text or binary stream, or any iterable of lines
        source: Name used in error messages
        encoding: Encoding for byte lines

    Returns:
        All entries in file order

    Raises:
        DictionaryFormatError: On the first line shorter than 63 bytes
        DictionaryIOError: If reading from the stream fails
    """
    return _parse(lines, CMAVO_MIN_LENGTH, lambda line: build_cmavo(line, encoding), source, encoding)


def _parse_file(
    path: Union[str, Path],
    parse: Callable[..., tuple[T, ...]],
    encoding: str,
) -> tuple[T, ...]:
    path = Path(path)
    try:
        with open(path, "rb") as f:
            return parse(f, source=str(path), encoding=encoding)
    except OSError as e:
        raise DictionaryIOError(str(path), e.strerror or str(e)) from e


def parse_gismu_file(path: Union[str, Path], encoding: str = "utf-8") -> tuple[Gismu, ...]:
    """Parse a gismu table from a file, reading it in binary mode."""
    return _parse_file(path, parse_gismu, encoding)


def parse_cmavo_file(path: Union[str, Path], encoding: str = "utf-8") -> tuple[Cmavo, ...]:
    """Parse a cmavo table from a file, reading it in binary mode."""
    return _parse_file(path, parse_cmavo, encoding)
