"""
Dictionary Column Layouts - Fixed-column slicing for gismu and cmavo tables.

gismu.txt layout (0-indexed, end exclusive):
- [1, 6):     word
- [7, 10):    rafsi, CVC shape
- [11, 14):   rafsi, CCV shape
- [15, 19):   rafsi, CVV shape
- [20, 40):   keyword
- [41, 61):   hint
- [62, 157):  meaning
Data lines must be at least 157 bytes long (in the table encoding).

cmavo.txt layout:
- [0, 11):    word
- [12, 20):   category (selma'o)
- [21, 62):   keyword
- [63, end):  meaning
Data lines must be at least 63 bytes long (in the table encoding).

The first line of both files is a header and is never sliced.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

Line = Union[str, bytes]

# Extracts x1, x2, ... argument places from a gismu definition
PLACEMENT_PATTERN = re.compile(r"x\d")

# Extracts the "(cf. a, b, c)" cross reference list
SEE_ALSO_PATTERN = re.compile(r"\(cf\. ([^)]+)\)")
SEE_ALSO_SEPARATOR = ", "


@dataclass(frozen=True)
class Column:
    """A named half-open column range. ``end=None`` runs to end of line."""

    name: str
    start: int
    end: Optional[int] = None


GISMU_MIN_LENGTH = 157
GISMU_COLUMNS: tuple[Column, ...] = (
    Column("word", 1, 6),
    Column("rafsi_cvc", 7, 10),
    Column("rafsi_ccv", 11, 14),
    Column("rafsi_cvv", 15, 19),
    Column("keyword", 20, 40),
    Column("hint", 41, 61),
    Column("meaning", 62, 157),
)

CMAVO_MIN_LENGTH = 63
CMAVO_COLUMNS: tuple[Column, ...] = (
    Column("word", 0, 11),
    Column("category", 12, 20),
    Column("keyword", 21, 62),
    Column("meaning", 63, None),
)


def strip_line_ending(raw_line: Line) -> Line:
    """
    Remove a trailing line terminator (\\r\\n, \\n or \\r).

    Args:
        raw_line: The raw line as read from a text or binary stream

    Returns:
        The line content without its terminator
    """
    if isinstance(raw_line, bytes):
        for ending in (b"\r\n", b"\n", b"\r"):
            if raw_line.endswith(ending):
                return raw_line[: -len(ending)]
        return raw_line
    for ending in ("\r\n", "\n", "\r"):
        if raw_line.endswith(ending):
            return raw_line[: -len(ending)]
    return raw_line


def decode(value: Line, encoding: str = "utf-8") -> str:
    """Decode a byte slice, passing text through unchanged."""
    if isinstance(value, bytes):
        return value.decode(encoding, errors="replace")
    return value


def slice_columns(line: Line, columns: tuple[Column, ...], encoding: str = "utf-8") -> dict[str, str]:
    """
    Cut a line into trimmed fields.

    Byte lines are sliced by byte offset before decoding, so multi-byte
    characters in earlier columns do not shift later ones.

    Args:
        line: The line content, already checked against the minimum length
        columns: The table layout
        encoding: Encoding used for byte lines

    Returns:
        Mapping of column name to trimmed field text
    """
    return {
        column.name: decode(line[column.start:column.end], encoding).strip()
        for column in columns
    }


def extract_placements(meaning: str) -> tuple[str, ...]:
    """Return the x1, x2, ... markers of a definition in order of appearance."""
    return tuple(PLACEMENT_PATTERN.findall(meaning))


def extract_see_also(text: str) -> tuple[str, ...]:
    """
    Return the words listed in the first "(cf. ...)" block.

    Args:
        text: The full line (the block may sit outside the meaning column)

    Returns:
        The referenced words, or an empty tuple when there is no block
    """
    match = SEE_ALSO_PATTERN.search(text)
    if match is None:
        return ()
    return tuple(match.group(1).split(SEE_ALSO_SEPARATOR))
