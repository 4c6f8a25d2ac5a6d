"""Dictionary entry models for the gismu and cmavo tables."""

from __future__ import annotations

from dataclasses import dataclass

APOSTROPHE = "'"


@dataclass(frozen=True)
class Gismu:
    """A root word (gismu) entry from the gismu table.

    The three rafsi fields are the bound short forms used when building
    lujvo, ranked by shape (CVC, CCV, CVV). Any of them may be empty.
    """

    word: str
    rafsi_cvc: str = ""
    rafsi_ccv: str = ""
    rafsi_cvv: str = ""
    keyword: str = ""
    hint: str = ""
    meaning: str = ""
    placements: tuple[str, ...] = ()  # x1, x2, ... in order of appearance
    see_also: tuple[str, ...] = ()

    @property
    def rafsi(self) -> tuple[str, ...]:
        """Return the non-empty rafsi in rank order."""
        return tuple(r for r in (self.rafsi_cvc, self.rafsi_ccv, self.rafsi_cvv) if r)

    @property
    def has_apostrophe(self) -> bool:
        return APOSTROPHE in self.word

    def describe(self) -> str:
        """Format the gloss line shown next to a generated sentence."""
        return f"{self.word}: {self.meaning}"


@dataclass(frozen=True)
class Cmavo:
    """A particle (cmavo) entry from the cmavo table."""

    word: str
    category: str = ""  # selma'o
    keyword: str = ""
    meaning: str = ""
    see_also: tuple[str, ...] = ()

    @property
    def has_apostrophe(self) -> bool:
        return APOSTROPHE in self.word

    def describe(self) -> str:
        """Format the gloss line shown next to a generated sentence."""
        return f"{self.word}: {self.meaning}"
