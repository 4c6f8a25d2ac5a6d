"""
Lexicon - Read-only index over the parsed gismu and cmavo tables.

The apostrophe-bearing subsets are computed once at construction and
used to force an apostrophe into generated sentences.
"""

from collections.abc import Iterable
from typing import Optional, Union

from lojban_passgen.exceptions import EmptyDictionaryError
from lojban_passgen.generators.random_source import RandomSource
from lojban_passgen.models import Cmavo, Gismu

Entry = Union[Gismu, Cmavo]


class Lexicon:
    """
    Immutable container of gismu and cmavo entries.

    Safe to share between any number of generators; nothing mutates it
    after construction.

    Usage:
        lexicon = Lexicon(parse_gismu_file("gismu.txt"), parse_cmavo_file("cmavo.txt"))
        entry = lexicon.random_gismu(RandomSource())
    """

    __slots__ = ("_gismu", "_cmavo", "_gismu_with_apostrophe", "_cmavo_with_apostrophe")

    def __init__(self, gismu: Iterable[Gismu], cmavo: Iterable[Cmavo]):
        self._gismu: tuple[Gismu, ...] = tuple(gismu)
        self._cmavo: tuple[Cmavo, ...] = tuple(cmavo)
        self._gismu_with_apostrophe = tuple(g for g in self._gismu if g.has_apostrophe)
        self._cmavo_with_apostrophe = tuple(c for c in self._cmavo if c.has_apostrophe)

    @property
    def gismu(self) -> tuple[Gismu, ...]:
        return self._gismu

    @property
    def cmavo(self) -> tuple[Cmavo, ...]:
        return self._cmavo

    @property
    def gismu_with_apostrophe(self) -> tuple[Gismu, ...]:
        return self._gismu_with_apostrophe

    @property
    def cmavo_with_apostrophe(self) -> tuple[Cmavo, ...]:
        return self._cmavo_with_apostrophe

    @property
    def apostrophe_entries(self) -> tuple[Entry, ...]:
        """All apostrophe-bearing entries, gismu first, each in table order."""
        return self._gismu_with_apostrophe + self._cmavo_with_apostrophe

    def is_empty(self) -> bool:
        return not self._gismu or not self._cmavo

    def random_gismu(self, rng: Optional[RandomSource] = None) -> Gismu:
        """Draw a uniformly random gismu."""
        return _draw(self._gismu, "gismu", rng)

    def random_cmavo(self, rng: Optional[RandomSource] = None) -> Cmavo:
        """Draw a uniformly random cmavo."""
        return _draw(self._cmavo, "cmavo", rng)

    def random_apostrophe_entry(self, rng: Optional[RandomSource] = None) -> Optional[Entry]:
        """Draw from the pooled apostrophe subsets, or None when both are empty."""
        pool = self.apostrophe_entries
        if not pool:
            return None
        return (rng or RandomSource()).choice(pool)

    def __repr__(self) -> str:
        return (
            f"Lexicon(gismu={len(self._gismu)}, cmavo={len(self._cmavo)}, "
            f"apostrophe={len(self._gismu_with_apostrophe)}+{len(self._cmavo_with_apostrophe)})"
        )


def _draw(entries, table: str, rng: Optional[RandomSource]):
    if not entries:
        raise EmptyDictionaryError(table, f"Cannot draw from empty {table} table")
    return (rng or RandomSource()).choice(entries)
