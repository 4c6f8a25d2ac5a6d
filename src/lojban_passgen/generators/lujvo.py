"""
Lujvo Generator - Builds compound words from two random gismu.

Each gismu contributes one bound short form (rafsi). When a gismu lists
no rafsi, the final component uses the full word and the first component
uses its first four letters plus the glue vowel "y".
"""

from dataclasses import dataclass, field
from typing import Optional

from lojban_passgen.generators.random_source import RandomSource
from lojban_passgen.lexicon import Lexicon
from lojban_passgen.models import Gismu

# Appended to a truncated gismu that has no rafsi of its own
LINKING_LETTER = "y"
TRUNCATED_LENGTH = 4


def select_rafsi(gismu: Gismu, is_last: bool, rng: RandomSource) -> str:
    """
    Pick the short form a gismu contributes to a lujvo.

    Args:
        gismu: The source entry
        is_last: True for the final component of the compound
        rng: Random source used to choose among available rafsi

    Returns:
        A uniformly chosen rafsi, or the fallback form when none exist
    """
    candidates = gismu.rafsi
    if candidates:
        return rng.choice(candidates)
    if is_last:
        return gismu.word
    if len(gismu.word) >= TRUNCATED_LENGTH:
        return gismu.word[:TRUNCATED_LENGTH] + LINKING_LETTER
    return gismu.word


@dataclass
class Lujvo:
    """A generated compound word with the entries it was built from."""

    word: str
    first: Gismu
    second: Gismu
    parts: tuple[str, str]

    @property
    def meaning(self) -> str:
        return f"lujvo({self.first.keyword} + {self.second.keyword})"

    def describe(self) -> str:
        return f"{self.word}: {self.meaning}"


@dataclass
class LujvoGenerator:
    """
    Synthesizes two-part lujvo from a lexicon.

    Usage:
        generator = LujvoGenerator(lexicon)
        word, meaning = generator.generate()
    """

    lexicon: Lexicon
    rng: RandomSource = field(default_factory=RandomSource)

    def build(self) -> Lujvo:
        """Draw two gismu (with replacement) and join their rafsi."""
        first = self.lexicon.random_gismu(self.rng)
        second = self.lexicon.random_gismu(self.rng)
        parts = (
            select_rafsi(first, is_last=False, rng=self.rng),
            select_rafsi(second, is_last=True, rng=self.rng),
        )
        return Lujvo(word="".join(parts), first=first, second=second, parts=parts)

    def generate(self) -> tuple[str, str]:
        """
        Generate a lujvo.

        Returns:
            Tuple of (compound word, gloss such as "lujvo(love + person)")
        """
        lujvo = self.build()
        return lujvo.word, lujvo.meaning


def generate_lujvo(lexicon: Lexicon, rng: Optional[RandomSource] = None) -> tuple[str, str]:
    """Generate a single lujvo; convenience wrapper around LujvoGenerator."""
    return LujvoGenerator(lexicon, rng or RandomSource()).generate()
