"""
Sentence Generator - Assembles password-like Lojban pseudo-sentences.

A sentence is a run of random gismu and cmavo (and optionally lujvo) with
one decimal number inserted at a random position. Every word token has a
matching gloss line; the number has none, so token and gloss indexes
differ by one past the number. See ``meaning_index``.

Optional policies:
- include_dot: append a single terminal period
- include_apostrophe: if no token carries an apostrophe, overwrite one
  word with a random apostrophe-bearing entry
- include_lujvo: give each word slot a 1 in 5 chance of being a lujvo
"""

from dataclasses import dataclass, field
from typing import Optional

from lojban_passgen.generators.lujvo import LujvoGenerator
from lojban_passgen.generators.random_source import RandomSource
from lojban_passgen.lexicon import Lexicon
from lojban_passgen.logging_config import get_logger
from lojban_passgen.models import APOSTROPHE

logger = get_logger("generators.sentence")

# Up to this many words beyond the minimum size (exclusive bound)
EXTRA_WORDS = 3
# Embedded numbers are drawn from [0, NUMBER_LIMIT)
NUMBER_LIMIT = 100
# r in [0, GISMU_SHARE) picks a gismu, the rest of [0, WORD_ROLL) a cmavo
WORD_ROLL = 10
GISMU_SHARE = 5
# A word slot becomes a lujvo with probability 1/LUJVO_ODDS
LUJVO_ODDS = 5


def meaning_index(token_index: int, number_pos: int) -> Optional[int]:
    """
    Map a token position to its position in the gloss list.

    The gloss list skips the number token, so tokens after the number sit
    one place earlier in it.

    Args:
        token_index: Index into the token list
        number_pos: Index of the number token in the token list

    Returns:
        The gloss index, or None when ``token_index`` is the number itself
    """
    if token_index == number_pos:
        return None
    if token_index < number_pos:
        return token_index
    return token_index - 1


def replacement_index(drawn: int, number_pos: int, token_count: int) -> int:
    """
    Move a drawn replacement position off the number token when possible.

    Args:
        drawn: Uniformly drawn index in [0, token_count)
        number_pos: Index of the number token
        token_count: Number of tokens in the sentence

    Returns:
        ``drawn``, or the next position (wrapping) if ``drawn`` hits the
        number and another token exists
    """
    if drawn == number_pos and token_count > 1:
        return (drawn + 1) % token_count
    return drawn


@dataclass
class Sentence:
    """
    A generated sentence before joining.

    Attributes:
        tokens: Words and the number, in order
        meanings: "<word>: <definition>" for every non-number token
        number_pos: Index of the number in ``tokens``
        include_dot: Whether ``text`` ends with a period
    """

    tokens: list[str]
    meanings: list[str]
    number_pos: int
    include_dot: bool = False

    @property
    def text(self) -> str:
        sentence = " ".join(self.tokens)
        if self.include_dot:
            sentence += "."
        return sentence

    @property
    def has_apostrophe(self) -> bool:
        return any(APOSTROPHE in token for token in self.tokens)

    def __str__(self) -> str:
        return self.text


@dataclass
class SentenceGenerator:
    """
    Generates sentences from a shared, read-only lexicon.

    Usage:
        generator = SentenceGenerator(lexicon, include_lujvo=True)
        text, meanings = generator.generate(5, include_dot=True, include_apostrophe=True)
    """

    lexicon: Lexicon
    rng: RandomSource = field(default_factory=RandomSource)
    include_lujvo: bool = False
    _lujvo: LujvoGenerator = field(init=False, repr=False)

    def __post_init__(self):
        self._lujvo = LujvoGenerator(self.lexicon, self.rng)

    def build(
        self,
        min_size: int,
        include_dot: bool = False,
        include_apostrophe: bool = False,
    ) -> Sentence:
        """
        Build a sentence of ``min_size`` to ``min_size + 2`` words plus a number.

        Args:
            min_size: Minimum number of word tokens (0 is allowed)
            include_dot: Terminate the sentence with a period
            include_apostrophe: Ensure an apostrophe appears, when the
                lexicon has any apostrophe-bearing entry

        Returns:
            The assembled Sentence

        Raises:
            ValueError: If ``min_size`` is negative
            EntropyError: If the random source fails
        """
        if min_size < 0:
            raise ValueError(f"min_size must not be negative: {min_size}")

        length = min_size + self.rng.intn(EXTRA_WORDS)
        number_pos = self.rng.intn(length + 1)
        tokens: list[str] = []
        meanings: list[str] = []

        for i in range(length + 1):
            if i == number_pos:
                tokens.append(str(self.rng.intn(NUMBER_LIMIT)))
            if i >= length:
                break
            word, meaning = self._draw_word()
            tokens.append(word)
            meanings.append(meaning)

        sentence = Sentence(tokens, meanings, number_pos, include_dot)
        if include_apostrophe:
            self._force_apostrophe(sentence)
        return sentence

    def generate(
        self,
        min_size: int,
        include_dot: bool = False,
        include_apostrophe: bool = False,
    ) -> tuple[str, list[str]]:
        """
        Generate a sentence.

        Returns:
            Tuple of (sentence text, gloss lines for every non-number token)
        """
        sentence = self.build(min_size, include_dot, include_apostrophe)
        return sentence.text, sentence.meanings

    def _draw_word(self) -> tuple[str, str]:
        """Draw one word token and its gloss line."""
        r = self.rng.intn(WORD_ROLL)
        if self.include_lujvo and self.rng.one_in(LUJVO_ODDS):
            lujvo = self._lujvo.build()
            return lujvo.word, lujvo.describe()
        if r < GISMU_SHARE:
            entry = self.lexicon.random_gismu(self.rng)
        else:
            entry = self.lexicon.random_cmavo(self.rng)
        return entry.word, entry.describe()

    def _force_apostrophe(self, sentence: Sentence) -> None:
        if sentence.has_apostrophe or not sentence.tokens:
            return
        entry = self.lexicon.random_apostrophe_entry(self.rng)
        if entry is None:
            logger.debug("No apostrophe-bearing entries; leaving sentence unchanged")
            return

        token_count = len(sentence.tokens)
        idx = replacement_index(self.rng.intn(token_count), sentence.number_pos, token_count)
        sentence.tokens[idx] = entry.word

        gloss_idx = meaning_index(idx, sentence.number_pos)
        if gloss_idx is not None and gloss_idx < len(sentence.meanings):
            sentence.meanings[gloss_idx] = entry.describe()


def generate_sentence(
    lexicon: Lexicon,
    min_size: int,
    include_dot: bool = False,
    include_apostrophe: bool = False,
    include_lujvo: bool = False,
    rng: Optional[RandomSource] = None,
) -> tuple[str, list[str]]:
    """Generate one sentence; convenience wrapper around SentenceGenerator."""
    generator = SentenceGenerator(lexicon, rng or RandomSource(), include_lujvo=include_lujvo)
    return generator.generate(min_size, include_dot, include_apostrophe)
