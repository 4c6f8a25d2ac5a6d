"""
Pytest configuration and fixtures for Lojban password generator tests.
"""

import logging

import pytest

from lojban_passgen.generators.random_source import RandomSource
from lojban_passgen.lexicon import Lexicon
from lojban_passgen.models import Cmavo, Gismu

GISMU_HEADER = "         This is the gismu list header, version 1.0"
CMAVO_HEADER = "         This is the cmavo list header, version 1.0"


def _put(buf: list, start: int, end: int, text: str) -> None:
    width = end - start
    buf[start:end] = list(text[:width].ljust(width))


def build_gismu_line(
    word: str,
    rafsi: tuple = ("", "", ""),
    keyword: str = "",
    hint: str = "",
    meaning: str = "",
    tail: str = "",
) -> str:
    """Lay out a 157-column gismu line, optionally followed by ``tail``."""
    buf = [" "] * 157
    _put(buf, 1, 6, word)
    _put(buf, 7, 10, rafsi[0])
    _put(buf, 11, 14, rafsi[1])
    _put(buf, 15, 19, rafsi[2])
    _put(buf, 20, 40, keyword)
    _put(buf, 41, 61, hint)
    _put(buf, 62, 157, meaning)
    return "".join(buf) + tail


def build_cmavo_line(word: str, category: str = "", keyword: str = "", meaning: str = "") -> str:
    """Lay out a cmavo line; the meaning starts at column 63."""
    return (
        f"{word:<11}"
        + " "
        + f"{category:<8}"
        + " "
        + f"{keyword:<41}"
        + " "
        + meaning
    )


class ScriptedRandomSource(RandomSource):
    """Replays predetermined draws and records every bound requested."""

    def __init__(self, draws):
        super().__init__()
        self.draws = list(draws)
        self.bounds = []

    def intn(self, bound: int) -> int:
        self.bounds.append(bound)
        if bound <= 0:
            return 0
        value = self.draws.pop(0)
        assert 0 <= value < bound, f"scripted draw {value} outside [0, {bound})"
        return value


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging between tests."""
    yield
    logger = logging.getLogger("lojban_passgen")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def gismu_line():
    """Factory for well-formed gismu lines."""
    return build_gismu_line


@pytest.fixture
def cmavo_line():
    """Factory for well-formed cmavo lines."""
    return build_cmavo_line


@pytest.fixture
def scripted_rng():
    """Factory for a random source that replays the given draws."""
    return ScriptedRandomSource


@pytest.fixture
def gismu_entries():
    """A few gismu, none with an apostrophe."""
    return (
        Gismu(word="gismu", rafsi_cvc="gim", keyword="root word", meaning="x1 is a root word"),
        Gismu(word="broda", keyword="predicate 1", meaning="x1 is predicate 1"),
        Gismu(word="prami", rafsi_cvc="pam", rafsi_ccv="", rafsi_cvv="", keyword="love", meaning="x1 loves x2"),
        Gismu(word="klama", rafsi_cvc="kla", keyword="go", meaning="x1 comes/goes to x2"),
    )


@pytest.fixture
def cmavo_entries():
    """A few cmavo, two of them with an apostrophe."""
    return (
        Cmavo(word="mi", category="KOhA3", keyword="me", meaning="I"),
        Cmavo(word="do", category="KOhA3", keyword="you", meaning="you"),
        Cmavo(word="ta'e", category="TAhE", keyword="habitually", meaning="habitually"),
        Cmavo(word="la'o", category="LAhO", keyword="the name", meaning="the non-Lojban name"),
    )


@pytest.fixture
def lexicon(gismu_entries, cmavo_entries):
    """A small lexicon with apostrophe-bearing cmavo."""
    return Lexicon(gismu_entries, cmavo_entries)


@pytest.fixture
def plain_lexicon(gismu_entries, cmavo_entries):
    """A small lexicon with no apostrophe-bearing entries at all."""
    return Lexicon(gismu_entries, [c for c in cmavo_entries if "'" not in c.word])


@pytest.fixture
def dictionary_dir(tmp_path):
    """A directory holding small gismu.txt and cmavo.txt tables."""
    gismu = [
        GISMU_HEADER,
        build_gismu_line("prami", ("pam", "", ""), "love", "", "x1 loves x2 (cf. kurji)"),
        build_gismu_line("klama", ("kla", "", ""), "go", "", "x1 comes/goes to x2 from x3"),
        build_gismu_line("broda", ("", "", ""), "predicate 1", "", "x1 is predicate 1"),
    ]
    cmavo = [
        CMAVO_HEADER,
        build_cmavo_line("mi", "KOhA3", "me", "I"),
        build_cmavo_line("do", "KOhA3", "you", "you"),
        build_cmavo_line("ta'e", "TAhE", "habitually", "habitually"),
    ]
    directory = tmp_path / "dicts"
    directory.mkdir()
    (directory / "gismu.txt").write_text("\n".join(gismu) + "\n")
    (directory / "cmavo.txt").write_text("\n".join(cmavo) + "\n")
    return directory
