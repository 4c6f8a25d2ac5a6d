"""
Lojban Password Generator - Pronounceable passwords from Lojban dictionaries.

This package parses the fixed-column gismu and cmavo dictionary tables and
uses a cryptographically secure random source to assemble password-like
pseudo-sentences, optionally with generated compound words (lujvo).

Basic Usage:
    from lojban_passgen import Lexicon, SentenceGenerator, parse_gismu_file, parse_cmavo_file

    lexicon = Lexicon(parse_gismu_file("gismu.txt"), parse_cmavo_file("cmavo.txt"))
    generator = SentenceGenerator(lexicon, include_lujvo=True)
    sentence, meanings = generator.generate(5, include_dot=True, include_apostrophe=True)

Command-Line Usage:
    jbopwdgen --gismu gismu.txt --cmavo cmavo.txt
    jbopwdgen --dictionary-dir dicts/ -n 5 --apostrophe --meanings
"""

__version__ = "1.0.0"

from lojban_passgen.exceptions import (
    PassgenError,
    DictionaryError,
    DictionaryFormatError,
    DictionaryIOError,
    EmptyDictionaryError,
    EntropyError,
    ConfigError,
)

from lojban_passgen.config import Config, create_default_config
from lojban_passgen.models import Cmavo, Gismu
from lojban_passgen.dictionary.parser import (
    parse_cmavo,
    parse_cmavo_file,
    parse_gismu,
    parse_gismu_file,
)
from lojban_passgen.lexicon import Lexicon
from lojban_passgen.generators.random_source import RandomSource
from lojban_passgen.generators.lujvo import LujvoGenerator, generate_lujvo
from lojban_passgen.generators.sentence import Sentence, SentenceGenerator, generate_sentence
from lojban_passgen.main import (
    GenerationResult,
    PasswordPipeline,
    generate_passwords,
    load_lexicon,
)

__all__ = [
    # Version
    "__version__",
    # Main API
    "generate_passwords",
    "load_lexicon",
    "PasswordPipeline",
    "GenerationResult",
    "SentenceGenerator",
    "Sentence",
    "generate_sentence",
    "LujvoGenerator",
    "generate_lujvo",
    "RandomSource",
    # Dictionaries
    "parse_gismu",
    "parse_gismu_file",
    "parse_cmavo",
    "parse_cmavo_file",
    "Lexicon",
    "Gismu",
    "Cmavo",
    # Configuration
    "Config",
    "create_default_config",
    # Exceptions
    "PassgenError",
    "DictionaryError",
    "DictionaryFormatError",
    "DictionaryIOError",
    "EmptyDictionaryError",
    "EntropyError",
    "ConfigError",
]
