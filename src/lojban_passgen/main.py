"""
Main entry point for the Lojban password generator.

This module loads the dictionary tables and drives sentence generation,
providing a programmatic API for the whole process.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from lojban_passgen.config import Config, create_default_config
from lojban_passgen.dictionary.parser import parse_cmavo_file, parse_gismu_file
from lojban_passgen.exceptions import DictionaryError, EmptyDictionaryError
from lojban_passgen.generators.random_source import RandomSource
from lojban_passgen.generators.sentence import Sentence, SentenceGenerator
from lojban_passgen.lexicon import Lexicon
from lojban_passgen.logging_config import get_logger

logger = get_logger("main")


def load_lexicon(config: Config) -> Lexicon:
    """
    Parse both dictionary tables into a Lexicon.

    Args:
        config: Supplies table paths and encoding

    Returns:
        The loaded Lexicon

    Raises:
        DictionaryIOError: If a table cannot be read
        DictionaryFormatError: If a table has a malformed line
        EmptyDictionaryError: If either table has no entries
    """
    gismu_path = config.resolved_gismu_path()
    cmavo_path = config.resolved_cmavo_path()

    gismu = parse_gismu_file(gismu_path, encoding=config.encoding)
    logger.info("Loaded %d gismu from %s", len(gismu), gismu_path)
    cmavo = parse_cmavo_file(cmavo_path, encoding=config.encoding)
    logger.info("Loaded %d cmavo from %s", len(cmavo), cmavo_path)

    if not gismu:
        raise EmptyDictionaryError("gismu", f"No gismu entries loaded from {gismu_path}")
    if not cmavo:
        raise EmptyDictionaryError("cmavo", f"No cmavo entries loaded from {cmavo_path}")

    return Lexicon(gismu, cmavo)


@dataclass
class GenerationResult:
    """Result of running the generation pipeline."""

    success: bool
    sentences: list[Sentence] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    processing_time: float = 0.0


class PasswordPipeline:
    """
    Loads the lexicon once and generates ``config.count`` sentences.

    Usage:
        pipeline = PasswordPipeline(config)
        result = pipeline.run()
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        lexicon: Optional[Lexicon] = None,
        random_source: Optional[RandomSource] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            config: Configuration object (uses defaults if not provided)
            lexicon: Preloaded lexicon; loaded from config paths if omitted
            random_source: Random source (a secure one if omitted)
        """
        self.config = config or create_default_config()
        self.lexicon = lexicon
        self.random_source = random_source or RandomSource()

    def run(self) -> GenerationResult:
        """
        Run the pipeline.

        Dictionary problems are reported in the result. Entropy failures
        propagate to the caller.

        Returns:
            GenerationResult with the generated sentences
        """
        start_time = time.time()
        result = GenerationResult(success=True)

        try:
            if self.lexicon is None:
                self.lexicon = load_lexicon(self.config)
        except DictionaryError as e:
            result.success = False
            result.errors.append(str(e))
            result.processing_time = time.time() - start_time
            return result

        generator = SentenceGenerator(
            self.lexicon,
            self.random_source,
            include_lujvo=self.config.include_lujvo,
        )
        for _ in range(self.config.count):
            result.sentences.append(
                generator.build(
                    self.config.min_size,
                    include_dot=self.config.include_dot,
                    include_apostrophe=self.config.include_apostrophe,
                )
            )

        result.processing_time = time.time() - start_time
        logger.debug("Generated %d sentences in %.3fs", len(result.sentences), result.processing_time)
        return result


def generate_passwords(
    gismu_path: Path,
    cmavo_path: Path,
    **kwargs,
) -> GenerationResult:
    """
    Convenience function to generate sentences from two table files.

    Args:
        gismu_path: Path to gismu.txt
        cmavo_path: Path to cmavo.txt
        **kwargs: Additional configuration options

    Returns:
        GenerationResult with details
    """
    config = Config(gismu_path=Path(gismu_path), cmavo_path=Path(cmavo_path), **kwargs)
    return PasswordPipeline(config).run()
