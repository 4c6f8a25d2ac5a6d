"""
Command-Line Interface for the Lojban password generator.

Usage:
    jbopwdgen --gismu gismu.txt --cmavo cmavo.txt
    jbopwdgen --dictionary-dir dicts/ --minsize 4 --dot --apostrophe
    jbopwdgen -n 5 --lujvo --meanings
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from lojban_passgen import __version__
from lojban_passgen.config import Config, create_default_config, merge_configs
from lojban_passgen.exceptions import ConfigError, EntropyError
from lojban_passgen.generators.sentence import Sentence
from lojban_passgen.logging_config import get_logger, setup_logging
from lojban_passgen.main import PasswordPipeline

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_ENTROPY = 2

logger = get_logger("cli")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="jbopwdgen",
        description="Generate pronounceable passwords from random Lojban words.",
        epilog="Dictionary files default to $DICTIONARY_DIR/gismu.txt and $DICTIONARY_DIR/cmavo.txt.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Dictionaries
    parser.add_argument(
        "--gismu",
        type=Path,
        help="Path to gismu.txt file",
        metavar="FILE",
    )

    parser.add_argument(
        "--cmavo",
        type=Path,
        help="Path to cmavo.txt file",
        metavar="FILE",
    )

    parser.add_argument(
        "--dictionary-dir",
        type=Path,
        help="Directory containing gismu.txt and cmavo.txt (default: $DICTIONARY_DIR or .)",
        metavar="DIR",
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration file (JSON)",
        metavar="FILE",
    )

    parser.add_argument(
        "--encoding",
        help="Dictionary file encoding (default: utf-8)",
    )

    # Generation options
    parser.add_argument(
        "--minsize",
        type=int,
        help="Minimum number of words in the generated sentence (default: 5)",
        metavar="N",
    )

    parser.add_argument(
        "-n", "--count",
        type=int,
        help="Number of sentences to generate (default: 1)",
        metavar="N",
    )

    parser.add_argument(
        "--dot",
        action="store_true",
        default=None,
        help="End each sentence with a period",
    )

    parser.add_argument(
        "--apostrophe",
        action="store_true",
        default=None,
        help="Make sure each sentence contains an apostrophe",
    )

    parser.add_argument(
        "--lujvo",
        action="store_true",
        default=None,
        help="Mix generated compound words (lujvo) into sentences",
    )

    # Output options
    parser.add_argument(
        "-m", "--meanings",
        action="store_true",
        default=None,
        help="Print the meaning of every word under its sentence",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=None,
        help="Print sentences only",
    )

    parser.add_argument(
        "--log-level",
        help="Logging level (default: WARNING)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write log records to FILE",
        metavar="FILE",
    )

    return parser


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = create_parser()
    return parser.parse_args(args)


def explicit_options(args: argparse.Namespace) -> dict:
    """Map the options given on the command line to Config field names.

    Options left unset parse as None and are omitted, so a value typed
    explicitly still counts when it equals the default.
    """
    options = {
        "gismu_path": args.gismu,
        "cmavo_path": args.cmavo,
        "dictionary_dir": args.dictionary_dir,
        "encoding": args.encoding,
        "min_size": args.minsize,
        "count": args.count,
        "include_dot": args.dot,
        "include_apostrophe": args.apostrophe,
        "include_lujvo": args.lujvo,
        "show_meanings": args.meanings,
        "verbose": args.verbose,
        "quiet": args.quiet,
        "log_level": args.log_level,
        "log_file": args.log_file,
    }
    if args.verbose:
        options["log_level"] = "DEBUG"
    return {key: value for key, value in options.items() if value is not None}


def args_to_config(args: argparse.Namespace) -> Config:
    """Convert parsed arguments to Config object.

    Raises:
        ConfigError: If the configuration file cannot be loaded
    """
    if args.config:
        config = Config.load_from_file(args.config)
    else:
        config = create_default_config()

    # Command-line args override file config
    return merge_configs(config, explicit_options(args))


def render_sentence(sentence: Sentence, show_meanings: bool, out: TextIO) -> None:
    """Write a sentence, and optionally its glosses, to ``out``."""
    print(sentence.text, file=out)
    if show_meanings:
        for meaning in sentence.meanings:
            print(f"  {meaning}", file=out)


def run_generation(config: Config, out: Optional[TextIO] = None) -> int:
    """
    Run the generation pipeline and print its sentences.

    Returns:
        Exit code (0 for success, 1 for dictionary errors, 2 for entropy failure)
    """
    out = out or sys.stdout

    try:
        result = PasswordPipeline(config).run()
    except EntropyError as e:
        logger.critical("%s", e)
        return EXIT_ENTROPY

    if not result.success:
        if not config.quiet:
            for error in result.errors:
                print(f"Error: {error}", file=sys.stderr)
        return EXIT_ERROR

    for i, sentence in enumerate(result.sentences):
        if config.show_meanings and i:
            print(file=out)
        render_sentence(sentence, config.show_meanings, out)

    return EXIT_OK


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code
    """
    parsed = parse_args(args)
    try:
        config = args_to_config(parsed)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_ERROR
    try:
        setup_logging(config.log_level, log_file=config.log_file, verbose=config.verbose)
    except OSError as e:
        print(f"Configuration error: cannot open log file {config.log_file}: {e}", file=sys.stderr)
        return EXIT_ERROR

    # Validate configuration
    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Configuration error: {error}", file=sys.stderr)
        return EXIT_ERROR

    return run_generation(config)


if __name__ == "__main__":
    sys.exit(main())
