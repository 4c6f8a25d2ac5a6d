"""
Configuration - Handles generator configuration.

This module handles:
- Configuration dataclass with all options
- Dictionary path resolution (explicit path, DICTIONARY_DIR, current dir)
- JSON configuration file support
- Command-line overrides
- Configuration validation
"""

import json
import os
from dataclasses import MISSING, asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Optional

from lojban_passgen.exceptions import ConfigError

DICTIONARY_DIR_ENV = "DICTIONARY_DIR"
GISMU_FILENAME = "gismu.txt"
CMAVO_FILENAME = "cmavo.txt"

_PATH_FIELDS = ("gismu_path", "cmavo_path", "dictionary_dir", "log_file")


def default_dictionary_dir() -> Path:
    """Return $DICTIONARY_DIR, or the current directory when unset."""
    return Path(os.environ.get(DICTIONARY_DIR_ENV) or ".")


@dataclass
class Config:
    """
    Configuration for password generation.

    Attributes:
        gismu_path: Explicit path to gismu.txt (overrides dictionary_dir)
        cmavo_path: Explicit path to cmavo.txt (overrides dictionary_dir)
        dictionary_dir: Directory searched for gismu.txt and cmavo.txt
        encoding: Encoding of the dictionary tables
        min_size: Minimum number of words per sentence
        count: Number of sentences to generate
        include_dot: End each sentence with a period
        include_apostrophe: Make sure each sentence contains an apostrophe
        include_lujvo: Allow generated compound words
        show_meanings: Print the gloss of every word
        verbose: Enable verbose output
        quiet: Suppress everything but the sentences
        log_level: Logging level
        log_file: Optional file that receives a copy of the log
    """

    gismu_path: Optional[Path] = None
    cmavo_path: Optional[Path] = None
    dictionary_dir: Path = field(default_factory=default_dictionary_dir)
    encoding: str = "utf-8"

    # Generation options
    min_size: int = 5
    count: int = 1
    include_dot: bool = False
    include_apostrophe: bool = False
    include_lujvo: bool = False

    # Output options
    show_meanings: bool = False
    verbose: bool = False
    quiet: bool = False
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    def resolved_gismu_path(self) -> Path:
        """Path of the gismu table actually used."""
        return self.gismu_path or self.dictionary_dir / GISMU_FILENAME

    def resolved_cmavo_path(self) -> Path:
        """Path of the cmavo table actually used."""
        return self.cmavo_path or self.dictionary_dir / CMAVO_FILENAME

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        data = {}
        for key, value in asdict(self).items():
            if isinstance(value, Path):
                data[key] = str(value)
            else:
                data[key] = value
        return data

    def save_to_file(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def load_from_file(cls, path: Path) -> "Config":
        """Load configuration from JSON file.

        Raises:
            ConfigError: If the file cannot be read or is not a JSON object
        """
        try:
            data = json.loads(path.read_text())
        except (OSError, ValueError) as e:
            raise ConfigError(f"Cannot load configuration from {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file {path} must contain a JSON object")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create config from dictionary.

        Unknown keys are ignored. Path fields accept strings; every other
        field must have the same type as its default.

        Raises:
            ConfigError: If a known field holds a value of the wrong type
        """
        values = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if f.name in _PATH_FIELDS:
                if value is None or value == "":
                    continue
                if not isinstance(value, (str, Path)):
                    raise ConfigError(f"Invalid value for {f.name}: expected a path, got {value!r}")
                values[f.name] = Path(value)
                continue
            expected = type(f.default) if f.default is not MISSING else None
            # bool is a subclass of int, so compare exact types
            if expected is not None and type(value) is not expected:
                raise ConfigError(
                    f"Invalid value for {f.name}: expected {expected.__name__}, got {value!r}"
                )
            values[f.name] = value

        return cls(**values)

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.min_size < 0:
            errors.append(f"Minimum size must not be negative: {self.min_size}")

        if self.count < 1:
            errors.append(f"Sentence count must be at least 1: {self.count}")

        gismu = self.resolved_gismu_path()
        if not gismu.is_file():
            errors.append(f"gismu file does not exist: {gismu}")

        cmavo = self.resolved_cmavo_path()
        if not cmavo.is_file():
            errors.append(f"cmavo file does not exist: {cmavo}")

        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.log_level}")

        return errors

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return len(self.validate()) == 0


def create_default_config() -> Config:
    """Create a configuration with default values."""
    return Config()


def merge_configs(base: Config, overrides: dict[str, Any]) -> Config:
    """
    Apply explicitly given values on top of a configuration.

    Every key in ``overrides`` wins, even when its value equals the
    field default.

    Args:
        base: Base configuration, e.g. loaded from a file
        overrides: Field values given on the command line

    Returns:
        Merged configuration

    Raises:
        ConfigError: If an override names an unknown field
    """
    known_fields = {f.name for f in fields(Config)}
    unknown = sorted(set(overrides) - known_fields)
    if unknown:
        raise ConfigError(f"Unknown configuration fields: {', '.join(unknown)}")
    return replace(base, **overrides)
