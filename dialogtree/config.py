"""
Configuration for serialization and console playback.
"""

from __future__ import annotations


class SerializerConfig:
    """Configuration for writing and reading dialog files."""

    def __init__(
        self,
        indent: int = 2,
        ensure_ascii: bool = False,
        omit_empty: bool = True,
        validate_schema: bool = True,
        encoding: str = "utf-8",
    ):
        self.indent = indent
        self.ensure_ascii = ensure_ascii  # False keeps non-ASCII text readable
        self.omit_empty = omit_empty      # Drop None values and empty lists
        self.validate_schema = validate_schema
        self.encoding = encoding


class ConsoleConfig:
    """Configuration for the console walkthrough."""

    def __init__(
        self,
        time_scale: float = 0.0,
        initial_delay: float = 0.0,
        unnamed_title: str = "Unnamed Dialog",
        max_choices: int = 9,
    ):
        self.time_scale = time_scale        # Per-line pause is log(len(text)) * time_scale seconds
        self.initial_delay = initial_delay  # Pause before each branch is printed
        self.unnamed_title = unnamed_title
        self.max_choices = max_choices      # Choices are read as single digit keys
