# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Severity levels and their Seq / console labels."""

import logging
from enum import IntEnum


class Level(IntEnum):
    """Severity levels understood by the sink, ordered least to most severe."""

    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def from_levelno(cls, levelno: int) -> "Level":
        """Map a stdlib numeric level onto the nearest level at or below it."""
        if levelno < logging.DEBUG:
            return cls.TRACE
        if levelno < logging.INFO:
            return cls.DEBUG
        if levelno < logging.WARNING:
            return cls.INFO
        if levelno < logging.ERROR:
            return cls.WARN
        if levelno < logging.CRITICAL:
            return cls.ERROR
        return cls.CRITICAL

    @classmethod
    def parse(cls, name: str) -> "Level":
        """Parse a level name such as "info" or "WARNING".

        Raises:
            ValueError: If the name is not a known level
        """
        key = name.strip().upper()
        if key not in _ALIASES:
            raise ValueError(f"Invalid log level: {name}. Must be one of {sorted(_ALIASES)}")
        return _ALIASES[key]

    @property
    def seq_level(self) -> str:
        """Level name as Seq expects it in the ``@l`` field."""
        return _SEQ_LEVELS[self]

    @property
    def console_tag(self) -> str:
        """Bracketed tag used for the local console line."""
        return _CONSOLE_TAGS[self]


TRACE = int(Level.TRACE)

logging.addLevelName(TRACE, "TRACE")


_ALIASES = {
    "TRACE": Level.TRACE,
    "DEBUG": Level.DEBUG,
    "INFO": Level.INFO,
    "WARN": Level.WARN,
    "WARNING": Level.WARN,
    "ERROR": Level.ERROR,
    "CRITICAL": Level.CRITICAL,
    "FATAL": Level.CRITICAL,
}

_SEQ_LEVELS = {
    Level.TRACE: "Verbose",
    Level.DEBUG: "Debug",
    Level.INFO: "Information",
    Level.WARN: "Warning",
    Level.ERROR: "Error",
    Level.CRITICAL: "Fatal",
}

_CONSOLE_TAGS = {
    Level.TRACE: "[ TRACE ]",
    Level.DEBUG: "[ DEBUG ]",
    Level.INFO: "[ INFO ]",
    Level.WARN: "[ WARN ]",
    Level.ERROR: "[ ERROR ]",
    Level.CRITICAL: "[ CRITICAL ]",
}
