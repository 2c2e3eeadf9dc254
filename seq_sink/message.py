# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""CLEF rendering of a single log record."""

import json
import logging
import traceback
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .exceptions import SerializationError
from .levels import Level


@dataclass(frozen=True)
class SeqMessage:
    """One event as it will be sent to Seq.

    Instances are created per record and discarded once rendered.

    Attributes:
        timestamp: ISO-8601 timestamp with UTC offset
        message: Formatted message text
        application: Application name the sink was configured with
        level: Seq level name (e.g. "Information")
        module: Logger name the record was emitted on
        file: Source file path
        line: Source line number
        exception: Formatted traceback, if the record carried one
    """

    timestamp: str
    message: str
    application: str
    level: str
    module: str
    file: str
    line: int
    exception: str | None = None

    @classmethod
    def from_record(cls, record: logging.LogRecord, application: str) -> "SeqMessage":
        """Build a message from a stdlib log record.

        Args:
            record: Record handed to the sink by the logging module
            application: Value for the ``Application`` property

        Returns:
            SeqMessage stamped with the current UTC time

        Raises:
            SerializationError: If the record's message cannot be formatted
        """
        try:
            text = record.getMessage()
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot format log message {record.msg!r}: {e}") from e

        exception = None
        if record.exc_info and record.exc_info[0] is not None:
            exception = "".join(traceback.format_exception(*record.exc_info)).rstrip("\n")

        return cls(
            timestamp=datetime.now(timezone.utc).isoformat(),
            message=text,
            application=application,
            level=Level.from_levelno(record.levelno).seq_level,
            module=record.name or "",
            file=record.pathname or "",
            line=record.lineno or 0,
            exception=exception,
        )

    def to_clef(self) -> dict[str, Any]:
        """Return the CLEF property mapping in wire order."""
        event: dict[str, Any] = {
            "@t": self.timestamp,
            "@mt": self.message,
            "Application": self.application,
            "Line": self.line,
            "@l": self.level,
            "Module": self.module,
            "File": self.file,
        }
        if self.exception:
            event["@x"] = self.exception
        return event

    def as_clef(self) -> str:
        """Render the message as one line of CLEF JSON.

        Raises:
            SerializationError: If the event cannot be encoded
        """
        try:
            body = json.dumps(self.to_clef(), ensure_ascii=False)
            # Lone surrogates survive json.dumps but cannot go on the wire
            body.encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot encode event as CLEF: {e}") from e
        return body
