# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Logging handler that forwards records to a Seq server as CLEF events."""

import logging
import sys
import threading

import requests

from .exceptions import SerializationError, TransportError
from .levels import Level
from .message import SeqMessage

CLEF_CONTENT_TYPE = "application/vnd.serilog.clef"
INGEST_PATH = "/api/events/raw?clef"


class SeqSink(logging.Handler):
    """Handler that posts each accepted record to Seq's raw ingestion API.

    A record is forwarded when its level is at least the configured minimum
    and either its logger name contains ``module_filter`` or its level is
    WARN or above. Every forwarded record is also echoed to stdout as
    ``[ LEVEL ] message``.

    Delivery is a single blocking POST per record. Failures are reported to
    stderr and the event is dropped; nothing is raised back to the caller.

    Example:
        >>> sink = SeqSink(api_key="", ingest_url="http://localhost:5341",
        ...                application="svc", module_filter="svc")
        >>> logging.getLogger("svc.handler").addHandler(sink)
    """

    def __init__(
        self,
        api_key: str,
        ingest_url: str,
        application: str,
        module_filter: str,
        level: str | int = "INFO",
        timeout: float | None = None,
    ):
        """Initialize the sink.

        Args:
            api_key: Value sent in the ``X-Seq-ApiKey`` header
            ingest_url: Base URL of the Seq server (e.g. http://localhost:5341)
            application: Value of the ``Application`` property on every event
            module_filter: Substring a logger name must contain for records
                below WARN to be forwarded
            level: Minimum level, as a name or stdlib numeric level
            timeout: Request timeout in seconds; None blocks until the
                server answers

        Raises:
            ValueError: If the level name is unknown or the timeout is not positive
        """
        min_level = Level.parse(level) if isinstance(level, str) else Level.from_levelno(level)
        if timeout is not None and timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout!r}")

        super().__init__(level=min_level)
        self._min_level = min_level
        self._api_key = api_key
        self._ingest_url = ingest_url.rstrip("/")
        self._application = application
        self._module_filter = module_filter
        self._timeout = timeout
        self._sending = threading.local()

    @property
    def min_level(self) -> Level:
        return self._min_level

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def ingest_url(self) -> str:
        return self._ingest_url

    @property
    def application(self) -> str:
        return self._application

    @property
    def module_filter(self) -> str:
        return self._module_filter

    @property
    def timeout(self) -> float | None:
        return self._timeout

    @property
    def endpoint(self) -> str:
        """Full URL events are posted to."""
        return f"{self._ingest_url}{INGEST_PATH}"

    def enabled(self, level: int) -> bool:
        """Return True if ``level`` is at least the configured minimum."""
        return Level.from_levelno(level) >= self._min_level

    def forwards(self, record: logging.LogRecord) -> bool:
        """Return True if the module filter lets ``record`` through.

        WARN and above always pass, so high-severity events are never lost
        to the filter.
        """
        if self._module_filter in (record.name or ""):
            return True
        return Level.from_levelno(record.levelno) >= Level.WARN

    def log(self, record: logging.LogRecord) -> None:
        """Filter, render and send one record.

        Never raises: rendering and delivery errors are written to stderr
        and the event is dropped.
        """
        if not self.enabled(record.levelno):
            return
        if not self.forwards(record):
            return
        # Records logged by the HTTP stack while we are sending
        if getattr(self._sending, "active", False):
            return

        self._sending.active = True
        try:
            self._print_console(record)
            try:
                msg = SeqMessage.from_record(record, self._application)
                body = msg.as_clef()
            except SerializationError as e:
                print(f"Seq message dropped, rendering failed: {e}", file=sys.stderr, flush=True)
                return

            try:
                self.send(body)
            except TransportError as e:
                print(f"Seq msg attempt: {msg!r}", file=sys.stderr, flush=True)
                print(f"Rendered message: {body}", file=sys.stderr, flush=True)
                print(f"Updating seq logs failed: {e}", file=sys.stderr, flush=True)
        finally:
            self._sending.active = False

    def send(self, body: str) -> None:
        """POST one rendered CLEF line to the ingestion endpoint.

        Args:
            body: Rendered CLEF event

        Raises:
            TransportError: On connection errors, timeouts or a non-2xx status
        """
        try:
            response = requests.post(
                self.endpoint,
                data=body.encode("utf-8"),
                headers={
                    "X-Seq-ApiKey": self._api_key,
                    "Content-Type": CLEF_CONTENT_TYPE,
                },
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.log(record)
        except Exception:
            self.handleError(record)

    def flush(self) -> None:
        """Nothing is buffered, so there is nothing to flush."""
        pass

    def _print_console(self, record: logging.LogRecord) -> None:
        try:
            text = record.getMessage()
        except (TypeError, ValueError):
            text = str(record.msg)
        tag = Level.from_levelno(record.levelno).console_tag
        text = text.replace('"', "").encode("utf-8", "backslashreplace").decode("utf-8")
        try:
            print(f"{tag} {text}", file=sys.stdout, flush=True)
        except (OSError, ValueError) as e:
            print(f"Console output failed: {type(e).__name__}: {e}", file=sys.stderr, flush=True)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} {self.endpoint} "
            f"application={self._application!r} level={self._min_level.name}>"
        )
