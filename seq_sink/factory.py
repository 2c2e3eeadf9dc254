# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory and install functions for the process-wide Seq sink."""

import logging

from .config import SeqSinkConfig
from .exceptions import SinkAlreadyInstalledError
from .sink import SeqSink

logger = logging.getLogger(__name__)

# The sink attached to the root logger; set once by install()
_installed_sink: SeqSink | None = None


def create_sink(
    api_key: str,
    ingest_url: str,
    application: str,
    module_filter: str,
    level: str = "INFO",
    timeout: float | None = None,
) -> SeqSink:
    """Create a SeqSink without installing it.

    Args:
        api_key: Seq API key
        ingest_url: Base URL of the Seq server
        application: Application name attached to every event
        module_filter: Logger-name substring required for records below WARN
        level: Minimum level. Defaults to INFO.
        timeout: Request timeout in seconds. Defaults to None (no timeout).

    Returns:
        SeqSink instance

    Example:
        >>> sink = create_sink("", "http://localhost:5341", "svc", "svc")
        >>> install(sink)
        >>> logging.getLogger("svc.handler").error("boom")
    """
    return SeqSink(
        api_key=api_key,
        ingest_url=ingest_url,
        application=application,
        module_filter=module_filter,
        level=level,
        timeout=timeout,
    )


def install(sink: SeqSink) -> None:
    """Register ``sink`` as the process's active log sink.

    Attaches the sink to the root logger and sets the root level to INFO.

    Raises:
        SinkAlreadyInstalledError: If a sink has already been installed
    """
    global _installed_sink

    if _installed_sink is not None:
        raise SinkAlreadyInstalledError(
            f"Unable to set seq as a logger: {_installed_sink!r} is already installed"
        )

    logger.info("Installing Seq sink for %s at %s", sink.application, sink.endpoint)

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.addHandler(sink)
    _installed_sink = sink


def install_from_config(config: SeqSinkConfig) -> SeqSink:
    """Create a sink from ``config`` and install it.

    Returns:
        The installed SeqSink

    Raises:
        SinkAlreadyInstalledError: If a sink has already been installed
    """
    sink = create_sink(
        api_key=config.api_key,
        ingest_url=config.ingest_url,
        application=config.application,
        module_filter=config.module_filter,
        level=config.level,
        timeout=config.timeout,
    )
    install(sink)
    return sink


def get_installed_sink() -> SeqSink | None:
    """Return the installed sink, or None if install() has not been called."""
    return _installed_sink
