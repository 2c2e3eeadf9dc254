# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Seq log sink.

Forwards records from the standard ``logging`` module to a Seq server as
CLEF (Compact Log Event Format) events over HTTP.

Example:
    >>> import logging
    >>> from seq_sink import create_sink, install
    >>>
    >>> install(create_sink(
    ...     api_key="",
    ...     ingest_url="http://localhost:5341",
    ...     application="svc",
    ...     module_filter="svc",
    ... ))
    >>> logging.getLogger("svc.handler").error("boom")
    [ ERROR ] boom
    >>>
    >>> # Or resolve settings from SEQ_* environment variables / .env
    >>> from seq_sink import install_from_config, load_config
    >>> install_from_config(load_config())
"""

__version__ = "0.1.0"

from .config import SeqSinkConfig, load_config
from .exceptions import SeqSinkError, SerializationError, SinkAlreadyInstalledError, TransportError
from .factory import create_sink, get_installed_sink, install, install_from_config
from .levels import TRACE, Level
from .message import SeqMessage
from .sink import SeqSink

__all__ = [
    "__version__",
    "Level",
    "TRACE",
    "SeqMessage",
    "SeqSink",
    "SeqSinkConfig",
    "SeqSinkError",
    "SerializationError",
    "SinkAlreadyInstalledError",
    "TransportError",
    "create_sink",
    "get_installed_sink",
    "install",
    "install_from_config",
    "load_config",
]
