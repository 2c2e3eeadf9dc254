# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Exceptions raised by the Seq sink."""


class SeqSinkError(Exception):
    """Base exception for Seq sink errors."""
    pass


class SinkAlreadyInstalledError(SeqSinkError):
    """Raised when installing a sink while another one is already active."""
    pass


class SerializationError(SeqSinkError):
    """Raised when a record cannot be rendered as CLEF JSON."""
    pass


class TransportError(SeqSinkError):
    """Raised when an event cannot be delivered to the ingestion endpoint."""
    pass
