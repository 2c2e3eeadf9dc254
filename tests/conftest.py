# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Shared test fixtures for seq_sink tests."""

import logging
from unittest.mock import MagicMock, patch

import pytest

import seq_sink.factory as factory
from seq_sink import SeqSink


def _make_record(
    message: str = "hello",
    level: int = logging.INFO,
    name: str = "svc.handler",
    pathname: str | None = "/app/svc/handler.py",
    lineno: int | None = 42,
    args: tuple = (),
    exc_info=None,
) -> logging.LogRecord:
    """Build a LogRecord the way the logging module would hand it to a handler."""
    return logging.LogRecord(
        name=name,
        level=level,
        pathname=pathname,
        lineno=lineno,
        msg=message,
        args=args,
        exc_info=exc_info,
    )


@pytest.fixture
def make_record():
    """Factory for LogRecords built the way the logging module builds them."""
    return _make_record


@pytest.fixture
def sink():
    """Sink matching the documented example configuration."""
    return SeqSink(
        api_key="",
        ingest_url="http://localhost:5341",
        application="svc",
        module_filter="svc",
    )


@pytest.fixture
def mock_post():
    """Patch requests.post as used by the sink and return the mock."""
    with patch("seq_sink.sink.requests.post") as post:
        response = MagicMock()
        response.raise_for_status = MagicMock()
        post.return_value = response
        yield post


@pytest.fixture
def reset_install_state():
    """Reset global sink state and root logger before and after each test."""
    root = logging.getLogger()
    original_level = root.level
    factory._installed_sink = None
    yield
    if factory._installed_sink is not None:
        root.removeHandler(factory._installed_sink)
    factory._installed_sink = None
    root.setLevel(original_level)
