# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for SeqMessage CLEF rendering."""

import json
import logging
import sys
from datetime import datetime

import pytest

from seq_sink import SeqMessage, SerializationError, TRACE


def test_from_record_fields(make_record):
    """Test that every field is taken from the record and the sink."""
    record = make_record("Service started", level=logging.INFO, name="svc.api", lineno=7)

    msg = SeqMessage.from_record(record, application="svc")

    assert msg.message == "Service started"
    assert msg.application == "svc"
    assert msg.level == "Information"
    assert msg.module == "svc.api"
    assert msg.file == "/app/svc/handler.py"
    assert msg.line == 7
    assert msg.exception is None


def test_from_record_formats_args(make_record):
    """Test that %-style arguments are applied to the message."""
    record = make_record("processed %d items for %s", args=(3, "alice"))

    msg = SeqMessage.from_record(record, application="svc")

    assert msg.message == "processed 3 items for alice"


def test_timestamp_is_utc_with_offset(make_record):
    """Test that the timestamp is ISO-8601 with a UTC offset."""
    msg = SeqMessage.from_record(make_record(), application="svc")

    parsed = datetime.fromisoformat(msg.timestamp)
    assert parsed.utcoffset() is not None
    assert parsed.utcoffset().total_seconds() == 0
    assert msg.timestamp.endswith("+00:00")


def test_missing_location_defaults(make_record):
    """Test that a missing line renders as 0 and missing module/file as empty."""
    record = make_record(name=None, pathname=None, lineno=None)

    msg = SeqMessage.from_record(record, application="svc")
    event = json.loads(msg.as_clef())

    assert event["Line"] == 0
    assert event["Module"] == ""
    assert event["File"] == ""


def test_trace_maps_to_verbose(make_record):
    """Test that TRACE records carry the Verbose level."""
    msg = SeqMessage.from_record(make_record(level=TRACE), application="svc")

    assert msg.level == "Verbose"


def test_as_clef_field_order_and_names(make_record):
    """Test the CLEF field names and their order on the wire."""
    msg = SeqMessage.from_record(make_record(level=logging.ERROR), application="svc")

    event = json.loads(msg.as_clef())

    assert list(event) == ["@t", "@mt", "Application", "Line", "@l", "Module", "File"]
    assert event["@l"] == "Error"
    assert event["Application"] == "svc"


def test_as_clef_escapes_quotes_and_newlines(make_record):
    """Test that quotes and newlines stay inside one JSON string value."""
    text = 'user said "hi"\nand left'
    msg = SeqMessage.from_record(make_record(text), application="svc")

    rendered = msg.as_clef()

    assert "\n" not in rendered
    assert '\\"hi\\"' in rendered
    assert "\\n" in rendered
    assert json.loads(rendered)["@mt"] == text


def test_as_clef_contains_level_and_application(make_record):
    """Test the rendered body contains the documented key/value pairs."""
    msg = SeqMessage.from_record(make_record("boom", level=logging.ERROR), application="svc")

    rendered = msg.as_clef()

    assert '"@l": "Error"' in rendered
    assert '"Application": "svc"' in rendered


def test_exception_rendered_as_x_field(make_record):
    """Test that exception info is rendered into the @x field."""
    try:
        raise RuntimeError("database unavailable")
    except RuntimeError:
        record = make_record("query failed", level=logging.ERROR, exc_info=sys.exc_info())

    event = json.loads(SeqMessage.from_record(record, application="svc").as_clef())

    assert "RuntimeError: database unavailable" in event["@x"]
    assert event["@x"].startswith("Traceback")


def test_unformattable_message_raises(make_record):
    """Test that a message whose args do not match raises SerializationError."""
    record = make_record("%d items", args=("not-a-number",))

    with pytest.raises(SerializationError, match="Cannot format log message"):
        SeqMessage.from_record(record, application="svc")


def test_as_clef_lone_surrogate_raises(make_record):
    """Test that text which cannot be UTF-8 encoded raises SerializationError."""
    msg = SeqMessage.from_record(make_record("bad filename: \udcff"), application="svc")

    with pytest.raises(SerializationError, match="Cannot encode event as CLEF"):
        msg.as_clef()
