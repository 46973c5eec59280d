"""
Tests for structured logging configuration and request context.
"""

import json

import pytest

from bookshelf.logging import (
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_logger,
    get_request_id,
    set_request_context,
)


@pytest.fixture(autouse=True)
def reset_request_context():
    yield
    clear_request_context()


def test_json_logging_includes_request_id(capsys):
    configure_logging(debug=False)
    logger = get_logger("bookshelf.tests")

    set_request_context(request_id="req-123")
    logger.info("Book created", book_id=9)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "Book created"
    assert event["book_id"] == 9
    assert event["request_id"] == "req-123"
    assert event["level"] == "info"
    assert event["logger"] == "bookshelf.tests"


def test_cleared_context_omits_request_id(capsys):
    configure_logging(debug=False)
    logger = get_logger("bookshelf.tests")

    set_request_context(request_id="req-123")
    clear_request_context()
    logger.info("After clearing")

    event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert "request_id" not in event


def test_explicit_log_level_filters(capsys):
    configure_logging(debug=False, log_level="warning")
    logger = get_logger("bookshelf.tests")

    logger.info("hidden")
    logger.warning("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out


def test_unknown_log_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging(log_level="chatty")


def test_set_request_context_generates_id():
    request_id = set_request_context()

    assert request_id == get_request_id()
    assert len(request_id) == 14


def test_generated_request_ids_are_unique():
    ids = {generate_request_id() for _ in range(100)}
    assert len(ids) == 100
