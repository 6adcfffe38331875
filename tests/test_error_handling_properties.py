"""
Property-based tests for catalog error handling.

These tests verify that load errors carry their source and reason, and that
load failures are logged with diagnostic context.
"""

import logging

from hypothesis import given, settings, strategies as st

from tour_catalog.error_handling import (
    CatalogError,
    CatalogLoadError,
    build_error_context,
    log_load_failure,
)


@given(source=st.text(min_size=1, max_size=40), reason=st.text(max_size=40))
@settings(max_examples=100)
def test_load_error_carries_source_and_reason(source, reason):
    """
    **Feature: tour-catalog, Property 16: Load error context**

    For any source and reason, the load error exposes both and mentions
    them in its message.
    """
    error = CatalogLoadError(source, reason)

    assert isinstance(error, CatalogError)
    assert error.source == source
    assert error.reason == reason
    assert source in str(error)
    assert reason in str(error)


def test_error_context_includes_cause():
    try:
        try:
            raise FileNotFoundError("tours-data.json")
        except FileNotFoundError as e:
            raise CatalogLoadError("tours-data.json", "FileNotFoundError") from e
    except CatalogLoadError as error:
        context = build_error_context("tours-data.json", error)

    assert context['source'] == "tours-data.json"
    assert context['error_type'] == "CatalogLoadError"
    assert context['cause'].startswith("FileNotFoundError")
    assert 'timestamp' in context


def test_error_context_without_cause():
    context = build_error_context("tours-data.json", CatalogLoadError("tours-data.json", "HTTP 404"))

    assert context['cause'] == 'None'


def test_log_load_failure(caplog):
    error = CatalogLoadError("https://example.com/tours-data.json", "HTTP 500")

    with caplog.at_level(logging.DEBUG, logger="tour_catalog.error_handling.errors"):
        log_load_failure(error.source, error)

    messages = [record.getMessage() for record in caplog.records]
    assert any("Error loading tours" in message and "HTTP 500" in message for message in messages)
    assert any("Full error context" in message for message in messages)
    assert caplog.records[0].levelno == logging.ERROR
