"""Tests for the stderr log helpers and their colour formatter."""
import logging

from tools.log import ColorFormatter, log_request, log_response, log_status


def _record(message, **extra):
    record = logging.LogRecord("streamersonglist", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_paints_tagged_records():
    text = ColorFormatter(color=True).format(_record("getQueue called", ansi="\033[36m"))

    assert text.startswith("\033[36m")
    assert text.endswith("\033[0m")
    assert "[MCP] getQueue called" in text


def test_formatter_without_color_is_plain():
    text = ColorFormatter(color=False).format(_record("getQueue called", ansi="\033[36m"))

    assert "\033[" not in text
    assert text.endswith("[MCP] getQueue called")


def test_formatter_leaves_untagged_records_alone():
    text = ColorFormatter(color=True).format(_record("Server error"))

    assert "\033[" not in text


def test_each_formatter_keeps_its_own_setting():
    record = _record("hello", ansi="\033[32m")

    assert "\033[32m" in ColorFormatter(color=True).format(record)
    assert "\033[32m" not in ColorFormatter(color=False).format(record)


def test_helpers_tag_records_with_their_colour(caplog):
    caplog.set_level(logging.INFO, logger="streamersonglist")

    log_request("getSong", {"songId": "1"})
    log_status("GET songs/1")
    log_response("getSong", "Error: boom", is_error=True)

    request, status, response = caplog.records[-3:]
    assert request.getMessage() == "getSong called with: songId='1'"
    assert request.ansi == "\033[36m"
    assert status.ansi == "\033[33m"
    assert response.ansi == "\033[32m"
    assert "[isError]" in response.getMessage()
    assert all("\033[" not in r.getMessage() for r in caplog.records)


def test_long_responses_are_previewed(caplog):
    caplog.set_level(logging.INFO, logger="streamersonglist")

    log_response("getQueue", "x" * 500)

    assert caplog.records[-1].getMessage().endswith("x" * 200 + "...")
