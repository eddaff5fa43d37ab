# =============================================================================
# tools/log.py  —  stderr logging for the MCP server
# =============================================================================
# The MCP transport owns STDOUT (stdin/stdout carry the JSON-RPC stream), so
# every log line goes to STDERR.
#
# ANSI COLOR CODES (when enabled):
#   - CYAN for incoming requests (tool name + parameters)
#   - GREEN for response text
#   - YELLOW for intermediate status/progress messages
# =============================================================================

import logging
import sys
from typing import Any

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

_LOGGER_NAME = "streamersonglist"
_PREVIEW_CHARS = 200

_FORMAT = "%(asctime)s [MCP] %(message)s"
_DATEFMT = "%H:%M:%S"

logger = logging.getLogger(_LOGGER_NAME)
logger.addHandler(logging.NullHandler())


class ColorFormatter(logging.Formatter):
    """Wraps a record in the ANSI colour its helper attached as ``ansi``."""

    def __init__(self, fmt: str = _FORMAT, datefmt: str = _DATEFMT, color: bool = True):
        super().__init__(fmt, datefmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        ansi = getattr(record, "ansi", None)
        if self.color and ansi:
            return f"{ansi}{text}{_RESET}"
        return text


def configure_logging(level: int = logging.INFO, color: bool = True) -> None:
    """Send log output to stderr.  Only the first call installs the handler."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColorFormatter(color=color))
    logging.basicConfig(level=level, handlers=[handler])
    logging.getLogger().setLevel(level)


def log_request(tool_name: str, params: dict[str, Any]) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{tool_name} called with: {param_str}", extra={"ansi": _CYAN})


def log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"  → {message}", extra={"ansi": _YELLOW})


def log_response(tool_name: str, text: str, is_error: bool = False) -> None:
    """Log (a preview of) the tool response in GREEN."""
    preview = text if len(text) <= _PREVIEW_CHARS else text[:_PREVIEW_CHARS] + "..."
    preview = preview.replace("\n", " ")
    flag = " [isError]" if is_error else ""
    logger.info(f"  ← {tool_name} response{flag}: {preview}", extra={"ansi": _GREEN})
