# =============================================================================
# tools/dispatcher.py  —  The single entry point for a tool call
# =============================================================================
#
# HOW IT WORKS (the flow, one call at a time):
#   1. Idle        → look the tool up in the catalog (UnknownToolError if absent)
#   2. Validating  → core.validation.validate_arguments
#   3. Building    → core.request_builder.build_request
#   4. Calling     → UpstreamClient.send, in a worker thread
#   5. Formatting  → core.formatting.format_outcome
#   6. Idle        → one ToolResult handed back
#
# ERROR POLICY:
#   - ValidationError, UnknownToolError and UnknownActionError come back as
#     ordinary text: "Error: <message>", is_error=False.
#   - Anything else (UpstreamResponseError included) is unexpected: logged
#     with its traceback, returned as "Error: <message>" with is_error=True.
#   dispatch() never raises; one bad call must not take the server down.
#
# The Dispatcher holds only the config and the client, both read-only, so
# any number of calls can be in flight at once.
# =============================================================================

import asyncio
import logging
from typing import Any, Mapping, Optional

from core.catalog import get_tool, list_tools
from core.config import ServerConfig
from core.errors import UnknownActionError, UnknownToolError, ValidationError
from core.formatting import format_outcome
from core.models import ToolCall, ToolDefinition, ToolResult
from core.request_builder import build_request
from core.upstream import UpstreamClient
from core.validation import validate_arguments
from tools.log import log_request, log_response, log_status

logger = logging.getLogger(__name__)


class Dispatcher:
    def __init__(self, config: ServerConfig, client: Optional[UpstreamClient] = None):
        self.config = config
        self.client = client or UpstreamClient(config.api_base_url, timeout=config.timeout)

    def list_tools(self) -> tuple[ToolDefinition, ...]:
        return list_tools()

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """Run one tool call to completion and return its result."""
        try:
            call = ToolCall(name, dict(arguments or {}))
            log_request(call.tool_name, dict(call.arguments))
            result = await self._run(call)
        except (ValidationError, UnknownToolError, UnknownActionError) as e:
            log_status(f"Rejected: {e}")
            result = ToolResult(f"Error: {e}")
        except Exception as e:
            logger.exception("Unexpected failure in tool %s", name)
            result = ToolResult(f"Error: {str(e) or type(e).__name__}", is_error=True)
        log_response(name, result.text, result.is_error)
        return result

    async def _run(self, call: ToolCall) -> ToolResult:
        definition = get_tool(call.tool_name)
        if definition is None:
            raise UnknownToolError(call.tool_name)

        arguments = validate_arguments(definition, call.arguments)
        request = build_request(definition.name, arguments)
        log_status(f"{request.method} {request.path}")

        outcome = await asyncio.to_thread(self.client.send, request)
        log_status(f"Upstream outcome: {type(outcome).__name__}")

        return format_outcome(definition.name, arguments, outcome)
