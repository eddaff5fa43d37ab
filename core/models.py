# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of everything that flows through a tool
# call:
#
#   ToolDefinition / ParameterSpec  →  what a tool accepts (the catalog)
#   ToolCall                        →  one incoming invocation
#   UpstreamRequest                 →  the single REST call it becomes
#   Success / Failure / NetworkError →  what the upstream API answered
#   ToolResult                      →  the text handed back to the caller
#
# All of them are frozen.  Nothing here outlives a single call except the
# catalog, which is built once at import time and never mutated.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union


# -----------------------------------------------------------------------------
# Parameter kinds
# -----------------------------------------------------------------------------
STRING = "string"
NUMBER = "number"
ENUM = "enum"

_KINDS = {STRING, NUMBER, ENUM}


@dataclass(frozen=True)
class ParameterSpec:
    """One declared argument of a tool.

    ``required_for`` names the actions (of the tool's ``action`` parameter)
    for which this otherwise-optional parameter becomes mandatory.
    """

    name: str
    kind: str
    description: str
    required: bool = False
    default: Any = None
    values: tuple[str, ...] = ()       # enum members, in declared order
    required_for: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"Unknown parameter kind {self.kind!r} for {self.name}")
        if self.kind == ENUM and not self.values:
            raise ValueError(f"Enum parameter {self.name} declares no values")
        if self.required and self.default is not None:
            raise ValueError(f"Required parameter {self.name} cannot declare a default")

    def json_schema(self) -> dict:
        """Render this parameter as a JSON-Schema property."""
        schema: dict[str, Any] = {
            "type": "string" if self.kind in (STRING, ENUM) else "number",
            "description": self.description,
        }
        if self.kind == ENUM:
            schema["enum"] = list(self.values)
        if self.default is not None:
            schema["default"] = self.default
        return schema


@dataclass(frozen=True)
class ToolDefinition:
    """A named remote operation with its declared input schema."""

    name: str
    description: str
    parameters: tuple[ParameterSpec, ...] = ()

    def input_schema(self) -> dict:
        """The MCP ``inputSchema`` for this tool."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
        }


@dataclass(frozen=True)
class ToolCall:
    """A single incoming invocation: tool name plus raw arguments."""

    tool_name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


# -----------------------------------------------------------------------------
# UpstreamRequest — exactly one REST call per tool call
# -----------------------------------------------------------------------------
# ``path`` is relative to the API base and already percent-encoded.
# ``query`` only holds parameters that were supplied (or defaulted).
# ``body`` is None for GET and DELETE.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class UpstreamRequest:
    method: str
    path: str
    query: Mapping[str, Any] = field(default_factory=dict)
    body: Optional[Mapping[str, Any]] = None


# -----------------------------------------------------------------------------
# UpstreamOutcome — success, declined, or never completed
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Success:
    status_code: int
    body: Any = None


@dataclass(frozen=True)
class Failure:
    """The server answered with a non-2xx status."""

    status_code: int
    reason: str


@dataclass(frozen=True)
class NetworkError:
    """The request never got an HTTP answer (DNS, refused, timeout)."""

    message: str


UpstreamOutcome = Union[Success, Failure, NetworkError]


@dataclass(frozen=True)
class ToolResult:
    """The uniform response for every tool call.

    ``is_error`` is reserved for unexpected failures; an upstream refusal is
    reported as ordinary text.
    """

    text: str
    is_error: bool = False
