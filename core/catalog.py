# =============================================================================
# core/catalog.py  —  Tool Catalog (pure data)
# =============================================================================
#
# Every tool the server exposes, in the order they are listed to the caller.
# Descriptions are what the calling model reads to decide WHEN to use a tool,
# so they say what comes back, not how it is fetched.
#
# TOOL NAMING CONVENTIONS:
#   - get*     → Read-only retrieval
#   - search*  → Query with filters
#   - manage*  → Action-based mutation (the `action` enum picks the verb)
#   - monitor* → Single-shot snapshot (see monitorQueue below)
# =============================================================================

from typing import Optional

from core.models import ENUM, NUMBER, STRING, ParameterSpec, ToolDefinition


# Shared parameter shapes
def _streamer(description: str = "The name of the streamer") -> ParameterSpec:
    return ParameterSpec("streamerName", STRING, description, required=True)


_PERIODS = ("day", "week", "month", "all")


TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="getStreamerByName",
        description="Fetch detailed information about a specific streamer",
        parameters=(_streamer(),),
    ),
    ToolDefinition(
        name="getQueue",
        description="View current song queues with pagination support",
        parameters=(
            _streamer("The name of the streamer whose queue to fetch"),
            ParameterSpec("limit", NUMBER,
                          "Maximum number of songs to return (default: 50)", default=50),
            ParameterSpec("offset", NUMBER,
                          "Number of songs to skip for pagination (default: 0)", default=0),
        ),
    ),
    ToolDefinition(
        name="getQueueStats",
        description=(
            "Get comprehensive stats about song queues including total songs, "
            "duration, and popular tracks"
        ),
        parameters=(_streamer("The name of the streamer whose queue stats to fetch"),),
    ),
    ToolDefinition(
        name="manageSongRequest",
        description="Create, update, and delete song requests",
        parameters=(
            ParameterSpec("action", ENUM, "The action to perform on the song request",
                          required=True, values=("create", "update", "delete")),
            _streamer(),
            ParameterSpec("requestId", STRING,
                          "The ID of the request (required for update/delete)",
                          required_for=("update", "delete")),
            ParameterSpec("songTitle", STRING,
                          "The title of the song (required for create)",
                          required_for=("create",)),
            ParameterSpec("artist", STRING, "The artist name (optional for create/update)"),
            ParameterSpec("requesterName", STRING,
                          "The name of the person making the request (optional for create)"),
            ParameterSpec("message", STRING, "Optional message with the request"),
        ),
    ),
    # monitorQueue takes ONE snapshot of the queue and reports the monitoring
    # parameters back.  It does not keep a subscription open.
    ToolDefinition(
        name="monitorQueue",
        description=(
            "Monitor queue changes with configurable polling intervals "
            "(returns a single snapshot; no live subscription is kept)"
        ),
        parameters=(
            _streamer("The name of the streamer whose queue to monitor"),
            ParameterSpec("interval", NUMBER,
                          "Polling interval in seconds (default: 30)", default=30),
            ParameterSpec("duration", NUMBER,
                          "How long to monitor in seconds (default: 300)", default=300),
        ),
    ),
    ToolDefinition(
        name="getRequestHistory",
        description="View previously played song requests for a streamer",
        parameters=(
            _streamer("The name of the streamer whose history to fetch"),
            ParameterSpec("limit", NUMBER, "Maximum number of entries to return"),
            ParameterSpec("offset", NUMBER, "Number of entries to skip for pagination"),
            ParameterSpec("period", ENUM, "Restrict history to a time period",
                          values=_PERIODS),
        ),
    ),
    ToolDefinition(
        name="getOverlay",
        description="Fetch overlay data (e.g. the on-stream queue display) for a streamer",
        parameters=(
            _streamer(),
            ParameterSpec("overlayType", STRING,
                          "The overlay to fetch (e.g. queue, nowPlaying)", required=True),
        ),
    ),
    ToolDefinition(
        name="getStreamerStats",
        description="Get play and request statistics for a streamer",
        parameters=(
            _streamer("The name of the streamer whose stats to fetch"),
            ParameterSpec("period", ENUM, "Time period to aggregate over",
                          values=_PERIODS),
        ),
    ),
    ToolDefinition(
        name="searchSongs",
        description="Search the song library by title or artist",
        parameters=(
            ParameterSpec("query", STRING, "Text to search for", required=True),
            ParameterSpec("artist", STRING, "Only return songs by this artist"),
            ParameterSpec("limit", NUMBER,
                          "Maximum number of songs to return (default: 25)", default=25),
            ParameterSpec("offset", NUMBER,
                          "Number of songs to skip for pagination (default: 0)", default=0),
        ),
    ),
    ToolDefinition(
        name="getSong",
        description="Fetch detailed information about a single song",
        parameters=(ParameterSpec("songId", STRING, "The ID of the song", required=True),),
    ),
    ToolDefinition(
        name="manageSongAttributes",
        description="Get, add, and remove song attributes, or list every known attribute",
        parameters=(
            ParameterSpec("action", ENUM, "The action to perform on song attributes",
                          required=True, values=("get", "add", "remove", "list")),
            ParameterSpec("songId", STRING,
                          "The ID of the song (required for get/add/remove)",
                          required_for=("get", "add", "remove")),
            ParameterSpec("attributeName", STRING,
                          "The attribute name (required for add/remove)",
                          required_for=("add", "remove")),
            ParameterSpec("attributeValue", STRING, "Optional value for an added attribute"),
        ),
    ),
)

_BY_NAME = {tool.name: tool for tool in TOOLS}


def list_tools() -> tuple[ToolDefinition, ...]:
    """Return every tool definition in declared order."""
    return TOOLS


def get_tool(name: str) -> Optional[ToolDefinition]:
    """Look up a tool definition by name, or None if it is not declared."""
    return _BY_NAME.get(name)
