# =============================================================================
# core/formatting.py  —  Response Formatter
# =============================================================================
#
# Turns an UpstreamOutcome into the ToolResult text the caller sees.
#
#   Success       → pretty-printed JSON (indent=2), or a curated summary for
#                   getQueueStats and searchSongs, or a "Successfully ..."
#                   line for the mutation actions
#   Failure       → "Error <verb phrase>: <status> <reason>"   (NOT flagged)
#   NetworkError  → "Error: <message>"                          (flagged)
#
# FALLBACK POLICY for the curated summaries:
#   A field that is missing OR falsy in the upstream payload renders as its
#   fallback: 0 for numbers, "N/A" for names/titles, "unknown" for the queue
#   status.  Callers and tests rely on these literals.
# =============================================================================

from datetime import datetime, timezone
import json
from typing import Any, Callable, Mapping, Optional

from core.models import Failure, NetworkError, Success, ToolResult, UpstreamOutcome


def to_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


# -----------------------------------------------------------------------------
# Failure wording
# -----------------------------------------------------------------------------
_FAILURE_PHRASES: dict[str, str] = {
    "getStreamerByName": "fetching streamer data",
    "getQueue": "fetching queue",
    "getQueueStats": "fetching queue stats",
    "getRequestHistory": "fetching request history",
    "getOverlay": "fetching overlay",
    "getStreamerStats": "fetching streamer stats",
    "searchSongs": "searching songs",
    "getSong": "fetching song",
}

_ACTION_FAILURE_PHRASES: dict[tuple[str, str], str] = {
    ("manageSongRequest", "create"): "creating request",
    ("manageSongRequest", "update"): "updating request",
    ("manageSongRequest", "delete"): "deleting request",
    ("manageSongAttributes", "get"): "getting song attributes",
    ("manageSongAttributes", "add"): "adding song attribute",
    ("manageSongAttributes", "remove"): "removing song attribute",
    ("manageSongAttributes", "list"): "listing attributes",
}


def failure_phrase(tool_name: str, arguments: Mapping[str, Any]) -> str:
    phrase = _ACTION_FAILURE_PHRASES.get((tool_name, arguments.get("action")))
    return phrase or _FAILURE_PHRASES.get(tool_name, f"calling {tool_name}")


# -----------------------------------------------------------------------------
# Curated summaries
# -----------------------------------------------------------------------------
def summarize_queue_stats(stats: Any) -> dict:
    """Curated subset of the queue stats payload with fixed fallbacks."""
    stats = stats if isinstance(stats, dict) else {}
    return {
        "totalSongs": stats.get("totalSongs") or 0,
        "totalDuration": stats.get("totalDuration") or 0,
        "averageWaitTime": stats.get("averageWaitTime") or 0,
        "mostRequestedArtist": stats.get("mostRequestedArtist") or "N/A",
        "mostRequestedSong": stats.get("mostRequestedSong") or "N/A",
        "queueStatus": stats.get("queueStatus") or "unknown",
    }


def summarize_search_results(payload: Any) -> tuple[int, list[dict]]:
    """Return (total, songs) for a song search payload.

    The payload may be a bare list or an object holding ``items`` (or
    ``songs``) plus an optional ``total``.
    """
    if isinstance(payload, list):
        items, total = payload, None
    elif isinstance(payload, dict):
        items = payload.get("items") or payload.get("songs") or []
        total = payload.get("total")
    else:
        items, total = [], None

    songs = []
    for item in items:
        item = item if isinstance(item, dict) else {}
        songs.append({
            "id": item.get("id") or "N/A",
            "title": item.get("title") or "N/A",
            "artist": item.get("artist") or "N/A",
            "timesPlayed": item.get("timesPlayed") or 0,
        })
    return (total or len(songs)), songs


def _queue_stats(args: Mapping[str, Any], body: Any, now: datetime) -> str:
    return f"Queue Statistics for {args['streamerName']}:\n{to_json(summarize_queue_stats(body))}"


def _search_songs(args: Mapping[str, Any], body: Any, now: datetime) -> str:
    total, songs = summarize_search_results(body)
    return f'Found {total} songs matching "{args["query"]}":\n{to_json(songs)}'


def _song_request(args: Mapping[str, Any], body: Any, now: datetime) -> str:
    action = args["action"]
    result = {"success": True} if action == "delete" else body
    return f"Successfully {action}d request:\n{to_json(result)}"


def _song_attributes(args: Mapping[str, Any], body: Any, now: datetime) -> str:
    action = args["action"]
    if action == "add":
        return f"Successfully added attribute:\n{to_json(body)}"
    if action == "remove":
        return f"Successfully removed attribute:\n{to_json({'success': True})}"
    return to_json(body)


def monitoring_report(args: Mapping[str, Any], queue: Any, now: datetime) -> str:
    """Text for the single-shot monitorQueue snapshot.

    ``queue`` is None when the snapshot fetch was declined upstream; the
    report is still produced, with an empty update list.
    """
    name = args["streamerName"]
    updates = []
    if queue is not None:
        updates.append({
            "timestamp": now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "type": "initial",
            "data": queue,
        })
    monitoring_id = f"monitor_{name}_{int(now.timestamp() * 1000)}"
    return (
        f"Started monitoring queue for {name}\n"
        f"Monitoring ID: {monitoring_id}\n"
        f"Interval: {args['interval']} seconds\n"
        f"Duration: {args['duration']} seconds\n"
        f"\nNote: This is a simulation. In a real implementation, this would:\n"
        f"- Establish WebSocket or SSE connection\n"
        f"- Subscribe to queue updates for the streamer\n"
        f"- Send real-time notifications of queue changes\n"
        f"\nInitial queue data:\n{to_json(updates)}"
    )


_SUCCESS_FORMATTERS: dict[str, Callable[[Mapping[str, Any], Any, datetime], str]] = {
    "getQueueStats": _queue_stats,
    "searchSongs": _search_songs,
    "manageSongRequest": _song_request,
    "manageSongAttributes": _song_attributes,
    "monitorQueue": monitoring_report,
}


def format_outcome(
    tool_name: str,
    arguments: Mapping[str, Any],
    outcome: UpstreamOutcome,
    now: Optional[datetime] = None,
) -> ToolResult:
    """Convert an upstream outcome into the tool's text result."""
    now = now or datetime.now(timezone.utc)

    if isinstance(outcome, NetworkError):
        return ToolResult(f"Error: {outcome.message}", is_error=True)

    if isinstance(outcome, Failure):
        # A declined snapshot still produces the monitoring report.
        if tool_name == "monitorQueue":
            return ToolResult(monitoring_report(arguments, None, now))
        phrase = failure_phrase(tool_name, arguments)
        return ToolResult(f"Error {phrase}: {outcome.status_code} {outcome.reason}".rstrip())

    if isinstance(outcome, Success):
        formatter = _SUCCESS_FORMATTERS.get(tool_name)
        if formatter is None:
            return ToolResult(to_json(outcome.body))
        return ToolResult(formatter(arguments, outcome.body, now))

    raise TypeError(f"Unsupported upstream outcome: {outcome!r}")
