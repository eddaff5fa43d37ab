# =============================================================================
# core/request_builder.py  —  Tool call → UpstreamRequest
# =============================================================================
#
# Deterministic mapping from (tool name, normalized arguments) to exactly one
# REST call.  Nothing here performs I/O.
#
# PATH ENCODING:
#   Every user-supplied identifier goes through _seg(), which quotes it as a
#   single path segment: a streamer called "a/b" becomes "streamers/a%2Fb".
#
# QUERY AND BODY:
#   A query parameter or body field only appears when the argument is present
#   in the normalized mapping.  Absent optional fields are omitted, not sent as
#   null.  GET and DELETE never carry a body.
#
# ACTION TOOLS:
#   manageSongRequest and manageSongAttributes pick method and path shape from
#   an explicit action table; an action with no entry raises UnknownActionError.
# =============================================================================

from typing import Any, Callable, Mapping
from urllib.parse import quote

from core.errors import UnknownActionError, UnknownToolError
from core.models import UpstreamRequest

GET = "GET"
POST = "POST"
PUT = "PUT"
DELETE = "DELETE"

Builder = Callable[[Mapping[str, Any]], UpstreamRequest]

_REQUEST_FIELDS = ("songTitle", "artist", "requesterName", "message")


def _seg(value: Any) -> str:
    """Percent-encode one path segment, '/' included."""
    return quote(str(value), safe="")


def _pick(arguments: Mapping[str, Any], names: tuple[str, ...]) -> dict:
    return {name: arguments[name] for name in names if name in arguments}


def _streamer(args: Mapping[str, Any]) -> str:
    return f"streamers/{_seg(args['streamerName'])}"


# -----------------------------------------------------------------------------
# Read-only tools
# -----------------------------------------------------------------------------
def _get_streamer(args: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(GET, _streamer(args))


def _get_queue(args: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(GET, f"{_streamer(args)}/queue", query=_pick(args, ("limit", "offset")))


def _get_queue_stats(args: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(GET, f"{_streamer(args)}/queue/stats")


def _monitor_queue(args: Mapping[str, Any]) -> UpstreamRequest:
    # interval/duration only describe the simulated monitoring; the snapshot
    # is a plain, unpaginated queue fetch.
    return UpstreamRequest(GET, f"{_streamer(args)}/queue")


def _get_history(args: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(GET, f"{_streamer(args)}/history",
                           query=_pick(args, ("limit", "offset", "period")))


def _get_overlay(args: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(GET, f"{_streamer(args)}/overlay/{_seg(args['overlayType'])}")


def _get_streamer_stats(args: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(GET, f"{_streamer(args)}/stats", query=_pick(args, ("period",)))


def _search_songs(args: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(GET, "songs", query=_pick(args, ("query", "artist", "limit", "offset")))


def _get_song(args: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(GET, f"songs/{_seg(args['songId'])}")


# -----------------------------------------------------------------------------
# manageSongRequest
# -----------------------------------------------------------------------------
def _request_create(args: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(POST, f"{_streamer(args)}/requests", body=_pick(args, _REQUEST_FIELDS))


def _request_update(args: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(PUT, f"{_streamer(args)}/requests/{_seg(args['requestId'])}",
                           body=_pick(args, _REQUEST_FIELDS))


def _request_delete(args: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(DELETE, f"{_streamer(args)}/requests/{_seg(args['requestId'])}")


SONG_REQUEST_ACTIONS: dict[str, Builder] = {
    "create": _request_create,
    "update": _request_update,
    "delete": _request_delete,
}


# -----------------------------------------------------------------------------
# manageSongAttributes
# -----------------------------------------------------------------------------
def _song_attributes(args: Mapping[str, Any]) -> str:
    return f"songs/{_seg(args['songId'])}/attributes"


def _attributes_get(args: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(GET, _song_attributes(args))


def _attributes_add(args: Mapping[str, Any]) -> UpstreamRequest:
    body = {"name": args["attributeName"]}
    if "attributeValue" in args:
        body["value"] = args["attributeValue"]
    return UpstreamRequest(POST, _song_attributes(args), body=body)


def _attributes_remove(args: Mapping[str, Any]) -> UpstreamRequest:
    return UpstreamRequest(DELETE, f"{_song_attributes(args)}/{_seg(args['attributeName'])}")


def _attributes_list(args: Mapping[str, Any]) -> UpstreamRequest:
    # songId / attributeName are ignored: this lists every known attribute.
    return UpstreamRequest(GET, "attributes")


SONG_ATTRIBUTE_ACTIONS: dict[str, Builder] = {
    "get": _attributes_get,
    "add": _attributes_add,
    "remove": _attributes_remove,
    "list": _attributes_list,
}


def _by_action(table: Mapping[str, Builder]) -> Builder:
    def build(args: Mapping[str, Any]) -> UpstreamRequest:
        action = args.get("action")
        if not isinstance(action, str) or action not in table:
            raise UnknownActionError(action)
        return table[action](args)
    return build


BUILDERS: dict[str, Builder] = {
    "getStreamerByName": _get_streamer,
    "getQueue": _get_queue,
    "getQueueStats": _get_queue_stats,
    "manageSongRequest": _by_action(SONG_REQUEST_ACTIONS),
    "monitorQueue": _monitor_queue,
    "getRequestHistory": _get_history,
    "getOverlay": _get_overlay,
    "getStreamerStats": _get_streamer_stats,
    "searchSongs": _search_songs,
    "getSong": _get_song,
    "manageSongAttributes": _by_action(SONG_ATTRIBUTE_ACTIONS),
}


def build_request(tool_name: str, arguments: Mapping[str, Any]) -> UpstreamRequest:
    """Map a validated tool call to its single upstream request.

    Raises:
        UnknownToolError: if ``tool_name`` has no builder.
        UnknownActionError: if an action tool gets an action outside its table.
    """
    builder = BUILDERS.get(tool_name)
    if builder is None:
        raise UnknownToolError(tool_name)
    return builder(arguments)
