"""
Exception classes for the StreamerSongList tool server.

Expected failures (bad input, unknown tool or action) are reported back as
ordinary tool content.  ``UpstreamResponseError`` is not: a 2xx answer the
client cannot decode is unexpected, and the dispatcher flags it as an error.
Upstream non-2xx answers are not exceptions at all; see ``core.models.Failure``.
"""


class SongListError(Exception):
    """Base exception for all errors raised by this package."""

    pass


class ValidationError(SongListError):
    """Raised when tool arguments are missing or ill-typed."""

    pass


class UnknownToolError(SongListError):
    """Raised when a tool name is not in the catalog."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class UnknownActionError(SongListError):
    """Raised when an action value has no entry in a tool's action table."""

    def __init__(self, action: object):
        super().__init__(f"Unknown action: {action}")
        self.action = action


class UpstreamResponseError(SongListError):
    """Raised when a successful upstream response cannot be decoded."""

    pass


class ConfigError(SongListError):
    """Raised when the environment holds an invalid configuration value."""

    pass
