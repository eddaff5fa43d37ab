# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL request logic for the StreamerSongList tool server:
# the tool catalog, argument validation, request building, the upstream REST
# client and response formatting.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any MCP type.  Every module
#   here is plain Python plus `requests` (core/upstream.py only), so the
#   whole pipeline can be exercised without a protocol stack.
# =============================================================================
