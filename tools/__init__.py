# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the translation layer between MCP and core/.
#
#   dispatcher.py  → routes one tool call through core/ and never raises
#   mcp_server.py  → publishes the catalog on FastMCP, adapts the results
#   log.py         → stderr logging (stdout belongs to the MCP transport)
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build URLs or parse payloads (that's in core/)
#   - They do NOT hold state between calls
# =============================================================================
