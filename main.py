# =============================================================================
# main.py  —  Entry Point for the StreamerSongList MCP Server
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#   (installed: streamersonglist-mcp)
#
# WHAT HAPPENS:
#   1. Loads an optional .env file (STREAMERSONGLIST_* variables)
#   2. Builds the immutable ServerConfig from the environment
#   3. Configures stderr logging
#   4. Builds the FastMCP server with every catalog tool (tools/mcp_server.py)
#   5. Serves MCP over stdio until the client disconnects
#
#   Any failure before or while establishing the transport is logged to
#   stderr and the process exits with status 1.
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

from core.config import ServerConfig
from tools.log import configure_logging
from tools.mcp_server import create_server

logger = logging.getLogger("streamersonglist")


def main() -> int:
    """Start the stdio MCP server.  Returns the process exit status."""
    load_dotenv()
    try:
        config = ServerConfig.from_env()
        configure_logging(config.log_level, config.log_color)
        server = create_server(config)
        logger.info("StreamerSongList MCP Server running on stdio (%s)", config.api_base_url)
        server.run()
    except KeyboardInterrupt:
        return 0
    except Exception:
        # Config errors land here before configure_logging ran.
        configure_logging()
        logger.exception("Server error")
        return 1
    return 0


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    sys.exit(main())
