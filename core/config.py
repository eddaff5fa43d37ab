# =============================================================================
# core/config.py  —  Server configuration
# =============================================================================
#
# One immutable ServerConfig is built at process start (after main.py has
# loaded any .env file) and passed explicitly to the server and dispatcher.
#
#   STREAMERSONGLIST_API_BASE     upstream base URL
#   STREAMERSONGLIST_TIMEOUT      request timeout in seconds (unset = none)
#   STREAMERSONGLIST_SERVER_NAME  identity announced over MCP
#   STREAMERSONGLIST_LOG_LEVEL    DEBUG / INFO / WARNING / ERROR
#   STREAMERSONGLIST_LOG_COLOR    ANSI colours in the stderr log
# =============================================================================

from dataclasses import dataclass
import logging
import os
from typing import Mapping, Optional

from core.errors import ConfigError

DEFAULT_API_BASE = "https://api.streamersonglist.com/v1"
DEFAULT_SERVER_NAME = "streamersonglist-mcp"


def _env_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _env_timeout(env: Mapping[str, str], name: str) -> Optional[float]:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return timeout


def _env_log_level(env: Mapping[str, str], name: str) -> int:
    raw = env.get(name, "INFO").strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ConfigError(f"{name} must be a logging level name, got {raw!r}")
    return level


@dataclass(frozen=True)
class ServerConfig:
    api_base_url: str = DEFAULT_API_BASE
    timeout: Optional[float] = None
    server_name: str = DEFAULT_SERVER_NAME
    log_level: int = logging.INFO
    log_color: bool = True

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """Build the configuration from environment variables.

        Raises:
            ConfigError: if a variable holds a value that cannot be used.
        """
        env = os.environ if env is None else env
        base = env.get("STREAMERSONGLIST_API_BASE", DEFAULT_API_BASE).strip()
        if not base.startswith(("http://", "https://")):
            raise ConfigError(f"STREAMERSONGLIST_API_BASE must be an http(s) URL, got {base!r}")
        return ServerConfig(
            api_base_url=base.rstrip("/"),
            timeout=_env_timeout(env, "STREAMERSONGLIST_TIMEOUT"),
            server_name=env.get("STREAMERSONGLIST_SERVER_NAME", DEFAULT_SERVER_NAME),
            log_level=_env_log_level(env, "STREAMERSONGLIST_LOG_LEVEL"),
            log_color=_env_flag(env, "STREAMERSONGLIST_LOG_COLOR", True),
        )
