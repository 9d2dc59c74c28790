"""Runtime configuration and logging setup."""

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

# --- Server defaults ---
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

# --- Request limits ---
MAX_DIMENSION = 100          # maze cells per axis
MAX_GRID_CELLS = 250_000     # search grid area

# --- Logging ---
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "time=%(asctime)s level=%(levelname)s logger=%(name)s msg=%(message)s"

ENV_PREFIX = "PATHFINDER_"


@dataclass
class ServerConfig:
    """Settings for the HTTP server and the service layer."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    dev: bool = False
    static_dir: Optional[str] = None
    max_dimension: int = MAX_DIMENSION
    max_grid_cells: int = MAX_GRID_CELLS
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def addr(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """Build a config from PATHFINDER_* environment variables."""
        env = os.environ if environ is None else environ
        config = cls()

        if f"{ENV_PREFIX}ADDR" in env:
            config.host, config.port = parse_addr(env[f"{ENV_PREFIX}ADDR"])
        if f"{ENV_PREFIX}DEV" in env:
            config.dev = env[f"{ENV_PREFIX}DEV"].strip().lower() in ("1", "true", "yes", "on")
        if env.get(f"{ENV_PREFIX}STATIC_DIR"):
            config.static_dir = env[f"{ENV_PREFIX}STATIC_DIR"]
        if f"{ENV_PREFIX}MAX_DIMENSION" in env:
            config.max_dimension = int(env[f"{ENV_PREFIX}MAX_DIMENSION"])
        if f"{ENV_PREFIX}MAX_GRID_CELLS" in env:
            config.max_grid_cells = int(env[f"{ENV_PREFIX}MAX_GRID_CELLS"])
        if f"{ENV_PREFIX}LOG_LEVEL" in env:
            config.log_level = env[f"{ENV_PREFIX}LOG_LEVEL"].upper()

        return config

    def to_flask(self) -> Dict[str, Any]:
        """Upper-cased keys for Flask's app.config."""
        return {f"PATHFINDER_{key.upper()}": value for key, value in asdict(self).items()}


def parse_addr(addr: str) -> Tuple[str, int]:
    """
    Parse a listen address of the form 'host:port' or ':port'.

    Raises:
        ValueError: If the port is missing or not a number
    """
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"Invalid listen address '{addr}', expected host:port")
    return host or DEFAULT_HOST, int(port)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging with the key=value format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
