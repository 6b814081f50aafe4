"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_GRAPH_HOST = "https://graph.microsoft.com/v1.0"
DEFAULT_REQUEST_TIMEOUT = 30.0


def _read_secret(secret_name: str, env_var: str) -> str:
    """Return a mounted Docker secret, else the environment variable, else an empty string."""
    secret_file = Path("/run/secrets") / secret_name
    if secret_file.is_file():
        try:
            value = secret_file.read_text().strip()
        except OSError as e:
            logger.warning(f"Cannot read {secret_file}: {e}")
        else:
            if value:
                return value
    return os.environ.get(env_var, "").strip()


@dataclass
class GraphConfig:
    """Client configuration container."""
    graph_host: str = DEFAULT_GRAPH_HOST
    tenant: str = ""
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: str = "INFO"
    
    # Pre-issued bearer token; acquiring one is the session's job
    access_token: str = ""


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"GRAPH_REQUEST_TIMEOUT must be a number, got '{raw}'")
    if timeout <= 0:
        raise ValueError(f"GRAPH_REQUEST_TIMEOUT must be positive, got {timeout}")
    return timeout


def load_settings() -> GraphConfig:
    """Load client settings from environment and /run/secrets."""
    graph_host = os.environ.get("GRAPH_HOST", DEFAULT_GRAPH_HOST).strip().rstrip("/")
    tenant = os.environ.get("GRAPH_TENANT", "").strip()
    request_timeout = _parse_timeout(os.environ.get("GRAPH_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT)))
    log_level = os.environ.get("GRAPH_LOG_LEVEL", "INFO").strip().upper()
    access_token = _read_secret("graph_access_token", "GRAPH_ACCESS_TOKEN")
    
    return GraphConfig(
        graph_host=graph_host or DEFAULT_GRAPH_HOST,
        tenant=tenant,
        request_timeout=request_timeout,
        log_level=log_level,
        access_token=access_token,
    )
