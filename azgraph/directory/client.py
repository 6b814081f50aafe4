"""Low-level HTTP client for the directory REST API.

Handles URL building, bearer authentication, JSON encoding and status checks.
Tokens are not owned here: every call receives the token of the object making it.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional

import requests

from .exceptions import HttpError, InvalidResponseError, TransportError
from .prompt import ask_confirmation

logger = logging.getLogger(__name__)


def bearer_token(token: Any) -> str:
    """Return the raw bearer string for a token handle.
    
    Accepts either the access token itself or an object carrying it in an
    ``access_token`` attribute (the shape most credential helpers expose).
    """
    if isinstance(token, str):
        return token
    access_token = getattr(token, "access_token", None)
    if not access_token:
        raise TypeError(f"Unsupported token handle: {type(token).__name__}")
    return access_token


class GraphClient:
    """HTTP client for the directory REST API.
    
    Features:
    - Resource URL convention ``{base}/{tenant}/{segment}/...``
    - Centralized error handling (``HttpError`` / ``TransportError``)
    - Pluggable confirmation prompt for destructive calls
    
    Usage:
        client = GraphClient("https://graph.microsoft.com/v1.0")
        url = client.resource_url("contoso.onmicrosoft.com", "users", user_id)
        user = client.call("GET", url, token)
    """
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        confirm: Optional[Callable[[str], bool]] = None,
    ):
        """Initialize the client.
        
        Args:
            base_url: API base URL (defaults to the GRAPH_HOST setting)
            timeout: Per-request timeout in seconds (defaults to GRAPH_REQUEST_TIMEOUT)
            confirm: Yes/no prompt used before deletions (defaults to a terminal prompt)
        """
        if base_url is None or timeout is None:
            from azgraph.config.settings import load_settings
            settings = load_settings()
            base_url = base_url or settings.graph_host
            timeout = timeout if timeout is not None else settings.request_timeout
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.confirm = confirm or ask_confirmation
    
    def resource_url(self, tenant: str, *segments: str) -> str:
        """Build an absolute URL below the tenant root.
        
        Empty segments are skipped, so an empty operation path maps to the
        object's own resource.
        """
        parts = [self.base_url, tenant.strip("/")]
        parts.extend(str(seg).strip("/") for seg in segments if seg)
        return "/".join(parts)
    
    def absolute_url(self, tenant: str, link: str) -> str:
        """Resolve a continuation link, which may be relative to the tenant root."""
        if link.startswith(("http://", "https://")):
            return link
        return self.resource_url(tenant, link)
    
    def call(
        self,
        http_verb: str,
        url: str,
        token: Any,
        body: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Optional[Any]:
        """Execute a request and return the parsed JSON body.
        
        Args:
            http_verb: GET, POST, PATCH, PUT or DELETE
            url: Absolute URL
            token: Bearer token handle
            body: JSON-serializable request body, sent only when not None
            params: Query parameters
            headers: Extra headers (Authorization is always overwritten)
            
        Returns:
            Parsed JSON, or None for 204 and empty responses
            
        Raises:
            HttpError: On any non-2xx status
            TransportError: When no response was received
            InvalidResponseError: When a 2xx body is not JSON
        """
        headers = dict(headers or {})
        headers["Authorization"] = f"Bearer {bearer_token(token)}"
        kwargs: Dict[str, Any] = {"params": params, "headers": headers, "timeout": self.timeout}
        if body is not None:
            kwargs["json"] = body
        
        logger.debug(f"{http_verb} {url}")
        try:
            resp = requests.request(http_verb, url, **kwargs)
        except requests.RequestException as exc:
            raise TransportError(str(exc), url) from exc
        
        self._handle_error(resp, url)
        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise InvalidResponseError(f"response is not JSON ({exc})", url, resp.status_code, resp.text) from exc
    
    def _handle_error(self, resp: requests.Response, url: str) -> None:
        """Raise HttpError unless the response status is 2xx."""
        if not 200 <= resp.status_code < 300:
            raise HttpError(resp.status_code, resp.text, url)
