"""Directory-object exceptions for error handling."""
from typing import Optional



class GraphError(Exception):
    """Base exception for all directory API operations."""
    pass


class TransportError(GraphError):
    """No response was received (DNS, TLS, connection reset, timeout).
    
    Attributes:
        endpoint: URL that was being requested
    """
    
    def __init__(self, message: str, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f"{endpoint}: {message}")


class HttpError(GraphError):
    """Non-2xx response from the directory API.
    
    Attributes:
        status_code: HTTP status code
        body: Raw response body
        endpoint: API endpoint that failed
    """
    
    def __init__(self, status_code: int, body: str, endpoint: str):
        self.status_code = status_code
        self.body = body
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {body}")
    
    @property
    def status(self) -> int:
        return self.status_code


class ObjectNotPersistedError(GraphError):
    """Object has no id, so it has no remote resource to operate on."""
    pass


class InvalidResponseError(GraphError):
    """2xx response whose body is missing or is not valid JSON.
    
    Attributes:
        status_code: HTTP status code
        body: Raw response body
        endpoint: API endpoint that answered
    """
    
    def __init__(self, message: str, endpoint: str, status_code: Optional[int] = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {message}")
