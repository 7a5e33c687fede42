"""
Custom exceptions for relayview.
"""

from typing import Any, Dict, Optional


class RelayViewError(Exception):
    """Base exception for all relayview errors."""
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(RelayViewError):
    """Invalid settings in the environment."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code="CONFIG_ERROR", details=details)


class TerminalError(RelayViewError):
    """The terminal cannot host the interactive UI."""
    
    def __init__(self, reason: str):
        super().__init__(
            f"Cannot start the terminal interface: {reason}",
            error_code="TERMINAL_ERROR",
            details={"reason": reason},
        )


class FetchError(RelayViewError):
    """Fetching the relay list failed."""
    pass


class NetworkError(FetchError):
    """Connection, DNS, TLS, timeout or HTTP status failure."""
    
    def __init__(self, url: str, reason: str):
        super().__init__(
            f"Could not fetch {url}: {reason}",
            error_code="NETWORK_ERROR",
            details={"url": url, "reason": reason},
        )


class DecodeError(FetchError):
    """Response body is not valid JSON."""
    
    def __init__(self, reason: str):
        super().__init__(
            f"Malformed JSON in response: {reason}",
            error_code="DECODE_ERROR",
            details={"reason": reason},
        )


class SchemaError(FetchError):
    """Response JSON does not match the relay list layout."""
    
    def __init__(self, fields: list[str]):
        super().__init__(
            f"Unexpected relay list format: {', '.join(fields)}",
            error_code="SCHEMA_ERROR",
            details={"fields": fields},
        )
