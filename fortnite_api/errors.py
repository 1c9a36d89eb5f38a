"""Custom error classes for the Fortnite-API client."""

from typing import Optional, Dict, Any


class FortniteAPIError(Exception):
    """Raised when Fortnite-API responds with a non-200 envelope."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        route: str = "",
        response_data: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize FortniteAPIError.

        Args:
            message: Error message from the envelope's ``error`` field
            status_code: Status embedded in the envelope (400, 403, 404)
            route: Exact URL that produced the error
            response_data: Raw envelope returned by the API
        """
        super().__init__(message)
        self.message: str = message
        self.status_code: Optional[int] = status_code
        self.route: str = route
        self.response_data: Dict[str, Any] = response_data or {}

    @property
    def request_url(self) -> str:
        """The URL that produced the error."""
        return self.route

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code:
            return f"Fortnite-API Error {self.status_code}: {self.message}"
        return f"Fortnite-API Error: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        return {
            "error": "FortniteAPIError",
            "message": self.message,
            "status_code": self.status_code,
            "route": self.route,
            "response_data": self.response_data,
        }

    def is_bad_request(self) -> bool:
        """Check if this is a bad request error (400)."""
        return self.status_code == 400

    def is_forbidden(self) -> bool:
        """Check if this is a forbidden error (403), usually an invalid key."""
        return self.status_code == 403

    def is_not_found(self) -> bool:
        """Check if this is a not found error (404)."""
        return self.status_code == 404


class ConfigurationError(Exception):
    """Raised for invalid client configuration or options, before any request is made."""
