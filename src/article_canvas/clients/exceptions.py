"""Exceptions raised by the backend clients.

Every error carries the ``resource`` it concerns when the client knows it:
the request path for transport and status errors, or the record (for
example ``Template 42``) for responses that fail validation.
"""


class ClientError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, resource: str | None = None):
        self.message = message
        self.resource = resource
        super().__init__(message)


class ConnectionError(ClientError):
    """Raised when the backend cannot be reached."""

    pass


class APIError(ClientError):
    """Raised when the backend answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int, resource: str | None = None):
        self.status_code = status_code
        super().__init__(message, resource=resource)


class AuthenticationError(APIError):
    """Raised when the backend refuses the credentials (401 or 403)."""

    def __init__(
        self,
        message: str = "Not authorized",
        status_code: int = 401,
        resource: str | None = None,
    ):
        super().__init__(message, status_code=status_code, resource=resource)


class NotFoundError(APIError):
    """Raised for a 404: the template, article or media file does not exist."""

    def __init__(self, message: str = "Resource not found", resource: str | None = None):
        super().__init__(message, status_code=404, resource=resource)


class ConflictError(APIError):
    """Raised when the backend rejects a write against a stale version (409)."""

    def __init__(
        self,
        message: str = "Resource was modified concurrently",
        resource: str | None = None,
    ):
        super().__init__(message, status_code=409, resource=resource)


class RateLimitError(APIError):
    """Raised when the backend throttles requests (429)."""

    def __init__(self, message: str = "Rate limit exceeded", resource: str | None = None):
        super().__init__(message, status_code=429, resource=resource)


class ValidationError(ClientError):
    """Raised when a backend response does not have the expected shape.

    ``errors`` lists the individual schema errors, one string each.
    """

    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
        resource: str | None = None,
    ):
        self.errors = errors or []
        super().__init__(message, resource=resource)
