"""Base client for the article backend."""

import logging
from abc import ABC, abstractmethod
from time import sleep
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import (
    APIError,
    AuthenticationError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

TRANSIENT_ERRORS = (httpx.ConnectError, httpx.TimeoutException)

STATUS_ERRORS: dict[int, tuple[type[APIError], str]] = {
    404: (NotFoundError, "Resource not found"),
    409: (ConflictError, "Conflicting update"),
    429: (RateLimitError, "Rate limit exceeded"),
}


class Client(ABC):
    """Base class for backend clients.

    Holds one lazily created httpx.Client per instance and releases it on
    close() or when used as a context manager. Requests that fail to
    connect or time out are retried; HTTP error statuses are not.

    Config keys:
        base_url (required): Base URL of the backend
        token: Bearer token sent as the Authorization header
        timeout: Request timeout in seconds (default: 30)
        retry_attempts: Number of attempts for transient failures (default: 3)
        retry_delay: Delay between retries in seconds (default: 1)
        headers: Additional headers to include in requests
    """

    def __init__(self, config: dict):
        if "base_url" not in config:
            raise ValueError("config must include 'base_url'")

        self._config = config
        self._client: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return str(self._config["base_url"])

    @property
    def timeout(self) -> float:
        return float(self._config.get("timeout", 30))

    @property
    def retry_attempts(self) -> int:
        return max(1, int(self._config.get("retry_attempts", 3)))

    @property
    def retry_delay(self) -> float:
        return float(self._config.get("retry_delay", 1))

    @property
    def headers(self) -> dict[str, str]:
        headers = dict(self._config.get("headers", {}))
        token = self._config.get("token")
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized httpx client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
            )
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def _handle_response(
        self, response: httpx.Response, path: str | None = None
    ) -> httpx.Response:
        """Map HTTP error statuses to exceptions carrying the request path.

        Raises:
            AuthenticationError: For 401 and 403 responses
            NotFoundError: For 404 responses
            ConflictError: For 409 responses
            RateLimitError: For 429 responses
            APIError: For other non-2xx responses
        """
        if response.is_success:
            return response

        status_code = response.status_code

        if status_code in (401, 403):
            raise AuthenticationError(
                f"Not authorized ({status_code}): {response.url}",
                status_code=status_code,
                resource=path,
            )

        if status_code in STATUS_ERRORS:
            error_class, reason = STATUS_ERRORS[status_code]
            raise error_class(f"{reason}: {response.url}", resource=path)

        raise APIError(
            f"API error {status_code}: {response.url}",
            status_code=status_code,
            resource=path,
        )

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Send a request, retrying connection failures and timeouts.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: URL path (appended to base_url)
            **kwargs: Additional arguments passed to httpx.Client.request

        Returns:
            The successful HTTP response

        Raises:
            ConnectionError: If every attempt failed to reach the backend
            APIError: If the backend answered with a non-2xx status
        """
        last_exception: Exception | None = None

        for attempt in range(1, self.retry_attempts + 1):
            try:
                response = self.client.request(method, path, **kwargs)
            except TRANSIENT_ERRORS as e:
                last_exception = e
                logger.warning(
                    f"{method} {path} failed (attempt {attempt}/{self.retry_attempts}): {e}"
                )
                if attempt < self.retry_attempts:
                    sleep(self.retry_delay)
                continue

            return self._handle_response(response, path)

        msg = f"Connection failed after {self.retry_attempts} attempts"
        raise ConnectionError(msg, resource=path) from last_exception

    def get(self, path: str, **kwargs) -> httpx.Response:
        return self._request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> httpx.Response:
        return self._request("POST", path, **kwargs)

    def put(self, path: str, **kwargs) -> httpx.Response:
        return self._request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs) -> httpx.Response:
        return self._request("DELETE", path, **kwargs)

    def _json(self, response: httpx.Response) -> Any:
        """Decode a JSON response body.

        Raises:
            ValidationError: If the body is not JSON
        """
        try:
            return response.json()
        except ValueError as e:
            raise ValidationError(
                f"Response from {response.url} is not JSON",
                resource=str(response.url),
            ) from e

    def _validate(self, model: type[ModelT], data: Any) -> ModelT:
        """Validate response data against a schema.

        Raises:
            ValidationError: If the data does not match the schema
        """
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            item_id = data.get("id", "unknown") if isinstance(data, dict) else "unknown"
            raise ValidationError(
                f"{model.__name__} {item_id} failed validation",
                errors=[str(err) for err in e.errors()],
                resource=f"{model.__name__} {item_id}",
            ) from e

    @abstractmethod
    def fetch(self, *args, **kwargs) -> Any:
        """Fetch one resource from the backend."""
        pass
