"""repofolio exception classes."""


class RepofolioError(Exception):
    """Base exception for all repofolio errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(RepofolioError):
    """Raised when portfolio configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class ViewLifecycleError(RepofolioError):
    """Raised when a projects view is used outside its lifecycle."""

    def __init__(self, message: str) -> None:
        super().__init__("VIEW_LIFECYCLE_ERROR", message)


class FetchError(RepofolioError):
    """Base class for failures while fetching repositories."""

    pass


class NetworkError(FetchError):
    """Raised when no response was obtained from the API."""

    def __init__(self, message: str) -> None:
        super().__init__("NETWORK_ERROR", message)


class HttpStatusError(FetchError):
    """Raised when the API answers with a non-success status."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.status_code = status_code


class NotFoundError(HttpStatusError):
    """Raised when the user does not exist."""

    pass


class RateLimitedError(HttpStatusError):
    """Raised when the unauthenticated rate limit is exhausted."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int,
        reset_at: int | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, status_code, request_id)
        self.reset_at = reset_at


class MalformedResponseError(FetchError):
    """Raised when the response body is not a list of repository records."""

    def __init__(self, message: str, request_id: str | None = None) -> None:
        super().__init__("MALFORMED_RESPONSE", message, request_id)
