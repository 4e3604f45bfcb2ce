"""pbi-refresh custom exceptions.

Exception Design Principles:
1. Every failure the workflow can hit maps to exactly one class below
2. Upstream detail (status code, response body) is carried verbatim, never paraphrased
3. Split on domain of actionable information:
   - Recoverable by fixing local files or settings (ConfigError)
   - Transient or environmental, recoverable by rerunning later (NetworkError)
   - Rejected by the identity provider (AuthenticationError)
   - Rejected by the reporting API (RefreshError)
"""


class PbiRefreshError(Exception):
    """Base exception for all pbi-refresh errors.

    Provides rich context and actionable suggestions beyond standard exceptions.
    """

    def __init__(
        self,
        message: str,  # the error message
        *,
        errors: list[str] = None,  # detailed list of errors (if available)
        suggestions: list[str] = None,  # remedial actions
        context: dict = None,  # additional detailed context
    ):
        """Initialize PbiRefreshError.

        Args:
            message: Primary error message for users
            errors: List of specific error details
            suggestions: List of actionable suggestions for resolution
            context: Additional context information as key-value pairs
        """
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        self.context = context or {}


class ConfigError(PbiRefreshError):
    """Local configuration errors - recoverable by user reconfiguration.

    Raised before any network call is attempted:
    - Missing or unreadable secrets / dataset files
    - Malformed TOML or JSON
    - Empty or invalid field values (e.g. an empty password)
    - Invalid settings from PBIREFRESH_* environment variables
    """

    pass


class NetworkError(PbiRefreshError):
    """Transport failure on either HTTP call (connection refused, DNS, timeout).

    Wraps httpx.RequestError. No retry is attempted.
    """

    pass


class UpstreamError(PbiRefreshError):
    """A remote endpoint answered, but not with what we needed.

    Carries the HTTP status code and the response body exactly as received.
    """

    def __init__(self, message: str, *, status_code: int, body: str, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.body = body


class AuthenticationError(UpstreamError):
    """The identity provider rejected the credentials or returned an unexpected shape."""

    pass


class RefreshError(UpstreamError):
    """The reporting API rejected the refresh request (any non-2xx, including 429)."""

    pass
