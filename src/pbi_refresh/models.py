from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    StringConstraints,
    field_validator,
)

from .consts import (
    BEARER_SCHEME,
    DEFAULT_TOKEN_EXPIRY_SECONDS,
    PASSWORD_GRANT,
    POWERBI_RESOURCE,
)
from .exceptions import PbiRefreshError, UpstreamError

# =============================================================================
# CONFIGURATION RECORDS
# =============================================================================
# Populated once at startup from the secrets and dataset files, then handed to
# the workflow. Both are frozen: nothing mutates them after loading.

# Identifiers are stripped before the emptiness check; secrets never are
Identifier = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class Credentials(BaseModel):
    """Resource-owner-password credentials for the identity provider."""

    model_config = ConfigDict(frozen=True)

    client_id: Identifier = Field(..., description="Azure AD application id")
    grant_type: Literal["password"] = Field(
        PASSWORD_GRANT, description="OAuth2 grant, always 'password'"
    )
    resource: Identifier = Field(
        POWERBI_RESOURCE, description="Audience URI of the target API"
    )
    username: Identifier = Field(..., description="Account user principal name")
    password: SecretStr = Field(..., description="Account password")

    @field_validator("password")
    @classmethod
    def _password_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("password must not be empty")
        return value

    def form_data(self) -> dict[str, str]:
        """Form-encoded body for the token request."""
        return {
            "grant_type": self.grant_type,
            "client_id": self.client_id,
            "resource": self.resource,
            "username": self.username,
            "password": self.password.get_secret_value(),
        }


class DatasetTarget(BaseModel):
    """Identifies the dataset to refresh, optionally inside a workspace (group)."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    dataset_id: Identifier = Field(..., description="Dataset id")
    group_id: str | None = Field(
        None, description="Workspace id; None addresses 'My workspace'"
    )

    @field_validator("group_id")
    @classmethod
    def _blank_group_is_none(cls, value: str | None) -> str | None:
        return value or None


# =============================================================================
# TOKEN
# =============================================================================


class AccessToken(BaseModel):
    """Bearer token issued by the identity provider, used once and discarded."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    value: str = Field(..., alias="access_token", min_length=1, repr=False)
    token_type: str = Field(BEARER_SCHEME, description="Token type echoed by provider")
    # Azure AD v1 sends expires_in as a numeric string
    expires_in: int = Field(
        DEFAULT_TOKEN_EXPIRY_SECONDS, description="Lifetime in seconds"
    )
    expires_on: str | None = Field(None, description="Expiry as a unix timestamp")

    @property
    def authorization_header(self) -> str:
        """Value for the Authorization header."""
        return f"{BEARER_SCHEME} {self.value}"


# =============================================================================
# WORKFLOW RESULT
# =============================================================================


class RefreshResult(BaseModel):
    """Terminal outcome of one refresh run."""

    success: bool = Field(..., description="True when the refresh was queued")
    message: str = Field(..., description="Human-readable summary")
    error_kind: str | None = Field(None, description="Exception class name on failure")
    status_code: int | None = Field(None, description="Upstream HTTP status, if any")
    detail: str | None = Field(None, description="Upstream response body, verbatim")
    suggestions: list[str] = Field(
        default_factory=list, description="Actionable suggestions for the user"
    )

    @property
    def exit_code(self) -> Literal[0, 1]:
        return 0 if self.success else 1

    @classmethod
    def submitted(cls, target: DatasetTarget, status_code: int) -> "RefreshResult":
        """Result for a refresh request the reporting API accepted."""
        where = f" in group {target.group_id}" if target.group_id else ""
        return cls(
            success=True,
            message=f"Refresh submitted for dataset {target.dataset_id}{where}",
            status_code=status_code,
        )

    @classmethod
    def from_error(cls, error: PbiRefreshError) -> "RefreshResult":
        """Create a failed RefreshResult from a pbi-refresh error.

        Args:
            error: Any PbiRefreshError; upstream errors also carry status and body

        Returns:
            RefreshResult carrying the error kind and upstream detail
        """
        if isinstance(error, UpstreamError):
            return cls(
                success=False,
                message=error.message,
                error_kind=type(error).__name__,
                status_code=error.status_code,
                detail=error.body,
                suggestions=error.suggestions,
            )
        else:
            return cls(
                success=False,
                message=error.message,
                error_kind=type(error).__name__,
                detail="; ".join(error.errors) or None,
                suggestions=error.suggestions,
            )

    def status_line(self) -> str:
        """Single-line summary suitable for the console."""
        if self.success:
            return f"{self.message} (HTTP {self.status_code})"

        line = f"{self.error_kind}: {self.message}"
        if self.status_code is not None:
            line += f" (HTTP {self.status_code})"
        if self.detail:
            line += f": {self.detail}"
        return line
