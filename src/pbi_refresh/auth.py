"""Token acquisition via the OAuth2 resource-owner-password grant."""

import logging

import httpx
from pydantic import ValidationError

from .exceptions import AuthenticationError, NetworkError
from .models import AccessToken, Credentials

logger = logging.getLogger("pbi-refresh.auth")


async def acquire_token(
    credentials: Credentials, http_client: httpx.AsyncClient, token_url: str
) -> AccessToken:
    """Exchange credentials for a bearer token.

    Makes exactly one form-encoded POST to the token endpoint.

    Args:
        credentials: Validated Credentials.
        http_client: HTTP client used for the single request.
        token_url: OAuth2 token endpoint.

    Returns:
        AccessToken built from the response body.

    Raises:
        NetworkError: If the endpoint cannot be reached or times out.
        AuthenticationError: On a non-200 response, or a 200 whose body is not
            JSON or lacks access_token. Status and body are kept verbatim.
    """
    logger.debug(f"Requesting token for {credentials.username} from {token_url}")

    try:
        response = await http_client.post(token_url, data=credentials.form_data())
    except httpx.RequestError as e:
        logger.error(f"Token endpoint unreachable: {type(e).__name__}")
        raise NetworkError(
            f"Could not reach token endpoint: {e}",
            errors=[str(e)],
            suggestions=[
                "Check your internet connection",
                "Verify PBIREFRESH_TOKEN_URL if it was overridden",
            ],
            context={"url": token_url, "exception_type": type(e).__name__},
        ) from e

    if response.status_code != 200:
        logger.error(f"Token request rejected with HTTP {response.status_code}")
        raise AuthenticationError(
            "Identity provider rejected the token request",
            status_code=response.status_code,
            body=response.text,
            suggestions=[
                "Check username and password in the secrets file",
                "Confirm the account has access to the client_id application",
            ],
            context={"url": token_url},
        )

    try:
        token = AccessToken.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        # ValueError covers a body that is not JSON at all
        logger.error("Token response is missing access_token")
        raise AuthenticationError(
            "Identity provider returned a response without access_token",
            status_code=response.status_code,
            body=response.text,
            errors=[str(e)],
            suggestions=["This may indicate an identity provider change or outage"],
            context={"url": token_url},
        ) from e

    logger.info(f"Token acquired, expires in {token.expires_in}s")
    return token
