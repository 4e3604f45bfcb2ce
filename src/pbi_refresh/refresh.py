"""Dataset refresh request against the Power BI REST API."""

import logging

import httpx

from .exceptions import NetworkError, RefreshError
from .models import AccessToken, DatasetTarget

logger = logging.getLogger("pbi-refresh.refresh")


def refresh_url(api_base_url: str, target: DatasetTarget) -> str:
    """Build the refresh endpoint for a dataset, scoped to its group if set."""
    base = api_base_url.rstrip("/")
    if target.group_id:
        base = f"{base}/groups/{target.group_id}"
    return f"{base}/datasets/{target.dataset_id}/refreshes"


async def request_refresh(
    token: AccessToken,
    target: DatasetTarget,
    http_client: httpx.AsyncClient,
    api_base_url: str,
) -> int:
    """Queue a refresh of the target dataset.

    The API answers 202 once the refresh is queued; completion is not polled.

    Args:
        token: Bearer token from acquire_token.
        target: Dataset to refresh.
        http_client: HTTP client used for the single request.
        api_base_url: Base URL of the reporting API.

    Returns:
        The HTTP status code of the accepted request (any 2xx).

    Raises:
        NetworkError: If the API cannot be reached or times out.
        RefreshError: For any non-2xx response, with status and body verbatim.
    """
    url = refresh_url(api_base_url, target)
    headers = {"Authorization": token.authorization_header}

    logger.debug(f"POST {url}")
    try:
        response = await http_client.post(url, headers=headers)
    except httpx.RequestError as e:
        logger.error(f"Refresh endpoint unreachable: {type(e).__name__}")
        raise NetworkError(
            f"Could not reach refresh endpoint: {e}",
            errors=[str(e)],
            suggestions=["Check your internet connection"],
            context={"url": url, "exception_type": type(e).__name__},
        ) from e

    if not response.is_success:
        logger.error(f"Refresh rejected with HTTP {response.status_code}")
        raise RefreshError(
            f"Reporting API rejected the refresh of dataset {target.dataset_id}",
            status_code=response.status_code,
            body=response.text,
            suggestions=_suggestions_for(response.status_code),
            context={"url": url},
        )

    logger.info(f"Refresh accepted with HTTP {response.status_code}")
    return response.status_code


def _suggestions_for(status_code: int) -> list[str]:
    if status_code in (401, 403):
        return ["Confirm the account has write access to the dataset"]
    if status_code == 404:
        return ["Check dataset_id and group_id in the dataset file"]
    if status_code == 429:
        return ["Refresh quota exceeded; try again later"]
    return []
