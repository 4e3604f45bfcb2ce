"""Token-then-refresh workflow."""

import logging

import httpx

from .auth import acquire_token
from .config import Config
from .consts import USER_AGENT
from .exceptions import PbiRefreshError
from .models import Credentials, DatasetTarget, RefreshResult
from .refresh import request_refresh

logger = logging.getLogger("pbi-refresh.workflow")


def create_http_client(
    config: Config, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    """HTTP client for a single run."""
    return httpx.AsyncClient(
        headers={"User-Agent": USER_AGENT},
        timeout=config.timeout_seconds,
        transport=transport,
    )


async def run_refresh(
    credentials: Credentials,
    target: DatasetTarget,
    *,
    config: Config,
    http_client: httpx.AsyncClient | None = None,
) -> RefreshResult:
    """Acquire a token, then queue a refresh of the target dataset.

    The refresh call is never attempted if token acquisition fails. Failures
    of either step are returned as a failed RefreshResult rather than raised.

    Args:
        credentials: Validated Credentials.
        target: Dataset to refresh.
        config: Endpoints and timeout.
        http_client: HTTP client. If None, one is created and closed here.

    Returns:
        RefreshResult describing the outcome.
    """
    if http_client is None:
        async with create_http_client(config) as client:
            return await run_refresh(
                credentials, target, config=config, http_client=client
            )

    try:
        token = await acquire_token(credentials, http_client, config.token_url)
    except PbiRefreshError as e:
        logger.debug("Skipping refresh: no token")
        return RefreshResult.from_error(e)

    try:
        status_code = await request_refresh(
            token, target, http_client, config.api_base_url
        )
    except PbiRefreshError as e:
        return RefreshResult.from_error(e)

    return RefreshResult.submitted(target, status_code)
