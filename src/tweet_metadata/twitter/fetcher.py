import logging
from typing import Optional

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from tweet_metadata.config import Config

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES = {408, 429}
USER_AGENT = "tweet-metadata/0.1"


def _is_retry_status(status_code: int) -> bool:
    return status_code in RETRY_STATUS_CODES or 500 <= status_code < 600


@retry(
    reraise=True,
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type((
        httpx.TimeoutException,
        httpx.RequestError,
        httpx.HTTPStatusError,
    )),
    before_sleep=before_sleep_log(logger, logging.WARNING),
)
async def _request_with_retry(client: httpx.AsyncClient, method: str, url: str, **kwargs) -> httpx.Response:
    response = await client.request(method, url, **kwargs)
    if _is_retry_status(response.status_code):
        raise httpx.HTTPStatusError(
            f"Retryable HTTP {response.status_code}",
            request=response.request,
            response=response,
        )
    return response


def _retrying(config: Config):
    return _request_with_retry.retry_with(
        stop=stop_after_attempt(max(config.retry_max_attempts, 1)),
        wait=wait_exponential(multiplier=1, min=config.retry_wait_min, max=config.retry_wait_max),
    )


async def fetch_bearer_token(client: httpx.AsyncClient, config: Config) -> Optional[str]:
    """Exchanges the API key/secret for an app-only bearer token."""
    if config.bearer_token:
        return config.bearer_token

    url = f"{config.api_base_url}/oauth2/token"
    response = await _retrying(config)(
        client,
        "POST",
        url,
        auth=(config.api_key, config.api_secret),
        data={"grant_type": "client_credentials"},
        headers={"User-Agent": USER_AGENT},
    )
    if response.status_code != 200:
        logger.error(f"Token request failed with HTTP {response.status_code}")
        return None

    try:
        token = response.json().get("access_token")
    except (ValueError, AttributeError):
        token = None
    if not token:
        logger.error("Token response has no access_token")
    return token


async def fetch_status(
    status_id: str,
    config: Config,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[dict]:
    """Fetches a status from the v1.1 API; None when unavailable."""
    if not config.fetch_enabled:
        logger.debug("Twitter fetch disabled or credentials missing, skipping")
        return None
    if not status_id:
        return None

    url = f"{config.api_base_url}/1.1/statuses/show.json"
    params = {"id": status_id, "tweet_mode": "extended"}
    logger.info(f"Requesting status: {status_id}")

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=httpx.Timeout(config.http_timeout, connect=10.0), follow_redirects=False)

    try:
        token = await fetch_bearer_token(client, config)
        if not token:
            return None

        response = await _retrying(config)(
            client,
            "GET",
            url,
            params=params,
            headers={
                "Authorization": f"Bearer {token}",
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
            },
        )

        if response.status_code == 200:
            try:
                data = response.json()
            except ValueError as e:
                logger.error(f"Invalid JSON for status {status_id}: {e}")
                return None
            return data if isinstance(data, dict) else None
        elif response.status_code == 404:
            logger.warning(f"Status not found: {status_id}")
            return None
        elif response.status_code in [401, 403]:
            logger.warning(f"Status not accessible (HTTP {response.status_code}): {status_id}")
            return None
        else:
            logger.error(f"HTTP {response.status_code} for status {status_id}")
            return None

    except httpx.TimeoutException:
        logger.error(f"Timeout while fetching status {status_id}")
        return None
    except httpx.HTTPStatusError as e:
        logger.error(f"HTTP {e.response.status_code} for status {status_id}")
        return None
    except httpx.HTTPError as e:
        logger.error(f"Error while fetching status {status_id}: {e}")
        return None
    finally:
        if owns_client:
            await client.aclose()
