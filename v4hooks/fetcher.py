import logging
from typing import Optional

import requests

from v4hooks.constants import GRAPH_HEADERS
from v4hooks.constants import GRAPH_QUERY
from v4hooks.constants import PAGE_SIZE
from v4hooks.errors import FetchFailedError
from v4hooks.errors import HookTagError
from v4hooks.errors import MalformedResponseError
from v4hooks.errors import TransportError
from v4hooks.errors import UpstreamQueryError

logger = logging.getLogger(__name__)


async def fetch_pools(endpoint: str, last_timestamp: int, timeout: Optional[float] = None):
    """
    Fetch one page of pools with a hook attached, created after last_timestamp.

    Returns:
        list: pool dicts, each holding only the "hooks" address.
    """
    response = requests.post(
        endpoint,
        headers=GRAPH_HEADERS,
        json={'query': GRAPH_QUERY, 'variables': {'lastTimestamp': last_timestamp}},
        timeout=timeout,
    )

    if not 200 <= response.status_code < 300:
        raise TransportError(response.status_code)

    try:
        result = response.json()
    except ValueError as e:
        raise MalformedResponseError("Response body is not valid JSON") from e

    if not isinstance(result, dict):
        raise MalformedResponseError("Response body is not a JSON object")

    errors = result.get('errors')
    if errors:
        if not isinstance(errors, list):
            errors = [errors]
        messages = [
            err.get('message', str(err)) if isinstance(err, dict) else str(err)
            for err in errors
        ]
        for message in messages:
            logger.error("GraphQL error: %s", message)
        raise UpstreamQueryError(messages)

    data = result.get('data')
    if not isinstance(data, dict) or not isinstance(data.get('pools'), list):
        raise MalformedResponseError("Invalid response structure: missing pools data")

    pools = data['pools']
    for pool in pools:
        if not isinstance(pool, dict) or not isinstance(pool.get('hooks'), str):
            raise MalformedResponseError("Invalid response structure: pool without hooks address")

    return pools


async def accumulate_pools(endpoint: str, timeout: Optional[float] = None):
    """
    Collect pools from the subgraph starting at timestamp 0.

    Only the first page is ever requested. The query selects nothing but
    `hooks`, so there is no createdAtTimestamp to seed the next page's
    lastTimestamp; following a full page would just repeat it. Add
    createdAtTimestamp to GRAPH_QUERY before enabling further pages.

    Raises:
        FetchFailedError: wraps whatever fetch_pools raised.
    """
    all_pools = []
    last_timestamp = 0
    is_more = True

    try:
        while is_more:
            pools = await fetch_pools(endpoint, last_timestamp, timeout=timeout)
            all_pools.extend(pools)
            logger.info("Fetched %d pools (total %d)", len(pools), len(all_pools))

            is_more = len(pools) == PAGE_SIZE
            if is_more:
                logger.warning(
                    "Page size limit of %d reached, pools beyond the first page are not fetched",
                    PAGE_SIZE,
                )
                is_more = False
    except (HookTagError, requests.RequestException) as e:
        logger.error("Error fetching data: %s", e)
        raise FetchFailedError(f"Failed to fetch data: {e}") from e
    except Exception as e:
        logger.error("An unknown error occurred while fetching data")
        raise FetchFailedError("An unknown error occurred while fetching data") from e

    return all_pools
