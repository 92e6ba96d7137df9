import csv
import json
import logging
from typing import Optional

from v4hooks.constants import TAG_FIELDS
from v4hooks.endpoints import resolve_endpoint
from v4hooks.fetcher import accumulate_pools
from v4hooks.transformer import transform

logger = logging.getLogger(__name__)


async def return_tags(chain_id: str, api_key: str, timeout: Optional[float] = None):
    """
    Fetch the Uniswap v4 pools of a chain and tag every distinct hook contract.

    Args:
        chain_id (str): decimal chain id, one of CHAIN_ENDPOINTS.
        api_key (str): The Graph gateway key.
        timeout (float): optional request timeout in seconds.

    Returns:
        list: tag dicts keyed by the TAG_FIELDS labels.

    Raises:
        UnsupportedChainError: chain_id has no subgraph endpoint.
        FetchFailedError: the subgraph request failed.
    """
    endpoint = resolve_endpoint(chain_id, api_key)
    pools = await accumulate_pools(endpoint, timeout=timeout)
    tags = transform(chain_id, pools)

    logger.info("Built %d hook tags from %d pools on chain %s", len(tags), len(pools), chain_id)

    return tags


def write_json(path: str, tags):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(tags, f, indent=2)
    logger.info("Wrote JSON: %s (%d tags)", path, len(tags))


def write_csv(path: str, tags):
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=TAG_FIELDS)
        w.writeheader()
        w.writerows(tags)
    logger.info("Wrote CSV: %s (%d rows)", path, len(tags))
