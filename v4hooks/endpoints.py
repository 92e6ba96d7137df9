import logging
from urllib.parse import quote

from v4hooks.constants import API_KEY_PLACEHOLDER
from v4hooks.constants import CHAIN_ENDPOINTS
from v4hooks.errors import UnsupportedChainError

logger = logging.getLogger(__name__)


def supported_chains(endpoints=CHAIN_ENDPOINTS):
    return list(endpoints.keys())


def resolve_endpoint(chain_id: str, api_key: str, endpoints=CHAIN_ENDPOINTS) -> str:
    """
    Look up the subgraph endpoint for a chain and fill in the API key.

    Args:
        chain_id (str): decimal chain id, e.g. "1" for Ethereum mainnet.
        api_key (str): The Graph gateway key, percent-encoded into the URL.
        endpoints (Mapping): chain id -> URL template, defaults to CHAIN_ENDPOINTS.

    Raises:
        UnsupportedChainError: chain_id is not numeric or has no endpoint.
    """
    if not isinstance(chain_id, str) or not chain_id.isdigit() or chain_id not in endpoints:
        raise UnsupportedChainError(chain_id, supported_chains(endpoints))

    endpoint = endpoints[chain_id].replace(API_KEY_PLACEHOLDER, quote(api_key, safe=""))
    logger.info("Resolved subgraph endpoint for chain %s", chain_id)

    return endpoint
