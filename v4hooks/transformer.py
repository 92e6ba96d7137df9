from v4hooks.constants import CONTRACT_ADDRESS
from v4hooks.constants import PROJECT_NAME
from v4hooks.constants import PROJECT_NAME_FIELD
from v4hooks.constants import PUBLIC_NAME_TAG
from v4hooks.constants import PUBLIC_NOTE
from v4hooks.constants import WEBSITE_LINK
from v4hooks.constants import WEBSITE_URL
from v4hooks.helpers import to_eip155
from v4hooks.helpers import unique_in_order


def transform(chain_id: str, pools):
    """
    Build one contract tag per distinct hook address, numbered from 0 in the
    order the hooks first appear in pools.
    """
    hooks = unique_in_order(pool['hooks'] for pool in pools)

    return [
        {
            CONTRACT_ADDRESS: to_eip155(chain_id, hook),
            PUBLIC_NAME_TAG: f"Hook #{i}",
            PROJECT_NAME_FIELD: PROJECT_NAME,
            WEBSITE_LINK: WEBSITE_URL,
            PUBLIC_NOTE: f"Uniswap V4's Hook #{i} contract",
        }
        for i, hook in enumerate(hooks)
    ]
