import asyncio
import sys

from config import api_key
from config import chain_id
from config import csv_output
from config import json_output
from config import log_file
from config import request_timeout
from v4hooks.constants import CONTRACT_ADDRESS
from v4hooks.constants import PUBLIC_NAME_TAG
from v4hooks.errors import HookTagError
from v4hooks.helpers import truncate_id
from v4hooks.logging_config import setup_logger
from v4hooks.tags import return_tags
from v4hooks.tags import write_csv
from v4hooks.tags import write_json

logger = setup_logger("v4hooks", log_file=log_file)


# fetch Uniswap v4 pools for the configured chain from The Graph and tag every hook contract
async def main():

    print(f"Getting hook tags for chain: {chain_id}")

    try:
        tags = await return_tags(chain_id, api_key, timeout=request_timeout)
    except HookTagError as e:
        print(f"Hook tag fetch failed: {e}")
        sys.exit(1)

    for tag in tags:
        address = tag[CONTRACT_ADDRESS].rsplit(":", 1)[-1]
        print(f"{tag[PUBLIC_NAME_TAG]}: {truncate_id(address)}")
    print("- - -")

    write_json(json_output, tags)
    if csv_output:
        write_csv(csv_output, tags)


if __name__ == "__main__":
    asyncio.run(main())
