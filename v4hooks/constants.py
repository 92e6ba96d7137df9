from types import MappingProxyType

from web3.constants import ADDRESS_ZERO

API_KEY_PLACEHOLDER = "[api-key]"

# Uniswap v4 subgraph deployments on The Graph gateway, keyed by chain id
CHAIN_ENDPOINTS = MappingProxyType({
    "1": "https://gateway.thegraph.com/api/[api-key]/subgraphs/id/DiYPVdygkfjDWhbxGSqAQxwBKmfKnkWQojqeM2rkLb3G",
    "10": "https://gateway.thegraph.com/api/[api-key]/subgraphs/id/EoCvJ5tyMLMJcTnLQwWpjAtPdn74PcrZgzfcT5bYxNBH",
    "56": "https://gateway.thegraph.com/api/[api-key]/subgraphs/id/2qQpC8inZPZL4tYfRQPFGZhsE8mYzE67n5z3Yf5uuKMu",
    "137": "https://gateway.thegraph.com/api/[api-key]/subgraphs/id/CwpebM66AH5uqS5sreKij8yEkkPcHvmyEs7EwFtdM5ND",
    "8453": "https://gateway.thegraph.com/api/[api-key]/subgraphs/id/HNCFA9TyBqpo5qpe6QreQABAA1kV8g46mhkCcicu6v2R",
    "42161": "https://gateway.thegraph.com/api/[api-key]/subgraphs/id/G5TsTKNi8yhPSV7kycaE23oWbqv9zzNqR49FoEQjzq1r",
    "43114": "https://gateway.thegraph.com/api/[api-key]/subgraphs/id/49JxRo9FGxWpSf5Y5GKQPj5NUpX2HhpoZHpGzNEWQZjq",
    "81457": "https://gateway.thegraph.com/api/[api-key]/subgraphs/id/FCHYK3Ab6bBnkfeCKRhFbs1Q8rX4yt6rKJibpDTC74ns",
})

# max records the subgraph returns for a single query
PAGE_SIZE = 1000

GRAPH_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

GRAPH_QUERY = """
    query GetPools($lastTimestamp: Int) {
        pools(
            first: %d
            orderBy: createdAtTimestamp
            orderDirection: asc
            where: {createdAtTimestamp_gt: $lastTimestamp, hooks_not: "%s"}
        ) {
            hooks
        }
    }
    """ % (PAGE_SIZE, ADDRESS_ZERO)

# TAG FIELDS
CONTRACT_ADDRESS = "Contract Address"
PUBLIC_NAME_TAG = "Public Name Tag"
PROJECT_NAME_FIELD = "Project Name"
WEBSITE_LINK = "UI/Website Link"
PUBLIC_NOTE = "Public Note"

TAG_FIELDS = (
    CONTRACT_ADDRESS,
    PUBLIC_NAME_TAG,
    PROJECT_NAME_FIELD,
    WEBSITE_LINK,
    PUBLIC_NOTE,
)

PROJECT_NAME = "Uniswap v4"
WEBSITE_URL = "https://uniswap.org"
