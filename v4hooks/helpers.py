def unique_in_order(values):
    """
    Drop repeated values from an iterable, keeping the first occurrence of each.

    Args:
        values (iterable): hashable values.

    Returns:
        list: distinct values in first-seen order.
    """
    seen = dict.fromkeys(values)
    return list(seen)


def to_eip155(chain_id: str, address: str) -> str:
    return f"eip155:{chain_id}:{address}"


def truncate_id(id: str) -> str:
    # short ids are already readable
    if len(id) <= 10:
        return id
    return f"{id[:5]}...{id[-5:]}"
