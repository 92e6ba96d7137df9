class HookTagError(Exception):
    """Base class for every failure raised while building hook tags."""


class UnsupportedChainError(HookTagError, ValueError):
    def __init__(self, chain_id, supported):
        self.chain_id = chain_id
        self.supported = list(supported)
        super().__init__(
            f"Unsupported or invalid Chain ID provided: {chain_id}. "
            f"Only the following values are accepted: {', '.join(self.supported)}"
        )


class TransportError(HookTagError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}")


class UpstreamQueryError(HookTagError):
    def __init__(self, messages):
        self.messages = list(messages)
        super().__init__(f"GraphQL query failed: {'; '.join(self.messages)}")


class MalformedResponseError(HookTagError):
    pass


class FetchFailedError(HookTagError):
    pass
