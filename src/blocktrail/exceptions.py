class BlocktrailError(Exception):
    """Base error for blocktrail."""


class ExternalServiceError(BlocktrailError):
    """A call to an external service (RPC node, HTTP API) failed."""


class TransientFetchError(ExternalServiceError):
    """Head height or block transactions could not be fetched. Always retried."""
