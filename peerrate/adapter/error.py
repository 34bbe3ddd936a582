"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class CacheError(AdapterError):
    """Cache backend error."""

    pass
