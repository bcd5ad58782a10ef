"""Error taxonomy for search, fetch, and tournament stages."""

from __future__ import annotations


class ResearchError(Exception):
    """Base class for web-tournament errors."""


class InputError(ResearchError):
    pass


class InvalidQuery(InputError):
    pass


class InvalidURL(InputError):
    pass


class TransportError(ResearchError):
    """Connection failure, timeout, or a non-200 response."""


class DecodingError(ResearchError):
    pass
