"""Exceptions raised by tiktok-api operations."""


class TikTokAPIError(Exception):
    """Base exception for tiktok-api errors."""

    pass


class IllegalIdentifier(TikTokAPIError):
    """The identifier was rejected by TikTok (malformed username or id)."""

    pass


class ResourceNotFound(TikTokAPIError):
    """A valid identifier did not resolve to any resource."""

    pass


class IllegalArgument(TikTokAPIError, ValueError):
    """An identity object is missing the field required for the request."""

    pass
