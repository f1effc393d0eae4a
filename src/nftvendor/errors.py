"""Exception hierarchy for vendor fetches, pricing and transfers."""

from __future__ import annotations

from typing import Any


class NFTVendorError(Exception):
    """Base for all nftvendor errors."""


class InvalidStateError(NFTVendorError):
    """Operation called in a state that cannot succeed (e.g. no wallet connected)."""


class InvalidAddressError(InvalidStateError, ValueError):
    """Address is not a 0x-prefixed, 40 hex digit account address."""


class UnknownVendorError(NFTVendorError, KeyError):
    """No adapter is registered for the requested vendor tag."""


class RemoteFetchError(NFTVendorError):
    """A vendor or exchange-rate request failed or returned an unusable body."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.status_code = status_code
        self.url = url

    def to_dict(self) -> dict[str, Any]:
        """Flat representation for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "source": self.source,
            "status_code": self.status_code,
            "url": self.url,
        }

    def __str__(self) -> str:
        parts = [self.message]
        if self.source:
            parts.append(f"[source={self.source}]")
        if self.status_code is not None:
            parts.append(f"[status={self.status_code}]")
        return " ".join(parts)
