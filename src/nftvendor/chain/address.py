"""Account address validation and canonical form."""

from __future__ import annotations

import re

from nftvendor.errors import InvalidAddressError

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_address(s: str | None) -> bool:
    return bool(s) and _ADDRESS_RE.match(s) is not None


def normalize_address(s: str) -> str:
    """Canonicalize an address for matching (0x + lowercase hex)."""
    s = (s or "").strip()
    if s[:2].lower() == "0x":
        return "0x" + s[2:].lower()
    return s.lower()


def parse_address(s: str) -> str:
    """Validate and canonicalize an address. Raise InvalidAddressError if malformed."""
    s = (s or "").strip()
    if not is_address(s):
        raise InvalidAddressError(f"Invalid address: {s!r}")
    return normalize_address(s)
