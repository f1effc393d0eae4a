"""Account - owner of one or more NFTs."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Account(BaseModel):
    id: str  # lowercased address
    address: str
    nft_ids: list[str] = Field(default_factory=list)
