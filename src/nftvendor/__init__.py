"""Vendor NFT marketplace normalization and LAND parcel decoding."""

__version__ = "0.1.0"
