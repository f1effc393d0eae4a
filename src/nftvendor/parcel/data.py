"""LAND/Estate data field parsing. Format: ``<version>,"<name>","<description>","<ipns>"``."""

from __future__ import annotations

import csv
from enum import StrEnum

import structlog

from nftvendor.parcel.models import ParcelData

log = structlog.get_logger(__name__)

SUPPORTED_VERSION = "0"


class DataType(StrEnum):
    PARCEL = "parcel"
    ESTATE = "estate"


def _to_list(data: str) -> list[str]:
    rows = list(csv.reader([data], skipinitialspace=True))
    return [v.strip() for v in rows[0]] if rows else []


def build_data(id: str, data: str, data_type: DataType) -> ParcelData | None:
    """Parse raw on-chain data. Returns None for empty, malformed or unsupported-version data."""
    if not data or not data.strip():
        return None
    try:
        values = _to_list(data.strip())
    except csv.Error as e:
        log.warning("unparseable_data", id=id, data_type=str(data_type), error=str(e))
        return None
    if not values or values[0] != SUPPORTED_VERSION:
        log.warning("unsupported_data_version", id=id, data_type=str(data_type), data=data[:64])
        return None
    return ParcelData(
        id=id,
        version=values[0],
        name=values[1] if len(values) > 1 else "",
        description=values[2] if len(values) > 2 else "",
        ipns=values[3] if len(values) > 3 else "",
    )
