"""Core Pydantic models for the relay list.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import NamedTuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class LocationInfo(BaseModel):
    """Country and city of a relay location."""

    country: StrictStr
    city: StrictStr

    model_config = ConfigDict(frozen=True)


class RelayRecord(BaseModel):
    """A single WireGuard relay as published by the API."""

    hostname: StrictStr
    location_key: StrictStr = Field(alias="location")
    active: StrictBool
    ipv4_address: StrictStr = Field(alias="ipv4_addr_in")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class WireguardSection(BaseModel):
    """The ``wireguard`` object of the relay list."""

    relays: list[RelayRecord]


class RelayList(BaseModel):
    """Decoded relay list document."""

    locations: dict[str, LocationInfo]
    wireguard: WireguardSection

    @property
    def relays(self) -> list[RelayRecord]:
        return self.wireguard.relays


@dataclass(frozen=True)
class FetchSuccess:
    """Relays and locations delivered by a successful fetch."""

    relays: tuple[RelayRecord, ...]
    locations: Mapping[str, LocationInfo]

    @classmethod
    def from_relay_list(cls, relay_list: RelayList) -> "FetchSuccess":
        return cls(relays=tuple(relay_list.relays), locations=dict(relay_list.locations))


@dataclass(frozen=True)
class FetchFailure:
    """A fetch that ended in an error; ``error`` is shown to the user as is."""

    error: str
    error_code: str = "FETCH_ERROR"


FetchResult = Union[FetchSuccess, FetchFailure]


class TableRow(NamedTuple):
    """One table line derived from a relay."""

    hostname: str
    location_key: str
    active: str
    ipv4_address: str
    country: str
