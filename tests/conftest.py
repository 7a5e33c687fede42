"""
Pytest configuration and shared fixtures.
"""

from collections.abc import Callable

import httpx
import pytest

from relayview.core.config import Settings
from relayview.core.models import LocationInfo, RelayRecord
from relayview.services.relay_fetcher import RelayFetcher

from tests.utils import TEST_URL


@pytest.fixture
def scenario_payload() -> dict:
    """The single Swedish relay used throughout the tests."""
    return {
        "locations": {"se": {"country": "Sweden", "city": "Stockholm"}},
        "wireguard": {
            "relays": [
                {
                    "hostname": "se1-wg",
                    "location": "se",
                    "active": True,
                    "ipv4_addr_in": "1.2.3.4",
                }
            ]
        },
    }


@pytest.fixture
def large_payload() -> dict:
    """Thirty relays across two locations plus one with an unknown location."""
    relays = [
        {
            "hostname": f"de{i}-wg",
            "location": "de-ber" if i % 2 else "ch-zrh",
            "active": i % 3 != 0,
            "ipv4_addr_in": f"10.0.0.{i}",
            "owned": True,
        }
        for i in range(29)
    ]
    relays.append(
        {"hostname": "xx1-wg", "location": "xx-nowhere", "active": False, "ipv4_addr_in": "10.0.1.1"}
    )
    return {
        "locations": {
            "de-ber": {"country": "Germany", "city": "Berlin", "latitude": 52.5},
            "ch-zrh": {"country": "Switzerland", "city": "Zurich"},
        },
        "wireguard": {"relays": relays, "port_ranges": [[53, 53]]},
    }


@pytest.fixture
def make_relay() -> Callable[..., RelayRecord]:
    """Build a RelayRecord with sensible defaults."""
    def _make(hostname: str = "se1-wg", location_key: str = "se", active: bool = True,
              ipv4_address: str = "1.2.3.4") -> RelayRecord:
        return RelayRecord(
            hostname=hostname,
            location_key=location_key,
            active=active,
            ipv4_address=ipv4_address,
        )
    return _make


@pytest.fixture
def locations() -> dict[str, LocationInfo]:
    return {
        "se": LocationInfo(country="Sweden", city="Stockholm"),
        "de": LocationInfo(country="Germany", city="Berlin"),
    }


@pytest.fixture
def fetcher_for() -> Callable[[httpx.MockTransport], RelayFetcher]:
    """Build a fetcher on top of a mock transport."""
    def _build(transport: httpx.MockTransport) -> RelayFetcher:
        return RelayFetcher(url=TEST_URL, timeout=1.0, transport=transport)
    return _build


@pytest.fixture
def test_settings() -> Settings:
    """Settings independent of the caller's environment."""
    return Settings(
        api_url=TEST_URL,
        request_timeout=1.0,
        spinner="line",
        table_height=5,
        log_level="DEBUG",
    )
