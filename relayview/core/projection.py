"""Turn decoded relays into table rows."""

from collections.abc import Iterable, Mapping

from relayview.core.models import LocationInfo, RelayRecord, TableRow


def format_active(active: bool) -> str:
    """Canonical text for the ``active`` flag."""
    return "true" if active else "false"


def project(
    relays: Iterable[RelayRecord],
    locations: Mapping[str, LocationInfo],
) -> list[TableRow]:
    """Build one row per relay, keeping the API order.

    A relay whose location key is missing from ``locations`` gets an empty
    country instead of an error.
    """
    rows = []
    for relay in relays:
        location = locations.get(relay.location_key)
        rows.append(
            TableRow(
                hostname=relay.hostname,
                location_key=relay.location_key,
                active=format_active(relay.active),
                ipv4_address=relay.ipv4_address,
                country=location.country if location is not None else "",
            )
        )
    return rows
