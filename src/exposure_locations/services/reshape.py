"""Pure reshaping of upstream datasets into the shared location shape.

NZ and AU publish different schemas. These functions map each into
MergedLocationEntity without touching the network or the cache.

A reshaper returns None (not an empty list) when the raw dataset holds
no record collection at all, so callers can tell "no data" apart from
"no locations".
"""

import re
from datetime import datetime, tzinfo
from typing import Any

from exposure_locations.config import settings
from exposure_locations.entities import Country, MergedLocationEntity

# DD/MM/YYYY, hh:mm a. The am/pm marker is matched here rather than with
# strptime's %p, which only knows the current locale's names.
NZ_TIMESTAMP_PATTERN = re.compile(
    r"^(?P<clock>\d{1,2}/\d{1,2}/\d{4}, \d{1,2}:\d{2}) ?(?P<meridiem>[ap]m)$",
    re.IGNORECASE,
)
NZ_CLOCK_FORMAT = "%d/%m/%Y, %I:%M"
NZ_STATUS = "active"


def parse_nz_timestamp(value: Any, tz: tzinfo | None = None) -> datetime | None:
    """Parse an NZ wall-clock string such as ``01/08/2021, 10:00 am``.

    Args:
        value: The raw start/end value
        tz: Timezone the wall-clock time is in. Defaults to settings.

    Returns:
        Timezone-aware datetime, or None if the value does not match
    """
    if not isinstance(value, str):
        return None
    match = NZ_TIMESTAMP_PATTERN.match(value.strip())
    if match is None:
        return None
    try:
        parsed = datetime.strptime(match["clock"], NZ_CLOCK_FORMAT)
    except ValueError:
        return None
    hour = parsed.hour % 12
    if match["meridiem"].lower() == "pm":
        hour += 12
    return parsed.replace(hour=hour, tzinfo=tz or settings.nz_tzinfo)


def nz_records(raw: Any) -> list[dict[str, Any]] | None:
    """Extract NZ records from ``{"locations": [...]}``."""
    if not isinstance(raw, dict):
        return None
    locations = raw.get("locations")
    if not isinstance(locations, list):
        return None
    return [record for record in locations if isinstance(record, dict)]


def au_records(raw: Any) -> list[dict[str, Any]]:
    """Extract AU records from a JSON array.

    Items may be records or arrays of records; nested arrays are
    flattened one level. Anything else yields no records.
    """
    if not isinstance(raw, list):
        return []
    records: list[dict[str, Any]] = []
    for item in raw:
        if isinstance(item, dict):
            records.append(item)
        elif isinstance(item, list):
            records.extend(record for record in item if isinstance(record, dict))
    return records


def record_count(country: Country, raw: Any) -> int:
    """Count the records a raw dataset holds for a country."""
    if country is Country.NZ:
        return len(nz_records(raw) or [])
    return len(au_records(raw))


def reshape_nz_location(record: dict[str, Any], tz: tzinfo | None = None) -> MergedLocationEntity:
    return MergedLocationEntity(
        id=record.get("id"),
        site=record.get("event"),
        location=record.get("location"),
        region=record.get("city"),
        information=record.get("information"),
        coordinates=record.get("coordinates"),
        start=parse_nz_timestamp(record.get("start"), tz),
        end=parse_nz_timestamp(record.get("end"), tz),
        # The NZ feed has no status field; everything it lists is current.
        status=NZ_STATUS,
    )


def reshape_au_location(record: dict[str, Any]) -> MergedLocationEntity:
    suburb = record.get("suburb") or ""
    state = record.get("state") or ""
    times = record.get("times")
    return MergedLocationEntity(
        id=record.get("id"),
        site=record.get("venue"),
        location=record.get("geocoded_address"),
        region=f"{suburb}, {state}",
        information=record.get("alert"),
        coordinates=record.get("coordinates"),
        start=times,
        end=times,
        status=record.get("status"),
    )


def reshape_nz(raw: Any, tz: tzinfo | None = None) -> list[MergedLocationEntity] | None:
    """Reshape an NZ dataset.

    Args:
        raw: Decoded NZ payload, expected as ``{"locations": [...]}``
        tz: Timezone for start/end parsing. Defaults to settings.

    Returns:
        Reshaped locations in source order, or None if there is no
        ``locations`` list
    """
    records = nz_records(raw)
    if records is None:
        return None
    return [reshape_nz_location(record, tz) for record in records]


def reshape_au(raw: Any) -> list[MergedLocationEntity] | None:
    """Reshape an AU dataset.

    Args:
        raw: Decoded AU payload, a JSON array of records

    Returns:
        Reshaped locations in source order, or None if the dataset is
        empty or absent
    """
    records = au_records(raw)
    if not records:
        return None
    return [reshape_au_location(record) for record in records]


def combine(
    nz: list[MergedLocationEntity] | None,
    au: list[MergedLocationEntity] | None,
) -> dict[str, list[MergedLocationEntity] | None]:
    """Put both reshaped lists side by side under their country keys.

    No de-duplication or reordering is done.
    """
    return {
        Country.NZ.value: nz,
        Country.AU.value: au,
    }
