"""Random generators for calendar and time values.

The generators are layered rather than independent: local date-time is built
from an instant and a random zone, and every other kind projects or decorates
a local date-time drawn through :func:`random_local_datetime`::

    instant ──► local date-time ──┬─► local date / local time
                                  ├─► zoned date-time
                                  └─► offset date-time ──► offset time
"""

from __future__ import annotations

import datetime
import functools
import random
import zoneinfo

from instantiator.tags import Instant, LegacyDate, OffsetDateTime, OffsetTime, ZonedDateTime

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

# Upper bound for random instants, in milliseconds since the epoch (~2100-01-01)
MAX_INSTANT_MILLIS = 4_102_441_200_000

# Legal UTC offsets span -18:00 to +18:00
MIN_OFFSET_SECONDS = -18 * 3600
MAX_OFFSET_SECONDS = 18 * 3600

_LONG_MIN, _LONG_MAX = -(2**63), 2**63 - 1


@functools.lru_cache(maxsize=1)
def available_zone_ids() -> tuple[str, ...]:
    """All known IANA zone identifiers, sorted so index draws are reproducible."""
    return tuple(sorted(zoneinfo.available_timezones()))


def random_zone(rng: random.Random) -> zoneinfo.ZoneInfo:
    """Pick a time zone uniformly from :func:`available_zone_ids`."""
    zone_ids = available_zone_ids()
    return zoneinfo.ZoneInfo(zone_ids[rng.randrange(len(zone_ids))])


def random_instant(rng: random.Random) -> Instant:
    """UTC instant between the epoch and :data:`MAX_INSTANT_MILLIS`."""
    millis = rng.randrange(MAX_INSTANT_MILLIS)
    return Instant(EPOCH + datetime.timedelta(milliseconds=millis))


def random_legacy_date(rng: random.Random) -> LegacyDate:
    """Millisecond timestamp anywhere in the signed 64-bit range."""
    return LegacyDate(rng.randint(_LONG_MIN, _LONG_MAX))


def random_local_datetime(rng: random.Random) -> datetime.datetime:
    """Wall-clock time of a random instant as seen in a random zone (naive)."""
    instant = random_instant(rng)
    return instant.astimezone(random_zone(rng)).replace(tzinfo=None)


def random_local_date(rng: random.Random) -> datetime.date:
    return random_local_datetime(rng).date()


def random_local_time(rng: random.Random) -> datetime.time:
    return random_local_datetime(rng).time()


def random_zoned_datetime(rng: random.Random) -> ZonedDateTime:
    """Local date-time placed into a (second) random zone."""
    local = random_local_datetime(rng)
    return ZonedDateTime(local.replace(tzinfo=random_zone(rng)))


def random_offset_datetime(rng: random.Random) -> OffsetDateTime:
    """Local date-time with a random fixed UTC offset."""
    local = random_local_datetime(rng)
    seconds = rng.randrange(MIN_OFFSET_SECONDS, MAX_OFFSET_SECONDS)
    offset = datetime.timezone(datetime.timedelta(seconds=seconds))
    return OffsetDateTime(local.replace(tzinfo=offset))


def random_offset_time(rng: random.Random) -> OffsetTime:
    return OffsetTime(random_offset_datetime(rng).timetz())
