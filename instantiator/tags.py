"""Type tags for value kinds that plain Python types do not distinguish.

Python has a single ``int`` and ``float`` and no character type, so the
fixed-width numeric kinds are keyed by ``NewType`` tags. The same goes for
timestamps whose Python representation (``datetime``/``time``) is shared by
several calendar kinds. Plain ``int`` is the 32-bit integer, ``float`` is
double precision, and ``datetime.date``/``datetime.time``/``datetime.datetime``
are the naive local date, local time and local date-time.
"""

from __future__ import annotations

import datetime
from typing import NewType

# Numeric widths
Int64 = NewType("Int64", int)
Int16 = NewType("Int16", int)
Int8 = NewType("Int8", int)
Float32 = NewType("Float32", float)

# A single character string
Char = NewType("Char", str)

# Calendar / time kinds
Instant = NewType("Instant", datetime.datetime)  # aware, always UTC
LegacyDate = NewType("LegacyDate", int)  # milliseconds since the Unix epoch
ZonedDateTime = NewType("ZonedDateTime", datetime.datetime)  # tzinfo is a ZoneInfo
OffsetDateTime = NewType("OffsetDateTime", datetime.datetime)  # tzinfo is a fixed offset
OffsetTime = NewType("OffsetTime", datetime.time)  # aware time with fixed offset

__all__ = [
    "Char",
    "Float32",
    "Instant",
    "Int16",
    "Int64",
    "Int8",
    "LegacyDate",
    "OffsetDateTime",
    "OffsetTime",
    "ZonedDateTime",
]
