"""Built-in factory catalog.

:data:`DEFAULT_INSTANCE_FACTORIES` pairs every supported leaf type with a
non-nullable factory and its ``RANDOM`` nullable wrapper. The registry builder
recognizes this exact tuple (by identity) and indexes it without validation.
"""

from __future__ import annotations

import datetime
from itertools import chain

from instantiator.descriptor import TypeDescriptor
from instantiator.tags import (
    Char,
    Float32,
    Instant,
    Int8,
    Int16,
    Int64,
    LegacyDate,
    OffsetDateTime,
    OffsetTime,
    ZonedDateTime,
)

from . import primitives, temporal
from ._base import FunctionInstanceFactory, InstanceFactory
from ._nullable import to_nullable_factory

INT_FACTORY = FunctionInstanceFactory(TypeDescriptor(int), primitives.random_int)
BOOL_FACTORY = FunctionInstanceFactory(TypeDescriptor(bool), primitives.random_bool)
FLOAT32_FACTORY = FunctionInstanceFactory(TypeDescriptor(Float32), primitives.random_float32)
FLOAT_FACTORY = FunctionInstanceFactory(TypeDescriptor(float), primitives.random_float)
STR_FACTORY = FunctionInstanceFactory(TypeDescriptor(str), primitives.random_str)
CHAR_FACTORY = FunctionInstanceFactory(TypeDescriptor(Char), primitives.random_char)
INT64_FACTORY = FunctionInstanceFactory(TypeDescriptor(Int64), primitives.random_int64)
INT16_FACTORY = FunctionInstanceFactory(TypeDescriptor(Int16), primitives.random_int16)
INT8_FACTORY = FunctionInstanceFactory(TypeDescriptor(Int8), primitives.random_int8)

LEGACY_DATE_FACTORY = FunctionInstanceFactory(
    TypeDescriptor(LegacyDate), temporal.random_legacy_date
)
INSTANT_FACTORY = FunctionInstanceFactory(TypeDescriptor(Instant), temporal.random_instant)
LOCAL_DATETIME_FACTORY = FunctionInstanceFactory(
    TypeDescriptor(datetime.datetime), temporal.random_local_datetime
)
LOCAL_DATE_FACTORY = FunctionInstanceFactory(
    TypeDescriptor(datetime.date), temporal.random_local_date
)
LOCAL_TIME_FACTORY = FunctionInstanceFactory(
    TypeDescriptor(datetime.time), temporal.random_local_time
)
ZONED_DATETIME_FACTORY = FunctionInstanceFactory(
    TypeDescriptor(ZonedDateTime), temporal.random_zoned_datetime
)
OFFSET_DATETIME_FACTORY = FunctionInstanceFactory(
    TypeDescriptor(OffsetDateTime), temporal.random_offset_datetime
)
OFFSET_TIME_FACTORY = FunctionInstanceFactory(
    TypeDescriptor(OffsetTime), temporal.random_offset_time
)

_NON_NULLABLE_DEFAULTS: tuple[FunctionInstanceFactory, ...] = (
    INT_FACTORY,
    BOOL_FACTORY,
    FLOAT32_FACTORY,
    FLOAT_FACTORY,
    STR_FACTORY,
    CHAR_FACTORY,
    INT64_FACTORY,
    INT16_FACTORY,
    INT8_FACTORY,
    LEGACY_DATE_FACTORY,
    INSTANT_FACTORY,
    LOCAL_DATETIME_FACTORY,
    LOCAL_DATE_FACTORY,
    LOCAL_TIME_FACTORY,
    ZONED_DATETIME_FACTORY,
    OFFSET_DATETIME_FACTORY,
    OFFSET_TIME_FACTORY,
)

# Base type keys served by the default catalog
DEFAULT_TYPES: tuple = tuple(f.descriptor.base for f in _NON_NULLABLE_DEFAULTS)

DEFAULT_INSTANCE_FACTORIES: tuple[InstanceFactory, ...] = tuple(
    chain.from_iterable((f, to_nullable_factory(f)) for f in _NON_NULLABLE_DEFAULTS)
)
