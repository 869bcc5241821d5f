from __future__ import annotations

from ._base import (
    FunctionInstanceFactory,
    FunctionNullableInstanceFactory,
    InstanceFactory,
    NonNullableInstanceFactory,
    NullableInstanceFactory,
    non_nullable_factory,
    nullable_factory,
)
from ._nullable import NullableMode, NullableWrapperFactory, next_bool, to_nullable_factory
from .defaults import DEFAULT_INSTANCE_FACTORIES, DEFAULT_TYPES
from .primitives import CHAR_POOL, STRING_LENGTH
from .temporal import MAX_INSTANT_MILLIS, available_zone_ids

__all__ = [
    "CHAR_POOL",
    "DEFAULT_INSTANCE_FACTORIES",
    "DEFAULT_TYPES",
    "MAX_INSTANT_MILLIS",
    "STRING_LENGTH",
    "FunctionInstanceFactory",
    "FunctionNullableInstanceFactory",
    "InstanceFactory",
    "NonNullableInstanceFactory",
    "NullableInstanceFactory",
    "NullableMode",
    "NullableWrapperFactory",
    "available_zone_ids",
    "next_bool",
    "non_nullable_factory",
    "nullable_factory",
    "to_nullable_factory",
]
