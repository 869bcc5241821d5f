"""Derive nullable factories from non-nullable ones."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar

from instantiator.descriptor import TypeDescriptor
from instantiator.errors import FactoryCapabilityError

from ._base import NonNullableInstanceFactory, NullableInstanceFactory

T = TypeVar("T")


class NullableMode(str, Enum):
    """How a wrapped factory decides between ``None`` and a value."""

    RANDOM = "random"  # one boolean draw per call
    ALWAYS_NONE = "always_none"
    NEVER_NONE = "never_none"


def next_bool(rng: random.Random) -> bool:
    """Draw a single boolean, consuming exactly one bit of the random stream."""
    return rng.getrandbits(1) == 1


@dataclass(frozen=True)
class NullableWrapperFactory(NullableInstanceFactory[T]):
    """Nullable factory delegating to a wrapped non-nullable factory."""

    wrapped: NonNullableInstanceFactory[T]
    mode: NullableMode = NullableMode.RANDOM
    descriptor: TypeDescriptor = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "descriptor", self.wrapped.descriptor.as_nullable())

    def create_instance(self, rng: random.Random) -> T | None:
        if self.mode is NullableMode.ALWAYS_NONE:
            return None
        if self.mode is NullableMode.NEVER_NONE:
            return self.wrapped.create_instance(rng)
        return self.wrapped.create_instance(rng) if next_bool(rng) else None

    def __repr__(self) -> str:
        return f"NullableWrapperFactory({self.wrapped!r}, mode={self.mode.value})"


def to_nullable_factory(
    factory: NonNullableInstanceFactory[T],
    mode: NullableMode | str = NullableMode.RANDOM,
) -> NullableWrapperFactory[T]:
    """Wrap a non-nullable factory so that it may also produce ``None``.

    Args:
        factory: The factory producing concrete values.
        mode: ``RANDOM`` flips a coin per call, ``ALWAYS_NONE`` never calls the
            wrapped factory, ``NEVER_NONE`` always does.

    Returns:
        A nullable factory whose descriptor is the nullable counterpart of
        ``factory.descriptor``.

    Raises:
        FactoryCapabilityError: If ``factory`` is not a non-nullable factory.
    """
    if not isinstance(factory, NonNullableInstanceFactory):
        raise FactoryCapabilityError(
            f"Only a NonNullableInstanceFactory can be wrapped as nullable. Factory = {factory!r}"
        )
    return NullableWrapperFactory(factory, NullableMode(mode))
