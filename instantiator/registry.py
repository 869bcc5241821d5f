"""Registry builder: turns a list of factories into a descriptor-indexed mapping.

The default catalog is indexed as-is. Any other input is validated,
deduplicated per base type (last one wins) and completed with a ``RANDOM``
nullable wrapper for every non-nullable factory lacking a nullable
counterpart.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping, Sequence
from types import MappingProxyType

from instantiator.descriptor import TypeDescriptor
from instantiator.errors import DuplicateDescriptorError, FactoryCapabilityError
from instantiator.factories import (
    DEFAULT_INSTANCE_FACTORIES,
    InstanceFactory,
    NonNullableInstanceFactory,
    NullableInstanceFactory,
    to_nullable_factory,
)

logger = logging.getLogger(__name__)

__all__ = ["FactoryRegistry", "build_registry"]

FactoryRegistry = Mapping[TypeDescriptor, InstanceFactory]


def _check_capability(factory: object) -> None:
    """Ensure the factory implements the variant its descriptor claims."""
    if not isinstance(factory, InstanceFactory):
        raise FactoryCapabilityError(f"Not an InstanceFactory: {factory!r}")
    descriptor = getattr(factory, "descriptor", None)
    if not isinstance(descriptor, TypeDescriptor):
        raise FactoryCapabilityError(
            f"Factory descriptor must be a TypeDescriptor, got {descriptor!r}. Factory = {factory!r}"
        )
    if descriptor.nullable and not isinstance(factory, NullableInstanceFactory):
        raise FactoryCapabilityError(
            "A factory's type is marked as nullable but is not a "
            f"NullableInstanceFactory. Type = {descriptor}. Factory = {factory!r}"
        )
    if not descriptor.nullable and not isinstance(factory, NonNullableInstanceFactory):
        raise FactoryCapabilityError(
            "A factory's type is marked as non-nullable but is not a "
            f"NonNullableInstanceFactory. Type = {descriptor}. Factory = {factory!r}"
        )


def _index_by_descriptor(
    factories: Iterable[InstanceFactory],
) -> dict[TypeDescriptor, InstanceFactory]:
    index: dict[TypeDescriptor, InstanceFactory] = {}
    for factory in factories:
        if factory.descriptor in index:
            raise DuplicateDescriptorError(
                f"Duplicate factory for {factory.descriptor}: "
                f"{index[factory.descriptor]!r} and {factory!r}"
            )
        index[factory.descriptor] = factory
    return index


def build_registry(factories: Sequence[InstanceFactory]) -> FactoryRegistry:
    """Build a read-only registry from factories.

    Args:
        factories: Factories in priority order; for a given descriptor the
            last one listed wins.

    Returns:
        Read-only mapping from descriptor to factory, containing a nullable
        factory for every non-nullable one.

    Raises:
        FactoryCapabilityError: If a factory's descriptor nullability does not
            match the factory variant it implements.
        DuplicateDescriptorError: If the final set has two factories for one
            descriptor.
    """
    if factories is DEFAULT_INSTANCE_FACTORIES:
        # Built in matched pairs, no completion needed
        return MappingProxyType(_index_by_descriptor(factories))

    non_nullable: dict[Hashable, NonNullableInstanceFactory] = {}
    nullable: dict[Hashable, NullableInstanceFactory] = {}
    for factory in factories:
        _check_capability(factory)
        bucket: dict = nullable if factory.descriptor.nullable else non_nullable
        base = factory.descriptor.base
        if base in bucket:
            logger.debug("Overriding factory for %s with %r", factory.descriptor, factory)
        bucket[base] = factory

    synthesized = [
        to_nullable_factory(factory)
        for base, factory in non_nullable.items()
        if base not in nullable
    ]
    if synthesized:
        logger.debug(
            "Synthesized %d nullable factories: %s",
            len(synthesized),
            ", ".join(str(f.descriptor) for f in synthesized),
        )

    return MappingProxyType(
        _index_by_descriptor([*non_nullable.values(), *nullable.values(), *synthesized])
    )
