"""Immutable configuration: a factory registry plus instantiation flags."""

from __future__ import annotations

import logging
import random as _random
from collections.abc import Sequence
from dataclasses import InitVar, dataclass, field, replace
from typing import Any

from instantiator.descriptor import TypeDescriptor
from instantiator.errors import UnsupportedTypeError
from instantiator.factories import DEFAULT_INSTANCE_FACTORIES, InstanceFactory
from instantiator.registry import FactoryRegistry, build_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class InstantiatorConfig:
    """Factory registry and behavioral flags for one instantiation session.

    The registry is built once, when the config is created, and never changes.
    Use :meth:`add` (or ``config + factory``) to derive a new config with
    extra or overriding factories; the original stays untouched.

    Args:
        factories: Factories to register. ``None`` uses
            :data:`DEFAULT_INSTANCE_FACTORIES`. Any other sequence replaces
            the defaults entirely and is completed with nullable wrappers.
        use_default_arguments: Whether constructor default arguments should be
            honored instead of generating a value.
        use_null: Whether ``None`` is preferred for nullable values.
        random: Random source handed to every factory. Pass a seeded
            ``random.Random`` for reproducible output; the instance is shared,
            not copied. Defaults to a fresh unseeded ``random.Random``.
        number_of_items_to_fill: How many elements to put in collections.
    """

    factories: InitVar[Sequence[InstanceFactory] | None] = None
    use_default_arguments: bool = field(default=True, kw_only=True)
    use_null: bool = field(default=True, kw_only=True)
    random: _random.Random | None = field(default=None, kw_only=True)
    number_of_items_to_fill: int = field(default=10, kw_only=True)
    instance_factories: FactoryRegistry = field(init=False, repr=False)

    def __post_init__(self, factories: Sequence[InstanceFactory] | None) -> None:
        if self.number_of_items_to_fill < 0:
            raise ValueError(
                f"number_of_items_to_fill must be >= 0, got {self.number_of_items_to_fill}"
            )
        if self.random is None:
            object.__setattr__(self, "random", _random.Random())
        if factories is None:
            factories = DEFAULT_INSTANCE_FACTORIES
        object.__setattr__(self, "instance_factories", build_registry(factories))

    def resolve(self, descriptor: TypeDescriptor) -> InstanceFactory | None:
        """Return the factory registered for exactly ``descriptor``, or ``None``."""
        return self.instance_factories.get(descriptor)

    def add(self, *factories: InstanceFactory) -> InstantiatorConfig:
        """Return a copy of this config with ``factories`` added.

        Factories for an already registered descriptor replace the existing
        one in the copy. Flags and the random source are carried over.
        """
        logger.debug(
            "Deriving config with %d added factories: %s",
            len(factories),
            ", ".join(str(getattr(f, "descriptor", f)) for f in factories),
        )
        return replace(self, factories=(*self.instance_factories.values(), *factories))

    def __add__(self, factory: InstanceFactory) -> InstantiatorConfig:
        if not isinstance(factory, InstanceFactory):
            return NotImplemented
        return self.add(factory)

    def create_instance(self, target: TypeDescriptor | Any) -> Any:
        """Produce one value for a leaf type.

        ``target`` is a descriptor or a type annotation such as ``int`` or
        ``str | None``. Nullable targets yield ``None`` when ``use_null`` is
        set, without drawing from the random source.

        Raises:
            UnsupportedTypeError: If no factory is registered for ``target``.
        """
        descriptor = TypeDescriptor.from_annotation(target)
        if descriptor.nullable and self.use_null:
            return None
        factory = self.resolve(descriptor)
        if factory is None:
            raise UnsupportedTypeError(
                f"No InstanceFactory registered for {descriptor}. "
                "Register one with InstantiatorConfig.add()"
            )
        return factory.create_instance(self.random)
