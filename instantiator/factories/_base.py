"""Instance factory capability variants.

A factory advertises exactly one :class:`TypeDescriptor` and produces values
for it from a ``random.Random``. There are two mutually exclusive variants:

* :class:`NonNullableInstanceFactory` always returns a value.
* :class:`NullableInstanceFactory` may return ``None``.

Factories are stateless: the only input is the random source, so the same
random state always yields the same sequence of values.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from instantiator.descriptor import TypeDescriptor

T = TypeVar("T")


def _func_name(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


class InstanceFactory(ABC):
    """Common base of both factory variants."""

    descriptor: TypeDescriptor
    # Declared by each variant; a class may descend from only one of them.
    _variant: str | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        variants = {k.__dict__["_variant"] for k in cls.__mro__ if "_variant" in k.__dict__}
        variants.discard(None)
        if len(variants) > 1:
            raise TypeError(
                f"{cls.__qualname__} cannot be both a NonNullableInstanceFactory "
                "and a NullableInstanceFactory"
            )

    @abstractmethod
    def create_instance(self, rng: random.Random) -> Any: ...


class NonNullableInstanceFactory(InstanceFactory, Generic[T]):
    """Factory that always produces a concrete value."""

    _variant = "non_nullable"

    @abstractmethod
    def create_instance(self, rng: random.Random) -> T: ...


class NullableInstanceFactory(InstanceFactory, Generic[T]):
    """Factory that may produce ``None``."""

    _variant = "nullable"

    @abstractmethod
    def create_instance(self, rng: random.Random) -> T | None: ...


@dataclass(frozen=True)
class FunctionInstanceFactory(NonNullableInstanceFactory[T]):
    """Non-nullable factory backed by a plain ``(rng) -> value`` function."""

    descriptor: TypeDescriptor
    func: Callable[[random.Random], T]

    def create_instance(self, rng: random.Random) -> T:
        return self.func(rng)

    def __repr__(self) -> str:
        return f"FunctionInstanceFactory({self.descriptor}, {_func_name(self.func)})"


@dataclass(frozen=True)
class FunctionNullableInstanceFactory(NullableInstanceFactory[T]):
    """Nullable factory backed by a plain ``(rng) -> value | None`` function."""

    descriptor: TypeDescriptor
    func: Callable[[random.Random], T | None]

    def create_instance(self, rng: random.Random) -> T | None:
        return self.func(rng)

    def __repr__(self) -> str:
        return f"FunctionNullableInstanceFactory({self.descriptor}, {_func_name(self.func)})"


def non_nullable_factory(
    base: Hashable,
) -> Callable[[Callable[[random.Random], T]], FunctionInstanceFactory[T]]:
    """Decorator turning a generator function into a non-nullable factory for ``base``.

    Example::

        @non_nullable_factory(Money)
        def money_factory(rng):
            return Money(rng.randint(0, 10_000), "EUR")
    """

    def decorator(func: Callable[[random.Random], T]) -> FunctionInstanceFactory[T]:
        return FunctionInstanceFactory(TypeDescriptor(base), func)

    return decorator


def nullable_factory(
    base: Hashable,
) -> Callable[[Callable[[random.Random], T | None]], FunctionNullableInstanceFactory[T]]:
    """Decorator turning a generator function into a nullable factory for ``base``."""

    def decorator(
        func: Callable[[random.Random], T | None],
    ) -> FunctionNullableInstanceFactory[T]:
        return FunctionNullableInstanceFactory(TypeDescriptor(base, nullable=True), func)

    return decorator
