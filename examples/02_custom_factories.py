#!/usr/bin/env python3
"""Example 2: Registering custom factories.

This example shows how to:
1. Write a factory as a decorated function or as a class
2. Derive configs with add() without touching the original
3. Control how nullable counterparts behave
"""

import random
from dataclasses import dataclass

from instantiator import (
    InstantiatorConfig,
    NonNullableInstanceFactory,
    NullableMode,
    TypeDescriptor,
    non_nullable_factory,
    to_nullable_factory,
)


@dataclass(frozen=True)
class Money:
    cents: int
    currency: str


@non_nullable_factory(Money)
def money_factory(rng: random.Random) -> Money:
    return Money(rng.randint(0, 100_000), rng.choice(["EUR", "USD", "GBP"]))


class ShortStringFactory(NonNullableInstanceFactory[str]):
    """Overrides the default 10-character strings with 3-letter words."""

    descriptor = TypeDescriptor(str)

    def create_instance(self, rng: random.Random) -> str:
        return "".join(rng.choices("abcdefghijklmnopqrstuvwxyz", k=3))


def main():
    base = InstantiatorConfig(use_null=False, random=random.Random(1))

    # 1. A new type: the nullable Money? factory is synthesized automatically
    with_money = base + money_factory
    print(f"base: {len(base.instance_factories)} factories")
    print(f"with Money: {len(with_money.instance_factories)} factories")
    print(f"  Money  -> {with_money.create_instance(Money)}")
    print(f"  Money? -> {with_money.create_instance(Money | None)}")

    # 2. Overriding a default type
    short = base.add(ShortStringFactory())
    print(f"\nbase str     -> {base.create_instance(str)!r}")
    print(f"override str -> {short.create_instance(str)!r}")

    # 3. Money? that never yields None
    never_none = with_money.add(to_nullable_factory(money_factory, NullableMode.NEVER_NONE))
    values = [never_none.create_instance(Money | None) for _ in range(5)]
    print(f"\nNEVER_NONE Money?: {values}")

    # The original config never learned about Money
    print(f"base resolves Money: {base.resolve(TypeDescriptor(Money)) is not None}")


if __name__ == "__main__":
    main()
