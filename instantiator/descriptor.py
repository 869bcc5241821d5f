"""Type descriptors: the registry key combining a base type with nullability."""

from __future__ import annotations

import types
import typing
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any

_NONE_TYPE = type(None)


def type_name(base: Any) -> str:
    """Readable name for a base type key (classes, NewType tags, anything else)."""
    return getattr(base, "__qualname__", None) or getattr(base, "__name__", None) or repr(base)


@dataclass(frozen=True)
class TypeDescriptor:
    """Identity of a value type plus its nullability.

    Two descriptors are equal iff ``base`` and ``nullable`` are equal, so
    ``TypeDescriptor(int)`` and ``TypeDescriptor(int, nullable=True)`` are
    distinct registry keys that share a base type.
    """

    base: Hashable
    nullable: bool = False

    def __post_init__(self) -> None:
        if self.base is None or self.base is _NONE_TYPE:
            raise TypeError("NoneType is not a valid base type; use nullable=True instead")

    def with_nullability(self, nullable: bool) -> TypeDescriptor:
        if nullable == self.nullable:
            return self
        return TypeDescriptor(self.base, nullable)

    def as_nullable(self) -> TypeDescriptor:
        return self.with_nullability(True)

    def as_non_nullable(self) -> TypeDescriptor:
        return self.with_nullability(False)

    def __str__(self) -> str:
        return f"{type_name(self.base)}{'?' if self.nullable else ''}"

    @classmethod
    def from_annotation(cls, annotation: Any) -> TypeDescriptor:
        """Build a descriptor from a type annotation.

        ``Optional[X]`` and ``X | None`` map to a nullable descriptor of ``X``;
        anything else maps to a non-nullable descriptor of the annotation
        itself.

        Raises:
            TypeError: If the annotation is a union of several non-None types.
        """
        if isinstance(annotation, TypeDescriptor):
            return annotation
        origin = typing.get_origin(annotation)
        if origin is typing.Union or origin is types.UnionType:
            members = [a for a in typing.get_args(annotation) if a is not _NONE_TYPE]
            if len(members) != 1:
                raise TypeError(
                    f"Cannot build a descriptor for union {annotation!r}: "
                    "only Optional[X] unions are supported"
                )
            return cls(members[0], nullable=True)
        return cls(annotation)
