"""Errors raised while building registries and resolving factories."""

from __future__ import annotations


class InstantiatorError(Exception):
    """Base class for instantiator errors."""


class FactoryCapabilityError(InstantiatorError, TypeError):
    """A factory's declared nullability disagrees with the variant it implements."""


class DuplicateDescriptorError(InstantiatorError, ValueError):
    """Two factories ended up claiming the same descriptor in a finished registry."""


class UnsupportedTypeError(InstantiatorError, LookupError):
    """No factory is registered for a requested descriptor."""
