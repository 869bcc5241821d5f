"""instantiator: random instances of primitive and well-known types for test fixtures."""

try:
    from importlib.metadata import version

    __version__ = version("instantiator")
except Exception:
    __version__ = "0.0.0.dev0"

from instantiator.config import InstantiatorConfig
from instantiator.descriptor import TypeDescriptor
from instantiator.errors import (
    DuplicateDescriptorError,
    FactoryCapabilityError,
    InstantiatorError,
    UnsupportedTypeError,
)
from instantiator.factories import (
    DEFAULT_INSTANCE_FACTORIES,
    DEFAULT_TYPES,
    FunctionInstanceFactory,
    FunctionNullableInstanceFactory,
    InstanceFactory,
    NonNullableInstanceFactory,
    NullableInstanceFactory,
    NullableMode,
    non_nullable_factory,
    nullable_factory,
    to_nullable_factory,
)
from instantiator.registry import build_registry

__all__ = [
    "DEFAULT_INSTANCE_FACTORIES",
    "DEFAULT_TYPES",
    "DuplicateDescriptorError",
    "FactoryCapabilityError",
    "FunctionInstanceFactory",
    "FunctionNullableInstanceFactory",
    "InstanceFactory",
    "InstantiatorConfig",
    "InstantiatorError",
    "NonNullableInstanceFactory",
    "NullableInstanceFactory",
    "NullableMode",
    "TypeDescriptor",
    "UnsupportedTypeError",
    "__version__",
    "build_registry",
    "non_nullable_factory",
    "nullable_factory",
    "to_nullable_factory",
]
