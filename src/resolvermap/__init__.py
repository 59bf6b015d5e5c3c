"""
resolvermap
Schema-driven field resolver registry and dispatch
"""

__version__ = "0.1.0"

from .builder import build_registry, handler_key
from .context import ExecutionContext, Handler, noop_handler
from .errors import (
    FieldNotFound,
    HandlerExecutionError,
    HandlerLoadError,
    RegistryBuildError,
    ResolverLookupError,
    ResolverMapError,
    ResourceNotFound,
    ResourceStoreError,
    TypeNotFound,
    UnknownHandlerKeysError,
    UnsupportedUnionError,
)
from .holder import RegistryHolder
from .registry import FieldEntry, Registry, TypeEntry, resolve
from .schema import META_TYPES, is_meta_type, load_type_system

__all__ = [
    "__version__",
    "build_registry",
    "handler_key",
    "resolve",
    "load_type_system",
    "META_TYPES",
    "is_meta_type",
    "ExecutionContext",
    "Handler",
    "noop_handler",
    "Registry",
    "TypeEntry",
    "FieldEntry",
    "RegistryHolder",
    "ResolverMapError",
    "ResolverLookupError",
    "TypeNotFound",
    "FieldNotFound",
    "HandlerExecutionError",
    "RegistryBuildError",
    "UnknownHandlerKeysError",
    "UnsupportedUnionError",
    "HandlerLoadError",
    "ResourceStoreError",
    "ResourceNotFound",
]
