"""
Exceptions raised while building registries and dispatching field resolvers.
"""

from collections.abc import Iterable


class ResolverMapError(Exception):
    """Base exception for resolvermap."""

    pass


class ResolverLookupError(ResolverMapError):
    """No resolver is registered for the requested type or field."""

    pass


class TypeNotFound(ResolverLookupError):
    """Dispatch requested against a type absent from the registry."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"type {type_name} unknown")


class FieldNotFound(ResolverLookupError):
    """Dispatch requested for a field not declared on a registered type."""

    def __init__(self, type_name: str, field_name: str):
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(f"type {type_name} does not contain field {field_name}")


class HandlerExecutionError(ResolverMapError):
    """A bound handler raised while resolving a field.

    The original exception is available as ``cause`` and ``__cause__``.
    """

    def __init__(self, type_name: str, field_name: str, cause: BaseException):
        self.type_name = type_name
        self.field_name = field_name
        self.cause = cause
        super().__init__(f"failed executing resolver for {type_name}.{field_name}: {cause}")


class RegistryBuildError(ResolverMapError):
    """Registry construction was rejected by a strict build policy."""

    pass


class UnknownHandlerKeysError(RegistryBuildError):
    """Handler table entries reference type/field pairs the schema does not declare."""

    def __init__(self, keys: Iterable[str]):
        self.keys = sorted(keys)
        super().__init__(f"handlers reference undeclared fields: {', '.join(self.keys)}")


class UnsupportedUnionError(RegistryBuildError):
    """The schema declares a union and the build policy rejects unions."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(
            f"union {type_name} cannot be resolved directly; "
            "declare its fields on the member types instead"
        )


class HandlerLoadError(ResolverMapError):
    """A resolver map names a handler that could not be imported."""

    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(f"failed to load handler for {key}: {reason}")


class ResourceStoreError(ResolverMapError):
    """Base exception for resource store operations."""

    pass


class ResourceNotFound(ResourceStoreError):
    """The requested resource does not exist in the store."""

    def __init__(self, kind: str, namespace: str, name: str):
        self.kind = kind
        self.namespace = namespace
        self.name = name
        super().__init__(f"{kind} {namespace}.{name} not found")
