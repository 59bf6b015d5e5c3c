"""Core resource store interface."""

from abc import ABC, abstractmethod

from ..errors import ResourceStoreError
from ..resources import (
    RESOLVER_MAP_KIND,
    SCHEMA_KIND,
    Resource,
    ResolverMapResource,
    SchemaResource,
)


class ResourceStore(ABC):
    """Abstract base class for schema and resolver map storage.

    Resources are addressed by kind, namespace and name. Writes replace any
    existing resource with the same address.
    """

    @abstractmethod
    def read(self, kind: str, namespace: str, name: str) -> Resource:
        """Read a resource.

        Raises:
            ResourceNotFound: If no such resource exists
        """
        pass

    @abstractmethod
    def write(self, resource: Resource) -> None:
        pass

    @abstractmethod
    def list_resources(self, kind: str, namespace: str) -> list[Resource]:
        """List resources of a kind in a namespace, ordered by name."""
        pass

    @abstractmethod
    def delete(self, kind: str, namespace: str, name: str) -> bool:
        """Delete a resource. Returns False if it did not exist."""
        pass

    def read_schema(self, namespace: str, name: str) -> SchemaResource:
        resource = self.read(SCHEMA_KIND, namespace, name)
        if not isinstance(resource, SchemaResource):
            raise ResourceStoreError(
                f"expected {SCHEMA_KIND} {namespace}.{name}, got {resource.kind}"
            )
        return resource

    def write_schema(self, resource: SchemaResource) -> None:
        self.write(resource)

    def list_schemas(self, namespace: str) -> list[SchemaResource]:
        return [
            r for r in self.list_resources(SCHEMA_KIND, namespace) if isinstance(r, SchemaResource)
        ]

    def read_resolver_map(self, namespace: str, name: str) -> ResolverMapResource:
        resource = self.read(RESOLVER_MAP_KIND, namespace, name)
        if not isinstance(resource, ResolverMapResource):
            raise ResourceStoreError(
                f"expected {RESOLVER_MAP_KIND} {namespace}.{name}, got {resource.kind}"
            )
        return resource

    def write_resolver_map(self, resource: ResolverMapResource) -> None:
        self.write(resource)

    def list_resolver_maps(self, namespace: str) -> list[ResolverMapResource]:
        return [
            r
            for r in self.list_resources(RESOLVER_MAP_KIND, namespace)
            if isinstance(r, ResolverMapResource)
        ]
