"""
Tests for the in-memory resource store.
"""

import pytest

from resolvermap.errors import ResourceNotFound
from resolvermap.resources import SchemaResource
from resolvermap.store import MemoryResourceStore


class TestMemoryResourceStore:
    """Tests for MemoryResourceStore."""

    def setup_method(self):
        self.store = MemoryResourceStore()

    def test_write_and_read(self, petstore_schema_resource, petstore_resolver_map):
        self.store.write_schema(petstore_schema_resource)
        self.store.write_resolver_map(petstore_resolver_map)

        assert self.store.read_schema("default", "petstore") == petstore_schema_resource
        assert self.store.read_resolver_map("default", "petstore") == petstore_resolver_map

    def test_read_missing(self):
        with pytest.raises(ResourceNotFound) as exc_info:
            self.store.read_schema("default", "nope")

        assert exc_info.value.kind == "Schema"
        assert exc_info.value.name == "nope"

    def test_kinds_are_separate(self, petstore_schema_resource):
        self.store.write_schema(petstore_schema_resource)

        with pytest.raises(ResourceNotFound):
            self.store.read_resolver_map("default", "petstore")

    def test_namespaces_are_separate(self, petstore_schema_resource):
        self.store.write_schema(petstore_schema_resource)

        assert self.store.list_schemas("other") == []
        with pytest.raises(ResourceNotFound):
            self.store.read_schema("other", "petstore")

    def test_list_sorted_by_name(self):
        for name in ("b", "a", "c"):
            self.store.write_schema(SchemaResource(name=name, inline_schema="type Q { a: Int }"))

        assert [r.name for r in self.store.list_schemas("default")] == ["a", "b", "c"]
        assert self.store.list_resolver_maps("default") == []

    def test_reads_are_copies(self, petstore_resolver_map):
        self.store.write_resolver_map(petstore_resolver_map)

        stored = self.store.read_resolver_map("default", "petstore")
        stored.types.clear()

        assert self.store.read_resolver_map("default", "petstore").types

    def test_delete(self, petstore_schema_resource):
        self.store.write_schema(petstore_schema_resource)

        assert self.store.delete("Schema", "default", "petstore") is True
        assert self.store.delete("Schema", "default", "petstore") is False
        with pytest.raises(ResourceNotFound):
            self.store.read_schema("default", "petstore")
