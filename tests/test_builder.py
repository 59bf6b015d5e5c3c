"""
Tests for registry construction.
"""

import pytest
from graphql import (
    GraphQLField,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
    build_schema,
)

from resolvermap.builder import build_registry, handler_key
from resolvermap.context import noop_handler
from resolvermap.errors import UnknownHandlerKeysError, UnsupportedUnionError
from resolvermap.schema import META_TYPES


def pet_name(ctx):
    return "rex"


class TestBuildRegistry:
    """Tests for build_registry."""

    def test_meta_types_never_registered(self, petstore_sdl):
        handlers = {f"{name}.anything": pet_name for name in META_TYPES}
        handlers["__Type.name"] = pet_name
        handlers["String.length"] = pet_name

        registry = build_registry(petstore_sdl, handlers)

        for name in META_TYPES:
            assert name not in registry
            assert registry.get_type(name) is None

    def test_object_and_interface_fields_registered(self, petstore_sdl):
        registry = build_registry(petstore_sdl, {"Pet.name": pet_name})

        assert set(registry.types()) == {"Node", "Pet", "Owner", "Query"}
        assert set(registry.get_type("Pet").fields) == {"id", "name", "tag"}
        assert set(registry.get_type("Node").fields) == {"id"}

    def test_supplied_handler_bound(self, petstore_sdl):
        registry = build_registry(petstore_sdl, {"Pet.name": pet_name})

        entry = registry.get_field("Pet", "name")
        assert entry.handler is pet_name
        assert entry.is_default is False
        assert str(entry.type) == "String!"

    def test_missing_handler_bound_to_noop(self, petstore_sdl):
        registry = build_registry(petstore_sdl, {})

        entry = registry.get_field("Pet", "tag")
        assert entry.handler is noop_handler
        assert entry.is_default is True

    def test_every_field_has_a_handler(self, petstore_sdl):
        registry = build_registry(petstore_sdl, None)

        for type_entry in registry:
            assert len(type_entry) > 0
            for field_entry in type_entry.fields.values():
                assert callable(field_entry.handler)

    def test_non_field_types_dropped(self, petstore_sdl):
        registry = build_registry(petstore_sdl, {})

        assert "Species" not in registry
        assert "PetFilter" not in registry
        assert "Map" not in registry

    def test_type_without_fields_dropped(self):
        empty = GraphQLObjectType("Empty", {})
        query = GraphQLObjectType("Query", {"hello": GraphQLField(GraphQLString)})
        schema = GraphQLSchema(query=query, types=[empty])

        registry = build_registry(schema, {})

        assert "Empty" not in registry
        assert "Query" in registry

    def test_field_type_kept_by_reference(self, petstore_sdl):
        schema = build_schema(petstore_sdl)
        registry = build_registry(schema, {})

        pet_type = schema.type_map["Pet"]
        assert registry.get_type("Pet").type is pet_type
        assert registry.get_field("Pet", "tag").type is pet_type.fields["tag"].type

    def test_union_skipped_by_default(self, petstore_sdl):
        registry = build_registry(petstore_sdl, {})

        assert "SearchResult" not in registry
        assert registry.skipped_unions == ("SearchResult",)

    def test_union_rejected_when_configured(self, petstore_sdl):
        with pytest.raises(UnsupportedUnionError) as exc_info:
            build_registry(petstore_sdl, {}, union_policy="reject")

        assert exc_info.value.type_name == "SearchResult"
        assert "SearchResult" in str(exc_info.value)

    def test_unused_handler_keys_recorded(self, petstore_sdl):
        registry = build_registry(
            petstore_sdl,
            {"Pet.name": pet_name, "Pet.nmae": pet_name, "Ghost.field": pet_name},
        )

        assert registry.unused_handler_keys == {"Pet.nmae", "Ghost.field"}
        assert registry.get_field("Pet", "name").handler is pet_name

    def test_union_handler_keys_are_unused(self, petstore_sdl):
        registry = build_registry(petstore_sdl, {"SearchResult.Pet": pet_name})

        assert registry.unused_handler_keys == {"SearchResult.Pet"}

    def test_strict_build_rejects_unused_keys(self, petstore_sdl):
        with pytest.raises(UnknownHandlerKeysError) as exc_info:
            build_registry(petstore_sdl, {"Pet.nmae": pet_name}, strict=True)

        assert exc_info.value.keys == ["Pet.nmae"]

    def test_strict_build_accepts_matching_keys(self, petstore_sdl):
        registry = build_registry(petstore_sdl, {"Pet.name": pet_name}, strict=True)

        assert registry.unused_handler_keys == frozenset()

    def test_non_callable_handler_rejected(self, petstore_sdl):
        with pytest.raises(TypeError):
            build_registry(petstore_sdl, {"Pet.name": "not a function"})

    def test_handler_table_copied_at_build(self, petstore_sdl):
        handlers = {"Pet.name": pet_name}
        registry = build_registry(petstore_sdl, handlers)

        handlers["Pet.name"] = lambda ctx: "changed"
        handlers["Pet.tag"] = lambda ctx: "added"

        assert registry.get_field("Pet", "name").handler is pet_name
        assert registry.get_field("Pet", "tag").handler is noop_handler


def test_registry_is_read_only(petstore_sdl):
    registry = build_registry(petstore_sdl, {})
    type_entry = registry.get_type("Pet")

    with pytest.raises(TypeError):
        type_entry.fields["extra"] = type_entry.fields["name"]  # type: ignore[index]
    with pytest.raises(AttributeError):
        registry.get_field("Pet", "name").handler = pet_name  # type: ignore[misc]


def test_handler_key():
    assert handler_key("User", "name") == "User.name"
