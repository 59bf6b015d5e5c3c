"""
Type system helpers built on graphql-core.

The registry consumes a ``GraphQLSchema``; these helpers accept the other
forms a host application usually has at hand.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import strawberry
from graphql import (
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLUnionType,
    build_schema,
)

# Built-in scalars and introspection types. Never user-resolvable.
META_TYPES: frozenset[str] = frozenset(
    {
        "Map",
        "Float",
        "ID",
        "Int",
        "Boolean",
        "String",
        "__Type",
        "__TypeKind",
        "__Directive",
        "__EnumValue",
        "__Schema",
        "__InputValue",
        "__DirectiveLocation",
        "__Field",
    }
)

TypeRef = GraphQLNamedType | str


def is_meta_type(type_name: str) -> bool:
    """Check whether a type name belongs to the meta-type exclusion list."""
    return type_name in META_TYPES


def is_field_bearing(named_type: GraphQLNamedType) -> bool:
    """Object and interface types are the only kinds whose fields get handlers."""
    return isinstance(named_type, GraphQLObjectType | GraphQLInterfaceType)


def is_union(named_type: GraphQLNamedType) -> bool:
    return isinstance(named_type, GraphQLUnionType)


def type_name_of(type_ref: TypeRef) -> str:
    """Accept either a named type or its name."""
    if isinstance(type_ref, str):
        return type_ref
    return type_ref.name


def load_type_system(source: GraphQLSchema | strawberry.Schema | str | Path | Any) -> GraphQLSchema:
    """Produce a ``GraphQLSchema`` from an SDL string, SDL file, or existing schema.

    Args:
        source: A ``GraphQLSchema``, a ``strawberry.Schema``, a ``Path`` to an
            SDL file, or SDL source text.

    Returns:
        graphql-core schema

    Raises:
        TypeError: If the source is none of the accepted forms
        graphql.GraphQLError: If the SDL does not parse or validate
    """
    if isinstance(source, GraphQLSchema):
        return source

    if isinstance(source, strawberry.Schema):
        # Same graphql-core schema strawberry executes against
        return source._schema

    if isinstance(source, Path):
        return build_schema(source.read_text(encoding="utf-8"))

    if isinstance(source, str):
        return build_schema(source)

    raise TypeError(f"Cannot build a type system from {type(source).__name__}")
