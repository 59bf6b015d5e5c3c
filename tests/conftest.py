"""
Shared pytest fixtures and configuration for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from resolvermap.resources import (  # noqa: E402
    FieldResolverSpec,
    ResolverMapResource,
    SchemaResource,
    TypeResolverSpec,
)

PETSTORE_SDL = """
interface Node {
  id: ID!
}

type Pet implements Node {
  id: ID!
  name: String!
  tag: String
}

type Owner implements Node {
  id: ID!
  pets: [Pet!]!
}

union SearchResult = Pet | Owner

enum Species {
  DOG
  CAT
}

input PetFilter {
  tag: String
}

scalar Map

type Query {
  pet(id: ID!): Pet
  pets(filter: PetFilter): [Pet!]!
  search(text: String!): [SearchResult!]!
}
"""

USER_SDL = """
type User {
  id: ID!
  name: String
}

type Query {
  me: User
}
"""


@pytest.fixture
def petstore_sdl() -> str:
    return PETSTORE_SDL


@pytest.fixture
def user_sdl() -> str:
    return USER_SDL


@pytest.fixture
def petstore_schema_resource() -> SchemaResource:
    return SchemaResource(name="petstore", inline_schema=PETSTORE_SDL)


@pytest.fixture
def petstore_resolver_map() -> ResolverMapResource:
    return ResolverMapResource(
        name="petstore",
        types={
            "Pet": TypeResolverSpec(
                fields={
                    "name": FieldResolverSpec(handler="resolvermap.testmods.handlers:pet_name"),
                    "tag": FieldResolverSpec(handler="resolvermap.testmods.handlers.pet_tag"),
                }
            ),
            "Query": TypeResolverSpec(
                fields={
                    "pet": FieldResolverSpec(handler="resolvermap.testmods.handlers:query_pet"),
                }
            ),
        },
    )
