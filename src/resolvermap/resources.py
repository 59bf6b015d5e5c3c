"""
Declarative resource documents: schemas and resolver maps.

Documents share one shape on disk::

    kind: ResolverMap
    metadata:
      name: petstore
      namespace: default
    spec:
      types:
        Pet:
          fields:
            name:
              handler: "petstore.handlers:pet_name"
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, model_validator

SCHEMA_KIND = "Schema"
RESOLVER_MAP_KIND = "ResolverMap"


class FieldResolverSpec(BaseModel):
    """How to obtain the handler for one field."""

    handler: str | None = None
    entrypoint: str | None = None
    options: dict[str, Any] = Field(default_factory=dict)
    enabled: bool = True

    @model_validator(mode="after")
    def _exactly_one_source(self) -> FieldResolverSpec:
        if (self.handler is None) == (self.entrypoint is None):
            raise ValueError("Field resolver must declare exactly one of: handler, entrypoint")
        return self


class TypeResolverSpec(BaseModel):
    fields: dict[str, FieldResolverSpec] = Field(default_factory=dict)


class SchemaResource(BaseModel):
    """A named schema stored as SDL text."""

    kind: Literal["Schema"] = SCHEMA_KIND
    name: str
    namespace: str = "default"
    inline_schema: str


class ResolverMapResource(BaseModel):
    """A named mapping of type fields to handler declarations."""

    kind: Literal["ResolverMap"] = RESOLVER_MAP_KIND
    name: str
    namespace: str = "default"
    types: dict[str, TypeResolverSpec] = Field(default_factory=dict)

    def field_specs(self) -> dict[str, FieldResolverSpec]:
        """Flatten to ``"Type.field"`` keys."""
        return {
            f"{type_name}.{field_name}": spec
            for type_name, type_spec in self.types.items()
            for field_name, spec in type_spec.fields.items()
        }


Resource = SchemaResource | ResolverMapResource


def resource_to_document(resource: Resource) -> dict[str, Any]:
    """Render a resource in the on-disk document shape."""
    spec = resource.model_dump(exclude={"kind", "name", "namespace"}, exclude_defaults=False)
    return {
        "kind": resource.kind,
        "metadata": {"name": resource.name, "namespace": resource.namespace},
        "spec": spec,
    }


def resource_from_document(data: dict[str, Any]) -> Resource:
    """Parse one document into a resource model.

    Raises:
        ValueError: If the document kind is unknown
        pydantic.ValidationError: If the document fails validation
    """
    kind = data.get("kind")
    metadata = data.get("metadata") or {}
    spec = data.get("spec") or {}
    fields = {
        **spec,
        "name": metadata.get("name"),
        "namespace": metadata.get("namespace", "default"),
    }

    if kind == SCHEMA_KIND:
        return SchemaResource.model_validate(fields)
    if kind == RESOLVER_MAP_KIND:
        return ResolverMapResource.model_validate(fields)
    raise ValueError(f"Unknown resource kind: {kind}")


def load_resource_documents(path: str | Path) -> list[Resource]:
    """Read every resource from a (possibly multi-document) YAML file."""
    with open(path, encoding="utf-8") as f:
        documents = [doc for doc in yaml.safe_load_all(f) if doc]

    resources: list[Resource] = []
    for doc in documents:
        if not isinstance(doc, dict):
            raise ValueError(f"Invalid resource document type: {type(doc)}")
        resources.append(resource_from_document(doc))
    return resources
