"""
Registry construction from a type system and a handler table.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from graphql import GraphQLSchema

from .context import Handler, noop_handler
from .errors import UnknownHandlerKeysError, UnsupportedUnionError
from .logging import get_logger
from .registry import FieldEntry, Registry, TypeEntry
from .schema import is_field_bearing, is_meta_type, is_union, load_type_system

logger = get_logger(__name__)

UnionPolicy = Literal["skip", "reject"]


def handler_key(type_name: str, field_name: str) -> str:
    """Handler table key for a type's field."""
    return f"{type_name}.{field_name}"


def build_registry(
    type_system: GraphQLSchema | str | Path | Any,
    handlers: Mapping[str, Handler] | None = None,
    *,
    strict: bool = False,
    union_policy: UnionPolicy = "skip",
) -> Registry:
    """Build an immutable registry of field handlers.

    Every object and interface field declared by the schema is bound to the
    handler found under ``"<Type>.<field>"`` in ``handlers``, or to a no-op
    handler when there is none. Meta types are never registered, and types
    left without fields are dropped.

    Args:
        type_system: Schema, or anything ``load_type_system`` accepts
        handlers: Mapping of ``"Type.field"`` keys to handler callables
        strict: Raise instead of warn when handler keys match no declared field
        union_policy: ``"skip"`` leaves unions out of the registry with a
            warning, ``"reject"`` raises

    Returns:
        Registry instance

    Raises:
        UnknownHandlerKeysError: If ``strict`` and some handler keys are unused
        UnsupportedUnionError: If ``union_policy`` is ``"reject"`` and the
            schema declares a union
        TypeError: If a handler table value is not callable
    """
    schema = load_type_system(type_system)
    handler_table = dict(handlers or {})

    for key, handler in handler_table.items():
        if not callable(handler):
            raise TypeError(f"Handler for {key} is not callable: {handler!r}")

    types: dict[str, TypeEntry] = {}
    used_keys: set[str] = set()
    skipped_unions: list[str] = []

    for type_name, named_type in schema.type_map.items():
        if is_meta_type(type_name):
            logger.debug("Skipping meta type", type=type_name)
            continue

        if is_union(named_type):
            if union_policy == "reject":
                raise UnsupportedUnionError(type_name)
            logger.warning(
                "Union type has no resolvable fields; skipping",
                type=type_name,
                members=[member.name for member in named_type.types],
            )
            skipped_unions.append(type_name)
            continue

        if not is_field_bearing(named_type):
            continue

        fields: dict[str, FieldEntry] = {}
        for field_name, field in named_type.fields.items():
            key = handler_key(type_name, field_name)
            handler = handler_table.get(key)
            if handler is None:
                fields[field_name] = FieldEntry(
                    name=field_name, type=field.type, handler=noop_handler, is_default=True
                )
            else:
                used_keys.add(key)
                fields[field_name] = FieldEntry(name=field_name, type=field.type, handler=handler)

        if not fields:
            continue

        types[type_name] = TypeEntry(named_type, fields)

    unused_keys = set(handler_table) - used_keys
    if unused_keys:
        if strict:
            raise UnknownHandlerKeysError(unused_keys)
        logger.warning(
            "Handlers reference undeclared fields and will never be called",
            keys=sorted(unused_keys),
        )

    registry = Registry(types, unused_handler_keys=unused_keys, skipped_unions=skipped_unions)

    logger.info(
        "Registry built",
        types=len(registry),
        fields=sum(len(entry) for entry in registry),
        custom_handlers=len(used_keys),
        unused_handlers=len(unused_keys),
        skipped_unions=skipped_unions,
    )
    return registry
