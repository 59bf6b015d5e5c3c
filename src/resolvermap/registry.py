"""
Immutable Type -> Field -> Handler index and the dispatch entry points.

A registry is built once (see ``resolvermap.builder``) and then only read,
so a single instance can be shared by any number of concurrent resolvers.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from graphql import GraphQLNamedType, GraphQLOutputType

from .context import ExecutionContext, Handler
from .errors import FieldNotFound, HandlerExecutionError, TypeNotFound
from .logging import get_logger
from .schema import TypeRef, type_name_of

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldEntry:
    """A field's declared result type paired with its bound handler."""

    name: str
    type: GraphQLOutputType
    handler: Handler
    is_default: bool = False


class TypeEntry:
    """Read-only field table for one registered type."""

    __slots__ = ("_type", "_fields")

    def __init__(self, named_type: GraphQLNamedType, fields: Mapping[str, FieldEntry]):
        self._type = named_type
        self._fields = MappingProxyType(dict(fields))

    @property
    def type(self) -> GraphQLNamedType:
        return self._type

    @property
    def name(self) -> str:
        return self._type.name

    @property
    def fields(self) -> Mapping[str, FieldEntry]:
        return self._fields

    def get(self, field_name: str) -> FieldEntry | None:
        return self._fields.get(field_name)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"TypeEntry({self.name!r}, fields={list(self._fields)!r})"


class Registry:
    """
    Index of field handlers keyed by type name and field name.

    Lookups accept either a graphql-core named type or its name. Every
    registered field has a handler; fields with no configured handler are
    bound to a no-op that resolves to ``None``.
    """

    __slots__ = ("_types", "_unused_handler_keys", "_skipped_unions")

    def __init__(
        self,
        types: Mapping[str, TypeEntry],
        unused_handler_keys: Iterable[str] = (),
        skipped_unions: Iterable[str] = (),
    ):
        self._types = MappingProxyType(dict(types))
        self._unused_handler_keys = frozenset(unused_handler_keys)
        self._skipped_unions = tuple(skipped_unions)

    @property
    def unused_handler_keys(self) -> frozenset[str]:
        """Handler table keys that matched no declared field."""
        return self._unused_handler_keys

    @property
    def skipped_unions(self) -> tuple[str, ...]:
        """Union types left out of the registry."""
        return self._skipped_unions

    def types(self) -> list[str]:
        """List registered type names."""
        return list(self._types.keys())

    def get_type(self, type_ref: TypeRef) -> TypeEntry | None:
        return self._types.get(type_name_of(type_ref))

    def get_field(self, type_ref: TypeRef, field_name: str) -> FieldEntry:
        """
        Look up the field entry for a type and field.

        Raises:
            TypeNotFound: If the type is not registered
            FieldNotFound: If the type does not declare the field
        """
        type_name = type_name_of(type_ref)
        type_entry = self._types.get(type_name)
        if type_entry is None:
            raise TypeNotFound(type_name)
        field_entry = type_entry.get(field_name)
        if field_entry is None:
            raise FieldNotFound(type_name, field_name)
        return field_entry

    def resolve(
        self,
        type_ref: TypeRef,
        field_name: str,
        ctx: ExecutionContext | None = None,
    ) -> Any:
        """
        Invoke the handler bound to ``type_ref.field_name``.

        The handler's value is returned unchanged. If the handler returns an
        awaitable it is returned as-is; use ``resolve_async`` to await it.

        Raises:
            TypeNotFound: If the type is not registered
            FieldNotFound: If the type does not declare the field
            HandlerExecutionError: If the handler raises
        """
        field_entry = self.get_field(type_ref, field_name)
        type_name = type_name_of(type_ref)
        try:
            return field_entry.handler(ctx if ctx is not None else ExecutionContext())
        except Exception as e:
            logger.debug(
                "Field handler failed",
                type=type_name,
                field=field_name,
                error=str(e),
            )
            raise HandlerExecutionError(type_name, field_name, e) from e

    async def resolve_async(
        self,
        type_ref: TypeRef,
        field_name: str,
        ctx: ExecutionContext | None = None,
    ) -> Any:
        """Like ``resolve``, awaiting the handler's result when it is awaitable."""
        field_entry = self.get_field(type_ref, field_name)
        type_name = type_name_of(type_ref)
        try:
            result = field_entry.handler(ctx if ctx is not None else ExecutionContext())
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as e:
            logger.debug(
                "Field handler failed",
                type=type_name,
                field=field_name,
                error=str(e),
            )
            raise HandlerExecutionError(type_name, field_name, e) from e

    def __contains__(self, type_ref: object) -> bool:
        if not isinstance(type_ref, str | GraphQLNamedType):
            return False
        return type_name_of(type_ref) in self._types

    def __iter__(self) -> Iterator[TypeEntry]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"Registry(types={list(self._types)!r})"


def resolve(
    registry: Registry,
    type_ref: TypeRef,
    field_name: str,
    ctx: ExecutionContext | None = None,
) -> Any:
    """Dispatch a single field resolution against ``registry``."""
    return registry.resolve(type_ref, field_name, ctx)
