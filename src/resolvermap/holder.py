"""
Publish-once holder for a registry built from stored resources.

Each ``reload`` builds a complete new registry before swapping the published
reference, so dispatch calls already running keep the registry they started
with.
"""

from __future__ import annotations

import threading
from typing import Any

from .builder import UnionPolicy, build_registry
from .config import Settings
from .context import ExecutionContext
from .handlers import handler_table_from_resource
from .logging import get_logger, reset_resolver_context, set_resolver_context
from .registry import Registry
from .schema import TypeRef, load_type_system
from .store.base import ResourceStore

logger = get_logger(__name__)


class RegistryHolder:
    """Serve dispatch calls from the most recently built registry."""

    def __init__(
        self,
        store: ResourceStore,
        namespace: str,
        schema_name: str,
        resolver_map_name: str,
        *,
        strict: bool = False,
        union_policy: UnionPolicy = "skip",
    ):
        self.store = store
        self.namespace = namespace
        self.schema_name = schema_name
        self.resolver_map_name = resolver_map_name
        self.strict = strict
        self.union_policy = union_policy
        self._registry: Registry | None = None
        self._reload_lock = threading.Lock()

    @classmethod
    def from_settings(cls, store: ResourceStore, settings: Settings) -> RegistryHolder:
        if not settings.schema_name or not settings.resolver_map_name:
            raise ValueError("Settings must name both 'schema_name' and 'resolver_map_name'")
        return cls(
            store,
            settings.namespace,
            settings.schema_name,
            settings.resolver_map_name,
            strict=settings.strict_handlers,
            union_policy=settings.union_policy,
        )

    @property
    def registry(self) -> Registry:
        """The currently published registry.

        Raises:
            RuntimeError: If ``reload`` has never succeeded
        """
        registry = self._registry
        if registry is None:
            raise RuntimeError("Registry has not been loaded; call reload() first")
        return registry

    @property
    def loaded(self) -> bool:
        return self._registry is not None

    def reload(self) -> Registry:
        """Rebuild the registry from the store and publish it.

        On failure the previously published registry stays in place and the
        error propagates.
        """
        with self._reload_lock:
            tokens = set_resolver_context(
                resolver_map=self.resolver_map_name, namespace=self.namespace
            )
            try:
                schema_resource = self.store.read_schema(self.namespace, self.schema_name)
                resolver_map = self.store.read_resolver_map(
                    self.namespace, self.resolver_map_name
                )

                type_system = load_type_system(schema_resource.inline_schema)
                handlers = handler_table_from_resource(resolver_map, strict_mode=self.strict)
                registry = build_registry(
                    type_system,
                    handlers,
                    strict=self.strict,
                    union_policy=self.union_policy,
                )
            except Exception as e:
                logger.error("Registry reload failed", error=str(e))
                raise
            finally:
                reset_resolver_context(tokens)

            # Single reference assignment publishes the fully built registry
            self._registry = registry
            logger.info("Registry published", types=len(registry))
            return registry

    def resolve(
        self,
        type_ref: TypeRef,
        field_name: str,
        ctx: ExecutionContext | None = None,
    ) -> Any:
        return self.registry.resolve(type_ref, field_name, ctx)

    async def resolve_async(
        self,
        type_ref: TypeRef,
        field_name: str,
        ctx: ExecutionContext | None = None,
    ) -> Any:
        return await self.registry.resolve_async(type_ref, field_name, ctx)
