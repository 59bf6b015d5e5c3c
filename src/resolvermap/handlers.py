"""Resolver-map driven handler loading.

Turns a ``ResolverMapResource`` into a handler table for ``build_registry``.
Each field declares either an import path (``handler``) or an entry point
name (``entrypoint``). Strict mode is enabled by default and fails on the
first declaration that cannot be loaded.
"""

from __future__ import annotations

from collections.abc import Iterable
from importlib import import_module
from importlib import metadata as importlib_metadata
from typing import Any

from .context import Handler
from .errors import HandlerLoadError
from .logging import get_logger
from .resources import FieldResolverSpec, ResolverMapResource

logger = get_logger(__name__)


ENTRYPOINT_GROUP = "resolvermap.handlers"


def _resolve_import_path(qualified_name: str) -> Any:
    if ":" in qualified_name:
        module_name, attr_name = qualified_name.split(":", 1)
    else:
        # Split on last dot for module path
        module_name, attr_name = qualified_name.rsplit(".", 1)

    module = import_module(module_name)
    obj = module
    for part in attr_name.split("."):
        obj = getattr(obj, part)
    return obj


def _resolve_entrypoint(name: str) -> Any:
    try:
        eps = importlib_metadata.entry_points()
        group_filtered: Iterable[Any]
        if hasattr(eps, "select"):
            group_filtered = eps.select(group=ENTRYPOINT_GROUP)
        else:
            group_filtered = eps.get(ENTRYPOINT_GROUP, [])  # type: ignore[attr-defined]
    except Exception as e:  # pragma: no cover - edge cases
        raise RuntimeError(f"Failed to read entry points: {e}") from e

    for ep in group_filtered:
        if getattr(ep, "name", None) == name:
            return ep.load()

    raise LookupError(f"Entry point not found: {name}")


def load_handler(spec: FieldResolverSpec) -> Handler:
    """Import the object a field spec points at and turn it into a handler.

    With ``options`` the imported object is treated as a factory and called
    with them; the result must be callable.
    """
    if spec.handler is not None:
        obj = _resolve_import_path(spec.handler)
    else:
        obj = _resolve_entrypoint(spec.entrypoint)  # type: ignore[arg-type]

    if spec.options:
        obj = obj(**spec.options)

    if not callable(obj):
        raise TypeError(f"Resolved object is not callable: {obj!r}")
    return obj


def handler_table_from_resource(
    resource: ResolverMapResource, strict_mode: bool = True
) -> dict[str, Handler]:
    """Materialize a handler table from a resolver map.

    Raises:
        HandlerLoadError: On the first failing declaration when ``strict_mode``
    """
    table: dict[str, Handler] = {}

    for key, spec in resource.field_specs().items():
        if not spec.enabled:
            continue

        try:
            table[key] = load_handler(spec)
        except Exception as e:
            if strict_mode:
                raise HandlerLoadError(key, str(e)) from e
            logger.error("Failed to load field handler", key=key, error=str(e))
            continue

        logger.debug(
            "Loaded field handler",
            key=key,
            handler=spec.handler,
            entrypoint=spec.entrypoint,
        )

    logger.info(
        "Handler table loaded",
        resolver_map=resource.name,
        declared=len(resource.field_specs()),
        loaded=len(table),
        strict_mode=strict_mode,
    )
    return table
