#!/usr/bin/env python3
"""
CLI entry point for inspecting and storing resolver maps.
"""

import sys
from pathlib import Path

import click

from resolvermap import __version__
from resolvermap.builder import build_registry
from resolvermap.config import Settings
from resolvermap.handlers import handler_table_from_resource
from resolvermap.logging import configure_logging, get_logger
from resolvermap.registry import Registry
from resolvermap.resources import ResolverMapResource, load_resource_documents
from resolvermap.schema import load_type_system
from resolvermap.store import create_resource_store

logger = get_logger(__name__)


def _load_resolver_map(path: str | None) -> ResolverMapResource | None:
    if not path:
        return None
    for resource in load_resource_documents(path):
        if isinstance(resource, ResolverMapResource):
            return resource
    raise click.BadParameter(f"No ResolverMap document found in {path}", param_hint="--resolvers")


def _build(schema: str, resolvers: str | None, strict: bool, union_policy: str) -> Registry:
    type_system = load_type_system(Path(schema))
    resolver_map = _load_resolver_map(resolvers)
    handlers = (
        handler_table_from_resource(resolver_map, strict_mode=strict) if resolver_map else {}
    )
    return build_registry(type_system, handlers, strict=strict, union_policy=union_policy)


def build_options(func):
    """Options shared by commands that build a registry."""
    func = click.option(
        "--union-policy",
        default="skip",
        type=click.Choice(["skip", "reject"]),
        help="How to treat union types (default: skip)",
    )(func)
    func = click.option(
        "--strict",
        is_flag=True,
        default=False,
        help="Fail on handlers that cannot be loaded or match no declared field",
    )(func)
    func = click.option(
        "--resolvers",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="YAML file containing a ResolverMap document",
    )(func)
    func = click.option(
        "--schema",
        required=True,
        type=click.Path(exists=True, dir_okay=False),
        help="GraphQL SDL file",
    )(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="resolvermap")
@click.option("--debug", is_flag=True, default=False, help="Human-readable debug logging")
def cli(debug: bool) -> None:
    """resolvermap CLI - inspect and store schema resolver maps."""
    configure_logging(debug=debug)


@cli.command()
@build_options
def inspect(schema: str, resolvers: str | None, strict: bool, union_policy: str) -> None:
    """Print every registered type field and how it is resolved."""
    try:
        registry = _build(schema, resolvers, strict, union_policy)
    except click.ClickException:
        raise
    except Exception as e:
        logger.error("Registry build failed", error=str(e))
        raise click.ClickException(str(e)) from e

    for type_entry in sorted(registry, key=lambda entry: entry.name):
        click.echo(type_entry.name)
        for field_name, field_entry in type_entry.fields.items():
            binding = "default" if field_entry.is_default else "custom"
            click.echo(f"  {field_name}: {field_entry.type} [{binding}]")

    for union_name in registry.skipped_unions:
        click.echo(f"{union_name} [union, skipped]")
    for key in sorted(registry.unused_handler_keys):
        click.echo(f"unused handler: {key}")


@cli.command()
@build_options
def check(schema: str, resolvers: str | None, strict: bool, union_policy: str) -> None:
    """Build the registry and report whether it is usable."""
    try:
        registry = _build(schema, resolvers, strict, union_policy)
    except click.ClickException:
        raise
    except Exception as e:
        logger.error("Registry build failed", error=str(e))
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    fields = sum(len(entry) for entry in registry)
    click.echo(f"✓ {len(registry)} types, {fields} fields")
    if registry.unused_handler_keys:
        click.echo(f"⚠ {len(registry.unused_handler_keys)} unused handlers")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--store-path",
    required=True,
    type=click.Path(file_okay=False),
    help="Directory of the file resource store",
)
def apply(file: str, store_path: str) -> None:
    """Write the resources in FILE into a file resource store."""
    store = create_resource_store(Settings(store_backend="file", store_path=store_path))
    resources = load_resource_documents(file)
    for resource in resources:
        store.write(resource)
        click.echo(f"{resource.kind} {resource.namespace}.{resource.name} stored")

    logger.info("Applied resources", count=len(resources), store_path=store_path)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
