"""Sample field handlers for loader tests."""

from resolvermap.context import ExecutionContext


def pet_name(ctx: ExecutionContext) -> str:
    return ctx.source["name"]


def pet_tag(ctx: ExecutionContext) -> str | None:
    return ctx.source.get("tag")


def query_pet(ctx: ExecutionContext) -> dict:
    pet_id = ctx.arg("id")
    return {"id": pet_id, "name": f"pet-{pet_id}"}


def failing(ctx: ExecutionContext) -> None:
    raise ConnectionError("db down")


def constant(value=None):
    """Factory: build a handler that always returns ``value``."""

    def handler(ctx: ExecutionContext):
        return value

    return handler


class Namespace:
    @staticmethod
    def owner(ctx: ExecutionContext) -> str:
        return "owner"


NOT_CALLABLE = 42
