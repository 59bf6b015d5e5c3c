"""Per-invocation context handed to field handlers."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ExecutionContext:
    """Source value and bound arguments for a single field resolution."""

    source: Any = None
    args: Mapping[str, Any] | None = None

    def arg(self, name: str, default: Any = None) -> Any:
        """Return the bound value of ``name``, or ``default`` when it is unbound."""
        if not self.args:
            return default
        return self.args.get(name, default)


Handler = Callable[[ExecutionContext], Any]


def noop_handler(ctx: ExecutionContext) -> None:
    """Resolve a field that has no configured handler to ``None``."""
    return None
