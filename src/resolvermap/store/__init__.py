"""Resource stores holding schema and resolver map documents."""

from .base import ResourceStore
from .factory import create_resource_store
from .implementations.file import FileResourceStore
from .implementations.memory import MemoryResourceStore

__all__ = [
    "ResourceStore",
    "MemoryResourceStore",
    "FileResourceStore",
    "create_resource_store",
]
