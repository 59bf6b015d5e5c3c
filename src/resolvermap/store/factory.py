"""Factory for creating resource stores from settings."""

from pathlib import Path

from ..config import Settings
from ..logging import get_logger
from .base import ResourceStore
from .implementations.file import FileResourceStore
from .implementations.memory import MemoryResourceStore

logger = get_logger(__name__)


def create_resource_store(settings: Settings) -> ResourceStore:
    """Create the resource store selected by ``settings.store_backend``.

    Raises:
        ValueError: If the backend is unknown or its configuration is incomplete
    """
    backend = settings.store_backend

    if backend == "memory":
        logger.info("Using in-memory resource store")
        return MemoryResourceStore()
    elif backend == "file":
        if not settings.store_path:
            raise ValueError("File resource store requires 'store_path' in configuration")
        logger.info("Using file resource store", path=settings.store_path)
        return FileResourceStore(Path(settings.store_path))
    else:
        raise ValueError(f"Unknown resource store backend: {backend}")
