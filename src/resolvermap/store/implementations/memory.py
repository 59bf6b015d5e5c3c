"""In-process resource store."""

import threading

from ...errors import ResourceNotFound
from ...logging import get_logger
from ...resources import Resource
from ..base import ResourceStore

logger = get_logger(__name__)


class MemoryResourceStore(ResourceStore):
    """Resource store backed by a dict. Contents are lost with the process."""

    def __init__(self):
        self._resources: dict[tuple[str, str, str], Resource] = {}
        self._lock = threading.Lock()

    def read(self, kind: str, namespace: str, name: str) -> Resource:
        with self._lock:
            resource = self._resources.get((kind, namespace, name))
        if resource is None:
            raise ResourceNotFound(kind, namespace, name)
        # Return a copy; stored resources are never shared
        return resource.model_copy(deep=True)

    def write(self, resource: Resource) -> None:
        with self._lock:
            self._resources[(resource.kind, resource.namespace, resource.name)] = (
                resource.model_copy(deep=True)
            )
        logger.debug(
            "Stored resource",
            kind=resource.kind,
            namespace=resource.namespace,
            name=resource.name,
        )

    def list_resources(self, kind: str, namespace: str) -> list[Resource]:
        with self._lock:
            matches = [
                resource.model_copy(deep=True)
                for (k, ns, _), resource in self._resources.items()
                if k == kind and ns == namespace
            ]
        return sorted(matches, key=lambda r: r.name)

    def delete(self, kind: str, namespace: str, name: str) -> bool:
        with self._lock:
            return self._resources.pop((kind, namespace, name), None) is not None
