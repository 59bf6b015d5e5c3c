"""YAML file resource store."""

import os
import tempfile
from pathlib import Path

import yaml

from ...errors import ResourceNotFound, ResourceStoreError
from ...logging import get_logger
from ...resources import Resource, resource_from_document, resource_to_document
from ..base import ResourceStore

logger = get_logger(__name__)


class FileResourceStore(ResourceStore):
    """Resource store keeping one YAML document per resource.

    Layout: ``<base_path>/<namespace>/<kind>/<name>.yaml``.
    """

    def __init__(self, base_path: Path):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _resource_path(self, kind: str, namespace: str, name: str) -> Path:
        for part in (kind, namespace, name):
            if not part or "/" in part or "\\" in part or part in (".", ".."):
                raise ResourceStoreError(f"Invalid resource path component: {part!r}")
        return self.base_path / namespace / kind / f"{name}.yaml"

    def _load(self, path: Path) -> Resource:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return resource_from_document(data)
        except (OSError, yaml.YAMLError, ValueError) as e:
            raise ResourceStoreError(f"Failed to read resource from {path}: {e}") from e

    def read(self, kind: str, namespace: str, name: str) -> Resource:
        path = self._resource_path(kind, namespace, name)
        if not path.exists():
            raise ResourceNotFound(kind, namespace, name)
        return self._load(path)

    def write(self, resource: Resource) -> None:
        path = self._resource_path(resource.kind, resource.namespace, resource.name)
        path.parent.mkdir(parents=True, exist_ok=True)

        # Write to a sibling temp file and rename so readers never see a partial document
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                yaml.safe_dump(resource_to_document(resource), f, sort_keys=False)
            os.replace(tmp_name, path)
        except Exception:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.debug("Wrote resource", kind=resource.kind, path=str(path))

    def list_resources(self, kind: str, namespace: str) -> list[Resource]:
        directory = self.base_path / namespace / kind
        if not directory.is_dir():
            return []
        return [self._load(path) for path in sorted(directory.glob("*.yaml"))]

    def delete(self, kind: str, namespace: str, name: str) -> bool:
        path = self._resource_path(kind, namespace, name)
        if not path.exists():
            return False
        path.unlink()
        return True
