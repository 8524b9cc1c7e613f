"""In-memory resource store.

This module keeps datasets and runtime resources in a keyed map and
implements the resource accessor protocol on top of it.
"""

from __future__ import annotations

from core.constants import DATASET_KIND
from core.errors import ResourceNotFoundError, UnsupportedRuntimeTypeError
from core.logging_config import get_logger
from core.runtime_info import build_physical_runtime_info
from core.types import Dataset, ResourceKey, RuntimeInfo, RuntimeStatus
from store.resource_accessor import Resource, get_dataset, get_runtime, runtime_kind_for_type

_LOGGER = get_logger(__name__)


class InMemoryResourceStore:
    """Keyed resource store implementing the resource accessor protocol."""

    def __init__(self, resources: tuple[Resource, ...] = ()) -> None:
        self._resources: dict[ResourceKey, Resource] = {}
        for resource in resources:
            self.put(resource)

    def put(self, resource: Resource) -> ResourceKey:
        """Insert or replace one resource.

        Args:
            resource: Dataset or runtime resource.

        Returns:
            Key the resource is stored under.
        """
        key = resource_key_of(resource)
        self._resources[key] = resource
        return key

    def delete(self, key: ResourceKey) -> None:
        """Remove one resource; deleting a missing key is a no-op."""
        self._resources.pop(key, None)

    def keys(self) -> tuple[ResourceKey, ...]:
        """List stored keys in insertion order."""
        return tuple(self._resources)

    def get_by_key(self, key: ResourceKey) -> Resource:
        """Fetch one resource by key.

        Raises:
            ResourceNotFoundError: If no resource is stored under the key.
        """
        resource = self._resources.get(key)
        if resource is None:
            raise ResourceNotFoundError(key.kind, key.name, key.namespace)
        return resource

    def get_status(self, kind: str, name: str, namespace: str) -> RuntimeStatus:
        """Return the stored status of one runtime resource."""
        return get_runtime(self, kind, name, namespace).status

    def get_runtime_info(self, name: str, namespace: str) -> RuntimeInfo:
        """Resolve the descriptor of the runtime bound to a dataset.

        Args:
            name: Dataset name.
            namespace: Dataset namespace.

        Returns:
            Descriptor of the first runtime bound to the dataset.

        Raises:
            ResourceNotFoundError: If the dataset or its runtime is missing.
            UnsupportedRuntimeTypeError: If no runtime is bound to the dataset.
        """
        dataset = get_dataset(self, name, namespace)
        if not dataset.runtimes:
            raise UnsupportedRuntimeTypeError(
                f"Dataset {namespace}/{name} has no bound runtime. "
                "Create a runtime for the dataset before referencing it."
            )
        bound_runtime = dataset.runtimes[0]
        kind = runtime_kind_for_type(bound_runtime.runtime_type)
        runtime = get_runtime(self, kind, bound_runtime.name, bound_runtime.namespace)
        runtime_info = build_physical_runtime_info(runtime, dataset)
        _LOGGER.debug(
            "runtime_info_resolved",
            name=runtime_info.name,
            namespace=runtime_info.namespace,
            runtime_type=runtime_info.runtime_type,
        )
        return runtime_info


def resource_key_of(resource: Resource) -> ResourceKey:
    """Build the lookup key of a stored resource."""
    if isinstance(resource, Dataset):
        return ResourceKey(DATASET_KIND, resource.name, resource.namespace)
    return ResourceKey(resource.kind, resource.name, resource.namespace)
