"""Resource accessor protocol and typed fetch helpers.

This module defines the read-only repository interface the engine
consumes and narrows untyped fetch results to dataset and runtime models.
"""

from __future__ import annotations

from typing import Protocol, Union

from core.constants import DATASET_KIND, RUNTIME_KIND_BY_TYPE
from core.errors import ResourceAccessError, UnsupportedRuntimeTypeError
from core.types import Dataset, ResourceKey, RuntimeInfo, RuntimeResource, RuntimeStatus

Resource = Union[Dataset, RuntimeResource]


class ResourceAccessor(Protocol):
    """Read-only access to namespaced resources."""

    def get_by_key(self, key: ResourceKey) -> Resource:
        """Fetch one resource by kind, name, and namespace.

        Raises:
            ResourceNotFoundError: If the resource does not exist.
            ResourceAccessError: If the store cannot be reached.
        """
        ...

    def get_status(self, kind: str, name: str, namespace: str) -> RuntimeStatus:
        """Fetch live status of a runtime resource of any kind."""
        ...

    def get_runtime_info(self, name: str, namespace: str) -> RuntimeInfo:
        """Resolve the runtime descriptor serving a dataset."""
        ...


def runtime_kind_for_type(runtime_type: str) -> str:
    """Map a runtime type to its resource kind.

    Args:
        runtime_type: Runtime type such as alluxio or thin.

    Returns:
        Runtime resource kind.

    Raises:
        UnsupportedRuntimeTypeError: If the type is unknown.
    """
    kind = RUNTIME_KIND_BY_TYPE.get(runtime_type)
    if kind is None:
        raise UnsupportedRuntimeTypeError(
            f"Failed to resolve runtime kind for runtime type {runtime_type!r}. "
            f"Supported types: {', '.join(sorted(RUNTIME_KIND_BY_TYPE))}."
        )
    return kind


def get_dataset(accessor: ResourceAccessor, name: str, namespace: str) -> Dataset:
    """Fetch a dataset by name and namespace."""
    resource = accessor.get_by_key(ResourceKey(DATASET_KIND, name, namespace))
    if not isinstance(resource, Dataset):
        raise ResourceAccessError(
            f"Expected Dataset for {namespace}/{name}, got {type(resource).__name__}."
        )
    return resource


def get_runtime(
    accessor: ResourceAccessor,
    kind: str,
    name: str,
    namespace: str,
) -> RuntimeResource:
    """Fetch a runtime resource of the given kind."""
    resource = accessor.get_by_key(ResourceKey(kind, name, namespace))
    if not isinstance(resource, RuntimeResource):
        raise ResourceAccessError(
            f"Expected {kind} for {namespace}/{name}, got {type(resource).__name__}."
        )
    return resource
