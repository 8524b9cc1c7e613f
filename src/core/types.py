"""Shared typed models.

This module defines immutable data models for datasets, runtime resources,
and runtime descriptors so the accessor, builder, and engine layers share
explicit and stable interfaces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from core.constants import (
    ACCELERATE_CATEGORY,
    EXCLUSIVE_PLACEMENT_MODES,
    PLACEMENT_MODE_DEFAULT,
    REFERENCE_DATASET_PREFIX,
)


@dataclass(frozen=True)
class ResourceKey:
    """Explicit lookup key for one namespaced resource.

    Attributes:
        kind: Resource kind, for example Dataset or AlluxioRuntime.
        name: Resource name.
        namespace: Resource namespace.
    """

    kind: str
    name: str
    namespace: str


@dataclass(frozen=True)
class NamespacedName:
    """Name and namespace pair of a dataset or runtime."""

    name: str
    namespace: str


@dataclass(frozen=True)
class Mount:
    """One declared binding from a dataset to a data source.

    Attributes:
        mount_point: Source URI. dataset:// points at another dataset.
        name: Optional mount name.
        path: Optional path the source is mounted at.
        options: Source-specific mount options.
    """

    mount_point: str
    name: str = ""
    path: str = ""
    options: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def referencing(cls, name: str, namespace: str) -> "Mount":
        """Build a mount that references another dataset."""
        return cls(mount_point=f"{REFERENCE_DATASET_PREFIX}{namespace}/{name}", name=name)


@dataclass(frozen=True)
class BoundRuntime:
    """Runtime recorded as bound in a dataset status.

    Attributes:
        name: Runtime name.
        namespace: Runtime namespace.
        runtime_type: Runtime type such as alluxio or thin.
        category: Runtime category.
    """

    name: str
    namespace: str
    runtime_type: str
    category: str = ACCELERATE_CATEGORY


@dataclass(frozen=True)
class Dataset:
    """Dataset resource as read from the resource accessor.

    Attributes:
        name: Dataset name.
        namespace: Dataset namespace.
        mounts: Ordered declared mounts.
        placement_mode: Exclusive, Shared, or empty for the default.
        runtimes: Runtimes bound to the dataset in its status.
    """

    name: str
    namespace: str
    mounts: tuple[Mount, ...] = ()
    placement_mode: str = PLACEMENT_MODE_DEFAULT
    runtimes: tuple[BoundRuntime, ...] = ()

    @property
    def is_exclusive(self) -> bool:
        """Whether runtimes serving this dataset run in exclusive mode."""
        return self.placement_mode in EXCLUSIVE_PLACEMENT_MODES


@dataclass(frozen=True)
class TieredStoreLevel:
    """One cache tier declaration.

    Attributes:
        medium_type: Storage medium such as MEM, SSD, or HDD.
        paths: Cache directories for the tier.
        quotas: Per-path capacity quotas, empty when undeclared.
        high: Optional high watermark ratio.
        low: Optional low watermark ratio.
    """

    medium_type: str
    paths: tuple[str, ...] = ()
    quotas: tuple[str, ...] = ()
    high: str | None = None
    low: str | None = None


@dataclass(frozen=True)
class TieredStore:
    """Cache capacity configuration across storage tiers."""

    levels: tuple[TieredStoreLevel, ...] = ()


@dataclass(frozen=True)
class FuseSpec:
    """Fuse placement declaration of a runtime resource.

    Attributes:
        node_selector: Node labels the fuse component should be placed on.
        is_global: Whether the runtime declares cluster-global fuse placement.
    """

    node_selector: Mapping[str, str] = field(default_factory=dict)
    is_global: bool = False


@dataclass(frozen=True)
class RuntimeStatus:
    """Live status of a runtime resource.

    Attributes:
        master_phase: Master component phase.
        worker_phase: Worker component phase.
        fuse_phase: Fuse component phase.
        desired_worker_number: Desired scheduled worker count.
        ready_worker_number: Ready worker count.
        cache_states: Reported cache statistics.
        mounts: Mounts observed at a previous reconcile.
    """

    master_phase: str = ""
    worker_phase: str = ""
    fuse_phase: str = ""
    desired_worker_number: int = 0
    ready_worker_number: int = 0
    cache_states: Mapping[str, str] = field(default_factory=dict)
    mounts: tuple[Mount, ...] = ()


@dataclass(frozen=True)
class RuntimeResource:
    """Runtime custom resource as read from the resource accessor.

    Attributes:
        kind: Resource kind, for example ThinRuntime.
        name: Runtime name, equal to the dataset it serves.
        namespace: Runtime namespace.
        runtime_type: Runtime type such as thin or alluxio.
        annotations: Resource annotations.
        tiered_store: Declared tiered-store sizing.
        fuse: Declared fuse placement.
        status: Last observed status.
    """

    kind: str
    name: str
    namespace: str
    runtime_type: str
    annotations: Mapping[str, str] = field(default_factory=dict)
    tiered_store: TieredStore = field(default_factory=TieredStore)
    fuse: FuseSpec = field(default_factory=FuseSpec)
    status: RuntimeStatus = field(default_factory=RuntimeStatus)


@dataclass(frozen=True)
class MetadataEntry:
    """Extra labels and annotations declared for generated resources.

    Attributes:
        labels: Labels to apply.
        annotations: Annotations to apply.
        selector_group: API group of targeted resources.
        selector_kind: Kind of targeted resources.
    """

    labels: Mapping[str, str] = field(default_factory=dict)
    annotations: Mapping[str, str] = field(default_factory=dict)
    selector_group: str = ""
    selector_kind: str = ""


@dataclass(frozen=True)
class FuseDeployMode:
    """Resolved fuse placement strategy of a runtime descriptor."""

    is_global: bool = False
    node_selector: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RuntimeInfo:
    """Synthesized descriptor of one logical runtime.

    Attributes:
        name: Runtime name.
        namespace: Runtime namespace.
        runtime_type: Runtime type.
        tiered_store: Tiered-store configuration.
        metadata_list: Metadata declared through annotations.
        fuse: Fuse deploy mode.
        exclusive: Exclusive mode, None until a dataset has been applied.
    """

    name: str
    namespace: str
    runtime_type: str
    tiered_store: TieredStore = field(default_factory=TieredStore)
    metadata_list: tuple[MetadataEntry, ...] = ()
    fuse: FuseDeployMode = field(default_factory=FuseDeployMode)
    exclusive: bool | None = None


@dataclass(frozen=True)
class DelegateIdentity:
    """Runtime that actually provides storage for a reference dataset."""

    name: str
    namespace: str
    runtime_type: str
