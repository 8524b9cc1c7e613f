"""Delegate candidates from declared mounts."""

from __future__ import annotations

from core.constants import REFERENCE_DATASET_PREFIX
from core.types import Mount, NamespacedName


def mounted_dataset_names(mounts: tuple[Mount, ...]) -> tuple[NamespacedName, ...]:
    """Return datasets referenced through dataset:// mount points.

    Mount points take the form dataset://<namespace>/<name>[/<subpath>].
    External sources and references missing a name are skipped.

    Args:
        mounts: Mounts in declaration order.

    Returns:
        Referenced dataset names in declaration order.
    """
    names = []
    for mount in mounts:
        if not mount.mount_point.startswith(REFERENCE_DATASET_PREFIX):
            continue
        dataset_path = mount.mount_point[len(REFERENCE_DATASET_PREFIX) :]
        segments = dataset_path.split("/")
        if len(segments) < 2 or not segments[0] or not segments[1]:
            continue
        names.append(NamespacedName(name=segments[1], namespace=segments[0]))
    return tuple(names)
