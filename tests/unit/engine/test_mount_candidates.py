"""Unit tests for delegate candidate extraction."""

from __future__ import annotations

from core.types import Mount, NamespacedName
from engine.mount_candidates import mounted_dataset_names


def test_mounted_dataset_names_skips_external_sources() -> None:
    """Only dataset:// mounts are delegate candidates."""
    mounts = (Mount(mount_point="s3://bucket/data"), Mount.referencing("base", "ns"))

    assert mounted_dataset_names(mounts) == (NamespacedName(name="base", namespace="ns"),)


def test_mounted_dataset_names_ignores_subpath() -> None:
    """Subpaths after the dataset name do not change the candidate."""
    mounts = (Mount(mount_point="dataset://ns/base/train"),)

    assert mounted_dataset_names(mounts)[0].name == "base"


def test_mounted_dataset_names_skips_malformed_references() -> None:
    """References without both namespace and name are skipped."""
    mounts = (Mount(mount_point="dataset://ns"), Mount(mount_point="dataset:///base"))

    assert mounted_dataset_names(mounts) == ()
