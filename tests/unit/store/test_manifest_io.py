"""Unit tests for YAML manifest loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import ManifestError
from core.types import ResourceKey, RuntimeResource
from store.manifest_io import load_manifest_file, load_manifest_store, parse_resource

_FIXTURES_ROOT = Path(__file__).resolve().parents[2] / "fixtures" / "manifests"


def test_load_manifest_store_reads_fixture_directory() -> None:
    """Loader should parse every dataset and runtime in the fixtures."""
    store = load_manifest_store(_FIXTURES_ROOT)

    assert ResourceKey("ThinRuntime", "D", "ns") in store.keys()


def test_load_manifest_file_parses_runtime_status_mounts() -> None:
    """Runtime status mounts should survive parsing."""
    resources = load_manifest_file(_FIXTURES_ROOT / "reference.yaml")
    runtime = next(resource for resource in resources if isinstance(resource, RuntimeResource))

    assert runtime.status.mounts[0].mount_point == "dataset://ns/base"


def test_load_manifest_file_splits_tier_paths_and_quotas() -> None:
    """Comma separated paths and quota lists become tuples."""
    resources = load_manifest_file(_FIXTURES_ROOT / "delegate.yaml")
    runtime = next(resource for resource in resources if isinstance(resource, RuntimeResource))

    assert runtime.tiered_store.levels[0].quotas == ("1Gi", "2Gi")


def test_parse_resource_skips_unrelated_kinds() -> None:
    """Documents of other kinds are ignored."""
    document = {"kind": "ConfigMap", "metadata": {"name": "settings"}}

    assert parse_resource(document, "inline") is None


def test_parse_resource_defaults_namespace() -> None:
    """Documents without a namespace land in the default namespace."""
    document = {"kind": "Dataset", "metadata": {"name": "demo"}}

    assert parse_resource(document, "inline").namespace == "default"


def test_parse_resource_rejects_mount_without_mount_point() -> None:
    """Mounts require a mountPoint string."""
    document = {
        "kind": "Dataset",
        "metadata": {"name": "demo", "namespace": "ns"},
        "spec": {"mounts": [{"name": "broken"}]},
    }

    with pytest.raises(ManifestError):
        parse_resource(document, "inline")


def test_parse_resource_rejects_unknown_runtime_kind() -> None:
    """Runtime kinds without a known runtime type are rejected."""
    document = {"kind": "CephRuntime", "metadata": {"name": "demo", "namespace": "ns"}}

    with pytest.raises(ManifestError):
        parse_resource(document, "inline")


def test_load_manifest_file_rejects_invalid_yaml(tmp_path) -> None:
    """Broken YAML should raise a manifest error."""
    manifest_file = tmp_path / "broken.yaml"
    manifest_file.write_text("kind: [Dataset\n", encoding="utf-8")

    with pytest.raises(ManifestError):
        load_manifest_file(manifest_file)


def test_load_manifest_store_raises_for_missing_path(tmp_path) -> None:
    """Missing manifest roots should raise a manifest error."""
    with pytest.raises(ManifestError):
        load_manifest_store(tmp_path / "missing")


def test_parse_resource_treats_null_mount_fields_as_empty() -> None:
    """Null mount name and path become empty strings."""
    document = {
        "kind": "Dataset",
        "metadata": {"name": "demo", "namespace": "ns"},
        "spec": {"mounts": [{"mountPoint": "dataset://ns/b", "name": None, "path": None}]},
    }

    mount = parse_resource(document, "inline").mounts[0]

    assert (mount.name, mount.path) == ("", "")
