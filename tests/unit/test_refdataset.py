"""Unit tests for the public SDK surface."""

from __future__ import annotations

import refdataset
from refdataset import (
    BoundRuntime,
    Dataset,
    InMemoryResourceStore,
    Mount,
    ReferenceDatasetEngine,
    Resolved,
    RuntimeResource,
)


def test_public_surface_exports_are_importable() -> None:
    """Every name in __all__ should resolve on the module."""
    missing = [name for name in refdataset.__all__ if not hasattr(refdataset, name)]

    assert missing == []


def test_public_surface_resolves_reference_dataset() -> None:
    """The re-exported types are enough to resolve a delegate."""
    store = InMemoryResourceStore(
        (
            Dataset(name="D", namespace="ns", mounts=(Mount.referencing("base", "ns"),)),
            RuntimeResource(kind="ThinRuntime", name="D", namespace="ns", runtime_type="thin"),
            Dataset(
                name="base",
                namespace="ns",
                runtimes=(BoundRuntime(name="base", namespace="ns", runtime_type="juicefs"),),
            ),
            RuntimeResource(
                kind="JuiceFSRuntime", name="base", namespace="ns", runtime_type="juicefs"
            ),
        )
    )

    resolution = ReferenceDatasetEngine("D", "ns", store).resolve_delegate()

    assert isinstance(resolution, Resolved) and resolution.identity.runtime_type == "juicefs"
