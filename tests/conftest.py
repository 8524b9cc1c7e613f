"""Pytest configuration and shared resource fixtures."""

from __future__ import annotations

from collections import Counter
import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


class CountingAccessor:
    """Resource accessor double that counts calls and injects failures."""

    def __init__(self, store) -> None:
        self._store = store
        self.calls: Counter[str] = Counter()
        self.failures: dict[str, Exception] = {}

    def get_by_key(self, key):
        self.calls[f"get_by_key:{key.kind}"] += 1
        self._raise_injected(key.kind)
        return self._store.get_by_key(key)

    def get_status(self, kind, name, namespace):
        self.calls[f"get_status:{kind}"] += 1
        self._raise_injected("get_status")
        return self._store.get_status(kind, name, namespace)

    def get_runtime_info(self, name, namespace):
        self.calls["get_runtime_info"] += 1
        self._raise_injected("get_runtime_info")
        return self._store.get_runtime_info(name, namespace)

    def total_calls(self) -> int:
        return sum(self.calls.values())

    def _raise_injected(self, operation: str) -> None:
        failure = self.failures.get(operation)
        if failure is not None:
            raise failure


@pytest.fixture
def delegate_store():
    """Store with a physical alluxio runtime `base` and a thin runtime `D` in `ns`."""
    from core.types import (
        BoundRuntime,
        Dataset,
        FuseSpec,
        Mount,
        RuntimeResource,
        RuntimeStatus,
        TieredStore,
        TieredStoreLevel,
    )
    from store.memory_store import InMemoryResourceStore

    base_dataset = Dataset(
        name="base",
        namespace="ns",
        mounts=(Mount(mount_point="s3://bucket/data", name="data"),),
        placement_mode="Shared",
        runtimes=(BoundRuntime(name="base", namespace="ns", runtime_type="alluxio"),),
    )
    base_runtime = RuntimeResource(
        kind="AlluxioRuntime",
        name="base",
        namespace="ns",
        runtime_type="alluxio",
        tiered_store=TieredStore(
            levels=(TieredStoreLevel(medium_type="MEM", paths=("/dev/shm",), quotas=("2Gi",)),)
        ),
        fuse=FuseSpec(node_selector={"pool": "cache"}),
        status=RuntimeStatus(master_phase="Ready", worker_phase="Ready", fuse_phase="Ready"),
    )
    reference_dataset = Dataset(
        name="D",
        namespace="ns",
        mounts=(Mount.referencing("base", "ns"),),
    )
    reference_runtime = RuntimeResource(
        kind="ThinRuntime",
        name="D",
        namespace="ns",
        runtime_type="thin",
        tiered_store=TieredStore(
            levels=(TieredStoreLevel(medium_type="SSD", paths=("/mnt/ssd",), quotas=("10Gi",)),)
        ),
        fuse=FuseSpec(node_selector={"zone": "a"}),
    )
    return InMemoryResourceStore(
        (base_dataset, base_runtime, reference_dataset, reference_runtime)
    )


@pytest.fixture
def counting_accessor(delegate_store) -> CountingAccessor:
    """Call-counting accessor over the delegate store."""
    return CountingAccessor(delegate_store)
