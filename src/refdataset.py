"""Public SDK surface for reference dataset resolution.

This module provides a stable import path for reconcilers.
It re-exports the engine, its outcomes, and the typed models.
"""

from __future__ import annotations

from core.config import RefDatasetConfig
from core.errors import (
    DelegateConfigurationError,
    ManifestError,
    RefDatasetConfigError,
    RefDatasetError,
    ResourceAccessError,
    ResourceNotFoundError,
    RuntimeSpecError,
    UnsupportedRuntimeTypeError,
)
from core.types import (
    BoundRuntime,
    Dataset,
    DelegateIdentity,
    Mount,
    ResourceKey,
    RuntimeInfo,
    RuntimeResource,
    RuntimeStatus,
)
from engine.engine_factory import create_reference_engine
from engine.reference_engine import ReferenceDatasetEngine
from engine.resolution_types import Absent, Failed, Resolved
from store.manifest_io import load_manifest_store
from store.memory_store import InMemoryResourceStore
from store.resource_accessor import ResourceAccessor

__all__ = [
    "Absent",
    "BoundRuntime",
    "Dataset",
    "DelegateConfigurationError",
    "DelegateIdentity",
    "Failed",
    "InMemoryResourceStore",
    "ManifestError",
    "Mount",
    "RefDatasetConfig",
    "RefDatasetConfigError",
    "RefDatasetError",
    "ReferenceDatasetEngine",
    "Resolved",
    "ResourceAccessError",
    "ResourceAccessor",
    "ResourceKey",
    "ResourceNotFoundError",
    "RuntimeInfo",
    "RuntimeResource",
    "RuntimeSpecError",
    "RuntimeStatus",
    "UnsupportedRuntimeTypeError",
    "create_reference_engine",
    "load_manifest_store",
]
