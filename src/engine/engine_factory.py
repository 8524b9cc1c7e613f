"""Engine construction from runtime configuration."""

from __future__ import annotations

from core.config import RefDatasetConfig
from core.logging_config import configure_logging
from engine.reference_engine import ReferenceDatasetEngine
from store.manifest_io import load_manifest_store
from store.resource_accessor import ResourceAccessor


def create_reference_engine(
    name: str,
    namespace: str,
    config: RefDatasetConfig | None = None,
    accessor: ResourceAccessor | None = None,
) -> ReferenceDatasetEngine:
    """Create an engine for one reconciliation pass.

    Args:
        name: Reference dataset name.
        namespace: Reference dataset namespace.
        config: Optional runtime configuration, read from env when absent.
        accessor: Optional accessor, loaded from config manifests when absent.

    Returns:
        Fresh engine with empty memoized state.

    Raises:
        RefDatasetConfigError: If environment configuration is invalid.
        ManifestError: If manifests cannot be loaded.
    """
    resolved_config = config or RefDatasetConfig.from_env()
    configure_logging(resolved_config.log_level)
    resource_accessor = accessor or load_manifest_store(resolved_config.manifest_root)
    return ReferenceDatasetEngine(
        name,
        namespace,
        resource_accessor,
        runtime_type=resolved_config.runtime_type,
    )
