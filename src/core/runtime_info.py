"""Runtime descriptor construction helpers.

This module turns runtime resources and datasets into immutable
RuntimeInfo descriptors. Each setup step returns a new descriptor.
"""

from __future__ import annotations

from dataclasses import replace
import json
from typing import Mapping

from core.constants import METADATA_LIST_ANNOTATION
from core.errors import RuntimeSpecError
from core.logging_config import get_logger
from core.types import (
    Dataset,
    FuseDeployMode,
    MetadataEntry,
    RuntimeInfo,
    RuntimeResource,
    TieredStore,
)

_LOGGER = get_logger(__name__)


def build_runtime_info(
    name: str,
    namespace: str,
    runtime_type: str,
    tiered_store: TieredStore,
    metadata_list: tuple[MetadataEntry, ...] = (),
) -> RuntimeInfo:
    """Build a runtime descriptor seeded from declared configuration.

    Args:
        name: Runtime name.
        namespace: Runtime namespace.
        runtime_type: Runtime type.
        tiered_store: Declared tiered-store configuration.
        metadata_list: Metadata parsed from annotations.

    Returns:
        Descriptor with default fuse mode and unset exclusivity.

    Raises:
        RuntimeSpecError: If a tier declares quotas that do not pair with paths.
    """
    _validate_tiered_store(tiered_store, name, namespace)
    return RuntimeInfo(
        name=name,
        namespace=namespace,
        runtime_type=runtime_type,
        tiered_store=tiered_store,
        metadata_list=metadata_list,
    )


def setup_fuse_deploy_mode(
    runtime_info: RuntimeInfo,
    is_global: bool,
    node_selector: Mapping[str, str],
) -> RuntimeInfo:
    """Return a descriptor with the given fuse placement strategy."""
    fuse = FuseDeployMode(is_global=is_global, node_selector=dict(node_selector))
    return replace(runtime_info, fuse=fuse)


def setup_with_dataset(runtime_info: RuntimeInfo, dataset: Dataset) -> RuntimeInfo:
    """Return a descriptor carrying the dataset exclusivity declaration."""
    return replace(runtime_info, exclusive=dataset.is_exclusive)


def build_physical_runtime_info(runtime: RuntimeResource, dataset: Dataset) -> RuntimeInfo:
    """Build the descriptor of a runtime that runs its own cache engine.

    Physical runtimes keep their own declared fuse placement, unlike
    reference runtimes which are always cluster-global.

    Args:
        runtime: Runtime resource serving the dataset.
        dataset: Dataset the runtime is bound to.

    Returns:
        Fully resolved runtime descriptor.
    """
    runtime_info = build_runtime_info(
        runtime.name,
        runtime.namespace,
        runtime.runtime_type,
        runtime.tiered_store,
        metadata_list=metadata_list_from_annotations(runtime.annotations),
    )
    runtime_info = setup_fuse_deploy_mode(
        runtime_info,
        is_global=runtime.fuse.is_global,
        node_selector=runtime.fuse.node_selector,
    )
    return setup_with_dataset(runtime_info, dataset)


def metadata_list_from_annotations(
    annotations: Mapping[str, str],
) -> tuple[MetadataEntry, ...]:
    """Parse metadata declared through the metadata-list annotation.

    Malformed annotation values are logged and treated as undeclared.

    Args:
        annotations: Resource annotations.

    Returns:
        Parsed metadata entries in declaration order.
    """
    raw_value = annotations.get(METADATA_LIST_ANNOTATION)
    if not raw_value:
        return ()
    try:
        payload = json.loads(raw_value)
    except json.JSONDecodeError as error:
        _LOGGER.warning(
            "metadata_list_annotation_invalid",
            annotation=METADATA_LIST_ANNOTATION,
            error=error.msg,
        )
        return ()
    if not isinstance(payload, list):
        _LOGGER.warning(
            "metadata_list_annotation_invalid",
            annotation=METADATA_LIST_ANNOTATION,
            error="expected JSON list",
        )
        return ()
    return tuple(_metadata_entry_from_payload(item) for item in payload if isinstance(item, dict))


def _metadata_entry_from_payload(payload: dict[str, object]) -> MetadataEntry:
    selector = payload.get("selector")
    selector_mapping = selector if isinstance(selector, dict) else {}
    return MetadataEntry(
        labels=_string_mapping(payload.get("labels")),
        annotations=_string_mapping(payload.get("annotations")),
        selector_group=str(selector_mapping.get("group", "")),
        selector_kind=str(selector_mapping.get("kind", "")),
    )


def _string_mapping(raw_value: object) -> dict[str, str]:
    if not isinstance(raw_value, dict):
        return {}
    return {str(key): str(value) for key, value in raw_value.items()}


def _validate_tiered_store(tiered_store: TieredStore, name: str, namespace: str) -> None:
    for level in tiered_store.levels:
        if level.quotas and len(level.quotas) != len(level.paths):
            raise RuntimeSpecError(
                f"Runtime {namespace}/{name} tier {level.medium_type!r} declares "
                f"{len(level.paths)} paths but {len(level.quotas)} quotas. "
                "Declare one quota per cache path."
            )
