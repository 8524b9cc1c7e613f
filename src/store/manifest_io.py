"""YAML manifest loading for the in-memory resource store.

This module parses Kubernetes-shaped Dataset and Runtime documents from
YAML files into typed resources. It gives local tools and tests a file
backed resource accessor without a cluster client.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

import yaml

from core.constants import (
    ACCELERATE_CATEGORY,
    DATASET_KIND,
    DEFAULT_NAMESPACE,
    MANIFEST_FILE_SUFFIXES,
    PLACEMENT_MODE_DEFAULT,
    RUNTIME_KIND_BY_TYPE,
    RUNTIME_KIND_SUFFIX,
)
from core.errors import ManifestError
from core.logging_config import get_logger
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
from store.resource_accessor import Resource

_LOGGER = get_logger(__name__)
_RUNTIME_TYPE_BY_KIND = {kind: runtime_type for runtime_type, kind in RUNTIME_KIND_BY_TYPE.items()}


def load_manifest_store(manifest_root: Path) -> InMemoryResourceStore:
    """Load every manifest under a path into an in-memory store.

    Args:
        manifest_root: A YAML file or a directory searched recursively.

    Returns:
        Store holding all parsed datasets and runtimes.

    Raises:
        ManifestError: If the path is missing or any document is invalid.
    """
    manifest_files = _list_manifest_files(manifest_root)
    store = InMemoryResourceStore()
    for manifest_file in manifest_files:
        for resource in load_manifest_file(manifest_file):
            store.put(resource)
    _LOGGER.info(
        "manifests_loaded",
        manifest_root=str(manifest_root),
        file_count=len(manifest_files),
        resource_count=len(store.keys()),
    )
    return store


def load_manifest_file(manifest_file: Path) -> tuple[Resource, ...]:
    """Parse all supported documents from one YAML file.

    Args:
        manifest_file: YAML file path.

    Returns:
        Parsed resources in document order.

    Raises:
        ManifestError: If the file cannot be read or parsed.
    """
    try:
        text = manifest_file.read_text(encoding="utf-8")
    except OSError as error:
        raise ManifestError(
            f"Failed to read manifest at {manifest_file}: {error}. Check file permissions."
        ) from error
    try:
        documents = list(yaml.safe_load_all(text))
    except yaml.YAMLError as error:
        raise ManifestError(
            f"Failed to parse YAML manifest at {manifest_file}: {error}. Fix YAML syntax."
        ) from error
    resources: list[Resource] = []
    for document in documents:
        if document is None:
            continue
        resource = parse_resource(document, str(manifest_file))
        if resource is not None:
            resources.append(resource)
    return tuple(resources)


def parse_resource(document: object, source: str) -> Resource | None:
    """Parse one manifest document.

    Args:
        document: Decoded YAML document.
        source: Origin used in error messages.

    Returns:
        Typed resource, or None for kinds this store does not hold.
    """
    root = _expect_mapping(document, f"manifest document in {source}")
    kind = root.get("kind")
    if not isinstance(kind, str) or not kind:
        raise ManifestError(f"Manifest document in {source} is missing string field 'kind'.")
    if kind == DATASET_KIND:
        return _parse_dataset(root, source)
    if kind.endswith(RUNTIME_KIND_SUFFIX):
        return _parse_runtime(kind, root, source)
    _LOGGER.debug("manifest_document_skipped", kind=kind, source=source)
    return None


def _list_manifest_files(manifest_root: Path) -> tuple[Path, ...]:
    if manifest_root.is_file():
        return (manifest_root,)
    if not manifest_root.is_dir():
        raise ManifestError(
            f"Manifest path does not exist at {manifest_root}. "
            "Set REFDATASET_MANIFEST_ROOT to a manifest file or directory."
        )
    return tuple(
        sorted(
            path
            for path in manifest_root.rglob("*")
            if path.is_file() and path.suffix in MANIFEST_FILE_SUFFIXES
        )
    )


def _parse_dataset(root: Mapping[str, object], source: str) -> Dataset:
    name, namespace = _parse_identity(root, source)
    context = f"Dataset {namespace}/{name} in {source}"
    spec = _optional_mapping(root.get("spec"), f"{context} spec")
    status = _optional_mapping(root.get("status"), f"{context} status")
    placement = spec.get("placement", PLACEMENT_MODE_DEFAULT)
    if not isinstance(placement, str):
        raise ManifestError(f"Invalid {context}: spec.placement must be a string.")
    return Dataset(
        name=name,
        namespace=namespace,
        mounts=_parse_mounts(spec.get("mounts"), f"{context} spec.mounts"),
        placement_mode=placement,
        runtimes=_parse_bound_runtimes(status.get("runtimes"), namespace, context),
    )


def _parse_runtime(kind: str, root: Mapping[str, object], source: str) -> RuntimeResource:
    name, namespace = _parse_identity(root, source)
    context = f"{kind} {namespace}/{name} in {source}"
    runtime_type = _RUNTIME_TYPE_BY_KIND.get(kind)
    if runtime_type is None:
        raise ManifestError(
            f"Unsupported runtime kind in {context}. "
            f"Supported kinds: {', '.join(sorted(_RUNTIME_TYPE_BY_KIND))}."
        )
    metadata = _optional_mapping(root.get("metadata"), f"{context} metadata")
    spec = _optional_mapping(root.get("spec"), f"{context} spec")
    return RuntimeResource(
        kind=kind,
        name=name,
        namespace=namespace,
        runtime_type=runtime_type,
        annotations=_string_mapping(metadata.get("annotations"), f"{context} annotations"),
        tiered_store=_parse_tiered_store(spec.get("tieredstore"), context),
        fuse=_parse_fuse(spec.get("fuse"), context),
        status=_parse_runtime_status(root.get("status"), context),
    )


def _parse_identity(root: Mapping[str, object], source: str) -> tuple[str, str]:
    metadata = _expect_mapping(root.get("metadata"), f"metadata in {source}")
    name = metadata.get("name")
    if not isinstance(name, str) or not name:
        raise ManifestError(f"Manifest document in {source} is missing metadata.name.")
    namespace = metadata.get("namespace", DEFAULT_NAMESPACE)
    if not isinstance(namespace, str) or not namespace:
        raise ManifestError(f"Invalid metadata.namespace for {name} in {source}.")
    return name, namespace


def _parse_mounts(raw_mounts: object, context: str) -> tuple[Mount, ...]:
    if raw_mounts is None:
        return ()
    mounts = []
    for raw_mount in _expect_sequence(raw_mounts, context):
        mount_mapping = _expect_mapping(raw_mount, f"{context} entry")
        mount_point = mount_mapping.get("mountPoint")
        if not isinstance(mount_point, str) or not mount_point:
            raise ManifestError(f"Invalid {context}: each mount needs a mountPoint string.")
        mounts.append(
            Mount(
                mount_point=mount_point,
                name=_optional_string(mount_mapping.get("name")) or "",
                path=_optional_string(mount_mapping.get("path")) or "",
                options=_string_mapping(mount_mapping.get("options"), f"{context} options"),
            )
        )
    return tuple(mounts)


def _parse_bound_runtimes(
    raw_runtimes: object,
    default_namespace: str,
    context: str,
) -> tuple[BoundRuntime, ...]:
    if raw_runtimes is None:
        return ()
    runtimes = []
    for raw_runtime in _expect_sequence(raw_runtimes, f"{context} status.runtimes"):
        runtime_mapping = _expect_mapping(raw_runtime, f"{context} status.runtimes entry")
        name = runtime_mapping.get("name")
        runtime_type = runtime_mapping.get("type")
        if not isinstance(name, str) or not isinstance(runtime_type, str):
            raise ManifestError(
                f"Invalid {context}: status.runtimes entries need name and type strings."
            )
        runtimes.append(
            BoundRuntime(
                name=name,
                namespace=_optional_string(runtime_mapping.get("namespace")) or default_namespace,
                runtime_type=runtime_type,
                category=_optional_string(runtime_mapping.get("category")) or ACCELERATE_CATEGORY,
            )
        )
    return tuple(runtimes)


def _parse_tiered_store(raw_tiered_store: object, context: str) -> TieredStore:
    tiered_store = _optional_mapping(raw_tiered_store, f"{context} spec.tieredstore")
    raw_levels = tiered_store.get("levels")
    if raw_levels is None:
        return TieredStore()
    levels = []
    for raw_level in _expect_sequence(raw_levels, f"{context} tieredstore.levels"):
        level = _expect_mapping(raw_level, f"{context} tieredstore level")
        medium_type = level.get("mediumtype")
        if not isinstance(medium_type, str) or not medium_type:
            raise ManifestError(f"Invalid {context}: each tier needs a mediumtype string.")
        levels.append(
            TieredStoreLevel(
                medium_type=medium_type,
                paths=_split_list(level.get("path")),
                quotas=_parse_quotas(level),
                high=_optional_string(level.get("high")),
                low=_optional_string(level.get("low")),
            )
        )
    return TieredStore(levels=tuple(levels))


def _parse_quotas(level: Mapping[str, object]) -> tuple[str, ...]:
    if level.get("quotaList") is not None:
        return _split_list(level.get("quotaList"))
    quota = _optional_string(level.get("quota"))
    return (quota,) if quota else ()


def _parse_fuse(raw_fuse: object, context: str) -> FuseSpec:
    fuse = _optional_mapping(raw_fuse, f"{context} spec.fuse")
    is_global = fuse.get("global", False)
    if not isinstance(is_global, bool):
        raise ManifestError(f"Invalid {context}: spec.fuse.global must be a boolean.")
    return FuseSpec(
        node_selector=_string_mapping(fuse.get("nodeSelector"), f"{context} fuse.nodeSelector"),
        is_global=is_global,
    )


def _parse_runtime_status(raw_status: object, context: str) -> RuntimeStatus:
    status = _optional_mapping(raw_status, f"{context} status")
    return RuntimeStatus(
        master_phase=str(status.get("masterPhase", "")),
        worker_phase=str(status.get("workerPhase", "")),
        fuse_phase=str(status.get("fusePhase", "")),
        desired_worker_number=_optional_int(
            status.get("desiredWorkerNumberScheduled"), f"{context} status"
        ),
        ready_worker_number=_optional_int(status.get("workerNumberReady"), f"{context} status"),
        cache_states=_string_mapping(status.get("cacheStates"), f"{context} status.cacheStates"),
        mounts=_parse_mounts(status.get("mounts"), f"{context} status.mounts"),
    )


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        normalized_mapping = {}
        for key, payload in value.items():
            if not isinstance(key, str):
                raise ManifestError(
                    f"Invalid {context}: expected string keys, got {type(key).__name__}."
                )
            normalized_mapping[key] = payload
        return normalized_mapping
    raise ManifestError(f"Invalid {context}: expected object mapping, got {type(value).__name__}.")


def _optional_mapping(value: object, context: str) -> Mapping[str, object]:
    if value is None:
        return {}
    return _expect_mapping(value, context)


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise ManifestError(f"Invalid {context}: expected list, got {type(value).__name__}.")


def _string_mapping(value: object, context: str) -> dict[str, str]:
    mapping = _optional_mapping(value, context)
    return {key: str(payload) for key, payload in mapping.items()}


def _split_list(value: object) -> tuple[str, ...]:
    if value is None:
        return ()
    return tuple(item.strip() for item in str(value).split(",") if item.strip())


def _optional_string(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _optional_int(value: object, context: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ManifestError(f"Invalid {context}: worker counts must be integers.")
    return value
