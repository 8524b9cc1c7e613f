"""Reference dataset engine.

This module resolves which runtime backs a reference dataset, builds the
reference runtime's own descriptor, and reports the delegate's status.
One engine instance serves one reconciliation pass; resolved results are
memoized for the instance lifetime and never invalidated.
"""

from __future__ import annotations

from core.constants import REFERENCE_RUNTIME_TYPE, SINGLE_DELEGATE_MESSAGE
from core.errors import DelegateConfigurationError, RefDatasetError, ResourceNotFoundError
from core.logging_config import get_logger
from core.runtime_info import (
    build_runtime_info,
    metadata_list_from_annotations,
    setup_fuse_deploy_mode,
    setup_with_dataset,
)
from core.types import (
    Dataset,
    DelegateIdentity,
    NamespacedName,
    RuntimeInfo,
    RuntimeResource,
    RuntimeStatus,
)
from engine.mount_candidates import mounted_dataset_names
from engine.resolution_types import (
    Absent,
    DelegateOutcome,
    DelegateResolution,
    Failed,
    ResolutionState,
    Resolved,
)
from store.resource_accessor import (
    ResourceAccessor,
    get_dataset,
    get_runtime,
    runtime_kind_for_type,
)

_LOGGER = get_logger(__name__)


class ReferenceDatasetEngine:
    """Delegate resolution for one reference dataset."""

    def __init__(
        self,
        name: str,
        namespace: str,
        accessor: ResourceAccessor,
        runtime_type: str = REFERENCE_RUNTIME_TYPE,
    ) -> None:
        """Create an engine for one reconciliation pass.

        Args:
            name: Reference dataset and runtime name.
            namespace: Reference dataset namespace.
            accessor: Read-only resource accessor.
            runtime_type: Runtime type of the reference runtime.

        Raises:
            UnsupportedRuntimeTypeError: If runtime_type is unknown.
        """
        self._name = name
        self._namespace = namespace
        self._accessor = accessor
        self._runtime_type = runtime_type
        self._runtime_kind = runtime_kind_for_type(runtime_type)
        self._runtime_info: RuntimeInfo | None = None
        self._delegate: DelegateResolution | None = None
        self._state: ResolutionState = "unresolved"

    @property
    def name(self) -> str:
        return self._name

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def runtime_type(self) -> str:
        return self._runtime_type

    @property
    def resolution_state(self) -> ResolutionState:
        """State of delegate resolution after the latest attempt."""
        return self._state

    def resolve_delegate(self) -> DelegateResolution:
        """Resolve the single runtime backing this reference dataset.

        Mounts come from the dataset when it exists, otherwise from the
        mounts recorded in the runtime status so teardown keeps working
        after the dataset is deleted. When neither exists the runtime is
        in its final deletion phase and Absent is returned.

        Returns:
            Resolved delegate or Absent. Both are memoized.

        Raises:
            DelegateConfigurationError: If not exactly one dataset is mounted.
            ResourceNotFoundError: If the runtime or the delegate is missing.
            ResourceAccessError: If the accessor fails.
        """
        if self._delegate is not None:
            return self._delegate
        try:
            resolution = self._resolve_delegate_uncached()
        except BaseException:
            self._state = "failed"
            raise
        self._delegate = resolution
        self._state = resolution.state
        return resolution

    def try_resolve_delegate(self) -> DelegateOutcome:
        """Resolve the delegate and report failures as a Failed outcome."""
        try:
            return self.resolve_delegate()
        except RefDatasetError as error:
            return Failed(error=error)

    def build_own_runtime_info(self) -> RuntimeInfo:
        """Build the reference runtime's own descriptor.

        Reference runtimes always deploy fuse cluster-global, using the
        runtime's fuse node selector as a placement hint. Exclusivity stays
        unset when the dataset has already been deleted.

        Returns:
            Memoized runtime descriptor.

        Raises:
            ResourceNotFoundError: If the reference runtime is missing.
            RuntimeSpecError: If the tiered store declaration is invalid.
            ResourceAccessError: If the accessor fails.
        """
        if self._runtime_info is not None:
            return self._runtime_info
        runtime = self._get_runtime()
        runtime_info = build_runtime_info(
            self._name,
            self._namespace,
            self._runtime_type,
            runtime.tiered_store,
            metadata_list=metadata_list_from_annotations(runtime.annotations),
        )
        runtime_info = setup_fuse_deploy_mode(
            runtime_info,
            is_global=True,
            node_selector=runtime.fuse.node_selector,
        )
        # Common labels and persistent volumes come from the physical runtime.
        dataset = self._find_dataset()
        if dataset is None:
            _LOGGER.info("dataset_not_found", name=self._name, namespace=self._namespace)
            self._runtime_info = runtime_info
            return runtime_info
        runtime_info = setup_with_dataset(runtime_info, dataset)
        _LOGGER.info(
            "runtime_info_built",
            name=self._name,
            namespace=self._namespace,
            exclusive=runtime_info.exclusive,
        )
        self._runtime_info = runtime_info
        return runtime_info

    def delegate_status(self) -> RuntimeStatus | Absent:
        """Return the live status of the delegate runtime.

        Returns:
            Delegate status as reported by the accessor, or Absent when
            no delegate exists.
        """
        resolution = self.resolve_delegate()
        if isinstance(resolution, Absent):
            return resolution
        runtime_info = resolution.runtime_info
        kind = runtime_kind_for_type(runtime_info.runtime_type)
        return self._accessor.get_status(kind, runtime_info.name, runtime_info.namespace)

    def _resolve_delegate_uncached(self) -> DelegateResolution:
        dataset = self._find_dataset()
        runtime = self._get_runtime()
        if dataset is not None:
            candidates = mounted_dataset_names(dataset.mounts)
        elif runtime.status.mounts:
            candidates = mounted_dataset_names(runtime.status.mounts)
        else:
            _LOGGER.info("delegate_absent", name=self._name, namespace=self._namespace)
            return Absent(
                reason=f"Dataset {self._namespace}/{self._name} is deleted "
                "and the runtime records no mounts."
            )
        if len(candidates) != 1:
            raise DelegateConfigurationError(
                f"Dataset {self._namespace}/{self._name} mounts {len(candidates)} datasets: "
                f"{SINGLE_DELEGATE_MESSAGE}."
            )
        return self._describe_delegate(candidates[0])

    def _describe_delegate(self, candidate: NamespacedName) -> Resolved:
        runtime_info = self._accessor.get_runtime_info(candidate.name, candidate.namespace)
        identity = DelegateIdentity(
            name=candidate.name,
            namespace=candidate.namespace,
            runtime_type=runtime_info.runtime_type,
        )
        _LOGGER.info(
            "delegate_resolved",
            name=self._name,
            namespace=self._namespace,
            delegate_name=identity.name,
            delegate_namespace=identity.namespace,
            delegate_type=identity.runtime_type,
        )
        return Resolved(identity=identity, runtime_info=runtime_info)

    def _find_dataset(self) -> Dataset | None:
        try:
            return get_dataset(self._accessor, self._name, self._namespace)
        except ResourceNotFoundError:
            return None

    def _get_runtime(self) -> RuntimeResource:
        return get_runtime(self._accessor, self._runtime_kind, self._name, self._namespace)
