"""Typed delegate resolution outcomes.

This module defines the tagged results of delegate resolution so callers
never confuse a deleted delegate with a failed lookup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, Union

from core.errors import RefDatasetError
from core.types import DelegateIdentity, RuntimeInfo

ResolutionState = Literal["unresolved", "resolved", "absent", "failed"]


@dataclass(frozen=True)
class Resolved:
    """Exactly one delegate was found and described.

    Attributes:
        identity: Delegate name, namespace, and runtime type.
        runtime_info: Full descriptor of the delegate runtime.
    """

    identity: DelegateIdentity
    runtime_info: RuntimeInfo

    state: ClassVar[ResolutionState] = "resolved"


@dataclass(frozen=True)
class Absent:
    """No delegate exists; the reference runtime is being deleted."""

    reason: str

    state: ClassVar[ResolutionState] = "absent"


@dataclass(frozen=True)
class Failed:
    """Resolution failed; a later attempt may succeed."""

    error: RefDatasetError

    state: ClassVar[ResolutionState] = "failed"


DelegateResolution = Union[Resolved, Absent]
DelegateOutcome = Union[Resolved, Absent, Failed]
