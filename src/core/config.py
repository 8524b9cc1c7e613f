"""Runtime configuration model for reference dataset resolution.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MANIFEST_ROOT,
    REFERENCE_RUNTIME_TYPE,
    RUNTIME_KIND_BY_TYPE,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import RefDatasetConfigError


@dataclass(frozen=True)
class RefDatasetConfig:
    """Validated runtime configuration.

    Attributes:
        manifest_root: Directory or file holding resource manifests.
        runtime_type: Runtime type reported by reference runtimes.
        log_level: Minimum structured log level.
    """

    manifest_root: Path
    runtime_type: str
    log_level: str

    @classmethod
    def from_env(cls) -> "RefDatasetConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RefDatasetConfigError: If environment values are invalid.
        """
        manifest_root_value = os.getenv("REFDATASET_MANIFEST_ROOT", str(DEFAULT_MANIFEST_ROOT))
        runtime_type = _parse_runtime_type(
            os.getenv("REFDATASET_RUNTIME_TYPE", REFERENCE_RUNTIME_TYPE)
        )
        log_level = _parse_log_level(os.getenv("REFDATASET_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            manifest_root=Path(manifest_root_value).expanduser().resolve(),
            runtime_type=runtime_type,
            log_level=log_level,
        )


def _parse_runtime_type(raw_value: str) -> str:
    """Parse the reference runtime type environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized runtime type.

    Raises:
        RefDatasetConfigError: If the runtime type is unknown.
    """
    runtime_type = raw_value.strip().lower()
    if runtime_type not in RUNTIME_KIND_BY_TYPE:
        supported = ", ".join(sorted(RUNTIME_KIND_BY_TYPE))
        raise RefDatasetConfigError(
            "Invalid REFDATASET_RUNTIME_TYPE value: "
            f"expected one of {supported}, got '{raw_value}'."
        )
    return runtime_type


def _parse_log_level(raw_value: str) -> str:
    log_level = raw_value.strip().lower()
    if log_level not in SUPPORTED_LOG_LEVELS:
        raise RefDatasetConfigError(
            "Invalid REFDATASET_LOG_LEVEL value: "
            f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'. "
            "Set REFDATASET_LOG_LEVEL to a supported level."
        )
    return log_level
