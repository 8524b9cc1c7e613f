"""Reference dataset exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Callers tell expected absence apart from transient and configuration
failures by exception type alone.
"""

from __future__ import annotations


class RefDatasetError(Exception):
    """Base exception for all reference dataset failures."""


class RefDatasetConfigError(RefDatasetError):
    """Raised for invalid runtime configuration."""


class ResourceNotFoundError(RefDatasetError):
    """Raised when a requested resource does not exist.

    Attributes:
        kind: Resource kind that was requested.
        name: Resource name.
        namespace: Resource namespace.
    """

    def __init__(self, kind: str, name: str, namespace: str) -> None:
        super().__init__(f"{kind} {namespace}/{name} not found.")
        self.kind = kind
        self.name = name
        self.namespace = namespace


class ResourceAccessError(RefDatasetError):
    """Raised when the resource accessor cannot complete a request."""


class DelegateConfigurationError(RefDatasetError):
    """Raised when a reference dataset does not mount exactly one dataset."""


class UnsupportedRuntimeTypeError(RefDatasetError):
    """Raised for a runtime type with no known resource kind."""


class RuntimeSpecError(RefDatasetError):
    """Raised for an invalid runtime descriptor declaration."""


class ManifestError(RefDatasetError):
    """Raised for malformed resource manifests."""
