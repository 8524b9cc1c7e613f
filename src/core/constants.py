"""Core constants used across reference dataset modules.

This module centralizes resource kinds, annotation keys, and defaults.
Keeping values here avoids magic literals in resolution logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_MANIFEST_ROOT = Path(".refdataset")
MANIFEST_FILE_SUFFIXES = (".yaml", ".yml")
DEFAULT_NAMESPACE = "default"
DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
DATASET_KIND = "Dataset"
RUNTIME_KIND_SUFFIX = "Runtime"
REFERENCE_RUNTIME_TYPE = "thin"
RUNTIME_KIND_BY_TYPE = {
    "alluxio": "AlluxioRuntime",
    "jindo": "JindoRuntime",
    "goosefs": "GooseFSRuntime",
    "juicefs": "JuiceFSRuntime",
    "efc": "EFCRuntime",
    "thin": "ThinRuntime",
    "vineyard": "VineyardRuntime",
}
REFERENCE_DATASET_PREFIX = "dataset://"
METADATA_LIST_ANNOTATION = "data.fluid.io/metadataList"
PLACEMENT_MODE_DEFAULT = ""
PLACEMENT_MODE_EXCLUSIVE = "Exclusive"
PLACEMENT_MODE_SHARED = "Shared"
EXCLUSIVE_PLACEMENT_MODES = (PLACEMENT_MODE_DEFAULT, PLACEMENT_MODE_EXCLUSIVE)
ACCELERATE_CATEGORY = "Accelerate"
SINGLE_DELEGATE_MESSAGE = "a reference dataset must mount exactly one dataset"
