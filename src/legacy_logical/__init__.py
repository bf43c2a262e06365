"""Convert CSS logical properties to their legacy physical equivalents."""

from legacy_logical.model import WrappedValue
from legacy_logical.splitter import SplitValue, split_values
from legacy_logical.table import LOGICAL_PROPERTIES, supported_properties
from legacy_logical.transforms import (
    LegacyLogicalPropertiesTransform,
    apply_transforms,
    transform_stylesheet,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "LOGICAL_PROPERTIES",
    "LegacyLogicalPropertiesTransform",
    "SplitValue",
    "WrappedValue",
    "apply_transforms",
    "split_values",
    "supported_properties",
    "transform_stylesheet",
]
