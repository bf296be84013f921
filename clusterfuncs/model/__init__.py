"""Cluster context and derived lookups."""

from clusterfuncs.model.components import (
    ADDON_IMAGES,
    CONTROL_PLANE_COMPONENTS,
    image,
)
from clusterfuncs.model.context import (
    CLUSTER_TAG,
    ClusterContext,
    with_default_bool,
)

__all__ = [
    "ADDON_IMAGES",
    "CLUSTER_TAG",
    "CONTROL_PLANE_COMPONENTS",
    "ClusterContext",
    "image",
    "with_default_bool",
]
