"""Cluster definition models.

Loading lives in :mod:`clusterfuncs.config.loader`.
"""

from clusterfuncs.config.models import (
    CloudConfiguration,
    Cluster,
    ClusterSpec,
    ExternalDNSConfig,
    InstanceGroup,
    InstanceGroupRole,
    KubeDNSConfig,
)

__all__ = [
    "CloudConfiguration",
    "Cluster",
    "ClusterSpec",
    "ExternalDNSConfig",
    "InstanceGroup",
    "InstanceGroupRole",
    "KubeDNSConfig",
]
