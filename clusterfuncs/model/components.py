"""Container image names for cluster components."""

from __future__ import annotations

from typing import Dict, FrozenSet

from clusterfuncs.config.models import ClusterSpec
from clusterfuncs.errors import PreconditionError, UnsupportedComponentError

CONTROL_PLANE_REGISTRY = "gcr.io/google_containers"

#: Components whose image tag tracks the cluster's Kubernetes version.
CONTROL_PLANE_COMPONENTS: FrozenSet[str] = frozenset(
    {
        "kube-apiserver",
        "kube-controller-manager",
        "kube-scheduler",
        "kube-proxy",
    },
)

#: Add-on images pinned independently of the Kubernetes version.
ADDON_IMAGES: Dict[str, str] = {
    "dns-controller": "kope/dns-controller:1.6.1",
    "external-dns": "registry.opensource.zalan.do/teapot/external-dns:v0.4.4",
}


def image(component: str, spec: ClusterSpec) -> str:
    """Return the image reference for *component*.

    Raises :class:`UnsupportedComponentError` for unknown components and
    :class:`PreconditionError` when a control-plane image is requested
    without a usable ``kubernetes_version``.
    """
    if component in ADDON_IMAGES:
        return ADDON_IMAGES[component]
    if component not in CONTROL_PLANE_COMPONENTS:
        raise UnsupportedComponentError(component)

    version = spec.kubernetes_version.strip()
    if not version:
        raise PreconditionError("kubernetes_version")
    if "://" in version:
        # Base-URL versions need the .docker_tag file fetched from the URL.
        raise PreconditionError(
            "kubernetes_version",
            f"Cannot resolve image for {component} from base URL {version!r}",
        )
    return f"{CONTROL_PLANE_REGISTRY}/{component}:v{version.lstrip('v')}"
