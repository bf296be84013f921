"""Read-only cluster context shared by every template function.

A :class:`ClusterContext` is built once per provisioning run and never
mutated while a render using it is in flight.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Tuple, Union

from clusterfuncs.config.models import (
    Cluster,
    ClusterSpec,
    InstanceGroup,
    InstanceGroupRole,
)
from clusterfuncs.errors import InstanceGroupNotFoundError

#: Tag applied to every cloud resource owned by the cluster.
CLUSTER_TAG = "KubernetesCluster"

_ROLE_TAGS: Dict[InstanceGroupRole, str] = {
    InstanceGroupRole.MASTER: "k8s.io/role/master",
    InstanceGroupRole.NODE: "k8s.io/role/node",
    InstanceGroupRole.BASTION: "k8s.io/role/bastion",
}


@dataclass(frozen=True)
class ClusterContext:
    """Immutable view of the cluster being rendered.

    Attributes:
        cluster: The cluster and its spec.
        instance_groups: Instance groups in declaration order.
        tags: Active build tags (membership only).
        region: Deployment region for the run.
    """

    cluster: Cluster
    instance_groups: Tuple[InstanceGroup, ...] = ()
    tags: FrozenSet[str] = field(default_factory=frozenset)
    region: str = ""

    def __post_init__(self) -> None:
        # Accept any iterable from callers but store immutable containers.
        object.__setattr__(self, "instance_groups", tuple(self.instance_groups))
        object.__setattr__(self, "tags", frozenset(self.tags))

        seen = set()
        for ig in self.instance_groups:
            if ig.name in seen:
                raise ValueError(f"Duplicate instance group name {ig.name!r}")
            seen.add(ig.name)

    # ── accessors ───────────────────────────────────────────────────────────

    @property
    def spec(self) -> ClusterSpec:
        return self.cluster.spec

    @property
    def cluster_name(self) -> str:
        return self.cluster.name

    # ── lookup helpers ──────────────────────────────────────────────────────

    def shared_vpc(self) -> bool:
        """True when the cluster runs in a pre-existing VPC."""
        return self.spec.shared_vpc()

    def has_tag(self, tag: str) -> bool:
        """True if *tag* is among the active tags."""
        return tag in self.tags

    def get_instance_group(self, name: str) -> InstanceGroup:
        """Return the instance group called *name*.

        Raises :class:`InstanceGroupNotFoundError` when there is none.
        """
        for ig in self.instance_groups:
            if ig.name == name:
                return ig
        raise InstanceGroupNotFoundError(name)

    def cloud_tags(self, ig: Union[InstanceGroup, str]) -> Dict[str, str]:
        """Return the cloud tags for resources belonging to *ig*.

        Cluster labels are overlaid by the group's own labels; the
        cluster-ownership and role tags always win.
        """
        if isinstance(ig, str):
            ig = self.get_instance_group(ig)

        tags: Dict[str, str] = dict(self.spec.cloud_labels)
        tags.update(ig.cloud_labels)
        tags[CLUSTER_TAG] = self.cluster_name
        tags[_ROLE_TAGS[ig.role]] = "1"
        return tags


def with_default_bool(value: Optional[bool], default: bool) -> bool:
    """Return *value* unless it is ``None``, otherwise *default*."""
    if value is not None:
        return value
    return default
