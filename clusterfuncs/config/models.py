"""Pydantic models for the cluster definition consumed by template functions.

Defines the read-only data structures for:
- The cluster spec (provider, DNS zone, master hostnames, add-on config)
- Instance groups
- The optional external-DNS, cloud and kube-dns sub-configurations

Field names are snake_case in Python; YAML input may use either the
snake_case name or the camelCase alias (``cloudProvider``, ``dnsZone``,
``masterInternalName`` ...).
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _FrozenModel(BaseModel):
    """Immutable base: a render never mutates its inputs."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class InstanceGroupRole(str, Enum):
    """Role an instance group plays in the cluster."""

    MASTER = "Master"
    NODE = "Node"
    BASTION = "Bastion"


class ExternalDNSConfig(_FrozenModel):
    """External-DNS settings.

    The block being present at all is meaningful: when absent the
    DNS controller runs with ingress watching disabled.
    """

    watch_ingress: Optional[bool] = None


class CloudConfiguration(_FrozenModel):
    """Provider-specific cloud settings."""

    vsphere_core_dns_server: Optional[str] = Field(
        default=None, alias="vSphereCoreDNSServer"
    )
    vsphere_server: Optional[str] = Field(default=None, alias="vSphereServer")
    vsphere_datacenter: Optional[str] = Field(
        default=None, alias="vSphereDatacenter"
    )


class KubeDNSConfig(_FrozenModel):
    """kube-dns add-on settings, handed to templates as-is."""

    image: str = ""
    replicas: int = 2
    domain: str = "cluster.local"
    server_ip: str = Field(default="", alias="serverIP")
    cache_max_size: int = 1000


class ClusterSpec(_FrozenModel):
    """Cluster-wide settings.

    ``cloud_provider`` is kept as the raw configured string; it is only
    narrowed to :class:`~clusterfuncs.cloud.providers.CloudProvider` when
    a synthesizer needs it, so an unknown value fails the render rather
    than the load.
    """

    cloud_provider: str = ""
    project: str = ""
    dns_zone: str = Field(default="", alias="dnsZone")
    master_internal_name: str = ""
    master_public_name: str = ""
    network_id: str = Field(default="", alias="networkID")
    kubernetes_version: str = ""
    cloud_labels: Dict[str, str] = Field(default_factory=dict)
    external_dns: Optional[ExternalDNSConfig] = Field(
        default=None, alias="externalDns"
    )
    cloud_config: Optional[CloudConfiguration] = None
    kube_dns: Optional[KubeDNSConfig] = Field(default=None, alias="kubeDNS")

    @field_validator(
        "cloud_provider",
        "dns_zone",
        "master_internal_name",
        "project",
        "kubernetes_version",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, v: Optional[str]) -> str:
        """YAML ``null`` means unset."""
        return "" if v is None else v

    def shared_vpc(self) -> bool:
        """True when the cluster is placed into a pre-existing VPC."""
        return bool(self.network_id)


class Cluster(_FrozenModel):
    """A named cluster and its spec."""

    name: str
    spec: ClusterSpec = Field(default_factory=ClusterSpec)


class InstanceGroup(_FrozenModel):
    """A named group of identically configured machines."""

    name: str
    role: InstanceGroupRole = InstanceGroupRole.NODE
    machine_type: str = ""
    min_size: Optional[int] = None
    max_size: Optional[int] = None
    subnets: List[str] = Field(default_factory=list)
    cloud_labels: Dict[str, str] = Field(default_factory=dict)

    @property
    def is_master(self) -> bool:
        return self.role == InstanceGroupRole.MASTER
