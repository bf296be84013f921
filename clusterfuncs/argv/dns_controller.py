"""Startup argv for the DNS-publishing controller (``dns-controller``).

Flag order::

    /usr/bin/dns-controller
    [--watch-ingress=false]
    --dns=<provider backend> [--dns-server=<addr>]
    [--gossip-seed=127.0.0.1:3999]
    [--zone=<name> | --zone=*/<id>]
    --zone=*/*
    -v=2

The trailing ``--zone=*/*`` is always emitted, even after a narrower
zone flag, so the controller may update records in every zone.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from clusterfuncs.argv.models import ArgvResult, Diagnostic
from clusterfuncs.cloud.dns import GOSSIP_SEED, is_gossip_hostname
from clusterfuncs.cloud.providers import CloudProvider, check_exhaustive, dispatch
from clusterfuncs.config.models import ClusterSpec
from clusterfuncs.errors import PreconditionError
from clusterfuncs.model.context import with_default_bool

DNS_CONTROLLER_PATH = "/usr/bin/dns-controller"
WATCH_INGRESS_ISSUE_URL = "https://github.com/kubernetes/kops/issues/2496"
WILDCARD_ZONE_FLAG = "--zone=*/*"
VERBOSITY_FLAG = "-v=2"

ProviderFlags = Callable[[ClusterSpec], List[str]]


def _aws_flags(spec: ClusterSpec) -> List[str]:
    return ["--dns=aws-route53"]


def _gce_flags(spec: ClusterSpec) -> List[str]:
    return ["--dns=google-clouddns"]


def _vsphere_flags(spec: ClusterSpec) -> List[str]:
    server = spec.cloud_config.vsphere_core_dns_server if spec.cloud_config else None
    if not server:
        raise PreconditionError(
            "cloud_config.vsphere_core_dns_server",
            "vSphere clusters require cloudConfig.vSphereCoreDNSServer "
            "for dns-controller",
        )
    return ["--dns=coredns", f"--dns-server={server}"]


_PROVIDER_FLAGS: Dict[CloudProvider, Optional[ProviderFlags]] = {
    CloudProvider.AWS: _aws_flags,
    CloudProvider.GCE: _gce_flags,
    CloudProvider.VSPHERE: _vsphere_flags,
}
check_exhaustive(_PROVIDER_FLAGS, "dns-controller")


def _watch_ingress_flags(spec: ClusterSpec) -> tuple[List[str], List[Diagnostic]]:
    if spec.external_dns is None:
        return (
            ["--watch-ingress=false"],
            [Diagnostic.info("watch-ingress=false set on DNSController")],
        )
    if with_default_bool(spec.external_dns.watch_ingress, False):
        return (
            [],
            [
                Diagnostic.warning("--watch-ingress=true set on DNSController."),
                Diagnostic.warning(
                    "this may cause problems with previously defined services: "
                    + WATCH_INGRESS_ISSUE_URL
                ),
            ],
        )
    return ["--watch-ingress=false"], []


def _zone_flags(zone: str) -> List[str]:
    if not zone:
        return []
    if "." in zone:
        # match by name
        return [f"--zone={zone}"]
    # match by id
    return [f"--zone=*/{zone}"]


def dns_controller_argv(spec: ClusterSpec) -> ArgvResult:
    """Build the ``dns-controller`` argv for *spec*.

    Raises :class:`~clusterfuncs.errors.UnsupportedProviderError` for a
    provider outside the closed set and
    :class:`~clusterfuncs.errors.PreconditionError` when vSphere has no
    CoreDNS server configured.  Nothing is returned on failure.
    """
    argv: List[str] = [DNS_CONTROLLER_PATH]

    ingress_flags, diagnostics = _watch_ingress_flags(spec)
    argv.extend(ingress_flags)

    provider_flags = dispatch(_PROVIDER_FLAGS, spec.cloud_provider)
    argv.extend(provider_flags(spec))

    if is_gossip_hostname(spec.master_internal_name):
        argv.append(f"--gossip-seed={GOSSIP_SEED}")

    argv.extend(_zone_flags(spec.dns_zone))
    argv.append(WILDCARD_ZONE_FLAG)
    argv.append(VERBOSITY_FLAG)

    return ArgvResult(argv, diagnostics)
