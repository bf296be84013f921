"""Startup argv for the ``external-dns`` synchronizer."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from clusterfuncs.argv.models import ArgvResult
from clusterfuncs.cloud.providers import CloudProvider, check_exhaustive, dispatch
from clusterfuncs.config.models import ClusterSpec

SOURCE_FLAG = "--source=ingress"

ProviderFlags = Callable[[ClusterSpec], List[str]]


def _aws_flags(spec: ClusterSpec) -> List[str]:
    return ["--provider=aws"]


def _gce_flags(spec: ClusterSpec) -> List[str]:
    # Project is passed through verbatim.
    return ["--provider=google", f"--google-project={spec.project}"]


# external-dns has no vSphere backend.
_PROVIDER_FLAGS: Dict[CloudProvider, Optional[ProviderFlags]] = {
    CloudProvider.AWS: _aws_flags,
    CloudProvider.GCE: _gce_flags,
    CloudProvider.VSPHERE: None,
}
check_exhaustive(_PROVIDER_FLAGS, "external-dns")


def external_dns_argv(spec: ClusterSpec) -> ArgvResult:
    """Build the ``external-dns`` argv for *spec*.

    Raises :class:`~clusterfuncs.errors.UnsupportedProviderError` for
    any provider other than ``aws`` or ``gce``.
    """
    provider_flags = dispatch(_PROVIDER_FLAGS, spec.cloud_provider)
    argv = provider_flags(spec)
    argv.append(SOURCE_FLAG)
    return ArgvResult(argv, [])
