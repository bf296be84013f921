"""DNS naming conventions."""

from __future__ import annotations

#: Clusters whose names end in this suffix discover peers via gossip
#: instead of a hosted DNS zone.
GOSSIP_SUFFIX = ".k8s.local"

#: Address the DNS controller seeds gossip from on a master.
GOSSIP_SEED = "127.0.0.1:3999"


def is_gossip_hostname(name: str) -> bool:
    """True if *name* follows the gossip naming convention.

    A trailing dot is ignored, so ``api.foo.k8s.local.`` also matches.
    """
    normalized = "." + (name or "").rstrip(".")
    return normalized.endswith(GOSSIP_SUFFIX)
