"""Cloud-provider identity and provider-specific naming helpers."""

from clusterfuncs.cloud.dns import GOSSIP_SEED, GOSSIP_SUFFIX, is_gossip_hostname
from clusterfuncs.cloud.gce import decode_gce_label, encode_gce_label
from clusterfuncs.cloud.providers import (
    CloudProvider,
    check_exhaustive,
    dispatch,
    parse_provider,
)

__all__ = [
    "CloudProvider",
    "GOSSIP_SEED",
    "GOSSIP_SUFFIX",
    "check_exhaustive",
    "decode_gce_label",
    "dispatch",
    "encode_gce_label",
    "is_gossip_hostname",
    "parse_provider",
]
