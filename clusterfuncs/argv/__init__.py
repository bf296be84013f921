"""Argv synthesis for the DNS add-on controllers."""

from clusterfuncs.argv.dns_controller import DNS_CONTROLLER_PATH, dns_controller_argv
from clusterfuncs.argv.external_dns import external_dns_argv
from clusterfuncs.argv.models import ArgvResult, Diagnostic

__all__ = [
    "ArgvResult",
    "DNS_CONTROLLER_PATH",
    "Diagnostic",
    "dns_controller_argv",
    "external_dns_argv",
]
