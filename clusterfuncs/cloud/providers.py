"""Closed set of supported cloud providers.

Provider policy in this package is table-driven: each synthesizer keeps a
mapping from :class:`CloudProvider` to its handler and calls
:func:`check_exhaustive` at import time, so adding a member here fails
loudly until every table has been updated.  A table maps a provider to
``None`` when it deliberately does not support it.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional, TypeVar

from clusterfuncs.errors import UnsupportedProviderError

T = TypeVar("T")


class CloudProvider(str, Enum):
    """Cloud platforms for which argv synthesis is defined."""

    AWS = "aws"
    GCE = "gce"
    VSPHERE = "vsphere"


def parse_provider(value: Optional[str]) -> CloudProvider:
    """Narrow a configured provider string to :class:`CloudProvider`.

    Raises :class:`UnsupportedProviderError` carrying *value* unchanged
    for anything outside the closed set.
    """
    try:
        return CloudProvider(value)
    except ValueError:
        raise UnsupportedProviderError(str(value or "")) from None


def check_exhaustive(table: Mapping[CloudProvider, object], name: str) -> None:
    """Raise :class:`TypeError` unless *table* has an entry for every provider."""
    missing = [p.value for p in CloudProvider if p not in table]
    if missing:
        raise TypeError(
            f"Provider table {name!r} has no entry for: {', '.join(missing)}"
        )


def dispatch(
    table: Mapping[CloudProvider, Optional[T]], raw_provider: Optional[str]
) -> T:
    """Return the table entry for *raw_provider*.

    Unknown strings and providers mapped to ``None`` both raise
    :class:`UnsupportedProviderError` with the configured value.
    """
    provider = parse_provider(raw_provider)
    handler = table[provider]
    if handler is None:
        raise UnsupportedProviderError(provider.value)
    return handler
