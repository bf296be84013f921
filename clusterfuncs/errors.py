"""Error kinds raised by template functions and argv synthesis.

Every error here aborts the current render.  None are retried or
downgraded to defaults; they each point at a configuration defect that
has to be fixed before rendering again.
"""

from __future__ import annotations


class TemplateFunctionError(Exception):
    """Base class for all render-aborting template function errors."""


class InstanceGroupNotFoundError(TemplateFunctionError, LookupError):
    """Requested instance group is not part of the cluster."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"InstanceGroup {name!r} not found")


class UnsupportedComponentError(TemplateFunctionError, ValueError):
    """Image resolution requested for an unknown component."""

    def __init__(self, component: str) -> None:
        self.component = component
        super().__init__(f"Unsupported component {component!r}")


class UnsupportedProviderError(TemplateFunctionError, ValueError):
    """Cloud provider outside the closed set ``aws``, ``gce``, ``vsphere``."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Unhandled cloud provider {provider!r}")


class PreconditionError(TemplateFunctionError, ValueError):
    """Provider-specific configuration required for synthesis is absent."""

    def __init__(self, field: str, message: str = "") -> None:
        self.field = field
        super().__init__(message or f"Required field {field!r} is not set")
