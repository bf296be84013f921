"""Template function registry.

Maps the fixed catalog of template function names to callables bound to
one :class:`~clusterfuncs.model.context.ClusterContext`.  A registry is
built once per run and handed to the renderer; there is no process-wide
function table.

When adding a function:

1. Implement it as a method on :class:`FunctionRegistry`.
2. Add a :class:`TemplateFunction` entry to :data:`CATALOG` naming the
   method and its positional arity.

Construction checks every entry against its method signature, so a
mismatch fails when the registry is built, not mid-render.
"""

from __future__ import annotations

import base64
import inspect
import logging
from typing import (
    Any,
    Callable,
    Dict,
    List,
    MutableMapping,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from clusterfuncs.argv.dns_controller import dns_controller_argv
from clusterfuncs.argv.external_dns import external_dns_argv
from clusterfuncs.cloud.gce import encode_gce_label
from clusterfuncs.config.models import InstanceGroup, KubeDNSConfig
from clusterfuncs.model import components
from clusterfuncs.model.context import ClusterContext, with_default_bool

logger = logging.getLogger(__name__)

#: Target architecture.  The build host may differ from the target, so
#: this is hard-coded rather than detected.
TARGET_ARCH = "amd64"


class TemplateFunction(NamedTuple):
    """One catalog entry: renderer-facing name, arity, handler method."""

    name: str
    arity: int
    handler: str


CATALOG: Tuple[TemplateFunction, ...] = (
    TemplateFunction("SharedVPC", 0, "shared_vpc"),
    TemplateFunction("Arch", 0, "arch"),
    TemplateFunction("Base64Encode", 1, "base64_encode"),
    TemplateFunction("replace", 3, "replace"),
    TemplateFunction("join", 2, "join"),
    TemplateFunction("ClusterName", 0, "cluster_name"),
    TemplateFunction("HasTag", 1, "has_tag"),
    TemplateFunction("Image", 1, "image"),
    TemplateFunction("WithDefaultBool", 2, "with_default_bool"),
    TemplateFunction("GetInstanceGroup", 1, "get_instance_group"),
    TemplateFunction("CloudTags", 1, "cloud_tags"),
    TemplateFunction("KubeDNS", 0, "kube_dns"),
    TemplateFunction("DnsControllerArgv", 0, "dns_controller_argv"),
    TemplateFunction("ExternalDnsArgv", 0, "external_dns_argv"),
    TemplateFunction("EncodeGCELabel", 1, "encode_gce_label"),
    TemplateFunction("Region", 0, "region"),
)


def _positional_arity(fn: Callable[..., Any]) -> int:
    params = inspect.signature(fn).parameters.values()
    return sum(
        1
        for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    )


class FunctionRegistry:
    """Template functions bound to a single cluster context."""

    def __init__(self, context: ClusterContext) -> None:
        self._context = context
        self._bindings: Dict[str, Callable[..., Any]] = {}
        for entry in CATALOG:
            fn = getattr(self, entry.handler)
            arity = _positional_arity(fn)
            if arity != entry.arity:
                raise TypeError(
                    f"Template function {entry.name!r} declares arity "
                    f"{entry.arity} but {entry.handler}() takes {arity}"
                )
            self._bindings[entry.name] = fn

    @property
    def context(self) -> ClusterContext:
        return self._context

    # ── renderer boundary ───────────────────────────────────────────────────

    def populate(
        self, namespace: MutableMapping[str, Callable[..., Any]]
    ) -> MutableMapping[str, Callable[..., Any]]:
        """Insert every catalog binding into *namespace* and return it."""
        for name, fn in self._bindings.items():
            namespace[name] = fn
        return namespace

    def as_dict(self) -> Dict[str, Callable[..., Any]]:
        """Return a fresh ``name -> callable`` mapping."""
        return dict(self.populate({}))

    @staticmethod
    def names() -> List[str]:
        """Catalog names in declaration order."""
        return [entry.name for entry in CATALOG]

    # ── cluster-derived values ──────────────────────────────────────────────

    def shared_vpc(self) -> bool:
        """True if the cluster is placed into a pre-existing VPC."""
        return self._context.shared_vpc()

    def arch(self) -> str:
        return TARGET_ARCH

    def cluster_name(self) -> str:
        return self._context.cluster_name

    def region(self) -> str:
        return self._context.region

    def has_tag(self, tag: str) -> bool:
        return self._context.has_tag(tag)

    def image(self, component: str) -> str:
        """Image reference for *component*; see :func:`components.image`."""
        return components.image(component, self._context.spec)

    def get_instance_group(self, name: str) -> InstanceGroup:
        return self._context.get_instance_group(name)

    def cloud_tags(self, ig: Union[InstanceGroup, str]) -> Dict[str, str]:
        return self._context.cloud_tags(ig)

    def kube_dns(self) -> Optional[KubeDNSConfig]:
        return self._context.spec.kube_dns

    def dns_controller_argv(self) -> List[str]:
        """dns-controller argv; diagnostics go to this module's logger."""
        result = dns_controller_argv(self._context.spec)
        result.log_to(logger)
        return result.argv

    def external_dns_argv(self) -> List[str]:
        result = external_dns_argv(self._context.spec)
        result.log_to(logger)
        return result.argv

    # ── plain helpers ───────────────────────────────────────────────────────

    @staticmethod
    def base64_encode(s: Union[str, bytes]) -> str:
        data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
        return base64.b64encode(data).decode("ascii")

    @staticmethod
    def replace(s: str, find: str, replacement: str) -> str:
        return s.replace(find, replacement)

    @staticmethod
    def join(items: Sequence[str], sep: str) -> str:
        return sep.join(items)

    @staticmethod
    def with_default_bool(value: Optional[bool], default: bool) -> bool:
        return with_default_bool(value, default)

    @staticmethod
    def encode_gce_label(s: str) -> str:
        return encode_gce_label(s)
