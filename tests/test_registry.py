"""Tests for clusterfuncs.render.registry — template function catalog and bindings."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from clusterfuncs.config.models import (
    Cluster,
    ClusterSpec,
    ExternalDNSConfig,
    InstanceGroup,
    InstanceGroupRole,
    KubeDNSConfig,
)
from clusterfuncs.errors import (
    InstanceGroupNotFoundError,
    UnsupportedComponentError,
    UnsupportedProviderError,
)
from clusterfuncs.model.context import ClusterContext
from clusterfuncs.render import registry as registry_mod
from clusterfuncs.render.registry import (
    CATALOG,
    TARGET_ARCH,
    FunctionRegistry,
    TemplateFunction,
)

EXPECTED_NAMES = [
    "SharedVPC",
    "Arch",
    "Base64Encode",
    "replace",
    "join",
    "ClusterName",
    "HasTag",
    "Image",
    "WithDefaultBool",
    "GetInstanceGroup",
    "CloudTags",
    "KubeDNS",
    "DnsControllerArgv",
    "ExternalDnsArgv",
    "EncodeGCELabel",
    "Region",
]


def _registry(**spec_overrides) -> FunctionRegistry:
    spec_kwargs = {
        "cloud_provider": "gce",
        "project": "proj-x",
        "dns_zone": "example.com",
        "master_internal_name": "api.internal.example.com",
        "kubernetes_version": "1.6.2",
    }
    spec_kwargs.update(spec_overrides)
    ctx = ClusterContext(
        cluster=Cluster(name="example.com", spec=ClusterSpec(**spec_kwargs)),
        instance_groups=[
            InstanceGroup(name="master-1", role=InstanceGroupRole.MASTER),
            InstanceGroup(name="node-1"),
        ],
        tags={"_gce"},
        region="us-central1",
    )
    return FunctionRegistry(ctx)


# ── TestCatalog ──────────────────────────────────────────────────────


class TestCatalog:
    def test_names_in_order(self):
        assert FunctionRegistry.names() == EXPECTED_NAMES

    def test_names_unique(self):
        names = [entry.name for entry in CATALOG]
        assert len(names) == len(set(names))

    def test_arity_mismatch_fails_at_build(self):
        bad = CATALOG + (TemplateFunction("Broken", 2, "region"),)
        with patch.object(registry_mod, "CATALOG", bad):
            with pytest.raises(TypeError, match="Broken"):
                _registry()


# ── TestPopulate ─────────────────────────────────────────────────────


class TestPopulate:
    def test_populates_every_name(self):
        ns = _registry().populate({})
        assert set(ns) == set(EXPECTED_NAMES)
        assert all(callable(fn) for fn in ns.values())

    def test_returns_same_mapping(self):
        ns: dict = {"existing": len}
        out = _registry().populate(ns)
        assert out is ns
        assert ns["existing"] is len

    def test_repeatable(self):
        reg = _registry()
        a = reg.populate({})
        b = reg.populate({})
        assert a.keys() == b.keys()
        assert a["DnsControllerArgv"]() == b["DnsControllerArgv"]()

    def test_as_dict_is_fresh(self):
        reg = _registry()
        d = reg.as_dict()
        d.clear()
        assert set(reg.as_dict()) == set(EXPECTED_NAMES)

    def test_registries_are_independent(self):
        a = _registry().as_dict()
        b = _registry(cloud_provider="aws").as_dict()
        assert a["ExternalDnsArgv"]()[0] == "--provider=google"
        assert b["ExternalDnsArgv"]()[0] == "--provider=aws"


# ── TestBindings ─────────────────────────────────────────────────────


class TestBindings:
    @pytest.fixture()
    def fns(self):
        return _registry().as_dict()

    def test_shared_vpc(self, fns):
        assert fns["SharedVPC"]() is False
        assert _registry(network_id="vpc-1").as_dict()["SharedVPC"]() is True

    def test_arch(self, fns):
        assert fns["Arch"]() == TARGET_ARCH == "amd64"

    def test_base64(self, fns):
        assert fns["Base64Encode"]("hello") == "aGVsbG8="
        assert fns["Base64Encode"](b"\x00\xff") == "AP8="
        assert fns["Base64Encode"]("") == ""

    def test_replace_all(self, fns):
        assert fns["replace"]("a.b.c", ".", "-") == "a-b-c"

    def test_join(self, fns):
        assert fns["join"](["a", "b"], ",") == "a,b"
        assert fns["join"]([], ",") == ""

    def test_cluster_name(self, fns):
        assert fns["ClusterName"]() == "example.com"

    def test_has_tag(self, fns):
        assert fns["HasTag"]("_gce") is True
        assert fns["HasTag"]("_aws") is False

    def test_image(self, fns):
        assert fns["Image"]("kube-proxy").endswith("kube-proxy:v1.6.2")

    def test_image_unsupported(self, fns):
        with pytest.raises(UnsupportedComponentError):
            fns["Image"]("nope")

    def test_with_default_bool(self, fns):
        assert fns["WithDefaultBool"](None, True) is True
        assert fns["WithDefaultBool"](False, True) is False

    def test_get_instance_group(self, fns):
        assert fns["GetInstanceGroup"]("node-1").name == "node-1"

    def test_get_instance_group_missing(self, fns):
        with pytest.raises(InstanceGroupNotFoundError) as excinfo:
            fns["GetInstanceGroup"]("node-2")
        assert excinfo.value.name == "node-2"

    def test_cloud_tags(self, fns):
        tags = fns["CloudTags"](fns["GetInstanceGroup"]("master-1"))
        assert tags["KubernetesCluster"] == "example.com"
        assert tags["k8s.io/role/master"] == "1"

    def test_kube_dns_absent(self, fns):
        assert fns["KubeDNS"]() is None

    def test_kube_dns_present(self):
        kd = KubeDNSConfig(server_ip="100.64.0.10")
        fns = _registry(kube_dns=kd).as_dict()
        assert fns["KubeDNS"]() == kd

    def test_encode_gce_label(self, fns):
        assert fns["EncodeGCELabel"]("a.b") == "a_2eb"

    def test_region(self, fns):
        assert fns["Region"]() == "us-central1"

    def test_dns_controller_argv(self, fns):
        argv = fns["DnsControllerArgv"]()
        assert argv[:3] == [
            "/usr/bin/dns-controller",
            "--watch-ingress=false",
            "--dns=google-clouddns",
        ]
        assert argv[-3:] == ["--zone=example.com", "--zone=*/*", "-v=2"]

    def test_external_dns_argv(self, fns):
        assert fns["ExternalDnsArgv"]() == [
            "--provider=google",
            "--google-project=proj-x",
            "--source=ingress",
        ]

    def test_argv_unsupported_provider(self):
        fns = _registry(cloud_provider="azure").as_dict()
        with pytest.raises(UnsupportedProviderError):
            fns["DnsControllerArgv"]()
        with pytest.raises(UnsupportedProviderError):
            fns["ExternalDnsArgv"]()


# ── TestDiagnosticsLogging ───────────────────────────────────────────


class TestDiagnosticsLogging:
    def test_info_logged_without_external_dns(self, caplog):
        fns = _registry().as_dict()
        with caplog.at_level(logging.INFO, logger=registry_mod.__name__):
            fns["DnsControllerArgv"]()
        assert any(
            r.levelno == logging.INFO and "watch-ingress=false" in r.getMessage()
            for r in caplog.records
        )

    def test_warning_logged_with_watch_ingress(self, caplog):
        spec_extra = {"external_dns": ExternalDNSConfig(watch_ingress=True)}
        fns = _registry(**spec_extra).as_dict()
        with caplog.at_level(logging.INFO, logger=registry_mod.__name__):
            argv = fns["DnsControllerArgv"]()
        assert "--watch-ingress=false" not in argv
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert warnings
