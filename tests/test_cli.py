"""Tests for clusterfuncs.cli — argv, render and functions commands."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest
from typer.testing import CliRunner

from clusterfuncs.cli import (
    EXIT_CONFIG_FAILURE,
    EXIT_SUCCESS,
    EXIT_UNSUPPORTED,
    app,
)
from clusterfuncs.render.registry import FunctionRegistry

runner = CliRunner()


def _cluster_file(tmp_path: Path, provider: str = "aws", extra: str = "") -> Path:
    path = tmp_path / "cluster.yaml"
    path.write_text(
        textwrap.dedent(
            f"""\
            cluster:
              name: example.com
              spec:
                cloudProvider: {provider}
                project: proj-x
                masterInternalName: api.internal.example.com
            {extra}
            region: us-east-1
            """
        ),
        encoding="utf-8",
    )
    return path


def _stdout_lines(result) -> list:
    return [line for line in result.stdout.splitlines() if line]


# ── TestExitCodes ────────────────────────────────────────────────────


class TestExitCodes:
    def test_values(self):
        assert (EXIT_SUCCESS, EXIT_CONFIG_FAILURE, EXIT_UNSUPPORTED) == (0, 1, 2)


# ── TestArgvCommands ─────────────────────────────────────────────────


class TestArgvCommands:
    def test_dns_controller(self, tmp_path: Path):
        path = _cluster_file(tmp_path)
        result = runner.invoke(app, ["argv", "dns-controller", "--cluster", str(path)])
        assert result.exit_code == EXIT_SUCCESS
        lines = _stdout_lines(result)
        assert lines[-5:] == [
            "/usr/bin/dns-controller",
            "--watch-ingress=false",
            "--dns=aws-route53",
            "--zone=*/*",
            "-v=2",
        ]

    def test_dns_controller_json(self, tmp_path: Path):
        path = _cluster_file(tmp_path)
        result = runner.invoke(
            app, ["argv", "dns-controller", "--cluster", str(path), "--json"]
        )
        assert result.exit_code == EXIT_SUCCESS
        payload = json.loads(result.stdout)
        assert payload["argv"][0] == "/usr/bin/dns-controller"
        assert payload["diagnostics"][0]["level"] == "INFO"

    def test_external_dns_gce(self, tmp_path: Path):
        path = _cluster_file(tmp_path, provider="gce")
        result = runner.invoke(
            app, ["argv", "external-dns", "--cluster", str(path), "--json"]
        )
        assert result.exit_code == EXIT_SUCCESS
        assert json.loads(result.stdout)["argv"] == [
            "--provider=google",
            "--google-project=proj-x",
            "--source=ingress",
        ]

    @pytest.mark.parametrize("command", ["dns-controller", "external-dns"])
    def test_unsupported_provider(self, tmp_path: Path, command):
        path = _cluster_file(tmp_path, provider="azure")
        result = runner.invoke(app, ["argv", command, "--cluster", str(path)])
        assert result.exit_code == EXIT_UNSUPPORTED
        assert "--" not in result.stdout

    def test_missing_cluster_file(self, tmp_path: Path):
        result = runner.invoke(
            app, ["argv", "dns-controller", "--cluster", str(tmp_path / "no.yaml")]
        )
        assert result.exit_code == EXIT_CONFIG_FAILURE

    def test_malformed_cluster_file(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("cluster: [unclosed\n", encoding="utf-8")
        result = runner.invoke(app, ["argv", "dns-controller", "--cluster", str(path)])
        assert result.exit_code == EXIT_CONFIG_FAILURE
        assert isinstance(result.exception, SystemExit)
        assert "not valid YAML" in " ".join(result.output.split())


# ── TestRenderCommand ────────────────────────────────────────────────


class TestRenderCommand:
    def test_render(self, tmp_path: Path):
        path = _cluster_file(tmp_path)
        tpl = tmp_path / "t.j2"
        tpl.write_text("{{ ClusterName() }}/{{ Region() }}\n", encoding="utf-8")
        result = runner.invoke(
            app, ["render", "--cluster", str(path), "--template", str(tpl)]
        )
        assert result.exit_code == EXIT_SUCCESS
        assert result.stdout == "example.com/us-east-1\n"

    def test_render_tag_override(self, tmp_path: Path):
        path = _cluster_file(tmp_path)
        tpl = tmp_path / "t.j2"
        tpl.write_text("{{ HasTag('_x') }}", encoding="utf-8")
        result = runner.invoke(
            app,
            ["render", "--cluster", str(path), "--template", str(tpl), "--tag", "_x"],
        )
        assert result.exit_code == EXIT_SUCCESS
        assert result.stdout == "True"

    def test_render_missing_group(self, tmp_path: Path):
        path = _cluster_file(tmp_path)
        tpl = tmp_path / "t.j2"
        tpl.write_text("{{ GetInstanceGroup('ghost') }}", encoding="utf-8")
        result = runner.invoke(
            app, ["render", "--cluster", str(path), "--template", str(tpl)]
        )
        assert result.exit_code == EXIT_CONFIG_FAILURE

    def test_render_missing_template(self, tmp_path: Path):
        path = _cluster_file(tmp_path)
        result = runner.invoke(
            app,
            ["render", "--cluster", str(path), "--template", str(tmp_path / "x.j2")],
        )
        assert result.exit_code == EXIT_CONFIG_FAILURE


# ── TestFunctionsCommand ─────────────────────────────────────────────


class TestFunctionsCommand:
    def test_lists_catalog(self):
        result = runner.invoke(app, ["functions"])
        assert result.exit_code == EXIT_SUCCESS
        names = [line.split("/")[0] for line in _stdout_lines(result)]
        assert names == FunctionRegistry.names()
