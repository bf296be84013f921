"""CLI entry point for clusterfuncs, built on typer.

Provides ``argv`` (dns-controller / external-dns), ``render`` and
``functions`` commands over a cluster definition YAML.

Usage::

    clusterfuncs --help
    clusterfuncs argv dns-controller --cluster cluster.yaml
    clusterfuncs argv external-dns --cluster cluster.yaml --json
    clusterfuncs render --cluster cluster.yaml --template dns-controller.yaml.j2
    clusterfuncs functions
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Callable, List, Optional

import typer
from jinja2 import TemplateError

from clusterfuncs import ui
from clusterfuncs.argv.dns_controller import dns_controller_argv
from clusterfuncs.argv.external_dns import external_dns_argv
from clusterfuncs.argv.models import ArgvResult
from clusterfuncs.config.loader import load_cluster_context
from clusterfuncs.config.models import ClusterSpec
from clusterfuncs.errors import (
    PreconditionError,
    TemplateFunctionError,
    UnsupportedProviderError,
)
from clusterfuncs.model.context import ClusterContext
from clusterfuncs.render.registry import CATALOG, FunctionRegistry
from clusterfuncs.render.renderer import render_file

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_FAILURE = 1
EXIT_UNSUPPORTED = 2

app = typer.Typer(
    name="clusterfuncs",
    help="Render cluster add-on templates and controller argv.",
    no_args_is_help=True,
)
argv_app = typer.Typer(help="Print controller startup argv.", no_args_is_help=True)
app.add_typer(argv_app, name="argv")


# ── Shared helpers ───────────────────────────────────────────────────────────


def _setup_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG)


def _load(cluster: str, region: Optional[str], tags: Optional[List[str]]) -> ClusterContext:
    """Load the cluster definition, exiting with EXIT_CONFIG_FAILURE on error."""
    try:
        return load_cluster_context(cluster, region=region, tags=tags or None)
    except (FileNotFoundError, ValueError) as exc:
        ui.error_msg(str(exc))
        raise typer.Exit(EXIT_CONFIG_FAILURE) from exc


def _exit_code_for(exc: Exception) -> int:
    if isinstance(exc, (UnsupportedProviderError, PreconditionError)):
        return EXIT_UNSUPPORTED
    return EXIT_CONFIG_FAILURE


def _emit_argv(result: ArgvResult, json_flag: bool) -> None:
    if json_flag:
        payload = {
            "argv": result.argv,
            "diagnostics": [
                {"level": d.level_name, "message": d.message}
                for d in result.diagnostics
            ],
        }
        typer.echo(json.dumps(payload, indent=2))
        return
    for diag in result.diagnostics:
        ui.diagnostic(diag)
    for arg in result.argv:
        typer.echo(arg)


def _run_argv(
    synthesize: Callable[[ClusterSpec], ArgvResult],
    cluster: str,
    region: Optional[str],
    json_flag: bool,
) -> None:
    ctx = _load(cluster, region, None)
    try:
        result = synthesize(ctx.spec)
    except TemplateFunctionError as exc:
        ui.error_msg(str(exc))
        raise typer.Exit(_exit_code_for(exc)) from exc
    _emit_argv(result, json_flag)
    raise typer.Exit(EXIT_SUCCESS)


# ── argv commands ────────────────────────────────────────────────────────────

_CLUSTER_OPT = typer.Option(..., "--cluster", "-c", help="Cluster definition YAML.")
_REGION_OPT = typer.Option(None, "--region", help="Override the deployment region.")
_JSON_OPT = typer.Option(False, "--json", "-j", help="Output as JSON.")
_DEBUG_OPT = typer.Option(False, "--debug", help="Enable debug logging.")


@argv_app.command("dns-controller")
def dns_controller(
    cluster: str = _CLUSTER_OPT,
    region: Optional[str] = _REGION_OPT,
    json_flag: bool = _JSON_OPT,
    debug: bool = _DEBUG_OPT,
) -> None:
    """Print the dns-controller argv, one argument per line."""
    _setup_logging(debug)
    _run_argv(dns_controller_argv, cluster, region, json_flag)


@argv_app.command("external-dns")
def external_dns(
    cluster: str = _CLUSTER_OPT,
    region: Optional[str] = _REGION_OPT,
    json_flag: bool = _JSON_OPT,
    debug: bool = _DEBUG_OPT,
) -> None:
    """Print the external-dns argv, one argument per line."""
    _setup_logging(debug)
    _run_argv(external_dns_argv, cluster, region, json_flag)


# ── render command ───────────────────────────────────────────────────────────


@app.command()
def render(
    cluster: str = _CLUSTER_OPT,
    template: str = typer.Option(..., "--template", "-t", help="Jinja2 template."),
    region: Optional[str] = _REGION_OPT,
    tag: Optional[List[str]] = typer.Option(
        None,
        "--tag",
        help="Active tag (replaces tags from the file). Can be repeated.",
    ),
    debug: bool = _DEBUG_OPT,
) -> None:
    """Render a template against the cluster and print it to stdout."""
    _setup_logging(debug)
    ctx = _load(cluster, region, tag)
    registry = FunctionRegistry(ctx)
    try:
        rendered = render_file(template, registry)
    except (TemplateFunctionError, TemplateError, FileNotFoundError) as exc:
        ui.error_msg(str(exc))
        raise typer.Exit(_exit_code_for(exc)) from exc
    typer.echo(rendered, nl=False)
    raise typer.Exit(EXIT_SUCCESS)


# ── functions command ────────────────────────────────────────────────────────


@app.command()
def functions() -> None:
    """List template functions available to templates."""
    for entry in CATALOG:
        typer.echo(f"{entry.name}/{entry.arity}")
    raise typer.Exit(EXIT_SUCCESS)


# ── Entry point ──────────────────────────────────────────────────────────────


def main() -> int:
    """Run the CLI and return an exit code."""
    try:
        app()
        return 0
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0


if __name__ == "__main__":
    sys.exit(main())
