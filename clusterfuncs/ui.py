"""Colorized console output for clusterfuncs commands.

Thin wrapper around :mod:`rich`.  Status and diagnostics go to stderr so
that stdout carries only command results (argv lines, rendered
manifests, JSON) and can be piped.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

from clusterfuncs.argv.models import Diagnostic

# Shared console; force_terminal=None lets Rich detect a TTY.
console = Console(stderr=True, force_terminal=None)

# ── Symbols ────────────────────────────────────────────────────────────────

_WARN = "[bold yellow]⚠[/]"
_DOT = "[dim]·[/]"


def warn(msg: str) -> None:
    """Yellow warning + message."""
    console.print(f"  {_WARN} [yellow]{escape(msg)}[/]")


def info(msg: str) -> None:
    """Dim dot + informational message."""
    console.print(f"  {_DOT} [dim]{escape(msg)}[/]")


def error_msg(msg: str) -> None:
    """Bold red error message (not indented)."""
    console.print(f"[bold red]ERROR:[/] {escape(msg)}")


def diagnostic(diag: Diagnostic) -> None:
    """Print a synthesis diagnostic at its own severity."""
    if diag.level >= logging.WARNING:
        warn(diag.message)
    else:
        info(diag.message)
