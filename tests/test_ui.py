"""Tests for clusterfuncs.ui — console routing of synthesis diagnostics."""

from __future__ import annotations

from unittest.mock import patch

from clusterfuncs import ui
from clusterfuncs.argv.models import Diagnostic


# ── TestDiagnostic ───────────────────────────────────────────────────


class TestDiagnostic:
    def test_warning_routed_to_warn(self):
        with patch.object(ui, "warn") as warn, patch.object(ui, "info") as info:
            ui.diagnostic(Diagnostic.warning("careful"))
        warn.assert_called_once_with("careful")
        info.assert_not_called()

    def test_info_routed_to_info(self):
        with patch.object(ui, "warn") as warn, patch.object(ui, "info") as info:
            ui.diagnostic(Diagnostic.info("fyi"))
        info.assert_called_once_with("fyi")
        warn.assert_not_called()

    def test_public_helpers(self):
        assert not hasattr(ui, "ok")
        assert not hasattr(ui, "detail")

    def test_markup_is_escaped(self):
        with patch.object(ui.console, "print") as printer:
            ui.error_msg("bad [value]")
        assert "bad \\[value]" in printer.call_args.args[0]
