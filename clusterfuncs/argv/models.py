"""Result types for argv synthesis."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, NamedTuple


@dataclass(frozen=True)
class Diagnostic:
    """An observation made while synthesizing argv.

    Diagnostics never change the produced argv; callers decide where
    they go (the template registry logs them).
    """

    level: int
    message: str

    @classmethod
    def info(cls, message: str) -> "Diagnostic":
        return cls(logging.INFO, message)

    @classmethod
    def warning(cls, message: str) -> "Diagnostic":
        return cls(logging.WARNING, message)

    @property
    def level_name(self) -> str:
        return logging.getLevelName(self.level)


class ArgvResult(NamedTuple):
    """``(argv, diagnostics)`` pair returned by every synthesizer."""

    argv: List[str]
    diagnostics: List[Diagnostic]

    def log_to(self, logger: logging.Logger) -> None:
        """Emit every diagnostic on *logger* at its own level."""
        for diag in self.diagnostics:
            logger.log(diag.level, "%s", diag.message)
