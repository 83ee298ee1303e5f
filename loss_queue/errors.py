"""Shared diagnostic envelope.

We keep warnings consistent across sampler/arrival/device/driver.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Diagnostic:
    code: str
    message: str

    def to_line(self, *, source: str = "loss_queue") -> str:
        return f"[{source}] {self.code}: {self.message}"


def warn(diag: Diagnostic, *, stream: TextIO | None = None) -> None:
    """Write a non-fatal diagnostic to stderr (or `stream`)."""
    print(diag.to_line(), file=stream or sys.stderr)
