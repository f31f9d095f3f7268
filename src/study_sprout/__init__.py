"""Study Sprout: exam study planning engine and tool surfaces."""

from __future__ import annotations

from .cli import main as main

__all__ = ["main"]
