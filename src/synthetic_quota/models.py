"""Data models for synthetic-quota.

Small immutable structures shared by the quota helpers, the fallback model
catalog and the display layer.
"""

from __future__ import annotations

from enum import StrEnum

import msgspec

FILLED_GLYPH = "█"
EMPTY_GLYPH = "░"


class UsageColor(StrEnum):
    """Severity tier for a usage percentage."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class ModelDescriptor(msgspec.Struct, frozen=True):
    """A model offered by the provider."""

    id: str  # Provider model id (e.g., "hf:moonshotai/Kimi-K2.5")
    name: str  # Display name


class ModelPricing(msgspec.Struct, frozen=True):
    """Per-million-token prices for a model."""

    input: float = 0.0
    output: float = 0.0


class ProgressBar(msgspec.Struct, frozen=True):
    """A rendered usage bar and the percentage it represents."""

    bar: str  # Exactly `width` glyphs
    percent: float  # Clamped to 0-100

    @property
    def width(self) -> int:
        return len(self.bar)
