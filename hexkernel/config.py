"""Validated configuration models for layouts and path searches."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

from .hexpath.astar import DEFAULT_MAX_DISTANCE

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .layout import HexLayout


class LayoutSettings(BaseModel):
    """Parameters describing the hex-to-pixel transform."""

    model_config = ConfigDict(extra="forbid")

    orientation: Literal["pointy", "flat"] = Field(default="pointy")
    width: float = Field(default=32.0, gt=0.0)
    height: float = Field(default=32.0, gt=0.0)
    origin_x: float = Field(default=0.0)
    origin_y: float = Field(default=0.0)

    def build(self) -> HexLayout:
        """Instantiate a :class:`~hexkernel.layout.HexLayout`."""

        from .layout import HexLayout

        return HexLayout.from_settings(self)


class PathfindingSettings(BaseModel):
    """Limits applied by :class:`~hexkernel.pathfinding.Pathfinder`."""

    model_config = ConfigDict(extra="forbid")

    max_distance: float = Field(default=DEFAULT_MAX_DISTANCE, gt=0.0)
    # Extra search allowance on top of a unit's movement budget.
    search_slack: float = Field(default=2.0, ge=0.0)
    cache_size: int = Field(default=1024, ge=0)


class KernelConfig(BaseModel):
    """Top-level configuration payload."""

    model_config = ConfigDict(extra="forbid")

    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    pathfinding: PathfindingSettings = Field(default_factory=PathfindingSettings)


__all__ = ["KernelConfig", "LayoutSettings", "PathfindingSettings"]
