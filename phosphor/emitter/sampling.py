"""
Grid sampling of aggregated effect influence.

Renderers sample the surface on a regular grid each frame; this packs
the per-point EffectInfluence channels into numpy arrays shaped
(rows, columns) so the frame can be lit and shaded in bulk.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from phosphor.emitter.effects import EffectInfluence
from phosphor.emitter.manager import EmitterManager


@dataclass
class InfluenceField:
    """Influence channels sampled on a grid, indexed [row, column]."""
    xs: np.ndarray
    zs: np.ndarray
    height: np.ndarray
    luminance: np.ndarray
    intensity: np.ndarray
    overrides: Dict[Tuple[int, int], EffectInfluence]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height.shape

    def is_quiet(self) -> bool:
        """True when no sample point was touched by any effect."""
        return not np.any(self.intensity > 0.0)


def grid_axes(width: float, depth: float, columns: int, rows: int) -> Tuple[np.ndarray, np.ndarray]:
    """Column (x) and row (z) coordinates centered on the origin."""
    columns = max(1, int(columns))
    rows = max(1, int(rows))
    xs = np.linspace(-width / 2.0, width / 2.0, columns) if columns > 1 else np.zeros(1)
    zs = np.linspace(-depth / 2.0, depth / 2.0, rows) if rows > 1 else np.zeros(1)
    return xs, zs


def sample_influence_grid(manager: EmitterManager, xs, zs) -> InfluenceField:
    """
    Evaluate aggregate_influence_at() over the grid xs x zs.

    Args:
        manager: Registry to query
        xs: 1-D x coordinates (columns)
        zs: 1-D z coordinates (rows)

    Returns:
        InfluenceField; points with a glyph, palette or color override
        keep their full EffectInfluence in ``overrides``
    """
    xs = np.asarray(xs, dtype=np.float64).ravel()
    zs = np.asarray(zs, dtype=np.float64).ravel()
    shape = (zs.size, xs.size)

    height = np.zeros(shape, dtype=np.float64)
    luminance = np.zeros(shape, dtype=np.float64)
    intensity = np.zeros(shape, dtype=np.float64)
    overrides: Dict[Tuple[int, int], EffectInfluence] = {}

    if manager.active_count == 0:
        return InfluenceField(xs, zs, height, luminance, intensity, overrides)

    for row, z in enumerate(zs):
        for col, x in enumerate(xs):
            influence = manager.aggregate_influence_at(float(x), float(z))
            if influence is EffectInfluence.NONE:
                continue
            height[row, col] = influence.height_modifier
            luminance[row, col] = influence.luminance_modifier
            intensity[row, col] = influence.intensity
            if (
                influence.palette_override is not None
                or influence.color_override is not None
                or influence.character_override is not None
            ):
                overrides[(row, col)] = influence

    return InfluenceField(xs, zs, height, luminance, intensity, overrides)


__all__ = ['InfluenceField', 'grid_axes', 'sample_influence_grid']
