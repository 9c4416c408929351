"""
Well-known metadata keys for per-instance effect modulation.

Keys are domain-neutral so bridges can map their own numeric signals
onto common visual semantics. Absent keys fall back to the defaults
below.
"""

from __future__ import annotations

import logging
import math
from typing import Mapping

logger = logging.getLogger("phosphor.emitter")


class MetadataKeys:
    """Metadata key names understood by every effect kind."""
    INTENSITY = "phosphor.intensity"            # Overall multiplier; exactly 0 suppresses
    HEAT = "phosphor.heat"                      # Biases sparks hotter and faster
    DENSITY = "phosphor.density"                # Confetti glyph density
    DURATION_SCALE = "phosphor.duration_scale"  # Stretches or compresses lifespan
    RADIUS_SCALE = "phosphor.radius_scale"      # Widens or tightens spatial reach


DEFAULTS = {
    MetadataKeys.INTENSITY: 1.0,
    MetadataKeys.HEAT: 0.5,
    MetadataKeys.DENSITY: 1.0,
    MetadataKeys.DURATION_SCALE: 1.0,
    MetadataKeys.RADIUS_SCALE: 1.0,
}


def read_metadata(metadata: Mapping[str, float], key: str) -> float:
    """Numeric value for ``key``, or its default when absent or malformed."""
    default = DEFAULTS.get(key, 0.0)
    if key not in metadata:
        return default
    try:
        value = float(metadata[key])
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric metadata {key}={metadata[key]!r}")
        return default
    if math.isnan(value):
        logger.warning(f"Ignoring NaN metadata {key}")
        return default
    return value


def read_scale(metadata: Mapping[str, float], key: str) -> float:
    """Like read_metadata(), clamped at zero for multiplier keys."""
    return max(0.0, read_metadata(metadata, key))


__all__ = ['MetadataKeys', 'DEFAULTS', 'read_metadata', 'read_scale']
