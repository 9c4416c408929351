"""
Phosphor Emitter - Transient Effect Engine
==========================================

- effects.py: the effect catalog and EffectInfluence
- metadata.py: per-instance modulation keys
- manager.py: EmitterManager, the live instance registry
- sampling.py: numpy grid sampling for renderers

Usage:
    from phosphor.emitter import EmitterManager, SparkBurst
    from phosphor.geometry import Vector3

    manager = EmitterManager()
    manager.emit(SparkBurst(), Vector3(3.0, 0.0, 2.0))
    manager.update(1.0 / 30.0)
    influence = manager.aggregate_influence_at(3.0, 2.0)
"""

from .effects import (
    EffectInfluence,
    EmitterEffect,
    SparkBurst,
    HeightPulse,
    ColorWash,
    Turbulence,
    Confetti,
    EFFECT_KINDS,
)
from .metadata import MetadataKeys
from .manager import EmitterInstance, EmitterManager
from .sampling import InfluenceField, grid_axes, sample_influence_grid

__all__ = [
    'EffectInfluence',
    'EmitterEffect',
    'SparkBurst',
    'HeightPulse',
    'ColorWash',
    'Turbulence',
    'Confetti',
    'EFFECT_KINDS',
    'MetadataKeys',
    'EmitterInstance',
    'EmitterManager',
    'InfluenceField',
    'grid_axes',
    'sample_influence_grid',
]
