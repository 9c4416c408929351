"""
Phosphor: Terminal Visualization of Multi-Agent Cognition

Agents are drawn as glyphs on a waveform surface; cognition events
(work received, phase changes, uncertainty, completion, escalation)
fire transient emitter effects that perturb the surface around them.

Components:
- emitter: effect catalog, instance registry, grid sampling
- bridge: cognitive events to emitter effects
- palette: glyph palettes and per-phase color ramps
- geometry / signal: Vector3 and CognitivePhase
- config: grid and demo settings

Example usage:

    from phosphor import EmitterManager, CognitiveEmitterBridge, SparkReceived, Vector3

    manager = EmitterManager()
    bridge = CognitiveEmitterBridge(manager)
    bridge.on_cognitive_event(SparkReceived(agent_id="agent-1"), Vector3(3.0, 0.0, 2.0))
    manager.update(1.0 / 30.0)
    influence = manager.aggregate_influence_at(3.0, 2.0)
"""

__version__ = "0.1.0"

from phosphor.geometry import Vector3
from phosphor.signal import CognitivePhase
from phosphor.emitter import (
    EffectInfluence,
    EmitterEffect,
    SparkBurst,
    HeightPulse,
    ColorWash,
    Turbulence,
    Confetti,
    MetadataKeys,
    EmitterInstance,
    EmitterManager,
)
from phosphor.bridge import (
    CognitiveEmitterBridge,
    SparkReceived,
    PhaseTransition,
    UncertaintySpike,
    TaskCompleted,
    HumanEscalation,
)

__all__ = [
    'Vector3',
    'CognitivePhase',
    'EffectInfluence',
    'EmitterEffect',
    'SparkBurst',
    'HeightPulse',
    'ColorWash',
    'Turbulence',
    'Confetti',
    'MetadataKeys',
    'EmitterInstance',
    'EmitterManager',
    'CognitiveEmitterBridge',
    'SparkReceived',
    'PhaseTransition',
    'UncertaintySpike',
    'TaskCompleted',
    'HumanEscalation',
]
