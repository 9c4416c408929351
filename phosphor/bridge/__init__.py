"""
Phosphor Bridge - Cognitive Events to Emitter Effects
=====================================================

Usage:
    from phosphor.bridge import CognitiveEmitterBridge, SparkReceived
    from phosphor.emitter import EmitterManager
    from phosphor.geometry import Vector3

    manager = EmitterManager()
    bridge = CognitiveEmitterBridge(manager)
    bridge.on_cognitive_event(SparkReceived(agent_id="agent-1"), Vector3(3.0, 0.0, 2.0))
"""

from .events import (
    BaseCognitiveEvent,
    SparkReceived,
    PhaseTransition,
    UncertaintySpike,
    TaskCompleted,
    HumanEscalation,
    CognitiveEvent,
    EVENT_TYPES,
    event_from_dict,
)
from .emitter_bridge import CognitiveEmitterBridge, effects_for_event

__all__ = [
    'BaseCognitiveEvent',
    'SparkReceived',
    'PhaseTransition',
    'UncertaintySpike',
    'TaskCompleted',
    'HumanEscalation',
    'CognitiveEvent',
    'EVENT_TYPES',
    'event_from_dict',
    'CognitiveEmitterBridge',
    'effects_for_event',
]
