"""
Cognitive Emitter Bridge - What the Brain Did to What It Looks Like
===================================================================

Translation table between cognitive events and emitter effects:

    SparkReceived      -> SparkBurst + HeightPulse
    PhaseTransition    -> ColorWash with the destination phase's ramp
    UncertaintySpike   -> Turbulence, amplitude 1.5 x clamp(level, 0, 1)
    TaskCompleted      -> Confetti
    HumanEscalation    -> large SparkBurst (2.0 s, radius 10)

Change these mappings and the whole feel of the visualization shifts.
The bridge keeps no state of its own and does not track time.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Type

from phosphor.bridge.events import (
    CognitiveEvent,
    HumanEscalation,
    PhaseTransition,
    SparkReceived,
    TaskCompleted,
    UncertaintySpike,
)
from phosphor.emitter import (
    ColorWash,
    Confetti,
    EmitterEffect,
    EmitterInstance,
    EmitterManager,
    HeightPulse,
    SparkBurst,
    Turbulence,
)
from phosphor.geometry import Vector3
from phosphor.palette import AsciiLuminancePalette, CognitiveColorRamp, clamp

logger = logging.getLogger("phosphor.bridge")

UNCERTAINTY_AMPLITUDE = 1.5
ESCALATION_DURATION = 2.0
ESCALATION_RADIUS = 10.0


def _spark_received(event: SparkReceived) -> List[EmitterEffect]:
    return [SparkBurst(), HeightPulse()]


def _phase_transition(event: PhaseTransition) -> List[EmitterEffect]:
    # Destination phase picks the ramp regardless of where the agent came from
    return [ColorWash(color_ramp=CognitiveColorRamp.for_phase(event.new_phase))]


def _uncertainty_spike(event: UncertaintySpike) -> List[EmitterEffect]:
    # Clamp first, then scale: the amplitude ceiling is 1.5
    level = clamp(event.level, 0.0, 1.0)
    return [Turbulence(noise_amplitude=UNCERTAINTY_AMPLITUDE * level)]


def _task_completed(event: TaskCompleted) -> List[EmitterEffect]:
    return [Confetti()]


def _human_escalation(event: HumanEscalation) -> List[EmitterEffect]:
    return [
        SparkBurst(
            duration=ESCALATION_DURATION,
            radius=ESCALATION_RADIUS,
            palette=AsciiLuminancePalette.EXECUTE,
        )
    ]


_EFFECTS_BY_EVENT: Dict[Type, Callable[..., List[EmitterEffect]]] = {
    SparkReceived: _spark_received,
    PhaseTransition: _phase_transition,
    UncertaintySpike: _uncertainty_spike,
    TaskCompleted: _task_completed,
    HumanEscalation: _human_escalation,
}


def effects_for_event(event: CognitiveEvent) -> List[EmitterEffect]:
    """
    Effects a cognitive event should fire, in emission order.

    Raises:
        TypeError: if ``event`` is not one of the cognitive event variants
    """
    mapper = _EFFECTS_BY_EVENT.get(type(event))
    if mapper is None:
        raise TypeError(f"Not a cognitive event: {type(event).__name__}")
    return mapper(event)


class CognitiveEmitterBridge:
    """Fires emitter effects into a registry it does not own."""

    def __init__(self, emitter_manager: EmitterManager) -> None:
        self.emitter_manager = emitter_manager

    def on_cognitive_event(
        self,
        event: CognitiveEvent,
        agent_position: Vector3,
        current_time: float = 0.0,
    ) -> List[EmitterInstance]:
        """
        React to a cognitive event by firing the mapped effects.

        Args:
            event: The cognitive event
            agent_position: Where the originating agent currently is
            current_time: Animation time stamped on the new instances

        Returns:
            The created instances, in emission order
        """
        effects = effects_for_event(event)
        instances = [
            self.emitter_manager.emit(effect, agent_position, current_time)
            for effect in effects
        ]
        logger.debug(
            f"{event.kind} from {event.agent_id} -> "
            f"{', '.join(e.name for e in effects)}"
        )
        return instances


__all__ = [
    'CognitiveEmitterBridge',
    'effects_for_event',
    'UNCERTAINTY_AMPLITUDE',
    'ESCALATION_DURATION',
    'ESCALATION_RADIUS',
]
