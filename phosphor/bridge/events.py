"""
Cognitive events that trigger visual effects.

Events are immutable and carry no position; the caller supplies the
agent's current location when dispatching them. Each variant has a
``kind`` discriminator so plain mappings can be parsed back into the
right type.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from phosphor.signal import CognitivePhase


class BaseCognitiveEvent(BaseModel):
    """Fields shared by every cognitive event."""
    model_config = ConfigDict(frozen=True)

    agent_id: str


class SparkReceived(BaseCognitiveEvent):
    """An agent received a unit of work."""
    kind: Literal["spark_received"] = "spark_received"


class PhaseTransition(BaseCognitiveEvent):
    """An agent moved between cognitive phases."""
    kind: Literal["phase_transition"] = "phase_transition"
    old_phase: CognitivePhase
    new_phase: CognitivePhase


class UncertaintySpike(BaseCognitiveEvent):
    """An agent's uncertainty jumped. ``level`` is nominally 0-1."""
    kind: Literal["uncertainty_spike"] = "uncertainty_spike"
    level: float


class TaskCompleted(BaseCognitiveEvent):
    kind: Literal["task_completed"] = "task_completed"


class HumanEscalation(BaseCognitiveEvent):
    kind: Literal["human_escalation"] = "human_escalation"


CognitiveEvent = Union[
    SparkReceived,
    PhaseTransition,
    UncertaintySpike,
    TaskCompleted,
    HumanEscalation,
]

EVENT_TYPES = (SparkReceived, PhaseTransition, UncertaintySpike, TaskCompleted, HumanEscalation)

_EVENT_ADAPTER = TypeAdapter(Annotated[CognitiveEvent, Field(discriminator="kind")])


def event_from_dict(data: Mapping[str, Any]) -> CognitiveEvent:
    """Parse a mapping such as ``{"kind": "task_completed", "agent_id": "a1"}``.

    Raises:
        pydantic.ValidationError: unknown kind or missing/invalid fields
    """
    return _EVENT_ADAPTER.validate_python(dict(data))


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
]
