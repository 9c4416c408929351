"""
Cognitive phases of the perceive/recall/plan/execute/evaluate loop.

Each phase maps to a distinct palette and color ramp.
"""

from __future__ import annotations

from enum import Enum


class CognitivePhase(str, Enum):
    """Phases of an agent's cognitive cycle."""
    PERCEIVE = "perceive"   # Gathering sensory input
    RECALL = "recall"       # Memory activation
    PLAN = "plan"           # Strategy formation
    EXECUTE = "execute"     # Committed action
    EVALUATE = "evaluate"   # Reflection, afterglow
    LOOP = "loop"           # Cycle complete
    NONE = "none"           # No active cognition


__all__ = ['CognitivePhase']
