"""
Phosphor Color Ramps - Cognitive Phase to ANSI Color
====================================================

Shape tells you WHERE cognition is happening; color tells you WHAT KIND
of thinking it is. Each ramp lists ANSI 256-color codes from dark to
bright.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from phosphor.palette.luminance import quantize, quantize_dithered
from phosphor.signal import CognitivePhase


@dataclass(frozen=True)
class CognitiveColorRamp:
    """Luminance to ANSI 256-color code for one cognitive phase.

    ``color_stops`` needs at least two entries (caller's responsibility).
    """
    phase: CognitivePhase
    color_stops: Tuple[int, ...]

    def color_for_luminance(self, luminance: float) -> int:
        return self.color_stops[quantize(luminance, len(self.color_stops) - 1)]

    def color_for_luminance_dithered(self, luminance: float, screen_x: int, screen_y: int) -> int:
        index = quantize_dithered(luminance, len(self.color_stops) - 1, screen_x, screen_y)
        return self.color_stops[index]

    @classmethod
    def for_phase(cls, phase: CognitivePhase) -> "CognitiveColorRamp":
        """Ramp for a phase. LOOP and NONE share the neutral gray ramp."""
        return _RAMPS_BY_PHASE.get(phase, cls.NEUTRAL)


# Cool blues -> white
CognitiveColorRamp.PERCEIVE = CognitiveColorRamp(
    CognitivePhase.PERCEIVE, (17, 18, 24, 31, 38, 74, 110, 117, 153, 189, 231)
)
# Dark amber -> warm gold
CognitiveColorRamp.RECALL = CognitiveColorRamp(
    CognitivePhase.RECALL, (52, 94, 130, 136, 172, 178, 214, 220, 221)
)
# Teal -> cyan
CognitiveColorRamp.PLAN = CognitiveColorRamp(
    CognitivePhase.PLAN, (23, 29, 30, 36, 37, 43, 79, 115, 159)
)
# Red -> yellow -> white
CognitiveColorRamp.EXECUTE = CognitiveColorRamp(
    CognitivePhase.EXECUTE, (52, 88, 124, 160, 196, 202, 208, 214, 220, 226, 231)
)
# Purple -> dim lavender
CognitiveColorRamp.EVALUATE = CognitiveColorRamp(
    CognitivePhase.EVALUATE, (53, 54, 91, 97, 134, 140, 141, 183, 189)
)
CognitiveColorRamp.NEUTRAL = CognitiveColorRamp(
    CognitivePhase.NONE, (232, 236, 240, 244, 248, 252, 255)
)

_RAMPS_BY_PHASE: Dict[CognitivePhase, CognitiveColorRamp] = {
    CognitivePhase.PERCEIVE: CognitiveColorRamp.PERCEIVE,
    CognitivePhase.RECALL: CognitiveColorRamp.RECALL,
    CognitivePhase.PLAN: CognitiveColorRamp.PLAN,
    CognitivePhase.EXECUTE: CognitiveColorRamp.EXECUTE,
    CognitivePhase.EVALUATE: CognitiveColorRamp.EVALUATE,
    CognitivePhase.LOOP: CognitiveColorRamp.NEUTRAL,
    CognitivePhase.NONE: CognitiveColorRamp.NEUTRAL,
}


__all__ = ['CognitiveColorRamp']
