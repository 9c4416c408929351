"""
Phosphor Luminance Palettes - Brightness to Glyphs
==================================================

Maps normalized luminance (0.0 dark, 1.0 bright) to terminal glyphs,
with optional 4x4 ordered dithering to break up banding.

Phase palettes:
- PERCEIVE: sparse, ethereal
- RECALL: warm, clustered
- PLAN: structured, branching
- EXECUTE: dense, aggressive
- EVALUATE: diffuse, fading
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value to range."""
    return max(min_val, min(max_val, value))


class BayerDither:
    """Ordered dithering thresholds from a tileable 4x4 Bayer matrix."""

    BAYER_4X4: Tuple[int, ...] = (
        0, 8, 2, 10,
        12, 4, 14, 6,
        3, 11, 1, 9,
        15, 7, 13, 5,
    )

    @classmethod
    def threshold(cls, screen_x: int, screen_y: int) -> float:
        """Threshold for a screen cell, one of 16 values in [0, 15/16]."""
        return cls.BAYER_4X4[(screen_y & 3) * 4 + (screen_x & 3)] / 16.0


def quantize(luminance: float, last_index: int) -> int:
    """Index into a ramp of ``last_index + 1`` entries."""
    scaled = clamp(luminance, 0.0, 1.0) * last_index
    return int(clamp(int(scaled), 0, last_index))


def quantize_dithered(luminance: float, last_index: int, screen_x: int, screen_y: int) -> int:
    """Like quantize(), rounding up when the fraction beats the Bayer threshold."""
    if last_index == 0:
        return 0
    scaled = clamp(luminance, 0.0, 1.0) * last_index
    base = int(clamp(int(scaled), 0, last_index))
    if base >= last_index:
        return last_index
    if scaled - base > BayerDither.threshold(screen_x, screen_y):
        return base + 1
    return base


@dataclass(frozen=True)
class AsciiLuminancePalette:
    """Glyphs ordered from darkest to brightest.

    ``characters`` must be non-empty; that is the caller's responsibility.
    """
    characters: str
    name: str

    def char_for_luminance(self, luminance: float) -> str:
        return self.characters[quantize(luminance, len(self.characters) - 1)]

    def char_for_luminance_dithered(self, luminance: float, screen_x: int, screen_y: int) -> str:
        index = quantize_dithered(luminance, len(self.characters) - 1, screen_x, screen_y)
        return self.characters[index]


AsciiLuminancePalette.STANDARD = AsciiLuminancePalette(" .,-~:;=!*#$@█", "standard")
AsciiLuminancePalette.PERCEIVE = AsciiLuminancePalette(
    " ·∙.·:∘○◌◯", "perceive"
)
AsciiLuminancePalette.RECALL = AsciiLuminancePalette(
    " .·*✦⬡◆●", "recall"
)
AsciiLuminancePalette.PLAN = AsciiLuminancePalette(
    " ░▒▓│├┤┬┴┼", "plan"
)
AsciiLuminancePalette.EXECUTE = AsciiLuminancePalette(
    " .:;+=*#%@█⚡", "execute"
)
AsciiLuminancePalette.EVALUATE = AsciiLuminancePalette(
    " .·:*∘○◌ ", "evaluate"
)


__all__ = [
    'AsciiLuminancePalette',
    'BayerDither',
    'clamp',
    'quantize',
    'quantize_dithered',
]
