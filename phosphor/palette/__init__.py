"""
Phosphor Palette - Luminance and Color Lookup
=============================================

- luminance.py: glyph palettes and Bayer dithering
- ramp.py: per-phase ANSI color ramps
"""

from .luminance import AsciiLuminancePalette, BayerDither, clamp
from .ramp import CognitiveColorRamp

__all__ = [
    'AsciiLuminancePalette',
    'BayerDither',
    'CognitiveColorRamp',
    'clamp',
]
