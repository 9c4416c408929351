"""
Phosphor Emitter Effects - The Effect Catalog
=============================================

Transient visual effects anchored in world space. An effect describes the
WHAT (shape, reach, decay); an EmitterInstance is the WHEN and WHERE.

Kinds:
- SparkBurst ("spark_burst"): expanding front of light, spark received
- HeightPulse ("height_pulse"): the surface bulges up briefly
- ColorWash ("color_wash"): a wave of phase color spreading outward
- Turbulence ("turbulence"): noisy, jittery surface, uncertainty
- Confetti ("confetti"): scattered bright glyphs, task completed

Effects are frozen values and may be shared by any number of instances.
Constructors never validate: a non-positive duration or radius is a
caller error, and such an effect simply has no influence anywhere.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Mapping, Optional

from phosphor.emitter.metadata import MetadataKeys, read_metadata, read_scale
from phosphor.palette import AsciiLuminancePalette, CognitiveColorRamp, clamp

_EMPTY: Mapping[str, float] = {}


# =============================================================================
# Influence
# =============================================================================

@dataclass(frozen=True)
class EffectInfluence:
    """How an effect perturbs the surface at one point and moment."""
    height_modifier: float = 0.0
    luminance_modifier: float = 0.0
    palette_override: Optional[AsciiLuminancePalette] = None
    color_override: Optional[int] = None
    character_override: Optional[str] = None
    intensity: float = 0.0

    def __add__(self, other: "EffectInfluence") -> "EffectInfluence":
        """Superpose two influences.

        Numeric channels add. For discrete overrides the higher-intensity
        side wins, falling back to the other side when it has none.
        """
        if other.intensity > self.intensity:
            first, second = other, self
        else:
            first, second = self, other

        def pick(attr: str):
            value = getattr(first, attr)
            return value if value is not None else getattr(second, attr)

        return EffectInfluence(
            height_modifier=self.height_modifier + other.height_modifier,
            luminance_modifier=self.luminance_modifier + other.luminance_modifier,
            palette_override=pick("palette_override"),
            color_override=pick("color_override"),
            character_override=pick("character_override"),
            intensity=self.intensity + other.intensity,
        )


EffectInfluence.NONE = EffectInfluence()


# =============================================================================
# Base Effect
# =============================================================================

@dataclass(frozen=True)
class EmitterEffect(ABC):
    """Base for every effect kind. Subclasses implement _shape()."""
    name: ClassVar[str] = "effect"

    duration: float = 1.0
    radius: float = 1.0
    peak_intensity: float = 1.0

    def active_duration(self, metadata: Mapping[str, float] = _EMPTY) -> float:
        """Lifetime after applying the duration-scale metadata."""
        return self.duration * read_scale(metadata, MetadataKeys.DURATION_SCALE)

    def active_radius(self, metadata: Mapping[str, float] = _EMPTY) -> float:
        """Reach after applying the radius-scale metadata."""
        return self.radius * read_scale(metadata, MetadataKeys.RADIUS_SCALE)

    def influence(
        self,
        distance: float,
        age: float,
        metadata: Optional[Mapping[str, float]] = None,
    ) -> EffectInfluence:
        """
        Influence at ``distance`` from the anchor, ``age`` seconds after activation.

        Returns EffectInfluence.NONE outside the effect's lifetime or reach,
        and whenever the instance's intensity metadata is exactly zero.
        """
        metadata = metadata or _EMPTY
        intensity_scale = read_metadata(metadata, MetadataKeys.INTENSITY)
        if intensity_scale <= 0.0:
            return EffectInfluence.NONE

        duration = self.active_duration(metadata)
        radius = self.active_radius(metadata)
        if duration <= 0.0 or radius <= 0.0:
            return EffectInfluence.NONE
        if age < 0.0 or age >= duration or distance >= radius:
            return EffectInfluence.NONE

        scale = self.peak_intensity * intensity_scale
        influence = self._shape(distance, age, duration, radius, scale, metadata)
        if influence.intensity <= 0.0:
            return EffectInfluence.NONE
        return influence

    @abstractmethod
    def _shape(
        self,
        distance: float,
        age: float,
        duration: float,
        radius: float,
        scale: float,
        metadata: Mapping[str, float],
    ) -> EffectInfluence:
        """Per-kind falloff, called only inside the lifetime and reach."""


# =============================================================================
# Effect Kinds
# =============================================================================

@dataclass(frozen=True)
class SparkBurst(EmitterEffect):
    """Expanding front of light. Heat pushes the front outward faster."""
    name: ClassVar[str] = "spark_burst"

    duration: float = 1.5
    radius: float = 3.0
    ring_width: float = 0.5
    expansion_speed: float = 2.0
    palette: AsciiLuminancePalette = AsciiLuminancePalette.EXECUTE

    def _shape(self, distance, age, duration, radius, scale, metadata):
        heat = read_metadata(metadata, MetadataKeys.HEAT)
        front = self.expansion_speed * (0.5 + max(heat, 0.0)) * age

        # Soft leading edge ring_width wide, full glow behind the front
        ring_width = max(self.ring_width, 1e-6)
        edge = clamp((front - distance) / ring_width + 1.0, 0.0, 1.0)
        falloff = 1.0 - distance / radius
        time_decay = 1.0 - age / duration
        intensity = edge * falloff * time_decay * scale

        hot = intensity > 0.3 or heat >= 0.75
        return EffectInfluence(
            luminance_modifier=intensity * 0.6,
            palette_override=self.palette if hot and intensity > 0.0 else None,
            intensity=intensity,
        )


@dataclass(frozen=True)
class HeightPulse(EmitterEffect):
    """Surface bulges upward then settles.

    Peak amplitude defaults to 0.6 x radius when max_height_boost is unset.
    """
    name: ClassVar[str] = "height_pulse"

    duration: float = 1.2
    radius: float = 5.0
    max_height_boost: Optional[float] = None
    rise_speed: float = 4.0
    fall_speed: float = 2.0

    @property
    def peak_amplitude(self) -> float:
        if self.max_height_boost is not None:
            return self.max_height_boost
        return 0.6 * self.radius

    def _shape(self, distance, age, duration, radius, scale, metadata):
        speeds = self.rise_speed + self.fall_speed
        rise = duration * (self.fall_speed / speeds) if speeds > 0.0 else duration * 0.5

        if age < rise:
            height_factor = age / rise
        elif duration > rise:
            height_factor = 1.0 - (age - rise) / (duration - rise)
        else:
            height_factor = 0.0
        height_factor = clamp(height_factor, 0.0, 1.0)

        # Gaussian tapered linearly so it reaches zero at the radius
        spatial = math.exp(-(distance * distance) / (radius * radius * 0.5)) * (1.0 - distance / radius)
        intensity = height_factor * spatial * scale

        return EffectInfluence(
            height_modifier=self.peak_amplitude * intensity,
            luminance_modifier=intensity * 0.3,
            intensity=intensity,
        )


@dataclass(frozen=True)
class ColorWash(EmitterEffect):
    """Wave of phase color spreading from the center."""
    name: ClassVar[str] = "color_wash"

    duration: float = 1.5
    radius: float = 8.0
    color_ramp: CognitiveColorRamp = CognitiveColorRamp.NEUTRAL
    wave_front_speed: float = 6.0

    def _shape(self, distance, age, duration, radius, scale, metadata):
        wave_front = self.wave_front_speed * age
        if distance > wave_front:
            return EffectInfluence.NONE

        behind_wave = clamp(wave_front - distance, 0.0, 2.0) / 2.0
        time_decay = 1.0 - age / duration
        falloff = 1.0 - distance / radius
        intensity = behind_wave * falloff * time_decay * scale

        return EffectInfluence(
            luminance_modifier=intensity * 0.2,
            color_override=self.color_ramp.color_for_luminance(intensity),
            intensity=intensity,
        )


@dataclass(frozen=True)
class Turbulence(EmitterEffect):
    """Noisy, jittery surface. Height may dip below zero."""
    name: ClassVar[str] = "turbulence"

    duration: float = 2.0
    radius: float = 6.0
    noise_frequency: float = 3.0
    noise_amplitude: float = 1.5

    def _shape(self, distance, age, duration, radius, scale, metadata):
        # Quick attack, sustain, half-second release
        if age < 0.2:
            envelope = age / 0.2
        elif age > duration - 0.5:
            envelope = (duration - age) / 0.5
        else:
            envelope = 1.0
        envelope = clamp(envelope, 0.0, 1.0)

        spatial = clamp(1.0 - distance / radius, 0.0, 1.0)
        noise = (
            math.sin(distance * self.noise_frequency + age * 7.0)
            * math.cos(age * self.noise_frequency * 2.3)
        )
        intensity = envelope * spatial * scale

        return EffectInfluence(
            height_modifier=noise * self.noise_amplitude * intensity,
            luminance_modifier=abs(noise) * intensity * 0.4,
            intensity=intensity,
        )


@dataclass(frozen=True)
class Confetti(EmitterEffect):
    """Scattered bright glyphs. Density metadata lowers the glyph threshold."""
    name: ClassVar[str] = "confetti"

    duration: float = 1.0
    radius: float = 3.0
    characters: str = "✦✧⚡★·*"

    def _shape(self, distance, age, duration, radius, scale, metadata):
        time_decay = 1.0 - age / duration
        spatial = clamp(1.0 - distance / radius, 0.0, 1.0)
        intensity = time_decay * spatial * scale

        density = read_scale(metadata, MetadataKeys.DENSITY)
        if not self.characters or density <= 0.0 or intensity <= 0.2 / density:
            return EffectInfluence(intensity=intensity)

        # Deterministic pseudo-random glyph per distance and moment
        index = (int(distance * 7.3 + age * 3.7) & 0x7FFFFFFF) % len(self.characters)
        return EffectInfluence(
            luminance_modifier=intensity * 0.5,
            character_override=self.characters[index],
            intensity=intensity,
        )


EFFECT_KINDS = (SparkBurst, HeightPulse, ColorWash, Turbulence, Confetti)


__all__ = [
    'EffectInfluence',
    'EmitterEffect',
    'SparkBurst',
    'HeightPulse',
    'ColorWash',
    'Turbulence',
    'Confetti',
    'EFFECT_KINDS',
]
