"""
Emitter Manager - Effect Instance Registry
==========================================

The effect scheduler: tracks which effects are alive, advances their
clocks, reaps expired ones, and aggregates their influences at any
query point. The waveform renderer asks "what should I do differently at
(x, z)?" and gets back one combined EffectInfluence.

Per frame, on the rendering thread:
    bridge.on_cognitive_event(...)       # zero or more emits
    manager.update(dt)                   # age and evict
    manager.aggregate_influence_at(x, z) # once per sample point

None of these operations raise.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional

from phosphor.emitter.effects import EffectInfluence, EmitterEffect
from phosphor.geometry import Vector3

logger = logging.getLogger("phosphor.emitter")


@dataclass(frozen=True)
class EmitterInstance:
    """A running effect anchored at a position.

    Read-only: EmitterManager.update() swaps in an aged copy rather than
    mutating, and ``metadata`` is a read-only view of a private copy.
    """
    effect: EmitterEffect
    position: Vector3
    activated_at: float = 0.0
    metadata: Mapping[str, float] = field(default_factory=dict)
    age: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def effective_duration(self) -> float:
        return self.effect.active_duration(self.metadata)

    @property
    def is_expired(self) -> bool:
        return self.age >= self.effective_duration

    def influence_at(self, x: float, z: float) -> EffectInfluence:
        """Influence at a surface point, using XZ distance only."""
        distance = self.position.horizontal_distance(x, z)
        return self.effect.influence(distance, self.age, self.metadata)


ExpiryCallback = Callable[[EmitterInstance], None]


class EmitterManager:
    """
    Owns the ordered set of active effect instances.

    Features:
    - Insertion order preserved for deterministic iteration
    - Expired instances evicted in the update() that expires them
    - Linear superposition of influences at a query point
    - Optional on_expire hook, called once per evicted instance
    - Thread-safe access for hosts that drive it from several threads
    """

    def __init__(self, on_expire: Optional[ExpiryCallback] = None) -> None:
        self._lock = threading.RLock()
        self._instances: List[EmitterInstance] = []
        self._on_expire = on_expire

    @property
    def active_count(self) -> int:
        """Number of live instances."""
        with self._lock:
            return len(self._instances)

    @property
    def instances(self) -> List[EmitterInstance]:
        """Snapshot of live instances, oldest first."""
        with self._lock:
            return list(self._instances)

    def emit(
        self,
        effect: EmitterEffect,
        position: Vector3,
        current_time: float = 0.0,
        metadata: Optional[Mapping[str, float]] = None,
    ) -> EmitterInstance:
        """
        Fire an effect at a world-space position.

        Args:
            effect: Effect description to instantiate
            position: Where the effect originates
            current_time: Animation time stamped as activated_at
            metadata: Per-instance modulation (see MetadataKeys); copied

        Returns:
            The new instance
        """
        instance = EmitterInstance(
            effect=effect,
            position=position,
            activated_at=current_time,
            metadata=metadata or {},
        )
        with self._lock:
            self._instances.append(instance)

        logger.debug(f"Emitted {effect.name} at ({position.x:.2f}, {position.y:.2f}, {position.z:.2f})")
        return instance

    def update(self, dt: float) -> None:
        """
        Advance every instance by dt seconds, then evict the expired ones.

        Negative dt is treated as zero so ages never run backwards.
        """
        dt = max(0.0, dt)
        with self._lock:
            self._instances = [replace(i, age=i.age + dt) for i in self._instances]

            expired = [i for i in self._instances if i.is_expired]
            if expired:
                self._instances = [i for i in self._instances if not i.is_expired]

        for instance in expired:
            logger.debug(f"Expired {instance.effect.name} after {instance.age:.2f}s")
            if self._on_expire is None:
                continue
            try:
                self._on_expire(instance)
            except Exception as e:
                logger.exception(f"on_expire failed for {instance.effect.name}: {e}")

    def aggregate_influence_at(self, x: float, z: float) -> EffectInfluence:
        """
        Combined influence of all live effects at a surface point.

        The surface lives on the XZ plane, so height is ignored on both the
        query and the anchors. Contributions add channel by channel.

        Returns:
            EffectInfluence.NONE itself when nothing contributes
        """
        with self._lock:
            instances = list(self._instances)

        result = EffectInfluence.NONE
        for instance in instances:
            influence = instance.influence_at(x, z)
            if influence.intensity > 0.0:
                result = result + influence
        return result

    def clear(self) -> None:
        """Remove all instances without firing on_expire."""
        with self._lock:
            self._instances = []


__all__ = ['EmitterInstance', 'EmitterManager', 'ExpiryCallback']
