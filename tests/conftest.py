"""
Phosphor test configuration: shared fixtures.
"""

import pytest

from phosphor.bridge import CognitiveEmitterBridge
from phosphor.emitter import EmitterManager
from phosphor.geometry import Vector3


@pytest.fixture
def manager():
    """Fresh, empty emitter registry."""
    return EmitterManager()


@pytest.fixture
def bridge(manager):
    """Bridge dispatching into the ``manager`` fixture."""
    return CognitiveEmitterBridge(manager)


@pytest.fixture
def agent_pos():
    return Vector3(3.0, 0.0, 2.0)
