#!/usr/bin/env python3
"""
Phosphor Terminal Demo

Plays a scripted sequence of cognition events for three agents through
the bridge and prints the resulting effect field as ASCII frames.

Usage:
    python -m phosphor.demo
    python -m phosphor.demo --seconds 4 --fps 15 --no-color
    phosphor-demo --config phosphor.yaml --fast
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

from phosphor.bridge import (
    CognitiveEmitterBridge,
    CognitiveEvent,
    HumanEscalation,
    PhaseTransition,
    SparkReceived,
    TaskCompleted,
    UncertaintySpike,
)
from phosphor.config import PhosphorConfig, get_config, set_config
from phosphor.emitter import EmitterManager, InfluenceField, grid_axes, sample_influence_grid
from phosphor.geometry import Vector3
from phosphor.palette import AsciiLuminancePalette, CognitiveColorRamp, clamp
from phosphor.signal import CognitivePhase

logger = logging.getLogger("phosphor.demo")

AGENTS = {
    "planner": Vector3(-7.0, 0.0, 0.0),
    "coder": Vector3(0.0, 0.0, 2.0),
    "reviewer": Vector3(7.0, 0.0, -1.5),
}

BASE_LUMINANCE = 0.06
HEIGHT_GAIN = 0.15
ANSI_RESET = "\x1b[0m"
ANSI_HOME = "\x1b[H\x1b[2J"


# =============================================================================
# Script
# =============================================================================

def build_script(seed: int) -> List[Tuple[float, CognitiveEvent]]:
    """Timed cognition events, sorted by time."""
    rng = np.random.default_rng(seed)
    script: List[Tuple[float, CognitiveEvent]] = [
        (0.2, SparkReceived(agent_id="planner")),
        (0.8, PhaseTransition(agent_id="planner", old_phase=CognitivePhase.PERCEIVE,
                              new_phase=CognitivePhase.PLAN)),
        (1.6, SparkReceived(agent_id="coder")),
        (2.2, PhaseTransition(agent_id="coder", old_phase=CognitivePhase.PLAN,
                              new_phase=CognitivePhase.EXECUTE)),
        (3.0, UncertaintySpike(agent_id="coder", level=float(rng.uniform(0.4, 1.2)))),
        (4.0, SparkReceived(agent_id="reviewer")),
        (4.6, PhaseTransition(agent_id="reviewer", old_phase=CognitivePhase.RECALL,
                              new_phase=CognitivePhase.EVALUATE)),
        (5.4, HumanEscalation(agent_id="reviewer")),
        (6.5, TaskCompleted(agent_id="coder")),
        (7.0, TaskCompleted(agent_id="planner")),
    ]
    return sorted(script, key=lambda item: item[0])


# =============================================================================
# Rendering
# =============================================================================

def render_frame(field: InfluenceField, color: bool) -> str:
    """Turn a sampled influence field into printable lines."""
    palette = AsciiLuminancePalette.STANDARD
    ramp = CognitiveColorRamp.NEUTRAL
    rows, columns = field.shape

    lines = []
    for row in range(rows):
        cells = []
        for col in range(columns):
            lum = clamp(
                BASE_LUMINANCE
                + float(field.luminance[row, col])
                + HEIGHT_GAIN * float(field.height[row, col]),
                0.0,
                1.0,
            )
            override = field.overrides.get((row, col))
            ch = None
            code = ramp.color_for_luminance_dithered(lum, col, row)
            if override is not None:
                ch = override.character_override
                if ch is None and override.palette_override is not None:
                    ch = override.palette_override.char_for_luminance_dithered(lum, col, row)
                if override.color_override is not None:
                    code = override.color_override
            if ch is None:
                ch = palette.char_for_luminance_dithered(lum, col, row)
            cells.append(f"\x1b[38;5;{code}m{ch}" if color else ch)
        lines.append("".join(cells) + (ANSI_RESET if color else ""))
    return "\n".join(lines)


# =============================================================================
# Main Loop
# =============================================================================

def run(config: PhosphorConfig, fast: bool = False, out=None) -> int:
    """Play the script. Returns the number of frames drawn."""
    out = out or sys.stdout
    manager = EmitterManager()
    bridge = CognitiveEmitterBridge(manager)
    script = build_script(config.demo.seed)
    xs, zs = grid_axes(config.grid.width, config.grid.depth, config.grid.columns, config.grid.rows)

    dt = 1.0 / max(config.demo.fps, 1.0)
    frames = max(1, int(config.demo.seconds / dt))
    clear = not fast and out.isatty()

    t = 0.0
    cursor = 0
    for _ in range(frames):
        while cursor < len(script) and script[cursor][0] <= t:
            _, event = script[cursor]
            bridge.on_cognitive_event(event, AGENTS[event.agent_id], current_time=t)
            cursor += 1

        manager.update(dt)
        field = sample_influence_grid(manager, xs, zs)

        if clear:
            out.write(ANSI_HOME)
        out.write(render_frame(field, config.demo.color))
        out.write(f"\n t={t:5.2f}s  active={manager.active_count}\n")
        out.flush()

        t += dt
        if not fast:
            time.sleep(dt)

    logger.info(f"Drew {frames} frames, {cursor} events dispatched")
    return frames


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Phosphor emitter effect demo")
    parser.add_argument("--config", type=Path, help="JSON or YAML config file")
    parser.add_argument("--seconds", type=float, help="Playback length")
    parser.add_argument("--fps", type=float, help="Frames per second")
    parser.add_argument("--no-color", action="store_true", help="Plain ASCII output")
    parser.add_argument("--fast", action="store_true", help="Do not sleep between frames")
    parser.add_argument("--log-level", help="Logging level")
    args = parser.parse_args(argv)

    config = PhosphorConfig.from_file(args.config) if args.config else get_config()
    if args.seconds is not None:
        config.demo.seconds = args.seconds
    if args.fps is not None:
        config.demo.fps = args.fps
    if args.no_color:
        config.demo.color = False
    if args.log_level:
        config.log_level = args.log_level
    set_config(config)

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        run(config, fast=args.fast)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        if config.demo.color:
            sys.stdout.write(ANSI_RESET)
    return 0


if __name__ == "__main__":
    sys.exit(main())
