"""Animate the ray-marching sweep with matplotlib.

Usage::

    python scripts/sweep_demo.py                        # interactive window
    python scripts/sweep_demo.py --mode corrected       # trace once per angle
    python scripts/sweep_demo.py --ticks 360 --out sweep.png   # headless snapshot

Clicking inside the window clears the accumulated hits.

Requirements: numpy, matplotlib
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib.pyplot as plt
from matplotlib.patches import Circle as CirclePatch
from matplotlib.patches import Rectangle as RectPatch

from raymarch2d import Circle, SweepConfig, TickResult, clear_hits, setup, tick
from raymarch2d.logging_config import setup_logging

logger = logging.getLogger("raymarch2d.scripts.sweep_demo")

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------

COLOR_BACKGROUND = (30 / 255, 30 / 255, 30 / 255, 1.0)
COLOR_FILL_SHAPE = (0.0, 0.0, 0.0, 1.0)
COLOR_LINE = (100 / 255, 100 / 255, 100 / 255, 0.5)
COLOR_HIT = (1.0, 180 / 255, 0.0, 0.5)
COLOR_FILL_CIRCLE = (40 / 255, 40 / 255, 40 / 255, 0.5)
COLOR_STROKE_CIRCLE = (100 / 255, 100 / 255, 100 / 255, 0.5)
COLOR_FILL_CAMERA = (155 / 255, 155 / 255, 155 / 255, 1.0)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def draw_frame(ax, state, frame: TickResult) -> None:
    """Redraw the whole canvas from *state* and the geometry in *frame*."""
    scene_cfg = state.config.scene
    ax.clear()
    ax.set_facecolor(COLOR_BACKGROUND)
    ax.set_xlim(0, scene_cfg.canvas_width)
    ax.set_ylim(scene_cfg.canvas_height, 0)   # canvas y grows downward
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    for shape in state.scene:
        if isinstance(shape, Circle):
            patch = CirclePatch((shape.origin.x, shape.origin.y), shape.radius)
        else:
            patch = RectPatch((shape.origin.x, shape.origin.y), shape.width, shape.height)
        patch.set_facecolor(COLOR_FILL_SHAPE)
        patch.set_edgecolor("none")
        ax.add_patch(patch)

    for wp in frame.debug_waypoints:
        ax.add_patch(CirclePatch(
            (wp.point.x, wp.point.y), max(wp.radius, 0.0),
            facecolor=COLOR_FILL_CIRCLE, edgecolor=COLOR_STROKE_CIRCLE,
        ))

    if frame.hits:
        ax.scatter([h.position.x for h in frame.hits], [h.position.y for h in frame.hits],
                   s=2, color=COLOR_HIT, zorder=3)

    cam = state.camera
    ax.plot([cam.origin.x, frame.ray_endpoint.x], [cam.origin.y, frame.ray_endpoint.y],
            color=COLOR_LINE, linewidth=2)
    ax.add_patch(CirclePatch((cam.origin.x, cam.origin.y), cam.radius,
                             facecolor=COLOR_FILL_CAMERA, zorder=4))


def run_interactive(config: SweepConfig, interval_ms: int) -> None:
    from matplotlib.animation import FuncAnimation

    state = setup(config)
    fig, ax = plt.subplots(figsize=(10, 7), facecolor=COLOR_BACKGROUND)

    def _on_click(_event) -> None:
        clear_hits(state)

    def _update(_i: int) -> None:
        frame = tick(state)
        if frame.did_reset:
            logger.info("Scene reset after angle %.1f", frame.angle)
        draw_frame(ax, state, frame)

    fig.canvas.mpl_connect("button_press_event", _on_click)
    anim = FuncAnimation(fig, _update, interval=interval_ms, cache_frame_data=False)
    plt.show()
    del anim


def run_headless(config: SweepConfig, ticks: int, out_path: str) -> None:
    state = setup(config)
    frame = None
    for _ in range(ticks):
        frame = tick(state)
    if frame is None:
        raise SystemExit("--ticks must be at least 1")

    fig, ax = plt.subplots(figsize=(10, 7), facecolor=COLOR_BACKGROUND)
    draw_frame(ax, state, frame)
    fig.savefig(out_path, dpi=150, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    logger.info("Saved: %s (%d hits)", out_path, len(frame.hits))


def main() -> None:
    parser = argparse.ArgumentParser(description="Sphere-tracing sweep over a random 2D scene.")
    parser.add_argument("--mode", choices=["parity", "corrected"], default="parity",
                        help="Stepping mode (default parity)")
    parser.add_argument("--seed", type=int, default=None, help="Scene RNG seed")
    parser.add_argument("--shapes", type=int, default=30, help="Shapes per kind (default 30)")
    parser.add_argument("--min-tolerance", type=float, default=0.05,
                        help="Hit tolerance (default 0.05)")
    parser.add_argument("--no-debug", action="store_true", help="Hide march waypoints")
    parser.add_argument("--interval", type=int, default=1, help="Frame interval in ms")
    parser.add_argument("--ticks", type=int, default=None,
                        help="Run this many ticks headless and save a PNG instead")
    parser.add_argument("--out", default="sweep.png", help="Output PNG path for --ticks")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    config = SweepConfig.from_mapping({
        "mode": args.mode,
        "seed": args.seed,
        "shape_count_per_kind": args.shapes,
        "min_tolerance": args.min_tolerance,
        "debug_waypoints": not args.no_debug,
    })

    if args.ticks is not None:
        run_headless(config, args.ticks, args.out)
    else:
        run_interactive(config, args.interval)


if __name__ == "__main__":
    main()
