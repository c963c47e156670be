"""Render the scene distance field of a random scene as a heatmap.

Usage::

    python scripts/field_heatmap.py                     # saves field_heatmap.png
    python scripts/field_heatmap.py --seed 7 --out f.png
    python scripts/field_heatmap.py --npy field.npy     # also dump the raw array

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
import numpy as np

from raymarch2d import SweepConfig, canvas_bounds, sample_distance_field, save_npy, setup
from raymarch2d.logging_config import setup_logging

logger = logging.getLogger("raymarch2d.scripts.field_heatmap")


def render_heatmap(phi: np.ndarray, state, out_path: str) -> None:
    scene_cfg = state.config.scene
    extent = [0, scene_cfg.canvas_width, scene_cfg.canvas_height, 0]

    fig, ax = plt.subplots(figsize=(10, 7), facecolor="#111111")
    ax.set_facecolor("#111111")
    ax.set_xticks([])
    ax.set_yticks([])
    for spine in ax.spines.values():
        spine.set_edgecolor("#444444")

    im = ax.imshow(phi, origin="upper", extent=extent, cmap="magma",
                   vmin=min(float(phi.min()), 0.0), vmax=float(phi.max()),
                   interpolation="bilinear")
    ax.contour(phi, levels=[0.0], colors="white", linewidths=1.0,
               extent=extent, origin="upper")
    cam = state.camera.origin
    ax.plot([cam.x], [cam.y], marker="o", color="#9b9b9b")
    fig.colorbar(im, ax=ax, fraction=0.03)

    ax.set_title("raymarch2d: scene distance field", color="white", fontsize=12)
    fig.savefig(out_path, dpi=150, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    logger.info("Saved: %s", out_path)


def main() -> None:
    parser = argparse.ArgumentParser(description="Heatmap of a random scene's distance field.")
    parser.add_argument("--seed", type=int, default=None, help="Scene RNG seed")
    parser.add_argument("--res", type=int, nargs=2, default=(500, 350), metavar=("NX", "NY"),
                        help="Grid resolution (default 500 350)")
    parser.add_argument("--out", default="field_heatmap.png", help="Output PNG path")
    parser.add_argument("--npy", default=None, help="Optional .npy path for the raw field")
    args = parser.parse_args()

    setup_logging()
    state = setup(SweepConfig.from_mapping({"seed": args.seed}))
    scene_cfg = state.config.scene
    bounds = canvas_bounds(scene_cfg.canvas_width, scene_cfg.canvas_height)
    phi = sample_distance_field(state.scene, bounds, tuple(args.res))

    if args.npy:
        save_npy(args.npy, phi)
    render_heatmap(phi, state, args.out)


if __name__ == "__main__":
    main()
