"""Grid sampling utilities for the scene distance field."""

from __future__ import annotations

import logging
import os
from typing import Tuple

import numpy as np
import numpy.typing as npt

from .scene import Scene

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]
_Bounds2D = Tuple[Tuple[float, float], Tuple[float, float]]
_Resolution2D = Tuple[int, int]


def canvas_bounds(width: float, height: float) -> _Bounds2D:
    """``((0, width), (0, height))`` for a canvas of the given size."""
    return (0.0, float(width)), (0.0, float(height))


def sample_distance_field(
    scene: Scene,
    bounds: _Bounds2D,
    resolution: _Resolution2D,
) -> _Array:
    """Sample *scene* on a uniform 2-D cell-centred grid.

    Parameters
    ----------
    scene:
        The scene whose ``sdf()`` method accepts ``(..., 2)`` arrays.
    bounds:
        ``((x0, x1), (y0, y1))`` canvas extents of the domain.
    resolution:
        ``(nx, ny)`` number of cells along each axis.

    Returns
    -------
    numpy.ndarray
        Shape ``(ny, nx)`` array of distances, row-major (y first), capped
        at the scene's vision distance.
    """
    (x0, x1), (y0, y1) = bounds
    nx, ny = resolution

    xs = np.linspace(x0, x1, nx, endpoint=False) + (x1 - x0) / (2.0 * nx)
    ys = np.linspace(y0, y1, ny, endpoint=False) + (y1 - y0) / (2.0 * ny)

    Y, X = np.meshgrid(ys, xs, indexing="ij")
    p = np.stack([X, Y], axis=-1)
    return scene.sdf(p)


def save_npy(path: str, phi: _Array) -> None:
    """Save *phi* array to *path* (creates parent directories if needed)."""
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    np.save(path, phi)
    logger.info("Saved distance field %s to %s", phi.shape, path)
