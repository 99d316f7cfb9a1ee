import logging
from dataclasses import dataclass

import numpy as np

from engine.fitting.bounds import Bounds
from engine.fitting.policy import FitMode, resolve
from engine.fitting.vector import check_scale

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SphereParams:
    center: np.ndarray
    radius: float


def fit_sphere(bounds: Bounds, scale, radius_mode: FitMode) -> SphereParams:
    """
    Sphere collider for the local bounds under a non-uniform scale.

    The host scales a sphere's radius by the largest scale component,
    so the world radius is divided by it on the way back.

    :param bounds: Local bounds of the target
    :param scale: Lossy (world) scale of the target
    :param radius_mode: Containment policy for the radius
    :return: Local-space sphere parameters
    :rtype: SphereParams
    """
    scale = check_scale(scale)
    scaled = bounds.extents * scale

    outside = float(np.linalg.norm(scaled))
    inside = float(scaled.max())

    world_radius = resolve(radius_mode, inside, outside)
    radius = world_radius / float(scale.max())

    log.debug("sphere fit: world radius %.6f -> local radius %.6f", world_radius, radius)
    return SphereParams(center=bounds.center.copy(), radius=radius)
