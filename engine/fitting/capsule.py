import logging
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from engine.fitting.bounds import Bounds
from engine.fitting.policy import FitMode, resolve
from engine.fitting.vector import check_scale

log = logging.getLogger(__name__)


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2


@dataclass(frozen=True)
class CapsuleParams:
    center: np.ndarray
    radius: float
    height: float
    axis: Axis


def select_axis(scaled_extents: np.ndarray) -> Axis:
    """
    Axis with the largest scaled extent.

    max() keeps the first maximal item, so ties resolve X > Y > Z.
    """
    return max(Axis, key=lambda axis: scaled_extents[axis])


def fit_capsule(
    bounds: Bounds,
    scale,
    radius_mode: FitMode,
    height_mode: FitMode,
) -> CapsuleParams:
    """
    Capsule collider for the local bounds under a non-uniform scale.

    The host scales the radius by the larger of the two scale components
    across the capsule and the height by the component along it. Both are
    undone here. The radius is computed first; the outside height depends
    on the final local radius.

    :param bounds: Local bounds of the target
    :param scale: Lossy (world) scale of the target
    :param radius_mode: Containment policy for the radius
    :param height_mode: Containment policy for the height
    :return: Local-space capsule parameters
    :rtype: CapsuleParams
    """
    scale = check_scale(scale)
    scaled = bounds.extents * scale

    # --------------------------------------------------
    # axis
    # --------------------------------------------------
    axis = select_axis(scaled)
    others = [a for a in Axis if a is not axis]

    height_base = float(bounds.extents[axis])
    height_divider = float(scale[axis])
    radius_divider = float(max(scale[others[0]], scale[others[1]]))

    # caps extend along the axis, only the cross-section sets the radius
    scaled[axis] = 0.0

    # --------------------------------------------------
    # radius
    # --------------------------------------------------
    outside_r = float(np.linalg.norm(scaled))
    inside_r = float(scaled.max())
    radius = resolve(radius_mode, inside_r, outside_r) / radius_divider

    # --------------------------------------------------
    # height
    # --------------------------------------------------
    inside_h = 2.0 * height_base
    outside_h = 2.0 * (height_base + radius * radius_divider / height_divider)
    height = resolve(height_mode, inside_h, outside_h)

    log.debug(
        "capsule fit: axis %s, radius %.6f, height %.6f", axis.name, radius, height
    )
    return CapsuleParams(
        center=bounds.center.copy(), radius=radius, height=height, axis=axis
    )
