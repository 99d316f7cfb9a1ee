from dataclasses import dataclass

import numpy as np

from engine.fitting.bounds import Bounds


@dataclass(frozen=True)
class BoxParams:
    center: np.ndarray
    size: np.ndarray


def fit_box(bounds: Bounds) -> BoxParams:
    """
    Box collider matching the local bounds.

    The host applies box dimensions in local space, so no scale
    compensation is needed.
    """
    return BoxParams(center=bounds.center.copy(), size=bounds.size)
