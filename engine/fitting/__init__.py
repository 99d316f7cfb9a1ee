from engine.fitting.bounds import Bounds, compute_local_bounds, require_local_bounds
from engine.fitting.box import BoxParams, fit_box
from engine.fitting.capsule import Axis, CapsuleParams, fit_capsule
from engine.fitting.errors import (
    ColliderFitError,
    InvalidFitPolicy,
    InvalidScale,
    NoGeometryFound,
)
from engine.fitting.policy import FitMode, coerce_fit_mode, resolve
from engine.fitting.sphere import SphereParams, fit_sphere

__all__ = [
    "Axis",
    "Bounds",
    "BoxParams",
    "CapsuleParams",
    "ColliderFitError",
    "FitMode",
    "InvalidFitPolicy",
    "InvalidScale",
    "NoGeometryFound",
    "SphereParams",
    "coerce_fit_mode",
    "compute_local_bounds",
    "fit_box",
    "fit_capsule",
    "fit_sphere",
    "require_local_bounds",
    "resolve",
]
