import numpy as np

from engine.fitting.errors import InvalidScale


def as_vec3(value, name: str = "vector") -> np.ndarray:
    v = np.asarray(value, dtype=np.float64)
    if v.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got shape {v.shape}")
    return v


def check_scale(scale) -> np.ndarray:
    """
    Validate a lossy scale before the fitters divide by it.

    Negative components (mirroring) are accepted; their magnitude is returned.

    :param scale: 3-component scale
    :return: Absolute scale as float64 array
    :rtype: np.ndarray
    """
    try:
        s = as_vec3(scale, "scale")
    except ValueError as exc:
        raise InvalidScale(str(exc)) from exc

    if not np.all(np.isfinite(s)):
        raise InvalidScale(f"Scale must be finite, got {tuple(s)}")
    if np.any(s == 0.0):
        raise InvalidScale(f"Scale components must be non-zero, got {tuple(s)}")
    return np.abs(s)
