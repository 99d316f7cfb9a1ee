import logging
from dataclasses import dataclass

import numpy as np

from engine.fitting.errors import NoGeometryFound
from engine.fitting.vector import as_vec3

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bounds:
    """
    Axis-aligned box in a local coordinate frame.

    :param center: Box center
    :param extents: Half size along each axis, all components >= 0
    """

    center: np.ndarray
    extents: np.ndarray

    def __post_init__(self):
        center = as_vec3(self.center, "center")
        extents = as_vec3(self.extents, "extents")
        if not np.all(extents >= 0.0):
            raise ValueError(f"Bounds extents must be >= 0, got {tuple(extents)}")
        object.__setattr__(self, "center", center)
        object.__setattr__(self, "extents", extents)

    @classmethod
    def from_min_max(cls, min_v, max_v) -> "Bounds":
        min_v = as_vec3(min_v, "min")
        max_v = as_vec3(max_v, "max")
        return cls(center=(min_v + max_v) * 0.5, extents=(max_v - min_v) * 0.5)

    @classmethod
    def from_points(cls, points) -> "Bounds":
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        if pts.shape[0] == 0:
            raise ValueError("Cannot build bounds from zero points")
        return cls.from_min_max(pts.min(axis=0), pts.max(axis=0))

    @property
    def size(self) -> np.ndarray:
        return self.extents * 2.0

    @property
    def min(self) -> np.ndarray:
        return self.center - self.extents

    @property
    def max(self) -> np.ndarray:
        return self.center + self.extents

    def corners(self) -> np.ndarray:
        """All 8 corners, shape (8, 3)."""
        signs = np.array(
            [[sx, sy, sz] for sx in (-1, 1) for sy in (-1, 1) for sz in (-1, 1)],
            dtype=np.float64,
        )
        return self.center + signs * self.extents


def compute_local_bounds(root) -> Bounds | None:
    """
    Bounds of every mesh in the hierarchy, expressed in root's local frame.

    :param root: GameObject at the top of the hierarchy
    :return: The bounds, or None when no object carries mesh vertices
    """
    chunks = []
    for obj, matrix in root.walk():
        mesh = obj.mesh
        if mesh is None or mesh.vertex_count == 0:
            continue
        positions = np.asarray(mesh.positions, dtype=np.float64)
        chunks.append(positions @ matrix[:3, :3].T + matrix[:3, 3])

    if not chunks:
        log.debug("No geometry below %s", getattr(root, "name", root))
        return None

    return Bounds.from_points(np.vstack(chunks))


def require_local_bounds(root) -> Bounds:
    bounds = compute_local_bounds(root)
    if bounds is None:
        raise NoGeometryFound(f"No geometry found below {getattr(root, 'name', root)!r}")
    return bounds
