import numpy as np


class SphereCollider:
    """
    Sphere collider.

    The radius is scaled by the largest lossy scale component, so a
    sphere stays a sphere under non-uniform scale.
    """

    def __init__(self, center=(0, 0, 0), radius: float = 0.5):
        self.center = np.array(center, dtype=np.float64)
        self.radius = float(radius)

    @classmethod
    def from_params(cls, params):
        return cls(center=params.center, radius=params.radius)

    def world_radius(self, scale) -> float:
        return self.radius * float(np.max(np.abs(scale)))

    def contains_point(self, point, scale, tolerance: float = 1e-6) -> bool:
        """
        Point test in the scaled local frame (local point × scale).
        """
        scale = np.abs(np.asarray(scale, dtype=np.float64))
        delta = np.asarray(point, dtype=np.float64) - self.center * scale
        return float(np.linalg.norm(delta)) <= self.world_radius(scale) + tolerance

    def to_dict(self) -> dict:
        return {
            "type": "sphere",
            "center": self.center.tolist(),
            "radius": self.radius,
        }

    def __repr__(self):
        return f"SphereCollider(center={self.center}, radius={self.radius})"
