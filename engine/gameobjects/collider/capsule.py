import numpy as np


class CapsuleCollider:
    """
    Capsule collider along one local axis (0 = X, 1 = Y, 2 = Z).

    The capsule consists of:
    - a cylinder along the axis
    - a hemisphere at each end

    Height is the full length including both caps. When the scaled height
    is below the scaled diameter the capsule degenerates to a sphere.
    """

    def __init__(self, center=(0, 0, 0), radius: float = 0.5, height: float = 2.0, direction: int = 1):
        self.center = np.array(center, dtype=np.float64)
        self.radius = float(radius)
        self.height = float(height)
        self.direction = int(direction)

    @classmethod
    def from_params(cls, params):
        return cls(
            center=params.center,
            radius=params.radius,
            height=params.height,
            direction=int(params.axis),
        )

    # --------------------------------------------------
    # scaled geometry
    # --------------------------------------------------

    def _cross_axes(self):
        return [a for a in range(3) if a != self.direction]

    def world_radius(self, scale) -> float:
        scale = np.abs(np.asarray(scale, dtype=np.float64))
        return self.radius * float(scale[self._cross_axes()].max())

    def world_height(self, scale) -> float:
        scale = np.abs(np.asarray(scale, dtype=np.float64))
        return self.height * float(scale[self.direction])

    def get_endpoints(self, scale):
        """
        Returns the centers of the two cap spheres in the scaled local frame.
        """
        scale = np.abs(np.asarray(scale, dtype=np.float64))
        half_segment = max(0.0, self.world_height(scale) * 0.5 - self.world_radius(scale))

        offset = np.zeros(3, dtype=np.float64)
        offset[self.direction] = half_segment

        center = self.center * scale
        return center - offset, center + offset

    # --------------------------------------------------
    # point test
    # --------------------------------------------------

    def contains_point(self, point, scale, tolerance: float = 1e-6) -> bool:
        """
        Point test in the scaled local frame (local point × scale).
        """
        a, b = self.get_endpoints(scale)
        p = np.asarray(point, dtype=np.float64)
        closest = self._closest_point_on_segment(a, b, p)
        return float(np.linalg.norm(p - closest)) <= self.world_radius(scale) + tolerance

    def to_dict(self) -> dict:
        return {
            "type": "capsule",
            "center": self.center.tolist(),
            "radius": self.radius,
            "height": self.height,
            "direction": self.direction,
        }

    def __repr__(self):
        return (
            f"CapsuleCollider(center={self.center}, radius={self.radius}, "
            f"height={self.height}, direction={self.direction})"
        )

    # --------------------------------------------------
    # internal math
    # --------------------------------------------------

    @staticmethod
    def _closest_point_on_segment(a, b, p):
        """
        Closest point to p on segment ab.
        """
        ab = b - a
        denom = np.dot(ab, ab)
        if denom == 0.0:
            return a
        t = np.dot(p - a, ab) / denom
        t = np.clip(t, 0.0, 1.0)
        return a + ab * t
