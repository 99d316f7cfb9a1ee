import numpy as np


class BoxCollider:
    def __init__(self, center=(0, 0, 0), size=(1, 1, 1)):
        """
        Docstring für __init__

        :param self: The object itself
        :param center: The center of the collider in local space
        :param size: The size of the collider in local space
        """
        self.center = np.array(center, dtype=np.float64)
        self.size = np.array(size, dtype=np.float64)

    @classmethod
    def from_params(cls, params):
        return cls(center=params.center, size=params.size)

    def get_bounds(self, transform):
        """
        Docstring für get_bounds

        :param self: The object itself
        :param transform: The transform of the object
        :return: World-space (min, max) corners; rotation only moves the center
        """
        scale = np.abs(transform.lossy_scale).astype(np.float64)

        # World-space collider size = lossy scale × local collider size
        half = self.size * scale * 0.5
        world = transform.world_matrix().astype(np.float64)
        center = world[:3, :3] @ self.center + world[:3, 3]

        min_v = center - half
        max_v = center + half
        return min_v, max_v

    def to_dict(self) -> dict:
        return {
            "type": "box",
            "center": self.center.tolist(),
            "size": self.size.tolist(),
        }

    def __repr__(self):
        return f"BoxCollider(center={self.center}, size={self.size})"
