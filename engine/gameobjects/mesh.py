from pathlib import Path

import numpy as np

from engine.gameobjects.primitives.vertec import cube_positions, sphere_positions


class Mesh:
    def __init__(self, positions: np.ndarray | None = None):
        """
        positions: vertex positions, shape (N, 3)
        """
        if positions is None:
            positions = np.zeros((0, 3), dtype=np.float32)

        positions = np.asarray(positions, dtype=np.float32)
        assert positions.ndim == 2 and positions.shape[1] == 3, \
            "positions must have shape (N, 3)"

        self.positions = positions
        self.vertex_count = positions.shape[0]

    def bounds(self):
        """Min/max corners of the vertices in mesh space."""
        if self.vertex_count == 0:
            return None
        return self.positions.min(axis=0), self.positions.max(axis=0)


class MeshRegistry:
    """
    Cache of named meshes.

    Names are either built-in primitives ("cube", "sphere") or .glb paths.
    """

    _meshes: dict[str, Mesh] = {}

    @classmethod
    def get(cls, name: str) -> Mesh:
        """
        Docstring für get

        :param cls: The class itself
        :param name: The name of the mesh to retrieve
        :type name: str
        :return: The mesh object
        :rtype: Mesh
        """
        if name not in cls._meshes:
            cls._meshes[name] = cls._load_mesh(name)
        return cls._meshes[name]

    @classmethod
    def clear(cls):
        cls._meshes.clear()

    @staticmethod
    def _load_mesh(name: str) -> Mesh:
        if name == "cube":
            return Mesh(cube_positions)
        elif name == "sphere":
            return Mesh(sphere_positions)
        elif Path(name).suffix.lower() == ".glb":
            from engine.gameobjects.loader.glb_loader import load_glb_positions

            return Mesh(load_glb_positions(name))
        else:
            raise ValueError(f"Unknown mesh asset: {name}")
