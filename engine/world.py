# world.py
import json
import logging
from pathlib import Path

from engine.gameobjects.mesh import MeshRegistry
from engine.gameobjects.object import GameObject
from engine.gameobjects.transform import Transform

log = logging.getLogger(__name__)


class World:
    def __init__(self, level_path: str | None = None):
        """
        Docstring für __init__

        :param self: The object itself
        :param level_path: Optional level file to load
        """
        self.objects: list[GameObject] = []
        if level_path:
            self.load_level(level_path)

    def _create_object(self, data: dict, base_dir: Path) -> GameObject:
        """
        Docstring für _create_object

        :param self: The object itself
        :param data: dict with object parameters
        :type data: dict
        :param base_dir: Directory that model paths are relative to
        """
        # ---------- transform ----------
        transform = Transform(
            position=data.get("position", [0, 0, 0]),
            rotation=data.get("rotation", [0, 0, 0]),
            scale=data.get("scale", [1, 1, 1]),
        )

        # ---------- mesh ----------
        mesh = None
        mesh_name = data.get("mesh")
        model = data.get("model")
        if mesh_name:
            mesh = MeshRegistry.get(mesh_name)
        elif model:
            mesh = MeshRegistry.get(str(base_dir / model))

        obj = GameObject(name=data.get("name", "GameObject"), mesh=mesh, transform=transform)

        # ---------- children ----------
        for child_data in data.get("children", []):
            obj.add_child(self._create_object(child_data, base_dir))

        return obj

    def load_level(self, level_path: str):
        """
        Docstring für load_level

        :param self: The object itself
        :param level_path: Path to the level file
        :type level_path: str
        """
        path = Path(level_path)
        if not path.exists():
            raise FileNotFoundError(f"Level file not found: {level_path}")

        with open(path, "r") as f:
            data = json.load(f)

        for entry in data.get("objects", []):
            self.objects.append(self._create_object(entry, path.parent))

        log.info("Loaded %d object(s) from %s", len(self.objects), path)

    def find(self, name: str) -> GameObject | None:
        for root in self.objects:
            for obj, _ in root.walk():
                if obj.name == name:
                    return obj
        return None
