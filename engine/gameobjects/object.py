import numpy as np

from engine.gameobjects.transform import Transform


class GameObject:
    def __init__(self, name="GameObject", mesh=None, transform=None, collider=None, children=None):
        """
        Docstring für __init__

        :param self: The object itself
        :param name: The name of the object
        :param mesh: The mesh of the object
        :param transform: The transform of the object, relative to its parent
        :param collider: The collider of the object
        :param children: Child objects
        """
        self.name = name
        self.mesh = mesh
        self.transform = transform if transform is not None else Transform()
        self.collider = collider
        self.parent: "GameObject | None" = None
        self.children: list[GameObject] = []
        for child in children or ():
            self.add_child(child)

    def add_child(self, child: "GameObject") -> "GameObject":
        child.parent = self
        child.transform.parent = self.transform
        self.children.append(child)
        return child

    def walk(self):
        """
        Depth-first walk of this object and its descendants.

        Yields (object, matrix) where matrix maps the object's local
        coordinates into this root's local coordinates.
        """
        stack = [(self, np.identity(4, dtype=np.float64))]
        while stack:
            obj, matrix = stack.pop()
            yield obj, matrix
            for child in reversed(obj.children):
                stack.append((child, matrix @ child.transform.matrix().astype(np.float64)))

    def __repr__(self):
        return f"GameObject(name={self.name!r}, children={len(self.children)})"
