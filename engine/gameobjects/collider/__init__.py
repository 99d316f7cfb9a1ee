from engine.gameobjects.collider.box import BoxCollider
from engine.gameobjects.collider.capsule import CapsuleCollider
from engine.gameobjects.collider.sphere import SphereCollider

__all__ = ["BoxCollider", "CapsuleCollider", "SphereCollider"]
