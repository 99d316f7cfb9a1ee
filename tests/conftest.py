"""
Root conftest — sys.path setup + shared scene builders and fixtures.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# ── Add project root to sys.path so `from engine.x import ...` works ───────
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from engine.gameobjects.mesh import Mesh, MeshRegistry  # noqa: E402
from engine.gameobjects.object import GameObject  # noqa: E402
from engine.gameobjects.transform import Transform  # noqa: E402


# ── Scene helpers (plain functions, not fixtures) ──────────────────────────

def box_mesh(half_extents=(0.5, 0.5, 0.5), center=(0.0, 0.0, 0.0)) -> Mesh:
    """Mesh holding the 8 corners of an axis-aligned box."""
    half = np.asarray(half_extents, dtype=np.float32)
    signs = np.array(
        [[sx, sy, sz] for sx in (-1, 1) for sy in (-1, 1) for sz in (-1, 1)],
        dtype=np.float32,
    )
    return Mesh(np.asarray(center, dtype=np.float32) + signs * half)


def make_object(name="obj", mesh=None, position=(0, 0, 0), rotation=(0, 0, 0),
                scale=(1, 1, 1), children=()) -> GameObject:
    return GameObject(
        name=name,
        mesh=mesh,
        transform=Transform(position=position, rotation=rotation, scale=scale),
        children=list(children),
    )


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def _clear_mesh_registry():
    MeshRegistry.clear()
    yield
    MeshRegistry.clear()


@pytest.fixture
def cube_object() -> GameObject:
    """Unit cube, identity transform."""
    return make_object("cube", mesh=MeshRegistry.get("cube"))
