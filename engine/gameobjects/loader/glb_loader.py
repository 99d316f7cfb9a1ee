import logging
import struct

import numpy as np
from pygltflib import GLTF2

log = logging.getLogger(__name__)


def _component_count(accessor_type: str) -> int:
    return {
        "SCALAR": 1,
        "VEC2": 2,
        "VEC3": 3,
        "VEC4": 4,
        "MAT4": 16,
    }[accessor_type]


def _component_format(component_type: int):
    """
    Returns (struct_format_char, byte_size)
    glTF component types:
      5126 = FLOAT
      5125 = UNSIGNED_INT
      5123 = UNSIGNED_SHORT
      5121 = UNSIGNED_BYTE
    """
    if component_type == 5126:  # FLOAT
        return "f", 4
    if component_type == 5125:  # UNSIGNED_INT
        return "I", 4
    if component_type == 5123:  # UNSIGNED_SHORT
        return "H", 2
    if component_type == 5121:  # UNSIGNED_BYTE
        return "B", 1
    raise ValueError(f"Unsupported component type: {component_type}")


def _read_accessor(gltf: GLTF2, data: bytes, acc_index: int) -> np.ndarray:
    acc = gltf.accessors[acc_index]
    if acc.bufferView is None:
        raise ValueError("Accessor has no bufferView")
    view = gltf.bufferViews[acc.bufferView]

    comp_char, comp_size = _component_format(acc.componentType)
    comps = _component_count(acc.type)

    stride = view.byteStride or (comp_size * comps)
    offset = (view.byteOffset or 0) + (acc.byteOffset or 0)

    fmt = "<" + comp_char * comps
    out = np.empty((acc.count, comps), dtype=np.float32)

    for i in range(acc.count):
        out[i] = struct.unpack_from(fmt, data, offset + i * stride)

    return out


def load_glb_positions(path: str) -> np.ndarray:
    """
    Loads the POSITION attribute of every primitive of every mesh in a .glb.
    Returns the positions stacked into one (N, 3) float32 array.

    Node transforms are not applied: positions stay in mesh space.
    """
    gltf = GLTF2().load(str(path))

    if gltf is None:
        raise ValueError(f"Failed to load GLTF: {path}")

    if not gltf.meshes:
        raise ValueError(f"No meshes found in GLTF: {path}")

    data = gltf.binary_blob()
    if data is None:
        raise ValueError("GLTF has no binary blob (use .glb)")

    chunks = []
    for mesh in gltf.meshes:
        for prim in mesh.primitives:
            if prim.attributes.POSITION is None:
                continue
            chunks.append(_read_accessor(gltf, data, prim.attributes.POSITION))

    if not chunks:
        raise ValueError(f"GLTF has no POSITION attributes: {path}")

    positions = np.vstack(chunks)
    log.debug("Loaded %d positions from %s", positions.shape[0], path)
    return positions
