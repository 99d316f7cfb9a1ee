import numpy as np

# Unit cube centered at the origin, 8 corners
cube_positions = np.array([
    [-0.5, -0.5, -0.5],
    [ 0.5, -0.5, -0.5],
    [ 0.5,  0.5, -0.5],
    [-0.5,  0.5, -0.5],
    [-0.5, -0.5,  0.5],
    [ 0.5, -0.5,  0.5],
    [ 0.5,  0.5,  0.5],
    [-0.5,  0.5,  0.5],
], dtype=np.float32)

# Sphere generated with latitude/longitude tessellation
def generate_sphere(radius=0.5, stacks=16, slices=32):
    verts = []
    for i in range(stacks + 1):
        phi = np.pi * i / stacks

        for j in range(slices):
            theta = 2 * np.pi * j / slices

            p = np.array([
                np.sin(phi) * np.cos(theta),
                np.cos(phi),
                np.sin(phi) * np.sin(theta)
            ])
            verts.append(p * radius)

    return np.array(verts, dtype=np.float32)

sphere_positions = generate_sphere(radius=0.5, stacks=16, slices=32)
