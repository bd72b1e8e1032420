import numpy as np

def vec(list):
    """Handy shorthand to make a double-precision float array."""
    return np.array(list, dtype=np.float64)

def normalize(v):
    """Return a unit vector in the direction of the vector v."""
    length = np.linalg.norm(v)
    if length == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def to_rgba8(color):
    """Clamp an (unbounded) RGB color to 8-bit channels with full opacity.

    A missing color (None) becomes opaque black.
    """
    if color is None:
        color = (0, 0, 0)
    rgb = np.clip(np.asarray(color, dtype=np.float64), 0, 255).astype(np.uint8)
    return np.append(rgb, np.uint8(255))
