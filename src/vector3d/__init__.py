from vector3d.fast_math import fast_inv_sqrt
from vector3d.vector import Vector3D

__all__ = ["Vector3D", "fast_inv_sqrt"]
