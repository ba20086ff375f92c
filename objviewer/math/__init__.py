"""
Математический суб‑пакет: Vec3, Vec4, Mat4 и ядро алгебраических дополнений.
"""

from objviewer.math.vec3 import Vec3
from objviewer.math.vec4 import Vec4
from objviewer.math.mat4 import Mat4
from objviewer.math.scalar import clamp, to_degrees, to_radians

__all__ = ["Vec3", "Vec4", "Mat4", "clamp", "to_degrees", "to_radians"]
