# objviewer/scene/transform.py
"""
Положение объекта: позиция, масштаб и углы Эйлера (радианы).
Чистое значение – матрицы строятся по требованию.
"""

from dataclasses import dataclass, field

from objviewer.math.mat4 import Mat4
from objviewer.math.vec3 import Vec3


@dataclass
class Transform:
    position: Vec3 = field(default_factory=Vec3)
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))
    rotation: Vec3 = field(default_factory=Vec3)

    def model_matrix(self) -> Mat4:
        """T · Rz · Ry · Rx · S – сначала масштаб, затем поворот, затем перенос."""
        p, s, r = self.position, self.scale, self.rotation
        return (Mat4.translate(p.x, p.y, p.z)
                @ Mat4.rotate_z(r.z)
                @ Mat4.rotate_y(r.y)
                @ Mat4.rotate_x(r.x)
                @ Mat4.scale(s.x, s.y, s.z))

    def normal_matrix(self) -> Mat4:
        return self.model_matrix().normal_matrix()
