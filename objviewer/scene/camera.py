"""
Камера‑fly‑through (FPS): позиция + yaw/pitch.
Ввод приходит снаружи в виде CameraInput – сама камера ничего не опрашивает.
"""

from dataclasses import dataclass
from math import cos, sin

from objviewer.math.mat4 import Mat4
from objviewer.math.scalar import clamp, to_radians
from objviewer.math.vec3 import Vec3

PITCH_LIMIT = 89.0


@dataclass
class CameraInput:
    """Состояние управления за кадр: флаги клавиш и относительный сдвиг мыши."""
    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    mouse_dx: float = 0.0
    mouse_dy: float = 0.0


class FpsCamera:
    """Камера‑fly‑through."""
    def __init__(self, position: Vec3 = None, move_speed=5.0, look_speed=6.0,
                 fov_deg=45.0, near=0.1, far=100.0, name="Camera"):
        self.name = name
        self.position = position if position is not None else Vec3(0.0, 0.0, 2.0)
        self.front = Vec3(0.0, 0.0, -1.0)
        self.up = Vec3(0.0, 1.0, 0.0)
        self.move_speed = move_speed
        self.look_speed = look_speed
        self.fov_deg = fov_deg
        self.near = near
        self.far = far
        self.pitch = 0.0
        # при yaw = 0 камера смотрела бы вдоль +X
        self.yaw = -89.0
        self.control_enabled = True

    @classmethod
    def from_config(cls, cfg) -> "FpsCamera":
        cam = cfg["camera"]
        return cls(position=Vec3.from_iter(cam["position"]),
                   move_speed=cam["move_speed"],
                   look_speed=cam["look_speed"],
                   fov_deg=cam["fov_deg"],
                   near=cam["near"],
                   far=cam["far"])

    @property
    def right(self) -> Vec3:
        return self.front.cross(self.up).normalized()

    def toggle_control(self, enabled: bool = None) -> None:
        self.control_enabled = (not self.control_enabled) if enabled is None else enabled

    def update(self, inp: CameraInput, dt: float) -> None:
        if not self.control_enabled:
            return

        step = self.move_speed * dt
        if inp.forward:
            self.position = self.position + self.front * step
        if inp.backward:
            self.position = self.position - self.front * step
        if inp.left:
            self.position = self.position - self.right * step
        if inp.right:
            self.position = self.position + self.right * step
        if inp.up:
            self.position.y += step
        if inp.down:
            self.position.y -= step

        if inp.mouse_dx:
            self.yaw += inp.mouse_dx * self.look_speed * dt
        if inp.mouse_dy:
            self.pitch -= inp.mouse_dy * self.look_speed * dt
        self.pitch = clamp(-PITCH_LIMIT, PITCH_LIMIT, self.pitch)

        self._update_front()

    def _update_front(self) -> None:
        yaw = to_radians(self.yaw)
        pitch = to_radians(self.pitch)
        self.front = Vec3(cos(yaw) * cos(pitch),
                          sin(pitch),
                          sin(yaw) * cos(pitch)).normalized()

    def view_matrix(self) -> Mat4:
        return Mat4.look_at(self.position, self.position + self.front, self.up)

    def projection_matrix(self, width: float, height: float) -> Mat4:
        return Mat4.perspective(to_radians(self.fov_deg), width, height,
                                self.near, self.far)
