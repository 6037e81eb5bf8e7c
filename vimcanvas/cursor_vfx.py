"""Cursor visual effects: point highlights and particle trails."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from vimcanvas.animation import Point, ease, ease_in_quad

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1


class VfxMode(Enum):
    """The cursor effect selected by the ``cursor_vfx_mode`` setting."""

    SONIC_BOOM = "sonicboom"
    RIPPLE = "ripple"
    WIREFRAME = "wireframe"
    RAILGUN = "railgun"
    TORPEDO = "torpedo"
    PIXIE_DUST = "pixiedust"
    DISABLED = ""

    @classmethod
    def parse(cls, value: object) -> VfxMode:
        """Look up a mode by its setting name; raise on anything else."""
        if not isinstance(value, str):
            raise TypeError(f"Expected a VfxMode string, but received {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Expected a VfxMode name, but received {value!r}") from None

    def is_highlight(self) -> bool:
        return self in (VfxMode.SONIC_BOOM, VfxMode.RIPPLE, VfxMode.WIREFRAME)

    def is_trail(self) -> bool:
        return self in (VfxMode.RAILGUN, VfxMode.TORPEDO, VfxMode.PIXIE_DUST)


@dataclass
class CursorSettings:
    antialiasing: bool = True
    animation_length: float = 0.06
    distance_length_adjust: bool = True
    animate_in_insert_mode: bool = True
    animate_command_line: bool = True
    trail_size: float = 0.7
    unfocused_outline_width: float = 1.0 / 8.0
    vfx_mode: VfxMode = VfxMode.DISABLED
    vfx_opacity: float = 200.0
    vfx_particle_lifetime: float = 1.2
    vfx_particle_density: float = 7.0
    vfx_particle_speed: float = 10.0
    vfx_particle_phase: float = 1.5
    vfx_particle_curl: float = 1.0


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class PcgRandom:
    """A small deterministic PCG32 (XSH RR) generator."""

    _MULTIPLIER = 6_364_136_223_846_793_005

    def __init__(self) -> None:
        self._state = 0x853C_49E6_748F_EA9B
        self._inc = ((0xDA3E_39CB_94B9_5BDB << 1) | 1) & _MASK64

    def next_u32(self) -> int:
        old_state = self._state
        self._state = (old_state * self._MULTIPLIER + self._inc) & _MASK64
        rot = old_state >> 59
        xsh = (((old_state >> 18) ^ old_state) >> 27) & _MASK32
        return ((xsh >> rot) | (xsh << ((32 - rot) & 31))) & _MASK32

    def next_float(self) -> float:
        """Return a value in [0, 1) derived from the next 32 random bits."""
        return _to_float32(math.ldexp(float(self.next_u32()), -32))

    def rand_dir(self) -> Point:
        """Return a vector with both coordinates in [-1, 1); not normalized."""
        x = self.next_float()
        y = self.next_float()
        return Point(x * 2.0 - 1.0, y * 2.0 - 1.0)

    def rand_dir_normalized(self) -> Point:
        return self.rand_dir().normalized()


def rotate_vec(v: Point, rot: float) -> Point:
    sin = math.sin(rot)
    cos = math.cos(rot)
    return Point(v.x * cos - v.y * sin, v.x * sin + v.y * cos)


@dataclass
class Particle:
    pos: Point
    speed: Point
    rotation_speed: float
    lifetime: float


class PointHighlight:
    """A highlight that expands from the cursor position and fades out."""

    def __init__(self, mode: VfxMode) -> None:
        if not mode.is_highlight():
            raise ValueError(f"{mode} is not a highlight mode")
        self.mode = mode
        self.t = 0.0
        self.center_position = Point(0.0, 0.0)

    def update(
        self,
        settings: CursorSettings,
        current_cursor_destination: Point,
        cursor_dimensions: Point,
        dt: float,
    ) -> bool:
        """Advance the effect; return whether it is still animating."""
        self.t = min(self.t + dt * 5.0, 1.0)
        return self.t < 1.0

    def restart(self, position: Point) -> None:
        self.t = 0.0
        self.center_position = position

    def alpha(self, settings: CursorSettings) -> int:
        """Opacity of the highlight at the current time, 0 to 255."""
        return max(0, min(255, int(ease(ease_in_quad, settings.vfx_opacity, 0.0, self.t))))

    def radius(self, cursor_height: float) -> float:
        """Current size of the highlight for a cursor of the given height."""
        return self.t * 3.0 * cursor_height


class ParticleTrail:
    """Particles spawned along the path the cursor travels."""

    def __init__(self, mode: VfxMode) -> None:
        if not mode.is_trail():
            raise ValueError(f"{mode} is not a trail mode")
        self.mode = mode
        self.particles: list[Particle] = []
        self.previous_cursor_dest = Point(0.0, 0.0)
        self.rng = PcgRandom()

    def update(
        self,
        settings: CursorSettings,
        current_cursor_destination: Point,
        cursor_dimensions: Point,
        dt: float,
    ) -> bool:
        """Age, move and spawn particles; return whether any are alive."""
        for particle in self.particles:
            particle.lifetime -= dt
        self.particles = [p for p in self.particles if p.lifetime > 0.0]

        for particle in self.particles:
            particle.pos = particle.pos + particle.speed * dt
            particle.speed = rotate_vec(particle.speed, dt * particle.rotation_speed)

        if current_cursor_destination != self.previous_cursor_dest:
            self._spawn(settings, current_cursor_destination, cursor_dimensions)
            self.previous_cursor_dest = current_cursor_destination

        return bool(self.particles)

    def _spawn(self, settings: CursorSettings, destination: Point, dims: Point) -> None:
        travel = destination - self.previous_cursor_dest
        travel_distance = travel.length()
        relative_distance = travel_distance / dims.y if dims.y else math.inf

        raw_count = relative_distance**1.5 * settings.vfx_particle_density * 0.01
        particle_count = int(raw_count) if math.isfinite(raw_count) and raw_count > 0 else 0

        prev_p = self.previous_cursor_dest
        for i in range(particle_count):
            t = i / particle_count

            if self.mode is VfxMode.RAILGUN:
                phase = t / math.pi * settings.vfx_particle_phase * relative_distance
                speed = Point(math.sin(phase), math.cos(phase)) * (
                    2.0 * settings.vfx_particle_speed
                )
            elif self.mode is VfxMode.TORPEDO:
                travel_dir = travel.normalized()
                particle_dir = (self.rng.rand_dir_normalized() - travel_dir * 1.5).normalized()
                speed = particle_dir * settings.vfx_particle_speed
            else:
                base_dir = self.rng.rand_dir_normalized()
                direction = Point(base_dir.x * 0.5, 0.4 + abs(base_dir.y))
                speed = direction * (3.0 * settings.vfx_particle_speed)

            if self.mode is VfxMode.RAILGUN:
                pos = prev_p + travel * t
            else:
                pos = prev_p + travel * self.rng.next_float() + Point(0.0, dims.y * 0.5)

            if self.mode is VfxMode.RAILGUN:
                rotation_speed = math.pi * settings.vfx_particle_curl
            else:
                rotation_speed = (
                    (self.rng.next_float() - 0.5) * (math.pi / 2.0) * settings.vfx_particle_curl
                )

            self.particles.append(
                Particle(pos, speed, rotation_speed, t * settings.vfx_particle_lifetime)
            )

    def restart(self, position: Point) -> None:
        """Trails do not react to a restart."""


CursorVfx = Union[PointHighlight, ParticleTrail]


def new_cursor_vfx(mode: VfxMode) -> Optional[CursorVfx]:
    """Create the effect for ``mode``, or ``None`` when effects are disabled."""
    if mode.is_highlight():
        return PointHighlight(mode)
    if mode.is_trail():
        return ParticleTrail(mode)
    return None