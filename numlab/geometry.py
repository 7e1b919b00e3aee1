"""Points in space, vector fields and point-like particles with mass and charge."""

from __future__ import annotations

import math
from dataclasses import dataclass

VACUUM_PERMITTIVITY = 8.854e-12
GRAVITATIONAL_CONSTANT = 6.6725e-11


@dataclass
class Position:
    """A point in three-dimensional Cartesian space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def r(self) -> float:
        """Distance from the origin (spherical radius)."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def phi(self) -> float:
        """Azimuthal angle in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def theta(self) -> float:
        """Polar angle measured from the z axis."""
        return math.acos(self.z / self.r())

    def rho(self) -> float:
        """Distance from the z axis (cylindrical radius)."""
        return math.sqrt(self.x**2 + self.y**2)

    def distance(self, other: Position) -> float:
        """Euclidean distance to another position."""
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )


@dataclass
class VectorField(Position):
    """A vector (fx, fy, fz) applied at the position (x, y, z)."""

    fx: float = 0.0
    fy: float = 0.0
    fz: float = 0.0

    @classmethod
    def at(
        cls, p: Position, fx: float = 0.0, fy: float = 0.0, fz: float = 0.0
    ) -> VectorField:
        """Build a vector applied at the given position."""
        return cls(p.x, p.y, p.z, fx, fy, fz)

    def magnitude(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.fx**2 + self.fy**2 + self.fz**2)

    def __add__(self, other: VectorField) -> VectorField:
        if not isinstance(other, VectorField):
            return NotImplemented
        return VectorField(
            self.x,
            self.y,
            self.z,
            self.fx + other.fx,
            self.fy + other.fy,
            self.fz + other.fz,
        )

    def __iadd__(self, other: VectorField) -> VectorField:
        if not isinstance(other, VectorField):
            return NotImplemented
        self.fx += other.fx
        self.fy += other.fy
        self.fz += other.fz
        return self


@dataclass
class Particle:
    """A particle with a mass and an electric charge."""

    mass: float = 0.0
    charge: float = 0.0

    def describe(self) -> str:
        """One-line description of the particle."""
        return f"Particella: massa=  {self.mass:g} q= {self.charge:g}"


@dataclass(init=False)
class MaterialPoint(Particle, Position):
    """A particle located at a point, source of electric and gravitational fields."""

    def __init__(
        self,
        mass: float,
        charge: float,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
    ) -> None:
        self.mass = mass
        self.charge = charge
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def at(cls, mass: float, charge: float, p: Position) -> MaterialPoint:
        """Build a material point located at ``p``."""
        return cls(mass, charge, p.x, p.y, p.z)

    def _offset(self, p: Position) -> tuple[float, float, float, float]:
        dx = p.x - self.x
        dy = p.y - self.y
        dz = p.z - self.z
        r = math.sqrt(dx**2 + dy**2 + dz**2)
        if r == 0:
            raise ValueError("the observation point coincides with the material point")
        return dx, dy, dz, r

    def electric_field(self, p: Position) -> VectorField:
        """Coulomb field of the charge, evaluated at ``p``."""
        dx, dy, dz, r = self._offset(p)
        k = self.charge / (4 * math.pi * VACUUM_PERMITTIVITY * r**3)
        return VectorField.at(p, k * dx, k * dy, k * dz)

    def gravitational_field(self, p: Position) -> VectorField:
        """Field G*m*d/r**3 of the mass, evaluated at ``p``."""
        dx, dy, dz, r = self._offset(p)
        k = GRAVITATIONAL_CONSTANT * self.mass / r**3
        return VectorField.at(p, k * dx, k * dy, k * dz)