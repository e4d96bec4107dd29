# core/matrix.py
import math
from typing import Sequence
from sphere_tracer.core.vector import Vector3

class Matrix3:
    """
    A 3x3 matrix stored as three row vectors.

    Products follow the row-vector convention: ``v * M`` treats ``v`` as a
    row. Both products transpose the right-hand matrix first so that every
    entry becomes a row-by-row dot product.
    """
    __slots__ = ("rows",)

    def __init__(self, rows: Sequence[Vector3]):
        if len(rows) != 3:
            raise ValueError(f"Matrix3 needs exactly 3 rows, got {len(rows)}")
        self.rows = tuple(rows)

    @classmethod
    def from_values(cls, *values: float) -> "Matrix3":
        """Builds a matrix from nine values in row-major order."""
        if len(values) != 9:
            raise ValueError(f"Matrix3 needs exactly 9 values, got {len(values)}")
        return cls([Vector3(*values[i:i + 3]) for i in range(0, 9, 3)])

    @classmethod
    def identity(cls) -> "Matrix3":
        return cls.from_values(1, 0, 0,
                               0, 1, 0,
                               0, 0, 1)

    @classmethod
    def rotation_x(cls, angle: float) -> "Matrix3":
        c, s = math.cos(angle), math.sin(angle)
        return cls.from_values(1, 0, 0,
                               0, c, s,
                               0, -s, c)

    @classmethod
    def rotation_y(cls, angle: float) -> "Matrix3":
        c, s = math.cos(angle), math.sin(angle)
        return cls.from_values(c, 0, s,
                               0, 1, 0,
                               -s, 0, c)

    def transpose(self) -> "Matrix3":
        r0, r1, r2 = self.rows
        return Matrix3([
            Vector3(r0.x, r1.x, r2.x),
            Vector3(r0.y, r1.y, r2.y),
            Vector3(r0.z, r1.z, r2.z)
        ])

    def __mul__(self, other: "Matrix3") -> "Matrix3":
        if not isinstance(other, Matrix3):
            return NotImplemented
        columns = other.transpose().rows
        return Matrix3([
            Vector3(*(row.dot(col) for col in columns)) for row in self.rows
        ])

    def __rmul__(self, vector: Vector3) -> Vector3:
        if not isinstance(vector, Vector3):
            return NotImplemented
        columns = self.transpose().rows
        return Vector3(*(vector.dot(col) for col in columns))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self.rows == other.rows

    def __hash__(self) -> int:
        return hash(self.rows)

    def isclose(self, other: "Matrix3", abs_tol: float = 1e-9) -> bool:
        return all(a.isclose(b, abs_tol) for a, b in zip(self.rows, other.rows))

    def __repr__(self) -> str:
        return f"Matrix3({list(self.rows)})"
