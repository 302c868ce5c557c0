# grover2q/complex_num.py
import math
from dataclasses import dataclass
from numbers import Real
from typing import Union

import numpy as np

Scalar = Union["Complex", int, float]


@dataclass(frozen=True)
class Complex:
    """Immutable complex value. Every operation returns a new instance."""
    real: float = 0.0
    imag: float = 0.0

    @staticmethod
    def from_value(x) -> "Complex":
        if isinstance(x, Complex):
            return x
        if isinstance(x, (complex, np.complexfloating)):
            return Complex(float(x.real), float(x.imag))
        return Complex(float(x), 0.0)

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.real + other.real, self.imag + other.imag)

    def multiply(self, other: Scalar) -> "Complex":
        if isinstance(other, Real):
            return Complex(self.real * other, self.imag * other)
        return Complex(self.real * other.real - self.imag * other.imag,
                       self.real * other.imag + self.imag * other.real)

    def magnitude(self) -> float:
        return math.sqrt(self.real * self.real + self.imag * self.imag)

    def phase(self) -> float:
        return math.atan2(self.imag, self.real)

    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imag)

    def __add__(self, other):
        if isinstance(other, Real):
            other = Complex(float(other), 0.0)
        if not isinstance(other, Complex):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __mul__(self, other):
        if not isinstance(other, (Complex, Real)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __abs__(self) -> float:
        return self.magnitude()

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        if self.imag >= 0:
            return f"{self.real:.3f} + {self.imag:.3f}i"
        return f"{self.real:.3f} - {abs(self.imag):.3f}i"
