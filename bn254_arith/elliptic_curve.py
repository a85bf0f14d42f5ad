from dataclasses import dataclass
from typing import Self

from .field import Fp

# y^2 = x^3 + B
B = Fp(3)

SCALAR_BITS = 128


# Jacobian coordinates: (X, Y, Z) is the affine point (X / Z^2, Y / Z^3), Z == 0 is the point at infinity.
# Coordinates are not validated, use is_on_curve for that.
@dataclass(frozen=True)
class G1Point:
    x: Fp
    y: Fp
    z: Fp

    @classmethod
    def infinity(cls) -> Self:
        return cls(Fp.zero(), Fp.one(), Fp.zero())

    def is_infinity(self) -> bool:
        return self.z.is_zero()

    # (0, 0) is returned for the infinity, it is not a solution of the curve equation
    def to_affine(self) -> tuple[Fp, Fp]:
        if self.is_infinity():
            return Fp.zero(), Fp.zero()

        z_inv = self.z.inverse()
        z_inv2 = z_inv * z_inv
        z_inv3 = z_inv2 * z_inv
        return self.x * z_inv2, self.y * z_inv3

    def is_on_curve(self) -> bool:
        if self.is_infinity():
            return True

        x, y = self.to_affine()
        return y * y == x * x * x + B

    # https://hyperelliptic.org/EFD/g1p/auto-shortw-jacobian-0.html#doubling-dbl-2009-l
    def double(self) -> 'G1Point':
        if self.is_infinity():
            return self

        xx = self.x * self.x
        yy = self.y * self.y
        yyyy = yy * yy
        t = (self.x + yy) * (self.x + yy) - xx - yyyy
        s = t + t  # 2*S
        m = xx + xx + xx  # 3*XX
        x3 = m * m - s - s
        # YYYY is subtracted four times here, not 8*YYYY as in dbl-2009-l
        y3 = m * (s - x3) - yyyy - yyyy - yyyy - yyyy
        yz = self.y * self.z
        z3 = yz + yz  # 2*Y1*Z1
        return G1Point(x3, y3, z3)

    # https://hyperelliptic.org/EFD/g1p/auto-shortw-jacobian-0.html#addition-add-2007-bl
    def add(self, other: 'G1Point') -> 'G1Point':
        if self.is_infinity():
            return other
        if other.is_infinity():
            return self

        z1z1 = self.z * self.z
        z2z2 = other.z * other.z
        u1 = self.x * z2z2
        u2 = other.x * z1z1
        s1 = self.y * z2z2 * other.z
        s2 = other.y * z1z1 * self.z

        # same affine x: either the same point or its negation
        if u1 == u2:
            if s1 == s2:
                return self.double()
            return G1Point.infinity()

        h = u2 - u1
        i = (h + h) * (h + h)
        j = h * i
        r = (s2 - s1) + (s2 - s1)
        v = u1 * i

        x3 = r * r - j - v - v
        y3 = r * (v - x3) - s1 * j - s1 * j
        z3 = ((self.z + other.z) * (self.z + other.z) - z1z1 - z2z2) * h
        return G1Point(x3, y3, z3)

    # https://en.wikipedia.org/wiki/Elliptic_curve_point_multiplication#Double-and-add
    # Not constant time
    def multiply(self, scalar: int) -> 'G1Point':
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            msg = f'Expected int scalar, but got: {type(scalar)}'
            raise TypeError(msg)
        if not 0 <= scalar < 1 << SCALAR_BITS:
            msg = f'Scalar should fit into {SCALAR_BITS} bits, but got: {scalar}'
            raise ValueError(msg)

        res = G1Point.infinity()
        base = self
        while scalar:
            if scalar & 1:
                res = res.add(base)

            base = base.double()
            scalar >>= 1
        return res

    def __add__(self, other: object) -> 'G1Point':
        if not isinstance(other, G1Point):
            return NotImplemented
        return self.add(other)

    def __mul__(self, scalar: int) -> 'G1Point':
        return self.multiply(scalar)

    def __rmul__(self, scalar: int) -> 'G1Point':
        return self.multiply(scalar)

    def __neg__(self) -> 'G1Point':
        if self.is_infinity():
            return self
        return G1Point(self.x, -self.y, self.z)
