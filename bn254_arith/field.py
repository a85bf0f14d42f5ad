from dataclasses import dataclass
from typing import Self

MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617


class InversionOfZeroError(ZeroDivisionError):
    pass


@dataclass(frozen=True)
class Fp:
    n: int

    def __post_init__(self) -> None:
        object.__setattr__(self, 'n', self.n % MODULUS)

    @classmethod
    def from_integer(cls, n: int) -> Self:
        return cls(n)

    @classmethod
    def zero(cls) -> Self:
        return cls(0)

    @classmethod
    def one(cls) -> Self:
        return cls(1)

    def is_zero(self) -> bool:
        return self.n == 0

    def __add__(self, other: object) -> 'Fp':
        if not isinstance(other, Fp):
            return NotImplemented
        return Fp(self.n + other.n)

    def __sub__(self, other: object) -> 'Fp':
        if not isinstance(other, Fp):
            return NotImplemented

        # stay non-negative: lift the minuend by the modulus first
        if self.n >= other.n:
            return Fp(self.n - other.n)
        return Fp(self.n + MODULUS - other.n)

    def __mul__(self, other: object) -> 'Fp':
        if not isinstance(other, Fp):
            return NotImplemented
        return Fp(self.n * other.n)

    def __neg__(self) -> 'Fp':
        if self.is_zero():
            return Fp.zero()
        return Fp(MODULUS - self.n)

    # https://en.wikipedia.org/wiki/Extended_Euclidean_algorithm#Computing_multiplicative_inverses_in_modular_structures
    def inverse(self) -> 'Fp':
        if self.is_zero():
            msg = 'Inverse does not exist for zero'
            raise InversionOfZeroError(msg)

        a, m = self.n, MODULUS
        x0, x1 = 0, 1

        # MODULUS is prime, so gcd(a, MODULUS) == 1 and the loop ends with a == 1
        while a != 1:
            q = a // m
            a, m = m, a % m
            x0, x1 = x1 - q * x0, x0

        if x1 < 0:
            x1 += MODULUS
        return Fp(x1)

    def pow(self, exponent: int) -> 'Fp':
        if exponent < 0:
            msg = f'Exponent should be non-negative, but got: {exponent}'
            raise ValueError(msg)

        # square-and-multiply, pow(0, 0, p) == 1
        return Fp(pow(self.n, exponent, MODULUS))

    def __pow__(self, exponent: int) -> 'Fp':
        return self.pow(exponent)

    def __int__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f'Fp({self.n})'
