from .elliptic_curve import B, SCALAR_BITS, G1Point
from .field import MODULUS, Fp, InversionOfZeroError

__all__ = [
    'B',
    'MODULUS',
    'SCALAR_BITS',
    'Fp',
    'G1Point',
    'InversionOfZeroError',
]
