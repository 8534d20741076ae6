"""
Generic elliptic curve interface

A Curve is a parameter set together with the operations callers expect from
any curve: on-curve test, addition, doubling, scalar multiplication and point
(de)compression. All inputs and results are affine, (None, None) standing for
the point at infinity.
"""

from typing import Optional, Tuple

from . import codec
from .ec import AffinePoint, CurveParams, JacobianPoint, scalar_mult
from .sqrt import sqrt_mod


class Curve(CurveParams):
    """A short Weierstrass curve y^2 = x^3 + B with a = 0"""

    def params(self) -> CurveParams:
        """Return the bare domain parameters of this curve"""
        return CurveParams(self.P, self.N, self.B, self.G_X, self.G_Y, self.BIT_SIZE, self.NAME)

    def add(self, x1: Optional[int], y1: Optional[int],
            x2: Optional[int], y2: Optional[int]) -> AffinePoint:
        """
        Return (x1, y1) + (x2, y2).

        The points are trusted to be on the curve, this is not checked.
        """
        p1 = JacobianPoint.from_affine(x1, y1, self)
        p2 = JacobianPoint.from_affine(x2, y2, self)
        return p1.add(p2).to_affine()

    def double(self, x1: Optional[int], y1: Optional[int]) -> AffinePoint:
        """Return 2 * (x1, y1)"""
        return JacobianPoint.from_affine(x1, y1, self).double().to_affine()

    def scalar_mult(self, x: Optional[int], y: Optional[int], k: bytes) -> AffinePoint:
        """Return k * (x, y) with k a big-endian unsigned integer"""
        return scalar_mult(JacobianPoint.from_affine(x, y, self), k).to_affine()

    def scalar_base_mult(self, k: bytes) -> AffinePoint:
        """Return k * G"""
        return self.scalar_mult(self.G_X, self.G_Y, k)

    def sqrt(self, a: int) -> Optional[int]:
        """Square root mod P, None if a is not a quadratic residue"""
        return sqrt_mod(a, self.P)

    def compress_point(self, x: int, y: int) -> bytes:
        return codec.compress_point(self, x, y)

    def decompress_point(self, data: bytes) -> Tuple[int, int]:
        return codec.decompress_point(self, data)

    def marshal(self, x: int, y: int) -> bytes:
        return codec.marshal(self, x, y)

    def unmarshal(self, data: bytes) -> Optional[Tuple[int, int]]:
        return codec.unmarshal(self, data)
