"""
Point arithmetic over short Weierstrass curves y^2 = x^3 + b

Both WTLS curves have a = 0. Points are carried in Jacobian coordinates
internally so that a whole scalar multiplication costs a single modular
inversion, done when the result is lowered back to affine coordinates.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

# (None, None) is the point at infinity
AffinePoint = Tuple[Optional[int], Optional[int]]

INFINITY: AffinePoint = (None, None)


@dataclass(frozen=True)
class CurveParams:
    """Domain parameters of a curve y^2 = x^3 + B over the prime field P"""

    # Curve field prime (p)
    P: int

    # Order of the base point (n)
    N: int

    # Curve constant, the a coefficient is always 0
    B: int

    # Base point coordinates
    G_X: int
    G_Y: int

    # Bit length of P
    BIT_SIZE: int

    NAME: str = ""

    def __post_init__(self):
        for name in ("B", "G_X", "G_Y"):
            value = getattr(self, name)
            if not 0 <= value < self.P:
                raise ValueError(f"{name} must be reduced mod P")
        if not self.is_on_curve(self.G_X, self.G_Y):
            raise ValueError("Base point is not on the curve")

    @property
    def COORD_BYTES(self) -> int:
        """Length in bytes of an encoded field element"""
        return (self.BIT_SIZE + 7) >> 3

    def is_on_curve(self, x: Optional[int], y: Optional[int]) -> bool:
        """Check y^2 = x^3 + B (mod P). The point at infinity is not on the curve."""
        if x is None or y is None:
            return False
        left = (y * y) % self.P
        right = (x * x * x + self.B) % self.P
        return left == right


def _mod_inverse(a: int, m: int) -> Optional[int]:
    """
    Compute modular inverse of a mod m using the extended Euclidean algorithm.
    Returns None if the inverse doesn't exist.
    """
    old_r, r = a % m, m
    old_s, s = 1, 0
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
    if old_r != 1:
        return None
    return old_s % m


class JacobianPoint:
    """Curve point (x/z^2, y/z^3) in Jacobian coordinates"""

    def __init__(self, x: int, y: int, z: int, curve: CurveParams):
        self.x = x
        self.y = y
        self.z = z
        self.curve = curve

    @classmethod
    def from_affine(cls, x: Optional[int], y: Optional[int], curve: CurveParams) -> 'JacobianPoint':
        """Lift affine coordinates with z = 1. No on-curve check is done here."""
        if x is None or y is None:
            return cls.infinity(curve)
        return cls(x, y, 1, curve)

    @classmethod
    def infinity(cls, curve: CurveParams) -> 'JacobianPoint':
        return cls(1, 1, 0, curve)

    def is_infinity(self) -> bool:
        return self.z % self.curve.P == 0

    def double(self) -> 'JacobianPoint':
        """Point doubling in Jacobian coordinates for a = 0"""
        if self.is_infinity():
            return self

        # https://hyperelliptic.org/EFD/g1p/auto-shortw-jacobian-0.html#doubling-dbl-2009-l
        p = self.curve.P

        a = (self.x * self.x) % p
        b = (self.y * self.y) % p
        c = (b * b) % p
        d = 2 * ((self.x + b) * (self.x + b) - a - c) % p
        e = 3 * a
        f = (e * e) % p

        x3 = (f - 2 * d) % p
        y3 = (e * (d - x3) - 8 * c) % p
        # A point with y = 0 has order two, z3 vanishes and 2P is infinity
        z3 = (2 * self.y * self.z) % p

        return JacobianPoint(x3, y3, z3, self.curve)

    def add(self, other: 'JacobianPoint') -> 'JacobianPoint':
        """Point addition in Jacobian coordinates"""
        if self.is_infinity():
            return other
        if other.is_infinity():
            return self

        p = self.curve.P

        # https://hyperelliptic.org/EFD/g1p/auto-shortw-jacobian-0.html#addition-add-2007-bl
        z1z1 = (self.z * self.z) % p
        z2z2 = (other.z * other.z) % p
        u1 = (self.x * z2z2) % p
        u2 = (other.x * z1z1) % p
        s1 = (self.y * other.z * z2z2) % p
        s2 = (other.y * self.z * z1z1) % p

        # The formula breaks down for P + P and P + (-P)
        if u1 == u2:
            if s1 != s2:
                return JacobianPoint.infinity(self.curve)
            return self.double()

        h = (u2 - u1) % p
        i = (4 * h * h) % p
        j = (h * i) % p
        r = (2 * (s2 - s1)) % p
        v = (u1 * i) % p

        x3 = (r * r - j - 2 * v) % p
        y3 = (r * (v - x3) - 2 * s1 * j) % p
        z3 = ((self.z + other.z) * (self.z + other.z) - z1z1 - z2z2) % p
        z3 = (z3 * h) % p

        return JacobianPoint(x3, y3, z3, self.curve)

    def to_affine(self) -> AffinePoint:
        """Lower to affine coordinates, (None, None) for the point at infinity"""
        if self.is_infinity():
            return INFINITY

        p = self.curve.P
        z_inv = _mod_inverse(self.z, p)
        if z_inv is None:
            raise ValueError("Jacobian z coordinate is not invertible")

        z_inv_squared = (z_inv * z_inv) % p
        z_inv_cubed = (z_inv_squared * z_inv) % p

        return (self.x * z_inv_squared) % p, (self.y * z_inv_cubed) % p


def scalar_mult(point: JacobianPoint, k: bytes) -> JacobianPoint:
    """
    Left-to-right double-and-add of the big-endian unsigned scalar k.

    The accumulator stays empty until the first set bit, which seeds it with
    the base point directly instead of adding it to the identity. k is used as
    is and may be longer than the curve order. A zero scalar gives the point at
    infinity.
    """
    acc: Optional[JacobianPoint] = None

    for byte in k:
        for _ in range(8):
            if acc is not None:
                acc = acc.double()
            if byte & 0x80:
                if acc is None:
                    acc = point
                else:
                    acc = acc.add(point)
            byte = (byte << 1) & 0xff

    if acc is None:
        return JacobianPoint.infinity(point.curve)
    return acc
