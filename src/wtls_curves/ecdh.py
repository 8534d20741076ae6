"""
Elliptic curve Diffie-Hellman over the WTLS curves
"""

import random
from typing import Optional, Tuple

from .curve import Curve


def generate_key(curve: Curve, rng: Optional[random.Random] = None) -> Tuple[bytes, int, int]:
    """
    Generate a key pair on the given curve.

    Args:
        curve: Curve to generate the key on
        rng: Source of randomness, defaults to random.SystemRandom

    Returns:
        (private scalar as big-endian bytes, public x, public y)
    """
    if rng is None:
        rng = random.SystemRandom()

    priv_len = (curve.N.bit_length() + 7) // 8
    k = rng.randint(1, curve.N - 1)
    priv = k.to_bytes(priv_len, byteorder='big')

    x, y = curve.scalar_base_mult(priv)
    return priv, x, y


def shared_secret(curve: Curve, priv: bytes, x: int, y: int) -> bytes:
    """
    Compute the shared secret between a private scalar and a peer's public point.

    Returns the x coordinate of priv * (x, y), padded to the field size.
    Raises ValueError if the peer point is not on the curve or the result is
    the point at infinity.
    """
    if not curve.is_on_curve(x, y):
        raise ValueError("Peer public key is not on the curve")

    sx, _ = curve.scalar_mult(x, y, priv)
    if sx is None:
        raise ValueError("Shared secret is the point at infinity")

    return sx.to_bytes(curve.COORD_BYTES, byteorder='big')
