"""
WTLS elliptic curves

Domain parameters and point arithmetic for the two WAP/WTLS prime field
curves y^2 = x^3 + 3, a 112-bit one (WTLS curve 8) and a 160-bit one
(WTLS curve 9), used by the legacy Wireless Transport Layer Security handshake.

Example::

    from wtls_curves import p112

    curve = p112()
    x, y = curve.scalar_base_mult(b"\\x2a")
    compressed = curve.compress_point(x, y)
    assert curve.decompress_point(compressed) == (x, y)
"""

from .ec import (
    AffinePoint,
    CurveParams,
    INFINITY
)

from .curve import Curve

from .codec import (
    PointEncodingError,
    compress_point,
    decompress_point,
    marshal,
    unmarshal
)

from .sqrt import (
    legendre_symbol,
    sqrt_mod
)

from .wtls8 import p112
from .wtls9 import p160

from .ecdh import (
    generate_key,
    shared_secret
)

__version__ = "0.1.0"

__all__ = [
    # Curves
    "Curve",
    "CurveParams",
    "AffinePoint",
    "INFINITY",
    "p112",
    "p160",

    # Point encodings
    "PointEncodingError",
    "compress_point",
    "decompress_point",
    "marshal",
    "unmarshal",

    # Modular square roots
    "legendre_symbol",
    "sqrt_mod",

    # Key agreement
    "generate_key",
    "shared_secret",
]
