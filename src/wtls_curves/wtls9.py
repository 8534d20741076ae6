"""
WTLS curve 9 (wap-wsg-idm-ecid-wtls9), the 160-bit curve
"""

import threading
from typing import Optional

from .curve import Curve

# Curve field prime (p) = 2^160 - 229233
P = 0xfffffffffffffffffffffffffffffffffffc808f

# Order of the base point (n)
N = 0x0100000000000000000001cdc98ae0e2de574abf33

# Curve parameters for y^2 = x^3 + b
B = 0x03

# Generator point coordinates
G_X = 0x01
G_Y = 0x02

BIT_SIZE = 160

_P160: Optional[Curve] = None
_P160_LOCK = threading.Lock()


def p160() -> Curve:
    """Return the shared 160-bit WTLS curve, built once on first use"""
    global _P160

    if _P160 is not None:
        return _P160

    with _P160_LOCK:
        if _P160 is None:
            _P160 = Curve(P, N, B, G_X, G_Y, BIT_SIZE, "wtls9-p160")

    return _P160
