"""
WTLS curve 8 (wap-wsg-idm-ecid-wtls8), the 112-bit curve
"""

import threading
from typing import Optional

from .curve import Curve

# Curve field prime (p)
P = 0xfffffffffffffffffffffffffde7

# Order of the base point (n)
N = 0x0100000000000001ecea551ad837e9

# Curve parameters for y^2 = x^3 + b
B = 0x03

# Generator point coordinates
G_X = 0x01
G_Y = 0x02

BIT_SIZE = 112

_P112: Optional[Curve] = None
_P112_LOCK = threading.Lock()


def p112() -> Curve:
    """
    Return the shared 112-bit WTLS curve.

    The curve is built on first use. Concurrent first calls construct it only
    once and every caller gets the same instance.
    """
    global _P112

    if _P112 is not None:
        return _P112

    with _P112_LOCK:
        if _P112 is None:
            _P112 = Curve(P, N, B, G_X, G_Y, BIT_SIZE, "wtls8-p112")

    return _P112
