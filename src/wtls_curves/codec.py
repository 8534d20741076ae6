"""
Wire encodings of curve points

Compressed points are a header byte (0x02 for even y, 0x03 for odd y)
followed by the big-endian x coordinate. Uncompressed points are
0x04 || x || y with both coordinates padded to the field size.
"""

from enum import Enum
from typing import Optional, Tuple

from .ec import CurveParams
from .sqrt import sqrt_mod

HEADER_EVEN = 0x02
HEADER_ODD = 0x03
HEADER_UNCOMPRESSED = 0x04


class PointEncodingError(Exception):
    """An error when decoding a serialized curve point"""

    class ErrorType(Enum):
        """Types of point decoding errors"""
        INVALID_HEADER = "invalid_header"
        LENGTH_MISMATCH = "length_mismatch"
        NOT_ON_CURVE = "not_on_curve"

    def __init__(self, error_type: ErrorType, message: str = ""):
        self.error_type = error_type
        super().__init__(f"{error_type.value}: {message}" if message else error_type.value)


def _int_to_bytes(value: int) -> bytes:
    """Minimal big-endian encoding, empty for zero"""
    return value.to_bytes((value.bit_length() + 7) // 8, byteorder='big')


def compress_point(curve: CurveParams, x: int, y: int) -> bytes:
    """
    Compress an affine point to its header byte and x coordinate.

    x is written in its natural minimal length, which is shorter than the
    field size when x has leading zero bytes.
    """
    header = HEADER_ODD if y & 1 else HEADER_EVEN
    return bytes([header]) + _int_to_bytes(x)


def decompress_point(curve: CurveParams, data: bytes) -> Tuple[int, int]:
    """
    Recover an affine point from its compressed (or uncompressed) encoding.

    Raises PointEncodingError if the header is unknown, the length is wrong or
    no point with the encoded x coordinate exists.
    """
    if len(data) == 0:
        raise PointEncodingError(PointEncodingError.ErrorType.LENGTH_MISMATCH, "Empty point encoding")

    header = data[0]
    if header == HEADER_UNCOMPRESSED:
        if len(data) != 1 + 2 * curve.COORD_BYTES:
            raise PointEncodingError(
                PointEncodingError.ErrorType.LENGTH_MISMATCH,
                f"Uncompressed point must be {1 + 2 * curve.COORD_BYTES} bytes"
            )
        point = unmarshal(curve, data)
        if point is None:
            raise PointEncodingError(PointEncodingError.ErrorType.NOT_ON_CURVE)
        return point

    if header not in (HEADER_EVEN, HEADER_ODD):
        raise PointEncodingError(
            PointEncodingError.ErrorType.INVALID_HEADER, f"Unknown header byte 0x{header:02x}"
        )

    # compress_point emits x without padding, so shorter fields are accepted
    if len(data) > 1 + curve.COORD_BYTES:
        raise PointEncodingError(
            PointEncodingError.ErrorType.LENGTH_MISMATCH,
            f"Compressed point must be at most {1 + curve.COORD_BYTES} bytes"
        )

    x = int.from_bytes(data[1:], byteorder='big')
    if x >= curve.P:
        raise PointEncodingError(PointEncodingError.ErrorType.NOT_ON_CURVE, "x is not a field element")

    c = (x * x * x + curve.B) % curve.P
    y = sqrt_mod(c, curve.P)
    if y is None:
        raise PointEncodingError(PointEncodingError.ErrorType.NOT_ON_CURVE)

    if (y & 1) != (header & 1):
        y = (curve.P - y) % curve.P

    return x, y


def marshal(curve: CurveParams, x: int, y: int) -> bytes:
    """Encode an affine point in uncompressed form"""
    byte_len = curve.COORD_BYTES
    return (
        bytes([HEADER_UNCOMPRESSED])
        + x.to_bytes(byte_len, byteorder='big')
        + y.to_bytes(byte_len, byteorder='big')
    )


def unmarshal(curve: CurveParams, data: bytes) -> Optional[Tuple[int, int]]:
    """
    Decode an uncompressed point.

    Returns None if the encoding is malformed or the point is not on the curve.
    """
    byte_len = curve.COORD_BYTES
    if len(data) != 1 + 2 * byte_len:
        return None
    if data[0] != HEADER_UNCOMPRESSED:
        return None

    x = int.from_bytes(data[1:1 + byte_len], byteorder='big')
    y = int.from_bytes(data[1 + byte_len:], byteorder='big')
    if x >= curve.P or y >= curve.P:
        return None
    if not curve.is_on_curve(x, y):
        return None

    return x, y
