"""
Test cases for compressed and uncompressed point encodings
"""

import os
import random
import sys

import pytest

# Add the source directory to path to import the wtls_curves package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from wtls_curves import (
    PointEncodingError, compress_point, decompress_point, marshal, unmarshal,
    legendre_symbol, p112, p160
)

CURVES = [p112, p160]


def random_point(curve, rng: random.Random):
    k = rng.randint(1, curve.N - 1)
    return curve.scalar_base_mult(k.to_bytes((k.bit_length() + 7) // 8, byteorder='big'))


def x_without_point(curve) -> int:
    """Smallest x for which x^3 + B is a non-residue"""
    x = 1
    while legendre_symbol((x * x * x + curve.B) % curve.P, curve.P) != -1:
        x += 1
    return x


def test_compress_base_point_p112():
    curve = p112()
    assert curve.compress_point(1, 2) == bytes([0x02, 0x01])
    assert compress_point(curve, 1, curve.P - 2) == bytes([0x03, 0x01])


def test_decompress_base_point_p112():
    curve = p112()
    assert curve.decompress_point(bytes([0x02, 0x01])) == (1, 2)
    assert curve.decompress_point(bytes([0x03, 0x01])) == (1, curve.P - 2)


def test_decompress_fixed_width():
    curve = p112()
    data = bytes([0x02]) + (1).to_bytes(curve.COORD_BYTES, byteorder='big')
    assert len(data) == 15
    assert decompress_point(curve, data) == (1, 2)


@pytest.mark.parametrize("make_curve", CURVES)
def test_compress_round_trip(make_curve):
    curve = make_curve()
    rng = random.Random(42)
    for _ in range(25):
        x, y = random_point(curve, rng)
        data = curve.compress_point(x, y)
        assert data[0] == (0x03 if y & 1 else 0x02)
        assert len(data) <= 1 + curve.COORD_BYTES
        assert curve.decompress_point(data) == (x, y)


@pytest.mark.parametrize("make_curve", CURVES)
def test_decompress_invalid_header(make_curve):
    curve = make_curve()
    for header in (0x00, 0x01, 0x05, 0x06, 0xff):
        with pytest.raises(PointEncodingError) as exc_info:
            curve.decompress_point(bytes([header, 0x01]))
        assert exc_info.value.error_type == PointEncodingError.ErrorType.INVALID_HEADER


@pytest.mark.parametrize("make_curve", CURVES)
def test_decompress_length_mismatch(make_curve):
    curve = make_curve()
    too_long = bytes([0x02]) + b"\x00" * curve.COORD_BYTES + b"\x01"
    with pytest.raises(PointEncodingError) as exc_info:
        curve.decompress_point(too_long)
    assert exc_info.value.error_type == PointEncodingError.ErrorType.LENGTH_MISMATCH

    with pytest.raises(PointEncodingError) as exc_info:
        curve.decompress_point(b"")
    assert exc_info.value.error_type == PointEncodingError.ErrorType.LENGTH_MISMATCH

    # Uncompressed points must be exactly 1 + 2 * COORD_BYTES long
    g = curve.marshal(curve.G_X, curve.G_Y)
    with pytest.raises(PointEncodingError) as exc_info:
        curve.decompress_point(g[:-1])
    assert exc_info.value.error_type == PointEncodingError.ErrorType.LENGTH_MISMATCH


@pytest.mark.parametrize("make_curve", CURVES)
def test_decompress_not_on_curve(make_curve):
    curve = make_curve()
    x = x_without_point(curve)
    data = bytes([0x02]) + x.to_bytes(curve.COORD_BYTES, byteorder='big')
    with pytest.raises(PointEncodingError) as exc_info:
        curve.decompress_point(data)
    assert exc_info.value.error_type == PointEncodingError.ErrorType.NOT_ON_CURVE
    assert "not_on_curve" in str(exc_info.value)


@pytest.mark.parametrize("make_curve", CURVES)
def test_decompress_x_out_of_range(make_curve):
    curve = make_curve()
    data = bytes([0x03]) + b"\xff" * curve.COORD_BYTES
    with pytest.raises(PointEncodingError) as exc_info:
        curve.decompress_point(data)
    assert exc_info.value.error_type == PointEncodingError.ErrorType.NOT_ON_CURVE


@pytest.mark.parametrize("make_curve", CURVES)
def test_marshal_round_trip(make_curve):
    curve = make_curve()
    rng = random.Random(7)
    for _ in range(10):
        x, y = random_point(curve, rng)
        data = marshal(curve, x, y)
        assert len(data) == 1 + 2 * curve.COORD_BYTES
        assert data[0] == 0x04
        assert unmarshal(curve, data) == (x, y)
        # The uncompressed form is also accepted by decompress_point
        assert curve.decompress_point(data) == (x, y)


def test_marshal_base_point_p112():
    curve = p112()
    expected = bytes([0x04]) + b"\x00" * 13 + b"\x01" + b"\x00" * 13 + b"\x02"
    assert curve.marshal(1, 2) == expected


@pytest.mark.parametrize("make_curve", CURVES)
def test_unmarshal_rejects(make_curve):
    curve = make_curve()
    n = curve.COORD_BYTES
    good = curve.marshal(curve.G_X, curve.G_Y)
    assert curve.unmarshal(good) == (curve.G_X, curve.G_Y)

    # Wrong header
    assert curve.unmarshal(b"\x05" + good[1:]) is None
    # Wrong length
    assert curve.unmarshal(good + b"\x00") is None
    assert curve.unmarshal(good[:-1]) is None
    # Off the curve
    off = bytes([0x04]) + (1).to_bytes(n, 'big') + (3).to_bytes(n, 'big')
    assert curve.unmarshal(off) is None
    # Coordinates not reduced mod P, (1, P + 2) satisfies the equation mod P
    unreduced = bytes([0x04]) + (1).to_bytes(n, 'big') + (curve.P + 2).to_bytes(n, 'big')
    assert curve.unmarshal(unreduced) is None

    with pytest.raises(PointEncodingError) as exc_info:
        curve.decompress_point(off)
    assert exc_info.value.error_type == PointEncodingError.ErrorType.NOT_ON_CURVE
