"""
Tests for depth table decoding.
"""
import sys

import numpy as np
import pytest

from lfp_splitter.utilities import decode_depth, depth_to_array, depth_dtype, output_prefix

from conftest import pack_floats


def test_decode_depth_little_endian():
    assert decode_depth(pack_floats([1.0, 2.5, -3.25], "<")) == "1.000000\n2.500000\n-3.250000\n"


def test_decode_depth_big_endian():
    payload = pack_floats([1.0, 2.5, -3.25], ">")
    assert decode_depth(payload, byteorder="big") == "1.000000\n2.500000\n-3.250000\n"


def test_decode_depth_native_matches_host_order():
    host = "<" if sys.byteorder == "little" else ">"
    payload = pack_floats([0.5, 100.125], host)
    assert decode_depth(payload, byteorder="native") == "0.500000\n100.125000\n"


def test_decode_depth_empty():
    assert decode_depth(b"") == ""


def test_decode_depth_uses_float32_precision():
    """0.1 is stored as a float32 and printed from that value."""
    assert decode_depth(pack_floats([0.1])) == "0.100000\n"
    assert decode_depth(pack_floats([1e-7])) == "0.000000\n"
    assert decode_depth(pack_floats([123456.789])) == "123456.789062\n"


def test_decode_depth_ignores_partial_sample():
    payload = pack_floats([4.0, 8.0]) + b"\x01\x02"
    assert decode_depth(payload) == "4.000000\n8.000000\n"


def test_depth_to_array():
    arr = depth_to_array(pack_floats([1.0, 2.5, -3.25]))
    assert arr.dtype == np.float32
    np.testing.assert_array_equal(arr, np.array([1.0, 2.5, -3.25], dtype=np.float32))


def test_unsupported_byteorder():
    with pytest.raises(ValueError, match="Unsupported byte order"):
        depth_dtype("middle")


def test_output_prefix_strips_final_extension():
    assert output_prefix("shots/picture.lfp") == "shots/picture"
    assert output_prefix("shots/picture.raw.lfp") == "shots/picture.raw"
    assert output_prefix("picture") == "picture"


def test_output_prefix_with_output_dir(tmp_path):
    assert output_prefix("shots/picture.lfp", tmp_path) == str(tmp_path / "picture")
