"""
Builders for synthetic .lfp containers.
"""
import struct

import numpy as np
import pytest

SIGNATURE = b"\x89LFP\r\n\x1a\n"
FAKE_SHA1 = b"sha1-" + b"0123456789abcdef0123456789abcdef01234567"


def build_section(type_tag: bytes, payload: bytes, sha1: bytes = FAKE_SHA1, length=None) -> bytes:
    """Section bytes: 4-byte tag, 8 reserved, BE length, 45-byte hash slot, 35 blank, payload."""
    declared = len(payload) if length is None else length
    return (
        type_tag[:4].ljust(4, b"\x00")
        + b"\x00\x00\x00\x01\x00\x00\x00\x00"
        + struct.pack(">I", declared)
        + sha1[:45].ljust(45, b"\x00")
        + b"\x00" * 35
        + payload
    )


def build_container(*sections: bytes, padding: int = 0) -> bytes:
    """File signature, version and zero length, then sections separated by ``padding`` NULs."""
    header = SIGNATURE + b"\x00\x00\x00\x01" + b"\x00\x00\x00\x00"
    return header + b"".join(b"\x00" * padding + s for s in sections)


def pack_floats(values, byteorder: str = "<") -> bytes:
    return np.asarray(values, dtype=np.dtype(byteorder + "f4")).tobytes()


METADATA = b'{"picture": {"frameArray": []}}'
DEPTH_VALUES = [1.0, 2.5, -3.25]
JPEG_A = b"\xff\xd8\xff\xe0" + b"A" * 64 + b"\xff\xd9"
JPEG_B = b"\xff\xd8\xff\xe0" + b"B" * 32 + b"\xff\xd9"


@pytest.fixture
def sample_sections():
    return [
        (b"\x89LFM", METADATA),
        (b"\x89LFC", pack_floats(DEPTH_VALUES)),
        (b"\x89LFC", JPEG_A),
        (b"\x89LFC", JPEG_B),
    ]


@pytest.fixture
def sample_lfp_bytes(sample_sections):
    return build_container(*(build_section(t, p) for t, p in sample_sections), padding=3)


@pytest.fixture
def sample_lfp(tmp_path, sample_lfp_bytes):
    path = tmp_path / "picture.lfp"
    path.write_bytes(sample_lfp_bytes)
    return path
