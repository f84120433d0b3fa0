"""Depth table decoding, file loading and output naming helpers."""

import logging
import os
import sys

import numpy as np

log = logging.getLogger(__name__)

BYTEORDERS = ("little", "big", "native")

# Bytes per depth sample (IEEE-754 single precision)
DEPTH_SAMPLE_SIZE = 4


def load_file(file_path) -> bytes:
    """Read the whole file into memory."""
    with open(file_path, "rb") as f:
        return f.read()


def depth_dtype(byteorder: str = "little") -> np.dtype:
    """float32 dtype for 'little', 'big' or 'native' (host) byte order."""
    if byteorder == "native":
        byteorder = sys.byteorder
    if byteorder == "little":
        return np.dtype("<f4")
    if byteorder == "big":
        return np.dtype(">f4")
    raise ValueError(f"Unsupported byte order: {byteorder}. Supported: {', '.join(BYTEORDERS)}")


def depth_to_array(payload: bytes, byteorder: str = "little") -> np.ndarray:
    """Depth samples as float32; a trailing partial sample is dropped."""
    dtype = depth_dtype(byteorder)
    extra = len(payload) % DEPTH_SAMPLE_SIZE
    if extra:
        log.warning(
            "Depth table length %d is not a multiple of %d; ignoring last %d bytes",
            len(payload), DEPTH_SAMPLE_SIZE, extra,
        )
    n = len(payload) // DEPTH_SAMPLE_SIZE
    return np.frombuffer(payload, dtype=dtype, count=n)


def decode_depth(payload: bytes, byteorder: str = "little") -> str:
    """Render depth samples as '%f' text, one per line, each ending in a newline."""
    samples = depth_to_array(payload, byteorder)
    # tolist() widens to Python floats, matching C's float -> double promotion for %f
    return "".join("%f\n" % v for v in samples.tolist())


def output_prefix(file_path, output_dir=None) -> str:
    """Input path without its final extension, optionally moved into output_dir."""
    file_path = os.fspath(file_path)
    if output_dir is not None:
        stem = os.path.splitext(os.path.basename(file_path))[0]
        return os.path.join(os.fspath(output_dir), stem)
    return os.path.splitext(file_path)[0]
