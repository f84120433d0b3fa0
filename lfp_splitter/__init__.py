"""
lfp-splitter - Python library for splitting light-field picture files (.lfp)

An .lfp container holds a plaintext metadata section, a depth table of
32-bit floats and one or more JPEG images. This library finds those
sections and writes them out as separate files.

Main usage:
    import lfp_splitter

    # Load a light-field file
    container = lfp_splitter.read_lfp("picture.lfp")

    # Access the sections
    print(container.get_metadata_text())
    depth = lfp_splitter.depth_to_array(container.depth.payload)
    print(f"Depth samples: {depth.size}, images: {len(container.images)}")
"""

__version__ = "0.1.0"

from .layout import LFPFormatError, TruncatedSectionError, InsufficientSectionsError
from .models import Section, Container
from .parsers import is_valid_container, parse_sections, LFPParser
from .reader import read_lfp, write_outputs, LFPReader
from .utilities import decode_depth, depth_to_array

__all__ = [
    "read_lfp",  # Main entry point
    "write_outputs",
    "LFPReader",
    "LFPParser",
    "is_valid_container",
    "parse_sections",
    "decode_depth",
    "depth_to_array",
    "Section",
    "Container",
    "LFPFormatError",
    "TruncatedSectionError",
    "InsufficientSectionsError",
]
