"""
Byte layout of light-field picture containers (.lfp) and the errors raised
when a buffer does not follow it.

File: 8-byte signature, then the rest of a 16-byte header (skipped). Each
section: 4-byte type tag and 8 reserved bytes, big-endian payload length,
45-byte hash slot, 35 blank bytes, payload. Sections may be preceded by NULs.
"""


class LFPFormatError(ValueError):
    """Raised when a buffer is not a container this package can split."""


class TruncatedSectionError(LFPFormatError):
    """Raised in strict mode when parsing stopped before the end of the buffer."""

    def __init__(self, message: str, container=None, unconsumed: int = 0):
        self.container = container
        self.unconsumed = unconsumed
        super().__init__(message)


class InsufficientSectionsError(LFPFormatError):
    """Raised when a container holds fewer sections than metadata + depth + one image."""

    def __init__(self, message: str, count: int = 0):
        self.count = count
        super().__init__(message)


LFP_SIGNATURE = b"\x89LFP\r\n\x1a\n"

TYPE_LENGTH = 4
# Type tag plus reserved bytes up to the length field
MAGIC_LENGTH = 12
LENGTH_FIELD = 4
SHA1_LENGTH = 45
BLANK_LENGTH = 35

FILE_HEADER_LENGTH = MAGIC_LENGTH + LENGTH_FIELD
SECTION_HEADER_LENGTH = MAGIC_LENGTH + LENGTH_FIELD + SHA1_LENGTH + BLANK_LENGTH

METADATA_INDEX = 0
DEPTH_INDEX = 1
FIRST_IMAGE_INDEX = 2
MIN_SECTIONS = FIRST_IMAGE_INDEX + 1
