"""Parse .lfp light-field containers (signature, padded sections with big-endian lengths)."""

import logging
import os
from struct import unpack
from typing import List, Optional

from .layout import (
    LFPFormatError,
    TruncatedSectionError,
    LFP_SIGNATURE,
    FILE_HEADER_LENGTH,
    SECTION_HEADER_LENGTH,
    TYPE_LENGTH,
    MAGIC_LENGTH,
    SHA1_LENGTH,
    BLANK_LENGTH,
)
from .models import (
    Section,
    Container,
    STOP_EXHAUSTED,
    STOP_TRUNCATED_HEADER,
    STOP_TRUNCATED_PAYLOAD,
)
from .utilities import load_file

log = logging.getLogger(__name__)


def is_valid_container(data: bytes) -> bool:
    """True if ``data`` is longer than the signature and starts with it."""
    n = len(LFP_SIGNATURE)
    return len(data) > n and bytes(data[:n]) == LFP_SIGNATURE


class ByteCursor:
    """Forward-only reader over a buffer; reads never go past the end."""

    def __init__(self, data: bytes, position: int = 0):
        self._data = memoryview(data)
        self._end = len(self._data)
        self.position = max(0, min(position, self._end))

    @property
    def remaining(self) -> int:
        return self._end - self.position

    def read(self, n: int) -> Optional[bytes]:
        """Return the next ``n`` bytes, or None (cursor unchanged) if fewer remain."""
        if n < 0 or n > self.remaining:
            return None
        chunk = self._data[self.position : self.position + n].tobytes()
        self.position += n
        return chunk

    def skip(self, n: int) -> bool:
        if n < 0 or n > self.remaining:
            return False
        self.position += n
        return True

    def read_uint32_be(self) -> Optional[int]:
        raw = self.read(4)
        if raw is None:
            return None
        return unpack(">I", raw)[0]

    def skip_padding(self) -> int:
        """Advance past a run of NUL bytes; return how many were skipped."""
        start = self.position
        while self.position < self._end and self._data[self.position] == 0:
            self.position += 1
        return self.position - start


class SectionReader:
    """Produce one Section per call from a cursor; records why it stopped."""

    def __init__(self, data: bytes, offset: int = 0):
        self.cursor = ByteCursor(data, offset)
        self.stop_reason: Optional[str] = None

    @property
    def remaining(self) -> int:
        return self.cursor.remaining

    def next_section(self) -> Optional[Section]:
        """Return the next Section, or None once the buffer is exhausted or truncated."""
        if self.stop_reason is not None:
            return None
        cursor = self.cursor
        cursor.skip_padding()

        if cursor.remaining == 0:
            self.stop_reason = STOP_EXHAUSTED
            return None
        # Header must be followed by at least one byte; the reads below cannot run short
        if cursor.remaining <= SECTION_HEADER_LENGTH:
            self.stop_reason = STOP_TRUNCATED_HEADER
            return None

        start = cursor.position
        magic = cursor.read(MAGIC_LENGTH)
        length = cursor.read_uint32_be()
        hash_slot = cursor.read(SHA1_LENGTH)
        cursor.skip(BLANK_LENGTH)

        payload = cursor.read(length)
        if payload is None:
            log.debug(
                "Section at offset %d declares %d bytes but only %d remain",
                start, length, cursor.remaining,
            )
            cursor.position = start
            self.stop_reason = STOP_TRUNCATED_PAYLOAD
            return None

        return Section(
            type_tag=magic[:TYPE_LENGTH],
            length=length,
            hash_slot=hash_slot,
            payload=payload,
            offset=start,
        )


def parse_sections(data: bytes, offset: int = FILE_HEADER_LENGTH) -> Container:
    """
    Split ``data`` into Sections, starting ``offset`` bytes in (default: just past
    the top-level header). Stops quietly at the end of the buffer or at the first
    truncated section; sections read before that are kept.
    """
    reader = SectionReader(data, offset)
    sections: List[Section] = []
    while True:
        section = reader.next_section()
        if section is None:
            break
        log.debug(
            "Section %d: type=%r length=%d offset=%d",
            len(sections), section.type_tag, section.length, section.offset,
        )
        sections.append(section)

    unconsumed = reader.remaining
    if unconsumed:
        log.warning(
            "Parsing stopped (%s) after %d sections with %d bytes unconsumed",
            reader.stop_reason, len(sections), unconsumed,
        )
    return Container(
        sections=tuple(sections),
        unconsumed=unconsumed,
        stop_reason=reader.stop_reason or STOP_EXHAUSTED,
    )


class LFPParser:
    """Load an .lfp file, check its signature and split it into sections."""

    def __init__(self, strict: bool = False):
        self.strict = strict

    def parse(self, file_path: str) -> Container:
        """Read the whole file and return its Container."""
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")
        data = load_file(file_path)
        try:
            return self.parse_bytes(data)
        except TruncatedSectionError:
            raise
        except LFPFormatError as e:
            raise LFPFormatError(f"File {file_path} does not look like an lfp: {e}") from e

    def parse_bytes(self, data: bytes) -> Container:
        if not is_valid_container(data):
            raise LFPFormatError("missing or mismatched file signature")
        if len(data) < FILE_HEADER_LENGTH:
            raise LFPFormatError(
                f"buffer of {len(data)} bytes is shorter than the {FILE_HEADER_LENGTH}-byte file header"
            )
        container = parse_sections(data)
        if self.strict and container.truncated:
            raise TruncatedSectionError(
                f"Parsing stopped ({container.stop_reason}) with "
                f"{container.unconsumed} bytes unconsumed",
                container=container,
                unconsumed=container.unconsumed,
            )
        return container
