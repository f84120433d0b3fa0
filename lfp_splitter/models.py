"""
Data models for light-field picture containers.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .layout import METADATA_INDEX, DEPTH_INDEX, FIRST_IMAGE_INDEX, MIN_SECTIONS

STOP_EXHAUSTED = "exhausted"
STOP_TRUNCATED_HEADER = "truncated_header"
STOP_TRUNCATED_PAYLOAD = "truncated_payload"


@dataclass(frozen=True)
class Section:
    """One self-describing chunk of the container."""

    type_tag: bytes
    length: int
    hash_slot: bytes
    payload: bytes

    # File offset of the section header, after any padding
    offset: int = 0

    @property
    def sha1(self) -> str:
        """Hash slot as text (never verified)."""
        return self.hash_slot.rstrip(b"\x00").decode("ascii", errors="replace")

    @property
    def type_name(self) -> str:
        """Printable form of the type tag."""
        return self.type_tag.decode("latin-1").strip("\x00")


@dataclass(frozen=True)
class Container:
    """Sections of one container, in stream order."""

    sections: Tuple[Section, ...] = field(default_factory=tuple)

    # Bytes left unread when parsing stopped
    unconsumed: int = 0
    stop_reason: str = STOP_EXHAUSTED

    def __len__(self) -> int:
        return len(self.sections)

    def __iter__(self):
        return iter(self.sections)

    def __getitem__(self, index):
        return self.sections[index]

    @property
    def truncated(self) -> bool:
        return self.unconsumed > 0

    @property
    def has_images(self) -> bool:
        """True if there is at least one section after metadata and depth."""
        return len(self.sections) >= MIN_SECTIONS

    @property
    def metadata(self) -> Optional[Section]:
        if len(self.sections) > METADATA_INDEX:
            return self.sections[METADATA_INDEX]
        return None

    @property
    def depth(self) -> Optional[Section]:
        if len(self.sections) > DEPTH_INDEX:
            return self.sections[DEPTH_INDEX]
        return None

    @property
    def images(self) -> List[Section]:
        """JPEG sections; list index is the image number."""
        return list(self.sections[FIRST_IMAGE_INDEX:])

    def get_metadata_text(self, encoding: str = "utf-8") -> str:
        """Return the metadata section decoded as text."""
        if self.metadata is None:
            return ""
        return self.metadata.payload.decode(encoding, errors="replace")
