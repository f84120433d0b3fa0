"""Read .lfp containers and write their metadata, depth table and JPEGs to disk."""

import logging
from typing import Union, List, Tuple, Optional
from pathlib import Path

from .layout import InsufficientSectionsError, MIN_SECTIONS
from .models import Container
from .parsers import LFPParser
from .utilities import decode_depth, output_prefix

log = logging.getLogger(__name__)


def read_lfp(file_path: Union[str, Path], strict: bool = False) -> Container:
    """Read an .lfp file and return its sections as a Container."""
    parser = LFPParser(strict=strict)
    return parser.parse(str(file_path))


def save_data(data: Union[bytes, str], file_path: Union[str, Path]) -> bool:
    """Write ``data`` to ``file_path``; return False instead of raising on I/O errors."""
    if isinstance(data, str):
        data = data.encode("ascii")
    try:
        with open(file_path, "wb") as f:
            f.write(data)
    except OSError as e:
        log.error("Failed to save %s: %s", file_path, e)
        return False
    return True


def output_names(container: Container, prefix: str) -> List[str]:
    """File names write_outputs would use, in write order."""
    names = [f"{prefix}_metadata.txt", f"{prefix}_depth.txt"]
    names.extend(f"{prefix}_{n}.jpg" for n in range(len(container.images)))
    return names


def write_outputs(
    container: Container,
    prefix: str,
    byteorder: str = "little",
) -> List[Tuple[str, bool]]:
    """
    Write metadata, decoded depth table and images next to ``prefix``.

    Returns (file name, saved) for every file attempted; a failed write does
    not stop the remaining ones. Raises InsufficientSectionsError when the
    container holds no images.
    """
    if not container.has_images:
        raise InsufficientSectionsError(
            f"Expected at least {MIN_SECTIONS} sections, found {len(container)}",
            count=len(container),
        )
    names = output_names(container, prefix)
    payloads = [container.metadata.payload, decode_depth(container.depth.payload, byteorder)]
    payloads.extend(section.payload for section in container.images)

    results = []
    for name, payload in zip(names, payloads):
        ok = save_data(payload, name)
        if ok:
            log.info("Saved %s", name)
        results.append((name, ok))
    return results


class LFPReader:
    """Read and split .lfp light-field files."""

    def __init__(self, strict: bool = False, byteorder: str = "little"):
        self.parser = LFPParser(strict=strict)
        self.byteorder = byteorder

    def read_file(self, file_path: Union[str, Path]) -> Container:
        """Read one .lfp file and return its Container."""
        return self.parser.parse(str(file_path))

    def split_file(
        self,
        file_path: Union[str, Path],
        output_dir: Optional[Union[str, Path]] = None,
    ) -> List[Tuple[str, bool]]:
        """Read ``file_path`` and write its outputs; see write_outputs."""
        container = self.read_file(file_path)
        return write_outputs(container, output_prefix(file_path, output_dir), self.byteorder)
