"""Storage for generated PDF files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .exceptions import StorageError
from .utils.files import atomic_write_bytes

logger = logging.getLogger(__name__)


PDF_SUFFIX = ".pdf"


def pdf_filename(title: str) -> str:
    """
    File name for the PDF export of a note.

    Args:
        title: Note title (the note's base name)

    Returns:
        ``"<title>.pdf"``

    Raises:
        StorageError: If the title is empty or contains a path separator
            or a null byte
    """
    if not title or not title.strip():
        raise StorageError("Cannot derive a file name from an empty title")
    if "/" in title or "\\" in title or "\x00" in title or title in (".", ".."):
        raise StorageError("Title cannot be used as a file name", title)
    return f"{title}{PDF_SUFFIX}"


class VaultStorage:
    """Directory that receives generated files."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        return self.root / name

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    def create_binary(self, name: str, data: bytes, overwrite: bool = False) -> Path:
        """
        Store ``data`` under ``name``.

        Args:
            name: File name inside the vault
            data: File content
            overwrite: Replace an existing file instead of failing

        Returns:
            Path of the written file

        Raises:
            StorageError: If the file exists (and ``overwrite`` is off) or
                cannot be written
        """
        target = self.path_for(name)
        if target.exists() and not overwrite:
            raise StorageError("File already exists", str(target))

        try:
            atomic_write_bytes(target, data)
        except OSError as exc:
            raise StorageError(f"Failed to write {target}", str(exc)) from exc

        logger.debug(f"Stored {len(data)} bytes as {target}")
        return target
