# -*- coding: utf-8 -*-
"""
Virtual File System

Resolves resource paths such as ``lang/en_US.ini`` against an ordered list of
mounted directories. Reads search every root in mount order; writes always go
to the first root.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

import langrepo_config as config
from langrepo_exceptions import FileOperationError, ResourceNotFoundError
from langrepo_logger import get_logger

logger = get_logger("core.vfs")

PathLike = Union[str, Path]


@dataclass(frozen=True)
class FileInfo:
    """What the VFS knows about a resource path."""
    exists: bool = False
    is_directory: bool = False
    size: int = 0
    full_path: Optional[Path] = None


class VFS:
    """
    Ordered set of mounted root directories.

    Usage:
        vfs = VFS([user_dir, bundled_dir])
        if vfs.get_file_info("lang/de_DE.ini").exists:
            data = vfs.read_bytes("lang/de_DE.ini")
    """

    def __init__(self, roots: Optional[Sequence[PathLike]] = None):
        self._roots: List[Path] = []
        for root in roots if roots is not None else [config.resource_path("")]:
            self.mount(root)

    @property
    def roots(self) -> List[Path]:
        return list(self._roots)

    def mount(self, root: PathLike) -> None:
        """Add a root directory to the end of the search order."""
        root = Path(root)
        if root in self._roots:
            return
        self._roots.append(root)
        logger.debug(f"Mounted VFS root: {root}")

    def _candidates(self, path: PathLike) -> List[Path]:
        path = Path(path)
        if path.is_absolute():
            return [path]
        return [root / path for root in self._roots]

    def get_file_info(self, path: PathLike) -> FileInfo:
        """Return info for the first root holding ``path``, or a non-existent FileInfo."""
        for candidate in self._candidates(path):
            try:
                if not candidate.exists():
                    continue
                is_dir = candidate.is_dir()
                size = 0 if is_dir else candidate.stat().st_size
            except OSError as e:
                logger.warning(f"Could not stat {candidate}: {e}")
                continue
            return FileInfo(exists=True, is_directory=is_dir, size=size, full_path=candidate)
        return FileInfo()

    def find_file(self, path: PathLike) -> Path:
        """
        Resolve ``path`` to the first regular file found across the roots.

        Raises:
            ResourceNotFoundError: No root holds a regular file at ``path``
        """
        for candidate in self._candidates(path):
            if candidate.is_file():
                return candidate
        raise ResourceNotFoundError(f"Resource not found in VFS: {path}", file_path=str(path))

    def read_bytes(self, path: PathLike) -> bytes:
        full_path = self.find_file(path)
        try:
            return full_path.read_bytes()
        except OSError as e:
            raise FileOperationError(f"Could not read resource: {e}", file_path=str(full_path), operation='read') from e

    def local_path(self, path: PathLike) -> Path:
        """Path under the writable (first) root where ``path`` should be saved."""
        path = Path(path)
        if path.is_absolute() or not self._roots:
            return path
        return self._roots[0] / path

    def __repr__(self) -> str:
        return f"VFS(roots={[str(r) for r in self._roots]})"
