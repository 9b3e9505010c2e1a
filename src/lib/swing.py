"""
Swing directory access

Thin async wrapper over the file system: lists the files of a swing and
reads them as text without blocking the event loop.
"""

import asyncio
from pathlib import Path
from typing import List, Union

from .log import LOG


class SwingError(Exception):
    """Raised when a swing directory cannot be read"""
    pass


class SwingDirectory:
    """
    A swing rooted at a directory on disk

    Only the top level of the directory is considered; nested folders
    are never part of a swing's markup/script/stylesheet set.
    """

    def __init__(self, root: Union[str, Path]) -> None:
        """
        Args:
            root: Swing directory

        Raises:
            SwingError: If root is not an existing directory
        """
        self.root = Path(root)
        if not self.root.is_dir():
            raise SwingError(f"Swing directory not found: {self.root}")

    @property
    def name(self) -> str:
        """Directory name, used as the pen title"""
        return self.root.resolve().name

    async def files_list(self) -> List[str]:
        """
        List file names at the top of the swing, sorted by name

        Returns:
            Bare file names (directories are skipped)
        """
        def listing_read() -> List[str]:
            return sorted(p.name for p in self.root.iterdir() if p.is_file())

        files = await asyncio.to_thread(listing_read)
        LOG(f"Swing {self.name} holds {len(files)} files", level=2)
        return files

    async def text_read(self, name: Union[str, Path]) -> str:
        """
        Read a swing file as UTF-8 text, replacing undecodable bytes

        Args:
            name: File name relative to the swing root, or an absolute path
        """
        path = self.root / name
        content = await asyncio.to_thread(path.read_text, encoding="utf-8", errors="replace")
        LOG(f"Read {len(content)} characters from {path.name}", level=3)
        return content
