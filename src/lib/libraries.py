"""
Manifest library resolution against the CDNJS index

Library names declared in a manifest (e.g. "react") are swapped for the
URL of their latest CDNJS build. Entries that are already URLs pass
through untouched; names the index does not know become "".
"""

import asyncio
import re
from typing import Dict, List, Optional, Sequence

import httpx

from ..models import LibraryEntry
from .log import LOG

URI_PATTERN = re.compile(r"^(?:https?:)?//\S+", re.IGNORECASE)


def url_is(library: str) -> bool:
    """Check if a manifest entry is already a fully-qualified locator"""
    return bool(URI_PATTERN.match(library))


class LibraryIndex:
    """
    Lazily fetched CDNJS library index

    The index is downloaded on the first lookup and shared by every lookup
    made through the same instance, including concurrent ones.
    """

    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        """
        Args:
            client: HTTP client used for the index request
            url: CDNJS libraries endpoint
        """
        self.client = client
        self.url = url
        self._entries: Optional[Dict[str, LibraryEntry]] = None
        self._lock = asyncio.Lock()

    async def entries_fetch(self) -> Dict[str, LibraryEntry]:
        """
        Return the index keyed by library name, downloading it if needed

        Raises:
            httpx.HTTPError: If the index request fails
        """
        async with self._lock:
            if self._entries is None:
                LOG(f"Fetching library index from {self.url}", level=2)
                response = await self.client.get(self.url)
                response.raise_for_status()
                results = response.json().get("results", [])
                entries: Dict[str, LibraryEntry] = {}
                for item in results:
                    name = item.get("name")
                    # First entry wins on duplicate names
                    if name and name not in entries:
                        entries[name] = LibraryEntry(name=name, latest=item.get("latest") or "")
                self._entries = entries
                LOG(f"Library index holds {len(entries)} entries", level=2)
        return self._entries

    async def latest_get(self, name: str) -> Optional[str]:
        """Latest URL for an exact library name, or None if unknown"""
        entry = (await self.entries_fetch()).get(name)
        return entry.latest if entry else None


async def library_resolve(library: str, index: LibraryIndex) -> str:
    """
    Resolve one manifest entry

    Returns:
        The entry itself if it is a URL, the library's latest URL, or ""
        when the index has no library with that name
    """
    if url_is(library):
        return library

    latest = await index.latest_get(library)
    if latest is None:
        LOG(f"Library '{library}' not found in index", level=2)
        return ""

    LOG(f"Resolved {library} -> {latest}", level=2)
    return latest


async def libraries_resolve(libraries: Sequence[str], index: LibraryIndex) -> List[str]:
    """
    Resolve manifest entries concurrently

    Args:
        libraries: Library names or URLs
        index: Index used for name lookups

    Returns:
        Resolved URLs in the same order as the input
    """
    return list(await asyncio.gather(*(library_resolve(library, index) for library in libraries)))
