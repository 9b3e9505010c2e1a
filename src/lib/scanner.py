"""
External resource scanner

Pulls resource URLs out of a swing's raw "scripts" and "styles" files,
which hold plain <script>/<link> tags, one library per tag.
"""

import re
from typing import List, Optional

SCRIPT_PATTERN = re.compile(r'<script src="(?P<url>[^"]+)"></script>', re.IGNORECASE)
STYLE_PATTERN = re.compile(r'<link href="(?P<url>[^"]+)" rel="stylesheet" />', re.IGNORECASE)


def urls_matchAll(text: Optional[str], pattern: re.Pattern[str]) -> List[str]:
    """
    Collect the 'url' group of every non-overlapping match, in document order

    Args:
        text: Raw file content (None when the file is absent)
        pattern: Compiled pattern with a named 'url' group

    Returns:
        URLs found, or an empty list
    """
    if not text:
        return []
    return [match.group("url") for match in pattern.finditer(text)]


def scriptUrls_scan(text: Optional[str]) -> List[str]:
    """URLs of every <script src="..."></script> tag"""
    return urls_matchAll(text, SCRIPT_PATTERN)


def styleUrls_scan(text: Optional[str]) -> List[str]:
    """URLs of every <link href="..." rel="stylesheet" /> tag"""
    return urls_matchAll(text, STYLE_PATTERN)
