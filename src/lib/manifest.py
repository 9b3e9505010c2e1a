"""
Swing manifest parsing

The manifest (codeswing.json by default) is an optional JSON file that
declares script and stylesheet libraries by name or URL.
"""

import json
from typing import Optional

from ..models import Manifest
from .log import LOG


class ManifestParseError(ValueError):
    """Raised when a swing's manifest is not valid JSON"""

    MESSAGE = "The swing's manifest file appears to be invalid. Please check it and try again."

    def __init__(self, message: str = MESSAGE) -> None:
        super().__init__(message)


def manifest_parse(content: Optional[str]) -> Optional[Manifest]:
    """
    Parse manifest text

    Args:
        content: Raw manifest file content

    Returns:
        Parsed Manifest, or None when the content is empty

    Raises:
        ManifestParseError: If the content is not valid JSON
    """
    if not content:
        return None

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        LOG(f"Manifest JSON error: {e}", level=2)
        raise ManifestParseError() from e

    manifest = Manifest.manifest_createFromDict(data)
    LOG(
        f"Manifest declares {len(manifest.scripts)} scripts, {len(manifest.styles)} styles",
        level=2,
    )
    return manifest
