"""
swingpen - Export code swings to an online pen viewer

Turns a swing directory (markup, script, stylesheet, library manifest)
into a hosted pen definition.
"""

__version__ = "1.0.0"

from .exporter import SwingExporter, swing_export
from .libraries import LibraryIndex, libraries_resolve
from .manifest import ManifestParseError
from .publisher import PenUploadError
from .swing import SwingDirectory, SwingError
from .log import LOG, state_connectToLogger

__all__ = [
    "SwingExporter",
    "swing_export",
    "LibraryIndex",
    "libraries_resolve",
    "ManifestParseError",
    "PenUploadError",
    "SwingDirectory",
    "SwingError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
