"""
swingpen - Export code swings to an online pen viewer

Turns a swing directory (markup, script, stylesheet, library manifest)
into a hosted pen definition.
"""

__version__ = "1.0.0"

from .lib import SwingExporter, swing_export, libraries_resolve, ManifestParseError, LOG, state_connectToLogger

__all__ = [
    "SwingExporter",
    "swing_export",
    "libraries_resolve",
    "ManifestParseError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
