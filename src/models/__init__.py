"""
Models package for swingpen

Contains data structures and type definitions for the export pipeline.
"""

from .state import ProgramState, pipeline
from .filetypes import SwingFileType, FileTypeSpec, FileTypeRegistry
from .pen import PenDefinition, Manifest, LibraryEntry, SwingFiles, ExportResult

__all__ = [
    "ProgramState",
    "pipeline",
    "SwingFileType",
    "FileTypeSpec",
    "FileTypeRegistry",
    "PenDefinition",
    "Manifest",
    "LibraryEntry",
    "SwingFiles",
    "ExportResult",
]
