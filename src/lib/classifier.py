"""
Swing file classification and preprocessor hints

Picks the markup, script and stylesheet files out of a swing listing and
maps their extensions to the preprocessor tags the pen viewer understands.
"""

from pathlib import Path
from typing import List, Optional, Sequence

from ..models import FileTypeRegistry, SwingFileType, SwingFiles


# Extension -> preprocessor tag; anything else is "none"
MARKUP_PREPROCESSORS = {
    ".pug": "pug",
}

SCRIPT_PREPROCESSORS = {
    ".babel": "babel",
    ".jsx": "babel",
    ".ts": "typescript",
    ".tsx": "typescript",
}

STYLESHEET_PREPROCESSORS = {
    ".scss": "scss",
    ".sass": "sass",
    ".less": "less",
}

# Script library whose presence implies JSX
REACT_LIBRARY = "react"

_registry = FileTypeRegistry()


def swingFile_find(
    files: Sequence[str],
    file_type: SwingFileType,
    registry: Optional[FileTypeRegistry] = None,
) -> Optional[str]:
    """
    Find the file playing a given role in a listing

    Args:
        files: Bare file names, in listing order
        file_type: Role to look for
        registry: Naming rules (defaults to the built-in rules)

    Returns:
        First matching file name, or None
    """
    spec = (registry or _registry).get(file_type)
    if spec is None:
        return None

    for file_name in files:
        if spec.matches(file_name):
            return file_name
    return None


def swingFiles_classify(
    directory: Path,
    files: List[str],
    registry: Optional[FileTypeRegistry] = None,
) -> SwingFiles:
    """
    Classify a swing listing into markup, script and stylesheet files

    Args:
        directory: Swing root
        files: Bare file names found in the swing

    Returns:
        SwingFiles with a path for every role that was found
    """
    def path_get(file_type: SwingFileType) -> Optional[Path]:
        name = swingFile_find(files, file_type, registry)
        return directory / name if name else None

    return SwingFiles(
        directory=directory,
        files=list(files),
        markup=path_get(SwingFileType.MARKUP),
        script=path_get(SwingFileType.SCRIPT),
        stylesheet=path_get(SwingFileType.STYLESHEET),
    )


def markupPreprocessor_resolve(path: Path) -> str:
    return MARKUP_PREPROCESSORS.get(path.suffix, "none")


def scriptPreprocessor_resolve(path: Path) -> str:
    return SCRIPT_PREPROCESSORS.get(path.suffix, "none")


def stylesheetPreprocessor_resolve(path: Path) -> str:
    return STYLESHEET_PREPROCESSORS.get(path.suffix, "none")


def scriptPreprocessor_upgrade(current: Optional[str], manifest_scripts: Sequence[str]) -> Optional[str]:
    """
    Apply the React-implies-babel rule

    Args:
        current: Script preprocessor derived from the extension (None if no script)
        manifest_scripts: Script libraries declared in the manifest

    Returns:
        "babel" when react is declared and the script had no preprocessor,
        otherwise current unchanged
    """
    if current == "none" and REACT_LIBRARY in manifest_scripts:
        return "babel"
    return current
