"""
Swing file type specification models

Defines the roles a file can play inside a swing and the naming rules
used to recognise them.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional


class SwingFileType(Enum):
    """
    Roles a file can play in a swing

    At most one file per role is picked when a swing is exported.
    """
    MARKUP = "markup"            # index.html, index.pug, index.md
    SCRIPT = "script"            # script.js, index.tsx, app.jsx
    STYLESHEET = "stylesheet"    # style.css, style.scss, index.less


@dataclass
class FileTypeSpec:
    """
    Naming rule for one swing file role

    A file matches when its name is one of the base names followed by one
    of the extensions (e.g. "script" + ".tsx").

    Attributes:
        file_type: Role this rule identifies
        base_names: Accepted file names without extension
        extensions: Accepted extensions, including the leading dot
    """
    file_type: SwingFileType
    base_names: List[str]
    extensions: List[str] = field(default_factory=list)

    def matches(self, file_name: str) -> bool:
        """
        Check if a file name satisfies this rule

        Args:
            file_name: Bare file name (no directory part)

        Returns:
            True if the name is <base><extension> for some accepted pair
        """
        for base in self.base_names:
            for extension in self.extensions:
                if file_name == f"{base}{extension}":
                    return True
        return False


class FileTypeRegistry:
    """
    Registry of naming rules for each swing file role
    """

    def __init__(self) -> None:
        self.specs: dict[SwingFileType, FileTypeSpec] = {}
        self.builtinTypes_register()

    def register(self, spec: FileTypeSpec) -> None:
        """Register (or replace) the rule for a role"""
        self.specs[spec.file_type] = spec

    def get(self, file_type: SwingFileType) -> Optional[FileTypeSpec]:
        return self.specs.get(file_type)

    def builtinTypes_register(self) -> None:
        self.register(FileTypeSpec(
            file_type=SwingFileType.MARKUP,
            base_names=["index"],
            extensions=[".html", ".markdown", ".md", ".pug"],
        ))
        self.register(FileTypeSpec(
            file_type=SwingFileType.SCRIPT,
            base_names=["script", "index", "app"],
            extensions=[".js", ".jsx", ".ts", ".tsx", ".babel", ".mjs"],
        ))
        self.register(FileTypeSpec(
            file_type=SwingFileType.STYLESHEET,
            base_names=["style", "index", "app"],
            extensions=[".css", ".scss", ".sass", ".less"],
        ))
