"""
Pen export data models

Type-safe structures for the swing being exported and the pen definition
that is uploaded for the viewer.
"""

import json
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class PenDefinition:
    """
    Payload describing a code sandbox for the external pen viewer

    Optional fields left as None are dropped on serialization, so a swing
    with only a markup file yields no js/css keys at all.

    Attributes:
        title: Swing directory name
        description: Same as title
        html: Markup file content
        html_pre_processor: "pug" or "none"
        css: Stylesheet file content
        css_pre_processor: "scss", "sass", "less" or "none"
        js: Script file content
        js_pre_processor: "babel", "typescript" or "none"
        css_external: ';'-joined stylesheet URLs
        js_external: ';'-joined script URLs
        tags: Fixed single-element tag list

    Example:
        PenDefinition(title="demo", description="demo", tags=["codeswing"],
                      html="<h1>hi</h1>", html_pre_processor="none")
    """
    title: str
    description: str
    tags: List[str] = field(default_factory=list)
    html: Optional[str] = None
    html_pre_processor: Optional[str] = None
    css: Optional[str] = None
    css_pre_processor: Optional[str] = None
    js: Optional[str] = None
    js_pre_processor: Optional[str] = None
    css_external: Optional[str] = None
    js_external: Optional[str] = None

    def dict_get(self) -> Dict[str, Any]:
        """Return the definition as a dict without unset fields"""
        return {k: v for k, v in asdict(self).items() if v is not None}

    def json_serialize(self) -> str:
        """Serialize to the JSON document uploaded to the paste host"""
        return json.dumps(self.dict_get())


@dataclass
class Manifest:
    """
    Library dependencies declared in a swing's manifest file

    Attributes:
        scripts: Library names or URLs to load as scripts
        styles: Library names or URLs to load as stylesheets
    """
    scripts: List[str] = field(default_factory=list)
    styles: List[str] = field(default_factory=list)

    @classmethod
    def manifest_createFromDict(cls, data: Any) -> "Manifest":
        """
        Build a Manifest from parsed JSON

        Missing keys or non-list values are treated as empty lists.
        """
        if not isinstance(data, dict):
            return cls()

        def names_get(key: str) -> List[str]:
            value = data.get(key)
            if not isinstance(value, list):
                return []
            return [str(item) for item in value]

        return cls(scripts=names_get("scripts"), styles=names_get("styles"))


@dataclass
class LibraryEntry:
    """
    One library from the CDNJS index

    Attributes:
        name: Library name (e.g., "react")
        latest: URL of the latest hosted build
    """
    name: str
    latest: str


@dataclass
class SwingFiles:
    """
    Result of classifying a swing directory listing

    Attributes:
        directory: Swing root directory
        files: Names of the files found in the directory
        markup: Path to the markup file, if any
        script: Path to the script file, if any
        stylesheet: Path to the stylesheet file, if any
    """
    directory: Path
    files: List[str]
    markup: Optional[Path] = None
    script: Optional[Path] = None
    stylesheet: Optional[Path] = None

    def has(self, name: str) -> bool:
        """Check if a file with this exact name is in the swing"""
        return name in self.files


@dataclass
class ExportResult:
    """
    Outcome of a successful export

    Attributes:
        pen: Definition that was uploaded
        link: Reference returned by the paste host
        url: Viewer URL embedding the link
    """
    pen: PenDefinition
    link: str
    url: str
