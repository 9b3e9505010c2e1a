"""
Swing to pen exporter

Assembles a pen definition from a swing directory, uploads it to the
paste host and builds the viewer URL for it.
"""

from pathlib import Path
from typing import Awaitable, Callable, List, Optional, Union

import httpx

from ..config import AppSettings, appsettings
from ..models import ExportResult, PenDefinition
from .classifier import (
    markupPreprocessor_resolve,
    scriptPreprocessor_resolve,
    scriptPreprocessor_upgrade,
    stylesheetPreprocessor_resolve,
    swingFiles_classify,
)
from .libraries import LibraryIndex, libraries_resolve
from .log import LOG
from .manifest import manifest_parse
from .publisher import pen_upload
from .scanner import scriptUrls_scan, styleUrls_scan
from .swing import SwingDirectory

SaveHook = Callable[[], Awaitable[None]]


class SwingExporter:
    """
    Exports a swing directory to the external pen viewer

    Responsibilities:
    - Classify swing files and read their content
    - Derive preprocessor hints
    - Collect external script/stylesheet URLs
    - Resolve manifest libraries against CDNJS
    - Upload the definition and build the viewer URL
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        settings: Optional[AppSettings] = None,
        save_all: Optional[SaveHook] = None,
    ) -> None:
        """
        Initialize exporter

        Args:
            client: HTTP client used for the library index and the upload
            settings: Endpoints and swing file names (defaults to appsettings)
            save_all: Awaited before anything is read, to flush unsaved edits
        """
        self.client = client
        self.settings = settings or appsettings
        self.save_all = save_all

    async def pen_assemble(self, directory: Union[str, Path]) -> PenDefinition:
        """
        Build the pen definition for a swing without uploading it

        Args:
            directory: Swing directory

        Returns:
            Assembled PenDefinition

        Raises:
            SwingError: If the directory does not exist
            ManifestParseError: If the manifest is not valid JSON
            httpx.HTTPError: If the library index cannot be fetched
        """
        swing = SwingDirectory(directory)
        files = await swing.files_list()
        swing_files = swingFiles_classify(swing.root, files)

        pen = PenDefinition(
            title=swing.name,
            description=swing.name,
            tags=[self.settings.pen_tag],
        )

        if swing_files.markup:
            pen.html = await swing.text_read(swing_files.markup.name)
            pen.html_pre_processor = markupPreprocessor_resolve(swing_files.markup)
            LOG(f"Markup: {swing_files.markup.name} ({pen.html_pre_processor})", level=2)

        if swing_files.script:
            pen.js = await swing.text_read(swing_files.script.name)
            pen.js_pre_processor = scriptPreprocessor_resolve(swing_files.script)
            LOG(f"Script: {swing_files.script.name} ({pen.js_pre_processor})", level=2)

        if swing_files.stylesheet:
            pen.css = await swing.text_read(swing_files.stylesheet.name)
            pen.css_pre_processor = stylesheetPreprocessor_resolve(swing_files.stylesheet)
            LOG(f"Stylesheet: {swing_files.stylesheet.name} ({pen.css_pre_processor})", level=2)

        scripts: List[str] = []
        styles: List[str] = []

        if swing_files.has(self.settings.scripts_file):
            scripts = scriptUrls_scan(await swing.text_read(self.settings.scripts_file))

        if swing_files.has(self.settings.styles_file):
            styles = styleUrls_scan(await swing.text_read(self.settings.styles_file))

        if swing_files.has(self.settings.manifest_file):
            manifest = manifest_parse(await swing.text_read(self.settings.manifest_file))
            if manifest:
                index = LibraryIndex(self.client, self.settings.cdnjs_url)

                if manifest.scripts:
                    pen.js_pre_processor = scriptPreprocessor_upgrade(
                        pen.js_pre_processor, manifest.scripts
                    )
                    scripts += await libraries_resolve(manifest.scripts, index)

                if manifest.styles:
                    styles += await libraries_resolve(manifest.styles, index)

        if scripts:
            pen.js_external = ";".join(scripts)

        if styles:
            pen.css_external = ";".join(styles)

        return pen

    async def swing_export(self, directory: Union[str, Path]) -> ExportResult:
        """
        Export a swing: save, assemble, upload, build the viewer URL

        Args:
            directory: Swing directory

        Returns:
            ExportResult with the uploaded pen, its link and the viewer URL
        """
        if self.save_all is not None:
            await self.save_all()

        LOG(f"Assembling pen from {directory}", level=1)
        pen = await self.pen_assemble(directory)

        LOG("Uploading pen definition...", level=1)
        link = await pen_upload(self.client, pen, self.settings.paste_url)
        url = self.settings.viewerUrl_make(link)
        LOG(f"Pen uploaded: {link}", level=2)

        return ExportResult(pen=pen, link=link, url=url)


async def swing_export(
    directory: Union[str, Path],
    settings: Optional[AppSettings] = None,
    client: Optional[httpx.AsyncClient] = None,
    save_all: Optional[SaveHook] = None,
) -> ExportResult:
    """
    Export a swing directory to the pen viewer

    Opens (and closes) its own HTTP client unless one is given.

    Args:
        directory: Swing directory
        settings: Configuration (defaults to appsettings)
        client: HTTP client to reuse
        save_all: Hook awaited before the swing is read

    Returns:
        ExportResult for the uploaded pen
    """
    settings = settings or appsettings

    if client is not None:
        return await SwingExporter(client, settings, save_all).swing_export(directory)

    async with httpx.AsyncClient(timeout=settings.http_timeout) as own_client:
        return await SwingExporter(own_client, settings, save_all).swing_export(directory)
