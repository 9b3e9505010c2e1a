"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use SWINGPEN_ prefix (e.g., SWINGPEN_PASTE_URL=https://...).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Optional
from urllib.parse import quote

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Sub-delimiters left unescaped in the pen parameter, besides _.-~
URI_COMPONENT_SAFE = "!'()*"


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use SWINGPEN_ prefix.

    Examples:
        SWINGPEN_PASTE_URL=https://file.io/?expires=1
        SWINGPEN_MANIFEST_FILE=codeswing.json
        SWINGPEN_HTTP_TIMEOUT=30
    """

    model_config = SettingsConfigDict(
        env_prefix="SWINGPEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Remote endpoints
    paste_url: str = Field(
        default="https://file.io/?expires=1",
        description="Paste host receiving the pen definition as a form field named 'text'",
    )

    viewer_url: str = Field(
        default="https://codespaces-contrib.github.io/codeswing/codepen.html",
        description="Viewer page that loads a pen definition from its 'pen' query parameter",
    )

    cdnjs_url: str = Field(
        default="https://api.cdnjs.com/libraries",
        description="CDNJS library index used to resolve manifest library names",
    )

    http_timeout: Optional[float] = Field(
        default=None,
        description="Timeout in seconds for outbound HTTP calls (None disables it)",
    )

    # Swing layout
    manifest_file: str = Field(
        default="codeswing.json",
        description="Name of the optional library manifest inside a swing",
    )

    scripts_file: str = Field(
        default="scripts",
        description="Optional file listing <script src=...> tags",
    )

    styles_file: str = Field(
        default="styles",
        description="Optional file listing <link href=... rel=\"stylesheet\" /> tags",
    )

    # Pen configuration
    pen_tag: str = Field(
        default="codeswing",
        description="Tag attached to every exported pen",
    )

    def viewerUrl_make(self, link: str) -> str:
        """
        Build the viewer URL for an uploaded pen definition.

        Args:
            link: Reference returned by the paste host

        Returns:
            Viewer URL with the URL-encoded link in its 'pen' parameter

        Example:
            >>> settings = AppSettings()
            >>> settings.viewerUrl_make("https://file.io/abc")
            'https://codespaces-contrib.github.io/codeswing/codepen.html?pen=https%3A%2F%2Ffile.io%2Fabc'
        """
        return f"{self.viewer_url}?pen={quote(link, safe=URI_COMPONENT_SAFE)}"


# Singleton instance - import this in your code
appsettings = AppSettings()
