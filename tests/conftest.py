"""
Shared fixtures: swing directories on disk and a fake CDNJS/paste host
"""

import json
from pathlib import Path
from typing import Callable, Dict, List
from urllib.parse import parse_qs

import httpx
import pytest

from swingpen.config import AppSettings

CDNJS_URL = "https://cdnjs.test/libraries"
PASTE_URL = "https://paste.test/?expires=1"
PASTE_LINK = "https://paste.test/AbC123"

CDNJS_LIBRARIES = [
    {"name": "react", "latest": "https://cdnjs.test/react/18.2.0/react.min.js"},
    {"name": "react-dom", "latest": "https://cdnjs.test/react-dom/18.2.0/react-dom.min.js"},
    {"name": "bulma", "latest": "https://cdnjs.test/bulma/0.9.4/bulma.min.css"},
]


class FakeRemote:
    """Records requests and answers like CDNJS and file.io"""

    def __init__(self, link: str = PASTE_LINK) -> None:
        self.link = link
        self.index_requests = 0
        self.uploads: List[Dict] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        if str(request.url) == CDNJS_URL:
            self.index_requests += 1
            return httpx.Response(200, json={"results": CDNJS_LIBRARIES, "total": len(CDNJS_LIBRARIES)})

        if request.method == "POST" and str(request.url) == PASTE_URL:
            form = parse_qs(request.content.decode("utf-8"))
            self.uploads.append(json.loads(form["text"][0]))
            return httpx.Response(200, json={"success": True, "link": self.link})

        return httpx.Response(404)

    def client_make(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(cdnjs_url=CDNJS_URL, paste_url=PASTE_URL)


@pytest.fixture
def swing_make(tmp_path: Path) -> Callable[..., Path]:
    """Create a swing directory from a {file name: content} mapping"""

    def make(files: Dict[str, str], name: str = "my-swing") -> Path:
        root = tmp_path / name
        root.mkdir()
        for file_name, content in files.items():
            (root / file_name).write_text(content, encoding="utf-8")
        return root

    return make
