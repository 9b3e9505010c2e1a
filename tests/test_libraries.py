"""
Manifest library resolution tests

The CDNJS index is served by an httpx.MockTransport.
"""

import asyncio

import httpx
import pytest

from swingpen.lib.libraries import LibraryIndex, libraries_resolve, url_is


async def resolve(remote, libraries, url="https://cdnjs.test/libraries"):
    async with remote.client_make() as client:
        return await libraries_resolve(libraries, LibraryIndex(client, url))


class TestUrlDetection:

    @pytest.mark.parametrize("entry", [
        "http://x.js",
        "https://cdn.test/lib.js",
        "HTTPS://CDN.TEST/LIB.JS",
        "//cdn.test/lib.js",
    ])
    def test_urls(self, entry):
        assert url_is(entry)

    @pytest.mark.parametrize("entry", ["react", "react-dom", "lib.js", ""])
    def test_names(self, entry):
        assert not url_is(entry)


class TestLibrariesResolve:

    def test_url_and_unknown_name(self, remote):
        """URLs pass through, unknown names become empty strings"""
        result = asyncio.run(resolve(remote, ["http://x.js", "unknown-lib"]))
        assert result == ["http://x.js", ""]

    def test_names_resolved_in_input_order(self, remote):
        result = asyncio.run(resolve(remote, ["react-dom", "https://x.test/a.js", "react"]))
        assert result == [
            "https://cdnjs.test/react-dom/18.2.0/react-dom.min.js",
            "https://x.test/a.js",
            "https://cdnjs.test/react/18.2.0/react.min.js",
        ]

    def test_exact_name_match_only(self, remote):
        """Lookups do not match on prefixes or case"""
        assert asyncio.run(resolve(remote, ["reac", "React"])) == ["", ""]

    def test_index_fetched_once(self, remote):
        """Concurrent lookups share one index download"""
        asyncio.run(resolve(remote, ["react", "react-dom", "bulma", "nope"]))
        assert remote.index_requests == 1

    def test_urls_only_skip_index(self, remote):
        asyncio.run(resolve(remote, ["https://x.test/a.js"]))
        assert remote.index_requests == 0

    def test_empty_input(self, remote):
        assert asyncio.run(resolve(remote, [])) == []

    def test_index_failure_propagates(self):
        """A failing index request is not swallowed"""
        def handler(request):
            return httpx.Response(503)

        async def run():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await libraries_resolve(["react"], LibraryIndex(client, "https://cdnjs.test/libraries"))

        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(run())
