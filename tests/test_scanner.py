"""
External resource scanner tests
"""

from swingpen.lib.scanner import scriptUrls_scan, styleUrls_scan


class TestScriptUrls:

    def test_two_tags_in_document_order(self):
        """Every <script src> tag contributes its URL, in order"""
        content = (
            '<script src="https://cdn.test/b.js"></script>\n'
            '<script src="https://cdn.test/a.js"></script>\n'
        )
        assert scriptUrls_scan(content) == ["https://cdn.test/b.js", "https://cdn.test/a.js"]

    def test_tags_on_one_line(self):
        content = '<script src="x.js"></script><script src="y.js"></script>'
        assert scriptUrls_scan(content) == ["x.js", "y.js"]

    def test_case_insensitive(self):
        assert scriptUrls_scan('<SCRIPT SRC="x.js"></SCRIPT>') == ["x.js"]

    def test_no_match(self):
        """Tags with extra attributes, or empty input, yield nothing"""
        assert scriptUrls_scan('<script type="module" src="x.js"></script>') == []
        assert scriptUrls_scan("") == []
        assert scriptUrls_scan(None) == []


class TestStyleUrls:

    def test_link_tags(self):
        content = (
            '<link href="https://cdn.test/a.css" rel="stylesheet" />\n'
            '<link href="https://cdn.test/b.css" rel="stylesheet" />'
        )
        assert styleUrls_scan(content) == ["https://cdn.test/a.css", "https://cdn.test/b.css"]

    def test_script_tags_not_styles(self):
        assert styleUrls_scan('<script src="x.js"></script>') == []
