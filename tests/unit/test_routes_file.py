"""Unit tests for routes file scanning."""

import pytest

from route_uri.core.config import AppConfig
from route_uri.core.exceptions import RoutesFileError
from route_uri.located import UriSpan
from route_uri.routes_file import RoutesFileScanner

ROUTES = """# Routes
# This file defines all application routes

GET     /                       controllers.Application.index()

GET     /users                  controllers.Users.list()
+ nocsrf
POST    /users/:id              controllers.Users.update(id: Long)
  GET   /files/*name            controllers.Assets.at(name)
->      /admin                  admin.Routes
this is not a route
GET
GET     /users                  controllers.Users.listAgain()
"""


@pytest.fixture
def scanner():
    """Create RoutesFileScanner instance."""
    return RoutesFileScanner(AppConfig())


class TestScanText:
    """Test scanning routes text."""

    def test_finds_route_uris(self, scanner):
        """Test every route line yields its URI column."""
        raws = [span.raw for span in scanner.scan_text(ROUTES)]
        assert raws == ["/", "/users", "/users/:id", "/files/*name", "/admin", "/users"]

    def test_offsets_point_into_text(self, scanner):
        """Test spans locate the URI text exactly."""
        for span in scanner.scan_text(ROUTES):
            assert ROUTES[span.offset : span.offset + span.length] == span.raw

    def test_single_line(self, scanner):
        assert list(scanner.scan_text("GET /users c.U.list")) == [UriSpan("/users", 4, 6)]

    def test_method_case_insensitive(self, scanner):
        assert [s.raw for s in scanner.scan_text("get /a c.A.a()\n")] == ["/a"]

    def test_windows_line_endings(self, scanner):
        """Test offsets account for CRLF."""
        text = "GET /a c.A.a()\r\nGET /b c.B.b()\r\n"
        spans = list(scanner.scan_text(text))
        assert [s.raw for s in spans] == ["/a", "/b"]
        assert text[spans[1].offset : spans[1].offset + 2] == "/b"

    def test_custom_methods_and_comments(self):
        """Test configured methods and comment prefix are honored."""
        config = AppConfig(http_methods=["WS"], comment_prefix="//")
        text = "// GET /ignored\nWS /socket c.S.open()\nGET /plain c.P.p()\n"
        assert [s.raw for s in RoutesFileScanner(config).scan_text(text)] == ["/socket"]


class TestScanFile:
    """Test scanning routes files."""

    def test_scan_file(self, scanner, tmp_path):
        routes = tmp_path / "routes"
        routes.write_text(ROUTES, encoding="utf-8")
        assert len(scanner.scan_file(routes)) == 6

    def test_located_uris(self, scanner, tmp_path):
        """Test located URIs keep document order and duplicates."""
        routes = tmp_path / "routes"
        routes.write_text(ROUTES, encoding="utf-8")
        located = scanner.located_uris(routes)
        assert [str(item) for item in located][-1] == "/users"
        assert len(set(located)) == 5

    def test_missing_file(self, scanner, tmp_path):
        with pytest.raises(RoutesFileError):
            scanner.scan_file(tmp_path / "missing")
