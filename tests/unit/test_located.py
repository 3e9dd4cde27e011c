"""Unit tests for located URIs and span helpers."""

from route_uri.located import (
    LocatedUri,
    UriSpan,
    all_uris_in_spans,
    existing_uris,
    sort_key,
    sorted_uris,
)
from route_uri.uri import RouteUri


class TestLocatedUri:
    """Test LocatedUri."""

    def test_from_raw(self):
        """Test construction from raw text and location."""
        located = LocatedUri.from_raw("/users/:id", 10, 10)
        assert located.uri == RouteUri("/users/:id")
        assert located.offset == 10
        assert located.length == 10
        assert located.end == 20

    def test_delegates_to_uri(self):
        """Test URI operations are available on the located URI."""
        located = LocatedUri.from_raw("/users/:id", 10, 10)
        assert located.segments == ("users", ":id")
        assert located.is_valid is True
        assert located.starts_with("/us") is True
        assert located.parts_touched_by(7, 3) == (["users"], [":id"])
        assert str(located) == "/users/:id"

    def test_location_not_validated(self):
        """Test offset and length are stored as given."""
        located = LocatedUri.from_raw("/a", -3, 99)
        assert (located.offset, located.length) == (-3, 99)

    def test_equality_ignores_location(self):
        """Test the same URI at two locations is one URI."""
        first = LocatedUri.from_raw("/a", 0, 2)
        second = LocatedUri.from_raw("/a", 40, 2)
        assert first == second
        assert len({first, second}) == 1
        assert first != LocatedUri.from_raw("/b", 0, 2)

    def test_raw_text_is_wrapped(self):
        """Test constructing from raw text behaves like from_raw."""
        located = LocatedUri("/a", 0, 2)
        assert located.uri == RouteUri("/a")
        assert located.segments == ("a",)
        assert located.parts_touched_by(1, 1) == ([], ["a"])
        assert str(located) == "/a"
        assert located == LocatedUri.from_raw("/a", 5, 2)

    def test_equal_to_plain_uri(self):
        """Test a located URI equals the plain URI with the same text."""
        located = LocatedUri.from_raw("/a", 0, 2)
        assert located == RouteUri("/a")
        assert RouteUri("/a") == located
        assert located != RouteUri("/b")
        assert len({located, RouteUri("/a")}) == 1

    def test_contains(self):
        """Test hit-testing includes the end of the span."""
        located = LocatedUri.from_raw("/a", 5, 2)
        assert located.contains(4) is False
        assert located.contains(5) is True
        assert located.contains(7) is True
        assert located.contains(8) is False


class TestSpans:
    """Test span helpers."""

    def test_all_uris_in_spans_skips_empty(self):
        """Test empty and negative-length spans are dropped, order is kept."""
        spans = [
            UriSpan("/b", 0, 2),
            UriSpan("", 3, 0),
            ("/a", 10, 2),
            UriSpan("/c", 20, -1),
        ]
        located = all_uris_in_spans(spans)
        assert [str(item) for item in located] == ["/b", "/a"]
        assert [item.offset for item in located] == [0, 10]

    def test_existing_uris_deduplicates(self):
        """Test repeated URIs collapse to one."""
        spans = [UriSpan("/a", 0, 2), UriSpan("/b", 5, 2), UriSpan("/a", 10, 2)]
        assert existing_uris(spans) == {RouteUri("/a"), RouteUri("/b")}


class TestOrdering:
    """Test alphabetical ordering."""

    def test_sort_key(self):
        assert sort_key(RouteUri("/a")) == "/a"
        assert sort_key(LocatedUri.from_raw("/b", 0, 2)) == "/b"

    def test_sorted_uris(self):
        uris = [RouteUri("/users"), RouteUri("/admin"), RouteUri("/users/:id")]
        assert sorted_uris(uris) == [RouteUri("/admin"), RouteUri("/users"), RouteUri("/users/:id")]
