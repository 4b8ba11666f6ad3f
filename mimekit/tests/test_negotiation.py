"""Tests for Accept header negotiation."""

from __future__ import annotations

import logging

import pytest

from mimekit.media_type import MediaType
from mimekit.mimetype import MimeType
from mimekit.negotiation import parse_accept, quality_of, rank, select

BROWSER = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


class TestParseAccept:
    def test_missing_header_accepts_all(self) -> None:
        assert [str(r) for r in parse_accept(None)] == ["*/*"]
        assert [str(r) for r in parse_accept("   ")] == ["*/*"]

    def test_sorted_by_quality(self) -> None:
        ranges = parse_accept("text/*;q=0.5, application/json")
        assert [str(r) for r in ranges] == ["application/json", "text/*;q=0.5"]

    def test_bare_star(self) -> None:
        ranges = parse_accept("*; q=0.2")
        assert ranges[0].is_wildcard_type()
        assert ranges[0].quality_value == 0.2

    def test_invalid_ranges_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="mimekit.negotiation"):
            ranges = parse_accept("*/json, text/html;q=7, application/json,,")
        assert [str(r) for r in ranges] == ["application/json"]
        assert "Skipping media range" in caplog.text


class TestQualityOf:
    def test_most_specific_range_wins(self) -> None:
        ranges = parse_accept("text/*;q=0.3, text/html;q=0.7, text/html;level=1, */*;q=0.5")
        assert quality_of("text/html;level=1", ranges) == 1.0
        assert quality_of("text/html", ranges) == 0.7
        assert quality_of("text/plain", ranges) == 0.3
        assert quality_of("image/jpeg", ranges) == 0.5

    def test_no_match(self) -> None:
        assert quality_of("image/png", parse_accept("text/*")) == 0.0

    def test_range_parameters_must_match(self) -> None:
        ranges = parse_accept("text/html;level=1")
        assert quality_of("text/html;level=2", ranges) == 0.0

    def test_accepts_mimetype_instances(self) -> None:
        assert quality_of(MimeType("text", "html"), parse_accept("text/*;q=0.4")) == 0.4


class TestSelect:
    def test_browser_prefers_html(self) -> None:
        assert str(select(BROWSER, ["application/json", "text/html"])) == "text/html"

    def test_falls_back_to_catch_all(self) -> None:
        assert str(select(BROWSER, ["application/json"])) == "application/json"

    def test_server_order_breaks_ties(self) -> None:
        assert str(select("*/*", ["application/json", "text/plain"])) == "application/json"
        assert str(select("*/*", ["text/plain", "application/json"])) == "text/plain"

    def test_zero_quality_excludes(self) -> None:
        assert select("application/json;q=0, */*", ["application/json"]) is None
        assert str(select("application/json;q=0, */*", ["application/json", "text/csv"])) == "text/csv"

    def test_uppercase_quality_name(self) -> None:
        assert select("application/json;Q=0, */*", ["application/json"]) is None

    def test_nothing_acceptable(self) -> None:
        assert select("image/*", ["application/json"]) is None

    def test_no_offers(self) -> None:
        assert select("*/*", []) is None

    def test_suffix_range(self) -> None:
        chosen = select("application/*+json", ["application/xml", "application/problem+json"])
        assert str(chosen) == "application/problem+json"

    def test_parsed_ranges(self) -> None:
        ranges = [MediaType.parse("text/*;q=0.5"), MediaType.parse("application/json")]
        assert str(select(ranges, ["text/plain", "application/json"])) == "application/json"


class TestRank:
    def test_ranking(self) -> None:
        ranked = rank("text/*;q=0.5, application/json", ["text/plain", "image/png", "application/json"])
        assert [(str(offer), q) for offer, q in ranked] == [
            ("application/json", 1.0),
            ("text/plain", 0.5),
        ]
