"""Tests for Open Graph extraction from HTML.

Covers strict and lenient modes, the fallback pass, overwrite order and
tolerance of malformed markup.
"""

from __future__ import annotations

import pytest
from bs4.exceptions import ParserRejectedMarkup

from og_mdx import content
from og_mdx.content import extract
from og_mdx.models import OpenGraphObject

OG_TITLE = '<meta property="og:title" content="Foo">'
OG_TYPE = '<meta property="og:type" content="website">'
OG_IMAGE = '<meta property="og:image" content="http://x/img.png">'
OG_URL = '<meta property="og:url" content="http://x/">'
CANONICAL = '<link rel="canonical" href="http://x/">'


def _page(*head: str, body: str = "") -> str:
    return f"<html><head>{''.join(head)}</head><body>{body}</body></html>"


COMPLETE = _page(OG_TITLE, OG_TYPE, OG_IMAGE, OG_URL)
MISSING_URL = _page(OG_TITLE, OG_TYPE, OG_IMAGE, CANONICAL)


class TestStrict:
    def test_complete_page(self):
        result = extract(COMPLETE, strict=True)
        assert isinstance(result, OpenGraphObject)
        assert result["title"] == "Foo"
        assert result.type == "website"
        assert result.schema == "website"
        assert result.valid

    def test_default_is_strict(self):
        assert extract(MISSING_URL) is False

    def test_missing_mandatory_attribute(self):
        assert extract(MISSING_URL, strict=True) is False

    def test_bytes_input(self):
        result = extract(COMPLETE.encode("utf-8"))
        assert result["image"] == "http://x/img.png"


class TestLenient:
    def test_canonical_link_fills_url(self):
        result = extract(MISSING_URL, strict=False)
        assert result["url"] == "http://x/"
        assert result.valid

    def test_incomplete_result_still_returned(self):
        result = extract(_page('<meta name="title" content="Bar">'), strict=False)
        assert isinstance(result, OpenGraphObject)
        assert result["title"] == "Bar"
        assert not result.valid

    def test_fallback_overwrites_og_value(self):
        html = _page(
            '<meta property="og:title" content="From OG">',
            '<meta name="title" content="From name">',
        )
        assert extract(html, strict=False)["title"] == "From name"

    def test_fallback_skipped_when_already_valid(self):
        html = _page(
            OG_TITLE, OG_TYPE, OG_IMAGE, OG_URL,
            '<meta name="title" content="Ignored">',
            '<link rel="canonical" href="http://other/">',
        )
        result = extract(html, strict=False)
        assert result["title"] == "Foo"
        assert result["url"] == "http://x/"

    def test_fallback_collects_description(self):
        html = _page(OG_TITLE, '<meta name="description" content="About">')
        assert extract(html, strict=False)["description"] == "About"

    def test_fallback_ignores_other_names(self):
        html = _page(OG_TITLE, '<meta name="keywords" content="a, b">')
        assert "keywords" not in extract(html, strict=False)

    def test_fallback_name_is_case_sensitive(self):
        html = _page('<meta name="Title" content="Bar">')
        assert extract(html, strict=False) is False

    def test_rel_must_equal_canonical(self):
        html = _page(OG_TITLE, '<link rel="canonical alternate" href="http://x/">')
        assert "url" not in extract(html, strict=False)

    def test_fallback_does_not_stop_early(self):
        html = _page(
            OG_TITLE, OG_TYPE, OG_IMAGE,
            '<link rel="canonical" href="http://first/">',
            '<link rel="canonical" href="http://second/">',
        )
        assert extract(html, strict=False)["url"] == "http://second/"


class TestPropertyParsing:
    def test_later_tag_wins(self):
        html = _page(
            '<meta property="og:title" content="First">',
            '<meta property="og:title" content="Second">',
        )
        assert extract(html, strict=False)["title"] == "Second"

    def test_hyphens_become_underscores(self):
        html = _page(OG_TITLE, '<meta property="og:site-name" content="Site">')
        assert extract(html, strict=False)["site_name"] == "Site"

    def test_prefix_is_case_insensitive_suffix_is_not(self):
        html = _page('<meta property="OG:Title" content="Foo">')
        result = extract(html, strict=False)
        assert result["Title"] == "Foo"
        assert "title" not in result

    def test_missing_content_is_empty_string(self):
        html = _page('<meta property="og:title">', OG_TYPE, OG_IMAGE, OG_URL)
        result = extract(html)
        assert result["title"] == ""
        assert result.valid

    def test_non_og_properties_ignored(self):
        html = _page('<meta property="twitter:title" content="Foo">')
        assert extract(html, strict=False) is False

    def test_bare_prefix_ignored(self):
        assert extract(_page('<meta property="og:" content="x">'), strict=False) is False

    def test_structured_properties_kept(self):
        html = _page(
            OG_TITLE, OG_TYPE, OG_IMAGE, OG_URL,
            '<meta property="og:image:width" content="400">',
        )
        assert extract(html)["image:width"] == "400"


class TestEmptyAndMalformed:
    @pytest.mark.parametrize("strict", [True, False])
    def test_no_meta_or_link(self, strict):
        assert extract(_page(body="<p>Hello</p>"), strict=strict) is False

    @pytest.mark.parametrize("strict", [True, False])
    def test_empty_string(self, strict):
        assert extract("", strict=strict) is False

    def test_malformed_markup(self):
        html = '<html><head><meta property="og:title" content="Foo"><div><<p>'
        result = extract(html, strict=False)
        assert result["title"] == "Foo"

    @pytest.mark.parametrize("tail", ["<![a[b", "<![\n"])
    def test_markup_rejected_by_html_parser(self, tail):
        html = '<meta property="og:title" content="Foo">' + tail
        result = extract(html, strict=False)
        assert result["title"] == "Foo"

    def test_markup_rejected_by_every_parser(self, monkeypatch):
        real_soup = content.BeautifulSoup

        def rejecting_soup(markup, *args, **kwargs):
            if markup:
                raise ParserRejectedMarkup("unparseable")
            return real_soup(markup, *args, **kwargs)

        monkeypatch.setattr(content, "BeautifulSoup", rejecting_soup)
        assert extract(COMPLETE, strict=False) is False


class TestEncoding:
    TITLE = "日本語のページ"

    def _shift_jis_page(self) -> bytes:
        html = _page(f'<meta property="og:title" content="{self.TITLE}">')
        return html.encode("shift_jis")

    def test_explicit_encoding_decodes_bytes(self):
        result = extract(self._shift_jis_page(), strict=False, encoding="shift_jis")
        assert result["title"] == self.TITLE

    def test_encoding_ignored_for_text(self):
        html = _page(f'<meta property="og:title" content="{self.TITLE}">')
        assert extract(html, strict=False, encoding="shift_jis")["title"] == self.TITLE


class TestProperties:
    @pytest.mark.parametrize("strict", [True, False])
    def test_extraction_is_idempotent(self, strict):
        first = extract(MISSING_URL, strict=strict)
        second = extract(MISSING_URL, strict=strict)
        if first is False:
            assert second is False
        else:
            assert first.to_dict() == second.to_dict()

    @pytest.mark.parametrize("html", [COMPLETE, MISSING_URL])
    def test_strict_result_implies_lenient_result(self, html):
        strict = extract(html, strict=True)
        lenient = extract(html, strict=False)
        if strict is not False:
            assert lenient is not False
            for name in ("title", "type", "image", "url"):
                assert lenient[name] == strict[name]
