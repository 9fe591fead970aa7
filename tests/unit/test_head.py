"""Unit tests for the head scanner."""

from unittest.mock import patch

import pytest
from bs4 import BeautifulSoup
from bs4.element import Tag

from mainbody.parser.head import HeadInfo, HeadScanner, meta_charset, sniff_charset


def _head(markup: str) -> Tag:
    soup = BeautifulSoup(f"<head>{markup}</head>", "html.parser", multi_valued_attributes=None)
    head = soup.head
    assert head is not None
    return head


def _meta(markup: str) -> Tag:
    tag = BeautifulSoup(markup, "html.parser", multi_valued_attributes=None).meta
    assert tag is not None
    return tag


class TestMetaCharset:
    """Test charset lookup on a single meta element."""

    def test_charset_attribute(self) -> None:
        """Test the HTML5 charset attribute."""
        assert meta_charset(_meta('<meta charset="EUC-JP">')) == "EUC-JP"

    def test_http_equiv_content(self) -> None:
        """Test the content attribute form."""
        meta = _meta('<meta http-equiv="Content-Type" content="text/html; charset=Shift_JIS">')
        assert meta_charset(meta) == "Shift_JIS"

    def test_content_value_is_not_trimmed(self) -> None:
        """Test that the text after the marker is returned as is."""
        meta = _meta("<meta content='text/html; charset=\"utf-8\"; x'>")
        assert meta_charset(meta) == '"utf-8"; x'

    def test_charset_attribute_wins(self) -> None:
        """Test that the charset attribute is preferred over content."""
        meta = _meta('<meta content="text/html; charset=utf-8" charset="euc-jp">')
        assert meta_charset(meta) == "euc-jp"

    def test_no_charset(self) -> None:
        """Test a meta element without any charset."""
        assert meta_charset(_meta('<meta name="viewport" content="width=device-width">')) is None


class TestHeadScanner:
    """Test scanning of head children."""

    def test_title_and_charset(self) -> None:
        """Test that both values are found."""
        info = HeadScanner().scan(_head('<meta charset="EUC-JP"><title>Hello</title>'))
        assert info == HeadInfo(title="Hello", charset="EUC-JP")

    def test_later_meta_overwrites(self) -> None:
        """Test that the last declared charset wins."""
        head = _head('<meta charset="utf-8"><meta charset="shift_jis"><title>T</title>')
        assert HeadScanner().scan(head).charset == "shift_jis"

    def test_scan_stops_at_title(self) -> None:
        """Test that meta elements after the title are not read."""
        info = HeadScanner().scan(_head('<title>T</title><meta charset="euc-jp">'))
        assert info == HeadInfo(title="T", charset=None)

    def test_empty_title_is_skipped(self) -> None:
        """Test that a title without children does not end the scan."""
        head = _head('<title></title><meta charset="euc-jp"><title>Second</title>')
        assert HeadScanner().scan(head) == HeadInfo(title="Second", charset="euc-jp")

    def test_only_direct_children(self) -> None:
        """Test that nested elements are not scanned."""
        head = _head('<noscript><meta charset="euc-jp"><title>Deep</title></noscript>')
        assert HeadScanner().scan(head) == HeadInfo(title=None, charset=None)

    def test_empty_head(self) -> None:
        """Test that an empty head yields nothing."""
        assert HeadScanner().scan(_head("")) == HeadInfo(title=None, charset=None)


class TestSniffCharset:
    """Test charset lookup on undecoded bytes."""

    @pytest.mark.parametrize("parser", ["lxml", "html.parser"])
    def test_declared_legacy_charset(self, parser: str) -> None:
        """Test that the head declaration is read before decoding."""
        raw = (
            '<html><head><meta http-equiv="Content-Type" content="text/html; charset=Shift_JIS">'
            "<title>本文</title></head><body><p>です</p></body></html>"
        ).encode("shift_jis")
        assert sniff_charset(raw, parser) == "Shift_JIS"

    def test_last_declaration_wins(self) -> None:
        """Test that a later meta charset overwrites an earlier one."""
        raw = b'<html><head><meta charset="utf-8"><meta charset="EUC-JP"></head></html>'
        assert sniff_charset(raw, "html.parser") == "EUC-JP"

    def test_without_legacy_name_skips_parsing(self) -> None:
        """Test that ordinary documents are not parsed twice."""
        raw = b'<html><head><meta charset="utf-8"></head><body>caf\xc3\xa9</body></html>'
        with patch("mainbody.parser.head.parse_document") as mock_parse:
            assert sniff_charset(raw) is None
        mock_parse.assert_not_called()

    def test_legacy_name_outside_head(self) -> None:
        """Test that only head declarations count."""
        raw = b"<html><head></head><body><p>About Shift_JIS</p></body></html>"
        assert sniff_charset(raw, "html.parser") is None
