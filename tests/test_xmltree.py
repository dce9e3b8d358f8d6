"""Tests for the namespace-aware XML node interface."""

from __future__ import annotations

import pytest

from conftest import W_NS
from docx2quill.errors import ErrorKind, MalformedXml
from docx2quill.xmltree import XmlNode, parse_xml

OTHER_NS = "http://example.com/other"


def _parse(markup: str, prefix: str = "w") -> XmlNode:
    return parse_xml(
        f'<{prefix}:root xmlns:{prefix}="{W_NS}" xmlns:o="{OTHER_NS}">{markup}</{prefix}:root>',
        W_NS,
    )


class TestParseXml:

    def test_malformed(self):
        with pytest.raises(MalformedXml) as info:
            parse_xml("<w:document><unclosed></w:document>", W_NS)
        assert info.value.kind is ErrorKind.MALFORMED_XML

    def test_not_xml_at_all(self):
        with pytest.raises(MalformedXml):
            parse_xml(b"\x00\x01binary", W_NS)

    def test_accepts_bytes(self):
        root = parse_xml(f'<w:root xmlns:w="{W_NS}"/>'.encode("utf-8"), W_NS)
        assert root.local_name == "root"


class TestQueries:

    def test_prefix_does_not_matter(self):
        a = _parse('<w:p><w:r/></w:p>', prefix="w")
        b = _parse('<x:p><x:r/></x:p>', prefix="x")
        assert a.child("p").child("r") is not None
        assert b.child("p").child("r") is not None

    def test_missing_child_is_none(self):
        root = _parse("<w:p/>")
        assert root.child("tbl") is None
        assert root.children("tbl") == []

    def test_foreign_namespace_is_absent(self):
        root = _parse('<o:p o:val="1"/>')
        assert root.child("p") is None
        assert root.children()[0].local_name is None

    def test_attr(self):
        root = _parse('<w:jc w:val="center" val="plain"/>')
        jc = root.child("jc")
        assert jc.attr("val") == "center"
        assert jc.attr("missing") is None

    def test_unqualified_attr_is_absent(self):
        root = _parse('<w:jc val="center"/>')
        assert root.child("jc").attr("val") is None

    def test_children_in_order(self):
        root = _parse("<w:t>a</w:t><w:tab/><w:t>b</w:t><w:br/>")
        assert [c.local_name for c in root.children()] == ["t", "tab", "t", "br"]
        assert [c.text for c in root.children("t")] == ["a", "b"]

    def test_text_concatenates_descendants(self):
        root = _parse("<w:t>Hello <w:x>big</w:x> world</w:t>")
        assert root.child("t").text == "Hello big world"

    def test_descendants_document_order(self):
        root = _parse(
            "<w:p><w:r><w:t>1</w:t></w:r>"
            "<w:hyperlink><w:r><w:t>2</w:t></w:r></w:hyperlink>"
            "<w:r><w:t>3</w:t></w:r></w:p>"
        )
        texts = [r.child("t").text for r in root.descendants("r")]
        assert texts == ["1", "2", "3"]

    def test_descendants_stop_at(self):
        root = _parse(
            "<w:p><w:r><w:t>outer</w:t>"
            "<w:pict><w:txbxContent><w:p><w:r><w:t>inner</w:t></w:r></w:p>"
            "</w:txbxContent></w:pict></w:r></w:p>"
        )
        outer = root.child("p")
        texts = [r.child("t").text for r in outer.descendants("r", stop_at="p")]
        assert texts == ["outer"]
        assert len(list(outer.descendants("r"))) == 2

    def test_is_element(self):
        root = _parse("<w:br/>")
        assert root.child("br").is_element("br")
        assert not root.child("br").is_element("tab")
