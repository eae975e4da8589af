"""Cross-check located tags against a real XML parser on well-formed files."""

import pytest

from xml_tag_locator import find_tag_by_name, find_tags_by_name, get_attribute

etree = pytest.importorskip("lxml.etree")

XML_NAMESPACE = "{http://www.w3.org/XML/1998/namespace}"


def _parse(text: str):
    return etree.fromstring(text.encode("utf-8"))


class TestAgreementWithLxml:
    """Tag counts, text and attributes agree with lxml."""

    @pytest.mark.parametrize("fixture_name", ["mrf_xml", "tiff_aux_xml"])
    def test_every_tag_count_agrees(self, request, fixture_name):
        """Test counts of every element name, nested occurrences included."""
        text = request.getfixturevalue(fixture_name)
        root = _parse(text)

        for tag in {element.tag for element in root.iter()}:
            assert len(find_tags_by_name(text, tag)) == len(list(root.iter(tag))), tag

    def test_leaf_text_agrees(self, tiff_aux_xml):
        """Test inner text of leaf elements."""
        root = _parse(tiff_aux_xml)
        expected = [element.text for element in root.iter("MDI")]

        assert [m.inner for m in find_tags_by_name(tiff_aux_xml, "MDI")] == expected

    def test_attributes_agree(self, tiff_aux_xml, mrf_xml):
        """Test attribute values of located tags."""
        root = _parse(tiff_aux_xml)
        keys = [element.get("key") for element in root.iter("MDI")]
        assert [get_attribute(m, "key") for m in find_tags_by_name(tiff_aux_xml, "MDI")] == keys

        size = _parse(mrf_xml).find("Raster/Size")
        match = find_tag_by_name(mrf_xml, "Size")
        assert {axis: get_attribute(match, axis) for axis in size.attrib} == dict(size.attrib)

    def test_prefixed_attribute(self, tmx_xml):
        """Test xml:lang read as raw text matches the namespaced attribute."""
        root = _parse(tmx_xml)
        langs = [element.get(XML_NAMESPACE + "lang") for element in root.iter("tuv")]

        assert [get_attribute(m, "xml:lang") for m in find_tags_by_name(tmx_xml, "tuv")] == langs
