"""Tests for attribute extraction."""

import pytest

from xml_tag_locator import InvalidArgumentError, find_tag_by_name, get_attribute
from xml_tag_locator.api import opening_portion


class TestGetAttribute:
    """Test suite for get_attribute."""

    def test_double_quoted_values(self):
        """Test values of a self-closing tag."""
        size = '<Size x="6638" y="7587" c="4" />'

        assert get_attribute(size, "x") == "6638"
        assert get_attribute(size, "y") == "7587"
        assert get_attribute(size, "c") == "4"

    def test_single_quoted_value(self):
        """Test single-quote delimiters."""
        assert get_attribute("<a title='it \"works\"'>", "title") == 'it "works"'

    def test_unquoted_value(self):
        """Test bare values in tolerant markup."""
        assert get_attribute("<Thing attr=1></Thing>", "attr") == "1"
        assert get_attribute("<Thing attr=2/>", "attr") == "2"

    def test_unquoted_value_with_slash(self):
        """Test a bare value keeps slashes that do not close the tag."""
        assert get_attribute("<a href=foo/bar>", "href") == "foo/bar"
        assert get_attribute("<a href=/x/y/>", "href") == "/x/y"

    def test_empty_value(self):
        """Test an empty quoted value is not absence."""
        assert get_attribute('<a b="">', "b") == ""

    def test_name_is_not_a_suffix(self):
        """Test foo does not match data-foo."""
        assert get_attribute('<x data-foo="1">', "foo") is None

    def test_name_is_not_a_prefix(self):
        """Test code does not match codeSpace."""
        assert get_attribute('<x codeSpace="EPSG">', "code") is None
        assert get_attribute('<x codeSpace="EPSG" code="4326">', "code") == "4326"

    def test_case_sensitive(self):
        """Test attribute names are case-sensitive."""
        assert get_attribute('<svg viewBox="0 0 1 1">', "viewbox") is None
        assert get_attribute('<svg viewBox="0 0 1 1">', "viewBox") == "0 0 1 1"

    def test_equals_must_follow_name(self):
        """Test the name must be directly followed by '='."""
        assert get_attribute('<a b ="1">', "b") is None

    def test_only_opening_tag_searched(self, multiline_xml):
        """Test attributes of nested tags are ignored."""
        container = find_tag_by_name(multiline_xml, "div")

        assert get_attribute(container.outer, "id") == "container"
        assert get_attribute(container.outer, "data-foo") is None
        assert get_attribute(container.inner.strip(), "data-foo") == "bar"

    def test_accepts_tag_match(self):
        """Test a TagMatch can be passed directly."""
        match = find_tag_by_name('<r><MDI key="SourceBandIndex">0</MDI></r>', "MDI")
        assert get_attribute(match, "key") == "SourceBandIndex"

    def test_greater_than_in_quoted_value(self):
        """Test a quoted '>' does not truncate the opening tag."""
        assert get_attribute('<a expr="x > 1" id="n">', "id") == "n"

    def test_bare_attribute_list(self):
        """Test text without a tag is searched as a whole."""
        assert get_attribute(' srclang="en" adminlang="en-us"', "srclang") == "en"

    def test_absent(self):
        """Test a missing attribute is None."""
        assert get_attribute("<a>", "b") is None

    def test_invalid_arguments(self):
        """Test programming errors fail loudly."""
        with pytest.raises(InvalidArgumentError, match="name must not be empty"):
            get_attribute("<a b='1'>", "")
        with pytest.raises(InvalidArgumentError, match="tag must be a string"):
            get_attribute(42, "b")


class TestOpeningPortion:
    """Test suite for opening_portion."""

    def test_first_tag_only(self):
        """Test the portion ends at the first opening tag's '>'."""
        assert opening_portion('text <a x="1"><b y="2"/></a>') == '<a x="1">'

    def test_unterminated_tag(self):
        """Test an unterminated tag runs to the next '<'."""
        assert opening_portion('<div id="x"\n</div>') == '<div id="x"\n'

    def test_no_tag(self):
        """Test text without '<' is returned unchanged."""
        assert opening_portion('a="1"') == 'a="1"'
