"""
Unit tests for query string construction.
"""

from vrops_client.query.params import KeyValuePair
from vrops_client.query.query_string import append_query, build_url


class TestAppendQuery:
    """Tests for append_query."""

    def test_empty_input_gives_bare_marker(self):
        """Test empty existing and no pairs yields '?'."""
        assert append_query("", []) == "?"
        assert append_query(None, []) == "?"

    def test_no_pairs_returns_existing(self):
        """Test existing query is returned unchanged when nothing is appended."""
        assert append_query("?a=1", []) == "?a=1"

    def test_first_pair_has_no_separator(self):
        assert append_query("", [KeyValuePair("a", "1")]) == "?a=1"

    def test_subsequent_pairs_joined(self):
        result = append_query("", [KeyValuePair("a", "1"), KeyValuePair("b", "2")])
        assert result == "?a=1&b=2"

    def test_append_to_bare_marker(self):
        """Test appending to '?' does not add a leading '&'."""
        assert append_query("?", [KeyValuePair("a", "1")]) == "?a=1"

    def test_successive_calls_compose(self):
        """Test two calls give the same result as one call with both batches."""
        first = [KeyValuePair("a", "1")]
        second = [KeyValuePair("b", "2")]
        stepwise = append_query(append_query("", first), second)
        at_once = append_query("", first + second)
        assert stepwise == at_once == "?a=1&b=2"

    def test_repeated_keys_preserved(self):
        pairs = [KeyValuePair("resourceKind", "VirtualMachine"), KeyValuePair("resourceKind", "HostSystem")]
        assert append_query("", pairs) == "?resourceKind=VirtualMachine&resourceKind=HostSystem"

    def test_raw_insertion_by_default(self):
        """Test reserved characters are inserted verbatim unless encoding is requested."""
        pairs = [KeyValuePair("regex", "vm-.*&x=1")]
        assert append_query("", pairs) == "?regex=vm-.*&x=1"

    def test_encode(self):
        pairs = [KeyValuePair("regex", "vm .*&x=1")]
        assert append_query("", pairs, encode=True) == "?regex=vm%20.%2A%26x%3D1"


class TestBuildUrl:
    """Tests for build_url."""

    def test_without_pairs(self):
        """Test an empty query leaves no trailing '?'."""
        url = build_url("https://host", "/suite-api/api/resources", [])
        assert url == "https://host/suite-api/api/resources"

    def test_with_pairs(self):
        url = build_url("https://host/", "suite-api/api/resources", [KeyValuePair("name", "vm")])
        assert url == "https://host/suite-api/api/resources?name=vm"
