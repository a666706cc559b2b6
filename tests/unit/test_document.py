"""Tests for JMESPath document matchers."""

import jmespath
import pytest
from jmespath import functions as _jp_funcs

from matchkit import (
    StringDescription,
    contains_exactly,
    equal_to,
    greater_than,
    has_path,
    starts_with,
)


def mismatch_of(matcher, item):
    d = StringDescription()
    matcher.describe_mismatch(item, d)
    return str(d)


class TestHasPath:
    """Test JMESPath queries with a result matcher."""

    def test_simple_path(self, sample_doc):
        assert has_path("customer.name", "Alice").matches(sample_doc) is True
        assert has_path("customer.name", "Bob").matches(sample_doc) is False

    def test_path_presence(self, sample_doc):
        assert has_path("shipping.express").matches(sample_doc) is True
        assert has_path("shipping.missing").matches(sample_doc) is False

    def test_filter_expression(self, sample_doc):
        m = has_path("lines[?price > `10`].sku", contains_exactly("ink", "pad"))
        assert m.matches(sample_doc) is True

    def test_tuples_are_seen_as_lists(self):
        assert has_path("[1]", 5).matches((4, 5)) is True
        assert has_path("a[0]", 1).matches({"a": (1, 2)}) is True

    def test_description(self):
        m = has_path("customer.name", starts_with("A"))
        assert str(m) == 'a document with path "customer.name" a string starting with "A"'

    def test_default_description(self):
        assert str(has_path("a.b")) == 'a document with path "a.b" not null'

    def test_mismatch(self, sample_doc):
        m = has_path("shipping.days", greater_than(5))
        assert mismatch_of(m, sample_doc) == 'path "shipping.days" <2> was less than <5>'

    def test_missing_path_mismatch(self, sample_doc):
        assert mismatch_of(has_path("nope"), sample_doc) == 'path "nope" was null'

    def test_non_document(self):
        m = has_path("a", equal_to(1))

        assert m.matches("a") is False
        assert mismatch_of(m, "a") == 'was a str ("a")'
        assert mismatch_of(m, None) == "was null"

    def test_custom_functions(self):
        class Functions(_jp_funcs.Functions):
            @_jp_funcs.signature({"types": ["number"]})
            def _func_double(self, x):
                return x * 2

        options = jmespath.Options(custom_functions=Functions())
        assert has_path("double(n)", 8, options=options).matches({"n": 4}) is True

    def test_bad_expression_fails_at_construction(self):
        with pytest.raises(jmespath.exceptions.ParseError):
            has_path("a[")

    def test_empty_expression_rejected(self):
        with pytest.raises(ValueError):
            has_path("")
