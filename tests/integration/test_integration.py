"""Integration tests: nested composition, rendering, and the assertion flow."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from conftest import Person
from matchkit import (
    MatcherAssertionError,
    StringDescription,
    all_of,
    any_of,
    assert_that,
    both,
    contains_string,
    either,
    equal_to,
    every_item,
    greater_than,
    has_item,
    has_path,
    has_property,
    instance_of,
    is_,
    less_than,
    none_value,
    not_,
    same_property_values_as,
    starts_with,
)


def mismatch_of(matcher, item):
    d = StringDescription()
    matcher.describe_mismatch(item, d)
    return str(d)


MATCHERS = [
    equal_to(3),
    not_(equal_to(3)),
    all_of(instance_of(int), greater_than(0), less_than(10)),
    any_of(starts_with("a"), contains_string("z")),
    both(greater_than(0)).and_(not_(equal_to(4))),
    either(none_value()).or_(equal_to("x")),
    every_item(greater_than(0)),
    has_item(is_(2)),
]

VALUES = [None, 0, 3, 4, 11, "abc", "xyz", "x", [1, 2], [], [-1], object()]


class TestContractAcrossMatchers:
    """Properties every matcher must satisfy."""

    @pytest.mark.parametrize("matcher", MATCHERS, ids=str)
    def test_matches_is_deterministic(self, matcher):
        for value in VALUES:
            assert matcher.matches(value) == matcher.matches(value)

    @pytest.mark.parametrize("matcher", MATCHERS, ids=str)
    def test_mismatch_rendering_never_raises_and_is_stable(self, matcher):
        for value in VALUES:
            if not matcher.matches(value):
                text = mismatch_of(matcher, value)
                assert text
                assert text == mismatch_of(matcher, value)

    @pytest.mark.parametrize("matcher", MATCHERS, ids=str)
    def test_str_is_stable(self, matcher):
        assert str(matcher) == str(matcher)


class TestNestedComposition:
    def test_order_document(self, sample_doc):
        m = all_of(
            has_path("customer.name", starts_with("A")),
            has_path("lines[*].price", every_item(greater_than(5))),
            has_path("shipping", has_item("express")),
        )

        assert m.matches(sample_doc) is True

    def test_nested_mismatch_message(self, sample_doc):
        m = all_of(
            has_path("customer.name", starts_with("A")),
            has_path("lines[*].price", every_item(greater_than(12))),
        )

        with pytest.raises(MatcherAssertionError) as excinfo:
            assert_that(sample_doc, m, "document check")

        assert str(excinfo.value) == (
            "document check\n"
            'Expected: (a document with path "customer.name" a string starting with "A"'
            ' and a document with path "lines[*].price" every item is a value greater than <12>)\n'
            '     but: a document with path "lines[*].price" every item is a value greater than <12>'
            ' path "lines[*].price" an item <10> was less than <12>'
        )

    def test_people_collection(self):
        people = [Person("Ann", 41), Person("Bob", 30)]

        assert_that(people, has_item(has_property("name", "Bob")))
        assert_that(people, every_item(has_property("age", greater_than(18))))
        assert_that(people, has_item(same_property_values_as(Person("Ann", 41))))

    def test_property_mismatch_through_assertion(self):
        with pytest.raises(MatcherAssertionError) as excinfo:
            assert_that(Person("Bob", 31), same_property_values_as(Person("Bob", 30)))

        assert str(excinfo.value).endswith("     but: age was <31>")


class TestConcurrentUse:
    def test_shared_matcher_across_threads(self):
        m = both(greater_than(0)).and_(less_than(1000))

        def check(n):
            d = StringDescription()
            if not m.matches(n):
                m.describe_mismatch(n, d)
            return m.matches(n), str(d)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(check, range(-50, 1050)))

        for n, (matched, text) in zip(range(-50, 1050), results):
            assert matched == (0 < n < 1000)
            assert (text == "") == matched
