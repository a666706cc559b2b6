"""Tests for collection matchers."""

from matchkit import (
    StringDescription,
    contains_exactly,
    empty,
    equal_to,
    every_item,
    greater_than,
    has_item,
    has_items,
    has_length,
    less_than,
)


def mismatch_of(matcher, item):
    d = StringDescription()
    matcher.describe_mismatch(item, d)
    return str(d)


class TestEveryItem:
    def test_all_items_match(self):
        assert every_item(greater_than(0)).matches([1, 2, 3]) is True
        assert every_item(greater_than(0)).matches([]) is True

    def test_reports_first_failing_item(self):
        m = every_item(greater_than(0))

        assert m.matches([1, -1, -2]) is False
        assert mismatch_of(m, [1, -1, -2]) == "an item <-1> was less than <0>"

    def test_description(self):
        assert str(every_item(greater_than(0))) == "every item is a value greater than <0>"

    def test_strings_are_not_collections(self):
        m = every_item(equal_to("a"))

        assert m.matches("aaa") is False
        assert mismatch_of(m, "aaa") == 'was a str ("aaa")'

    def test_none(self):
        assert every_item(equal_to(1)).matches(None) is False
        assert mismatch_of(every_item(equal_to(1)), None) == "was null"


class TestHasItem:
    def test_contains(self):
        assert has_item(2).matches([1, 2, 3]) is True
        assert has_item(greater_than(2)).matches((1, 3)) is True
        assert has_item(5).matches({1, 2}) is False

    def test_empty_mismatch(self):
        assert mismatch_of(has_item(1), []) == "was empty"

    def test_lists_every_mismatch(self):
        assert mismatch_of(has_item(5), [1, 2]) == "mismatches were: [was <1>, was <2>]"

    def test_description(self):
        assert str(has_item(5)) == "a collection containing <5>"

    def test_has_items(self):
        m = has_items(1, 3)

        assert m.matches([3, 2, 1]) is True
        assert m.matches([1, 2]) is False
        assert str(m) == "(a collection containing <1> and a collection containing <3>)"


class TestContainsExactly:
    def test_in_order(self):
        m = contains_exactly(1, 2)

        assert m.matches([1, 2]) is True
        assert m.matches((1, 2)) is True
        assert m.matches([2, 1]) is False

    def test_item_mismatch(self):
        assert mismatch_of(contains_exactly(1, 2), [1, 5]) == "item 1: was <5>"

    def test_too_short(self):
        assert mismatch_of(contains_exactly(1, 2), [1]) == "no item was <2>"

    def test_surplus(self):
        assert mismatch_of(contains_exactly(1), [1, 4]) == "not matched: <4>"

    def test_description(self):
        assert str(contains_exactly(1, less_than(3))) == \
            "iterable containing [<1>, a value less than <3>]"

    def test_empty_expectation(self):
        assert contains_exactly().matches([]) is True
        assert contains_exactly().matches([1]) is False


class TestSizes:
    def test_empty(self):
        assert empty().matches([]) is True
        assert empty().matches({}) is True
        assert empty().matches([1]) is False
        assert mismatch_of(empty(), [1]) == "was [<1>]"
        assert str(empty()) == "an empty collection"

    def test_empty_string_is_not_a_collection(self):
        assert empty().matches("") is False

    def test_has_length(self):
        assert has_length(2).matches([1, 2]) is True
        assert has_length(greater_than(2)).matches("ab") is False
        assert mismatch_of(has_length(3), [1]) == "collection size was <1>"
        assert str(has_length(3)) == "a collection with size <3>"
