"""pytest configuration and shared fixtures."""

from dataclasses import dataclass

import pytest

from matchkit import Matcher


class RecordingMatcher(Matcher):
    """Matcher with a fixed answer that records every ``matches`` call."""

    def __init__(self, name, result, calls):
        self.name = name
        self.result = result
        self.calls = calls

    def matches(self, item):
        self.calls.append(self.name)
        return self.result

    def describe_to(self, description):
        description.append_text(self.name)

    def describe_mismatch(self, item, mismatch_description):
        mismatch_description.append_text(f"{self.name} rejected ").append_value(item)


@pytest.fixture
def calls():
    """Shared call log for recording matchers."""
    return []


@pytest.fixture
def recording(calls):
    """Factory: ``recording("A", False)`` → matcher logging into ``calls``."""
    def make(name, result):
        return RecordingMatcher(name, result, calls)
    return make


class Person:
    """Plain class whose properties are its instance attributes."""

    def __init__(self, name, age):
        self.name = name
        self.age = age


class Employee(Person):
    def __init__(self, name, age, nickname):
        super().__init__(name, age)
        self.nickname = nickname


@dataclass
class Point:
    x: int
    y: int


class Broken:
    """A property whose getter always raises."""

    def __init__(self):
        self.name = "broken"

    @property
    def size(self):
        raise RuntimeError("getter exploded")


@pytest.fixture
def bob():
    return Person("Bob", 30)


@pytest.fixture
def sample_doc():
    """An order document for path queries: a customer, priced lines, shipping."""
    return {
        "customer": {"name": "Alice", "tier": "gold"},
        "lines": [
            {"sku": "pen", "qty": 3, "price": 10},
            {"sku": "ink", "qty": 1, "price": 20},
            {"sku": "pad", "qty": 2, "price": 15},
        ],
        "shipping": {"express": True, "days": 2},
    }
