from .assertion import MatcherAssertionError, assert_that
from .core import (
    CustomMatcher,
    Description,
    DiagnosingMatcher,
    Matcher,
    SelfDescribing,
    TypeSafeDiagnosingMatcher,
    TypeSafeMatcher,
    describe_default_mismatch,
    describe_type_mismatch,
)
from .descriptions import (
    NONE,
    BaseDescription,
    NullDescription,
    SelfDescribingValue,
    StringDescription,
)
from .factory import *  # noqa: F401,F403
from .factory import __all__ as _factory_all
from .matchers import (
    AllOf,
    AnyOf,
    CombinableMatcher,
    IsNot,
    PropertyAccessError,
    readable_properties,
)

__all__ = [
    # assertion
    "assert_that",
    "MatcherAssertionError",
    # core
    "SelfDescribing",
    "Description",
    "Matcher",
    "DiagnosingMatcher",
    "TypeSafeMatcher",
    "TypeSafeDiagnosingMatcher",
    "CustomMatcher",
    "describe_default_mismatch",
    "describe_type_mismatch",
    # descriptions
    "BaseDescription",
    "StringDescription",
    "NullDescription",
    "NONE",
    "SelfDescribingValue",
    # matchers
    "AllOf",
    "AnyOf",
    "IsNot",
    "CombinableMatcher",
    "PropertyAccessError",
    "readable_properties",
    # factory
    *_factory_all,
]
