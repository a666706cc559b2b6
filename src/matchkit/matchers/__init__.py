"""Matchers sub-package: concrete ``Matcher`` implementations, grouped by
what they inspect.

basic      – equality, identity, type, ``None``, ``is``, described-as
logical    – AllOf / AnyOf / IsNot and the fluent both / either builder
collection – every item, has item, contains in order, empty, length
text       – substring, pattern, case- and white-space-insensitive equality
number     – ordering comparisons and closeness
beans      – property enumeration and property-by-property comparison
document   – JMESPath queries into JSON-like documents
"""

from .basic import DescribedAs, Is, IsAnything, IsEqual, IsInstanceOf, IsNull, IsSame
from .beans import (
    HasProperty, PropertyAccessError, SamePropertyValuesAs,
    read_property, readable_properties,
)
from .collection import ContainsInOrder, EveryItem, HasItem, HasLength, IsEmpty
from .document import HasPath
from .logical import (
    AllOf, AnyOf, IsNot,
    CombinableMatcher, CombinableBothMatcher, CombinableEitherMatcher,
)
from .number import EQUAL, GREATER_THAN, LESS_THAN, IsCloseTo, OrderingComparison
from .text import (
    IsEqualCompressingWhiteSpace, IsEqualIgnoringCase, MatchesPattern,
    StringContains, StringEndsWith, StringStartsWith, SubstringMatcher,
)

__all__ = [
    # basic
    "IsEqual",
    "IsSame",
    "IsAnything",
    "IsNull",
    "IsInstanceOf",
    "Is",
    "DescribedAs",
    # logical
    "AllOf",
    "AnyOf",
    "IsNot",
    "CombinableMatcher",
    "CombinableBothMatcher",
    "CombinableEitherMatcher",
    # collection
    "EveryItem",
    "HasItem",
    "ContainsInOrder",
    "IsEmpty",
    "HasLength",
    # text
    "SubstringMatcher",
    "StringContains",
    "StringStartsWith",
    "StringEndsWith",
    "MatchesPattern",
    "IsEqualIgnoringCase",
    "IsEqualCompressingWhiteSpace",
    # number
    "OrderingComparison",
    "IsCloseTo",
    "LESS_THAN",
    "EQUAL",
    "GREATER_THAN",
    # beans
    "readable_properties",
    "read_property",
    "PropertyAccessError",
    "SamePropertyValuesAs",
    "HasProperty",
    # document
    "HasPath",
]
