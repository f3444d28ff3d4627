"""
Domain enums for the movie mapping layer.
Contains the enumeration types used by mapping rules.
"""

import enum


class MissingPolicy(str, enum.Enum):
    """What a computed field does when a required source reference is absent"""

    NULL = "null"
    RAISE = "raise"


class CollectionKind(str, enum.Enum):
    """Container produced by collection element mapping"""

    LIST = "list"
    SET = "set"
    TUPLE = "tuple"
