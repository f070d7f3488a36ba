"""
Python type tables used to classify values during a deep comparison.

Every value falls in exactly one of four buckets:

    - value types: compared with '==' (singletons, numerics, strings, bytes-likes, sets, dates, numpy scalars, ...)
    - sequences: list, tuple, dict values views
    - mappings: anything implementing collections.abc.Mapping
    - opaque references: everything else, compared by identity unless a custom checker exists for it
"""

import datetime
import decimal
import fractions
import pathlib
import uuid
import numpy as np
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any


DictKeysType = type({}.keys())
DictValuesType = type({}.values())

# Types whose instances are equal whenever '==' says so
ValueTypes = (type(None), type(Ellipsis), type(NotImplemented), bool, int, float, complex, str, bytes, bytearray,
    memoryview, range, slice, type, set, frozenset, DictKeysType, decimal.Decimal, fractions.Fraction, datetime.date,
    datetime.time, datetime.timedelta, datetime.tzinfo, uuid.UUID, pathlib.PurePath, Enum, np.generic, np.dtype)

SequenceTypes = (list, tuple, DictValuesType)


class _Missing:
    """Marks the side of a mapping comparison where a key was absent"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return '<missing>'

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


def type_name(value: 'Any') -> 'str':
    """Returns the name used to look up `value` in ignore/reference_only/custom_checkers"""
    if value is MISSING:
        return 'missing'
    return type(value).__name__


def as_type_name(t: 'Any') -> 'str':
    """Normalizes a configured type (either a class or its name) into a type name"""
    if isinstance(t, str):
        return t
    if isinstance(t, type):
        return t.__name__
    raise TypeError("Type names must be given as a str or a type, not %s" % repr(type(t).__name__))


def is_value_type(value: 'Any') -> 'bool':
    return isinstance(value, ValueTypes)


def is_sequence(value: 'Any') -> 'bool':
    return isinstance(value, SequenceTypes)


def is_mapping(value: 'Any') -> 'bool':
    return isinstance(value, Mapping)
