"""
Helpers for writing custom checkers that compare two objects attribute by attribute.

Each helper compares one attribute on both objects and returns None if it matches, or a
:class:`~deepequal.failure.FailureData` whose `path` is the attribute name. Chain them with `or`, since None is falsy
and a FailureData is not:

    def check_point(config, left, right):
        return check_value_property(left, right, 'x') or check_value_property(left, right, 'y')
"""

from .differ import diff_array
from .failure import FailureData, FailureType
from .pytypes import type_name
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Optional


def check_value_property(left: 'Any', right: 'Any', key: str) -> 'Optional[FailureData]':
    """Compares `left.key` and `right.key` with '=='. Differences are reported as DIFFERENT_VALUES.

    Args:
        left (Any): the left (or "actual") object
        right (Any): the right (or "expected") object
        key (str): name of the attribute to compare
    """
    left_value, right_value = getattr(left, key), getattr(right, key)
    if left_value != right_value:
        return _property_failure(FailureType.DIFFERENT_VALUES, left_value, right_value, key)
    return None


def check_reference_property(left: 'Any', right: 'Any', key: str) -> 'Optional[FailureData]':
    """Compares `left.key` and `right.key` with 'is'. Differences are reported as DIFFERENT_REFERENCE."""
    left_value, right_value = getattr(left, key), getattr(right, key)
    if left_value is not right_value:
        return _property_failure(FailureType.DIFFERENT_REFERENCE, left_value, right_value, key)
    return None


def check_array_property(left: 'Any', right: 'Any', key: str, check_right_missing: bool = True) -> 'Optional[FailureData]':
    """Compares the sequences `left.key` and `right.key` as unordered collections, matching elements with '=='.

    Unlike the engine's own sequence comparison, elements are not compared recursively. Differences are reported as
    MISSING_ARRAY_VALUE.

    Args:
        left (Any): the left (or "actual") object
        right (Any): the right (or "expected") object
        key (str): name of the sequence attribute to compare
        check_right_missing (bool): if True, also report elements of the left sequence missing from the right one.
            Custom checkers usually pass `config.check_right_missing`. Defaults to True.
    """
    left_value, right_value = getattr(left, key), getattr(right, key)
    left_missing, right_missing = diff_array(left_value, right_value, check_right_missing)
    if not left_missing and not right_missing:
        return None
    return FailureData(FailureType.MISSING_ARRAY_VALUE, left_value, type_name(left_value), right_value,
        type_name(right_value), left_missing=left_missing, right_missing=right_missing, path=key)


def _property_failure(fail_type, left_value, right_value, key):
    return FailureData(fail_type, left_value, type_name(left_value), right_value, type_name(right_value), path=key)
