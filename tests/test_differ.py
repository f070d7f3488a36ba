"""
Tests for the lower level pieces the engine is built on: value classification, cycle detection and sequence diffs.
"""

import datetime
import numpy as np
from deepequal.config import EffectiveConfig
from deepequal.cycles import VisitedPairs
from deepequal.differ import diff_array, diff_ordered, diff_unordered, find_missing_elements
from deepequal.equality import compare_nested
from deepequal.failure import FailureData, FailureType
from deepequal.pytypes import MISSING, as_type_name, is_mapping, is_sequence, is_value_type, type_name


def _loose_compare(config, path, left, right):
    """Treats values as equal if they're within 1 of one another, recording every call"""
    _loose_compare.calls.append((path, left, right))
    if abs(left - right) <= 1:
        return None
    return FailureData(FailureType.DIFFERENT_VALUES, left, 'int', right, 'int', path=path)


def _config(**kwargs):
    _loose_compare.calls = []
    return EffectiveConfig.resolve(kwargs)


def test_classification():
    """Every value is a value type, a sequence, a mapping or an opaque reference"""
    for v in [None, True, 1, 1.0, 1j, 'a', b'a', bytearray(b'a'), range(3), int, {1}, frozenset(),
            datetime.date(2024, 1, 1), np.float32(1), np.dtype('int64')]:
        assert is_value_type(v), v
        assert not is_sequence(v) and not is_mapping(v)

    for v in [[], (), (1, 2), {'a': 1}.values()]:
        assert is_sequence(v) and not is_value_type(v)

    assert is_mapping({}) and not is_value_type({})

    for v in [object(), len, np.array([1]), lambda: None]:
        assert not is_value_type(v) and not is_sequence(v) and not is_mapping(v)


def test_type_names():
    assert type_name(1) == 'int'
    assert type_name(True) == 'bool'
    assert type_name(None) == 'NoneType'
    assert type_name(np.array([])) == 'ndarray'
    assert type_name(MISSING) == 'missing'
    assert as_type_name(dict) == 'dict'
    assert as_type_name('Vector3') == 'Vector3'
    assert not MISSING
    assert repr(MISSING) == '<missing>'


def test_visited_pairs():
    """Pairs are remembered in order, by identity"""
    visited = VisitedPairs()
    a, b, c = [], [], []

    assert not visited.seen(a, b)
    assert visited.seen(a, b)
    assert not visited.seen(b, a)
    assert not visited.seen(a, c)
    assert not visited.seen([], [])  # equal but distinct objects
    assert len(visited) == 4


def test_find_missing_elements():
    """Greedy first-fit matching, each right element is used at most once"""
    config = _config()
    assert find_missing_elements(config, 'x', [1, 5, 20], [10, 4, 2], _loose_compare) == [20]
    assert _loose_compare.calls[0] == ('x[0]', 1, 10)

    # Greedy, not maximal: 2 takes 3 first, leaving nothing for 4
    config = _config()
    assert find_missing_elements(config, '', [2, 4], [3, 1], _loose_compare) == [4]


def test_diff_unordered():
    config = _config()
    assert diff_unordered(config, '', [1, 20], [2, 40], _loose_compare) == ([40], [20])

    config = _config(check_right_missing=False)
    assert diff_unordered(config, '', [1, 20], [2, 40], _loose_compare) == ([40], [])


def test_diff_ordered():
    config = _config(in_order=True)
    assert diff_ordered(config, '', [1, 2], [2, 3], _loose_compare) == (None, [])
    assert diff_ordered(config, '', [1, 2, 3], [1, 2], _loose_compare) == (None, [3])
    assert diff_ordered(config, '', [1], [1, 2, 3], _loose_compare) == (None, [2, 3])

    failure, tail = diff_ordered(config, 'seq', [1, 2, 3], [1, 9], _loose_compare)
    assert failure.path == 'seq[1]'
    assert tail == []


def test_diff_array():
    """The literal diff matches with '==' and never recurses"""
    assert diff_array([1, 2, 3], [1, 2, 4]) == ([4], [3])
    assert diff_array([1, 2, 3], [1, 2, 4], check_right_missing=False) == ([4], [])
    assert diff_array([[1]], [[1]]) == ([], [])
    assert diff_array([], []) == ([], [])


def test_compare_nested_keeps_leading_separator():
    """compare_nested() is the untrimmed engine entry point for custom checkers"""
    config = EffectiveConfig.resolve()
    failure = compare_nested(config, '', {'a': 1}, {'a': 2})
    assert failure.path == '.a'
    failure = compare_nested(config, 'root', {'a': [1]}, {'a': [2]})
    assert failure.path == 'root.a'
    assert compare_nested(config, '', [1], [1]) is None
