"""
Sequence differencing used by the equality engine and the per-property helpers.

The engine's diffs take a `compare` callable with the same signature as
:func:`~deepequal.equality.compare_nested` so that elements are matched under the full recursive notion of
equality. :func:`diff_array` is the literal version that matches with plain '=='.
"""

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Callable, List, Optional, Sequence, Tuple
    from .config import EffectiveConfig
    from .failure import FailureData

    CompareFunc = Callable[['EffectiveConfig', str, Any, Any], Optional[FailureData]]


def find_missing_elements(config: 'EffectiveConfig', path: str, left: 'Sequence', right: 'Sequence',
    compare: 'CompareFunc') -> 'List':
    """Returns the elements of `left` that have no matching element in `right`.

    Matching is greedy first-fit: each left element consumes the first not-yet-matched right element that compares
    equal to it. This is not a maximum matching, so some inputs with ambiguous duplicates can report elements as
    missing even though a different pairing would have matched everything.
    """
    missing = []
    matched = [False] * len(right)

    for left_index, left_value in enumerate(left):
        sub_path = '%s[%d]' % (path, left_index)
        for i, right_value in enumerate(right):
            if matched[i]:
                continue
            if compare(config, sub_path, left_value, right_value) is None:
                matched[i] = True
                break
        else:
            missing.append(left_value)

    return missing


def diff_unordered(config: 'EffectiveConfig', path: str, left: 'Sequence', right: 'Sequence',
    compare: 'CompareFunc') -> 'Tuple[List, List]':
    """Multiset diff of two sequences, returned as (left_missing, right_missing).

    `left_missing` holds elements of `right` unmatched in `left` and is always computed. `right_missing` holds
    elements of `left` unmatched in `right`, and is only computed when `config.check_right_missing` is set.
    """
    right_missing = find_missing_elements(config, path, left, right, compare) if config.check_right_missing else []
    left_missing = find_missing_elements(config, path, right, left, compare)
    return left_missing, right_missing


def diff_ordered(config: 'EffectiveConfig', path: str, left: 'Sequence', right: 'Sequence',
    compare: 'CompareFunc') -> 'Tuple[Optional[FailureData], List]':
    """Index-by-index diff of two sequences, returned as (element_failure, tail).

    The common prefix is compared first and the first failing index wins. Only if the whole prefix matches is the
    tail of the longer sequence (beyond the shorter one's length) returned.
    """
    for index, (left_value, right_value) in enumerate(zip(left, right)):
        result = compare(config, '%s[%d]' % (path, index), left_value, right_value)
        if result is not None:
            return result, []

    longer, shorter = (right, left) if len(right) >= len(left) else (left, right)
    return None, list(longer)[len(shorter):]


def diff_array(left: 'Sequence', right: 'Sequence', check_right_missing: bool = True) -> 'Tuple[List, List]':
    """Literal membership diff returned as (left_missing, right_missing), matching elements with 'in'"""
    left_missing = [x for x in right if x not in left]
    if not check_right_missing:
        return left_missing, []
    right_missing = [x for x in left if x not in right]
    return left_missing, right_missing
