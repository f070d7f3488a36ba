"""
Utils for determining deep equality of objects, and where/why they differ

Values are classified per node (see :mod:`deepequal.pytypes`):
    - value types (None, bool, numbers, str, bytes, sets, dates, enums, numpy scalars, ...) are compared with '=='
    - list, tuple and dict values views are compared as multisets, or index by index with `in_order=True`
    - mappings are compared key by key
    - anything else is compared by identity, unless a custom checker is registered for its type name
      (numpy arrays, compiled regexes and SimpleNamespace have built-in checkers)

The comparison stops at the first difference found and reports it as a single
:class:`~deepequal.failure.FailureData`. It is not a full diff.
"""

import dataclasses
import logging
from .config import DeepEqualConfig, EffectiveConfig, default_store
from .differ import diff_ordered, diff_unordered
from .failure import EqualityCheckingError, EqualityError, FailureData, FailureType, _limit_str
from .pytypes import MISSING, is_mapping, is_sequence, is_value_type, type_name
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Mapping, Optional, Sequence
    from .config import ConfigLike, DefaultConfigStore


log = logging.getLogger(__name__)


def deep_equal(left: 'Any', right: 'Any', config: 'ConfigLike' = None, *, raise_err: 'bool' = False,
    defaults: 'Optional[DefaultConfigStore]' = None, **overrides: 'Any') -> 'Optional[FailureData]':
    """
    Compares two values _deeply_ to see if they're equal, and reports where and why they're not.

    Two lists, dicts, etc. are equal if they contain equal values, even if they are different objects. Lists and
    tuples are compared as multisets by default: [1, 2, 3] equals [3, 2, 1].

    NOTE: this is recursive. Structures nested deeper than the interpreter's recursion limit raise RecursionError.

    Args:
        left (Any): the left (or "actual") value
        right (Any): the right (or "expected") value
        config (Union[DeepEqualConfig, Mapping[str, Any], None]): settings for this call, layered on top of the
            defaults. See :class:`~deepequal.config.DeepEqualConfig` for the available settings.
        raise_err (bool): if True, then an ``EqualityError`` holding the failure is raised whenever `left` and
            `right` are unequal, instead of returning the failure. Defaults to False.
        defaults (Optional[DefaultConfigStore]): the store to take default settings from. Defaults to the
            process-wide store managed by :func:`~deepequal.config.set_default_config`.
        overrides: individual settings, applied on top of `config`. eg: `deep_equal(a, b, in_order=True)`

    Returns:
        Optional[FailureData]: None if the values are deeply equal, otherwise data on the first difference found.

    Example:
        >>> failure = deep_equal({'name': 'widget', 'count': 100}, {'name': 'widget', 'count': 200})
        >>> failure.fail_type, failure.left_value, failure.right_value, failure.path
        (<FailureType.DIFFERENT_VALUES: 'different_values'>, 100, 200, 'count')
    """
    store = default_store if defaults is None else defaults
    effective = EffectiveConfig.resolve(store.get(), config, DeepEqualConfig.from_dict(overrides))

    result = compare_nested(effective, '', left, right)
    if result is None:
        return None

    if result.path.startswith('.'):
        result = dataclasses.replace(result, path=result.path[1:])

    if raise_err:
        raise EqualityError(result)
    return result


def equal(left: 'Any', right: 'Any', config: 'ConfigLike' = None, **overrides: 'Any') -> 'bool':
    """Returns True if `left` and `right` are deeply equal. Takes the same settings as :func:`deep_equal`."""
    return deep_equal(left, right, config, **overrides) is None


def compare_nested(config: 'EffectiveConfig', path: str, left: 'Any', right: 'Any') -> 'Optional[FailureData]':
    """
    Compares `left` and `right` at `path`, recursing into sequences and mappings.

    This is what custom checkers should call to compare sub-values under the same config. Unlike
    :func:`deep_equal`, the reported path is not trimmed.
    """
    left_type, right_type = type_name(left), type_name(right)

    if _is_same(left, right):
        return None

    # Cycles are treated as equal, so only the first visit of a pair is checked
    if not is_value_type(left) and not is_value_type(right) and config.visited.seen(left, right):
        log.debug("Skipping already compared pair of %s at %r", left_type, path)
        return None

    if left_type in config.ignore or right_type in config.ignore:
        return None

    if left_type != right_type:
        return _failure(FailureType.DIFFERENT_TYPES, path, left, right)

    if left_type not in config.reference_only:
        checker = config.custom_checkers.get(left_type)
        if checker is not None:
            return _run_checker(checker, config, path, left, right)

        if is_value_type(left):
            # Value types that made it past _is_same() are not '=='
            return _failure(FailureType.DIFFERENT_VALUES, path, left, right)

    if is_sequence(left) and is_sequence(right):
        return compare_sequence(config, path, left, right)

    if is_mapping(left) and is_mapping(right):
        return compare_mapping(config, path, left, right)

    return _failure(FailureType.DIFFERENT_REFERENCE, path, left, right)


def compare_sequence(config: 'EffectiveConfig', path: str, left: 'Sequence', right: 'Sequence') -> 'Optional[FailureData]':
    """Compares two sequences, index by index if `config.in_order`, otherwise as multisets"""
    if config.in_order:
        result, tail = diff_ordered(config, path, left, right, compare_nested)
        if result is not None:
            return result
        if not tail:
            return None
        return _failure(FailureType.MISSING_ARRAY_VALUE, path, left, right, left_missing=tail)

    left_missing, right_missing = diff_unordered(config, path, left, right, compare_nested)
    if not left_missing and not right_missing:
        return None
    return _failure(FailureType.MISSING_ARRAY_VALUE, path, left, right, left_missing=left_missing,
        right_missing=right_missing)


def compare_mapping(config: 'EffectiveConfig', path: str, left: 'Mapping', right: 'Mapping') -> 'Optional[FailureData]':
    """
    Compares two mappings key by key.

    Keys of `right` missing from `left` are always reported, first one wins. Only when `config.check_right_missing`
    is set are keys of `left` missing from `right` reported and the values of shared keys compared.
    """
    for key, value in right.items():
        if key not in left:
            return _failure(FailureType.MISSING, '%s.%s' % (path, key), MISSING, value)

    if not config.check_right_missing:
        return None

    for key, value in left.items():
        sub_path = '%s.%s' % (path, key)
        if key not in right:
            return _failure(FailureType.MISSING, sub_path, value, MISSING)
        result = compare_nested(config, sub_path, value, right[key])
        if result is not None:
            return result

    return None


def _is_same(left, right):
    """'is' check, also accepting '==' for two value types of the same type"""
    if left is right:
        return True
    if type(left) is not type(right) or not is_value_type(left):
        return False
    return bool(left == right)


def _run_checker(checker, config, path, left, right):
    log.debug("Using custom checker %r for %s at %r", checker, type_name(left), path)
    try:
        result = checker(config, left, right)
    except (RecursionError, EqualityCheckingError):
        raise
    except Exception as e:
        raise EqualityCheckingError("Custom checker %r failed comparing objects at path %s\na: %s\nb: %s" %
            (checker, repr(path), _limit_str(left), _limit_str(right))) from e

    if result is not None and not isinstance(result, FailureData):
        raise EqualityCheckingError("Custom checker %r must return None or a FailureData, not %s" %
            (checker, repr(type(result).__name__)))
    return result


def _failure(fail_type, path, left, right, left_missing=None, right_missing=None):
    return FailureData(fail_type, left, type_name(left), right, type_name(right), left_missing=left_missing or [],
        right_missing=right_missing or [], path=path)
