"""
Custom checkers shipped with the package, keyed by the type name they handle.

These make up the `custom_checkers` of the baseline config. Any of them can be replaced by passing a checker for the
same type name, or disabled by listing the type in `reference_only`.
"""

from .namespace import check_namespace
from .ndarray import check_ndarray
from .pattern import check_pattern


BUILTIN_CHECKERS = {
    'ndarray': check_ndarray,
    'Pattern': check_pattern,
    'SimpleNamespace': check_namespace,
}

__all__ = ['BUILTIN_CHECKERS', 'check_namespace', 'check_ndarray', 'check_pattern']
