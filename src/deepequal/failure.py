"""
The result of a failed deep comparison, and the errors raised around it
"""

import dataclasses
from enum import Enum
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any


_MAX_STR_LEN = 1000


class FailureType(Enum):
    """Why a :func:`~deepequal.equality.deep_equal` call failed"""

    DIFFERENT_TYPES = 'different_types'
    """The two values had different type names. See `left_type` and `right_type`."""

    DIFFERENT_VALUES = 'different_values'
    """Two value-compared objects (ints, strings, dates, ...) were not '=='."""

    DIFFERENT_REFERENCE = 'different_reference'
    """Two identity-compared objects were not the same object."""

    MISSING_ARRAY_VALUE = 'missing_array_value'
    """Elements of one sequence had no match in the other. See `left_missing` and `right_missing`."""

    MISSING = 'missing'
    """A key was present in one mapping but not the other. See `path`."""


@dataclasses.dataclass(frozen=True)
class FailureData:
    """Where and why a comparison failed.

    `left_value` and `right_value` are the sub-values at the point of divergence, which are only the original
    arguments when the failure happened at the root. When a key is absent from one side of a mapping, that side's
    value is :data:`~deepequal.pytypes.MISSING`.

    `left_missing` holds elements of the right sequence that had no match on the left, and `right_missing` holds
    elements of the left sequence with no match on the right. Both are empty unless `fail_type` is
    MISSING_ARRAY_VALUE.
    """

    fail_type: FailureType
    left_value: 'Any'
    left_type: str
    right_value: 'Any'
    right_type: str
    left_missing: list = dataclasses.field(default_factory=list)
    right_missing: list = dataclasses.field(default_factory=list)
    path: str = ''

    def __str__(self):
        lines = ["%s at %s" % (self.fail_type.name, repr(self.path) if self.path else 'root'),
            "left (%s): %s" % (self.left_type, _limit_str(self.left_value)),
            "right (%s): %s" % (self.right_type, _limit_str(self.right_value))]
        if self.left_missing:
            lines.append("left is missing: %s" % _limit_str(self.left_missing))
        if self.right_missing:
            lines.append("right is missing: %s" % _limit_str(self.right_missing))
        return '\n'.join(lines)


def _limit_str(a, limit=_MAX_STR_LEN):
    a_str = repr(a)
    return a_str if len(a_str) < limit else (a_str[:limit] + '...')


class EqualityError(AssertionError):
    """Error raised whenever :func:`~deepequal.equality.deep_equal` finds a difference and `raise_err=True`"""

    def __init__(self, failure: 'FailureData', message=None):
        self.failure = failure
        message = "Values are not deeply equal" if message is None else message
        super().__init__("%s\n%s" % (message, failure))


class EqualityCheckingError(Exception):
    """Error raised whenever there is an unexpected problem attempting to check equality between two objects"""
