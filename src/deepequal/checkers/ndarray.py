"""
Checker for numpy arrays.

Arrays must have the same shape and dtype, then are compared elementwise. NaN's in float/complex arrays are
considered equal to one another. The first differing element (in C order) is reported with an index path like
'[1][0]'. Elements of object arrays are compared with the engine itself, under the same config.
"""

import numpy as np
from ..failure import FailureData, FailureType
from ..properties import check_value_property
from ..pytypes import type_name
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Optional
    from ..config import EffectiveConfig


def _index_path(index):
    return ''.join('[%d]' % i for i in index)


def check_ndarray(config: 'EffectiveConfig', left: 'np.ndarray', right: 'np.ndarray') -> 'Optional[FailureData]':
    failure = check_value_property(left, right, 'shape') or check_value_property(left, right, 'dtype')
    if failure is not None:
        return failure

    if left.dtype == object:
        return _check_object_elements(config, left, right)

    differs = np.asarray(left != right, dtype=bool)
    if left.dtype.kind in 'fc':
        differs &= ~(np.isnan(left) & np.isnan(right))

    if not differs.any():
        return None

    index = tuple(int(i) for i in np.argwhere(differs)[0])
    left_value, right_value = left[index], right[index]
    return FailureData(FailureType.DIFFERENT_VALUES, left_value, type_name(left_value), right_value,
        type_name(right_value), path=_index_path(index))


def _check_object_elements(config, left, right):
    # Imported here since the engine's config imports this package
    from ..equality import compare_nested

    for index in np.ndindex(left.shape):
        result = compare_nested(config, _index_path(index), left[index], right[index])
        if result is not None:
            return result
    return None
