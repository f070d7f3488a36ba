"""Checker for types.SimpleNamespace, compared attribute by attribute like a mapping"""

import dataclasses
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from types import SimpleNamespace
    from typing import Optional
    from ..config import EffectiveConfig
    from ..failure import FailureData


def check_namespace(config: 'EffectiveConfig', left: 'SimpleNamespace', right: 'SimpleNamespace') -> 'Optional[FailureData]':
    """Compares the attributes of two namespaces with the same rules the engine applies to dicts.

    Reported paths start at the attribute name, eg: 'origin.x'.
    """
    # Imported here since the engine's config imports this package
    from ..equality import compare_mapping

    result = compare_mapping(config, '', vars(left), vars(right))
    if result is None:
        return None
    return dataclasses.replace(result, path=result.path.lstrip('.'))
