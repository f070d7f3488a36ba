from .config import (DeepEqualConfig, DefaultConfigStore, EffectiveConfig, get_default_config, merge_configs,
    reset_default_config, set_default_config)
from .equality import compare_nested, deep_equal, equal
from .failure import EqualityCheckingError, EqualityError, FailureData, FailureType
from .properties import check_array_property, check_reference_property, check_value_property
from .pytypes import MISSING

__all__ = ['DeepEqualConfig', 'DefaultConfigStore', 'EffectiveConfig', 'get_default_config', 'merge_configs',
    'reset_default_config', 'set_default_config', 'compare_nested', 'deep_equal', 'equal', 'EqualityCheckingError',
    'EqualityError', 'FailureData', 'FailureType', 'check_array_property', 'check_reference_property',
    'check_value_property', 'MISSING']
