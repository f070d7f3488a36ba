"""
Tests for the deepequal.config file: merging, the default store and resolving a call's config.
"""

import pytest
from deepequal.checkers import BUILTIN_CHECKERS
from deepequal.config import (DeepEqualConfig, DefaultConfigStore, EffectiveConfig, get_default_config,
    merge_configs, reset_default_config, set_default_config)
from deepequal.equality import deep_equal
from deepequal.failure import FailureType


def _checker_a(config, left, right):
    return None


def _checker_b(config, left, right):
    return None


def test_type_names():
    """Types can be configured as classes or names, and end up as names"""
    config = DeepEqualConfig(ignore=[int, 'str'], reference_only=(float,), custom_checkers={bytes: _checker_a})
    assert config.ignore == ('int', 'str')
    assert config.reference_only == ('float',)
    assert config.custom_checkers == {'bytes': _checker_a}


def test_bad_settings():
    """Malformed settings raise TypeError"""
    with pytest.raises(TypeError):
        DeepEqualConfig(ignore='int')
    with pytest.raises(TypeError):
        DeepEqualConfig(ignore=[3])
    with pytest.raises(TypeError):
        DeepEqualConfig(custom_checkers={'int': 'not callable'})
    with pytest.raises(TypeError):
        DeepEqualConfig(in_order='yes')
    with pytest.raises(TypeError):
        DeepEqualConfig.from_dict({'inOrder': True})
    with pytest.raises(TypeError):
        deep_equal(1, 1, not_a_setting=True)
    with pytest.raises(TypeError):
        deep_equal(1, 1, config=['in_order'])


def test_merge_configs():
    """Scalars are overwritten when set, lists are concatenated and checkers merged by key"""
    merged = merge_configs(
        DeepEqualConfig(ignore=['int'], custom_checkers={'a': _checker_a, 'b': _checker_a}, in_order=True),
        None,
        {'ignore': ['str'], 'reference_only': ['float'], 'custom_checkers': {'b': _checker_b}},
        DeepEqualConfig(check_right_missing=False),
    )
    assert merged.ignore == ('int', 'str')
    assert merged.reference_only == ('float',)
    assert merged.custom_checkers == {'a': _checker_a, 'b': _checker_b}
    assert merged.in_order is True
    assert merged.check_right_missing is False

    assert merge_configs() == DeepEqualConfig()
    assert merge_configs({'in_order': True}, {'in_order': False}).in_order is False


def test_resolve():
    """The baseline fills in everything not given"""
    config = EffectiveConfig.resolve()
    assert config.check_right_missing is True
    assert config.in_order is False
    assert config.ignore == frozenset()
    assert config.reference_only == frozenset()
    assert dict(config.custom_checkers) == BUILTIN_CHECKERS

    config = EffectiveConfig.resolve({'in_order': True}, {'custom_checkers': {'ndarray': _checker_a}})
    assert config.in_order is True
    assert config.custom_checkers['ndarray'] is _checker_a
    assert config.custom_checkers['Pattern'] is BUILTIN_CHECKERS['Pattern']

    with pytest.raises(TypeError):
        config.custom_checkers['int'] = _checker_a


def test_resolve_fresh_cache():
    """Every resolved config gets its own cycle cache"""
    a, b = EffectiveConfig.resolve(), EffectiveConfig.resolve()
    assert a.visited is not b.visited
    a.visited.seen([], [])
    assert len(a.visited) == 1 and len(b.visited) == 0


def test_default_config():
    """set/get/reset of the process-wide defaults, which replace instead of merging"""
    assert get_default_config() == DeepEqualConfig()

    set_default_config({'ignore': ['int']})
    set_default_config(DeepEqualConfig(in_order=True))
    assert get_default_config() == DeepEqualConfig(in_order=True)
    assert get_default_config().ignore == ()

    reset_default_config()
    assert get_default_config() == DeepEqualConfig()


def test_precedence():
    """baseline < defaults < call config < call keyword overrides"""
    set_default_config({'in_order': True, 'check_right_missing': False})

    assert deep_equal({'a': 1, 'b': 2}, {'a': 1}) is None  # check_right_missing=False from the defaults
    assert deep_equal([1, 2], [2, 1], {'in_order': False}) is None
    assert deep_equal([1, 2], [2, 1], {'in_order': False}, in_order=True).path == '[0]'


def test_separate_store():
    """A store of its own keeps defaults away from the process-wide ones"""
    store = DefaultConfigStore({'ignore': ['int']})
    assert deep_equal(1, 2, defaults=store) is None
    assert deep_equal(1, 2).fail_type is FailureType.DIFFERENT_VALUES

    store.set({'in_order': True})
    assert deep_equal(1, 2, defaults=store) is not None
    assert deep_equal([1, 2], [2, 1], defaults=store).path == '[0]'

    store.reset()
    assert store.get() == DeepEqualConfig()
