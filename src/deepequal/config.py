"""
Configuration for :func:`~deepequal.equality.deep_equal`.

A call's effective configuration is built from three layers, later layers winning:

    1. the baseline (:data:`BASELINE_CONFIG`, holding the built-in custom checkers)
    2. the defaults held by a :class:`DefaultConfigStore` (the process-wide one unless another store is passed)
    3. the config passed to the call itself

Scalars are overwritten by later layers when they are set (not None), `ignore` and `reference_only` are
concatenated, and `custom_checkers` are merged key by key.
"""

import collections.abc
import dataclasses
import logging
import threading
from types import MappingProxyType
from typing import TYPE_CHECKING
from typing_extensions import Self

from .checkers import BUILTIN_CHECKERS
from .cycles import VisitedPairs
from .pytypes import as_type_name


if TYPE_CHECKING:
    from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, Union
    from .failure import FailureData

    CustomChecker = Callable[['EffectiveConfig', Any, Any], Optional[FailureData]]
    TypeNames = Iterable[Union[str, type]]
    ConfigLike = Union['DeepEqualConfig', Mapping[str, Any], None]


log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class DeepEqualConfig:
    """A (possibly partial) set of settings for :func:`~deepequal.equality.deep_equal`.

    Args:
        ignore (Iterable[Union[str, type]]): types to skip entirely. Whenever the left or right value is one of these
            types, the pair is treated as equal.
        reference_only (Iterable[Union[str, type]]): types that skip their custom checker and whose unequal values
            are reported as DIFFERENT_REFERENCE instead of DIFFERENT_VALUES. Equal values are still equal, and
            sequences and mappings are still recursed into.
        custom_checkers (Mapping[Union[str, type], CustomChecker]): functions called as `checker(config, left,
            right)` to compare values of the given type instead of the default logic. They must return None if the
            values are equal, or a :class:`~deepequal.failure.FailureData`.
        check_right_missing (Optional[bool]): if True, sequences also report left elements missing from the right,
            and mappings also report left keys missing from the right (and compare their values). None inherits from
            the layer below. Defaults to True in the baseline.
        in_order (Optional[bool]): if True, sequences are compared index by index instead of as multisets. None
            inherits from the layer below. Defaults to False in the baseline.

    Types may be given either as classes or by their ``__name__``.
    """

    ignore: 'Tuple[str, ...]' = ()
    reference_only: 'Tuple[str, ...]' = ()
    custom_checkers: 'Mapping[str, CustomChecker]' = dataclasses.field(default_factory=dict)
    check_right_missing: 'Optional[bool]' = None
    in_order: 'Optional[bool]' = None

    def __post_init__(self):
        object.__setattr__(self, 'ignore', _type_names(self.ignore, 'ignore'))
        object.__setattr__(self, 'reference_only', _type_names(self.reference_only, 'reference_only'))

        checkers = {}
        for t, checker in dict(self.custom_checkers).items():
            if not callable(checker):
                raise TypeError("Custom checker for type %s is not callable: %s" % (repr(t), repr(checker)))
            checkers[as_type_name(t)] = checker
        object.__setattr__(self, 'custom_checkers', checkers)

        for name in ('check_right_missing', 'in_order'):
            value = getattr(self, name)
            if value is not None and not isinstance(value, bool):
                raise TypeError("`%s` must be a bool or None, not %s" % (name, repr(type(value).__name__)))

    @classmethod
    def from_dict(cls, d: 'Mapping[str, Any]') -> Self:
        """Builds a config from a mapping of setting names to values, raising TypeError on unknown names"""
        unknown = set(d) - {f.name for f in dataclasses.fields(cls)}
        if unknown:
            raise TypeError("Unknown deep equal config settings: %s" % ', '.join(sorted(map(repr, unknown))))
        return cls(**d)

    @classmethod
    def coerce(cls, config: 'ConfigLike') -> 'Optional[Self]':
        if config is None or isinstance(config, cls):
            return config
        if isinstance(config, collections.abc.Mapping):
            return cls.from_dict(config)
        raise TypeError("Expected a DeepEqualConfig, a dict or None, not %s" % repr(type(config).__name__))

    def merge(self, other: 'ConfigLike') -> Self:
        """Returns a new config with `other` layered on top of this one"""
        other = self.coerce(other)
        if other is None:
            return self
        return self.__class__(
            ignore=self.ignore + other.ignore,
            reference_only=self.reference_only + other.reference_only,
            custom_checkers={**self.custom_checkers, **other.custom_checkers},
            check_right_missing=self.check_right_missing if other.check_right_missing is None else other.check_right_missing,
            in_order=self.in_order if other.in_order is None else other.in_order,
        )


def _type_names(types: 'TypeNames', setting: str) -> 'Tuple[str, ...]':
    if isinstance(types, (str, type)):
        raise TypeError("`%s` must be an iterable of types or type names, not a single %s"
            % (setting, repr(type(types).__name__)))
    return tuple(as_type_name(t) for t in types)


def merge_configs(*configs: 'ConfigLike') -> 'DeepEqualConfig':
    """Merges any number of (partial) configs into one, later configs taking precedence. None entries are skipped."""
    merged = DeepEqualConfig()
    for config in configs:
        merged = merged.merge(config)
    return merged


BASELINE_CONFIG = DeepEqualConfig(custom_checkers=BUILTIN_CHECKERS, check_right_missing=True, in_order=False)


@dataclasses.dataclass(frozen=True)
class EffectiveConfig:
    """The fully resolved, read-only settings of one :func:`~deepequal.equality.deep_equal` call.

    This is what custom checkers receive. `visited` is the call's cycle cache and is never shared between calls.
    """

    ignore: 'frozenset[str]'
    reference_only: 'frozenset[str]'
    custom_checkers: 'Mapping[str, CustomChecker]'
    check_right_missing: bool
    in_order: bool
    visited: VisitedPairs = dataclasses.field(default_factory=VisitedPairs, compare=False, repr=False)

    @classmethod
    def resolve(cls, *configs: 'ConfigLike') -> Self:
        """Merges the baseline config with `configs` and freezes the result"""
        merged = merge_configs(BASELINE_CONFIG, *configs)
        return cls(
            ignore=frozenset(merged.ignore),
            reference_only=frozenset(merged.reference_only),
            custom_checkers=MappingProxyType(dict(merged.custom_checkers)),
            check_right_missing=merged.check_right_missing,
            in_order=merged.in_order,
        )


class DefaultConfigStore:
    """Holds the defaults every :func:`~deepequal.equality.deep_equal` call inherits from.

    Setting a config replaces the stored one, it does not merge with it. The module keeps one process-wide instance
    (used through :func:`set_default_config`, :func:`reset_default_config` and :func:`get_default_config`), but
    callers can make their own and pass it to `deep_equal(..., defaults=store)` to keep their defaults isolated.
    """

    def __init__(self, config: 'ConfigLike' = None):
        self._lock = threading.Lock()
        self._config = DeepEqualConfig.coerce(config) or DeepEqualConfig()

    def set(self, config: 'ConfigLike') -> None:
        config = DeepEqualConfig.coerce(config) or DeepEqualConfig()
        with self._lock:
            self._config = config
        log.debug("Default deep equal config set to %r", config)

    def reset(self) -> None:
        with self._lock:
            self._config = DeepEqualConfig()
        log.debug("Default deep equal config reset")

    def get(self) -> 'DeepEqualConfig':
        with self._lock:
            return self._config


default_store = DefaultConfigStore()


def set_default_config(config: 'ConfigLike') -> None:
    """Replaces the process-wide default config inherited by all deep_equal() calls"""
    default_store.set(config)


def reset_default_config() -> None:
    """Resets the process-wide default config, the same as never having called :func:`set_default_config`"""
    default_store.reset()


def get_default_config() -> 'DeepEqualConfig':
    """Returns the current process-wide default config"""
    return default_store.get()
