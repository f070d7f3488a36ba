"""
Cycle detection for a single deep comparison
"""

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Dict, Tuple


class VisitedPairs:
    """
    Remembers every (left, right) pair of composite objects compared during one top-level call.

    Pairs are keyed on the ids of both objects, in order, so (a, b) and (b, a) are different pairs. The objects
    themselves are held until the call ends so their ids cannot be handed out again mid-traversal.
    """

    def __init__(self):
        self._pairs: 'Dict[Tuple[int, int], Tuple[Any, Any]]' = {}

    def seen(self, left: 'Any', right: 'Any') -> 'bool':
        """Returns True if this exact pair was compared before, otherwise records it and returns False"""
        key = (id(left), id(right))
        if key in self._pairs:
            return True
        self._pairs[key] = (left, right)
        return False

    def __len__(self):
        return len(self._pairs)
