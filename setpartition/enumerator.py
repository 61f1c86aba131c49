import logging
import math
import operator
from .types import *

logger = logging.getLogger(__name__)


# --- label sequence helpers ---

def multinomial(sizes: Iterable[int]) -> int:
    """number of distinct label sequences for the given group sizes: (sum sizes)! / prod(size!)"""
    total, placed = 1, 0
    for size in sizes:
        placed += size
        total *= math.comb(placed, size)
    return total


def initial_labels(sizes: Sequence[int]) -> Labels:
    """smallest labeling: group 0 repeated sizes[0] times, then group 1, and so on"""
    labels = []
    for group, size in enumerate(sizes):
        labels.extend([group] * size)
    return labels


def advance(labels: Labels) -> bool:
    """
    steps labels, in place, to the next lexicographically larger arrangement of the same multiset.
    returns false and leaves labels untouched when it is already the largest one.
    """
    pivot = len(labels) - 2
    while pivot >= 0 and labels[pivot] >= labels[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        return False

    # the suffix after the pivot is non-increasing, so the rightmost larger label is the smallest one
    swap = len(labels) - 1
    while labels[swap] <= labels[pivot]:
        swap -= 1
    labels[pivot], labels[swap] = labels[swap], labels[pivot]

    # still non-increasing after the swap, reversing sorts it
    labels[pivot + 1:] = labels[:pivot:-1]
    return True


def derive_grouping(elements: Sequence[T], labels: Sequence[int], group_count: int) -> Grouping[T]:
    """build fresh groups from labels, keeping the original element order inside each group"""
    groups = [[] for _ in range(group_count)]
    for element, label in zip(elements, labels):
        groups[label].append(element)
    return groups


def _checked_size(size: Any) -> int:
    if isinstance(size, bool):
        raise ConfigurationError(f"group size must be an integer, got {size!r}")
    try:
        value = operator.index(size)
    except TypeError:
        raise ConfigurationError(f"group size must be an integer, got {size!r}") from None
    if value < 0:
        raise ConfigurationError(f"group size must not be negative, got {value}")
    return value


# --- enumerator ---

class PartitionEnumerator(Generic[T]):
    """
    enumerates every arrangement of a list into groups of fixed sizes.

    order inside a group is irrelevant, order of the groups is not: with sizes [2, 2]
    (a b) (c d) is produced and (b a) (d c) never is, while (c d) (a b) is a
    separate grouping of its own.

    the enumerator keeps one label per element and walks the multiset permutations
    of those labels in place. next() returns None once all of them have been seen.
    """

    def __init__(self, elements: Iterable[T], group_sizes: Iterable[int] = ()):
        self._elements: Tuple[T, ...] = tuple(elements)
        sizes = [_checked_size(size) for size in group_sizes]

        requested, available = sum(sizes), len(self._elements)
        if requested > available:
            raise ConfigurationError(
                f"sum of group sizes ({requested}) exceeds available elements ({available})")

        self._has_synthetic_group = requested < available
        if self._has_synthetic_group:
            sizes.append(available - requested)

        self._group_sizes: Tuple[int, ...] = tuple(sizes)
        self._labels: Optional[Labels] = None
        self._phase = Phase.UNINITIALIZED
        self._emitted = 0
        logger.debug(f"partition enumerator over {available} elements, sizes {self._group_sizes}"
                     f"{' (synthetic trailing group)' if self._has_synthetic_group else ''}")

    @property
    def elements(self) -> Tuple[T, ...]: return self._elements

    @property
    def group_sizes(self) -> Tuple[int, ...]: return self._group_sizes

    @property
    def group_count(self) -> int: return len(self._group_sizes)

    @property
    def has_synthetic_group(self) -> bool: return self._has_synthetic_group

    @property
    def phase(self) -> Phase: return self._phase

    @property
    def emitted(self) -> int: return self._emitted

    @property
    def total(self) -> int:
        """groupings produced by one full pass"""
        if not self._elements:
            return 0
        return multinomial(self._group_sizes)

    @property
    def labels(self) -> Optional[Labels]:
        """copy of the current label sequence, none unless a grouping is current"""
        return list(self._labels) if self._phase is Phase.ACTIVE else None

    @property
    def current(self) -> Optional[Grouping[T]]:
        """the most recently returned grouping, rebuilt fresh"""
        if self._phase is not Phase.ACTIVE:
            return None
        return derive_grouping(self._elements, self._labels, self.group_count)

    def next(self) -> Optional[Grouping[T]]:
        """return the next grouping, or none when every arrangement has been produced"""
        if self._phase is Phase.EXHAUSTED:
            return None

        if self._phase is Phase.UNINITIALIZED:
            # an empty list never yields, not even an empty grouping
            if not self._elements:
                self._exhaust()
                return None
            self._labels = initial_labels(self._group_sizes)
            self._phase = Phase.ACTIVE
        elif not advance(self._labels):
            self._exhaust()
            return None

        self._emitted += 1
        return derive_grouping(self._elements, self._labels, self.group_count)

    def reset(self) -> 'PartitionEnumerator[T]':
        """rewind to the first arrangement"""
        logger.debug(f"partition enumerator reset after {self._emitted} groupings")
        self._labels = None
        self._phase = Phase.UNINITIALIZED
        self._emitted = 0
        return self

    def _exhaust(self):
        self._labels = None
        self._phase = Phase.EXHAUSTED
        logger.debug(f"partition enumerator exhausted after {self._emitted} groupings")

    def __iter__(self) -> Iterator[Grouping[T]]:
        return self

    def __next__(self) -> Grouping[T]:
        grouping = self.next()
        if grouping is None:
            raise StopIteration
        return grouping

    def __repr__(self) -> str:
        return (f"PartitionEnumerator(elements={len(self._elements)}, "
                f"group_sizes={list(self._group_sizes)}, phase={self._phase.value})")
