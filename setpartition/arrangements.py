from __future__ import annotations

from itertools import islice
from .types import *
from .enumerator import PartitionEnumerator

# --- accessors ---
from .extensions.terminal import TerminalAccessor


class Arrangements(Generic[T]):
    """
    re-iterable collection of every grouping of a list into fixed-size groups.
    each iteration drives its own enumerator, so nested loops do not interfere.
    """

    def __init__(self, elements: Iterable[T], group_sizes: Iterable[int] = ()):
        # validate eagerly so a bad configuration fails here, not on first iteration
        self._template: PartitionEnumerator[T] = PartitionEnumerator(elements, group_sizes)
        self._cached_result: Optional[List[Grouping[T]]] = None
        self._is_cached = False
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    @property
    def elements(self) -> Tuple[T, ...]: return self._template.elements

    @property
    def group_sizes(self) -> Tuple[int, ...]: return self._template.group_sizes

    @property
    def total(self) -> int:
        """number of groupings, exact for spaces of any size"""
        return self._template.total

    def _spawn(self) -> PartitionEnumerator[T]:
        """fresh enumerator; sizes already cover every element so no synthetic group is added twice"""
        return PartitionEnumerator(self._template.elements, self._template.group_sizes)

    def _get_data(self) -> List[Grouping[T]]:
        """get a copy of every grouping, caching the originals"""
        if not self._is_cached:
            self._cached_result = list(self._spawn())
            self._is_cached = True
        return [[list(group) for group in grouping] for grouping in self._cached_result]

    def labels(self) -> Iterator[Tuple[int, ...]]:
        """label sequence of each grouping, in generation order"""
        enumerator = self._spawn()
        while enumerator.next() is not None:
            yield tuple(enumerator.labels)

    def take(self, count: int) -> List[Grouping[T]]:
        """first count groupings"""
        return list(islice(self, max(count, 0)))

    def where(self, predicate: Predicate[Grouping[T]]) -> List[Grouping[T]]:
        """groupings satisfying predicate"""
        return [grouping for grouping in self if predicate(grouping)]

    def __iter__(self) -> Iterator[Grouping[T]]:
        return self._spawn()

    def __len__(self) -> int:
        # len() is capped at sys.maxsize; use total for very large spaces
        return self._template.total

    def __repr__(self) -> str:
        return f"Arrangements(elements={len(self.elements)}, group_sizes={list(self.group_sizes)})"
