from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..arrangements import Arrangements

class TerminalAccessor(Generic[T]):
    def __init__(self, arrangements_instance: 'Arrangements[T]'):
        self._arrangements = arrangements_instance

    def list(self) -> List[Grouping[T]]:
        """materialize every grouping"""
        return self._arrangements._get_data()

    def count(self, predicate: Optional[Predicate[Grouping[T]]] = None) -> int:
        """count groupings, without materializing them when no predicate is given"""
        if predicate is None: return self._arrangements.total
        return sum(1 for grouping in self._arrangements if predicate(grouping))

    def first(self, predicate: Optional[Predicate[Grouping[T]]] = None) -> Grouping[T]:
        """get the first grouping, or the first one satisfying predicate"""
        for grouping in self._arrangements:
            if predicate is None or predicate(grouping): return grouping
        if predicate is None: raise ValueError("arrangement space contains no groupings")
        raise ValueError("no grouping satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[Grouping[T]]] = None,
                         default: Optional[Grouping[T]] = None) -> Optional[Grouping[T]]:
        """get first grouping or default"""
        try: return self.first(predicate)
        except ValueError: return default

    def array(self) -> np.ndarray:
        """label matrix: one row per grouping, one column per element"""
        rows = list(self._arrangements.labels())
        width = len(self._arrangements.elements)
        if not rows:
            return np.empty((0, width), dtype=int)
        return np.array(rows, dtype=int)

    def df(self) -> pd.DataFrame:
        """one row per grouping, one column per group"""
        data = self._arrangements._get_data()
        # object series keep each cell a list instead of letting pandas unpack it
        return pd.DataFrame({
            f"group_{index}": pd.Series([grouping[index] for grouping in data], dtype=object)
            for index in range(len(self._arrangements.group_sizes))
        })
