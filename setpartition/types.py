from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional,
    Dict, List, Tuple, Sequence
)

T = TypeVar('T')
U = TypeVar('U')

Grouping = List[List[T]]
Labels = List[int]
Predicate = Callable[[T], bool]


class ConfigurationError(ValueError):
    """raised when group sizes cannot describe a partition of the element list"""
    pass


class Phase(Enum):
    """where an enumerator stands within one enumeration pass"""
    UNINITIALIZED = 'uninitialized'
    ACTIVE = 'active'
    EXHAUSTED = 'exhausted'

    def __repr__(self) -> str:
        return f"Phase.{self.name}"
