from .types import *
from .enumerator import PartitionEnumerator
from .arrangements import Arrangements

def partition(elements: Iterable[T], group_sizes: Iterable[int] = ()) -> PartitionEnumerator[T]:
    """create a stateful enumerator"""
    return PartitionEnumerator(elements, group_sizes)

def arrangements(elements: Iterable[T], group_sizes: Iterable[int] = ()) -> Arrangements[T]:
    """create a re-iterable collection of groupings"""
    return Arrangements(elements, group_sizes)

def parse_sizes(text: str, separator: str = ":") -> List[int]:
    """parse group sizes such as '3:2'; blank text means no groups"""
    text = text.strip()
    if not text:
        return []
    sizes = []
    for part in text.split(separator):
        try:
            sizes.append(int(part.strip()))
        except ValueError:
            raise ConfigurationError(f"invalid group size {part!r} in {text!r}") from None
    return sizes

def synthetic_alphabet(count: int) -> List[str]:
    """labels a, b, ..., z, aa, ab, ... in the order a string increment produces them"""
    letters = 'abcdefghijklmnopqrstuvwxyz'
    result = []
    for index in range(count):
        name = ''
        index += 1
        while index:
            index, offset = divmod(index - 1, len(letters))
            name = letters[offset] + name
        result.append(name)
    return result

def from_spec(text: str = "3:2", separator: str = ":") -> PartitionEnumerator[str]:
    """enumerator over a synthetic alphabet sized to fit the given group sizes"""
    sizes = parse_sizes(text, separator)
    # negative entries are rejected by the enumerator, keep them out of the alphabet length
    return PartitionEnumerator(synthetic_alphabet(sum(max(size, 0) for size in sizes)), sizes)

# --- aliases ---
P = arrangements
