"""
'    ( a b ) ( c d e )
'    ( a c ) ( b d e )     s e t p a r t i t i o n
'    ( a d ) ( b c e )     every arrangement of a list
'      . . .   . . .       into groups of fixed size
'    ( d e ) ( a b c )
"""

# expose the main classes
from .enumerator import PartitionEnumerator
from .arrangements import Arrangements

# expose the algorithm helpers
from .enumerator import (
    multinomial,
    initial_labels,
    advance,
    derive_grouping
)

# expose the factory functions
from .factories import (
    partition,
    arrangements,
    parse_sizes,
    synthetic_alphabet,
    from_spec,
    P
)

# expose supporting types
from .types import (
    ConfigurationError,
    Phase,
    Grouping,
    Labels
)

# define what `import *` does
__all__ = [
    "PartitionEnumerator",
    "Arrangements",
    "multinomial",
    "initial_labels",
    "advance",
    "derive_grouping",
    "partition",
    "arrangements",
    "parse_sizes",
    "synthetic_alphabet",
    "from_spec",
    "P",
    "ConfigurationError",
    "Phase",
    "Grouping",
    "Labels"
]
