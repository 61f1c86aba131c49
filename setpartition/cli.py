import json
import logging
import sys
from dataclasses import dataclass, field, asdict
from typing import List, Optional, Sequence

from .enumerator import PartitionEnumerator
from .factories import parse_sizes, synthetic_alphabet
from .types import ConfigurationError, Grouping

logger = logging.getLogger(__name__)


@dataclass
class DriverConfig:
    """configuration for the command line driver"""
    group_sizes: List[int] = field(default_factory=lambda: [3, 2])
    elements: Optional[List[str]] = None  # synthetic alphabet when not given
    output_format: str = 'text'  # text, json
    count_only: bool = False
    limit: Optional[int] = None
    verbose: bool = False

    def resolved_elements(self) -> List[str]:
        if self.elements is not None:
            return list(self.elements)
        return synthetic_alphabet(sum(max(size, 0) for size in self.group_sizes))


def format_grouping(grouping: Grouping, output_format: str = 'text') -> str:
    """render one grouping as a single output line"""
    if output_format == 'json':
        return json.dumps(grouping)
    return ' '.join('(' + ' '.join(str(item) for item in group) + ')' for group in grouping)


def run(config: DriverConfig, out=None) -> int:
    """enumerate according to config, one line per grouping; returns the groupings written, 0 with count_only"""
    out = sys.stdout if out is None else out
    enumerator = PartitionEnumerator(config.resolved_elements(), config.group_sizes)

    if config.count_only:
        print(enumerator.total, file=out)
        return 0

    written = 0
    while config.limit is None or written < config.limit:
        grouping = enumerator.next()
        if grouping is None:
            break
        print(format_grouping(grouping, config.output_format), file=out)
        written += 1
    return written


# command line interface for the driver
def create_cli_interface():
    """create command line interface for the partition driver"""
    import argparse

    parser = argparse.ArgumentParser(
        description='Enumerate every arrangement of a set into groups of fixed size',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  setpartition 3:2
  setpartition 1:1:1 --output json
  setpartition 2 --elements red,green,blue,cyan --limit 3
        '''
    )

    parser.add_argument('sizes', nargs='?', default='3:2', help='Colon separated group sizes (default: 3:2)')
    parser.add_argument('--elements', help='Comma separated elements (default: a, b, c, ... to fit the sizes)')
    parser.add_argument('--output', choices=['text', 'json'], default='text', help='Output format (default: text)')
    parser.add_argument('--count', action='store_true', help='Only print the number of arrangements')
    parser.add_argument('--limit', type=int, help='Stop after this many arrangements')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """main entry point for the partition driver"""
    parser = create_cli_interface()
    args = parser.parse_args(argv)

    # configure minimal logging
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.limit is not None and args.limit < 0:
        parser.error('--limit must not be negative')

    try:
        config = DriverConfig(
            group_sizes=parse_sizes(args.sizes),
            elements=args.elements.split(',') if args.elements is not None else None,
            output_format=args.output,
            count_only=args.count,
            limit=args.limit,
            verbose=args.verbose,
        )
        logger.debug(f"config: {asdict(config)}")
        written = run(config)
    except ConfigurationError as e:
        logger.error(f"invalid partition: {e}")
        return 2

    logger.debug(f"wrote {written} arrangements")
    return 0


if __name__ == "__main__":
    sys.exit(main())
