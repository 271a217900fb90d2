"""Command line entry point for walktreelib.

Usage:
    walktreelib                          # Stock session (2x3 tree, 3x2 binary tree)
    walktreelib --depth 3 --branching 2  # Different general tree
    walktreelib -s pre -s queue          # Only some sections
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .api import run_session
from .config import (
    DEFAULT_STRATEGIES,
    PerformanceConfig,
    SessionConfig,
    TreeShape,
    parse_strategy,
)
from .planning import CapabilityMismatchError, ExecutionPlan

logger = logging.getLogger(__name__)

_FORMAT = "%(levelname)s %(asctime)s [%(name)s] %(message)s"
_DATE_FORMAT = "%m-%d %H:%M:%S"
_LEVEL_ENV = "WALKTREELIB_LOGGING_LEVEL"


def _default_log_level() -> str:
    """Get logging level from environment variable or default to WARNING."""
    return os.getenv(_LEVEL_ENV, "WARNING").upper()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for command line use.

    Library modules only create loggers; handlers are installed here.
    """
    logging.basicConfig(
        level=(level or _default_log_level()).upper(),
        format=_FORMAT,
        datefmt=_DATE_FORMAT,
        stream=sys.stderr,
    )


def _strategy_arg(value: str):
    try:
        return parse_strategy(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="walktreelib",
        description="Build synthetic trees and print them in several traversal orders.",
    )
    parser.add_argument("--depth", type=int, default=2,
                        help="Depth of the general tree (default: 2)")
    parser.add_argument("--branching", type=int, default=3,
                        help="Branching factor of the general tree (default: 3)")
    parser.add_argument("--binary-depth", type=int, default=3,
                        help="Depth of the tree used for in-order traversal (default: 3)")
    parser.add_argument("--binary-branching", type=int, default=2,
                        help="Branching factor of the in-order tree (default: 2)")
    parser.add_argument("-s", "--strategy", dest="strategies", action="append",
                        type=_strategy_arg, metavar="NAME",
                        help="Strategy to run: pre, post, in, stack, queue "
                             "(repeatable; default: all)")
    parser.add_argument("--max-nodes", type=int,
                        default=PerformanceConfig().max_nodes,
                        help="Refuse to build trees larger than this")
    parser.add_argument("--explain", action="store_true",
                        help="Print the execution plan and exit")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help=f"Logging level (default: ${_LEVEL_ENV} or WARNING)")
    return parser


def config_from_args(args: argparse.Namespace) -> SessionConfig:
    """Translate parsed arguments into a SessionConfig."""
    return SessionConfig(
        general=TreeShape(depth=args.depth, branching=args.branching),
        binary=TreeShape(depth=args.binary_depth, branching=args.binary_branching),
        strategies=tuple(args.strategies) if args.strategies else DEFAULT_STRATEGIES,
        performance=PerformanceConfig(max_nodes=args.max_nodes),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    config = config_from_args(args)
    try:
        if args.explain:
            print(ExecutionPlan(config).explain())
        else:
            run_session(config, sys.stdout)
    except CapabilityMismatchError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
