#!/usr/bin/env python3
"""
Banker's Safety Checker
Main entry point for checking a resource-state snapshot.

Educational tool for demonstrating deadlock avoidance with the Banker's algorithm.
"""

import argparse
import sys
from typing import List, Optional

from models.resource import MalformedSnapshot
from models.result import Safe
from models.snapshot import Snapshot
from utils.scenario_loader import load_snapshot, get_scenario_description, ScenarioLoadError
from utils.logger import SafetyLogger
from algorithms.avoidance import evaluate
from algorithms.detection import blocked_processes


EXIT_SAFE = 0
EXIT_UNSAFE = 1
EXIT_INVALID = 2

# Built-in demo snapshot used when no scenario file is given
REFERENCE_SNAPSHOT = {
    'available': [3, 3, 2],
    'max_demand': [
        [7, 5, 3],
        [3, 2, 2],
        [9, 0, 2],
        [2, 2, 2],
        [4, 3, 3],
    ],
    'allocation': [
        [0, 1, 0],
        [2, 0, 0],
        [3, 0, 2],
        [2, 1, 1],
        [0, 0, 2],
    ],
}


def run_check(snapshot: Snapshot, logger: SafetyLogger) -> int:
    """
    Evaluate a snapshot and report the verdict.

    Args:
        snapshot: Snapshot to check
        logger: Output logger

    Returns:
        EXIT_SAFE or EXIT_UNSAFE
    """
    logger.log_snapshot(snapshot.display())

    result = evaluate(snapshot, logger=logger)

    if isinstance(result, Safe):
        seq_str = " -> ".join(f"P{pid}" for pid in result.order)
        logger.log("System is in a safe state.")
        logger.log(f"Safe sequence: {seq_str or '(no processes)'}")
        return EXIT_SAFE

    blocked = blocked_processes(snapshot)
    pids_str = ", ".join(f"P{pid}" for pid in blocked)
    logger.log("System is NOT in a safe state.")
    logger.log(f"Processes that cannot finish: [{pids_str}]")
    return EXIT_UNSAFE


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the safety checker."""
    parser = argparse.ArgumentParser(
        description="Banker's algorithm safety checker"
    )
    parser.add_argument(
        '--scenario',
        type=str,
        default=None,
        help='Path to scenario JSON file (default: built-in reference snapshot)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Also write output to this file'
    )

    args = parser.parse_args(argv)

    try:
        logger = SafetyLogger(verbose=args.verbose, log_file=args.log_file)
    except OSError as e:
        print(f"[ERROR] Cannot open log file {args.log_file}: {e}")
        return EXIT_INVALID

    try:
        if args.scenario:
            description = get_scenario_description(args.scenario)
            logger.log(f"Scenario: {args.scenario}")
            if description:
                logger.log(f"  {description}")
            snapshot = load_snapshot(args.scenario)
        else:
            logger.log("Scenario: built-in reference snapshot")
            snapshot = Snapshot.from_lists(**REFERENCE_SNAPSHOT)

        return run_check(snapshot, logger)

    except ScenarioLoadError as e:
        logger.log(f"Failed to load scenario: {e}", "error")
        return EXIT_INVALID
    except MalformedSnapshot as e:
        logger.log(f"Malformed snapshot: {e}", "error")
        return EXIT_INVALID
    finally:
        logger.close()


if __name__ == '__main__':
    sys.exit(main())
