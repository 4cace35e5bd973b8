"""
Blocked-process report for the Banker's Safety Checker.

Explains an unsafe verdict by naming the processes the safety search could
never finish. The verdict itself stays payload-free.
"""

from typing import List

from models.snapshot import Snapshot
from algorithms.avoidance import run_safety_search


def blocked_processes(snapshot: Snapshot) -> List[int]:
    """
    Find processes whose need can never be satisfied.

    Runs the same ascending-scan search as ``evaluate`` and collects every
    process left unfinished once no pass makes progress.

    Args:
        snapshot: Snapshot to inspect

    Returns:
        Ascending list of blocked process indices (empty iff the snapshot is safe)
    """
    finish, _, _ = run_safety_search(snapshot)
    return [i for i, is_finished in enumerate(finish) if not is_finished]
