"""
Deadlock Avoidance Algorithm (Banker's safety check) for the Safety Checker.

Decides whether a snapshot is safe: whether some order exists in which every
process can obtain its remaining need and finish.
"""

import numpy as np
from typing import List, Optional, Sequence, Tuple

from models.snapshot import Snapshot
from models.result import Safe, Unsafe, SafetyResult
from analysis.events import EvaluationEvent, EvaluationTrace, EventType
from utils.logger import SafetyLogger


def run_safety_search(
    snapshot: Snapshot,
    logger: Optional[SafetyLogger] = None,
    trace: Optional[EvaluationTrace] = None
) -> Tuple[np.ndarray, List[int], int]:
    """
    Greedy fixed-point search shared by evaluation and blocked-process reporting.

    Returns:
        Tuple of (finish vector, completion order, number of passes run)
    """
    # Step 1: Need[i] = Max[i] - Allocation[i]
    need = snapshot.need_matrix()

    # Step 2: Work = copy of Available (snapshot arrays are read-only)
    work = snapshot.available.copy()
    finish = np.zeros(snapshot.process_count, dtype=bool)
    order: List[int] = []

    # Step 3-4: Scan in ascending index order until a pass makes no progress.
    # Released allocation is visible to later processes in the same pass.
    pass_number = 0
    made_progress = True
    while made_progress:
        made_progress = False
        pass_number += 1

        if logger:
            logger.log_pass(pass_number, work)
        if trace is not None:
            trace.add(EvaluationEvent(
                pass_number=pass_number,
                event_type=EventType.PASS_START,
                work_before=work.tolist()
            ))

        for i in range(snapshot.process_count):
            if finish[i]:
                continue

            if np.all(need[i] <= work):
                if logger:
                    logger.log_grant(pass_number, i, need[i], work)
                work_before = work.tolist()

                # Process can finish: add its allocation back to work
                work += snapshot.allocation[i]
                finish[i] = True
                order.append(i)
                made_progress = True

                if trace is not None:
                    trace.add(EvaluationEvent(
                        pass_number=pass_number,
                        event_type=EventType.PROCESS_FINISHED,
                        process_id=i,
                        work_before=work_before,
                        work_after=work.tolist()
                    ))

    return finish, order, pass_number


def evaluate(
    snapshot: Snapshot,
    logger: Optional[SafetyLogger] = None,
    trace: Optional[EvaluationTrace] = None
) -> SafetyResult:
    """
    Check if a snapshot is safe using the Banker's safety algorithm.

    Algorithm:
    1. Need = Max - Allocation
    2. Initialize Work = Available, Finish = [False] * P, Order = []
    3. Scan i = 0..P-1; for each unfinished i with Need[i] <= Work:
       Work += Allocation[i], Finish[i] = True, append i to Order
    4. Repeat the scan until a whole pass finishes nobody
    5. SAFE if every Finish[i] is True, otherwise UNSAFE

    Time Complexity: O(P²×R)

    Args:
        snapshot: Snapshot to evaluate (never modified)
        logger: Optional logger for pass-by-pass debug output
        trace: Optional trace collecting one event per pass, grant and verdict

    Returns:
        Safe(order) if all processes can finish, otherwise Unsafe()

    References:
        Silberschatz, A., Galvin, P. B., & Gagne, G. (2018).
        Operating System Concepts (10th ed.). Chapter 7.5: Deadlock Avoidance.
    """
    finish, order, passes = run_safety_search(snapshot, logger, trace)

    # Step 5: No partial order is reported for an unsafe snapshot
    if np.all(finish):
        result = Safe(order=tuple(order))
    else:
        result = Unsafe()

    if trace is not None:
        trace.add(EvaluationEvent(
            pass_number=passes,
            event_type=EventType.VERDICT,
            message=str(result)
        ))
    if logger:
        logger.log_verdict(result)

    return result


def is_safe_state(snapshot: Snapshot) -> Tuple[bool, Optional[List[int]]]:
    """
    Check if a snapshot is safe.

    Args:
        snapshot: Snapshot to evaluate

    Returns:
        Tuple of (is_safe, safe_sequence if exists else None)
    """
    result = evaluate(snapshot)
    if isinstance(result, Safe):
        return True, list(result.order)
    return False, None


def verify_safe_order(snapshot: Snapshot, order: Sequence[int]) -> bool:
    """
    Replay a completion order without re-deriving it.

    The order is valid when it names every process exactly once and each
    process's need fits in the work accumulated by the processes before it.

    Args:
        snapshot: Snapshot the order was computed for
        order: Candidate completion order

    Returns:
        True if the order is a valid safe sequence
    """
    if sorted(order) != list(range(snapshot.process_count)):
        return False

    need = snapshot.need_matrix()
    work = snapshot.available.copy()

    for pid in order:
        if not np.all(need[pid] <= work):
            return False
        work += snapshot.allocation[pid]

    return True
