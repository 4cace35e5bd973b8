"""
Safety verdict model for the Banker's Safety Checker.

A verdict is a tagged variant: ``Safe`` carries the completion order,
``Unsafe`` carries nothing. A zero-process ``Safe`` (empty order) and an
``Unsafe`` verdict are therefore never confused.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Safe:
    """
    Every process can finish.

    Attributes:
        order: Process indices in the order they were judged completable
    """
    order: Tuple[int, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'order', tuple(int(pid) for pid in self.order))

    @property
    def is_safe(self) -> bool:
        return True

    def __str__(self) -> str:
        seq_str = " -> ".join(f"P{pid}" for pid in self.order)
        return f"SAFE (sequence: {seq_str or 'empty'})"


@dataclass(frozen=True)
class Unsafe:
    """No completion order exists for the snapshot."""

    @property
    def is_safe(self) -> bool:
        return False

    def __str__(self) -> str:
        return "UNSAFE"


SafetyResult = Union[Safe, Unsafe]
