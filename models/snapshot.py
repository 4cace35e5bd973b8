"""
Snapshot model for the Banker's Safety Checker.

Holds the complete, immutable system state evaluated by the safety
algorithm: available units plus per-process maximum demand and allocation.
"""

import numpy as np
from typing import List, Sequence
from dataclasses import dataclass

from models.resource import MalformedSnapshot, resource_vector, resource_matrix


@dataclass(frozen=True, eq=False)
class Snapshot:
    """
    Static resource-state snapshot for one safety evaluation.

    Attributes:
        process_count: Number of processes (P)
        resource_type_count: Number of resource types (R)
        available: [R] Free resource instances by type
        max_demand: [P][R] Maximum resource need declared by each process
        allocation: [P][R] Resources currently held by each process

    Invariant:
        0 <= allocation[i][j] <= max_demand[i][j] for every process i and resource j

    All arrays are copied on construction and made read-only, so a snapshot
    can be shared freely between evaluations.
    """
    process_count: int
    resource_type_count: int
    available: np.ndarray
    max_demand: np.ndarray
    allocation: np.ndarray

    def __post_init__(self):
        """Freeze arrays and validate the snapshot."""
        if self.process_count < 0 or self.resource_type_count < 0:
            raise MalformedSnapshot(
                f"Process count ({self.process_count}) and resource type count "
                f"({self.resource_type_count}) must be non-negative"
            )

        available = resource_vector(self.available, "available")
        if len(available) != self.resource_type_count:
            raise MalformedSnapshot(
                f"available: expected {self.resource_type_count} entries, got {len(available)}"
            )

        max_demand = resource_matrix(
            self.max_demand, self.process_count, self.resource_type_count, "max_demand"
        )
        allocation = resource_matrix(
            self.allocation, self.process_count, self.resource_type_count, "allocation"
        )

        # Frozen dataclass: bypass __setattr__ to store the converted arrays
        object.__setattr__(self, 'available', available)
        object.__setattr__(self, 'max_demand', max_demand)
        object.__setattr__(self, 'allocation', allocation)

        self._validate_values()

    @classmethod
    def from_lists(
        cls,
        available: Sequence[int],
        max_demand: Sequence[Sequence[int]],
        allocation: Sequence[Sequence[int]]
    ) -> "Snapshot":
        """
        Build a snapshot from nested lists, inferring P and R.

        Args:
            available: [R] free instances per resource type
            max_demand: [P][R] maximum demand per process
            allocation: [P][R] current allocation per process

        Returns:
            Validated Snapshot
        """
        return cls(
            process_count=len(max_demand),
            resource_type_count=len(available),
            available=available,
            max_demand=max_demand,
            allocation=allocation
        )

    def _validate_values(self) -> None:
        """Check non-negativity, allocation <= max_demand and that work cannot overflow."""
        negative = np.flatnonzero(self.available < 0)
        if len(negative):
            j = negative[0]
            raise MalformedSnapshot(
                f"available[R{j}] is negative ({self.available[j]})"
            )

        for name, matrix in (('max_demand', self.max_demand), ('allocation', self.allocation)):
            negative = np.argwhere(matrix < 0)
            if len(negative):
                i, j = negative[0]
                raise MalformedSnapshot(
                    f"P{i}: {name}[R{j}] is negative ({matrix[i][j]})"
                )

        exceeding = np.argwhere(self.allocation > self.max_demand)
        if len(exceeding):
            i, j = exceeding[0]
            raise MalformedSnapshot(
                f"P{i}: allocation[R{j}] ({self.allocation[i][j]}) "
                f"exceeds max_demand[R{j}] ({self.max_demand[i][j]})"
            )

        # Work ends at available + all allocations and must fit in int64
        int64_max = int(np.iinfo(np.int64).max)
        for j in range(self.resource_type_count):
            total = int(self.available[j]) + sum(int(row[j]) for row in self.allocation)
            if total > int64_max:
                raise MalformedSnapshot(
                    f"R{j}: available plus total allocation ({total}) exceeds the int64 range"
                )

    def need_matrix(self) -> np.ndarray:
        """
        Compute the need matrix [P][R].
        Computed as: Need = Max - Allocation
        Returned fresh on every call; never stored on the snapshot.
        """
        return self.max_demand - self.allocation

    def total_allocated(self) -> np.ndarray:
        """Sum of allocations per resource type [R]."""
        return self.allocation.sum(axis=0)

    def to_dict(self) -> dict:
        """Plain-list form, matching the scenario file layout."""
        return {
            'available': self.available.tolist(),
            'max_demand': self.max_demand.tolist(),
            'allocation': self.allocation.tolist()
        }

    def display(self) -> str:
        """
        Generate readable string representation of the snapshot.

        Returns:
            Formatted string showing all matrices and vectors
        """
        need = self.need_matrix()
        header = "     " + " ".join([f"R{j:2}" for j in range(self.resource_type_count)])

        output: List[str] = []
        output.append("\n" + "="*60)
        output.append("SYSTEM SNAPSHOT")
        output.append("="*60)

        output.append("\nAvailable Resources:")
        output.append(
            "  [" + ", ".join(f"R{j}:{self.available[j]:2}" for j in range(self.resource_type_count)) + "]"
        )

        for title, matrix in (
            ("Max Demand Matrix", self.max_demand),
            ("Allocation Matrix", self.allocation),
            ("Need Matrix (Max - Allocation)", need),
        ):
            output.append(f"\n{title}:")
            output.append(header)
            for i in range(self.process_count):
                row = f"  P{i}: "
                row += " ".join([f"{matrix[i][j]:3}" for j in range(self.resource_type_count)])
                output.append(row)

        output.append("\n" + "="*60)
        return "\n".join(output)
