"""
Models package for the Banker's Safety Checker.
Contains the resource vector helpers, the immutable Snapshot and the safety verdict types.
"""

from models.resource import MalformedSnapshot, resource_vector, resource_matrix
from models.result import Safe, Unsafe, SafetyResult
from models.snapshot import Snapshot
