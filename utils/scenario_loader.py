"""
Scenario Loader for the Banker's Safety Checker.

Loads JSON scenario files describing a single resource-state snapshot.
"""

import json
from typing import Any, Dict

from models.snapshot import Snapshot


REQUIRED_FIELDS = ('available', 'max_demand', 'allocation')


class ScenarioLoadError(Exception):
    """Exception raised when scenario file cannot be loaded or is invalid."""
    pass


def load_snapshot(file_path: str) -> Snapshot:
    """
    Load a snapshot from a JSON scenario file.

    Expected layout::

        {
            "description": "optional text",
            "available": [3, 3, 2],
            "max_demand": [[7, 5, 3], ...],
            "allocation": [[0, 1, 0], ...]
        }

    Args:
        file_path: Path to scenario JSON file

    Returns:
        Validated Snapshot

    Raises:
        ScenarioLoadError: If file cannot be loaded or a field is missing
        MalformedSnapshot: If the matrices violate the snapshot invariants
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ScenarioLoadError(f"Scenario file not found: {file_path}")
    except json.JSONDecodeError as e:
        raise ScenarioLoadError(f"Invalid JSON in scenario file: {e}")
    except UnicodeDecodeError as e:
        raise ScenarioLoadError(f"Scenario file is not valid UTF-8: {e}")
    except OSError as e:
        raise ScenarioLoadError(f"Cannot read scenario file {file_path}: {e}")

    return snapshot_from_dict(data)


def snapshot_from_dict(data: Dict[str, Any]) -> Snapshot:
    """
    Build a snapshot from already-parsed scenario data.

    Args:
        data: Scenario dictionary

    Returns:
        Validated Snapshot
    """
    if not isinstance(data, dict):
        raise ScenarioLoadError("Scenario must be a JSON object")

    # Validate required fields
    for field in REQUIRED_FIELDS:
        if field not in data:
            raise ScenarioLoadError(f"Scenario missing '{field}' field")
        if not isinstance(data[field], list):
            raise ScenarioLoadError(f"Scenario field '{field}' must be a list")

    return Snapshot.from_lists(
        available=data['available'],
        max_demand=data['max_demand'],
        allocation=data['allocation']
    )


def get_scenario_description(file_path: str) -> str:
    """
    Get description from scenario file without full loading.

    Args:
        file_path: Path to scenario JSON file

    Returns:
        Description string, or empty string if not present
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return ''
    if not isinstance(data, dict):
        return ''
    return data.get('description', '')
