"""
Scenario Loader Tests

Tests loading snapshots from JSON scenario files.
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from models.resource import MalformedSnapshot
from models.result import Safe, Unsafe
from utils.scenario_loader import (
    load_snapshot,
    snapshot_from_dict,
    get_scenario_description,
    ScenarioLoadError,
)
from algorithms.avoidance import evaluate


SCENARIOS_DIR = project_root / "scenarios"


def test_load_reference_scenario():
    """Bundled reference scenario loads and evaluates safe."""
    snapshot = load_snapshot(str(SCENARIOS_DIR / "reference_safe.json"))

    assert snapshot.process_count == 5
    assert snapshot.resource_type_count == 3
    assert evaluate(snapshot) == Safe(order=(1, 3, 4, 0, 2))


def test_load_unsafe_scenarios():
    assert evaluate(load_snapshot(str(SCENARIOS_DIR / "exhausted_unsafe.json"))) == Unsafe()
    assert evaluate(load_snapshot(str(SCENARIOS_DIR / "partial_unsafe.json"))) == Unsafe()


def test_malformed_scenario_raises():
    """Snapshot invariant violations surface as MalformedSnapshot."""
    with pytest.raises(MalformedSnapshot):
        load_snapshot(str(SCENARIOS_DIR / "malformed_allocation.json"))


def test_missing_file():
    with pytest.raises(ScenarioLoadError, match="not found"):
        load_snapshot(str(SCENARIOS_DIR / "does_not_exist.json"))


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{ not json", encoding='utf-8')

    with pytest.raises(ScenarioLoadError, match="Invalid JSON"):
        load_snapshot(str(path))


def test_missing_and_mistyped_fields():
    with pytest.raises(ScenarioLoadError, match="'allocation'"):
        snapshot_from_dict({'available': [1], 'max_demand': [[1]]})

    with pytest.raises(ScenarioLoadError, match="must be a list"):
        snapshot_from_dict({'available': 3, 'max_demand': [[1]], 'allocation': [[0]]})

    with pytest.raises(ScenarioLoadError, match="JSON object"):
        snapshot_from_dict([1, 2, 3])


def test_scenario_description(tmp_path):
    assert "P1 -> P3" in get_scenario_description(str(SCENARIOS_DIR / "reference_safe.json"))

    path = tmp_path / "plain.json"
    path.write_text(json.dumps({'available': [], 'max_demand': [], 'allocation': []}), encoding='utf-8')
    assert get_scenario_description(str(path)) == ''
    assert get_scenario_description(str(tmp_path / "missing.json")) == ''


def test_unreadable_scenarios(tmp_path):
    """Non-UTF-8 files and directories surface as ScenarioLoadError."""
    latin1 = tmp_path / "latin1.json"
    latin1.write_bytes('{"description": "café", "available": []}'.encode('latin-1'))

    with pytest.raises(ScenarioLoadError, match="UTF-8"):
        load_snapshot(str(latin1))
    assert get_scenario_description(str(latin1)) == ''

    with pytest.raises(ScenarioLoadError, match="Cannot read"):
        load_snapshot(str(tmp_path))
    assert get_scenario_description(str(tmp_path)) == ''
