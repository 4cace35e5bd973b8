"""
Command-Line Tests

Runs the checker entry point against the bundled scenarios.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bankers_check import main, EXIT_SAFE, EXIT_UNSAFE, EXIT_INVALID


SCENARIOS_DIR = project_root / "scenarios"


def test_default_reference_snapshot(capsys):
    """Without a scenario the built-in reference snapshot is checked."""
    assert main([]) == EXIT_SAFE

    out = capsys.readouterr().out
    assert "System is in a safe state." in out
    assert "P1 -> P3 -> P4 -> P0 -> P2" in out


def test_unsafe_scenario_reports_blocked(capsys):
    code = main(['--scenario', str(SCENARIOS_DIR / "partial_unsafe.json")])

    assert code == EXIT_UNSAFE
    out = capsys.readouterr().out
    assert "NOT in a safe state" in out
    assert "[P0, P2, P4]" in out


def test_invalid_inputs(capsys):
    assert main(['--scenario', str(SCENARIOS_DIR / "missing.json")]) == EXIT_INVALID
    assert main(['--scenario', str(SCENARIOS_DIR / "malformed_allocation.json")]) == EXIT_INVALID

    out = capsys.readouterr().out
    assert "[ERROR] Failed to load scenario" in out
    assert "[ERROR] Malformed snapshot" in out


def test_verbose_and_log_file(tmp_path, capsys):
    """Verbose mode prints each pass; the log file mirrors the output."""
    log_path = tmp_path / "check.log"

    code = main(['--verbose', '--log-file', str(log_path),
                 '--scenario', str(SCENARIOS_DIR / "reference_safe.json")])

    assert code == EXIT_SAFE
    out = capsys.readouterr().out
    assert "[DEBUG] Pass 1" in out
    assert "SYSTEM SNAPSHOT" in out

    logged = log_path.read_text(encoding='utf-8')
    assert logged.startswith("Safety Check Log")
    assert "Safe sequence: P1 -> P3 -> P4 -> P0 -> P2" in logged


def test_unreadable_inputs_exit_invalid(tmp_path, capsys):
    """Undecodable files, directories and unopenable log files all exit with EXIT_INVALID."""
    latin1 = tmp_path / "latin1.json"
    latin1.write_bytes('{"description": "café", "available": [1]}'.encode('latin-1'))

    assert main(['--scenario', str(latin1)]) == EXIT_INVALID
    assert main(['--scenario', str(tmp_path)]) == EXIT_INVALID
    assert main(['--log-file', str(tmp_path / "no_such_dir" / "check.log")]) == EXIT_INVALID

    out = capsys.readouterr().out
    assert out.count("[ERROR] Failed to load scenario") == 2
    assert "[ERROR] Cannot open log file" in out
