"""Smoke tests for example scripts.

These tests ensure that the example scripts run their main execution paths
without raising exceptions.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

# Determine the repo root
ROOT = Path(__file__).resolve().parents[1]


def run_example(name: str) -> subprocess.CompletedProcess:
    script = ROOT / "examples" / name
    assert script.exists(), f"Example script not found: {script}"

    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT), env.get("PYTHONPATH")]))
    result = subprocess.run(
        [sys.executable, str(script)],
        capture_output=True,
        text=True,
        check=False,
        timeout=30,
        env=env,
    )

    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )
    return result


@pytest.mark.parametrize(
    "name, expected",
    [
        ("hash_table_demo.py", "Found act -> play (index 4)."),
        ("search_tree_demo.py", "Found 65. Path: 50 -> 70 -> 60 -> 65"),
        ("graph_demo.py", 'BFS from "A": A -> B -> C -> E -> D'),
    ],
)
def test_example_runs(name: str, expected: str) -> None:
    """Test that each example runs and prints its key result."""
    result = run_example(name)
    assert expected in result.stdout, "Expected output message not found in script output"
