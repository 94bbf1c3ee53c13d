"""Tests for the example driver."""

import runpy
from pathlib import Path

_DEMO = Path(__file__).resolve().parent.parent / "examples" / "demo.py"


def test_demo_output(capsys) -> None:
    """Test the demo swaps, concatenates and prints the expected chains."""
    namespace = runpy.run_path(str(_DEMO))
    namespace["main"]()

    out = capsys.readouterr().out
    assert "The first linked list is    (AAA, BBB, CCC, DDD)" in out
    assert "After swap, the new list is (AAA, BBB, DDD, CCC)" in out
    assert "The second linked list is   (111, 222, 333)" in out
    assert "The combined linked list is (AAA, BBB, DDD, CCC, 111, 222, 333)" in out
    assert "Second list after move:     ()" in out
