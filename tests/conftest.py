# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so the SdQ_* modules can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def solver():
    from SdQ_Solver import SudokuSolver
    from SdQ_Saturators import NakedSingle, HiddenSingle
    s = SudokuSolver()
    s.addSaturator(NakedSingle())
    s.addSaturator(HiddenSingle())
    return s
