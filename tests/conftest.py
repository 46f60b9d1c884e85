import sys
from pathlib import Path

import pytest

# Ensure project root is on path for the flat modules
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from config import MachineConfig, build_machine


@pytest.fixture
def machine_factory():
    def _make(**overrides):
        return build_machine(MachineConfig(**overrides))
    return _make
