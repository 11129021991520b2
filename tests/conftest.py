import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

INPUT_HEADER = "Region,Location,Name,Frequency,Duplex,Offset,Tone,Mode,Type,Tag,Notes"


@pytest.fixture
def write_input(tmp_path):
    """Write data lines under the spreadsheet header and return the path."""

    def _write(*lines, name="frequencies.csv"):
        path = tmp_path / name
        path.write_text("\n".join((INPUT_HEADER,) + lines) + "\n", encoding="utf-8")
        return path

    return _write
