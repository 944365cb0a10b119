# tests/integration/test_example_script.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import runpy
from pathlib import Path

EXAMPLE = Path(__file__).resolve().parents[2] / "examples" / "movement.py"


def test_movement_example_output(capsys):
    runpy.run_path(str(EXAMPLE), run_name="__main__")

    assert capsys.readouterr().out.splitlines() == [
        "Walking now. Transition was: standing -> walking",
        "Running now. Transition was: walking -> running",
        "Standing now. Transition was: running -> standing",
        "Running now. Transition was: standing -> running",
        "Standing now. Transition was: running -> standing",
    ]
